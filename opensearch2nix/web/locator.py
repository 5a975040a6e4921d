"""Find the OpenSearch descriptor link in an HTML page.

Only ``<html>`` -> ``<head>`` -> child is searched, the same place browsers
look for::

    <link rel="search" type="application/opensearchdescription+xml" href="...">
"""

from typing import Iterator, Union

import httpx
import lxml.html
from lxml import etree

from opensearch2nix.errors import (
    DescriptorLinkNotFoundError,
    InvalidDescriptorLinkError,
    MissingAttributeError,
)

LINK_REL = "search"
LINK_TYPE = "application/opensearchdescription+xml"


def parse_html(html: str) -> etree._Element:
    """Build an element tree from page text.

    The text is handed to lxml as UTF-8 bytes with the encoding pinned, so an
    XHTML prolog such as ``<?xml version="1.0" encoding="iso-8859-1"?>`` is
    neither rejected nor obeyed.
    """
    parser = lxml.html.HTMLParser(encoding="utf-8")
    try:
        return lxml.html.document_fromstring(html.encode("utf-8"), parser=parser)
    except etree.LxmlError as exc:
        raise DescriptorLinkNotFoundError(f"webpage could not be parsed: {exc}") from exc


def _child_elements(element: etree._Element) -> Iterator[etree._Element]:
    # Comments and processing instructions have a non-string tag.
    for child in element:
        if isinstance(child.tag, str):
            yield child


def locate_descriptor_url(
    document: etree._Element, base_url: Union[str, httpx.URL]
) -> httpx.URL:
    """Return the absolute descriptor URL advertised by *document*."""
    head = next((c for c in _child_elements(document) if c.tag == "head"), None)
    if head is not None:
        for child in _child_elements(head):
            if child.get("rel") != LINK_REL or child.get("type") != LINK_TYPE:
                continue
            href = child.get("href")
            if href is None:
                raise MissingAttributeError("opensearch link has no 'href' attribute")
            try:
                return httpx.URL(base_url).join(href)
            except httpx.InvalidURL as exc:
                raise InvalidDescriptorLinkError(
                    f"incorrectly formatted opensearch url {href!r}: {exc}"
                ) from exc

    raise DescriptorLinkNotFoundError("failed to locate opensearch link tag in webpage")
