"""Descriptor value objects and the raw tagged fields the parser produces."""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Tuple

import httpx

# type "/" subtype, then optional ";" parameters.
_MIME_RE = re.compile(
    r"^(?P<essence>[A-Za-z0-9!#$&^_.+-]+/[A-Za-z0-9!#$&^_.+-]+)"
    r"(?P<params>(?:\s*;\s*[A-Za-z0-9!#$&^_.+-]+=(?:[^;\s\"]+|\"[^\"]*\"))*)\s*;?$"
)

U16_MAX = 0xFFFF


def normalize_mime_type(value: str) -> str:
    """Validate a MIME type and lower-case its ``type/subtype`` part.

    Parameters are kept as written. Raises ``ValueError`` if *value* does
    not parse.
    """
    match = _MIME_RE.match(value.strip())
    if match is None:
        raise ValueError(f"invalid MIME type: {value!r}")
    return match.group("essence").lower() + match.group("params")


def parse_absolute_url(value: str) -> httpx.URL:
    """Parse *value* as an absolute URL, raising ``ValueError`` otherwise."""
    try:
        url = httpx.URL(value.strip())
    except httpx.InvalidURL as exc:
        raise ValueError(f"invalid URL {value!r}: {exc}") from exc
    if not url.is_absolute_url:
        raise ValueError(f"URL is not absolute: {value!r}")
    return url


@dataclass(frozen=True)
class UrlTemplate:
    """One ``<Url>`` element: a MIME type and a search URL template."""

    mime_type: str
    template: httpx.URL


@dataclass(frozen=True)
class Image:
    """One ``<Image>`` element."""

    mime_type: str
    width: Optional[int]
    height: Optional[int]
    url: httpx.URL

    @property
    def area(self) -> int:
        return (self.width or 0) * (self.height or 0)


@dataclass(frozen=True)
class Descriptor:
    """A validated OpenSearch description. Build it with ``normalize``."""

    short_name: str = ""
    description: str = ""
    images: Tuple[Image, ...] = field(default_factory=tuple)
    urls: Tuple[UrlTemplate, ...] = field(default_factory=tuple)


class FieldKind(Enum):
    """Which descriptor field a child element of the root stands for."""

    SHORT_NAME = "ShortName"
    DESCRIPTION = "Description"
    IMAGE = "Image"
    URL = "Url"
    OTHER = "Other"


@dataclass(frozen=True)
class RawField:
    """A single child element of ``<OpenSearchDescription>``, tagged by kind."""

    kind: FieldKind
    value: Any = None
