"""Render a ``Descriptor`` as a Nix attribute-set entry.

The output is an entry for a search-engine attrset such as home-manager's
``programs.firefox.profiles.<name>.search.engines``::

    "Example" = {
        urls = [
            { template = "https://example.com/search"; type = "text/html";
              params = [ { name = "q"; value = "{searchTerms}"; } ]; }
        ];
        iconUpdateURL = "https://example.com/favicon.ico";
        description = "Example search";
    };

Strings are written verbatim between double quotes; nothing is escaped.
"""

from typing import List, Optional

from opensearch2nix.descriptor.models import Descriptor, Image, UrlTemplate
from opensearch2nix.errors import NoUrlsDefinedError

INDENT = "    "


def _string(value: str) -> str:
    return f'"{value}"'


def _has_query(url: UrlTemplate) -> bool:
    # ``query`` is empty both for "/s" and "/s?"; ``raw_path`` keeps the "?".
    return bool(url.template.query) or b"?" in url.template.raw_path


def emit_params(url: UrlTemplate) -> Optional[str]:
    """Return the ``params = [ ... ];`` line, or ``None`` without a query.

    A template ending in a bare ``?`` still gets an (empty) ``params`` list.
    """
    if not _has_query(url):
        return None
    entries = [
        f"{{ name = {_string(key)}; value = {_string(value)}; }}"
        for key, value in url.template.params.multi_items()
    ]
    if not entries:
        return "params = [ ];"
    return f"params = [ {' '.join(entries)} ];"


def emit_url(url: UrlTemplate) -> List[str]:
    """Return the lines of one ``urls`` list entry."""
    template = str(url.template.copy_with(query=None))
    first = f"{{ template = {_string(template)}; type = {_string(url.mime_type)};"
    params = emit_params(url)
    if params is None:
        return [first + " }"]
    return [first, f"  {params} }}"]


def emit(descriptor: Descriptor, selected_icon: Optional[Image] = None) -> str:
    """Render *descriptor* keyed by its short name. No trailing newline."""
    if not descriptor.urls:
        raise NoUrlsDefinedError()

    lines = [f"{_string(descriptor.short_name)} = {{", f"{INDENT}urls = ["]
    for url in descriptor.urls:
        lines.extend(f"{INDENT * 2}{line}" for line in emit_url(url))
    lines.append(f"{INDENT}];")
    if selected_icon is not None:
        lines.append(f"{INDENT}iconUpdateURL = {_string(str(selected_icon.url))};")
    lines.append(f"{INDENT}description = {_string(descriptor.description)};")
    lines.append("};")
    return "\n".join(lines)
