"""Parse OpenSearch description XML into a flat list of ``RawField``.

Descriptors list their elements in any order, so the parser does not build
a ``Descriptor`` itself; it tags every child of the root and leaves the
cardinality rules to :func:`opensearch2nix.descriptor.normalizer.normalize`.
Namespaces are ignored: ``<ShortName>`` and ``<os:ShortName>`` are the same
element.
"""

from typing import Callable, Dict, List, Optional
from xml.etree.ElementTree import Element, ParseError

from defusedxml import DefusedXmlException
from defusedxml import ElementTree as ET

from opensearch2nix.descriptor.models import (
    U16_MAX,
    FieldKind,
    Image,
    RawField,
    UrlTemplate,
    normalize_mime_type,
    parse_absolute_url,
)
from opensearch2nix.errors import MalformedDescriptorError
from opensearch2nix.utils.logger import get_logger

log = get_logger(__name__)

ROOT_ELEMENT = "OpenSearchDescription"


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _text(element: Element) -> str:
    return (element.text or "").strip()


def _required_attr(element: Element, name: str) -> str:
    value = element.get(name)
    if value is None:
        raise MalformedDescriptorError(
            f"<{_local_name(element.tag)}> is missing the '{name}' attribute"
        )
    return value


def _mime_attr(element: Element) -> str:
    try:
        return normalize_mime_type(_required_attr(element, "type"))
    except ValueError as exc:
        raise MalformedDescriptorError(f"<{_local_name(element.tag)}>: {exc}") from exc


def _dimension(element: Element, name: str) -> Optional[int]:
    raw = element.get(name)
    if raw is None:
        return None
    # Plain ASCII digits only: no sign, whitespace or underscores.
    if not (raw.isascii() and raw.isdigit()):
        raise MalformedDescriptorError(f"<Image> {name} is not an integer: {raw!r}")
    value = int(raw)
    if not 0 <= value <= U16_MAX:
        raise MalformedDescriptorError(f"<Image> {name} out of range: {value}")
    return value


def _parse_image(element: Element) -> Image:
    mime_type = _mime_attr(element)
    try:
        url = parse_absolute_url(_text(element))
    except ValueError as exc:
        raise MalformedDescriptorError(f"<Image>: {exc}") from exc
    return Image(
        mime_type=mime_type,
        width=_dimension(element, "width"),
        height=_dimension(element, "height"),
        url=url,
    )


def _parse_url(element: Element) -> UrlTemplate:
    mime_type = _mime_attr(element)
    try:
        template = parse_absolute_url(_required_attr(element, "template"))
    except ValueError as exc:
        raise MalformedDescriptorError(f"<Url>: {exc}") from exc
    return UrlTemplate(mime_type=mime_type, template=template)


_FIELD_PARSERS: Dict[str, Callable[[Element], RawField]] = {
    "ShortName": lambda el: RawField(FieldKind.SHORT_NAME, _text(el)),
    "Description": lambda el: RawField(FieldKind.DESCRIPTION, _text(el)),
    "Image": lambda el: RawField(FieldKind.IMAGE, _parse_image(el)),
    "Url": lambda el: RawField(FieldKind.URL, _parse_url(el)),
}


def parse_descriptor(xml_text: str) -> List[RawField]:
    """Parse descriptor XML, one ``RawField`` per child of the root element."""
    try:
        root = ET.fromstring(xml_text)
    except (ParseError, DefusedXmlException) as exc:
        log.debug("Descriptor XML rejected: %s", exc)
        raise MalformedDescriptorError(f"failed to parse opensearch XML: {exc}") from exc

    root_name = _local_name(root.tag)
    if root_name != ROOT_ELEMENT:
        raise MalformedDescriptorError(
            f"expected <{ROOT_ELEMENT}> root element, found <{root_name}>"
        )

    fields: List[RawField] = []
    for child in root:
        parse_field = _FIELD_PARSERS.get(_local_name(child.tag))
        if parse_field is None:
            fields.append(RawField(FieldKind.OTHER))
        else:
            fields.append(parse_field(child))
    return fields
