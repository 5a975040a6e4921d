"""Fold the flat list of raw fields into a ``Descriptor``."""

from typing import Iterable, List, Optional

from opensearch2nix.descriptor.models import (
    Descriptor,
    FieldKind,
    Image,
    RawField,
    UrlTemplate,
)
from opensearch2nix.errors import DuplicateFieldError, NoUrlsDefinedError
from opensearch2nix.utils.logger import get_logger

log = get_logger(__name__)


def normalize(raw_fields: Iterable[RawField]) -> Descriptor:
    """Build a ``Descriptor`` from parsed raw fields.

    ``Url`` and ``Image`` fields are collected in order. ``ShortName`` and
    ``Description`` may each appear at most once and default to ``""``.
    Unrecognised fields are dropped.
    """
    urls: List[UrlTemplate] = []
    images: List[Image] = []
    short_name: Optional[str] = None
    description: Optional[str] = None
    skipped = 0

    for raw in raw_fields:
        if raw.kind is FieldKind.URL:
            urls.append(raw.value)
        elif raw.kind is FieldKind.IMAGE:
            images.append(raw.value)
        elif raw.kind is FieldKind.SHORT_NAME:
            if short_name is not None:
                raise DuplicateFieldError(FieldKind.SHORT_NAME.value)
            short_name = raw.value
        elif raw.kind is FieldKind.DESCRIPTION:
            if description is not None:
                raise DuplicateFieldError(FieldKind.DESCRIPTION.value)
            description = raw.value
        else:
            skipped += 1

    if not urls:
        raise NoUrlsDefinedError()

    log.debug(
        "Normalized descriptor: %d url(s), %d image(s), %d ignored element(s)",
        len(urls), len(images), skipped,
    )
    return Descriptor(
        short_name=short_name or "",
        description=description or "",
        images=tuple(images),
        urls=tuple(urls),
    )
