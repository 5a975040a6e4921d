"""Descriptor module -- model, XML parsing, normalization, icon choice."""

from opensearch2nix.descriptor.icons import compare_images, select_icon
from opensearch2nix.descriptor.models import (
    Descriptor,
    FieldKind,
    Image,
    RawField,
    UrlTemplate,
)
from opensearch2nix.descriptor.normalizer import normalize
from opensearch2nix.descriptor.parser import parse_descriptor

__all__ = [
    "Descriptor",
    "FieldKind",
    "Image",
    "RawField",
    "UrlTemplate",
    "compare_images",
    "normalize",
    "parse_descriptor",
    "select_icon",
]
