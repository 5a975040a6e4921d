"""Pick the icon to advertise for a search engine."""

from functools import cmp_to_key
from typing import Iterable, Optional

from opensearch2nix.descriptor.models import Image


def compare_images(a: Image, b: Image) -> int:
    """Order images of the same MIME type by descending area.

    Images of different MIME types compare equal, so a sort using this
    comparator never reorders across types on its own. Callers rely on that
    behaviour; don't turn it into a total order.
    """
    if a.mime_type != b.mime_type:
        return 0
    # Larger area first.
    return b.area - a.area


def select_icon(images: Iterable[Image]) -> Optional[Image]:
    """Return the preferred icon, or ``None`` when there are no images."""
    ranked = sorted(images, key=cmp_to_key(compare_images))
    return ranked[0] if ranked else None
