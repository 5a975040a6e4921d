"""Pipeline state schema -- the single TypedDict that flows through every node."""

from typing import Optional, TypedDict

from opensearch2nix.descriptor.models import Descriptor, Image


class PipelineState(TypedDict, total=False):
    """State carried across the conversion graph.

    Every node receives the full state and returns a *partial* dict with only
    the keys it wants to update.
    """

    # Input
    website_url: str

    # Webpage
    webpage: Optional[str]
    descriptor_url: Optional[str]

    # Descriptor
    descriptor_xml: Optional[str]
    descriptor: Optional[Descriptor]
    icon: Optional[Image]

    # Output
    nix: Optional[str]
