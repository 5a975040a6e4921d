"""Node implementations for the conversion graph.

Each function receives the full ``PipelineState`` and returns a *partial*
dict with only the keys it updates. Nodes raise ``OpenSearchError``
subclasses; nothing is caught here.
"""

from typing import Any, Dict

from opensearch2nix.descriptor.icons import select_icon
from opensearch2nix.descriptor.normalizer import normalize
from opensearch2nix.descriptor.parser import parse_descriptor
from opensearch2nix.nix.emitter import emit
from opensearch2nix.pipeline.state import PipelineState
from opensearch2nix.utils.logger import get_logger
from opensearch2nix.web.fetcher import fetch_page
from opensearch2nix.web.locator import locate_descriptor_url, parse_html

log = get_logger(__name__)


def fetch_webpage_node(state: PipelineState) -> Dict[str, Any]:
    """Download the website's HTML."""
    log.info("Fetching HTML page: %s", state["website_url"])
    return {"webpage": fetch_page(state["website_url"])}


def locate_descriptor_node(state: PipelineState) -> Dict[str, Any]:
    """Find the descriptor link in the page and resolve it."""
    log.info("Received webpage; parsing...")
    document = parse_html(state["webpage"] or "")
    url = locate_descriptor_url(document, state["website_url"])
    log.info("Found opensearch url: %s", url)
    return {"descriptor_url": str(url)}


def fetch_descriptor_node(state: PipelineState) -> Dict[str, Any]:
    """Download the descriptor XML."""
    return {"descriptor_xml": fetch_page(state["descriptor_url"])}


def parse_descriptor_node(state: PipelineState) -> Dict[str, Any]:
    """Parse the descriptor XML and normalize it."""
    log.info("Received opensearch file; parsing...")
    return {"descriptor": normalize(parse_descriptor(state["descriptor_xml"] or ""))}


def select_icon_node(state: PipelineState) -> Dict[str, Any]:
    """Pick the icon advertised in the output, if any."""
    icon = select_icon(state["descriptor"].images)
    if icon is not None:
        log.debug("Selected icon %s (%s)", icon.url, icon.mime_type)
    return {"icon": icon}


def emit_nix_node(state: PipelineState) -> Dict[str, Any]:
    """Render the final Nix text."""
    log.info("Serializing into Nix...")
    return {"nix": emit(state["descriptor"], state.get("icon"))}
