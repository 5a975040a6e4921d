"""Web module -- page fetching, descriptor link discovery."""

from opensearch2nix.web.fetcher import fetch_page
from opensearch2nix.web.locator import locate_descriptor_url, parse_html

__all__ = ["fetch_page", "locate_descriptor_url", "parse_html"]
