"""Turn a website's OpenSearch descriptor into a Nix search-engine entry."""

__version__ = "0.1.0"
