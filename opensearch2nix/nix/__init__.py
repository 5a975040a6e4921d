"""Nix module -- descriptor to Nix literal rendering."""

from opensearch2nix.nix.emitter import emit

__all__ = ["emit"]
