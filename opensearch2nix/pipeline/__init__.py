"""Pipeline module -- LangGraph state machine from website URL to Nix text."""

from opensearch2nix.pipeline.graph import build_graph, generate_nix
from opensearch2nix.pipeline.state import PipelineState

__all__ = ["build_graph", "generate_nix", "PipelineState"]
