"""LangGraph wiring for the conversion pipeline.

State flows in a straight line; each step needs the previous one's output:

  fetch_webpage -> locate_descriptor -> fetch_descriptor
                -> parse_descriptor -> select_icon -> emit_nix -> END
"""

from langgraph.graph import END, StateGraph

from opensearch2nix.pipeline.nodes import (
    emit_nix_node,
    fetch_descriptor_node,
    fetch_webpage_node,
    locate_descriptor_node,
    parse_descriptor_node,
    select_icon_node,
)
from opensearch2nix.pipeline.state import PipelineState


def build_graph() -> StateGraph:
    """Construct and compile the pipeline graph.  Returns a runnable."""
    g = StateGraph(PipelineState)

    # -- add nodes ----------------------------------------------------------
    g.add_node("fetch_webpage", fetch_webpage_node)
    g.add_node("locate_descriptor", locate_descriptor_node)
    g.add_node("fetch_descriptor", fetch_descriptor_node)
    g.add_node("parse_descriptor", parse_descriptor_node)
    g.add_node("select_icon", select_icon_node)
    g.add_node("emit_nix", emit_nix_node)

    # -- edges --------------------------------------------------------------
    g.set_entry_point("fetch_webpage")
    g.add_edge("fetch_webpage", "locate_descriptor")
    g.add_edge("locate_descriptor", "fetch_descriptor")
    g.add_edge("fetch_descriptor", "parse_descriptor")
    g.add_edge("parse_descriptor", "select_icon")
    g.add_edge("select_icon", "emit_nix")
    g.add_edge("emit_nix", END)

    return g.compile()


def generate_nix(website_url: str, graph=None) -> str:
    """Run the whole pipeline for *website_url* and return the Nix text."""
    graph = graph or build_graph()
    result = graph.invoke({"website_url": website_url})
    return result["nix"]
