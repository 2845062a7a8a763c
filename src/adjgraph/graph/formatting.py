"""Plain-text dumps of a graph's adjacency lists.

These functions only build strings.  Graph.print_graph() is the one
place that actually writes anything, so callers that want the dump in
a log line or a test assertion use format_graph() directly.

Line format:
    Vertex A -> B C
    Vertex A -> B(weight: 2.5) C(weight: 1.0)      (weighted)
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Hashable, Mapping, Sequence, TypeVar

if TYPE_CHECKING:
    from adjgraph.graph.adjacency import Edge

T = TypeVar("T", bound=Hashable)


def format_line(vertex: T, edges: Sequence[Edge[T]], show_weights: bool = False) -> str:
    """Format one vertex and its outgoing edges."""
    if show_weights:
        parts = [f"{e.destination}(weight: {e.weight})" for e in edges]
    else:
        parts = [f"{e.destination}" for e in edges]
    return f"Vertex {vertex} -> " + " ".join(parts)


def format_adjacency(
    adjacency: Mapping[T, Sequence[Edge[T]]], show_weights: bool = False
) -> str:
    """Format every vertex, in mapping order, joined by newlines."""
    return "\n".join(
        format_line(vertex, edges, show_weights)
        for vertex, edges in adjacency.items()
    )
