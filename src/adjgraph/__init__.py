"""adjgraph: adjacency-list graphs (undirected, directed, weighted).

Re-exports the public types for convenient access:
    from adjgraph import UndirectedGraph, DirectedGraph, WeightedGraph
"""
from adjgraph.graph import (
    INFINITY,
    CycleResult,
    DirectedGraph,
    Edge,
    Graph,
    UndirectedGraph,
    WeightedGraph,
)

__version__ = "0.1.0"

__all__ = [
    "INFINITY",
    "CycleResult",
    "DirectedGraph",
    "Edge",
    "Graph",
    "UndirectedGraph",
    "WeightedGraph",
]
