"""Adjacency-list graphs and the algorithms that run on them."""

from adjgraph.graph.adjacency import AdjacencyGraph, Edge
from adjgraph.graph.contract import Graph
from adjgraph.graph.cycle_detector import CycleResult, find_cycle, has_cycle
from adjgraph.graph.directed import DirectedGraph, in_degree
from adjgraph.graph.formatting import format_adjacency, format_line
from adjgraph.graph.topological import topological_sort
from adjgraph.graph.traversal import INFINITY, bfs, dfs, shortest_path
from adjgraph.graph.undirected import UndirectedGraph
from adjgraph.graph.weighted import WeightedGraph

__all__ = [
    "INFINITY",
    "AdjacencyGraph",
    "CycleResult",
    "DirectedGraph",
    "Edge",
    "Graph",
    "UndirectedGraph",
    "WeightedGraph",
    "bfs",
    "dfs",
    "find_cycle",
    "format_adjacency",
    "format_line",
    "has_cycle",
    "in_degree",
    "shortest_path",
    "topological_sort",
]
