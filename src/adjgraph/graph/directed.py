"""Directed graph with topological sort, cycle detection and in-degree."""
from __future__ import annotations

from typing import Hashable, TypeVar

from adjgraph.graph.adjacency import AdjacencyGraph
from adjgraph.graph.contract import Graph
from adjgraph.graph.cycle_detector import CycleResult, find_cycle
from adjgraph.graph.topological import topological_sort

T = TypeVar("T", bound=Hashable)


def in_degree(graph: Graph[T], vertex: T) -> int:
    """Number of edges ending at *vertex*, duplicates included.

    Nothing tracks predecessors, so this scans every adjacency list:
    O(V + E) on each call.  Returns 0 for a vertex not in the graph.
    """
    return sum(
        graph.get_adjacent(v).count(vertex) for v in graph.vertices()
    )


class DirectedGraph(AdjacencyGraph[T]):
    """One-way adjacency-list graph: add_edge(u, v) only records u -> v."""

    __slots__ = ()

    def __init__(self) -> None:
        super().__init__(symmetric=False)

    def topological_sort(self) -> list[T]:
        """Reverse DFS finishing order.  Only meaningful on a DAG."""
        return topological_sort(self)

    def has_cycle(self) -> bool:
        return find_cycle(self).has_cycle

    def find_cycle(self) -> CycleResult[T]:
        return find_cycle(self)

    def get_in_degree(self, vertex: T) -> int:
        return in_degree(self, vertex)
