"""Undirected graph: every edge is stored in both directions."""
from __future__ import annotations

from typing import Hashable, TypeVar

from adjgraph.graph.adjacency import AdjacencyGraph
from adjgraph.graph.traversal import bfs, dfs, shortest_path

T = TypeVar("T", bound=Hashable)


class UndirectedGraph(AdjacencyGraph[T]):
    """Symmetric adjacency-list graph with BFS, DFS and hop distances.

    add_edge(u, v) appends v to u's list and u to v's list;
    remove_edge(u, v) takes one of each away again.
    """

    __slots__ = ()

    def __init__(self) -> None:
        super().__init__(symmetric=True)

    def bfs(self, source: T) -> list[T]:
        return bfs(self, source)

    def dfs(self, source: T) -> list[T]:
        return dfs(self, source)

    def shortest_path(self, source: T) -> dict[T, float]:
        """Hop distances from *source*; unreachable vertices are INFINITY."""
        return shortest_path(self, source)
