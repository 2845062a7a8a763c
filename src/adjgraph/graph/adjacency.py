"""Shared adjacency-list core for all graph variants.

The graph stores vertices of any hashable type T.  Internally it is a
dict[T, list[Edge[T]]] where keys are source vertices and values are
the outgoing edges in insertion order.  Every edge carries a weight;
the unweighted variants always store 1.0 and never show it.

The only thing that differs between undirected and directed storage is
whether add_edge / remove_edge also touch the reverse direction, so a
single class handles both with a ``symmetric`` flag.

Duplicate edges are kept.  Calling add_edge(A, B) twice gives A two
entries for B, and remove_edge(A, B) takes away one of them.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Generic, Hashable, Iterator, TypeVar

from adjgraph.graph.contract import Graph
from adjgraph.graph.formatting import format_adjacency

T = TypeVar("T", bound=Hashable)

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Edge(Generic[T]):
    """One adjacency record: where the edge goes and what it costs."""
    destination: T
    weight: float = 1.0


class AdjacencyGraph(Graph[T]):
    """Adjacency-list graph, directed or symmetric.

    Args:
        symmetric: if True every edge is stored in both directions.
    """

    __slots__ = ("_adj", "_symmetric")

    # subclasses that care about weights flip this for format_graph()
    show_weights = False

    def __init__(self, symmetric: bool = False) -> None:
        self._adj: dict[T, list[Edge[T]]] = {}
        self._symmetric = symmetric

    @property
    def symmetric(self) -> bool:
        return self._symmetric

    # ---- mutation --------------------------------------------------------

    def add_vertex(self, vertex: T) -> None:
        if vertex not in self._adj:
            self._adj[vertex] = []

    def add_edge(self, source: T, destination: T) -> None:
        self._add_edge(source, destination, 1.0)

    def _add_edge(self, source: T, destination: T, weight: float) -> None:
        self.add_vertex(source)
        self.add_vertex(destination)
        self._adj[source].append(Edge(destination, weight))
        if self._symmetric:
            self._adj[destination].append(Edge(source, weight))

    def remove_vertex(self, vertex: T) -> None:
        if vertex not in self._adj:
            log.debug("remove_vertex: %r not in graph", vertex)
            return
        del self._adj[vertex]
        for edges in self._adj.values():
            edges[:] = [e for e in edges if e.destination != vertex]

    def remove_edge(self, source: T, destination: T) -> None:
        if source not in self._adj or destination not in self._adj:
            log.debug("remove_edge: %r -> %r has a missing endpoint", source, destination)
            return
        if not _remove_first(self._adj[source], destination):
            log.debug("remove_edge: no edge %r -> %r", source, destination)
            return
        if self._symmetric:
            _remove_first(self._adj[destination], source)

    # ---- queries ---------------------------------------------------------

    def has_vertex(self, vertex: T) -> bool:
        return vertex in self._adj

    def has_edge(self, source: T, destination: T) -> bool:
        edges = self._adj.get(source)
        if edges is None:
            return False
        return any(e.destination == destination for e in edges)

    def get_adjacent(self, vertex: T) -> list[T]:
        return [e.destination for e in self._adj.get(vertex, [])]

    def get_edges(self, vertex: T) -> list[Edge[T]]:
        """Outgoing edge records of *vertex* (a copy)."""
        return list(self._adj.get(vertex, []))

    def get_vertex_count(self) -> int:
        return len(self._adj)

    def get_vertices(self) -> set[T]:
        return set(self._adj)

    def vertices(self) -> Iterator[T]:
        return iter(list(self._adj))

    def edges(self) -> Iterator[tuple[T, T]]:
        """Every stored (source, destination) record.

        Symmetric graphs store each edge twice, so both orientations
        come out.
        """
        for src, edges in self._adj.items():
            for e in edges:
                yield src, e.destination

    def out_degree(self, vertex: T) -> int:
        return len(self._adj.get(vertex, []))

    @property
    def edge_count(self) -> int:
        """Number of edges added and not yet removed.

        A symmetric self loop is stored twice but counts once.
        """
        total = sum(len(edges) for edges in self._adj.values())
        if not self._symmetric:
            return total
        loops = sum(
            1 for src, edges in self._adj.items()
            for e in edges if e.destination == src
        )
        return (total - loops) // 2 + loops // 2

    def format_graph(self) -> str:
        return format_adjacency(self._adj, show_weights=self.show_weights)

    # ---- dunder ----------------------------------------------------------

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(vertices={self.get_vertex_count()}, "
            f"edges={self.edge_count})"
        )


def _remove_first(edges: list[Edge[T]], destination: T) -> bool:
    """Drop the first edge to *destination*.  Returns False if none."""
    for i, e in enumerate(edges):
        if e.destination == destination:
            del edges[i]
            return True
    return False
