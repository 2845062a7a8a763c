"""Weighted directed graph.

Each adjacency record is an Edge(destination, weight).  Weights are
plain floats and are not validated, so negative costs go in as-is.
Anything that consumes them has to decide whether it can cope.

Removal and membership only look at the destination.  remove_edge(A, B)
drops the first A -> B edge whatever its weight.
"""
from __future__ import annotations

from typing import Hashable, Iterator, TypeVar

from adjgraph.graph.adjacency import AdjacencyGraph

T = TypeVar("T", bound=Hashable)


class WeightedGraph(AdjacencyGraph[T]):
    """Directed graph whose edges carry a float cost (default 1.0)."""

    __slots__ = ()

    show_weights = True

    def __init__(self) -> None:
        super().__init__(symmetric=False)

    def add_edge(self, source: T, destination: T, weight: float = 1.0) -> None:
        self._add_edge(source, destination, float(weight))

    def get_weight(self, source: T, destination: T) -> float | None:
        """Weight of the first source -> destination edge, or None."""
        for e in self._adj.get(source, []):
            if e.destination == destination:
                return e.weight
        return None

    def weighted_edges(self) -> Iterator[tuple[T, T, float]]:
        """Every (source, destination, weight) triple in insertion order."""
        for src, edges in self._adj.items():
            for e in edges:
                yield src, e.destination, e.weight
