"""Abstract base for graph variants.

UndirectedGraph, DirectedGraph and WeightedGraph all implement this
interface, so the algorithms in traversal.py, topological.py and
cycle_detector.py only ever talk to a Graph and never to a concrete
variant.

Absent vertices are never an error: queries return False / empty and
mutations quietly do nothing.
"""
from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import Generic, Hashable, Iterator, TextIO, TypeVar

T = TypeVar("T", bound=Hashable)


class Graph(ABC, Generic[T]):
    """Capability set every graph variant provides."""

    # ---- mutation --------------------------------------------------------

    @abstractmethod
    def add_vertex(self, vertex: T) -> None:
        """Add *vertex* if it does not already exist."""
        ...

    @abstractmethod
    def add_edge(self, source: T, destination: T) -> None:
        """Add an edge, creating both endpoints if they are missing."""
        ...

    @abstractmethod
    def remove_vertex(self, vertex: T) -> None:
        """Remove *vertex* and every edge that points at it."""
        ...

    @abstractmethod
    def remove_edge(self, source: T, destination: T) -> None:
        """Remove one occurrence of the edge source -> destination."""
        ...

    # ---- queries ---------------------------------------------------------

    @abstractmethod
    def has_vertex(self, vertex: T) -> bool:
        ...

    @abstractmethod
    def has_edge(self, source: T, destination: T) -> bool:
        ...

    @abstractmethod
    def get_adjacent(self, vertex: T) -> list[T]:
        """Neighbors of *vertex* in insertion order (a copy)."""
        ...

    @abstractmethod
    def get_vertex_count(self) -> int:
        ...

    @abstractmethod
    def get_vertices(self) -> set[T]:
        ...

    @abstractmethod
    def vertices(self) -> Iterator[T]:
        """Vertices in insertion order."""
        ...

    @abstractmethod
    def format_graph(self) -> str:
        """Human-readable adjacency dump, one line per vertex."""
        ...

    # ---- output ----------------------------------------------------------

    def print_graph(self, file: TextIO | None = None) -> None:
        """Write format_graph() to *file* (stdout by default)."""
        text = self.format_graph()
        if text:
            print(text, file=file if file is not None else sys.stdout)

    # ---- dunder ----------------------------------------------------------

    def __contains__(self, vertex: object) -> bool:
        return self.has_vertex(vertex)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return self.get_vertex_count()

    def __iter__(self) -> Iterator[T]:
        return self.vertices()
