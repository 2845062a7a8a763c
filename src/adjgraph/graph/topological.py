"""Topological sort via DFS post-order (reverse finishing order).

The algorithm:
  1.  Walk vertices in insertion order.  Start a DFS from every vertex
      not yet visited.
  2.  A vertex "finishes" once all of its unvisited successors have
      finished.  Push it onto the finishing stack at that point.
  3.  Pop the whole stack: the last vertex to finish comes first.

On a DAG every edge u -> v puts u before v.  There is no cycle check:
on a cyclic graph the sort still terminates and lists every vertex
exactly once, but some edge on each cycle will point backwards.  Use
has_cycle() first if the input might not be a DAG.

The DFS keeps an explicit stack of successor iterators instead of
recursing, so a 100k-vertex chain is fine.
"""
from __future__ import annotations

import logging
from typing import Hashable, Iterator, TypeVar

from adjgraph.graph.contract import Graph

T = TypeVar("T", bound=Hashable)

log = logging.getLogger(__name__)


def topological_sort(graph: Graph[T]) -> list[T]:
    """Return vertices so that, on a DAG, sources precede their successors."""
    visited: set[T] = set()
    finished: list[T] = []

    for root in graph.vertices():
        if root in visited:
            continue
        visited.add(root)
        stack: list[tuple[T, Iterator[T]]] = [(root, iter(graph.get_adjacent(root)))]
        while stack:
            vertex, successors = stack[-1]
            for succ in successors:
                if succ not in visited:
                    visited.add(succ)
                    stack.append((succ, iter(graph.get_adjacent(succ))))
                    break
            else:
                stack.pop()
                finished.append(vertex)

    finished.reverse()
    log.debug("topological_sort: ordered %d vertices", len(finished))
    return finished
