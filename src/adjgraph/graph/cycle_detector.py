"""Cycle detection in directed graphs using a recursion-stack set.

Two sets drive the search:
  visited   -- every vertex the DFS has ever entered
  on_stack  -- vertices on the current DFS path (entered, not yet left)

An edge to a vertex that is on_stack is a back edge, which means the
graph has a cycle.  When we find one, we cut the cycle out of the
current path so callers can report exactly which vertices form the
loop.

Undirected graphs store every edge both ways, so any edge at all looks
like a two-vertex cycle here.  Only run this on directed graphs.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Hashable, Iterator, TypeVar

from adjgraph.graph.contract import Graph

T = TypeVar("T", bound=Hashable)


@dataclass(slots=True)
class CycleResult(Generic[T]):
    """Result of cycle detection."""
    has_cycle: bool
    cycle_path: list[T] | None = None


def find_cycle(graph: Graph[T]) -> CycleResult[T]:
    """Look for a directed cycle, starting DFS from each vertex in turn.

    Returns at the first back edge found.  The cycle path is a list
    [v0, v1, ..., vk, v0] where each consecutive pair is an edge.
    """
    visited: set[T] = set()

    for root in graph.vertices():
        if root in visited:
            continue
        visited.add(root)
        path: list[T] = [root]
        on_stack: set[T] = {root}
        iters: list[Iterator[T]] = [iter(graph.get_adjacent(root))]
        while iters:
            for succ in iters[-1]:
                if succ in on_stack:
                    start = path.index(succ)
                    return CycleResult(has_cycle=True, cycle_path=path[start:] + [succ])
                if succ not in visited:
                    visited.add(succ)
                    on_stack.add(succ)
                    path.append(succ)
                    iters.append(iter(graph.get_adjacent(succ)))
                    break
            else:
                iters.pop()
                on_stack.discard(path.pop())

    return CycleResult(has_cycle=False, cycle_path=None)


def has_cycle(graph: Graph[T]) -> bool:
    return find_cycle(graph).has_cycle
