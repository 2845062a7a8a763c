"""Breadth-first, depth-first and unit-cost shortest-path traversals.

All three start from a single source vertex and return an empty result
when that vertex is not in the graph.

shortest_path() is Dijkstra's loop (min-heap frontier, relax, re-push)
but every edge costs 1, whatever weight it stores.  On an unweighted
graph that is exactly BFS distance.  Weighted relaxation is not
implemented here.
"""
from __future__ import annotations

import heapq
import itertools
import logging
import math
from collections import deque
from typing import Hashable, TypeVar

from adjgraph.graph.contract import Graph

T = TypeVar("T", bound=Hashable)

INFINITY = math.inf

log = logging.getLogger(__name__)


def bfs(graph: Graph[T], source: T) -> list[T]:
    """Vertices reachable from *source* in level order, source first."""
    if not graph.has_vertex(source):
        log.debug("bfs: source %r not in graph", source)
        return []

    visited: set[T] = {source}
    q: deque[T] = deque([source])
    order: list[T] = []
    while q:
        vertex = q.popleft()
        order.append(vertex)
        for neighbor in graph.get_adjacent(vertex):
            if neighbor not in visited:
                # mark on enqueue so a vertex never sits in the queue twice
                visited.add(neighbor)
                q.append(neighbor)
    return order


def dfs(graph: Graph[T], source: T) -> list[T]:
    """Vertices reachable from *source* in depth-first pre-order.

    Produces the same order as the textbook recursive version (visit,
    then recurse into each unvisited neighbor in adjacency order), but
    keeps a stack of neighbor iterators so deep graphs can't overflow
    the interpreter's recursion limit.
    """
    if not graph.has_vertex(source):
        log.debug("dfs: source %r not in graph", source)
        return []

    visited: set[T] = {source}
    order: list[T] = [source]
    stack = [iter(graph.get_adjacent(source))]
    while stack:
        for neighbor in stack[-1]:
            if neighbor not in visited:
                visited.add(neighbor)
                order.append(neighbor)
                stack.append(iter(graph.get_adjacent(neighbor)))
                break
        else:
            stack.pop()
    return order


def shortest_path(graph: Graph[T], source: T) -> dict[T, float]:
    """Hop distance from *source* to every vertex in the graph.

    Unreachable vertices map to INFINITY.  Returns {} if *source* is
    not in the graph.
    """
    if not graph.has_vertex(source):
        log.debug("shortest_path: source %r not in graph", source)
        return {}

    dist: dict[T, float] = {v: INFINITY for v in graph.vertices()}
    dist[source] = 0
    visited: set[T] = set()
    # the counter breaks ties so vertices never have to be comparable
    tie = itertools.count()
    heap: list[tuple[float, int, T]] = [(0, next(tie), source)]

    while heap:
        d, _, vertex = heapq.heappop(heap)
        if vertex in visited or d > dist[vertex]:
            continue  # stale entry
        visited.add(vertex)
        for neighbor in graph.get_adjacent(vertex):
            if neighbor in visited:
                continue
            new_dist = dist[vertex] + 1
            if new_dist < dist[neighbor]:
                dist[neighbor] = new_dist
                heapq.heappush(heap, (new_dist, next(tie), neighbor))

    log.debug(
        "shortest_path from %r: %d of %d vertices reachable",
        source, len(visited), len(dist),
    )
    return dist
