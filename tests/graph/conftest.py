"""Shared fixtures for graph tests."""
from __future__ import annotations

import pytest

from adjgraph.graph.directed import DirectedGraph
from adjgraph.graph.undirected import UndirectedGraph
from adjgraph.graph.weighted import WeightedGraph


@pytest.fixture
def triangle() -> UndirectedGraph[int]:
    """1 - 2 - 3 - 1"""
    g: UndirectedGraph[int] = UndirectedGraph()
    for u, v in [(1, 2), (2, 3), (1, 3)]:
        g.add_edge(u, v)
    return g


@pytest.fixture
def tree() -> UndirectedGraph[str]:
    """
        A
       / \\
      B   C
     / \\   \\
    D   E   F
    """
    g: UndirectedGraph[str] = UndirectedGraph()
    for u, v in [("A", "B"), ("A", "C"), ("B", "D"), ("B", "E"), ("C", "F")]:
        g.add_edge(u, v)
    return g


@pytest.fixture
def chain() -> DirectedGraph[str]:
    """A -> B -> C"""
    g: DirectedGraph[str] = DirectedGraph()
    g.add_edge("A", "B")
    g.add_edge("B", "C")
    return g


@pytest.fixture
def diamond() -> DirectedGraph[str]:
    """
    A -> B -> D
    A -> C -> D
    """
    g: DirectedGraph[str] = DirectedGraph()
    for u, v in [("A", "B"), ("A", "C"), ("B", "D"), ("C", "D")]:
        g.add_edge(u, v)
    return g


@pytest.fixture
def roads() -> WeightedGraph[str]:
    g: WeightedGraph[str] = WeightedGraph()
    g.add_edge("home", "work", 12.5)
    g.add_edge("home", "gym", 3.0)
    g.add_edge("gym", "work", 10.0)
    return g
