"""Pytest fixtures for CycleGraph tests."""

import pytest

from cyclegraph import DiGraph


def _make_graph(n: int, edges: list[tuple[int, int]]) -> DiGraph:
    """Build a DiGraph with nodes n0..n{n-1} and the given index edges."""
    graph = DiGraph()
    for i in range(n):
        graph.add_node(f"n{i}")
    for source, target in edges:
        graph.add_edge(source, target)
    return graph


class ListGraph:
    """Minimal GraphReader backed by a list of successor lists."""

    def __init__(self, adjacency: list[list[int]]) -> None:
        self.adjacency = adjacency

    def node_count(self) -> int:
        return len(self.adjacency)

    def successors(self, node: int) -> list[int]:
        return self.adjacency[node]


@pytest.fixture
def empty_graph() -> DiGraph:
    """Graph with no nodes."""
    return DiGraph()


@pytest.fixture
def ring_graph() -> DiGraph:
    """a -> b -> c -> a"""
    return DiGraph.from_edges([("a", "b"), ("b", "c"), ("c", "a")])


@pytest.fixture
def chain_graph() -> DiGraph:
    """a -> b -> c"""
    return DiGraph.from_edges([("a", "b"), ("b", "c")])


@pytest.fixture
def two_rings_graph() -> DiGraph:
    """a <-> b and c <-> d"""
    return DiGraph.from_edges([("a", "b"), ("b", "a"), ("c", "d"), ("d", "c")])


@pytest.fixture
def diamond_graph() -> DiGraph:
    """a -> b -> d, a -> c -> d, d -> a"""
    return DiGraph.from_edges(
        [("a", "b"), ("a", "c"), ("b", "d"), ("c", "d"), ("d", "a")]
    )


@pytest.fixture
def bidirected_square() -> DiGraph:
    """a <-> b <-> c <-> d <-> a: four 2-cycles and two 4-cycles."""
    return DiGraph.from_edges(
        [
            ("a", "b"),
            ("b", "a"),
            ("b", "c"),
            ("c", "b"),
            ("c", "d"),
            ("d", "c"),
            ("d", "a"),
            ("a", "d"),
        ]
    )


@pytest.fixture
def self_loop_graph() -> DiGraph:
    """Single node with an edge to itself."""
    graph = DiGraph()
    a = graph.add_node("a")
    graph.add_edge(a, a)
    return graph


@pytest.fixture
def graph_yaml() -> str:
    """Graph configuration YAML for testing."""
    return """
name: "Module imports"
version: "1.0"
description: "Import graph of a small package"

graph:
  settings:
    max_cycles: 50
    on_truncation: warn
  nodes:
    - id: core
      description: "Core algorithms"
    - config
    - errors
  edges:
    - {source: core, target: config}
    - {source: config, target: core}
    - {source: core, target: errors}
"""


@pytest.fixture
def make_graph():
    """Factory building a DiGraph from a node count and index edges."""
    return _make_graph


@pytest.fixture
def list_graph():
    """The ListGraph class, a GraphReader that is not a DiGraph."""
    return ListGraph
