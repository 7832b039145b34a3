"""CycleGraph graph container.

This module provides the read contract consumed by the analysis
algorithms (GraphReader) and DiGraph, a label-indexed adjacency-list
implementation of it.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable

from cyclegraph.errors import GraphError

if TYPE_CHECKING:
    from cyclegraph.config.schema import GraphConfig


@runtime_checkable
class GraphReader(Protocol):
    """Read-only view of a directed graph over dense node indices.

    Nodes are the integers ``0 .. node_count() - 1``. ``successors`` must
    return the same order on repeated calls; cycle ordering in the results
    is a direct function of it.
    """

    def node_count(self) -> int: ...

    def successors(self, node: int) -> Sequence[int]: ...


class DiGraph:
    """Directed graph with string labels mapped to dense indices.

    Indices are allocated in insertion order. Parallel edges are collapsed,
    self-loops are kept. Successors are returned in edge insertion order.

    Example:
        ```python
        graph = DiGraph()
        a = graph.add_node("a")
        b = graph.add_node("b")
        graph.add_edge(a, b)
        graph.add_edge(b, a)
        ```
    """

    def __init__(self) -> None:
        self._labels: list[str] = []
        self._index: dict[str, int] = {}
        self._adjacency: list[list[int]] = []
        self._edge_sets: list[set[int]] = []

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[tuple[str, str]],
        nodes: Optional[Iterable[str]] = None,
    ) -> DiGraph:
        """Build a graph from (source, target) label pairs.

        Nodes listed in ``nodes`` are added first, in order; remaining
        nodes are added as they are first seen in ``edges``.
        """
        graph = cls()
        for label in nodes or ():
            graph.add_node(label)
        for source, target in edges:
            graph.add_edge(graph.add_node(source), graph.add_node(target))
        return graph

    @classmethod
    def from_config(cls, config: GraphConfig) -> DiGraph:
        """Build a graph from a validated GraphConfig."""
        return cls.from_edges(
            ((e.source, e.target) for e in config.graph.edges),
            nodes=(n.id for n in config.graph.nodes),
        )

    def add_node(self, label: str) -> int:
        """Add a node and return its index.

        Adding an existing label returns the existing index.
        """
        existing = self._index.get(label)
        if existing is not None:
            return existing
        index = len(self._labels)
        self._labels.append(label)
        self._index[label] = index
        self._adjacency.append([])
        self._edge_sets.append(set())
        return index

    def add_edge(self, source: int, target: int) -> None:
        """Add a directed edge between two existing node indices.

        Raises:
            GraphError: If either index is out of range.
        """
        self._check(source)
        self._check(target)
        if target in self._edge_sets[source]:
            return
        self._edge_sets[source].add(target)
        self._adjacency[source].append(target)

    def node_count(self) -> int:
        return len(self._labels)

    def successors(self, node: int) -> Sequence[int]:
        self._check(node)
        return tuple(self._adjacency[node])

    def has_edge(self, source: int, target: int) -> bool:
        self._check(source)
        return target in self._edge_sets[source]

    def edge_count(self) -> int:
        return sum(len(targets) for targets in self._adjacency)

    def index_of(self, label: str) -> int:
        """Return the index of a label.

        Raises:
            GraphError: If the label is unknown.
        """
        try:
            return self._index[label]
        except KeyError:
            raise GraphError(f"Unknown node label: {label!r}", node=label) from None

    def label_of(self, node: int) -> str:
        self._check(node)
        return self._labels[node]

    @property
    def labels(self) -> list[str]:
        """Node labels in index order."""
        return list(self._labels)

    def _check(self, node: int) -> None:
        if not 0 <= node < len(self._labels):
            raise GraphError(
                f"Node index {node} out of range [0, {len(self._labels)})",
                node=node,
            )

    def __len__(self) -> int:
        return len(self._labels)

    def __contains__(self, label: object) -> bool:
        return label in self._index

    def __repr__(self) -> str:
        return f"DiGraph(nodes={len(self)}, edges={self.edge_count()})"
