"""CycleGraph result records.

Immutable value records returned by the analysis functions. Each record is
owned by the caller and can be exported as a dict or JSON, optionally with
node indices replaced by the graph's labels.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from cyclegraph.core.graph import DiGraph


def _label(graph: DiGraph, nodes: tuple[int, ...]) -> list[str]:
    return [graph.label_of(n) for n in nodes]


@dataclass(frozen=True)
class SCCResult:
    """Result of a strongly connected components analysis.

    ``has_cycles`` and ``cycle_count`` only consider components with more
    than one node. A self-loop forms a singleton component, so self-looping
    nodes are reported separately in ``self_loops``; use ``has_any_cycle``
    when a self-loop should count as a cycle.
    """

    components: tuple[tuple[int, ...], ...]
    has_cycles: bool
    cycle_count: int
    self_loops: tuple[int, ...] = ()

    @property
    def has_any_cycle(self) -> bool:
        return self.has_cycles or bool(self.self_loops)

    @property
    def cyclic_components(self) -> tuple[tuple[int, ...], ...]:
        """Components with more than one node."""
        return tuple(c for c in self.components if len(c) > 1)

    def to_dict(self) -> dict[str, Any]:
        return {
            "components": [list(c) for c in self.components],
            "has_cycles": self.has_cycles,
            "cycle_count": self.cycle_count,
            "self_loops": list(self.self_loops),
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    def with_labels(self, graph: DiGraph) -> dict[str, Any]:
        data = self.to_dict()
        data["components"] = [_label(graph, c) for c in self.components]
        data["self_loops"] = _label(graph, self.self_loops)
        return data


@dataclass(frozen=True)
class CycleEnumerationResult:
    """Result of elementary cycle enumeration.

    ``truncated`` is True whenever ``count >= max_cycles``, including the
    case where the cap equals the true number of cycles exactly. A cap of
    zero yields an empty, non-truncated result.
    """

    cycles: tuple[tuple[int, ...], ...]
    count: int
    truncated: bool

    @property
    def nodes_in_cycles(self) -> tuple[int, ...]:
        """Sorted indices of every node that appears in a returned cycle."""
        return tuple(sorted({n for cycle in self.cycles for n in cycle}))

    def to_dict(self) -> dict[str, Any]:
        return {
            "cycles": [list(c) for c in self.cycles],
            "truncated": self.truncated,
            "count": self.count,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    def with_labels(self, graph: DiGraph) -> dict[str, Any]:
        data = self.to_dict()
        data["cycles"] = [_label(graph, c) for c in self.cycles]
        return data


@dataclass(frozen=True)
class AnalysisReport:
    """Combined output of CycleAnalyzer.analyze()."""

    scc: SCCResult
    enumeration: CycleEnumerationResult
    skipped_enumeration: bool = False
    scc_seconds: float = 0.0
    enumeration_seconds: float = 0.0

    @property
    def has_cycles(self) -> bool:
        return self.scc.has_any_cycle

    def to_dict(self) -> dict[str, Any]:
        return {
            "scc": self.scc.to_dict(),
            "enumeration": self.enumeration.to_dict(),
            "skipped_enumeration": self.skipped_enumeration,
            "scc_seconds": self.scc_seconds,
            "enumeration_seconds": self.enumeration_seconds,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), default=str)

    def with_labels(self, graph: DiGraph) -> dict[str, Any]:
        data = self.to_dict()
        data["scc"] = self.scc.with_labels(graph)
        data["enumeration"] = self.enumeration.with_labels(graph)
        return data
