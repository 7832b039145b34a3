"""CycleGraph core module: graph container, algorithms and results."""

from cyclegraph.core.analyzer import CycleAnalyzer
from cyclegraph.core.cycles import (
    enumerate_cycles,
    enumerate_cycles_with_info,
    find_cycles_safe,
)
from cyclegraph.core.graph import DiGraph, GraphReader
from cyclegraph.core.results import AnalysisReport, CycleEnumerationResult, SCCResult
from cyclegraph.core.scc import find_self_loops, has_cycles, tarjan_scc

__all__ = [
    "AnalysisReport",
    "CycleAnalyzer",
    "CycleEnumerationResult",
    "DiGraph",
    "GraphReader",
    "SCCResult",
    "enumerate_cycles",
    "enumerate_cycles_with_info",
    "find_cycles_safe",
    "find_self_loops",
    "has_cycles",
    "tarjan_scc",
]
