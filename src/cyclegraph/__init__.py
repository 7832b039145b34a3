"""CycleGraph - cycle detection and enumeration for directed graphs.

Provides Tarjan's strongly connected components analysis for fast cycle
checks and Johnson's algorithm for capped enumeration of elementary cycles.

Example:
    ```python
    from cyclegraph import DiGraph, enumerate_cycles_with_info, tarjan_scc

    graph = DiGraph.from_edges([("a", "b"), ("b", "c"), ("c", "a")])
    assert tarjan_scc(graph).has_cycles
    result = enumerate_cycles_with_info(graph, max_cycles=100)
    print(result.with_labels(graph))
    ```
"""

from cyclegraph.config.loader import ConfigLoader
from cyclegraph.config.schema import (
    AnalysisSettings,
    EdgeConfig,
    GraphConfig,
    GraphDefinition,
    NodeConfig,
)
from cyclegraph.core.analyzer import CycleAnalyzer
from cyclegraph.core.cycles import (
    enumerate_cycles,
    enumerate_cycles_with_info,
    find_cycles_safe,
)
from cyclegraph.core.graph import DiGraph, GraphReader
from cyclegraph.core.results import AnalysisReport, CycleEnumerationResult, SCCResult
from cyclegraph.core.scc import find_self_loops, has_cycles, tarjan_scc
from cyclegraph.errors import (
    ConfigurationError,
    CycleGraphError,
    CycleLimitError,
    GraphError,
)

__version__ = "0.1.0"

__all__ = [
    # Graph
    "DiGraph",
    "GraphReader",
    # Algorithms
    "tarjan_scc",
    "has_cycles",
    "find_self_loops",
    "enumerate_cycles",
    "enumerate_cycles_with_info",
    "find_cycles_safe",
    # Facade
    "CycleAnalyzer",
    # Results
    "SCCResult",
    "CycleEnumerationResult",
    "AnalysisReport",
    # Configuration
    "ConfigLoader",
    "AnalysisSettings",
    "GraphConfig",
    "GraphDefinition",
    "NodeConfig",
    "EdgeConfig",
    # Errors
    "CycleGraphError",
    "ConfigurationError",
    "GraphError",
    "CycleLimitError",
]
