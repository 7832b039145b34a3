"""CycleGraph analysis facade.

This module provides the CycleAnalyzer class that runs the SCC pre-check
and, when the graph is cyclic, Johnson's enumeration under the configured
settings.
"""

from __future__ import annotations

import logging
import time
from typing import Optional

from cyclegraph.config.schema import AnalysisSettings, GraphConfig
from cyclegraph.core.cycles import enumerate_cycles_with_info
from cyclegraph.core.graph import DiGraph, GraphReader
from cyclegraph.core.results import AnalysisReport, CycleEnumerationResult
from cyclegraph.core.scc import tarjan_scc
from cyclegraph.errors import CycleLimitError

logger = logging.getLogger(__name__)


class CycleAnalyzer:
    """Runs cycle analysis over a graph.

    The SCC pass is linear and always runs. Enumeration is exponential in
    the worst case, so it is skipped for acyclic graphs (unless disabled in
    settings) and always bounded by ``settings.max_cycles``.

    Example:
        ```python
        config = ConfigLoader.load("imports.yaml")
        report = CycleAnalyzer.from_config(config).analyze()
        if report.has_cycles:
            print(report.enumeration.cycles)
        ```
    """

    def __init__(
        self,
        graph: GraphReader,
        settings: Optional[AnalysisSettings] = None,
    ) -> None:
        self._graph = graph
        self._settings = settings or AnalysisSettings()

    @classmethod
    def from_config(cls, config: GraphConfig) -> CycleAnalyzer:
        """Build an analyzer for the graph described by a configuration."""
        return cls(DiGraph.from_config(config), config.settings)

    @property
    def graph(self) -> GraphReader:
        return self._graph

    @property
    def settings(self) -> AnalysisSettings:
        return self._settings

    def analyze(self) -> AnalysisReport:
        """Run the SCC pre-check and, if needed, cycle enumeration.

        Returns:
            AnalysisReport with both results and their timings.

        Raises:
            CycleLimitError: If enumeration reached max_cycles and
                on_truncation is 'fail'.
        """
        settings = self._settings
        logger.debug(
            "Analyzing graph with %d nodes (max_cycles=%d)",
            self._graph.node_count(),
            settings.max_cycles,
        )

        start_time = time.perf_counter()
        scc = tarjan_scc(self._graph)
        scc_seconds = time.perf_counter() - start_time

        if settings.skip_enumeration_if_acyclic and not scc.has_any_cycle:
            logger.debug("Graph is acyclic, skipping enumeration")
            return AnalysisReport(
                scc=scc,
                enumeration=CycleEnumerationResult(cycles=(), count=0, truncated=False),
                skipped_enumeration=True,
                scc_seconds=scc_seconds,
            )

        start_time = time.perf_counter()
        enumeration = enumerate_cycles_with_info(self._graph, settings.max_cycles)
        enumeration_seconds = time.perf_counter() - start_time

        if enumeration.truncated:
            self._handle_truncation(enumeration)

        logger.debug(
            "Found %d cycles in %.3fs (%d cyclic components)",
            enumeration.count,
            enumeration_seconds,
            scc.cycle_count,
        )
        return AnalysisReport(
            scc=scc,
            enumeration=enumeration,
            scc_seconds=scc_seconds,
            enumeration_seconds=enumeration_seconds,
        )

    def _handle_truncation(self, enumeration: CycleEnumerationResult) -> None:
        """Apply the on_truncation policy."""
        policy = self._settings.on_truncation
        max_cycles = self._settings.max_cycles
        if policy == "fail":
            raise CycleLimitError(
                f"Cycle enumeration reached max_cycles={max_cycles}",
                max_cycles=max_cycles,
                count=enumeration.count,
            )
        elif policy == "warn":
            logger.warning(
                "Cycle enumeration truncated: max_cycles=%d count=%d",
                max_cycles,
                enumeration.count,
            )
        # "ignore" returns the partial result silently
