"""CycleGraph configuration module."""

from cyclegraph.config.loader import ConfigLoader
from cyclegraph.config.schema import (
    AnalysisSettings,
    EdgeConfig,
    GraphConfig,
    GraphDefinition,
    NodeConfig,
)

__all__ = [
    "AnalysisSettings",
    "ConfigLoader",
    "EdgeConfig",
    "GraphConfig",
    "GraphDefinition",
    "NodeConfig",
]
