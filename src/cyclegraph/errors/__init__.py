"""CycleGraph error module.

Exports the exception hierarchy for use throughout the package.
"""

from cyclegraph.errors.exceptions import (
    ConfigurationError,
    CycleGraphError,
    CycleLimitError,
    GraphError,
)

__all__ = [
    "CycleGraphError",
    "ConfigurationError",
    "GraphError",
    "CycleLimitError",
]
