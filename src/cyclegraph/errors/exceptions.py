"""CycleGraph exception hierarchy.

The analysis algorithms are total and never raise; these exceptions cover
the layers around them (configuration loading, the graph container and
the analysis facade).
"""

from __future__ import annotations

from typing import Any, Optional


class CycleGraphError(Exception):
    """Base class for all CycleGraph errors.

    Attributes:
        message: Human-readable error message
        details: Optional list of additional detail lines
    """

    def __init__(self, message: str, details: Optional[list[str]] = None) -> None:
        self.message = message
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        lines = "\n".join(f"  - {d}" for d in self.details)
        return f"{self.message}\n{lines}"


class ConfigurationError(CycleGraphError):
    """Raised when a graph configuration is missing or invalid."""


class GraphError(CycleGraphError):
    """Raised on misuse of the graph container.

    Attributes:
        node: The offending node label or index, if known
    """

    def __init__(
        self,
        message: str,
        node: Any = None,
        details: Optional[list[str]] = None,
    ) -> None:
        self.node = node
        super().__init__(message, details)


class CycleLimitError(CycleGraphError):
    """Raised when cycle enumeration hits its cap and the policy is 'fail'.

    Attributes:
        max_cycles: The configured cap
        count: Number of cycles returned before stopping
    """

    def __init__(self, message: str, max_cycles: int, count: int) -> None:
        self.max_cycles = max_cycles
        self.count = count
        super().__init__(message)
