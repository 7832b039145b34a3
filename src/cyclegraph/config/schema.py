"""CycleGraph configuration schema models.

This module defines Pydantic models for validating graph configurations
and analysis settings.
"""

from typing import Any, Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator


class AnalysisSettings(BaseModel):
    """Cycle analysis settings.

    Attributes:
        max_cycles: Maximum number of elementary cycles to enumerate.
            Default 100. Zero disables enumeration entirely.
        skip_enumeration_if_acyclic: If True, skip Johnson's enumeration
            when the SCC pre-check finds no cycle and no self-loop.
            Default True.
        on_truncation: Policy when enumeration reaches max_cycles:
            - "warn": Log a warning and return the partial result (default)
            - "ignore": Return the partial result silently
            - "fail": Raise CycleLimitError
    """

    max_cycles: int = Field(
        default=100,
        description="Maximum number of cycles to enumerate",
        ge=0,
    )
    skip_enumeration_if_acyclic: bool = Field(
        default=True,
        description="Skip enumeration when the SCC pre-check finds no cycle",
    )
    on_truncation: Literal["ignore", "warn", "fail"] = Field(
        default="warn",
        description="Policy when enumeration reaches max_cycles",
    )


class NodeConfig(BaseModel):
    """A node in a graph configuration.

    Attributes:
        id: Unique node label within the graph
        description: Human-readable node description
    """

    id: str = Field(..., description="Unique node label within the graph")
    description: Optional[str] = Field(
        default=None,
        description="Human-readable node description",
    )


class EdgeConfig(BaseModel):
    """A directed edge between two nodes.

    Attributes:
        source: Source node label
        target: Target node label
    """

    source: str = Field(..., description="Source node label")
    target: str = Field(..., description="Target node label")


class GraphDefinition(BaseModel):
    """Graph structure definition.

    Attributes:
        settings: Analysis settings
        nodes: Declared nodes, in index order
        edges: Directed edges between declared nodes
    """

    settings: AnalysisSettings = Field(
        default_factory=AnalysisSettings,
        description="Analysis settings",
    )
    nodes: list[NodeConfig] = Field(
        default_factory=list,
        description="List of graph nodes",
    )
    edges: list[EdgeConfig] = Field(
        default_factory=list,
        description="List of directed edges",
    )

    @field_validator("nodes", mode="before")
    @classmethod
    def coerce_node_labels(cls, v: Any) -> Any:
        """Allow nodes to be given as bare labels."""
        if isinstance(v, list):
            return [{"id": n} if isinstance(n, str) else n for n in v]
        return v

    @model_validator(mode="after")
    def validate_graph_definition(self) -> "GraphDefinition":
        node_ids = [n.id for n in self.nodes]
        if len(node_ids) != len(set(node_ids)):
            duplicates = [nid for nid in node_ids if node_ids.count(nid) > 1]
            raise ValueError(f"Duplicate node IDs: {set(duplicates)}")
        node_id_set = set(node_ids)
        for edge in self.edges:
            if edge.source not in node_id_set:
                raise ValueError(f"Edge source '{edge.source}' not found in nodes")
            if edge.target not in node_id_set:
                raise ValueError(f"Edge target '{edge.target}' not found in nodes")
        return self


class GraphConfig(BaseModel):
    """Complete graph configuration.

    This is the root model for a graph configuration file.

    Attributes:
        name: Human-readable graph name
        version: Configuration version string
        description: Optional graph description
        graph: Graph definition with nodes, edges and settings

    Example YAML:
        ```yaml
        name: "Module imports"
        graph:
          settings:
            max_cycles: 50
          nodes: [core, config, errors]
          edges:
            - {source: core, target: config}
            - {source: config, target: core}
        ```
    """

    name: str = Field(..., description="Graph name")
    version: str = Field(default="1.0", description="Configuration version")
    description: Optional[str] = Field(
        default=None,
        description="Graph description",
    )
    graph: GraphDefinition = Field(..., description="Graph definition")

    @property
    def settings(self) -> AnalysisSettings:
        """Shortcut to analysis settings."""
        return self.graph.settings
