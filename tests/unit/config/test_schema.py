"""Tests for CycleGraph config schema module."""

import pytest
from pydantic import ValidationError

from cyclegraph.config.schema import (
    AnalysisSettings,
    EdgeConfig,
    GraphConfig,
    GraphDefinition,
    NodeConfig,
)


class TestAnalysisSettings:
    """Tests for AnalysisSettings model."""

    def test_defaults(self) -> None:
        """Test default values."""
        settings = AnalysisSettings()

        assert settings.max_cycles == 100
        assert settings.skip_enumeration_if_acyclic is True
        assert settings.on_truncation == "warn"

    def test_zero_max_cycles_allowed(self) -> None:
        """Test a cap of zero is valid."""
        assert AnalysisSettings(max_cycles=0).max_cycles == 0

    def test_negative_max_cycles_raises(self) -> None:
        """Test negative cap is rejected."""
        with pytest.raises(ValidationError):
            AnalysisSettings(max_cycles=-1)

    def test_invalid_policy_raises(self) -> None:
        """Test unknown truncation policy is rejected."""
        with pytest.raises(ValidationError):
            AnalysisSettings(on_truncation="explode")  # type: ignore


class TestNodeAndEdgeConfig:
    """Tests for NodeConfig and EdgeConfig models."""

    def test_node_minimal(self) -> None:
        node = NodeConfig(id="a")
        assert node.id == "a"
        assert node.description is None

    def test_edge_requires_both_ends(self) -> None:
        with pytest.raises(ValidationError):
            EdgeConfig(source="a")  # type: ignore


class TestGraphDefinition:
    """Tests for GraphDefinition model."""

    def test_empty_graph_allowed(self) -> None:
        definition = GraphDefinition()
        assert definition.nodes == []
        assert definition.edges == []

    def test_bare_labels_accepted(self) -> None:
        definition = GraphDefinition(nodes=["a", {"id": "b", "description": "B"}])
        assert [n.id for n in definition.nodes] == ["a", "b"]
        assert definition.nodes[1].description == "B"

    def test_duplicate_node_ids_raise(self) -> None:
        with pytest.raises(ValidationError, match="Duplicate node IDs"):
            GraphDefinition(nodes=["a", "a"])

    def test_unknown_edge_source_raises(self) -> None:
        with pytest.raises(ValidationError, match="Edge source 'x'"):
            GraphDefinition(nodes=["a"], edges=[{"source": "x", "target": "a"}])

    def test_unknown_edge_target_raises(self) -> None:
        with pytest.raises(ValidationError, match="Edge target 'x'"):
            GraphDefinition(nodes=["a"], edges=[{"source": "a", "target": "x"}])

    def test_self_loop_edge_allowed(self) -> None:
        definition = GraphDefinition(
            nodes=["a"], edges=[{"source": "a", "target": "a"}]
        )
        assert len(definition.edges) == 1


class TestGraphConfig:
    """Tests for GraphConfig model."""

    def test_minimal(self) -> None:
        config = GraphConfig(name="g", graph=GraphDefinition())
        assert config.version == "1.0"
        assert config.description is None
        assert config.settings.max_cycles == 100

    def test_missing_graph_raises(self) -> None:
        with pytest.raises(ValidationError):
            GraphConfig(name="g")  # type: ignore

    def test_settings_shortcut(self) -> None:
        config = GraphConfig(
            name="g",
            graph=GraphDefinition(settings=AnalysisSettings(max_cycles=5)),
        )
        assert config.settings is config.graph.settings
        assert config.settings.max_cycles == 5
