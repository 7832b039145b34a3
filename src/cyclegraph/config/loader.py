"""CycleGraph configuration loader.

Loads graph configurations from YAML files, YAML strings or plain
dictionaries and validates them against the schema models.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Union

import yaml
from pydantic import ValidationError

from cyclegraph.config.schema import GraphConfig
from cyclegraph.errors import ConfigurationError

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Loads and validates graph configurations.

    Example:
        ```python
        config = ConfigLoader.load("imports.yaml")
        graph = DiGraph.from_config(config)
        ```
    """

    @classmethod
    def load(cls, path: Union[str, Path]) -> GraphConfig:
        """Load a configuration from a YAML file.

        Args:
            path: Path to the YAML file

        Returns:
            Validated GraphConfig

        Raises:
            ConfigurationError: If the file is missing, unreadable or invalid
        """
        path = Path(path)
        if not path.exists():
            raise ConfigurationError(f"Configuration file not found: {path}")
        if not path.is_file():
            raise ConfigurationError(f"Configuration path is not a file: {path}")

        logger.debug("Loading graph configuration from %s", path)
        try:
            content = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigurationError(
                f"Cannot read configuration file: {path}", details=[str(e)]
            ) from e
        return cls.loads(content)

    @classmethod
    def loads(cls, content: str) -> GraphConfig:
        """Load a configuration from a YAML string."""
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigurationError("Invalid YAML", details=[str(e)]) from e
        return cls._validate(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GraphConfig:
        """Load a configuration from a dictionary."""
        return cls._validate(data)

    @staticmethod
    def _validate(data: Any) -> GraphConfig:
        if data is None:
            raise ConfigurationError("Configuration is empty")
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration must be a dictionary, got {type(data).__name__}"
            )
        try:
            return GraphConfig.model_validate(data)
        except ValidationError as e:
            details = [
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                for err in e.errors()
            ]
            raise ConfigurationError(
                "Configuration validation failed", details=details
            ) from e
