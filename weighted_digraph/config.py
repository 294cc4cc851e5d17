"""Centralized configuration using Pydantic Settings.

This module is the single source of truth for the graph data location
and logging setup.

Configuration can be overridden via environment variables:
- WDG_GRAPH_DATA_DIR=/path/to/data
- WDG_GRAPH_GRAPH_FILE=roads.txt
- WDG_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Graph data configuration.

    Environment variables prefixed with WDG_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="WDG_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent / "data"
    )
    graph_file: str = "digraph.txt"

    @property
    def graph_path(self) -> Path:
        """Full path to the graph description file."""
        return self.data_dir / self.graph_file


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with WDG_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="WDG_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return level


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.graph_path)

    Environment variables prefixed with WDG_.
    """

    model_config = SettingsConfigDict(env_prefix="WDG_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


def configure_logging(config: ObservabilityConfig, verbose: bool = False) -> None:
    """Apply the logging level and format to the root logger."""
    level = logging.DEBUG if verbose else config.level
    logging.basicConfig(level=level, format=config.format, force=True)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
