"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for all configuration:
seed data location, routing limits, terminal display and logging.

Configuration can be overridden via environment variables:
- CITYNAV_GRAPH_DATA_DIR=/path/to/data
- CITYNAV_GRAPH_LOAD_SEED=false
- CITYNAV_ROUTING_MAX_EXPANSIONS=1000
- CITYNAV_DISPLAY_COLOR=false
- CITYNAV_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Seed graph configuration.

    Environment variables prefixed with CITYNAV_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="CITYNAV_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent / "data"
    )
    locations_file: str = "locations.csv"
    roads_file: str = "roads.csv"
    load_seed: bool = True

    @property
    def locations_path(self) -> Path:
        """Full path to locations CSV file."""
        return self.data_dir / self.locations_file

    @property
    def roads_path(self) -> Path:
        """Full path to roads CSV file."""
        return self.data_dir / self.roads_file


class RoutingConfig(BaseSettings):
    """Route search configuration.

    Environment variables prefixed with CITYNAV_ROUTING_.
    """

    model_config = SettingsConfigDict(env_prefix="CITYNAV_ROUTING_")

    # None disables the cap
    max_expansions: Optional[int] = Field(default=None, gt=0)


class DisplayConfig(BaseSettings):
    """Terminal front-end configuration.

    Environment variables prefixed with CITYNAV_DISPLAY_.
    """

    model_config = SettingsConfigDict(env_prefix="CITYNAV_DISPLAY_")

    color: bool = True
    time_unit: str = "mins"
    pause_seconds: float = Field(default=0.0, ge=0.0)


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with CITYNAV_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="CITYNAV_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.routing.max_expansions)
        print(config.graph.roads_path)

    Environment variables prefixed with CITYNAV_.
    """

    model_config = SettingsConfigDict(env_prefix="CITYNAV_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    routing: RoutingConfig = Field(default_factory=RoutingConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
