"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- WORDGRAPH_GRAPH_INITIAL_CAPACITY=1024
- WORDGRAPH_GRAPH_ALLOW_DUPLICATE_NAMES=false
- WORDGRAPH_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Graph construction defaults.

    Environment variables prefixed with WORDGRAPH_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="WORDGRAPH_GRAPH_")

    # Initial vertex-table size; the table doubles whenever it fills up.
    initial_capacity: int = 256
    # When False, add_vertex rejects a name that is already indexed.
    allow_duplicate_names: bool = True


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with WORDGRAPH_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="WORDGRAPH_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.initial_capacity)

    Environment variables prefixed with WORDGRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="WORDGRAPH_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
