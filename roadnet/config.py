"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- ROADNET_SOURCE_FALLBACK_DIRS='["Tests", "/srv/networks"]'
- ROADNET_DISPLAY_CELL_WIDTH=8
- ROADNET_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SourceConfig(BaseSettings):
    """Edge-list source configuration.

    Environment variables prefixed with ROADNET_SOURCE_.

    A path that does not exist as given is looked up again under each
    fallback directory, in order. Relative fallback directories are
    resolved against the current working directory at load time.
    """

    model_config = SettingsConfigDict(env_prefix="ROADNET_SOURCE_")

    fallback_dirs: List[Path] = Field(default_factory=lambda: [Path("Tests")])
    encoding: str = "utf-8"


class DisplayConfig(BaseSettings):
    """Matrix rendering configuration.

    Environment variables prefixed with ROADNET_DISPLAY_.
    """

    model_config = SettingsConfigDict(env_prefix="ROADNET_DISPLAY_")

    cell_width: int = Field(default=5, ge=1)
    separator: str = "  "
    placeholder: str = "*"


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with ROADNET_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="ROADNET_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.source.fallback_dirs)
        print(config.display.cell_width)

    Environment variables prefixed with ROADNET_.
    """

    model_config = SettingsConfigDict(env_prefix="ROADNET_")

    source: SourceConfig = Field(default_factory=SourceConfig)
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
    """Reset the configuration cache."""
    get_config.cache_clear()
