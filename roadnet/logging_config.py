"""Logging setup for command-line use.

The library itself only creates module loggers; handlers are attached
here, by the CLI, never on import.
"""

from __future__ import annotations

import logging
from typing import Optional

from .config import ObservabilityConfig, get_config
from .domain.errors import ConfigurationError


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Configure the root logger from the observability settings.

    Raises:
        ConfigurationError: If the configured level is not a logging level.
    """
    config = config or get_config().observability
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(
            f"Unknown log level: {config.level}",
            setting_name="ROADNET_LOG_LEVEL",
            expected_type="DEBUG, INFO, WARNING, ERROR or CRITICAL",
        )
    logging.basicConfig(level=level, format=config.format)
