from __future__ import annotations

import logging
from typing import Optional

from .config import ObservabilityConfig, get_config
from .domain.errors import ConfigurationError


def configure_logging(config: Optional[ObservabilityConfig] = None) -> int:
    """Apply the configured level and format to the root logger.

    Returns the numeric level that was applied.
    """
    config = config or get_config().observability

    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(
            f"Unknown log level: {config.level}",
            setting_name="level",
            expected_type="logging level name",
        )

    logging.basicConfig(level=level, format=config.format)
    logging.getLogger().setLevel(level)
    return level
