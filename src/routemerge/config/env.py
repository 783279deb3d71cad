"""Environment variable loaders for configuration."""

from __future__ import annotations

import logging
import os
from typing import Final

from .errors import ConfigurationError

LOG_LEVEL_ENV: Final[str] = "ROUTEMERGE_LOG_LEVEL"


def optional_env_var(name: str, default: str) -> str:
    """Return the environment variable, or ``default`` when unset or blank."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value


def get_log_level(value: str | None = None) -> int:
    """Resolve a level name (``"debug"``, ``"INFO"``, ...) to a ``logging`` level.

    ``value`` defaults to ``ROUTEMERGE_LOG_LEVEL`` and then to ``INFO``.
    """

    name = (value or optional_env_var(LOG_LEVEL_ENV, "INFO")).strip().upper()
    level = logging.getLevelNamesMapping().get(name)
    if level is None:
        raise ConfigurationError(f"Unknown log level: {name}")
    return level
