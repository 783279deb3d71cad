"""Application configuration helpers."""

from __future__ import annotations

from routemerge.common.logging import configure_logging

from .completion import (
    DEFAULT_ROUTER_NAME,
    DEFAULT_RULE,
    CompletionConfig,
    get_completion_config,
)
from .env import get_log_level, optional_env_var
from .errors import ConfigurationError

__all__ = [
    "DEFAULT_ROUTER_NAME",
    "DEFAULT_RULE",
    "CompletionConfig",
    "ConfigurationError",
    "configure_logging",
    "get_completion_config",
    "get_log_level",
    "optional_env_var",
]
