"""Router completion settings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .env import optional_env_var

DEFAULT_RULE_ENV: Final[str] = "ROUTEMERGE_DEFAULT_RULE"
DEFAULT_ROUTER_NAME_ENV: Final[str] = "ROUTEMERGE_DEFAULT_ROUTER_NAME"

DEFAULT_RULE: Final[str] = "Host(`{{ normalize(Name) }}`)"
DEFAULT_ROUTER_NAME: Final[str] = "default"


@dataclass(frozen=True, slots=True)
class CompletionConfig:
    """Inputs of the router completion pass that do not come from sources.

    ``default_rule`` is a Jinja2 template rendered for every HTTP router without
    a rule; ``default_router_name`` names the router created when the merged
    snapshot has a single HTTP service and no router.
    """

    default_rule: str = DEFAULT_RULE
    default_router_name: str = DEFAULT_ROUTER_NAME


def get_completion_config(
    *,
    default_rule: str | None = None,
    default_router_name: str | None = None,
) -> CompletionConfig:
    """Build the completion settings; explicit arguments win over the environment."""

    return CompletionConfig(
        default_rule=default_rule or optional_env_var(DEFAULT_RULE_ENV, DEFAULT_RULE),
        default_router_name=default_router_name
        or optional_env_var(DEFAULT_ROUTER_NAME_ENV, DEFAULT_ROUTER_NAME),
    )
