"""Merge core for dynamic routing configuration.

Flow of one configuration cycle:
1) merge the snapshots of all sources (``merge_configurations``)
2) complete HTTP routers: default router, default rule, default service
3) complete TCP routers: drop rule-less routers, default service
"""

from __future__ import annotations

from .completion import (
    DefaultRuleTemplate,
    DefaultRuleTemplateError,
    build_router_configuration,
    build_tcp_router_configuration,
    make_default_rule_template,
)
from .diagnostics import Diagnostic, Diagnostics
from .entities import (
    add_middleware,
    add_router,
    add_service,
    add_tcp_router,
    add_tcp_service,
    add_udp_router,
    add_udp_service,
)
from .normalize import normalize
from .orchestrator import merge_configurations

__all__ = [
    "DefaultRuleTemplate",
    "DefaultRuleTemplateError",
    "Diagnostic",
    "Diagnostics",
    "add_middleware",
    "add_router",
    "add_service",
    "add_tcp_router",
    "add_tcp_service",
    "add_udp_router",
    "add_udp_service",
    "build_router_configuration",
    "build_tcp_router_configuration",
    "make_default_rule_template",
    "merge_configurations",
    "normalize",
]
