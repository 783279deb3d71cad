"""Public domain model surface."""

from __future__ import annotations

from routemerge.domain.model.configuration import (
    Configuration,
    HTTPConfiguration,
    TCPConfiguration,
    UDPConfiguration,
)
from routemerge.domain.model.enums import EntityKind
from routemerge.domain.model.http import (
    AddPrefix,
    BasicAuth,
    Chain,
    Cookie,
    Domain,
    Headers,
    HealthCheck,
    Middleware,
    RedirectScheme,
    ResponseForwarding,
    Router,
    RouterTLSConfig,
    Server,
    ServersLoadBalancer,
    Service,
    Sticky,
    StripPrefix,
    WeightedRoundRobin,
    WRRService,
)
from routemerge.domain.model.tcp import (
    RouterTCPTLSConfig,
    TCPRouter,
    TCPServer,
    TCPServersLoadBalancer,
    TCPService,
)
from routemerge.domain.model.udp import UDPRouter, UDPServer, UDPServersLoadBalancer, UDPService

__all__ = [  # noqa: RUF022
    # snapshots
    "Configuration",
    "HTTPConfiguration",
    "TCPConfiguration",
    "UDPConfiguration",
    # http
    "Router",
    "RouterTLSConfig",
    "Domain",
    "Service",
    "ServersLoadBalancer",
    "Server",
    "Sticky",
    "Cookie",
    "HealthCheck",
    "ResponseForwarding",
    "WeightedRoundRobin",
    "WRRService",
    "Middleware",
    "AddPrefix",
    "StripPrefix",
    "RedirectScheme",
    "BasicAuth",
    "Headers",
    "Chain",
    # tcp
    "TCPRouter",
    "RouterTCPTLSConfig",
    "TCPService",
    "TCPServersLoadBalancer",
    "TCPServer",
    # udp
    "UDPRouter",
    "UDPService",
    "UDPServersLoadBalancer",
    "UDPServer",
    # enums
    "EntityKind",
]
