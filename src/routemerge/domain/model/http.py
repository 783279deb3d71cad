"""HTTP routers, services and middlewares of the dynamic configuration.

Equality is derived by ``dataclasses`` field by field. The merge relies on it:
two same-named routers (or middlewares) from different sources are only
compatible when every field listed here compares equal.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any


@dataclass(slots=True, kw_only=True)
class Server:
    url: str


@dataclass(slots=True, kw_only=True)
class Cookie:
    name: str | None = None
    secure: bool = False
    http_only: bool = False
    same_site: str | None = None


@dataclass(slots=True, kw_only=True)
class Sticky:
    cookie: Cookie | None = None


@dataclass(slots=True, kw_only=True)
class HealthCheck:
    scheme: str | None = None
    path: str | None = None
    port: int | None = None
    interval: str | None = None
    timeout: str | None = None
    hostname: str | None = None
    follow_redirects: bool | None = None
    headers: dict[str, str] = field(default_factory=dict[str, str])


@dataclass(slots=True, kw_only=True)
class ResponseForwarding:
    flush_interval: str | None = None


@dataclass(slots=True, kw_only=True)
class ServersLoadBalancer:
    """Round-robin over ``servers`` plus the policy that drives it."""

    sticky: Sticky | None = None
    servers: list[Server] = field(default_factory=list["Server"])
    health_check: HealthCheck | None = None
    pass_host_header: bool = True
    response_forwarding: ResponseForwarding | None = None

    def mergeable(self, other: ServersLoadBalancer) -> bool:
        """Return whether both balancers agree on everything except their servers."""

        return replace(self, servers=[]) == replace(other, servers=[])


@dataclass(slots=True, kw_only=True)
class WRRService:
    name: str
    weight: int | None = None


@dataclass(slots=True, kw_only=True)
class WeightedRoundRobin:
    services: list[WRRService] = field(default_factory=list["WRRService"])
    sticky: Sticky | None = None


@dataclass(slots=True, kw_only=True)
class Service:
    load_balancer: ServersLoadBalancer | None = None
    weighted: WeightedRoundRobin | None = None


@dataclass(slots=True, kw_only=True)
class Domain:
    main: str
    sans: list[str] = field(default_factory=list[str])


@dataclass(slots=True, kw_only=True)
class RouterTLSConfig:
    options: str | None = None
    cert_resolver: str | None = None
    domains: list[Domain] = field(default_factory=list["Domain"])


@dataclass(slots=True, kw_only=True)
class Router:
    entry_points: list[str] = field(default_factory=list[str])
    middlewares: list[str] = field(default_factory=list[str])
    service: str = ""
    rule: str = ""
    priority: int = 0
    tls: RouterTLSConfig | None = None


@dataclass(slots=True, kw_only=True)
class AddPrefix:
    prefix: str


@dataclass(slots=True, kw_only=True)
class StripPrefix:
    prefixes: list[str] = field(default_factory=list[str])
    force_slash: bool | None = None


@dataclass(slots=True, kw_only=True)
class RedirectScheme:
    scheme: str
    port: str | None = None
    permanent: bool = False


@dataclass(slots=True, kw_only=True)
class BasicAuth:
    users: list[str] = field(default_factory=list[str])
    realm: str | None = None
    remove_header: bool = False
    header_field: str | None = None


@dataclass(slots=True, kw_only=True)
class Headers:
    custom_request_headers: dict[str, str] = field(default_factory=dict[str, str])
    custom_response_headers: dict[str, str] = field(default_factory=dict[str, str])
    ssl_redirect: bool | None = None
    sts_seconds: int | None = None


@dataclass(slots=True, kw_only=True)
class Chain:
    middlewares: list[str] = field(default_factory=list[str])


@dataclass(slots=True, kw_only=True)
class Middleware:
    """One middleware definition; sources normally fill a single section."""

    add_prefix: AddPrefix | None = None
    strip_prefix: StripPrefix | None = None
    redirect_scheme: RedirectScheme | None = None
    basic_auth: BasicAuth | None = None
    headers: Headers | None = None
    chain: Chain | None = None
    plugin: dict[str, dict[str, Any]] = field(default_factory=dict[str, dict[str, Any]])
