"""TCP routers and services of the dynamic configuration."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from routemerge.domain.model.http import Domain


@dataclass(slots=True, kw_only=True)
class TCPServer:
    address: str


@dataclass(slots=True, kw_only=True)
class TCPServersLoadBalancer:
    termination_delay: int | None = None
    servers: list[TCPServer] = field(default_factory=list["TCPServer"])

    def mergeable(self, other: TCPServersLoadBalancer) -> bool:
        return replace(self, servers=[]) == replace(other, servers=[])


@dataclass(slots=True, kw_only=True)
class TCPService:
    load_balancer: TCPServersLoadBalancer | None = None


@dataclass(slots=True, kw_only=True)
class RouterTCPTLSConfig:
    passthrough: bool = False
    options: str | None = None
    cert_resolver: str | None = None
    domains: list[Domain] = field(default_factory=list["Domain"])


@dataclass(slots=True, kw_only=True)
class TCPRouter:
    entry_points: list[str] = field(default_factory=list[str])
    service: str = ""
    rule: str = ""
    tls: RouterTCPTLSConfig | None = None
