"""UDP routers and services of the dynamic configuration.

UDP routers carry no rule: they bind entry points to a service directly.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace


@dataclass(slots=True, kw_only=True)
class UDPServer:
    address: str


@dataclass(slots=True, kw_only=True)
class UDPServersLoadBalancer:
    servers: list[UDPServer] = field(default_factory=list["UDPServer"])

    def mergeable(self, other: UDPServersLoadBalancer) -> bool:
        return replace(self, servers=[]) == replace(other, servers=[])


@dataclass(slots=True, kw_only=True)
class UDPService:
    load_balancer: UDPServersLoadBalancer | None = None


@dataclass(slots=True, kw_only=True)
class UDPRouter:
    entry_points: list[str] = field(default_factory=list[str])
    service: str = ""
