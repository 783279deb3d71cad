"""Snapshot containers: one per source, and the merged result."""

from __future__ import annotations

from dataclasses import dataclass, field

from routemerge.domain.model.http import Middleware, Router, Service
from routemerge.domain.model.tcp import TCPRouter, TCPService
from routemerge.domain.model.udp import UDPRouter, UDPService


@dataclass(slots=True, kw_only=True)
class HTTPConfiguration:
    routers: dict[str, Router] = field(default_factory=dict[str, Router])
    services: dict[str, Service] = field(default_factory=dict[str, Service])
    middlewares: dict[str, Middleware] = field(default_factory=dict[str, Middleware])


@dataclass(slots=True, kw_only=True)
class TCPConfiguration:
    routers: dict[str, TCPRouter] = field(default_factory=dict[str, TCPRouter])
    services: dict[str, TCPService] = field(default_factory=dict[str, TCPService])


@dataclass(slots=True, kw_only=True)
class UDPConfiguration:
    routers: dict[str, UDPRouter] = field(default_factory=dict[str, UDPRouter])
    services: dict[str, UDPService] = field(default_factory=dict[str, UDPService])


@dataclass(slots=True, kw_only=True)
class Configuration:
    """Dynamic configuration produced by one source, or by the merge.

    Every protocol section is always present, possibly empty.
    """

    http: HTTPConfiguration = field(default_factory=HTTPConfiguration)
    tcp: TCPConfiguration = field(default_factory=TCPConfiguration)
    udp: UDPConfiguration = field(default_factory=UDPConfiguration)
