"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class EntityKind(StrEnum):
    """Collections of a snapshot that take part in the merge."""

    ROUTER = "router"
    SERVICE = "service"
    MIDDLEWARE = "middleware"
    TCP_ROUTER = "tcp_router"
    TCP_SERVICE = "tcp_service"
    UDP_ROUTER = "udp_router"
    UDP_SERVICE = "udp_service"
