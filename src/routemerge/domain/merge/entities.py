"""Per-kind rules for adding one source's entity to the merged collections.

Every ``add_*`` function shares the same contract:

- the name is new: store a copy of the candidate and accept it
- the name exists: accept only if the candidate is compatible with the
  stored definition

The functions never delete. A rejected name keeps its first accepted
definition until the orchestrator purges it after all sources are processed.

Candidates are deep-copied on insertion, so appending servers to a stored
service never reaches back into the source snapshot it came from.
"""

from __future__ import annotations

from copy import deepcopy
from dataclasses import replace
from typing import TYPE_CHECKING, Any, Protocol, TypeVar

if TYPE_CHECKING:
    from routemerge.domain.model import (
        Middleware,
        Router,
        Service,
        TCPRouter,
        TCPService,
        UDPRouter,
        UDPService,
    )


class LoadBalancer(Protocol):
    servers: list[Any]

    def mergeable(self, other: Any) -> bool: ...


class LoadBalancedService(Protocol):
    load_balancer: LoadBalancer | None


TEntity = TypeVar("TEntity")
TService = TypeVar("TService", bound=LoadBalancedService)


def add_service(services: dict[str, Service], name: str, service: Service) -> bool:
    return _add_load_balanced(services, name, service)


def add_tcp_service(services: dict[str, TCPService], name: str, service: TCPService) -> bool:
    return _add_load_balanced(services, name, service)


def add_udp_service(services: dict[str, UDPService], name: str, service: UDPService) -> bool:
    return _add_load_balanced(services, name, service)


def add_router(routers: dict[str, Router], name: str, router: Router) -> bool:
    return _add_if_equal(routers, name, router)


def add_tcp_router(routers: dict[str, TCPRouter], name: str, router: TCPRouter) -> bool:
    return _add_if_equal(routers, name, router)


def add_udp_router(routers: dict[str, UDPRouter], name: str, router: UDPRouter) -> bool:
    return _add_if_equal(routers, name, router)


def add_middleware(middlewares: dict[str, Middleware], name: str, middleware: Middleware) -> bool:
    return _add_if_equal(middlewares, name, middleware)


def _add_if_equal(collection: dict[str, TEntity], name: str, candidate: TEntity) -> bool:
    if name not in collection:
        collection[name] = deepcopy(candidate)
        return True

    return collection[name] == candidate


def _add_load_balanced(
    collection: dict[str, TService],
    name: str,
    candidate: TService,
) -> bool:
    if name not in collection:
        collection[name] = deepcopy(candidate)
        return True

    existing = collection[name]
    if not _services_mergeable(existing, candidate):
        return False

    if existing.load_balancer is not None and candidate.load_balancer is not None:
        existing.load_balancer.servers.extend(deepcopy(candidate.load_balancer.servers))
    return True


def _services_mergeable(existing: LoadBalancedService, candidate: LoadBalancedService) -> bool:
    # Services without a servers load balancer (weighted, ...) have nothing to
    # concatenate: they must match exactly.
    if existing.load_balancer is None or candidate.load_balancer is None:
        return existing == candidate

    if not existing.load_balancer.mergeable(candidate.load_balancer):
        return False

    # Any non load-balancer section must agree as well.
    return replace(existing, load_balancer=None) == replace(candidate, load_balancer=None)
