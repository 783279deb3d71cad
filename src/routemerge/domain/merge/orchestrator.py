"""Merge the snapshots of several configuration sources into one.

Sources are processed in lexicographic order of their identifiers. That order
fixes which definition is stored first and the order in which service servers
are concatenated, so the result does not depend on the iteration order of the
input mapping.

A name that any source defines incompatibly is rejected for good: it is
purged after the scan even if later sources agree with the stored definition,
and one diagnostic lists every source that defined it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Final

from routemerge.domain.model import (
    Configuration,
    EntityKind,
    HTTPConfiguration,
    TCPConfiguration,
    UDPConfiguration,
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

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    AddEntity = Callable[[dict[str, Any], str, Any], bool]
    SelectCollection = Callable[[Configuration], Mapping[str, Any]]


CONFLICT_REASON: Final[str] = "defined multiple times with different configurations"

_COLLECTIONS: Final[tuple[tuple[EntityKind, SelectCollection, AddEntity], ...]] = (
    (EntityKind.SERVICE, lambda configuration: configuration.http.services, add_service),
    (EntityKind.ROUTER, lambda configuration: configuration.http.routers, add_router),
    (EntityKind.TCP_SERVICE, lambda configuration: configuration.tcp.services, add_tcp_service),
    (EntityKind.TCP_ROUTER, lambda configuration: configuration.tcp.routers, add_tcp_router),
    (EntityKind.UDP_SERVICE, lambda configuration: configuration.udp.services, add_udp_service),
    (EntityKind.UDP_ROUTER, lambda configuration: configuration.udp.routers, add_udp_router),
    (EntityKind.MIDDLEWARE, lambda configuration: configuration.http.middlewares, add_middleware),
)


@dataclass(slots=True)
class _KindMerge:
    """Merge state of one entity kind across all sources."""

    kind: EntityKind
    add: AddEntity
    entities: dict[str, Any] = field(default_factory=dict[str, Any])
    sources_by_name: dict[str, list[str]] = field(default_factory=dict[str, list[str]])
    # insertion-ordered set of rejected names
    rejected: dict[str, None] = field(default_factory=dict[str, None])

    def offer(self, source: str, name: str, entity: object) -> None:
        self.sources_by_name.setdefault(name, []).append(source)
        if not self.add(self.entities, name, entity):
            self.rejected.setdefault(name, None)

    def accepted(self) -> dict[str, Any]:
        return {
            name: entity for name, entity in self.entities.items() if name not in self.rejected
        }

    def report_rejected(self, diagnostics: Diagnostics) -> None:
        for name in self.rejected:
            diagnostics.report(
                Diagnostic(
                    kind=self.kind,
                    name=name,
                    reason=CONFLICT_REASON,
                    sources=tuple(self.sources_by_name[name]),
                )
            )


def merge_configurations(
    configurations: Mapping[str, Configuration],
    *,
    diagnostics: Diagnostics | None = None,
) -> Configuration:
    """Return a fresh snapshot holding every entity all its sources agree on.

    Input snapshots are left untouched. Rejected entities are reported to
    ``diagnostics`` (and logged); the merge itself never fails.
    """

    sink = diagnostics if diagnostics is not None else Diagnostics()
    merges = {kind: _KindMerge(kind=kind, add=add) for kind, _select, add in _COLLECTIONS}

    for source in sorted(configurations):
        configuration = configurations[source]
        for kind, select, _add in _COLLECTIONS:
            for name, entity in select(configuration).items():
                merges[kind].offer(source, name, entity)

    for merge in merges.values():
        merge.report_rejected(sink)

    return Configuration(
        http=HTTPConfiguration(
            routers=merges[EntityKind.ROUTER].accepted(),
            services=merges[EntityKind.SERVICE].accepted(),
            middlewares=merges[EntityKind.MIDDLEWARE].accepted(),
        ),
        tcp=TCPConfiguration(
            routers=merges[EntityKind.TCP_ROUTER].accepted(),
            services=merges[EntityKind.TCP_SERVICE].accepted(),
        ),
        udp=UDPConfiguration(
            routers=merges[EntityKind.UDP_ROUTER].accepted(),
            services=merges[EntityKind.UDP_SERVICE].accepted(),
        ),
    )
