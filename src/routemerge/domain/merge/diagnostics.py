"""Structured rejection events emitted by merge and router completion.

Callers pass a :class:`Diagnostics` collector into the merge/completion
functions and drain it afterwards. Every reported event is also written to
the standard logger so the default behaviour without a collector is still
observable.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from routemerge.domain.model import EntityKind


log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, kw_only=True)
class Diagnostic:
    """One entity (or router) that was dropped or could not be created."""

    kind: EntityKind
    name: str
    reason: str
    sources: tuple[str, ...] = ()
    level: int = logging.ERROR

    def describe(self) -> str:
        message = f"{self.kind} {self.name!r}: {self.reason}"
        if self.sources:
            message += f" (sources: {', '.join(self.sources)})"
        return message


@dataclass(slots=True)
class Diagnostics:
    """Collector for :class:`Diagnostic` events of one merge cycle."""

    events: list[Diagnostic] = field(default_factory=list["Diagnostic"])

    def report(self, diagnostic: Diagnostic) -> None:
        self.events.append(diagnostic)
        log.log(
            diagnostic.level,
            "%s",
            diagnostic.describe(),
            extra={
                "entity_kind": str(diagnostic.kind),
                "entity_name": diagnostic.name,
                "sources": diagnostic.sources,
            },
        )

    def for_name(self, name: str) -> tuple[Diagnostic, ...]:
        return tuple(event for event in self.events if event.name == name)

    def drain(self) -> tuple[Diagnostic, ...]:
        """Return all collected events and reset the collector."""

        events = tuple(self.events)
        self.events.clear()
        return events

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.events)

    def __len__(self) -> int:
        return len(self.events)
