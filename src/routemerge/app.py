"""Application orchestration entry points."""

from __future__ import annotations

import json
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Any

from routemerge.adapters.snapshots import load_snapshots
from routemerge.config import get_completion_config
from routemerge.domain.merge import (
    Diagnostics,
    build_router_configuration,
    build_tcp_router_configuration,
    make_default_rule_template,
    merge_configurations,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from pathlib import Path

    from routemerge.config import CompletionConfig
    from routemerge.domain.merge import Diagnostic
    from routemerge.domain.model import Configuration


log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ReconcileResult:
    """Completed snapshot of one cycle plus everything that was dropped on the way."""

    configuration: Configuration
    diagnostics: tuple[Diagnostic, ...]


def reconcile_snapshots(
    snapshots: Mapping[str, Configuration],
    *,
    model: object = None,
    config: CompletionConfig | None = None,
    functions: Mapping[str, Callable[..., Any]] | None = None,
) -> ReconcileResult:
    """Merge ``snapshots`` and complete the routers of the merged result.

    The default rule template is compiled before anything is merged, so an
    invalid template fails the call (``DefaultRuleTemplateError``) instead of
    dropping every rule-less router.
    """

    active_config = config or get_completion_config()
    template = make_default_rule_template(active_config.default_rule, functions)
    diagnostics = Diagnostics()

    log.info("Merging %s source snapshots: %s", len(snapshots), ", ".join(sorted(snapshots)))
    merged = merge_configurations(snapshots, diagnostics=diagnostics)
    build_router_configuration(
        merged.http,
        default_router_name=active_config.default_router_name,
        default_rule_template=template,
        model=model if model is not None else {},
        diagnostics=diagnostics,
    )
    build_tcp_router_configuration(merged.tcp, diagnostics=diagnostics)

    log.info(
        "Finished merge: http_routers=%s, http_services=%s, middlewares=%s, "
        "tcp_routers=%s, tcp_services=%s, udp_routers=%s, udp_services=%s, dropped=%s",
        len(merged.http.routers),
        len(merged.http.services),
        len(merged.http.middlewares),
        len(merged.tcp.routers),
        len(merged.tcp.services),
        len(merged.udp.routers),
        len(merged.udp.services),
        len(diagnostics),
    )
    return ReconcileResult(configuration=merged, diagnostics=diagnostics.drain())


def reconcile_files(
    paths_by_source: Mapping[str, Path],
    *,
    model_path: Path | None = None,
    config: CompletionConfig | None = None,
) -> ReconcileResult:
    """Load snapshot (and optional template model) files, then reconcile them."""

    snapshots = load_snapshots(paths_by_source)
    model: object = None
    if model_path is not None:
        with model_path.open(encoding="utf-8") as handle:
            model = json.load(handle)
    return reconcile_snapshots(snapshots, model=model, config=config)
