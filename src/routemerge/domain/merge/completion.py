"""Complete merged routers before they are handed to the routing engine.

HTTP routers without a rule get one rendered from the default rule template;
TCP routers without a rule are dropped. Routers of both protocols that do not
name a service are bound to the only service of their protocol, or dropped
when several services make the choice ambiguous.

Both passes mutate the given configuration in place.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final

from jinja2 import Environment, Template, TemplateSyntaxError

from routemerge.domain.model import EntityKind, Router

from .diagnostics import Diagnostic, Diagnostics
from .normalize import normalize

if TYPE_CHECKING:
    from collections.abc import Callable

    from routemerge.domain.model import HTTPConfiguration, TCPConfiguration, TCPRouter


TOO_MANY_SERVICES_REASON: Final[str] = (
    "could not define the service name for the router: too many services"
)
UNDEFINED_RULE_REASON: Final[str] = "undefined rule"
EMPTY_RULE_REASON: Final[str] = "empty rule"


class DefaultRuleTemplateError(ValueError):
    """Raised when the default rule template does not compile."""

    def __init__(self, default_rule: str, detail: str) -> None:
        self.default_rule = default_rule
        super().__init__(f"Invalid default rule template {default_rule!r}: {detail}")


@dataclass(frozen=True, slots=True)
class DefaultRuleTemplate:
    """Compiled default rule, rendered once per router lacking a rule."""

    source: str
    template: Template

    def render(self, model: object) -> str:
        return self.template.render(_template_context(model))


def make_default_rule_template(
    default_rule: str,
    functions: Mapping[str, Callable[..., Any]] | None = None,
) -> DefaultRuleTemplate:
    """Compile ``default_rule`` with ``normalize`` and ``functions`` available.

    Each function is registered both as a global (``normalize(Name)``) and as a
    filter (``Name | normalize``). Entries of ``functions`` override the
    built-in ones of the same name.
    """

    environment = Environment(autoescape=False, keep_trailing_newline=True)  # noqa: S701
    available: dict[str, Callable[..., Any]] = {"normalize": normalize}
    available.update(functions or {})
    environment.globals.update(available)
    environment.filters.update(available)

    try:
        template = environment.from_string(default_rule)
    except TemplateSyntaxError as exc:
        raise DefaultRuleTemplateError(default_rule, str(exc)) from exc
    return DefaultRuleTemplate(source=default_rule, template=template)


def build_router_configuration(
    configuration: HTTPConfiguration,
    *,
    default_router_name: str,
    default_rule_template: DefaultRuleTemplate,
    model: object,
    diagnostics: Diagnostics | None = None,
) -> None:
    """Fill in missing HTTP rules and services, dropping routers that stay incomplete."""

    sink = diagnostics if diagnostics is not None else Diagnostics()

    if not configuration.routers:
        if len(configuration.services) > 1:
            sink.report(
                Diagnostic(
                    kind=EntityKind.ROUTER,
                    name=default_router_name,
                    reason="could not create a router: too many services",
                    level=logging.INFO,
                )
            )
        else:
            configuration.routers[default_router_name] = Router()

    for router_name, router in list(configuration.routers.items()):
        if not router.rule:
            try:
                rule = default_rule_template.render(model)
            except Exception as exc:  # noqa: BLE001
                _drop_router(
                    configuration.routers,
                    router_name,
                    kind=EntityKind.ROUTER,
                    reason=f"error while parsing default rule: {exc}",
                    diagnostics=sink,
                )
                continue

            if not rule:
                _drop_router(
                    configuration.routers,
                    router_name,
                    kind=EntityKind.ROUTER,
                    reason=UNDEFINED_RULE_REASON,
                    diagnostics=sink,
                )
                continue
            router.rule = rule

        _assign_default_service(
            configuration.routers,
            router_name,
            router,
            service_names=tuple(configuration.services),
            kind=EntityKind.ROUTER,
            diagnostics=sink,
        )


def build_tcp_router_configuration(
    configuration: TCPConfiguration,
    *,
    diagnostics: Diagnostics | None = None,
) -> None:
    """Drop TCP routers without a rule and fill in missing services."""

    sink = diagnostics if diagnostics is not None else Diagnostics()

    for router_name, router in list(configuration.routers.items()):
        if not router.rule:
            _drop_router(
                configuration.routers,
                router_name,
                kind=EntityKind.TCP_ROUTER,
                reason=EMPTY_RULE_REASON,
                diagnostics=sink,
            )
            continue

        _assign_default_service(
            configuration.routers,
            router_name,
            router,
            service_names=tuple(configuration.services),
            kind=EntityKind.TCP_ROUTER,
            diagnostics=sink,
        )


def _assign_default_service(
    routers: dict[str, Router] | dict[str, TCPRouter],
    router_name: str,
    router: Router | TCPRouter,
    *,
    service_names: tuple[str, ...],
    kind: EntityKind,
    diagnostics: Diagnostics,
) -> None:
    if router.service:
        return

    if len(service_names) > 1:
        _drop_router(
            routers,
            router_name,
            kind=kind,
            reason=TOO_MANY_SERVICES_REASON,
            diagnostics=diagnostics,
        )
        return

    # With no service at all the reference stays empty for the engine to reject.
    if service_names:
        router.service = service_names[0]


def _drop_router(
    routers: dict[str, Router] | dict[str, TCPRouter],
    router_name: str,
    *,
    kind: EntityKind,
    reason: str,
    diagnostics: Diagnostics,
) -> None:
    del routers[router_name]
    diagnostics.report(Diagnostic(kind=kind, name=router_name, reason=reason))


def _template_context(model: object) -> dict[str, Any]:
    context: dict[str, Any] = {"model": model}
    if isinstance(model, Mapping):
        context.update((str(key), value) for key, value in model.items())
    return context
