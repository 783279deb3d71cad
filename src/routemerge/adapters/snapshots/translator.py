"""Translate snapshot payloads into domain configuration and back."""

from __future__ import annotations

from dataclasses import asdict
from typing import TYPE_CHECKING, Any

from routemerge.domain.model import (
    AddPrefix,
    BasicAuth,
    Chain,
    Configuration,
    Cookie,
    Domain,
    Headers,
    HealthCheck,
    HTTPConfiguration,
    Middleware,
    RedirectScheme,
    ResponseForwarding,
    Router,
    RouterTCPTLSConfig,
    RouterTLSConfig,
    Server,
    ServersLoadBalancer,
    Service,
    Sticky,
    StripPrefix,
    TCPConfiguration,
    TCPRouter,
    TCPServer,
    TCPServersLoadBalancer,
    TCPService,
    UDPConfiguration,
    UDPRouter,
    UDPServer,
    UDPServersLoadBalancer,
    UDPService,
    WeightedRoundRobin,
    WRRService,
)

from .schema import ConfigurationPayload

if TYPE_CHECKING:
    from .schema import (
        DomainPayload,
        HTTPConfigurationPayload,
        MiddlewarePayload,
        RouterPayload,
        ServicePayload,
        StickyPayload,
        TCPConfigurationPayload,
        TCPRouterPayload,
        TCPServicePayload,
        UDPConfigurationPayload,
        UDPRouterPayload,
        UDPServicePayload,
    )


def translate_configuration(payload: ConfigurationPayload) -> Configuration:
    """Build a domain snapshot; absent protocol sections become empty ones."""

    return Configuration(
        http=_build_http(payload.http),
        tcp=_build_tcp(payload.tcp),
        udp=_build_udp(payload.udp),
    )


def dump_configuration(configuration: Configuration) -> dict[str, Any]:
    """Return a JSON-ready mapping using the camelCase file spelling."""

    payload = ConfigurationPayload.model_validate(asdict(configuration))
    return payload.model_dump(mode="json", by_alias=True, exclude_none=True)


def _build_http(payload: HTTPConfigurationPayload | None) -> HTTPConfiguration:
    if payload is None:
        return HTTPConfiguration()
    return HTTPConfiguration(
        routers={name: _build_router(router) for name, router in payload.routers.items()},
        services={name: _build_service(service) for name, service in payload.services.items()},
        middlewares={
            name: _build_middleware(middleware)
            for name, middleware in payload.middlewares.items()
        },
    )


def _build_router(payload: RouterPayload) -> Router:
    tls = None
    if payload.tls is not None:
        tls = RouterTLSConfig(
            options=payload.tls.options,
            cert_resolver=payload.tls.cert_resolver,
            domains=_build_domains(payload.tls.domains),
        )
    return Router(
        entry_points=list(payload.entry_points),
        middlewares=list(payload.middlewares),
        service=payload.service,
        rule=payload.rule,
        priority=payload.priority,
        tls=tls,
    )


def _build_service(payload: ServicePayload) -> Service:
    load_balancer = None
    if payload.load_balancer is not None:
        balancer = payload.load_balancer
        load_balancer = ServersLoadBalancer(
            sticky=_build_sticky(balancer.sticky),
            servers=[Server(url=server.url) for server in balancer.servers],
            health_check=(
                HealthCheck(**balancer.health_check.model_dump())
                if balancer.health_check is not None
                else None
            ),
            pass_host_header=balancer.pass_host_header,
            response_forwarding=(
                ResponseForwarding(flush_interval=balancer.response_forwarding.flush_interval)
                if balancer.response_forwarding is not None
                else None
            ),
        )

    weighted = None
    if payload.weighted is not None:
        weighted = WeightedRoundRobin(
            services=[
                WRRService(name=service.name, weight=service.weight)
                for service in payload.weighted.services
            ],
            sticky=_build_sticky(payload.weighted.sticky),
        )
    return Service(load_balancer=load_balancer, weighted=weighted)


def _build_sticky(payload: StickyPayload | None) -> Sticky | None:
    if payload is None:
        return None
    if payload.cookie is None:
        return Sticky()
    return Sticky(cookie=Cookie(**payload.cookie.model_dump()))


def _build_middleware(payload: MiddlewarePayload) -> Middleware:
    return Middleware(
        add_prefix=(
            AddPrefix(prefix=payload.add_prefix.prefix) if payload.add_prefix is not None else None
        ),
        strip_prefix=(
            StripPrefix(**payload.strip_prefix.model_dump())
            if payload.strip_prefix is not None
            else None
        ),
        redirect_scheme=(
            RedirectScheme(**payload.redirect_scheme.model_dump())
            if payload.redirect_scheme is not None
            else None
        ),
        basic_auth=(
            BasicAuth(**payload.basic_auth.model_dump()) if payload.basic_auth is not None else None
        ),
        headers=Headers(**payload.headers.model_dump()) if payload.headers is not None else None,
        chain=(
            Chain(middlewares=list(payload.chain.middlewares))
            if payload.chain is not None
            else None
        ),
        plugin={name: dict(options) for name, options in payload.plugin.items()},
    )


def _build_domains(payloads: list[DomainPayload]) -> list[Domain]:
    return [Domain(main=domain.main, sans=list(domain.sans)) for domain in payloads]


def _build_tcp(payload: TCPConfigurationPayload | None) -> TCPConfiguration:
    if payload is None:
        return TCPConfiguration()
    return TCPConfiguration(
        routers={name: _build_tcp_router(router) for name, router in payload.routers.items()},
        services={
            name: _build_tcp_service(service) for name, service in payload.services.items()
        },
    )


def _build_tcp_router(payload: TCPRouterPayload) -> TCPRouter:
    tls = None
    if payload.tls is not None:
        tls = RouterTCPTLSConfig(
            passthrough=payload.tls.passthrough,
            options=payload.tls.options,
            cert_resolver=payload.tls.cert_resolver,
            domains=_build_domains(payload.tls.domains),
        )
    return TCPRouter(
        entry_points=list(payload.entry_points),
        service=payload.service,
        rule=payload.rule,
        tls=tls,
    )


def _build_tcp_service(payload: TCPServicePayload) -> TCPService:
    if payload.load_balancer is None:
        return TCPService()
    return TCPService(
        load_balancer=TCPServersLoadBalancer(
            termination_delay=payload.load_balancer.termination_delay,
            servers=[TCPServer(address=server.address) for server in payload.load_balancer.servers],
        )
    )


def _build_udp(payload: UDPConfigurationPayload | None) -> UDPConfiguration:
    if payload is None:
        return UDPConfiguration()
    return UDPConfiguration(
        routers={name: _build_udp_router(router) for name, router in payload.routers.items()},
        services={
            name: _build_udp_service(service) for name, service in payload.services.items()
        },
    )


def _build_udp_router(payload: UDPRouterPayload) -> UDPRouter:
    return UDPRouter(entry_points=list(payload.entry_points), service=payload.service)


def _build_udp_service(payload: UDPServicePayload) -> UDPService:
    if payload.load_balancer is None:
        return UDPService()
    return UDPService(
        load_balancer=UDPServersLoadBalancer(
            servers=[UDPServer(address=server.address) for server in payload.load_balancer.servers]
        )
    )
