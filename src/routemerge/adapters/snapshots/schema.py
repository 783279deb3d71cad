"""Pydantic models for dynamic configuration snapshot files.

Keys follow the camelCase spelling used by routing configuration files
(``entryPoints``, ``loadBalancer``, ``passHostHeader``). Python field names are
accepted as well so the models can be populated from ``dataclasses.asdict``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class SnapshotBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", alias_generator=to_camel, populate_by_name=True)


class ServerPayload(SnapshotBaseModel):
    url: str


class CookiePayload(SnapshotBaseModel):
    name: str | None = None
    secure: bool = False
    http_only: bool = False
    same_site: str | None = None


class StickyPayload(SnapshotBaseModel):
    cookie: CookiePayload | None = None


class HealthCheckPayload(SnapshotBaseModel):
    scheme: str | None = None
    path: str | None = None
    port: int | None = None
    interval: str | None = None
    timeout: str | None = None
    hostname: str | None = None
    follow_redirects: bool | None = None
    headers: dict[str, str] = Field(default_factory=dict)


class ResponseForwardingPayload(SnapshotBaseModel):
    flush_interval: str | None = None


class ServersLoadBalancerPayload(SnapshotBaseModel):
    sticky: StickyPayload | None = None
    servers: list[ServerPayload] = Field(default_factory=list["ServerPayload"])
    health_check: HealthCheckPayload | None = None
    pass_host_header: bool = True
    response_forwarding: ResponseForwardingPayload | None = None

    @field_validator("pass_host_header", mode="before")
    @classmethod
    def _null_means_default(cls, value: object) -> object:
        # An explicit null keeps the routing engine default.
        return True if value is None else value


class WRRServicePayload(SnapshotBaseModel):
    name: str
    weight: int | None = None


class WeightedRoundRobinPayload(SnapshotBaseModel):
    services: list[WRRServicePayload] = Field(default_factory=list["WRRServicePayload"])
    sticky: StickyPayload | None = None


class ServicePayload(SnapshotBaseModel):
    load_balancer: ServersLoadBalancerPayload | None = None
    weighted: WeightedRoundRobinPayload | None = None


class DomainPayload(SnapshotBaseModel):
    main: str
    sans: list[str] = Field(default_factory=list)


class RouterTLSPayload(SnapshotBaseModel):
    options: str | None = None
    cert_resolver: str | None = None
    domains: list[DomainPayload] = Field(default_factory=list["DomainPayload"])


class RouterPayload(SnapshotBaseModel):
    entry_points: list[str] = Field(default_factory=list)
    middlewares: list[str] = Field(default_factory=list)
    service: str = ""
    rule: str = ""
    priority: int = 0
    tls: RouterTLSPayload | None = None


class AddPrefixPayload(SnapshotBaseModel):
    prefix: str


class StripPrefixPayload(SnapshotBaseModel):
    prefixes: list[str] = Field(default_factory=list)
    force_slash: bool | None = None


class RedirectSchemePayload(SnapshotBaseModel):
    scheme: str
    port: str | None = None
    permanent: bool = False


class BasicAuthPayload(SnapshotBaseModel):
    users: list[str] = Field(default_factory=list)
    realm: str | None = None
    remove_header: bool = False
    header_field: str | None = None


class HeadersPayload(SnapshotBaseModel):
    custom_request_headers: dict[str, str] = Field(default_factory=dict)
    custom_response_headers: dict[str, str] = Field(default_factory=dict)
    ssl_redirect: bool | None = None
    sts_seconds: int | None = None


class ChainPayload(SnapshotBaseModel):
    middlewares: list[str] = Field(default_factory=list)


class MiddlewarePayload(SnapshotBaseModel):
    add_prefix: AddPrefixPayload | None = None
    strip_prefix: StripPrefixPayload | None = None
    redirect_scheme: RedirectSchemePayload | None = None
    basic_auth: BasicAuthPayload | None = None
    headers: HeadersPayload | None = None
    chain: ChainPayload | None = None
    plugin: dict[str, dict[str, Any]] = Field(default_factory=dict)


class HTTPConfigurationPayload(SnapshotBaseModel):
    routers: dict[str, RouterPayload] = Field(default_factory=dict)
    services: dict[str, ServicePayload] = Field(default_factory=dict)
    middlewares: dict[str, MiddlewarePayload] = Field(default_factory=dict)


class TCPServerPayload(SnapshotBaseModel):
    address: str


class TCPServersLoadBalancerPayload(SnapshotBaseModel):
    termination_delay: int | None = None
    servers: list[TCPServerPayload] = Field(default_factory=list["TCPServerPayload"])


class TCPServicePayload(SnapshotBaseModel):
    load_balancer: TCPServersLoadBalancerPayload | None = None


class RouterTCPTLSPayload(SnapshotBaseModel):
    passthrough: bool = False
    options: str | None = None
    cert_resolver: str | None = None
    domains: list[DomainPayload] = Field(default_factory=list["DomainPayload"])


class TCPRouterPayload(SnapshotBaseModel):
    entry_points: list[str] = Field(default_factory=list)
    service: str = ""
    rule: str = ""
    tls: RouterTCPTLSPayload | None = None


class TCPConfigurationPayload(SnapshotBaseModel):
    routers: dict[str, TCPRouterPayload] = Field(default_factory=dict)
    services: dict[str, TCPServicePayload] = Field(default_factory=dict)


class UDPServerPayload(SnapshotBaseModel):
    address: str


class UDPServersLoadBalancerPayload(SnapshotBaseModel):
    servers: list[UDPServerPayload] = Field(default_factory=list["UDPServerPayload"])


class UDPServicePayload(SnapshotBaseModel):
    load_balancer: UDPServersLoadBalancerPayload | None = None


class UDPRouterPayload(SnapshotBaseModel):
    entry_points: list[str] = Field(default_factory=list)
    service: str = ""


class UDPConfigurationPayload(SnapshotBaseModel):
    routers: dict[str, UDPRouterPayload] = Field(default_factory=dict)
    services: dict[str, UDPServicePayload] = Field(default_factory=dict)


class ConfigurationPayload(SnapshotBaseModel):
    http: HTTPConfigurationPayload | None = None
    tcp: TCPConfigurationPayload | None = None
    udp: UDPConfigurationPayload | None = None
