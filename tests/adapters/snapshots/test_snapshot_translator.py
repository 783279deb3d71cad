from __future__ import annotations

from routemerge.adapters.snapshots import (
    ConfigurationPayload,
    dump_configuration,
    translate_configuration,
)
from routemerge.domain.model import (
    Configuration,
    Cookie,
    Router,
    RouterTLSConfig,
    ServersLoadBalancer,
    Sticky,
    StripPrefix,
    TCPServer,
)


def test_translate_builds_domain_entities() -> None:
    payload = ConfigurationPayload.model_validate(
        {
            "http": {
                "routers": {
                    "web": {
                        "entryPoints": ["websecure"],
                        "rule": "Host(`a`)",
                        "tls": {"certResolver": "le", "domains": [{"main": "a", "sans": ["b"]}]},
                    }
                },
                "services": {
                    "web": {
                        "loadBalancer": {
                            "sticky": {"cookie": {"name": "lb", "httpOnly": True}},
                            "servers": [{"url": "http://a"}],
                            "healthCheck": {"path": "/health", "interval": "10s"},
                        }
                    }
                },
                "middlewares": {"strip": {"stripPrefix": {"prefixes": ["/api"]}}},
            },
            "tcp": {"services": {"db": {"loadBalancer": {"servers": [{"address": "db:1"}]}}}},
        }
    )

    configuration = translate_configuration(payload)

    router = configuration.http.routers["web"]
    assert isinstance(router, Router)
    assert router.entry_points == ["websecure"]
    assert router.tls is not None
    assert router.tls == RouterTLSConfig(
        cert_resolver="le",
        domains=router.tls.domains,
    )
    assert router.tls.domains[0].sans == ["b"]

    balancer = configuration.http.services["web"].load_balancer
    assert isinstance(balancer, ServersLoadBalancer)
    assert balancer.sticky == Sticky(cookie=Cookie(name="lb", http_only=True))
    assert balancer.health_check is not None
    assert balancer.health_check.path == "/health"

    assert configuration.http.middlewares["strip"].strip_prefix == StripPrefix(prefixes=["/api"])

    tcp_balancer = configuration.tcp.services["db"].load_balancer
    assert tcp_balancer is not None
    assert tcp_balancer.servers == [TCPServer(address="db:1")]
    assert configuration.udp.routers == {}


def test_missing_sections_become_empty() -> None:
    configuration = translate_configuration(ConfigurationPayload())

    assert configuration == Configuration()


def test_dump_uses_camel_case_and_skips_unset_sections() -> None:
    payload = ConfigurationPayload.model_validate(
        {
            "http": {
                "routers": {"web": {"entryPoints": ["web"], "service": "web", "rule": "Path(`/`)"}},
                "services": {"web": {"loadBalancer": {"servers": [{"url": "http://a"}]}}},
            }
        }
    )

    dumped = dump_configuration(translate_configuration(payload))

    router = dumped["http"]["routers"]["web"]
    assert router["entryPoints"] == ["web"]
    assert "tls" not in router
    balancer = dumped["http"]["services"]["web"]["loadBalancer"]
    assert balancer["servers"] == [{"url": "http://a"}]
    assert balancer["passHostHeader"] is True
    assert "weighted" not in dumped["http"]["services"]["web"]
    assert dumped["tcp"] == {"routers": {}, "services": {}}


def test_null_pass_host_header_keeps_default_and_survives_dump() -> None:
    payload = ConfigurationPayload.model_validate(
        {
            "http": {
                "services": {
                    "web": {
                        "loadBalancer": {
                            "servers": [{"url": "http://a"}],
                            "passHostHeader": None,
                        }
                    }
                }
            }
        }
    )

    configuration = translate_configuration(payload)
    reloaded = translate_configuration(
        ConfigurationPayload.model_validate(dump_configuration(configuration))
    )

    balancer = configuration.http.services["web"].load_balancer
    assert balancer is not None
    assert balancer.pass_host_header is True
    assert reloaded == configuration
