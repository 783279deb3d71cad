from __future__ import annotations

from copy import deepcopy

from routemerge.domain.merge import Diagnostics, merge_configurations
from routemerge.domain.merge.orchestrator import CONFLICT_REASON
from routemerge.domain.model import (
    AddPrefix,
    Configuration,
    EntityKind,
    Middleware,
    UDPRouter,
)
from tests.helpers.snapshots import (
    http_router,
    http_service,
    server_urls,
    snapshot,
    tcp_router,
    tcp_service,
    udp_service,
)


def test_merge_of_no_sources_initializes_every_collection() -> None:
    merged = merge_configurations({})

    assert merged == Configuration()
    assert merged.http.routers == {}
    assert merged.tcp.services == {}
    assert merged.udp.routers == {}


def test_merge_unions_disjoint_sources() -> None:
    docker = snapshot(
        routers={"web": http_router("Host(`web`)", "web")},
        services={"web": http_service("http://web:80")},
        tcp_routers={"db": tcp_router("HostSNI(`*`)", "db")},
    )
    file = snapshot(
        middlewares={"prefix": Middleware(add_prefix=AddPrefix(prefix="/api"))},
        tcp_services={"db": tcp_service("db:5432")},
        udp_routers={"dns": UDPRouter(service="dns")},
        udp_services={"dns": udp_service("dns:53")},
    )
    diagnostics = Diagnostics()

    merged = merge_configurations({"docker": docker, "file": file}, diagnostics=diagnostics)

    assert set(merged.http.routers) == {"web"}
    assert set(merged.http.services) == {"web"}
    assert set(merged.http.middlewares) == {"prefix"}
    assert set(merged.tcp.routers) == {"db"}
    assert set(merged.tcp.services) == {"db"}
    assert set(merged.udp.routers) == {"dns"}
    assert set(merged.udp.services) == {"dns"}
    assert len(diagnostics) == 0


def test_merge_keeps_equal_routers_and_middlewares() -> None:
    def build() -> Configuration:
        return snapshot(
            routers={"web": http_router("Host(`web`)", "web")},
            middlewares={"prefix": Middleware(add_prefix=AddPrefix(prefix="/api"))},
        )

    diagnostics = Diagnostics()
    merged = merge_configurations({"a": build(), "b": build()}, diagnostics=diagnostics)

    assert merged.http.routers["web"] == http_router("Host(`web`)", "web")
    assert "prefix" in merged.http.middlewares
    assert len(diagnostics) == 0


def test_merge_drops_conflicting_router_and_reports_all_sources() -> None:
    sources = {
        "kubernetes": snapshot(routers={"web": http_router("Host(`b`)", "web")}),
        "docker": snapshot(routers={"web": http_router("Host(`a`)", "web")}),
    }
    diagnostics = Diagnostics()

    merged = merge_configurations(sources, diagnostics=diagnostics)

    assert "web" not in merged.http.routers
    (event,) = diagnostics.events
    assert event.kind is EntityKind.ROUTER
    assert event.name == "web"
    assert event.reason == CONFLICT_REASON
    assert event.sources == ("docker", "kubernetes")


def test_merge_drops_conflicting_middleware() -> None:
    sources = {
        "a": snapshot(middlewares={"prefix": Middleware(add_prefix=AddPrefix(prefix="/a"))}),
        "b": snapshot(middlewares={"prefix": Middleware(add_prefix=AddPrefix(prefix="/b"))}),
    }
    diagnostics = Diagnostics()

    merged = merge_configurations(sources, diagnostics=diagnostics)

    assert merged.http.middlewares == {}
    assert [event.kind for event in diagnostics] == [EntityKind.MIDDLEWARE]


def test_merge_concatenates_service_servers_in_sorted_source_order() -> None:
    sources = {
        "zookeeper": snapshot(services={"api": http_service("http://z")}),
        "consul": snapshot(services={"api": http_service("http://c1", "http://c2")}),
        "etcd": snapshot(services={"api": http_service("http://e")}),
    }

    merged = merge_configurations(sources)

    assert server_urls(merged.http.services["api"]) == [
        "http://c1",
        "http://c2",
        "http://e",
        "http://z",
    ]


def test_merge_drops_service_with_non_mergeable_policies() -> None:
    sources = {
        "a": snapshot(services={"api": http_service("http://a")}),
        "b": snapshot(services={"api": http_service("http://b", pass_host_header=False)}),
    }
    diagnostics = Diagnostics()

    merged = merge_configurations(sources, diagnostics=diagnostics)

    assert "api" not in merged.http.services
    assert diagnostics.for_name("api")[0].sources == ("a", "b")


def test_merge_rejection_is_final_even_if_later_sources_agree() -> None:
    sources = {
        "a": snapshot(routers={"web": http_router("Host(`a`)", "web")}),
        "b": snapshot(routers={"web": http_router("Host(`b`)", "web")}),
        "c": snapshot(routers={"web": http_router("Host(`a`)", "web")}),
        "d": snapshot(routers={"web": http_router("Host(`d`)", "web")}),
    }
    diagnostics = Diagnostics()

    merged = merge_configurations(sources, diagnostics=diagnostics)

    assert merged.http.routers == {}
    (event,) = diagnostics.events
    assert event.sources == ("a", "b", "c", "d")


def test_merge_reports_same_name_per_kind_independently() -> None:
    sources = {
        "a": snapshot(
            services={"app": http_service("http://a")},
            tcp_services={"app": tcp_service("a:1", termination_delay=1)},
        ),
        "b": snapshot(
            services={"app": http_service("http://b")},
            tcp_services={"app": tcp_service("b:1", termination_delay=2)},
        ),
    }
    diagnostics = Diagnostics()

    merged = merge_configurations(sources, diagnostics=diagnostics)

    assert server_urls(merged.http.services["app"]) == ["http://a", "http://b"]
    assert merged.tcp.services == {}
    assert [(event.kind, event.name) for event in diagnostics] == [
        (EntityKind.TCP_SERVICE, "app")
    ]


def test_merge_is_independent_of_input_order() -> None:
    first = snapshot(
        routers={"web": http_router("Host(`web`)", "web")},
        services={"web": http_service("http://1")},
    )
    second = snapshot(
        routers={"admin": http_router("Host(`admin`)", "admin")},
        services={"web": http_service("http://2"), "admin": http_service("http://3")},
    )

    forward = merge_configurations({"alpha": first, "beta": second})
    backward = merge_configurations({"beta": deepcopy(second), "alpha": deepcopy(first)})

    assert forward == backward
    assert server_urls(forward.http.services["web"]) == ["http://1", "http://2"]


def test_merge_does_not_mutate_sources() -> None:
    first = snapshot(services={"api": http_service("http://a")})
    second = snapshot(services={"api": http_service("http://b")})
    before = (deepcopy(first), deepcopy(second))

    merge_configurations({"a": first, "b": second})
    merge_configurations({"a": first, "b": second})

    assert (first, second) == before


def test_merge_of_single_snapshot_is_idempotent() -> None:
    original = snapshot(
        routers={"web": http_router("Host(`web`)", "web")},
        services={"web": http_service("http://1", "http://2")},
        middlewares={"prefix": Middleware(add_prefix=AddPrefix(prefix="/api"))},
        tcp_routers={"db": tcp_router("HostSNI(`*`)", "db")},
        tcp_services={"db": tcp_service("db:5432")},
    )

    merged = merge_configurations({"only": original})
    merged_again = merge_configurations({"only": merged})

    assert merged == original
    assert merged_again == merged
