"""Schema validation for captured snapshot files."""

from __future__ import annotations

from typing import TYPE_CHECKING

from routemerge.adapters.snapshots.schema import ConfigurationPayload

if TYPE_CHECKING:
    from pathlib import Path


def test_schema_accepts_camel_case_snapshot(snapshot_dir: Path) -> None:
    parsed = ConfigurationPayload.model_validate_json((snapshot_dir / "docker.json").read_bytes())

    assert parsed.http is not None
    router = parsed.http.routers["whoami"]
    assert router.entry_points == ["web"]
    assert router.priority == 10
    balancer = parsed.http.services["whoami"].load_balancer
    assert balancer is not None
    assert balancer.pass_host_header is True
    assert parsed.tcp is not None
    assert parsed.udp is None


def test_schema_ignores_unknown_sections(snapshot_dir: Path) -> None:
    parsed = ConfigurationPayload.model_validate_json((snapshot_dir / "file.json").read_bytes())

    assert parsed.udp is not None
    assert "unknownSection" not in parsed.model_dump(by_alias=True)


def test_schema_accepts_python_field_names() -> None:
    parsed = ConfigurationPayload.model_validate(
        {"http": {"routers": {"web": {"entry_points": ["web"], "rule": "Path(`/`)"}}}}
    )

    assert parsed.http is not None
    assert parsed.http.routers["web"].entry_points == ["web"]
