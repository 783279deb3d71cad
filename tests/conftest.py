from __future__ import annotations

from pathlib import Path

import pytest

from routemerge.config import CompletionConfig

DATA_DIR = Path(__file__).resolve().parent / "data"


@pytest.fixture(scope="session")
def snapshot_dir() -> Path:
    return DATA_DIR / "snapshots"


@pytest.fixture
def snapshot_paths(snapshot_dir: Path) -> dict[str, Path]:
    return {
        "file": snapshot_dir / "file.json",
        "docker": snapshot_dir / "docker.json",
    }


@pytest.fixture
def completion_config() -> CompletionConfig:
    return CompletionConfig(
        default_rule="Host(`{{ normalize(Name) }}.{{ Domain }}`)",
        default_router_name="default",
    )


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "ROUTEMERGE_DEFAULT_RULE",
        "ROUTEMERGE_DEFAULT_ROUTER_NAME",
        "ROUTEMERGE_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
