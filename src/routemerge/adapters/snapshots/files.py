"""Read and write snapshot files."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from pydantic import ValidationError

from .schema import ConfigurationPayload
from .translator import dump_configuration, translate_configuration

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from routemerge.domain.model import Configuration


log = logging.getLogger(__name__)


class SnapshotFormatError(ValueError):
    """Raised when a snapshot file is not valid dynamic configuration JSON."""

    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        super().__init__(f"Invalid snapshot file {path}: {detail}")


def load_snapshot(path: Path) -> Configuration:
    try:
        payload = ConfigurationPayload.model_validate_json(path.read_bytes())
    except ValidationError as exc:
        raise SnapshotFormatError(path, str(exc)) from exc
    return translate_configuration(payload)


def load_snapshots(paths_by_source: Mapping[str, Path]) -> dict[str, Configuration]:
    """Load one snapshot per source identifier."""

    snapshots: dict[str, Configuration] = {}
    for source, path in paths_by_source.items():
        log.debug("Loading snapshot for source=%s from %s", source, path)
        snapshots[source] = load_snapshot(path)
    return snapshots


def render_snapshot(configuration: Configuration) -> str:
    return json.dumps(dump_configuration(configuration), indent=2) + "\n"


def write_snapshot(configuration: Configuration, path: Path) -> None:
    path.write_text(render_snapshot(configuration), encoding="utf-8")
