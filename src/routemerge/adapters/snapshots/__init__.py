"""Snapshot file adapter package."""

from __future__ import annotations

from .files import (
    SnapshotFormatError,
    load_snapshot,
    load_snapshots,
    render_snapshot,
    write_snapshot,
)
from .schema import ConfigurationPayload
from .translator import dump_configuration, translate_configuration

__all__ = [
    "ConfigurationPayload",
    "SnapshotFormatError",
    "dump_configuration",
    "load_snapshot",
    "load_snapshots",
    "render_snapshot",
    "translate_configuration",
    "write_snapshot",
]
