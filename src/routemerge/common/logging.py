"""Root logger setup for the routemerge command line."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Send log records to stderr at ``level``.

    stdout is reserved for the merged snapshot, so diagnostics never end up
    in piped JSON. Like ``logging.basicConfig`` this does nothing once the
    root logger has handlers, unless ``force=True``.
    """

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        stream=sys.stderr,
        force=force,
    )
