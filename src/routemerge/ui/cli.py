from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from routemerge.adapters.snapshots import render_snapshot, write_snapshot
from routemerge.app import reconcile_files
from routemerge.config import (
    ConfigurationError,
    configure_logging,
    get_completion_config,
    get_log_level,
)

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Merge dynamic routing configuration snapshots")
    parser.add_argument(
        "--log-level",
        type=str,
        help="Logging level name (defaults to ROUTEMERGE_LOG_LEVEL, then INFO)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    merge = subparsers.add_parser("merge", help="Merge and complete source snapshots")
    merge.add_argument(
        "sources",
        nargs="+",
        metavar="NAME=PATH",
        help="Source identifier and the JSON snapshot file it produced",
    )
    merge.add_argument(
        "--model",
        type=Path,
        help="JSON file with the data rendered into the default rule template",
    )
    merge.add_argument(
        "--default-rule",
        type=str,
        help="Default rule template (defaults to ROUTEMERGE_DEFAULT_RULE)",
    )
    merge.add_argument(
        "--default-router-name",
        type=str,
        help="Name of the router created for a lone service (defaults to config)",
    )
    merge.add_argument(
        "--output",
        type=Path,
        help="Write the merged snapshot to this file instead of stdout",
    )

    return parser.parse_args(list(argv))


def _parse_sources(values: Sequence[str]) -> dict[str, Path]:
    paths_by_source: dict[str, Path] = {}
    for value in values:
        source, separator, path = value.partition("=")
        if not separator or not source or not path:
            raise ValueError(f"Invalid source {value!r}: expected NAME=PATH")
        if source in paths_by_source:
            raise ValueError(f"Duplicate source identifier: {source}")
        paths_by_source[source] = Path(path)
    return paths_by_source


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
        configure_logging(level=get_log_level(parsed_args.log_level))
        paths_by_source = _parse_sources(parsed_args.sources)
    except (ValueError, ConfigurationError):
        configure_logging()
        log.exception("CLI validation error")
        sys.exit(2)

    config = get_completion_config(
        default_rule=parsed_args.default_rule,
        default_router_name=parsed_args.default_router_name,
    )

    try:
        result = reconcile_files(paths_by_source, model_path=parsed_args.model, config=config)
        if parsed_args.output is None:
            sys.stdout.write(render_snapshot(result.configuration))
        else:
            write_snapshot(result.configuration, parsed_args.output)
            log.info("Wrote merged snapshot to %s", parsed_args.output)
    except (ValueError, OSError):
        log.exception("Could not merge snapshots")
        sys.exit(2)
    except Exception:
        log.exception("Fatal error during merge")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
