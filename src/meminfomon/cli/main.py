"""
Command-line interface for the meminfo monitor.

Loads configuration, builds the sampler, monitor and terminal renderer, and
runs the poll loop until interrupted (or for a fixed number of cycles).
"""

import argparse
import logging
import sys
import tomllib
from pathlib import Path
from typing import List, Optional

from ..collectors import MeminfoCollector
from ..config import get_config, set_config_path
from ..config.validators import LOG_LEVELS
from ..display import TerminalRenderer
from ..models.config import MAX_INTERVAL_SECONDS, MIN_INTERVAL_SECONDS
from ..monitoring import MeminfoMonitor, SignalHandler
from ..validation import (
    ValidationError,
    handle_cli_error,
    validate_positive_float,
    validate_positive_integer,
)

# --- Logging Setup ---
# stdout belongs to the display, diagnostics go to stderr.
logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s [%(levelname)-5.5s] %(name)s:%(filename)s:%(lineno)d\t %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="meminfo-monitor",
        description="Show Dirty and Writeback page cache sizes and their high-water marks.",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="Path to config.toml. Defaults to conf/config.toml in the project root.",
    )
    parser.add_argument(
        "--path",
        type=str,
        help="Meminfo source to poll. Defaults to the configured path (/proc/meminfo).",
    )
    parser.add_argument(
        "-i",
        "--interval",
        type=str,
        help="Seconds between poll cycles. Defaults to the configured interval.",
    )
    parser.add_argument(
        "--once",
        action="store_true",
        help="Poll and render a single time, then exit.",
    )
    parser.add_argument(
        "-n",
        "--cycles",
        type=str,
        help="Stop after this many poll cycles.",
    )
    parser.add_argument(
        "--no-redraw",
        action="store_true",
        help="Append frames instead of clearing the screen between them.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level. Defaults to the configured level.",
    )
    return parser


def main_cli(argv: Optional[List[str]] = None) -> None:
    """
    Main command-line interface for the meminfo monitor.

    Configuration problems exit with status 1. Runtime problems while polling
    (unreadable source, missing or malformed counters) are only logged.

    Args:
        argv: Argument list, defaults to sys.argv[1:].

    Raises:
        SystemExit: On configuration or argument validation errors.
    """
    args = build_parser().parse_args(argv)

    if args.log_level:
        logging.getLogger().setLevel(args.log_level)

    if args.config:
        set_config_path(Path(args.config))

    try:
        app_config = get_config()
    except (ValidationError, tomllib.TOMLDecodeError) as e:
        handle_cli_error(error=e, context="configuration loading", exit_code=1, logger=logger)

    if not args.log_level:
        logging.getLogger().setLevel(app_config.log_level)

    monitor_config = app_config.monitor
    display_config = app_config.display

    try:
        interval = monitor_config.interval_seconds
        if args.interval is not None:
            interval = validate_positive_float(
                args.interval,
                min_value=MIN_INTERVAL_SECONDS,
                max_value=MAX_INTERVAL_SECONDS,
                field_name="--interval",
            )

        max_cycles = None
        if args.once:
            max_cycles = 1
        elif args.cycles is not None:
            max_cycles = validate_positive_integer(args.cycles, field_name="--cycles")

        collector = MeminfoCollector(
            path=args.path or monitor_config.meminfo_path,
            line_pattern=monitor_config.line_pattern,
        )
    except ValidationError as e:
        handle_cli_error(error=e, context="argument validation", exit_code=1, logger=logger)

    renderer = TerminalRenderer(
        stream=sys.stdout,
        bar_width=display_config.bar_width,
        redraw=display_config.redraw and not args.no_redraw and not args.once,
    )
    monitor = MeminfoMonitor(collector, renderer=renderer)

    with SignalHandler(monitor):
        monitor.run(interval, max_cycles=max_cycles)


if __name__ == "__main__":
    main_cli()
