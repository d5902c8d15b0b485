from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .app.runner import run_gui, run_headless
from .config import Settings
from .errors import DelveError
from .logging_config import configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="delve", description="Delve - dungeon generation and exploration")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--gui", action="store_true", help="Open the Arcade window")
    mode.add_argument("--headless", action="store_true", help="Run in the console (default)")
    parser.add_argument("--seed", type=int, default=None, help="Seed for map generation")
    parser.add_argument("--config", type=Path, default=None, help="YAML settings file")
    parser.add_argument("--moves", default="", help="Headless move script, e.g. 'wwdd' or 'kkll'")
    parser.add_argument("--max-steps", type=int, default=None, help="Stop after N ticks")
    parser.add_argument("--tick-rate", type=float, default=0.0, help="Headless tick rate (Hz), 0 = unthrottled")
    parser.add_argument("--json", action="store_true", help="Print a JSON summary instead of the map")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose >= 2:
        level = logging.DEBUG
    configure_logging(level)

    try:
        settings = Settings.load(args.config)
        if args.seed is not None:
            settings.seed = args.seed
        if args.gui:
            return run_gui(settings)
        return run_headless(
            settings,
            moves=args.moves,
            max_steps=args.max_steps,
            tick_rate=args.tick_rate,
            as_json=args.json,
        )
    except (DelveError, ValueError) as ex:
        logger.error("%s", ex)
        print(f"delve: error: {ex}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
