# cli.py
# bilal [--config PATH] [--json] [--color | --no-color] [-v] {all,current,next}

from __future__ import annotations
from datetime import datetime
import argparse
import logging
import sys

from colorama import just_fix_windows_console

from . import __version__
from .calculation import compute_snapshot
from .config import load_config
from .error import BilalError
from .output import Printer

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bilal", description="Prayer times in your terminal.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-c", "--config", metavar="PATH",
                        help="config file (default: $BILAL_CONFIG or ~/.config/bilal/config.toml)")
    parser.add_argument("--json", action="store_true", dest="json_format",
                        help="print a status-bar record instead of plain text")
    parser.add_argument("--color", action=argparse.BooleanOptionalAction, default=None,
                        help="highlight the current prayer when little time is left")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")

    sub = parser.add_subparsers(dest="command", metavar="COMMAND")
    sub.add_parser("all", help="show every time for today")
    sub.add_parser("current", help="show the current prayer and the time left (default)")
    nxt = sub.add_parser("next", help="show the next prayer")
    nxt.add_argument("-r", "--remaining", action="store_true",
                     help="show the time left instead of the clock time")
    return parser


def run(args: argparse.Namespace, now: datetime | None = None) -> None:
    config = load_config(args.config)
    snapshot = compute_snapshot(config, now or datetime.now().astimezone())
    show_color = config.color if args.color is None else args.color
    printer = Printer(snapshot, show_color, args.json_format)

    command = args.command or "current"
    logger.debug("command=%s color=%s json=%s", command, show_color, args.json_format)
    if command == "all":
        printer.all()
    elif command == "next":
        if args.remaining:
            printer.next_remaining()
        else:
            printer.next()
    else:
        printer.current()


def main(argv: list[str] | None = None, now: datetime | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    just_fix_windows_console()
    try:
        run(args, now)
    except BilalError as exc:
        logger.debug("failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0
