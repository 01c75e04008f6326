"""Command line flags for jirac."""

import argparse
import sys
from typing import List, NoReturn, Optional

from .constants import PROG_NAME
from .errors import UsageError
from .models import PrintMode, RunConfig


class JiracArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that turns usage problems into UsageError.

    argparse exits with status 2 on its own; jirac reports every usage
    problem with status 1 through the common error path instead.
    """

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        raise UsageError(message)


def non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"'{value}' is not a number")
    if number < 0:
        raise argparse.ArgumentTypeError(f"'{value}' must not be negative")
    return number


def print_mode(value: str) -> PrintMode:
    try:
        return PrintMode(int(value))
    except ValueError:
        choices = ", ".join(str(mode.value) for mode in PrintMode)
        raise argparse.ArgumentTypeError(
            f"'{value}' is not a print mode (choose from {choices})"
        )


def non_empty(value: str) -> str:
    if not value.strip():
        raise argparse.ArgumentTypeError("value must not be empty")
    return value


def build_parser() -> argparse.ArgumentParser:
    from . import __version__

    parser = JiracArgumentParser(
        prog=PROG_NAME,
        description=(
            "Build a Jira comment describing pushed commits of a Maven project and"
            " copy it to the clipboard."
        ),
        epilog=(
            "Without --number or --grep the commits are picked in your editor:"
            " start a line with 'x ' to include that commit."
        ),
    )
    parser.add_argument(
        "--number",
        "-n",
        type=non_negative_int,
        metavar="N",
        help="Describe the N most recent commits instead of picking them",
    )
    parser.add_argument(
        "--print-mode",
        "-p",
        type=print_mode,
        default=PrintMode.MOST_RECENT_FIRST,
        metavar="{0,1}",
        help=(
            "0: links most recent first plus one description (default);"
            " 1: oldest first with each commit's subject and body"
        ),
    )
    parser.add_argument(
        "--silent",
        "-s",
        action="store_true",
        help="Only print errors",
    )
    parser.add_argument(
        "--grep",
        "-g",
        type=non_empty,
        metavar="PATTERN",
        help="Describe the commits whose message matches PATTERN (case-sensitive)",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug output")
    parser.add_argument("--config", help="Path to a configuration file")
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"{PROG_NAME} {__version__}",
        help="Show the version of jirac",
    )
    # * The first bare word ends option parsing; it and the rest are ignored
    parser.add_argument("rest", nargs=argparse.REMAINDER, help=argparse.SUPPRESS)
    return parser


def parse_arguments(argv: Optional[List[str]] = None) -> RunConfig:
    """Parse command line arguments into a RunConfig.

    Raises:
        UsageError: For a missing or malformed value or an unknown flag
    """
    args = build_parser().parse_args(argv)
    return RunConfig(
        number=args.number,
        print_mode=args.print_mode,
        silent=args.silent,
        grep=args.grep,
        debug=args.debug,
        config_path=args.config,
    )
