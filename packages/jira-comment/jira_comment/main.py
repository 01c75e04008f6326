#!/usr/bin/env python3

"""
Command-line interface for jira-comment.

This module provides the CLI functionality that wraps around the core API.
"""

import sys
from typing import Any, Dict, List, Optional

from toolkit_utils import ToolkitError, error_handler, handle_error
from toolkit_utils.logging_utils import (
    error,
    print_banner,
    print_section,
    setup_logging,
    success,
    warning,
)

from . import __version__
from .cli import parse_arguments
from .clipboard_utils import copy_to_clipboard, get_clipboard_command
from .config import load_config
from .constants import PROG_NAME
from .core import build_comment
from .dependency_utils import check_dependencies
from .errors import NoMatchingCommitsError
from .interactive_utils import Prompter, QuestionaryPrompter
from .models import RunConfig


def log_level(run_config: RunConfig, config: Dict[str, Any]) -> str:
    # * Silent mode keeps only errors, whatever the config says
    if run_config.silent:
        return "error"
    if run_config.debug or config["output"]["debug"]:
        return "debug"
    return "info"


def run(
    run_config: RunConfig,
    config: Dict[str, Any],
    prompter: Prompter,
    cwd: str = ".",
) -> int:
    """Run every stage after flag parsing and return the exit status."""
    check_dependencies(config, silent=run_config.silent)

    if not run_config.silent:
        print_banner(f"{PROG_NAME} {__version__}", "Jira comment from pushed commits")

    comment = build_comment(run_config, config, prompter, cwd=cwd)
    copy_to_clipboard(comment, get_clipboard_command(config))

    if not run_config.silent:
        print_section("Jira Comment", comment)
    success("Comment copied to clipboard")
    return 0


# --- Main Execution ---


@error_handler(
    message="Unexpected error in jirac", default_return=1, debug_env_var="JIRAC_DEBUG"
)
def main(argv: Optional[List[str]] = None, prompter: Optional[Prompter] = None) -> int:
    debug = False
    # * Plain logging until the flags and settings are known
    setup_logging(level="info", show_time=False)
    try:
        run_config = parse_arguments(argv)
        setup_logging(level="error" if run_config.silent else "info", show_time=False)

        config = load_config(run_config.config_path)
        debug = run_config.debug or bool(config["output"]["debug"])
        setup_logging(level=log_level(run_config, config), config=config)

        return run(run_config, config, prompter or QuestionaryPrompter())
    except NoMatchingCommitsError as e:
        # ? Reported on its own, not as a generic failure
        error(f"{e}; nothing to describe")
        return 1
    except ToolkitError as e:
        handle_error(e, debug=debug)
        return 1
    except KeyboardInterrupt:
        warning("Interrupted")
        return 130


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
