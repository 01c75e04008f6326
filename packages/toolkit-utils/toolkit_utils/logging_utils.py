#!/usr/bin/env python3

import sys
from typing import Any, Dict, Optional, Union

from loguru import logger
from rich.console import Console
from rich.panel import Panel

# * Initialize Rich console for colored output
console = Console()

# * Default log format
DEFAULT_LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level.name:<7}</level> |"
    " <level>{message}</level>"
)

# * Format used when debugging, with the call site of every record
DEBUG_LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level.name:<7}</level> |"
    " <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> -"
    " <level>{message}</level>"
)

# * Map log levels to names and numeric values
LOG_LEVELS = {
    "trace": 5,
    "debug": 10,
    "info": 20,
    "success": 25,
    "warning": 30,
    "error": 40,
    "critical": 50,
}


def setup_logging(
    level: Union[str, int] = "info",
    config: Optional[Dict[str, Any]] = None,
    show_time: Optional[bool] = None,
) -> None:
    """Configure the logger with the specified level and format.

    Args:
        level: The log level (debug, info, warning, error, critical)
        config: Configuration dictionary that may contain logging settings
        show_time: Whether to show timestamp in logs (defaults to the config value)
    """
    # * Remove default handlers
    logger.remove()

    output = (config or {}).get("output", {})

    # * An explicit level from the config only applies when the caller kept the default
    if level == "info" and output.get("log_level"):
        level = output["log_level"]

    if show_time is None:
        show_time = output.get("show_timestamps", True)

    # * Convert string level to numeric if needed
    if isinstance(level, str):
        level = level.lower()
        level = LOG_LEVELS.get(level, LOG_LEVELS["info"])

    log_format = DEBUG_LOG_FORMAT if level <= LOG_LEVELS["debug"] else DEFAULT_LOG_FORMAT
    if not show_time:
        log_format = log_format.replace(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | ", ""
        )

    logger.add(
        sys.stdout,
        format=log_format,
        level=level,
        colorize=output.get("color", True),
    )


# * Helper functions for common logging patterns


def info(message: str, *args, **kwargs):
    """Log an info message."""
    logger.info(message, *args, **kwargs)


def debug(message: str, *args, **kwargs):
    """Log a debug message."""
    logger.debug(message, *args, **kwargs)


def success(message: str, *args, **kwargs):
    """Log a success message."""
    logger.success(message, *args, **kwargs)


def warning(message: str, *args, **kwargs):
    """Log a warning message."""
    logger.warning(message, *args, **kwargs)


def error(message: str, *args, **kwargs):
    """Log an error message."""
    logger.error(message, *args, **kwargs)


# * Rich console output helpers for special formatting cases


def print_banner(title: str, subtitle: Optional[str] = None):
    """Print the application banner."""
    console.print(
        Panel.fit(
            f"[bold cyan]{title}[/bold cyan]"
            + (f"\n[dim]{subtitle}[/dim]" if subtitle else ""),
            border_style="cyan",
        )
    )


def print_section(title: str, content: str):
    """Print a generic section with a title."""
    console.print(f"\n[bold yellow]--- {title} ---[/bold yellow]")
    if content:
        # ? markup=False keeps Jira markup like [~user] from being eaten by rich
        console.print(content, markup=False, highlight=False)
        console.print(f"[bold yellow]--- End {title} ---[/bold yellow]")
