"""Progress feedback utilities for jira-comment.

This module provides consistent progress indicators for the short, blocking
checks the toolkit runs before doing real work.
"""

from typing import Optional

from halo import Halo


def spinner(
    text: str = "Processing",
    spinner_type: str = "dots",
    color: str = "cyan",
    text_color: Optional[str] = None,
    enabled: bool = True,
) -> Halo:
    """Create a spinner for indeterminate progress operations.

    Args:
        text: Text to display alongside the spinner
        spinner_type: Type of spinner animation ('dots', 'dots12', etc.)
        color: Color of the spinner
        text_color: Color of the text (same as spinner if None)
        enabled: When False the spinner prints nothing at all

    Returns:
        A Halo spinner instance
    """
    return Halo(
        text=text,
        spinner=spinner_type,
        color=color,
        text_color=text_color,
        enabled=enabled,
    )

