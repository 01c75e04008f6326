"""Checks for the external executables jirac shells out to."""

import shutil
from typing import Any, Dict, List, Optional

from toolkit_utils.logging_utils import debug
from toolkit_utils.progress_utils import spinner

from .clipboard_utils import get_clipboard_command
from .constants import INSTALL_HINTS
from .errors import DependencyMissingError


def required_tools(
    config: Optional[Dict[str, Any]] = None, system: Optional[str] = None
) -> List[str]:
    return [get_clipboard_command(config, system)[0], "git"]


def check_dependencies(
    config: Optional[Dict[str, Any]] = None,
    silent: bool = False,
    system: Optional[str] = None,
) -> None:
    """Verify that every required executable is on PATH.

    Args:
        config: Loaded settings (for a clipboard command override)
        silent: Suppress the progress output
        system: Platform name, defaults to platform.system()

    Raises:
        DependencyMissingError: For the first tool that cannot be found
    """
    for tool in required_tools(config, system):
        s = spinner(f"Checking for {tool}", enabled=not silent)
        s.start()
        location = shutil.which(tool)
        if not location:
            s.fail(f"{tool} not found")
            raise DependencyMissingError(tool, INSTALL_HINTS.get(tool))
        s.succeed(f"Found {tool}")
        debug(f"{tool} resolved to {location}")
