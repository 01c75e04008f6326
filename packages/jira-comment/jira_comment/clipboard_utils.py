"""Clipboard publishing for the rendered comment."""

import os
import platform
import shlex
import subprocess
import tempfile
from typing import Any, Dict, List, Optional

from toolkit_utils.logging_utils import debug

from .constants import CLIPBOARD_COMMANDS
from .errors import ClipboardError


def platform_family(system: Optional[str] = None) -> str:
    """Map platform.system() onto the keys of CLIPBOARD_COMMANDS."""
    system = system if system is not None else platform.system()
    if system == "Darwin":
        return "darwin"
    # ? Cygwin, MinGW and MSYS shells report e.g. "CYGWIN_NT-10.0"
    if system == "Windows" or system.upper().startswith(("CYGWIN", "MINGW", "MSYS")):
        return "windows"
    return "linux"


def get_clipboard_command(
    config: Optional[Dict[str, Any]] = None, system: Optional[str] = None
) -> List[str]:
    """Return the clipboard command line, honouring a configured override."""
    override = (config or {}).get("clipboard", {}).get("command")
    if override:
        return shlex.split(override)
    return list(CLIPBOARD_COMMANDS[platform_family(system)])


def copy_to_clipboard(text: str, command: List[str]) -> None:
    """Hand the text to the clipboard tool through an owner-only temp file.

    Args:
        text: The rendered comment
        command: Clipboard command line, e.g. ["xclip", "-selection", "clipboard"]

    Raises:
        ClipboardError: If the tool cannot be started or exits non-zero
    """
    # * mkstemp creates the file with mode 0600
    fd, path = tempfile.mkstemp(prefix="jirac-comment-", suffix=".txt")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)

        debug(f"Copying {len(text)} characters with {' '.join(command)}")
        with open(path, "rb") as stdin:
            subprocess.run(command, stdin=stdin, check=True)
    except (OSError, subprocess.CalledProcessError) as e:
        raise ClipboardError(
            f"Could not copy the comment with '{' '.join(command)}'", cause=e
        )
    finally:
        if os.path.exists(path):
            os.remove(path)
