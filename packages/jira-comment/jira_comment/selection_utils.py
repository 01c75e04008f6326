"""Commit selection: from flags, or picked by hand in the user's editor."""

import os
import re
import tempfile
from typing import List

from git import Repo
from toolkit_utils import ToolkitError
from toolkit_utils.logging_utils import debug, info, warning

from .constants import DEFAULT_RECENT_COMMITS, SELECTION_HEADER, SELECTION_MARKER
from .errors import NoMatchingCommitsError, NoPushedCommitsError
from .git_utils import get_commit_log, get_recent_commit_lines
from .interactive_utils import Prompter
from .models import RunConfig

MARKED_LINE = re.compile(r"^" + re.escape(SELECTION_MARKER) + r"(\S+)")


def ensure_pushed_commits(repo: Repo, branch: str, author: str) -> None:
    """Fail unless branch holds at least one commit by author.

    Raises:
        NoPushedCommitsError: If there is none
    """
    if not get_commit_log(repo, branch, author, max_count=1):
        raise NoPushedCommitsError(author, branch)


def parse_marked_hashes(text: str) -> List[str]:
    """Collect the token after every line starting with the selection marker.

    Hashes come back in file order.
    """
    hashes = []
    for line in text.splitlines():
        match = MARKED_LINE.match(line)
        if match:
            hashes.append(match.group(1))
    return hashes


def write_selection_file(lines: List[str]) -> str:
    """Write the pick list to an owner-only temporary file and return its path."""
    fd, path = tempfile.mkstemp(prefix="jirac-select-", suffix=".txt")
    with os.fdopen(fd, "w", encoding="utf-8") as f:
        f.write(SELECTION_HEADER + "\n")
        for line in lines:
            f.write(line + "\n")
    return path


def pick_commits_in_editor(
    repo: Repo,
    branch: str,
    author: str,
    prompter: Prompter,
    editor: str,
    recent_count: int = DEFAULT_RECENT_COMMITS,
) -> List[str]:
    """Let the user mark commits in the editor until at least one is marked."""
    lines = get_recent_commit_lines(repo, branch, author, recent_count)

    while True:
        path = write_selection_file(lines)
        try:
            prompter.edit_file(path, editor)
            with open(path, "r", encoding="utf-8") as f:
                hashes = parse_marked_hashes(f.read())
        finally:
            os.remove(path)

        if hashes:
            debug(f"Picked commits: {', '.join(hashes)}")
            return hashes

        warning(f"No commit marked with '{SELECTION_MARKER.strip()}', try again")


def select_commits(
    repo: Repo,
    branch: str,
    author: str,
    run_config: RunConfig,
    prompter: Prompter,
    editor: str = "",
    recent_count: int = DEFAULT_RECENT_COMMITS,
) -> List[str]:
    """Resolve the short hashes to describe, most recent first.

    With --number and/or --grep the log is filtered by them; otherwise the
    user picks in the editor.

    Raises:
        NoMatchingCommitsError: If --grep matches nothing
        ToolkitError: If --number 0 leaves nothing to describe
    """
    if run_config.is_interactive_selection:
        if not editor:
            raise ToolkitError("No editor configured for interactive selection")
        return pick_commits_in_editor(
            repo, branch, author, prompter, editor, recent_count
        )

    hashes = get_commit_log(
        repo, branch, author, max_count=run_config.number, grep=run_config.grep
    )
    if run_config.grep and not hashes:
        raise NoMatchingCommitsError(run_config.grep)
    if not hashes:
        raise ToolkitError("No commits selected")

    info(f"Selected {len(hashes)} commit(s)")
    return hashes
