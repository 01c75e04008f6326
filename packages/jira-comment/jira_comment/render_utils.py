"""Rendering of the Jira comment.

The output uses Jira wiki markup (*bold*, _italic_, ** for a second-level
bullet) and must stay byte-for-byte stable so it pastes cleanly.
"""

from typing import Callable, Dict, List, Optional

from toolkit_utils import render_template

from .constants import (
    DEFAULT_HEADER_TEMPLATE,
    DESCRIPTION_HEADING,
    OVERRIDE_CUSTOM_ANSWERS,
    OVERRIDE_SKIP_ANSWERS,
)
from .interactive_utils import Prompter
from .models import CommitRef, PrintMode, ProjectInfo


def reflow(text: str) -> str:
    """Join the lines of each paragraph, keeping blank-line paragraph breaks.

    Blank (or whitespace-only) lines separate paragraphs; the lines of a
    paragraph are stripped and joined with single spaces. Paragraphs come
    back separated by exactly one blank line.
    """
    paragraphs = []
    current: List[str] = []
    for line in text.splitlines():
        stripped = line.strip()
        if stripped:
            current.append(stripped)
        elif current:
            paragraphs.append(" ".join(current))
            current = []
    if current:
        paragraphs.append(" ".join(current))
    return "\n\n".join(paragraphs)


def display_branch(branch: str) -> str:
    """Drop the remote part of a remote branch name: origin/feature/x -> feature/x."""
    _, sep, name = branch.partition("/")
    return name if sep else branch


def commit_link(scm_url: str, commit: CommitRef) -> str:
    return f"** {scm_url.rstrip('/')}/commit/{commit.full_hash}"


def render_header(
    project: ProjectInfo, branch: str, header_template: Optional[str] = None
) -> str:
    return render_template(
        header_template or DEFAULT_HEADER_TEMPLATE,
        {
            "name": project.name,
            "version": project.version,
            "branch": display_branch(branch),
            "scm_url": project.scm_url,
        },
    ).rstrip("\n")


def choose_description(default: str, prompter: Prompter) -> str:
    """Ask whether to keep, replace or drop the default description.

    Only "Y"/"y" (write a new one) and "S"/"s" (leave it out) are acted on;
    every other answer keeps the default.
    """
    answer = prompter.ask_override_choice(default)
    if answer in OVERRIDE_CUSTOM_ANSWERS:
        description = ""
        while not description.strip():
            description = prompter.ask_description()
        return description
    if answer in OVERRIDE_SKIP_ANSWERS:
        return ""
    return default


def _render_most_recent_first(
    header: str, project: ProjectInfo, commits: List[CommitRef], prompter: Prompter
) -> str:
    lines = [header]
    messages = []
    for commit in commits:
        lines.append(commit_link(project.scm_url, commit))
        if commit.full_message:
            messages.append(commit.full_message)

    description = reflow(choose_description("\n\n".join(messages), prompter))
    if description:
        lines.extend(["", DESCRIPTION_HEADING, description])

    return "\n".join(lines) + "\n"


def _render_oldest_first(
    header: str, project: ProjectInfo, commits: List[CommitRef], prompter: Prompter
) -> str:
    blocks = []
    for commit in reversed(commits):
        block = [f"* _{commit.subject}_", commit_link(project.scm_url, commit)]
        body = reflow(commit.body)
        if body:
            block.append(body)
        blocks.append("\n".join(block))

    return header + "\n" + "\n\n".join(blocks) + "\n"


RENDERERS: Dict[PrintMode, Callable[..., str]] = {
    PrintMode.MOST_RECENT_FIRST: _render_most_recent_first,
    PrintMode.OLDEST_FIRST: _render_oldest_first,
}


def render_comment(
    project: ProjectInfo,
    branch: str,
    commits: List[CommitRef],
    print_mode: PrintMode,
    prompter: Prompter,
    header_template: Optional[str] = None,
) -> str:
    """Render the comment for commits given most recent first.

    Args:
        project: POM metadata
        branch: Remote branch the commits were taken from
        commits: Selected commits in git log order
        print_mode: Layout to use
        prompter: Asked about the description in MOST_RECENT_FIRST mode
        header_template: Optional replacement for the built-in header

    Returns:
        str: The comment text
    """
    header = render_header(project, branch, header_template)
    return RENDERERS[print_mode](header, project, commits, prompter)
