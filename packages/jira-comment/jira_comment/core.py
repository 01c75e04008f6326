#!/usr/bin/env python3

"""
Core API functionality for jira-comment.

This module strings the stages together into one call that returns the
comment text. It doesn't touch the clipboard or print anything besides log
lines; all questions go through the given Prompter.
"""

from typing import Any, Dict, Optional

from git import Repo
from toolkit_utils import load_template
from toolkit_utils.logging_utils import info, warning

from .config import get_editor_command
from .constants import DEFAULT_HEADER_TEMPLATE
from .git_utils import (
    get_commit,
    get_git_dir,
    get_remote_branch,
    get_root_dir,
    get_user_name,
    list_remote_branches,
    open_repo,
)
from .interactive_utils import Prompter
from .models import RunConfig
from .pom_utils import read_project_info
from .render_utils import render_comment
from .selection_utils import ensure_pushed_commits, select_commits


def resolve_branch(repo: Repo, prompter: Prompter) -> str:
    """Use the upstream of HEAD, or let the user pick a remote branch."""
    branch = get_remote_branch(repo)
    if branch:
        info(f"Using upstream branch {branch}")
        return branch

    warning("The current branch has no upstream branch")
    return prompter.select_branch(list_remote_branches(repo))


def load_header_template(config: Dict[str, Any]) -> Optional[str]:
    template_path = config["templates"].get("header_template")
    if not template_path:
        return None
    return load_template(
        template_path=template_path,
        default_template_content=DEFAULT_HEADER_TEMPLATE,
        template_type="header",
    )


def build_comment(
    run_config: RunConfig,
    config: Dict[str, Any],
    prompter: Prompter,
    cwd: str = ".",
) -> str:
    """
    Build the Jira comment for the repository enclosing cwd.

    Args:
        run_config: Options from the command line
        config: Loaded settings
        prompter: Source of interactive answers
        cwd: Directory inside the repository

    Returns:
        str: The rendered comment
    """
    root_dir = get_root_dir(cwd)
    repo = open_repo(root_dir)
    project = read_project_info(root_dir, get_git_dir(repo))
    info(f"Project {project.name} {project.version} ({project.scm_url})")

    author = get_user_name(repo)
    branch = resolve_branch(repo, prompter)
    ensure_pushed_commits(repo, branch, author)

    editor = ""
    if run_config.is_interactive_selection:
        editor = get_editor_command(config, prompter)

    hashes = select_commits(
        repo,
        branch,
        author,
        run_config,
        prompter,
        editor=editor,
        recent_count=config["git"]["recent_commits"],
    )
    commits = [get_commit(repo, short_hash) for short_hash in hashes]

    return render_comment(
        project,
        branch,
        commits,
        run_config.print_mode,
        prompter,
        header_template=load_header_template(config),
    )
