"""Interactive utilities for jira-comment.

Every question jirac asks goes through a Prompter, so a run can be driven by
scripted answers as well as by a person at a terminal.
"""

import shlex
import subprocess
from abc import ABC, abstractmethod
from typing import List, Optional

import questionary
from toolkit_utils import ToolkitError
from toolkit_utils.logging_utils import debug, print_section


class Prompter(ABC):
    """Synchronous request/response interface for user interaction."""

    @abstractmethod
    def select_branch(self, branches: List[str]) -> str:
        """Pick the branch whose commits are described."""

    @abstractmethod
    def ask_override_choice(self, default_description: str) -> str:
        """Ask whether to replace the default description.

        Returns the raw answer; "Y"/"y" means write a new one, "S"/"s" means
        leave the description out, anything else keeps the default.
        """

    @abstractmethod
    def ask_description(self) -> str:
        """Ask for a free-text description."""

    @abstractmethod
    def ask_editor(self, default: str) -> str:
        """Ask which editor command to use for picking commits."""

    @abstractmethod
    def edit_file(self, path: str, editor: str) -> None:
        """Open path in editor and block until the editor exits."""


def _answered(answer: Optional[str]) -> str:
    # * questionary returns None when the prompt is cancelled with Ctrl-C
    if answer is None:
        raise ToolkitError("Cancelled by user")
    return answer


class QuestionaryPrompter(Prompter):
    """Prompter for a person at a terminal."""

    def select_branch(self, branches: List[str]) -> str:
        if not branches:
            raise ToolkitError("No remote branches found; push your branch first")
        return _answered(
            questionary.select(
                "HEAD has no upstream branch. Which remote branch should be used?",
                choices=branches,
            ).ask()
        )

    def ask_override_choice(self, default_description: str) -> str:
        print_section("Default description", default_description or "(empty)")
        return _answered(
            questionary.text(
                "Override the description? [Y]es to write one, [S]kip to leave it"
                " out, anything else keeps the commit messages:"
            ).ask()
        ).strip()

    def ask_description(self) -> str:
        return _answered(questionary.text("Description:", multiline=True).ask())

    def ask_editor(self, default: str) -> str:
        return _answered(
            questionary.text(
                "Which editor should be used to pick commits?", default=default
            ).ask()
        )

    def edit_file(self, path: str, editor: str) -> None:
        command = shlex.split(editor) + [path]
        debug(f"Opening editor: {' '.join(command)}")
        try:
            subprocess.run(command, check=True)
        except (OSError, subprocess.CalledProcessError) as e:
            raise ToolkitError(f"Editor '{editor}' failed", cause=e)
