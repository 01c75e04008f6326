"""Errors raised by jirac. Every one of them ends the run with exit status 1."""

from typing import Optional

from toolkit_utils import GitError, ToolkitError


class UsageError(ToolkitError):
    """Raised for a bad, missing or unknown command line flag."""

    pass


class DependencyMissingError(ToolkitError):
    """Raised when a required executable is not on PATH."""

    def __init__(self, tool: str, hint: Optional[str] = None):
        self.tool = tool
        message = f"Required dependency '{tool}' was not found on PATH"
        if hint:
            message = f"{message} ({hint})"
        super().__init__(message)


class NotAGitRepositoryError(GitError):
    """Raised when no git working tree encloses the current directory."""

    pass


class NotAMavenProjectError(ToolkitError):
    """Raised when the repository root holds no pom.xml."""

    pass


class PomParseError(ToolkitError):
    """Raised when the pom.xml is not well-formed XML."""

    pass


class MissingProjectFieldError(ToolkitError):
    """Raised when the POM lacks one of name, version or scm url."""

    LABELS = {
        "name": "project name",
        "version": "project version",
        "scm_url": "scm url",
    }

    def __init__(self, field: str, pom_path: str):
        self.field = field
        self.pom_path = pom_path
        label = self.LABELS.get(field, field)
        super().__init__(f"no {label} found in {pom_path}")


class NoMatchingCommitsError(ToolkitError):
    """Raised when --grep matches none of the user's commits."""

    def __init__(self, pattern: str):
        self.pattern = pattern
        super().__init__(f"No commits found matching '{pattern}'")


class NoPushedCommitsError(ToolkitError):
    """Raised when the branch holds no commit by the current user."""

    def __init__(self, author: str, branch: str):
        self.author = author
        self.branch = branch
        super().__init__(f"No pushed commits by '{author}' found on {branch}")


class ClipboardError(ToolkitError):
    """Raised when the clipboard tool fails."""

    pass
