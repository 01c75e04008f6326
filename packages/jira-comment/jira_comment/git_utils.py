"""Git utilities for jira-comment.

Every function here is a read-only query. A failing git invocation is
raised as GitError; deciding whether that ends the run is left to the caller.
"""

from typing import List, Optional

from git import GitCommandError, InvalidGitRepositoryError, NoSuchPathError, Repo
from toolkit_utils import GitError
from toolkit_utils.logging_utils import debug

from .errors import NotAGitRepositoryError
from .models import CommitRef


def _run(repo: Repo, command: str, *args: str) -> str:
    """Run a git subcommand through GitPython, wrapping failures in GitError."""
    debug(f"git {command} {' '.join(args)}")
    try:
        return getattr(repo.git, command.replace("-", "_"))(*args)
    except GitCommandError as e:
        raise GitError(f"git {command} failed", cause=e)


def get_root_dir(path: str = ".") -> str:
    """Get the top-level working tree directory enclosing path.

    Raises:
        NotAGitRepositoryError: If path is not inside a git working tree
    """
    try:
        repo = Repo(path, search_parent_directories=True)
    except (InvalidGitRepositoryError, NoSuchPathError):
        raise NotAGitRepositoryError(f"Not a git repository: {path}")

    if repo.working_tree_dir is None:
        raise NotAGitRepositoryError(f"Repository at {repo.git_dir} has no working tree")
    return str(repo.working_tree_dir)


def open_repo(root_dir: str) -> Repo:
    try:
        return Repo(root_dir)
    except (InvalidGitRepositoryError, NoSuchPathError):
        raise NotAGitRepositoryError(f"Not a git repository: {root_dir}")


def get_git_dir(repo: Repo) -> str:
    return str(repo.git_dir)


def get_user_name(repo: Repo) -> str:
    """Get user.name from the git configuration.

    Raises:
        GitError: If no user name is configured
    """
    name = str(repo.config_reader().get_value("user", "name", "")).strip()
    if not name:
        raise GitError(
            "git user.name is not set; configure it with"
            " 'git config --global user.name \"Your Name\"'"
        )
    return name


def get_remote_branch(repo: Repo) -> str:
    """Get the upstream branch of HEAD, e.g. "origin/main".

    Returns:
        str: The upstream branch name, or "" when HEAD is detached or untracked
    """
    try:
        branch = repo.active_branch
    except TypeError:
        # ? GitPython raises TypeError for a detached HEAD
        return ""

    tracking = branch.tracking_branch()
    return tracking.name if tracking is not None else ""


def list_remote_branches(repo: Repo) -> List[str]:
    """List all remote branch names, without the symbolic <remote>/HEAD refs."""
    branches = []
    for remote in repo.remotes:
        for ref in remote.refs:
            if ref.remote_head == "HEAD":
                continue
            branches.append(ref.name)
    return branches


def get_commit_log(
    repo: Repo,
    branch: str,
    author: str,
    max_count: Optional[int] = None,
    grep: Optional[str] = None,
    reverse: bool = False,
) -> List[str]:
    """Get the short hashes of commits on branch made by author.

    Args:
        repo: The repository
        branch: Branch or revision to walk
        author: Committer name to filter on
        max_count: Maximum number of commits
        grep: Case-sensitive regular expression the message must match
        reverse: Oldest first instead of git's newest first

    Returns:
        list: Short hashes
    """
    args = [branch, "--format=%h", f"--committer={author}"]
    if max_count is not None:
        args.append(f"--max-count={max_count}")
    if grep:
        args.append(f"--grep={grep}")
    if reverse:
        args.append("--reverse")
    args.append("--")

    output = _run(repo, "log", *args)
    return [line.strip() for line in output.splitlines() if line.strip()]


def get_recent_commit_lines(
    repo: Repo, branch: str, author: str, count: int
) -> List[str]:
    """Get "<short hash> <subject>" lines for the author's latest commits."""
    output = _run(
        repo,
        "log",
        branch,
        "--format=%h %s",
        f"--committer={author}",
        f"--max-count={count}",
        "--",
    )
    return [line for line in output.splitlines() if line.strip()]


def resolve_full_hash(repo: Repo, short_hash: str) -> str:
    """Expand a short hash to the full 40 character commit hash.

    Raises:
        GitError: If the hash does not name a commit
    """
    full_hash = _run(repo, "rev-parse", "--verify", f"{short_hash}^{{commit}}").strip()
    if not full_hash:
        raise GitError(f"Could not resolve commit {short_hash}")
    return full_hash


def get_subject(repo: Repo, full_hash: str) -> str:
    return _run(repo, "show", "-s", "--format=%s", full_hash).strip()


def get_body(repo: Repo, full_hash: str) -> str:
    """Everything after the first blank line of the message."""
    return _run(repo, "show", "-s", "--format=%b", full_hash).strip()


def get_full_message(repo: Repo, full_hash: str) -> str:
    return _run(repo, "show", "-s", "--format=%B", full_hash).strip()


def get_commit(repo: Repo, short_hash: str) -> CommitRef:
    """Collect the hashes and message parts of one commit."""
    full_hash = resolve_full_hash(repo, short_hash)
    return CommitRef(
        short_hash=short_hash,
        full_hash=full_hash,
        subject=get_subject(repo, full_hash),
        body=get_body(repo, full_hash),
        full_message=get_full_message(repo, full_hash),
    )
