"""
Tests for the git query layer, run against a throwaway repository.
"""

from unittest.mock import MagicMock

import pytest
from toolkit_utils import GitError

from jira_comment.errors import NotAGitRepositoryError
from jira_comment.git_utils import (
    get_body,
    get_commit,
    get_commit_log,
    get_full_message,
    get_recent_commit_lines,
    get_remote_branch,
    get_root_dir,
    get_subject,
    get_user_name,
    list_remote_branches,
    resolve_full_hash,
)


def test_get_root_dir_from_subdirectory(git_project):
    subdir = git_project.dir / "src" / "main"
    subdir.mkdir(parents=True)

    assert get_root_dir(str(subdir)) == str(git_project.dir)


def test_get_root_dir_outside_repository(tmp_path):
    with pytest.raises(NotAGitRepositoryError):
        get_root_dir(str(tmp_path))


def test_get_user_name(git_project):
    assert get_user_name(git_project.repo) == "Jane Dev"


def test_get_user_name_unset():
    repo = MagicMock()
    repo.config_reader.return_value.get_value.return_value = ""

    with pytest.raises(GitError):
        get_user_name(repo)


def test_get_remote_branch(git_project):
    assert get_remote_branch(git_project.repo) == "origin/main"


def test_get_remote_branch_without_upstream(git_project):
    git_project.repo.git.checkout("-b", "local-only")

    assert get_remote_branch(git_project.repo) == ""


def test_get_remote_branch_detached_head(git_project):
    git_project.repo.git.checkout("--detach")

    assert get_remote_branch(git_project.repo) == ""


def test_list_remote_branches(git_project):
    git_project.repo.git.push("origin", "main:release")

    assert sorted(list_remote_branches(git_project.repo)) == [
        "origin/main",
        "origin/release",
    ]


def test_commit_log_filters_by_committer(git_project):
    hashes = get_commit_log(git_project.repo, "origin/main", git_project.author)

    assert hashes == [
        git_project.docs.short,
        git_project.parser.short,
        git_project.initial.short,
    ]


def test_commit_log_max_count_and_reverse(git_project):
    repo = git_project.repo

    assert get_commit_log(repo, "origin/main", "Jane Dev", max_count=2) == [
        git_project.docs.short,
        git_project.parser.short,
    ]
    assert get_commit_log(repo, "origin/main", "Jane Dev", reverse=True) == [
        git_project.initial.short,
        git_project.parser.short,
        git_project.docs.short,
    ]


def test_commit_log_grep_is_case_sensitive(git_project):
    repo = git_project.repo

    assert get_commit_log(repo, "origin/main", "Jane Dev", grep="JIRA-[0-9]") == [
        git_project.docs.short
    ]
    assert get_commit_log(repo, "origin/main", "Jane Dev", grep="jira-2") == []
    assert get_commit_log(repo, "origin/main", "Other Dev", grep="JIRA") == [
        git_project.fix.short
    ]


def test_commit_log_unknown_branch(git_project):
    with pytest.raises(GitError):
        get_commit_log(git_project.repo, "origin/missing", "Jane Dev")


def test_recent_commit_lines(git_project):
    lines = get_recent_commit_lines(git_project.repo, "origin/main", "Jane Dev", 2)

    assert lines == [
        f"{git_project.docs.short} Update docs JIRA-2",
        f"{git_project.parser.short} Add parser",
    ]


def test_resolve_full_hash(git_project):
    full_hash = resolve_full_hash(git_project.repo, git_project.parser.short)

    assert full_hash == git_project.parser.full
    assert len(full_hash) == 40


def test_resolve_unknown_hash(git_project):
    with pytest.raises(GitError):
        resolve_full_hash(git_project.repo, "0000000")


def test_message_accessors(git_project):
    repo = git_project.repo
    full_hash = git_project.parser.full

    assert get_subject(repo, full_hash) == "Add parser"
    assert get_body(repo, full_hash) == "The parser reads\nthe input.\n\nSecond paragraph."
    assert get_full_message(repo, full_hash) == (
        "Add parser\n\nThe parser reads\nthe input.\n\nSecond paragraph."
    )
    assert get_body(repo, git_project.initial.full) == ""


def test_get_commit(git_project):
    commit = get_commit(git_project.repo, git_project.docs.short)

    assert commit.short_hash == git_project.docs.short
    assert commit.full_hash == git_project.docs.full
    assert commit.subject == "Update docs JIRA-2"
    assert commit.body == "Docs body."
    assert commit.full_message == "Update docs JIRA-2\n\nDocs body."
