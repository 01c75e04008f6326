"""
End-to-end tests of a jirac run against a throwaway Maven project.
"""

from unittest.mock import patch

import pytest

from jira_comment.main import main


@pytest.fixture
def run_jirac(git_project, monkeypatch):
    """Run main() inside the project with clipboard and PATH checks stubbed."""
    monkeypatch.chdir(git_project.dir)
    copied = []

    def _run(argv, prompter):
        with patch("jira_comment.main.check_dependencies"), patch(
            "jira_comment.main.copy_to_clipboard",
            side_effect=lambda text, command: copied.append(text),
        ):
            status = main(argv, prompter=prompter)
        return status, copied

    return _run


def test_number_two_most_recent_first(git_project, run_jirac, make_prompter):
    prompter = make_prompter(override="")

    status, copied = run_jirac(["--number", "2", "--print-mode", "0", "-s"], prompter)

    assert status == 0
    assert len(copied) == 1
    lines = copied[0].splitlines()
    links = [line for line in lines if line.startswith("** ")]
    assert links == [
        f"** {git_project.scm_url}/commit/{git_project.docs.full}",
        f"** {git_project.scm_url}/commit/{git_project.parser.full}",
    ]

    description = copied[0].split("*Description:*\n", 1)[1]
    assert description == (
        "Update docs JIRA-2\n\nDocs body.\n\nAdd parser\n\n"
        "The parser reads the input.\n\nSecond paragraph.\n"
    )
    assert lines[:5] == [
        "*Project:* Widget",
        "*Version:* 1.2.3",
        "*Branch:* main",
        f"*SCM:* {git_project.scm_url}",
        "*Commits:*",
    ]


def test_grep_oldest_first(git_project, run_jirac, make_prompter):
    status, copied = run_jirac(["-g", "JIRA", "-p", "1", "-s"], make_prompter())

    assert status == 0
    # * Only Jane's JIRA commit; the other committer's one is left out
    assert copied[0].endswith(
        "* _Update docs JIRA-2_\n"
        f"** {git_project.scm_url}/commit/{git_project.docs.full}\n"
        "Docs body.\n"
    )
    assert git_project.fix.full not in copied[0]


def test_grep_without_match_exits_one(run_jirac, make_prompter, capsys):
    status, copied = run_jirac(["--grep", "NOPE-42", "-s"], make_prompter())

    assert status == 1
    assert copied == []
    assert "NOPE-42" in capsys.readouterr().out


def test_missing_project_name_exits_one(
    git_project, run_jirac, make_prompter, pom_factory, capsys
):
    (git_project.dir / "pom.xml").write_text(pom_factory(name=""), encoding="utf-8")

    status, copied = run_jirac(["-n", "1", "-s"], make_prompter())

    assert status == 1
    assert copied == []
    assert "no project name found" in capsys.readouterr().out


def test_no_pushed_commits_exits_one(git_project, run_jirac, make_prompter, capsys):
    with git_project.repo.config_writer() as writer:
        writer.set_value("user", "name", "Somebody Else")

    status, _ = run_jirac(["-n", "1", "-s"], make_prompter())

    assert status == 1
    assert "Somebody Else" in capsys.readouterr().out


def test_branch_is_picked_when_head_has_no_upstream(
    git_project, run_jirac, make_prompter
):
    git_project.repo.git.checkout("-b", "local-only")
    prompter = make_prompter(override="S", branch="origin/main")

    status, copied = run_jirac(["-n", "1", "-s"], prompter)

    assert status == 0
    assert prompter.offered_branches == ["origin/main"]
    assert "*Branch:* main" in copied[0]
    assert "*Description:*" not in copied[0]


def test_interactive_run_asks_for_editor_then_picks(
    git_project, run_jirac, make_prompter
):
    prompter = make_prompter(
        override="y",
        descriptions=["Reworked the\nparser."],
        editor="nano",
        marks=[{git_project.parser.short}],
    )

    status, copied = run_jirac(["-s"], prompter)

    assert status == 0
    assert prompter.editor_defaults == ["vi"]
    assert len(prompter.edited_files) == 1
    assert f"** {git_project.scm_url}/commit/{git_project.parser.full}" in copied[0]
    assert copied[0].endswith("*Description:*\nReworked the parser.\n")


def test_not_a_git_repository(tmp_path, monkeypatch, make_prompter, capsys):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.chdir(tmp_path)

    with patch("jira_comment.main.check_dependencies"):
        status = main(["-n", "1", "-s"], prompter=make_prompter())

    assert status == 1
    assert "Not a git repository" in capsys.readouterr().out
