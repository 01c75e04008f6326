"""
Shared fixtures for jira-comment tests.
"""

from pathlib import Path
from types import SimpleNamespace

import pytest
from git import Repo

from jira_comment.interactive_utils import Prompter

AUTHOR = "Jane Dev"
OTHER = "Other Dev"
SCM_URL = "https://github.com/acme/widget"

POM_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<project xmlns="http://maven.apache.org/POM/4.0.0">
  <modelVersion>4.0.0</modelVersion>
  <groupId>com.acme</groupId>
  <artifactId>widget</artifactId>
  {version}
  {name}
  <scm>
    <url>{scm_url}</url>
    <connection>scm:git:https://github.com/acme/widget.git</connection>
  </scm>
</project>
"""


def make_pom(
    name="<name>Widget</name>",
    version="<version>1.2.3</version>",
    scm_url=SCM_URL,
):
    return POM_TEMPLATE.format(name=name, version=version, scm_url=scm_url)


class ScriptedPrompter(Prompter):
    """Prompter answering from a script instead of a terminal."""

    def __init__(
        self,
        override="",
        descriptions=(),
        branch=None,
        editor="vi",
        marks=(),
    ):
        self.override = override
        self.descriptions = list(descriptions)
        self.branch = branch
        self.editor = editor
        # ? One entry per editor round: the short hashes to mark
        self.marks = list(marks)
        self.override_defaults = []
        self.editor_defaults = []
        self.edited_files = []
        self.offered_branches = None

    def select_branch(self, branches):
        self.offered_branches = branches
        return self.branch or branches[0]

    def ask_override_choice(self, default_description):
        self.override_defaults.append(default_description)
        return self.override

    def ask_description(self):
        return self.descriptions.pop(0)

    def ask_editor(self, default):
        self.editor_defaults.append(default)
        return self.editor

    def edit_file(self, path, editor):
        content = Path(path).read_text(encoding="utf-8")
        self.edited_files.append(content)
        wanted = self.marks.pop(0)

        lines = []
        for line in content.splitlines():
            token = line.split(" ", 1)[0]
            lines.append(f"x {line}" if token in wanted else line)
        Path(path).write_text("\n".join(lines) + "\n", encoding="utf-8")


@pytest.fixture
def make_prompter():
    return ScriptedPrompter


def _commit(repo, filename, message, committer=None):
    path = Path(repo.working_tree_dir) / filename
    path.write_text(message, encoding="utf-8")
    repo.git.add(filename)

    env = None
    if committer:
        env = {
            "GIT_AUTHOR_NAME": committer,
            "GIT_AUTHOR_EMAIL": "other@example.com",
            "GIT_COMMITTER_NAME": committer,
            "GIT_COMMITTER_EMAIL": "other@example.com",
        }
    repo.git.commit("-m", message, env=env)
    return SimpleNamespace(
        full=repo.git.rev_parse("HEAD"),
        short=repo.git.log("-1", "--format=%h"),
    )


@pytest.fixture
def git_project(tmp_path, monkeypatch):
    """A Maven project clone whose main branch is pushed to a bare origin.

    Commits, oldest first: initial (Jane), parser (Jane), fix (Other), docs (Jane).
    """
    # * Keep the user's own git and jirac configuration out of the tests
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    for var in ("GIT_AUTHOR_NAME", "GIT_COMMITTER_NAME", "EDITOR", "VISUAL"):
        monkeypatch.delenv(var, raising=False)
    for var in ("JIRAC_EDITOR", "JIRAC_CLIPBOARD", "JIRAC_DEBUG"):
        monkeypatch.delenv(var, raising=False)
    (tmp_path / "home").mkdir()

    origin_dir = tmp_path / "origin.git"
    work_dir = tmp_path / "widget"
    Repo.init(origin_dir, bare=True)

    repo = Repo.init(work_dir)
    repo.git.symbolic_ref("HEAD", "refs/heads/main")
    with repo.config_writer() as writer:
        writer.set_value("user", "name", AUTHOR)
        writer.set_value("user", "email", "jane@example.com")
        writer.set_value("commit", "gpgsign", "false")

    (work_dir / "pom.xml").write_text(make_pom(), encoding="utf-8")
    repo.git.add("pom.xml")
    initial = _commit(repo, "README", "Initial commit")
    parser = _commit(
        repo,
        "parser.txt",
        "Add parser\n\nThe parser reads\nthe input.\n\nSecond paragraph.",
    )
    fix = _commit(repo, "fix.txt", "Fix bug JIRA-1", committer=OTHER)
    docs = _commit(repo, "docs.txt", "Update docs JIRA-2\n\nDocs body.")

    repo.create_remote("origin", str(origin_dir))
    repo.git.push("-u", "origin", "main")

    return SimpleNamespace(
        dir=work_dir,
        repo=repo,
        author=AUTHOR,
        scm_url=SCM_URL,
        initial=initial,
        parser=parser,
        fix=fix,
        docs=docs,
    )


@pytest.fixture
def pom_factory():
    return make_pom
