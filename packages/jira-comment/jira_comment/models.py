"""Value types passed between the stages of a jirac run."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


class PrintMode(IntEnum):
    """Ordering and layout of the rendered commits."""

    MOST_RECENT_FIRST = 0
    OLDEST_FIRST = 1


@dataclass(frozen=True)
class RunConfig:
    """Options taken from the command line."""

    number: Optional[int] = None
    print_mode: PrintMode = PrintMode.MOST_RECENT_FIRST
    silent: bool = False
    grep: Optional[str] = None
    debug: bool = False
    config_path: Optional[str] = None

    @property
    def is_interactive_selection(self) -> bool:
        return self.number is None and self.grep is None


@dataclass(frozen=True)
class ProjectInfo:
    name: str
    version: str
    scm_url: str
    pom_path: str
    root_dir: str
    git_dir: str


@dataclass(frozen=True)
class CommitRef:
    short_hash: str
    full_hash: str
    subject: str
    body: str
    full_message: str
