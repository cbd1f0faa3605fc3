"""Core types for repository issue reports."""

from dataclasses import dataclass, field
from typing import List
from enum import Enum


class IssueKind(Enum):
    """Issue categories, declared in precedence order.

    The value of each member is the name of the matching list on IssueReport.
    """
    NO_GIT_REPO = "no_git_repo"
    NO_REMOTE = "no_remote"
    CURRENT_BRANCH_UNTRACKED = "current_branch_untracked"
    NOT_COMMITTED = "not_committed"
    NOT_PUSHED = "not_pushed"
    HAVE_DIVERGED = "have_diverged"


@dataclass
class GitOutput:
    """Captured output of a single git invocation."""
    stdout: bytes = b""
    stderr: bytes = b""
    returncode: int = 0


@dataclass
class IssueReport:
    """Accumulator for a scan.

    Each repository inspected bumps directories_searched once and lands in at
    most one of the six lists.
    """
    directories_searched: int = 0
    no_git_repo: List[str] = field(default_factory=list)
    no_remote: List[str] = field(default_factory=list)
    current_branch_untracked: List[str] = field(default_factory=list)
    not_committed: List[str] = field(default_factory=list)
    not_pushed: List[str] = field(default_factory=list)
    have_diverged: List[str] = field(default_factory=list)

    def add(self, kind: IssueKind, path: str) -> None:
        """Record a repository path under an issue category."""
        self.paths(kind).append(path)

    def paths(self, kind: IssueKind) -> List[str]:
        """Get the list of paths recorded for a category."""
        return getattr(self, kind.value)

    def count(self, kind: IssueKind) -> int:
        return len(self.paths(kind))

    @property
    def total_issues(self) -> int:
        """Total number of flagged repositories."""
        return sum(self.count(kind) for kind in IssueKind)
