"""Repository classifier: map git query output to an issue category."""

import logging
from typing import Optional

from .errors import MalformedOutputError
from .types import GitOutput, IssueKind, IssueReport
from ..utils.git import (
    GitRunner,
    run_git,
    fetch_repo,
    get_status,
    get_remotes,
    get_branch_tracking,
)

logger = logging.getLogger('gitaudit')

NOT_A_REPO_PREFIX = b"fatal: not a git repository"
ORIGIN = b"origin"
UNCOMMITTED_MARKERS = (
    b"Changes to be committed:",
    b"Changes not staged for commit:",
    b"Untracked files:",
)
AHEAD_MARKER = b"Your branch is ahead of"
DIVERGED_MARKER = b"have diverged"
BRANCH_QUERY = "`git branch -vv`"


def parse_current_branch(branch_output: bytes, path: str = "") -> str:
    """Extract the checked-out branch name from ``git branch -vv`` output.

    The current branch is the first line whose first whitespace-separated
    token is ``*``; its second token is the branch name.

    Args:
        branch_output: Raw stdout of ``git branch -vv --color=never``
        path: Repository path, used in error messages

    Returns:
        Name of the current branch

    Raises:
        MalformedOutputError: If the output is not UTF-8 or has no
            current-branch line
    """
    try:
        text = branch_output.decode('utf-8')
    except UnicodeDecodeError as e:
        raise MalformedOutputError(path, BRANCH_QUERY, f"output is not valid UTF-8 ({e})") from e

    for line in text.splitlines():
        words = line.split()
        if len(words) >= 2 and words[0] == "*":
            return words[1]

    raise MalformedOutputError(path, BRANCH_QUERY, "could not find current branch")


def classify_outputs(
    status: GitOutput,
    remote: GitOutput,
    branch: GitOutput,
    path: str = ""
) -> Optional[IssueKind]:
    """Decide which issue category a repository falls into.

    Checks run in precedence order and the first match wins.

    Args:
        status: Output of ``git status``
        remote: Output of ``git remote``
        branch: Output of ``git branch -vv --color=never``
        path: Repository path, used in error messages

    Returns:
        The matching IssueKind, or None for a healthy repository

    Raises:
        MalformedOutputError: If the branch listing cannot be parsed
    """
    if status.stderr.startswith(NOT_A_REPO_PREFIX):
        return IssueKind.NO_GIT_REPO

    if ORIGIN not in remote.stdout:
        return IssueKind.NO_REMOTE

    current_branch = parse_current_branch(branch.stdout, path)
    if f"[origin/{current_branch}".encode('utf-8') not in branch.stdout:
        return IssueKind.CURRENT_BRANCH_UNTRACKED

    if any(marker in status.stdout for marker in UNCOMMITTED_MARKERS):
        return IssueKind.NOT_COMMITTED

    if AHEAD_MARKER in status.stdout:
        return IssueKind.NOT_PUSHED

    if DIVERGED_MARKER in status.stdout:
        return IssueKind.HAVE_DIVERGED

    return None


class RepoClassifier:
    """Inspect repositories with git and record their issues."""

    def __init__(self, runner: GitRunner = run_git, fetch: bool = True):
        """Initialize classifier.

        Args:
            runner: Callable used to run git queries
            fetch: Whether to fetch from remote before checking status
        """
        self.runner = runner
        self.fetch = fetch

    def classify(self, path: str, report: IssueReport) -> Optional[IssueKind]:
        """Classify one repository and record the result in the report.

        Args:
            path: Path of a directory carrying a ``.git`` marker
            report: Accumulator to update

        Returns:
            The recorded IssueKind, or None if the repository is healthy

        Raises:
            ScanError: If git cannot be run or its output cannot be parsed
        """
        report.directories_searched += 1

        if self.fetch:
            fetch_repo(path, self.runner)

        # Collect every query before deciding so the verdict comes from one snapshot
        status = get_status(path, self.runner)
        remote = get_remotes(path, self.runner)
        branch = get_branch_tracking(path, self.runner)

        kind = classify_outputs(status, remote, branch, path)
        if kind is None:
            logger.info(f"✓ {path}")
        else:
            logger.info(f"✗ {path}: {kind.value}")
            report.add(kind, path)
        return kind


def classify(
    path: str,
    report: IssueReport,
    fetch: bool = True,
    runner: GitRunner = run_git
) -> Optional[IssueKind]:
    """Classify a single repository into the report."""
    return RepoClassifier(runner=runner, fetch=fetch).classify(path, report)
