"""Traversal engine: find repositories beneath a root directory."""

import os
import logging

from .classifier import RepoClassifier
from .types import IssueReport
from ..utils.git import GitRunner, run_git, has_git_marker

logger = logging.getLogger('gitaudit')

DEFAULT_DEPTH = 3


def scan(
    root: str,
    depth_limit: int,
    report: IssueReport,
    fetch: bool = True,
    runner: GitRunner = run_git
) -> None:
    """Walk a directory tree and classify every repository found.

    A directory carrying a ``.git`` marker is classified and never descended
    into. Other directories are listed and their subdirectories visited with
    one less level of depth.

    Args:
        root: Directory to start from
        depth_limit: Directory levels that may still be explored (0 = none)
        report: Accumulator to update
        fetch: Whether to run ``git fetch`` before checking each repository
        runner: Callable used to run git queries

    Raises:
        ScanError: If git cannot be run or produces unparseable output
    """
    classifier = RepoClassifier(runner=runner, fetch=fetch)
    _walk(root, depth_limit, report, classifier)


def _walk(root: str, depth_limit: int, report: IssueReport, classifier: RepoClassifier) -> None:
    if depth_limit < 1:
        return

    if has_git_marker(root):
        classifier.classify(root, report)
        return

    try:
        with os.scandir(root) as entries:
            subdirs = [entry.path for entry in entries if _is_dir(entry)]
    except OSError as e:
        logger.warning(f"Failed to read dir {root}: {e}")
        return

    for subdir in subdirs:
        _walk(subdir, depth_limit - 1, report, classifier)


def _is_dir(entry: os.DirEntry) -> bool:
    """Check if a directory entry is a real directory (links are not followed)."""
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError as e:
        logger.warning(f"Failed to stat {entry.path}: {e}")
        return False


def find_issues(
    root: str = ".",
    depth_limit: int = DEFAULT_DEPTH,
    fetch: bool = True,
    runner: GitRunner = run_git
) -> IssueReport:
    """Scan a directory tree and return a fresh report.

    Args:
        root: Directory to start from
        depth_limit: Maximum directory depth to explore
        fetch: Whether to fetch each repository before checking it
        runner: Callable used to run git queries

    Returns:
        Populated IssueReport
    """
    report = IssueReport()
    logger.info(f"Scanning {root} (depth {depth_limit}, fetch: {fetch})")
    scan(root, depth_limit, report, fetch=fetch, runner=runner)
    logger.info(
        f"Searched {report.directories_searched} repositories, "
        f"{report.total_issues} with issues"
    )
    return report
