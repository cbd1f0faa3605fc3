"""Terminal rendering of scan reports."""

from typing import List, Tuple

from colorama import Fore, Style

from ..core.types import IssueKind, IssueReport

TITLE_WIDTH = 37

# Sections in precedence order: (category, title)
SECTIONS: List[Tuple[IssueKind, str]] = [
    (IssueKind.NO_GIT_REPO, "Non Git Repos"),
    (IssueKind.NO_REMOTE, "Repos with No Remote Origin"),
    (IssueKind.CURRENT_BRANCH_UNTRACKED, "Repos with Current Branch Untracked"),
    (IssueKind.NOT_COMMITTED, "Repos with Uncommitted Files"),
    (IssueKind.NOT_PUSHED, "Repos with Un-pushed Commits"),
    (IssueKind.HAVE_DIVERGED, "Repos with Diverged Branches"),
]

NO_ISSUES = "No issues found :)"


def _paint(text: str, codes: str, color: bool) -> str:
    if not color:
        return text
    return f"{codes}{text}{Style.RESET_ALL}"


def _count(value: int, color: bool) -> str:
    if value > 0:
        return _paint(str(value), Style.BRIGHT + Fore.RED, color)
    return _paint(str(value), Fore.GREEN, color)


def _header(title: str, value: int, color: bool) -> str:
    dots = "." * max(TITLE_WIDTH - len(title), 0)
    return f"{_paint(title, Style.BRIGHT + Fore.BLUE, color)} {dots} {_count(value, color)}"


def format_report(report: IssueReport, verbose: bool = False, color: bool = True) -> str:
    """Format a report as one section per issue category.

    Args:
        report: Populated scan report
        verbose: Include empty sections and the number of repositories searched
        color: Emit ANSI color codes

    Returns:
        Report text without trailing whitespace
    """
    lines = []
    for kind, title in SECTIONS:
        paths = report.paths(kind)
        if not verbose and not paths:
            continue

        lines.append(_header(title, len(paths), color))
        for path in paths:
            lines.append(f"    {path}")

    if not lines:
        return _paint(NO_ISSUES, Style.BRIGHT + Fore.GREEN, color)

    if verbose:
        lines.append(
            f"{_paint('Repos searched', Style.BRIGHT, color)} "
            f"{'.' * (TITLE_WIDTH - len('Repos searched'))} {report.directories_searched}"
        )

    return "\n".join(lines).rstrip()


def print_report(report: IssueReport, verbose: bool = False, color: bool = True) -> None:
    """Print a formatted report to stdout."""
    print(format_report(report, verbose=verbose, color=color))
