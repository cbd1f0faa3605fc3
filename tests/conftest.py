from __future__ import annotations

from pathlib import Path
from typing import Sequence

import pytest

from gitaudit.core.types import GitOutput

TRACKED_MAIN = b"* main 1234abc [origin/main] Initial commit\n"
CLEAN_STATUS = (
    b"On branch main\n"
    b"Your branch is up to date with 'origin/main'.\n\n"
    b"nothing to commit, working tree clean\n"
)


class FakeRunner:
    """Git runner returning canned output keyed by subcommand.

    Per-repository overrides are keyed by (path, subcommand).
    """

    def __init__(
        self,
        status: GitOutput | None = None,
        remote: GitOutput | None = None,
        branch: GitOutput | None = None,
    ) -> None:
        self.defaults = {
            "fetch": GitOutput(),
            "status": status or GitOutput(stdout=CLEAN_STATUS),
            "remote": remote or GitOutput(stdout=b"origin\n"),
            "branch": branch or GitOutput(stdout=TRACKED_MAIN),
        }
        self.overrides: dict[tuple[str, str], GitOutput] = {}
        self.calls: list[tuple[str, tuple[str, ...]]] = []

    def set(self, path: str | Path, subcommand: str, output: GitOutput) -> None:
        self.overrides[(str(path), subcommand)] = output

    def __call__(self, repo_path: str, args: Sequence[str]) -> GitOutput:
        self.calls.append((repo_path, tuple(args)))
        key = (str(repo_path), args[0])
        if key in self.overrides:
            return self.overrides[key]
        return self.defaults[args[0]]

    def paths_for(self, subcommand: str) -> list[str]:
        return [path for path, args in self.calls if args[0] == subcommand]


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def fake_runner() -> type[FakeRunner]:
    return FakeRunner


@pytest.fixture
def make_repo(tmp_path: Path):
    """Create a directory under tmp_path with an empty ``.git`` marker directory."""

    def _make(*parts: str) -> Path:
        repo = tmp_path.joinpath(*parts)
        (repo / ".git").mkdir(parents=True)
        return repo

    return _make
