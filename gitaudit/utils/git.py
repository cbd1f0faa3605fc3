"""Git subprocess invocation."""

import os
import subprocess
import logging
from typing import Callable, Sequence

from ..core.errors import GitInvocationError
from ..core.types import GitOutput

logger = logging.getLogger('gitaudit')

# Signature of the callable the classifier uses to query a repository:
# (repo_path, git arguments) -> GitOutput
GitRunner = Callable[[str, Sequence[str]], GitOutput]


def git_env() -> dict:
    """Build the environment for git subprocesses.

    Forces the C locale so status messages keep their English wording.

    Returns:
        Copy of the current environment with LC_ALL overridden
    """
    env = os.environ.copy()
    env['LC_ALL'] = 'C'
    env.pop('LANGUAGE', None)
    return env


def run_git(repo_path: str, args: Sequence[str]) -> GitOutput:
    """Run a git command inside a repository.

    A non-zero exit status is not an error here; callers inspect the
    captured output instead.

    Args:
        repo_path: Directory to run git in
        args: Arguments passed after ``git``

    Returns:
        GitOutput with raw stdout/stderr bytes and the exit status

    Raises:
        GitInvocationError: If the git executable could not be started
    """
    command = ["git", *args]
    logger.debug(f"Running {' '.join(command)} in {repo_path}")
    try:
        result = subprocess.run(
            command,
            cwd=repo_path,
            capture_output=True,
            env=git_env(),
            check=False
        )
    except OSError as e:
        raise GitInvocationError(repo_path, f"`git {' '.join(args)}`", str(e)) from e

    return GitOutput(
        stdout=result.stdout,
        stderr=result.stderr,
        returncode=result.returncode
    )


def fetch_repo(repo_path: str, runner: GitRunner = run_git) -> GitOutput:
    """Fetch from the repository's remotes.

    Args:
        repo_path: Path to the repository
        runner: Git runner to use

    Returns:
        Output of ``git fetch``; its exit status is not interpreted
    """
    output = runner(repo_path, ["fetch"])
    if output.returncode != 0:
        logger.warning(f"git fetch failed in {repo_path} (exit {output.returncode})")
    return output


def get_status(repo_path: str, runner: GitRunner = run_git) -> GitOutput:
    """Get working tree and branch status (``git status``)."""
    return runner(repo_path, ["status"])


def get_remotes(repo_path: str, runner: GitRunner = run_git) -> GitOutput:
    """List configured remotes (``git remote``)."""
    return runner(repo_path, ["remote"])


def get_branch_tracking(repo_path: str, runner: GitRunner = run_git) -> GitOutput:
    """List local branches with their tracking info, without color codes."""
    return runner(repo_path, ["branch", "-vv", "--color=never"])


def has_git_marker(path: str) -> bool:
    """Check if a directory carries a ``.git`` entry (directory or file).

    Args:
        path: Directory to check

    Returns:
        True if ``path/.git`` exists
    """
    return os.path.exists(os.path.join(path, '.git'))
