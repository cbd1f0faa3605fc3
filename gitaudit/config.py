"""Configuration management for gitaudit."""

import os
from typing import Optional
from dataclasses import dataclass

from .core.scanner import DEFAULT_DEPTH

TRUTHY = {'1', 'true', 'yes', 'on'}


def _env_flag(name: str) -> bool:
    return os.getenv(name, '').strip().lower() in TRUTHY


@dataclass
class Config:
    """Configuration for a scan.

    Merges environment variables with CLI arguments.
    CLI arguments take precedence over environment variables.
    """

    root: str = "."
    depth: int = DEFAULT_DEPTH
    fetch: bool = True
    verbose: bool = False
    color: bool = True
    log_file: Optional[str] = None

    @classmethod
    def from_env_and_args(
        cls,
        root: Optional[str] = None,
        depth: Optional[int] = None,
        no_fetch: bool = False,
        verbose: bool = False,
        no_color: bool = False,
        log_file: Optional[str] = None
    ) -> 'Config':
        """Create config from environment variables and CLI arguments.

        Args:
            root: Directory to scan (default: current directory)
            depth: Recursion depth limit (overrides GITAUDIT_DEPTH)
            no_fetch: Skip ``git fetch`` (or set GITAUDIT_NO_FETCH)
            verbose: Show empty sections and progress logs
            no_color: Disable colored output (or set NO_COLOR)
            log_file: Log file path (overrides GITAUDIT_LOG_FILE)

        Returns:
            Config instance

        Raises:
            ValueError: If the depth is not a non-negative integer
        """
        final_depth = depth
        if final_depth is None:
            env_depth = os.getenv('GITAUDIT_DEPTH')
            if env_depth:
                try:
                    final_depth = int(env_depth)
                except ValueError:
                    raise ValueError(f"GITAUDIT_DEPTH must be an integer, got {env_depth!r}")
            else:
                final_depth = DEFAULT_DEPTH

        if final_depth < 0:
            raise ValueError(f"Depth must be a non-negative integer, got {final_depth}")

        return cls(
            root=root or ".",
            depth=final_depth,
            fetch=not (no_fetch or _env_flag('GITAUDIT_NO_FETCH')),
            verbose=verbose,
            color=not (no_color or bool(os.getenv('NO_COLOR'))),
            log_file=log_file or os.getenv('GITAUDIT_LOG_FILE') or None
        )
