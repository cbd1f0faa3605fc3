"""Core package for gitaudit."""

from .types import (
    IssueKind,
    IssueReport,
    GitOutput,
)

from .errors import ScanError, GitInvocationError, MalformedOutputError

from .logger import setup_logging

__all__ = [
    # Types
    'IssueKind',
    'IssueReport',
    'GitOutput',
    # Errors
    'ScanError',
    'GitInvocationError',
    'MalformedOutputError',
    'setup_logging',
]
