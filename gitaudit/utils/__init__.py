"""Utilities package for gitaudit."""

from .git import GitRunner, run_git
from .report import format_report, print_report

__all__ = [
    'GitRunner',
    'run_git',
    'format_report',
    'print_report',
]
