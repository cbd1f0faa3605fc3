"""Logging configuration and utilities."""

import sys
import logging
from typing import Optional


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> logging.Logger:
    """Configure logging to the console and optionally a file.

    Console output goes to stderr so the report on stdout stays clean.

    Args:
        verbose: Log progress at INFO level instead of warnings only
        log_file: Optional path of a log file to write as well

    Returns:
        Configured logger instance
    """
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=handlers,
        force=True  # Reset any existing configuration
    )

    logger = logging.getLogger('gitaudit')
    if log_file:
        logger.info(f"Log file: {log_file}")

    return logger

