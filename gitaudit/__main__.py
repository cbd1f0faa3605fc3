"""Main entry point for the gitaudit CLI."""

from dotenv import load_dotenv
load_dotenv()

import sys
import argparse

from colorama import init as colorama_init

from .config import Config, DEFAULT_DEPTH
from .core.errors import ScanError
from .core.logger import setup_logging
from .core.scanner import find_issues
from .utils.report import print_report


def create_parser() -> argparse.ArgumentParser:
    """Create CLI argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog='gitaudit',
        description=(
            'Check the git status of every repository under a directory, '
            'so you know all your projects are backed up to a remote.'
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Check repositories under the current directory
  gitaudit

  # Check ~/code five levels deep without fetching
  gitaudit ~/code --depth 5 --no-fetch

  # Show every category, even empty ones
  gitaudit -v
        """
    )

    parser.add_argument(
        'path',
        nargs='?',
        default='.',
        help='Directory to scan (default: current directory)'
    )

    scan_group = parser.add_argument_group('scan control')
    scan_group.add_argument(
        '--depth', '-d',
        type=int,
        metavar='N',
        help=f'Directory levels to search (default: GITAUDIT_DEPTH or {DEFAULT_DEPTH})'
    )
    scan_group.add_argument(
        '--no-fetch', '-n',
        action='store_true',
        help='Do not run git fetch before checking each repository'
    )

    output_group = parser.add_argument_group('output')
    output_group.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Show empty categories and progress logs'
    )
    output_group.add_argument(
        '--no-color',
        action='store_true',
        help='Disable colored output (also honours NO_COLOR)'
    )
    output_group.add_argument(
        '--log-file',
        metavar='PATH',
        help='Also write logs to this file (default: GITAUDIT_LOG_FILE)'
    )

    return parser


def main(argv=None):
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = Config.from_env_and_args(
            root=args.path,
            depth=args.depth,
            no_fetch=args.no_fetch,
            verbose=args.verbose,
            no_color=args.no_color,
            log_file=args.log_file
        )
    except ValueError as e:
        logger = setup_logging()
        logger.error(f"Configuration error: {e}")
        return 1

    try:
        logger = setup_logging(verbose=config.verbose, log_file=config.log_file)
    except OSError as e:
        logger = setup_logging()
        logger.error(f"Configuration error: cannot open log file {config.log_file}: {e}")
        return 1

    if config.color:
        colorama_init()

    try:
        report = find_issues(
            root=config.root,
            depth_limit=config.depth,
            fetch=config.fetch
        )
    except ScanError as e:
        logger.error(str(e))
        return 1
    except KeyboardInterrupt:
        logger.warning("Scan cancelled by user")
        return 130

    print_report(report, verbose=config.verbose, color=config.color)
    return 0


if __name__ == "__main__":
    sys.exit(main())
