"""
Command-line interface for csview
"""

import argparse
import sys
import logging
from pathlib import Path
from typing import List, Optional

from ..core import open_document, load_config_from_env, ReaderConfig, ConfigurationError
from ..io.csv_writer import write_csv
from ..render.table import TableRenderer
from ..utils.env_utils import get_env_config, get_log_level
from ..utils.logging_utils import setup_logger

logger = logging.getLogger(__name__)


def setup_cli_logging(verbose: bool = False, env_file: Optional[Path] = None):
    """Setup logging for CLI"""
    if verbose:
        level = logging.DEBUG
    else:
        level = get_log_level(env_file) or logging.WARNING
    setup_logger(name='csview', level=level)


def create_parser() -> argparse.ArgumentParser:
    """Create CLI argument parser"""
    parser = argparse.ArgumentParser(
        prog='csview',
        description='csview: load, write and display CSV documents',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print a file with a header row as an aligned table
  python -m csview.cli.main show data.csv --header

  # Print row/column counts
  python -m csview.cli.main info data.csv --header

  # Parse and re-serialize a file
  python -m csview.cli.main copy data.csv clean.csv --header
        """
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose logging'
    )

    parser.add_argument(
        '--env-file',
        type=Path,
        help='Load settings from this .env file'
    )

    parser.add_argument(
        '--max-line-length',
        type=int,
        help='Line cap in bytes; longer lines are truncated (default: 1024)'
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    show_parser = subparsers.add_parser('show', help='Print a CSV file as a table')
    show_parser.add_argument('path', type=Path, help='CSV file to read')
    show_parser.add_argument('--header', action='store_true', help='First line is a header')

    info_parser = subparsers.add_parser('info', help='Print row and column counts')
    info_parser.add_argument('path', type=Path, help='CSV file to read')
    info_parser.add_argument('--header', action='store_true', help='First line is a header')

    copy_parser = subparsers.add_parser('copy', help='Parse a CSV file and write it back out')
    copy_parser.add_argument('source', type=Path, help='CSV file to read')
    copy_parser.add_argument('destination', type=Path, help='CSV file to write')
    copy_parser.add_argument('--header', action='store_true', help='First line is a header')

    return parser


def build_config(args) -> ReaderConfig:
    """Combine environment settings with command-line overrides"""
    config = load_config_from_env(get_env_config(args.env_file))
    return config.with_overrides(max_line_length=args.max_line_length)


def cmd_show(args, config: ReaderConfig) -> int:
    """Print the table"""
    with open_document(args.path, args.header, config=config) as doc:
        if doc is None:
            print(f"Error: could not read {args.path}", file=sys.stderr)
            return 1
        TableRenderer().show(doc)
    return 0


def cmd_info(args, config: ReaderConfig) -> int:
    """Print the summary"""
    with open_document(args.path, args.header, config=config) as doc:
        if doc is None:
            print(f"Error: could not read {args.path}", file=sys.stderr)
            return 1
        TableRenderer().info(doc)
    return 0


def cmd_copy(args, config: ReaderConfig) -> int:
    """Parse the source and serialize it to the destination"""
    with open_document(args.source, args.header, config=config) as doc:
        if doc is None:
            print(f"Error: could not read {args.source}", file=sys.stderr)
            return 1
        if not write_csv(doc, args.destination, config=config):
            print(f"Error: could not write {args.destination}", file=sys.stderr)
            return 1
        print(f"✓ Copied {doc.num_rows} rows to {args.destination}")
    return 0


COMMANDS = {
    'show': cmd_show,
    'info': cmd_info,
    'copy': cmd_copy,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point"""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    setup_cli_logging(args.verbose, args.env_file)

    try:
        config = build_config(args)
    except ConfigurationError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return 1

    return COMMANDS[args.command](args, config)


if __name__ == '__main__':
    sys.exit(main())
