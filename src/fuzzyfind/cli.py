"""
Command line entry point.

Usage:
    fuzzyfind "term"                  # Search the current directory
    fuzzyfind -i "Term"               # Case-insensitive search
    fuzzyfind --root src "term"       # Search below src/
    fuzzyfind -v "term"               # Diagnostic output on stderr
"""

import argparse
import sys
from typing import List, Optional

from . import __version__
from .config import SearchConfig
from .errors import UserInputError
from .finder import Finder
from .utils import configure_logging, get_logger

logger = get_logger("fuzzyfind.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='fuzzyfind',
        description='Find files whose path fuzzily matches a search term, honouring ignore files'
    )
    parser.add_argument('term', help='Search term')
    parser.add_argument('-i', '--insensitive', action='store_true', default=None,
                        help='Case-insensitive matching')
    parser.add_argument('-v', '--verbose', action='store_true', help='Print diagnostic output to stderr')
    parser.add_argument('--root', default='.', help='Directory to search (default: current directory)')
    parser.add_argument('--ignore-file', dest='ignore_filename', default=None,
                        help='Name of ignore files to honour (default: .gitignore)')
    parser.add_argument('--exclude', action='append', default=[], metavar='PATTERN',
                        help='Extra ignore pattern applied at the root (repeatable)')
    parser.add_argument('--no-defaults', action='store_true',
                        help='Do not exclude version control directories by default')
    parser.add_argument('--log-level', help='Log level (default: FUZZYFIND_LOG_LEVEL or WARNING)')
    parser.add_argument('--log-file', help='Also write logs to this file')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def config_from_args(args: argparse.Namespace) -> SearchConfig:
    """Translate parsed arguments into a SearchConfig, environment as fallback"""
    overrides = {
        'verbose': args.verbose,
        'root': args.root,
        'extra_patterns': args.exclude,
    }
    if args.insensitive is not None:
        overrides['insensitive'] = args.insensitive
    if args.ignore_filename:
        overrides['ignore_filename'] = args.ignore_filename
    if args.no_defaults:
        overrides['use_defaults'] = False
    return SearchConfig.from_env(**overrides)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(log_level=args.log_level, log_file=args.log_file, verbose=args.verbose)

    try:
        config = config_from_args(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    finder = Finder(config)
    try:
        count = finder.run(args.term)
    except UserInputError as e:
        # Reported, but not a failure of the run
        print(str(e), file=sys.stderr)
        return 0

    logger.info(f"Found {count} matches")
    return 0


if __name__ == '__main__':
    sys.exit(main())
