"""Main CLI entry point for varbind."""

import argparse
import logging
import sys
from typing import Optional

from .commands import inspect_selection, list_variables


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the varbind CLI."""
    parser = argparse.ArgumentParser(
        prog='varbind',
        description='Design variable binding inspector'
    )

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # Inspect command
    inspect_parser = subparsers.add_parser('inspect', help='Report variable bindings of a selected node')
    inspect_parser.add_argument(
        'document',
        type=str,
        help='Path to document YAML/JSON file'
    )
    inspect_parser.add_argument(
        '--node',
        action='append',
        metavar='NODE_ID',
        help='Selected node id (can be specified multiple times)'
    )
    _add_common_arguments(inspect_parser)

    # Variables command
    variables_parser = subparsers.add_parser('variables', help='Report every variable in a document')
    variables_parser.add_argument(
        'document',
        type=str,
        help='Path to document YAML/JSON file'
    )
    variables_parser.add_argument(
        '--group',
        type=str,
        help='Only report variables in this group'
    )
    _add_common_arguments(variables_parser)

    return parser


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        '--format',
        choices=['json', 'yaml'],
        default='json',
        help='Output format'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )
    parser.add_argument(
        '--quiet',
        action='store_true',
        help='Suppress non-error output'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose output'
    )
    parser.add_argument(
        '--log-level',
        choices=['debug', 'info', 'warn', 'error'],
        default='warn',
        help='Set log level'
    )


def configure_logging(args: argparse.Namespace) -> None:
    """Set up logging from the common flags."""
    level_name = 'warning' if args.log_level == 'warn' else args.log_level
    log_level = getattr(logging, level_name.upper())
    if args.debug:
        log_level = logging.DEBUG
    elif args.quiet:
        log_level = logging.ERROR
    elif args.verbose:
        log_level = logging.DEBUG

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def main(args: Optional[list] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if not parsed_args.command:
        parser.print_help()
        return 1

    configure_logging(parsed_args)

    if parsed_args.command == 'inspect':
        return inspect_selection(parsed_args)
    elif parsed_args.command == 'variables':
        return list_variables(parsed_args)
    else:
        parser.print_help()
        return 1


if __name__ == '__main__':
    sys.exit(main())
