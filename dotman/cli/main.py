"""Main CLI entry point for dotman."""

import argparse
import sys

import argcomplete

from dotman import __version__
from dotman.cli.subparsers import register_all
from dotman.errors import DotmanError
from dotman.logging import configure_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog='dotman',
        description='Manage dotfile repos and links',
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    subparsers = parser.add_subparsers(dest='command')
    register_all(subparsers)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the dotman CLI."""
    parser = build_parser()
    argcomplete.autocomplete(parser)
    namespace = parser.parse_args(argv)

    handler = getattr(namespace, 'handler', None)
    if handler is None:
        parser.print_help()
        return 1

    configure_logging(verbose=getattr(namespace, 'verbose', False))

    try:
        return handler(namespace)
    except DotmanError as e:
        logger.error('command_failed', command=namespace.command, error=str(e))
        sys.stderr.write(f'Error: {e}\n')
        return 1


if __name__ == '__main__':
    sys.exit(main())
