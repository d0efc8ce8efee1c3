"""dotman update subcommand."""

import argparse
import sys

from dotman.operations import update_repos

from . import _shared


def _handle(namespace: argparse.Namespace) -> int:
    config = _shared.config_from_namespace(namespace)
    summary = update_repos(config)
    sys.stdout.write(
        f'Updated {summary.updated} repositories (skipped {summary.skipped}).\n',
    )
    if summary.failed:
        sys.stdout.write(f'{summary.failed} repositories failed to update.\n')
    return 0


def register(subparsers: argparse._SubParsersAction) -> None:
    """Register the update subcommand."""
    parent = _shared.build_common_parent()
    parser = subparsers.add_parser(
        'update',
        parents=[parent],
        help='Pull latest changes for all stored repos',
    )
    parser.set_defaults(handler=_handle)
