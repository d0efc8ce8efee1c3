"""dotman link subcommand."""

import argparse
import sys

from dotman.operations import link_repo

from . import _shared


def _handle(namespace: argparse.Namespace) -> int:
    config = _shared.config_from_namespace(namespace)
    result = link_repo(namespace.name, namespace.target_name, config)
    sys.stdout.write(f'Linked {result.source} -> {result.target}\n')
    return 0


def register(subparsers: argparse._SubParsersAction) -> None:
    """Register the link subcommand."""
    parent = _shared.build_common_parent()
    parser = subparsers.add_parser(
        'link',
        parents=[parent],
        help='Replace ~/.config/<target> with a symlink to a stored repo',
        description=(
            'Replace ~/.config/<target> with a symlink to a stored repo. '
            'Anything already at the target is deleted without a backup.'
        ),
    )
    parser.add_argument(
        'name',
        help='Repository name stored under dotman (e.g. nvim-config)',
    )
    parser.add_argument(
        'target_name',
        metavar='target',
        help='Target name under ~/.config (e.g. nvim, alacritty, fish)',
    )
    parser.set_defaults(handler=_handle)
