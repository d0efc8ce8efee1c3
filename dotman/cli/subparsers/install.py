"""dotman install subcommand."""

import argparse
import sys

from dotman.operations import install_repo

from . import _shared


def _handle(namespace: argparse.Namespace) -> int:
    config = _shared.config_from_namespace(namespace)
    result = install_repo(namespace.repo_url, config)
    if result.cloned:
        sys.stdout.write(f'Installed {result.name}\n')
    else:
        sys.stdout.write(f'Repo already exists: {result.dest}\n')
    return 0


def register(subparsers: argparse._SubParsersAction) -> None:
    """Register the install subcommand."""
    parent = _shared.build_common_parent()
    parser = subparsers.add_parser(
        'install',
        parents=[parent],
        help='Clone a git repository into the dotman store',
    )
    parser.add_argument(
        'repo_url',
        help='Git repository URL, e.g. https://github.com/user/nvim-config',
    )
    parser.set_defaults(handler=_handle)
