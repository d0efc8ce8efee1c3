"""Helpers shared by the dotman subcommands."""

import argparse
from pathlib import Path

from dotman.config import DotmanConfig, load_config


def build_common_parent() -> argparse.ArgumentParser:
    """Options accepted by every subcommand that touches the store."""
    parent = argparse.ArgumentParser(add_help=False)
    parent.add_argument(
        '-v',
        '--verbose',
        action='store_true',
        help='Enable verbose logging',
    )
    parent.add_argument(
        '--store',
        type=Path,
        default=None,
        help='Store directory holding the repositories (default: /usr/local/share/dotman)',
    )
    parent.add_argument(
        '--config',
        type=Path,
        default=None,
        help='Path to a dotman YAML configuration file',
    )
    return parent


def config_from_namespace(namespace: argparse.Namespace) -> DotmanConfig:
    """Load configuration, letting command line options win."""
    return load_config(
        namespace.config,
        store_override=namespace.store,
    )
