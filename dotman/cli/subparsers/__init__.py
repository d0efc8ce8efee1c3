"""Subparser registrations for the dotman CLI."""

import argparse

from . import completions, install, link, update


def register_all(subparsers: argparse._SubParsersAction) -> None:
    """Register all dotman subcommands."""
    install.register(subparsers)
    link.register(subparsers)
    update.register(subparsers)
    completions.register(subparsers)
