"""dotman completions subcommand."""

import argparse
import sys

import argcomplete

PROG = 'dotman'
SHELLS = ('bash', 'zsh', 'fish', 'tcsh', 'powershell')


def _handle(namespace: argparse.Namespace) -> int:
    sys.stdout.write(argcomplete.shellcode([PROG], shell=namespace.shell))
    return 0


def register(subparsers: argparse._SubParsersAction) -> None:
    """Register the completions subcommand."""
    parser = subparsers.add_parser(
        'completions',
        help=f'Generate shell completions to stdout ({"|".join(SHELLS)})',
    )
    parser.add_argument(
        'shell',
        choices=SHELLS,
        help='Shell to generate completions for',
    )
    parser.set_defaults(handler=_handle)
