"""Subcommand modules for plident.

Provides register_commands() which uses deferred imports to keep
``plident --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone validation commands on the root CLI group."""
    from plident.commands.nip import nip
    from plident.commands.pesel import pesel

    cli.add_command(pesel)
    cli.add_command(nip)
