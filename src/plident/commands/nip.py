"""Command: NIP validation."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from plident.commands._base import PlidentCommand

if TYPE_CHECKING:
    from plident.commands._context import AppContext


@click.command(
    cls=PlidentCommand,
    examples="""\
  plident nip 5272944982
  plident --json nip 5272944982
  plident -q nip 1234567890""",
)
@click.argument("number")
@click.pass_obj
def nip(app: AppContext, number: str) -> None:
    """Validate a NIP tax identification NUMBER."""
    app.emit(app.validation.validate_nip(number))
