"""Command: PESEL validation and decoding."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

import click

from plident.commands._base import PlidentCommand

if TYPE_CHECKING:
    from plident.commands._context import AppContext


@click.command(
    cls=PlidentCommand,
    examples="""\
  plident pesel 83082317338
  plident --json pesel 83082317338
  plident pesel 83082317338 --birth-date 1983-08-23 --gender M""",
)
@click.argument("number")
@click.option(
    "--birth-date",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Also check the encoded birth date (YYYY-MM-DD).",
)
@click.option(
    "--gender",
    default=None,
    help="Also check the encoded gender (0/1, or K/W/F/M with the extended policy).",
)
@click.pass_obj
def pesel(app: AppContext, number: str, birth_date: datetime | None, gender: str | None) -> None:
    """Validate a PESEL NUMBER and decode its birth date and gender."""
    app.emit(
        app.validation.validate_pesel(
            number,
            birth_date=birth_date.date() if birth_date else None,
            gender=gender,
        )
    )
