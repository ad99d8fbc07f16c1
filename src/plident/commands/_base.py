"""Click command class shared by the plident subcommands.

``--help`` stays short; worked examples (valid and invalid numbers, the
match options) are printed by ``--examples`` instead.
"""

from __future__ import annotations

from typing import Any

import click


class PlidentCommand(click.Command):
    """Click Command that adds an eager ``--examples`` flag when given examples."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        if examples:
            self.params.append(_examples_option(examples))


def _examples_option(examples: str) -> click.Option:
    def show(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=show,
        help="Show usage examples.",
    )
