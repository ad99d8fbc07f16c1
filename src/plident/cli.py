"""Root CLI group for plident with global flags and command registration."""

from __future__ import annotations

import click

from plident import __version__
from plident.commands import register_commands
from plident.commands._context import AppContext
from plident.config.settings import PlidentSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="plident")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="TOML config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """plident: Polish PESEL and NIP number validator."""
    ctx.ensure_object(dict)
    # Unset flags are left out so PLIDENT_* env vars and the TOML file apply.
    flags = {
        name: True
        for name, value in (
            ("json_output", json_output),
            ("quiet", quiet),
            ("verbose", verbose),
            ("log_json", log_json),
        )
        if value
    }
    settings = PlidentSettings.from_cli(config_path=config_path, **flags)
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
