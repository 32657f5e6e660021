"""Root CLI group for symcipher with global flags and command registration."""

from __future__ import annotations

import click

from symcipher import __version__
from symcipher.commands import register_commands
from symcipher.commands._context import AppContext
from symcipher.config.settings import SymcipherSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="symcipher")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--no-interact", is_flag=True, help="Non-interactive mode (no prompts).")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option("--seed", type=int, default=None, help="Seed for generated keys.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    no_interact: bool,
    config_path: str | None,
    seed: int | None,
) -> None:
    """symcipher — 27-symbol substitution cipher CLI."""
    ctx.ensure_object(dict)
    settings = SymcipherSettings.from_cli(
        config_path=config_path,
        seed=seed,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        no_interact=no_interact,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)