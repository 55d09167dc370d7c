"""Root CLI group for promptline with global flags and command registration."""

from __future__ import annotations

import click

from promptline import __version__
from promptline.commands import register_commands
from promptline.commands._context import AppContext
from promptline.config.settings import PromptSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="promptline")
@click.option("-v", "--verbose", is_flag=True, help="Debug diagnostics on stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """promptline — composable, shell-aware prompt renderer."""
    ctx.ensure_object(dict)
    settings = PromptSettings.from_cli(
        config_path=config_path,
        verbose=verbose or None,
        log_json=log_json or None,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
