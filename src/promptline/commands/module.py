"""Command: print a single module."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from promptline.commands._base import PromptCommand, render_options

if TYPE_CHECKING:
    from promptline.commands._context import AppContext


@click.command(
    cls=PromptCommand,
    examples="""\
  promptline module directory
  promptline module git_branch --path ~/src/project
  promptline module custom.docker""",
)
@click.argument("name")
@render_options
@click.pass_obj
def module(app: AppContext, name: str, **options: Any) -> None:
    """Print the output of module NAME, ignoring the configured format."""
    from promptline.output.prompt import get_module

    app.emit(get_module(name, app.render_context(**options)))
