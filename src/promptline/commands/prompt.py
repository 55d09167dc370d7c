"""Command: print the full prompt."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from promptline.commands._base import PromptCommand, render_options

if TYPE_CHECKING:
    from promptline.commands._context import AppContext


@click.command(
    cls=PromptCommand,
    examples="""\
  promptline prompt
  promptline prompt --shell zsh --status 1 --cmd-duration 4200
  promptline prompt --shell bash --jobs 2 --keymap vicmd""",
)
@render_options
@click.pass_obj
def prompt(app: AppContext, **options: Any) -> None:
    """Print the prompt for the current directory."""
    from promptline.output.prompt import get_prompt

    app.emit(get_prompt(app.render_context(**options)))
