"""Command: explain each part of the prompt."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from promptline.commands._base import PromptCommand, render_options

if TYPE_CHECKING:
    from promptline.commands._context import AppContext


@click.command(
    cls=PromptCommand,
    examples="""\
  promptline explain
  promptline explain --terminal-width 100""",
)
@render_options
@click.pass_obj
def explain(app: AppContext, **options: Any) -> None:
    """Print every visible module with its value, duration and description."""
    from promptline.output.diagnostics import render_explain
    from promptline.services.composer import compute_modules

    context = app.render_context(**options)
    app.emit(render_explain(compute_modules(context), context.terminal_width))
