"""Command: show how long each module took."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from promptline.commands._base import PromptCommand, render_options

if TYPE_CHECKING:
    from promptline.commands._context import AppContext


@click.command(
    cls=PromptCommand,
    examples="""\
  promptline timings
  promptline timings --path ~/src/project""",
)
@render_options
@click.pass_obj
def timings(app: AppContext, **options: Any) -> None:
    """Print the computation time of every module in the prompt."""
    from promptline.output.diagnostics import render_timings
    from promptline.services.composer import compute_modules

    context = app.render_context(**options)
    app.emit(render_timings(compute_modules(context)))
