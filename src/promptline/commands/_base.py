"""Custom Click base class with --examples support, plus shared render options.

``--examples`` prints usage examples and exits, keeping ``--help`` concise.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import click

from promptline.domain.shell import Shell


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class PromptCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


_RENDER_OPTIONS: list[Callable[[Callable[..., Any]], Callable[..., Any]]] = [
    click.option(
        "--shell",
        type=click.Choice([s.value for s in Shell], case_sensitive=False),
        default=None,
        help="Target shell dialect (default: $PROMPTLINE_SHELL).",
    ),
    click.option("-s", "--status", type=int, default=None, help="Exit status of the last command."),
    click.option(
        "-d", "--cmd-duration", type=int, default=None, help="Duration of the last command in ms."
    ),
    click.option("-j", "--jobs", type=int, default=0, help="Number of background jobs."),
    click.option("-k", "--keymap", default="viins", help="Line editor keymap (vicmd for normal mode)."),
    click.option(
        "-w", "--terminal-width", type=int, default=None, help="Terminal columns (default: detect)."
    ),
    click.option(
        "-p",
        "--path",
        type=click.Path(file_okay=False, path_type=str),
        default=None,
        help="Directory the prompt describes (default: CWD).",
    ),
]


def render_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorate a command with the options every render command accepts."""
    for option in reversed(_RENDER_OPTIONS):
        func = option(func)
    return func
