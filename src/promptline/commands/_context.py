"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Configures logging and builds the per-render
:class:`~promptline.infrastructure.context.Context`.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from promptline.domain.shell import Shell
from promptline.infrastructure.context import Context, PromptProperties

if TYPE_CHECKING:
    from promptline.config.settings import PromptSettings


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: PromptSettings) -> None:
        self.settings = settings

        from promptline.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def render_context(
        self,
        *,
        shell: str | None = None,
        status: int | None = None,
        cmd_duration: int | None = None,
        jobs: int = 0,
        keymap: str = "viins",
        terminal_width: int | None = None,
        path: str | None = None,
        **_: Any,
    ) -> Context:
        """Build the render context from a command's render options."""
        return Context(
            self.settings,
            shell=Shell.parse(shell) if shell else None,
            current_dir=Path(path) if path else None,
            properties=PromptProperties(
                status=status,
                cmd_duration=cmd_duration,
                jobs=jobs,
                keymap=keymap,
            ),
            terminal_width=terminal_width,
        )

    def emit(self, text: str, *, newline: bool = False) -> None:
        """Write rendered output to stdout."""
        click.echo(text, nl=newline)
