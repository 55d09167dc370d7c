"""Subcommand modules for promptline.

Provides register_commands() which uses deferred imports to keep
``promptline --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register every standalone command on the root CLI group."""
    from promptline.commands.explain import explain
    from promptline.commands.module import module
    from promptline.commands.prompt import prompt
    from promptline.commands.timings import timings

    cli.add_command(prompt)
    cli.add_command(module)
    cli.add_command(timings)
    cli.add_command(explain)
