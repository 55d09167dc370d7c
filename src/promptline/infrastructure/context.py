"""Context — read-only state shared by every module of one prompt render.

Created once per invocation and never mutated afterwards, so module
computations may read it from worker threads without locking.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from promptline.domain.shell import Shell
from promptline.infrastructure.process import CommandOutput, exec_cmd

if TYPE_CHECKING:
    from promptline.config.models import CustomModuleConfig
    from promptline.config.settings import PromptSettings


@dataclass(frozen=True)
class PromptProperties:
    """Values the shell integration passes in about the last command."""

    status: int | None = None
    cmd_duration: int | None = None
    jobs: int = 0
    keymap: str = "viins"


def detect_terminal_width() -> int | None:
    """Column count of the terminal on stdout, or None when there is none."""
    try:
        return os.get_terminal_size(sys.stdout.fileno()).columns
    except (OSError, ValueError):
        return None


class Context:
    """Shared, read-only render state.

    Attributes:
        settings: Merged configuration.
        shell: Target dialect.
        current_dir: Directory the prompt describes.
        env: Environment snapshot (defaults to ``os.environ``).
        properties: Last-command information from the shell hook.
        terminal_width: Columns available for diagnostics, or None.
    """

    def __init__(
        self,
        settings: PromptSettings,
        *,
        shell: Shell | None = None,
        current_dir: Path | None = None,
        env: Mapping[str, str] | None = None,
        properties: PromptProperties | None = None,
        terminal_width: int | None = None,
    ) -> None:
        self.settings = settings
        self.shell = shell if shell is not None else Shell.parse(settings.shell)
        self.current_dir = current_dir or Path.cwd()
        self.env: Mapping[str, str] = dict(os.environ if env is None else env)
        self.properties = properties or PromptProperties()
        self.terminal_width = terminal_width if terminal_width is not None else detect_terminal_width()

    def get_env(self, key: str) -> str | None:
        return self.env.get(key)

    def is_module_disabled_in_config(self, name: str) -> bool:
        return self.settings.is_module_disabled_in_config(name)

    def is_custom_module_disabled_in_config(self, module_id: str) -> bool | None:
        return self.settings.is_custom_module_disabled_in_config(module_id)

    def get_custom_modules(self) -> dict[str, CustomModuleConfig] | None:
        return self.settings.custom

    def exec_cmd(self, *argv: str) -> CommandOutput | None:
        """Run a command in the prompt's directory with the configured timeout."""
        return exec_cmd(
            argv,
            timeout_ms=self.settings.command_timeout,
            cwd=self.current_dir,
            env=self.env,
        )
