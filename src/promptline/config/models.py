"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, promptline.toml only contains
overrides. Every builtin module owns one frozen section; custom modules
live under ``[custom.<id>]``.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- Builtin module sections ---


class ModuleConfig(BaseModel):
    """Options shared by every builtin module section."""

    model_config = {"frozen": True}

    disabled: bool = False
    format: str = "$value"
    style: str = ""


class UsernameConfig(ModuleConfig):
    """[username] section."""

    format: str = "$user in "
    style: str = "bold yellow"
    show_always: bool = False


class HostnameConfig(ModuleConfig):
    """[hostname] section."""

    format: str = "on $hostname "
    style: str = "bold dim green"
    ssh_only: bool = True


class DirectoryConfig(ModuleConfig):
    """[directory] section."""

    format: str = "$path "
    style: str = "bold cyan"
    truncation_length: int = 3
    home_symbol: str = "~"


class GitBranchConfig(ModuleConfig):
    """[git_branch] section."""

    format: str = "on $symbol$branch "
    style: str = "bold purple"
    symbol: str = "⎇ "


class PythonConfig(ModuleConfig):
    """[python] section."""

    format: str = "via $symbol($virtualenv) "
    style: str = "yellow bold"
    symbol: str = "🐍 "


class CmdDurationConfig(ModuleConfig):
    """[cmd_duration] section."""

    format: str = "took $duration "
    style: str = "bold yellow"
    min_time: int = 2000


class LineBreakConfig(ModuleConfig):
    """[line_break] section."""


class JobsConfig(ModuleConfig):
    """[jobs] section."""

    format: str = "$symbol$number "
    style: str = "bold blue"
    symbol: str = "✦"
    threshold: int = 1


class TimeConfig(ModuleConfig):
    """[time] section. Disabled unless switched on."""

    disabled: bool = True
    format: str = "at $time "
    style: str = "bold yellow"
    time_format: str = "%T"


class StatusConfig(ModuleConfig):
    """[status] section. Disabled unless switched on."""

    disabled: bool = True
    format: str = "$symbol$status "
    style: str = "bold red"
    symbol: str = "✖"


class CharacterConfig(ModuleConfig):
    """[character] section."""

    format: str = "$symbol "
    success_symbol: str = "❯"
    error_symbol: str = "❯"
    vicmd_symbol: str = "❮"
    success_style: str = "bold green"
    error_style: str = "bold red"


# --- Custom modules ---


class CustomModuleConfig(BaseModel):
    """[custom.<id>] section: output of an external command."""

    model_config = {"frozen": True}

    command: str = ""
    when: str | None = None
    shell: list[str] = Field(default_factory=lambda: ["sh", "-c"])
    format: str = "$output "
    style: str = "bold green"
    description: str = "<custom module>"
    disabled: bool = False
