"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``PROMPTLINE_*`` prefix
  3. TOML file    — ``promptline.toml`` from :mod:`promptline.config.discovery`
  4. Code defaults — baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource`.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from promptline.config.discovery import find_config
from promptline.config.models import (
    CharacterConfig,
    CmdDurationConfig,
    CustomModuleConfig,
    DirectoryConfig,
    GitBranchConfig,
    HostnameConfig,
    JobsConfig,
    LineBreakConfig,
    ModuleConfig,
    PythonConfig,
    StatusConfig,
    TimeConfig,
    UsernameConfig,
)
from promptline.domain.identifiers import ALL_MODULES


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a discovered ``promptline.toml``."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                import click

                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class PromptSettings(BaseSettings):
    """Unified settings for one prompt render.

    Attributes:
        format: Top-level prompt template.
        add_newline: Print a blank line before the prompt.
        command_timeout: Milliseconds an external command may run.
        max_workers: Thread pool bound for ``$all`` evaluation
            (None lets the executor pick).
        custom: ``[custom.<id>]`` tables, or None when none are configured.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "PROMPTLINE_",
        "env_nested_delimiter": "__",
        "extra": "ignore",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    verbose: bool = False
    log_json: bool = False
    shell: str | None = None

    # --- Root options ---
    format: str = "$all"
    add_newline: bool = True
    command_timeout: int = 500
    max_workers: int | None = None

    # --- Module sections ---
    username: UsernameConfig = Field(default_factory=UsernameConfig)
    hostname: HostnameConfig = Field(default_factory=HostnameConfig)
    directory: DirectoryConfig = Field(default_factory=DirectoryConfig)
    git_branch: GitBranchConfig = Field(default_factory=GitBranchConfig)
    python: PythonConfig = Field(default_factory=PythonConfig)
    cmd_duration: CmdDurationConfig = Field(default_factory=CmdDurationConfig)
    line_break: LineBreakConfig = Field(default_factory=LineBreakConfig)
    jobs: JobsConfig = Field(default_factory=JobsConfig)
    time: TimeConfig = Field(default_factory=TimeConfig)
    status: StatusConfig = Field(default_factory=StatusConfig)
    character: CharacterConfig = Field(default_factory=CharacterConfig)
    custom: dict[str, CustomModuleConfig] | None = None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> PromptSettings:
        """Construct settings from a CLI invocation.

        Uses the explicit *config_path* when it names a file, otherwise
        discovers ``promptline.toml`` from *start* (default: CWD).
        CLI flags whose value is None are dropped so they do not mask
        lower-priority sources.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(start)

        flags = {k: v for k, v in cli_flags.items() if v is not None}
        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **flags)
        finally:
            _tls.toml_path = None

    # --- Disabled-flag queries ---

    def module_config(self, name: str) -> ModuleConfig | None:
        """Return the section for builtin *name*, or None for other names."""
        if name not in ALL_MODULES:
            return None
        return getattr(self, name)

    def is_module_disabled_in_config(self, name: str) -> bool:
        """Whether builtin *name* is switched off. Unknown names are never disabled."""
        section = self.module_config(name)
        return section is not None and section.disabled

    def custom_module(self, module_id: str) -> CustomModuleConfig | None:
        if self.custom is None:
            return None
        return self.custom.get(module_id)

    def is_custom_module_disabled_in_config(self, module_id: str) -> bool | None:
        """Disabled flag of ``[custom.<module_id>]``; None if it is not configured."""
        section = self.custom_module(module_id)
        if section is None:
            return None
        return section.disabled
