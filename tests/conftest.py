"""Shared pytest fixtures and test helpers for promptline tests."""

from __future__ import annotations

import logging
import os
import time
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from promptline.config.settings import PromptSettings
from promptline.domain.module import Module
from promptline.domain.segment import Segment
from promptline.infrastructure.context import Context, PromptProperties


@pytest.fixture(autouse=True)
def _isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep user config and PROMPTLINE_* variables out of every test."""
    for key in list(os.environ):
        if key.startswith("PROMPTLINE_"):
            monkeypatch.delenv(key)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Generator[None]:
    """CLI invocations reconfigure logging; undo that after each test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    logging.getLogger("promptline").setLevel(logging.NOTSET)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def make_settings(**overrides: Any) -> PromptSettings:
    """Settings from defaults plus *overrides* (no TOML, no env)."""
    return PromptSettings(**overrides)


def make_context(
    settings: PromptSettings | None = None,
    *,
    env: dict[str, str] | None = None,
    properties: PromptProperties | None = None,
    **kwargs: Any,
) -> Context:
    """Context with an empty environment and a fixed terminal width."""
    kwargs.setdefault("terminal_width", 80)
    return Context(
        settings or make_settings(),
        env=env if env is not None else {},
        properties=properties,
        **kwargs,
    )


def fake_computer(
    name: str,
    text: str,
    *,
    delay: float = 0.0,
    style: str | None = None,
    calls: list[str] | None = None,
) -> Callable[[Context], Module]:
    """A module collaborator producing one segment after *delay* seconds."""

    def compute(context: Context) -> Module:
        if calls is not None:
            calls.append(name)
        if delay:
            time.sleep(delay)
        module = Module(name=name, description=f"{name} description")
        module.set_segments([Segment(text, style)] if text else [])
        return module

    return compute
