"""directory — the working directory, home-contracted and truncated."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from promptline.domain.identifiers import ModuleId
from promptline.modules._base import build_module

if TYPE_CHECKING:
    from promptline.domain.module import Module
    from promptline.infrastructure.context import Context


def contract_path(path: Path, home: Path | None, home_symbol: str) -> str:
    """Replace a leading *home* with *home_symbol*."""
    if home is not None:
        try:
            relative = path.relative_to(home)
        except ValueError:
            return path.as_posix()
        if relative == Path("."):
            return home_symbol
        return f"{home_symbol}/{relative.as_posix()}"
    return path.as_posix()


def truncate(path: str, length: int) -> str:
    """Keep only the last *length* components; 0 disables truncation."""
    if length <= 0:
        return path
    parts = [p for p in path.split("/") if p]
    if len(parts) <= length:
        return path
    return "/".join(parts[-length:])


def module(context: Context) -> Module | None:
    config = context.settings.directory
    home = context.get_env("HOME")
    contracted = contract_path(context.current_dir, Path(home) if home else None, config.home_symbol)
    display = truncate(contracted, config.truncation_length)
    return build_module(ModuleId.DIRECTORY, config.format, {"path": display}, style=config.style)
