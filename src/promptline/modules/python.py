"""python — name of the active virtualenv."""

from __future__ import annotations

from pathlib import PurePath
from typing import TYPE_CHECKING

from promptline.domain.identifiers import ModuleId
from promptline.modules._base import build_module

if TYPE_CHECKING:
    from promptline.domain.module import Module
    from promptline.infrastructure.context import Context


def module(context: Context) -> Module | None:
    config = context.settings.python
    venv = context.get_env("VIRTUAL_ENV")
    if not venv:
        return None
    values = {"symbol": config.symbol, "virtualenv": PurePath(venv).name}
    return build_module(ModuleId.PYTHON, config.format, values, style=config.style)
