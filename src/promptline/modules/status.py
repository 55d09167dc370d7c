"""status — the previous command's exit code when it failed."""

from __future__ import annotations

from typing import TYPE_CHECKING

from promptline.domain.identifiers import ModuleId
from promptline.modules._base import build_module

if TYPE_CHECKING:
    from promptline.domain.module import Module
    from promptline.infrastructure.context import Context


def module(context: Context) -> Module | None:
    config = context.settings.status
    code = context.properties.status
    if code is None or code == 0:
        return None
    values = {"symbol": config.symbol, "status": str(code)}
    return build_module(ModuleId.STATUS, config.format, values, style=config.style)
