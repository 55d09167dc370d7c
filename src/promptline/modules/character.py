"""character — the input marker, colored by the last exit status."""

from __future__ import annotations

from typing import TYPE_CHECKING

from promptline.domain.identifiers import ModuleId
from promptline.modules._base import build_module

if TYPE_CHECKING:
    from promptline.domain.module import Module
    from promptline.infrastructure.context import Context


def module(context: Context) -> Module | None:
    config = context.settings.character
    props = context.properties
    failed = props.status not in (None, 0)
    if props.keymap == "vicmd":
        symbol = config.vicmd_symbol
    elif failed:
        symbol = config.error_symbol
    else:
        symbol = config.success_symbol
    style = config.error_style if failed else config.success_style
    return build_module(ModuleId.CHARACTER, config.format, {"symbol": symbol}, style=style)
