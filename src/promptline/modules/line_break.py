"""line_break — a bare newline."""

from __future__ import annotations

from typing import TYPE_CHECKING

from promptline.domain.identifiers import ModuleId
from promptline.domain.segment import Segment
from promptline.modules._base import new_module

if TYPE_CHECKING:
    from promptline.domain.module import Module
    from promptline.infrastructure.context import Context


def module(context: Context) -> Module | None:
    line_break = new_module(ModuleId.LINE_BREAK)
    line_break.set_segments([Segment("\n")])
    return line_break
