"""time — the current local time."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from promptline.domain.identifiers import ModuleId
from promptline.modules._base import build_module

if TYPE_CHECKING:
    from promptline.domain.module import Module
    from promptline.infrastructure.context import Context


def module(context: Context) -> Module | None:
    config = context.settings.time
    now = datetime.now().astimezone()
    values = {"time": now.strftime(config.time_format)}
    return build_module(ModuleId.TIME, config.format, values, style=config.style)
