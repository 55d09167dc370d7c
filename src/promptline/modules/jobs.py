"""jobs — background job count, shown once it reaches ``threshold``."""

from __future__ import annotations

from typing import TYPE_CHECKING

from promptline.domain.identifiers import ModuleId
from promptline.modules._base import build_module

if TYPE_CHECKING:
    from promptline.domain.module import Module
    from promptline.infrastructure.context import Context


def module(context: Context) -> Module | None:
    config = context.settings.jobs
    count = context.properties.jobs
    if count <= 0 or count < config.threshold:
        return None
    # A single job is shown by its symbol alone.
    values = {"symbol": config.symbol, "number": str(count) if count > 1 else ""}
    return build_module(ModuleId.JOBS, config.format, values, style=config.style)
