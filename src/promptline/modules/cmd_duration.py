"""cmd_duration — how long the previous command ran, above ``min_time``."""

from __future__ import annotations

from typing import TYPE_CHECKING

from promptline.domain.identifiers import ModuleId
from promptline.modules._base import build_module

if TYPE_CHECKING:
    from promptline.domain.module import Module
    from promptline.infrastructure.context import Context


def render_time(millis: int) -> str:
    """Humanize *millis* as ``1h2m3s``; sub-second values as ``850ms``."""
    if millis < 1000:
        return f"{millis}ms"
    seconds, _ = divmod(millis, 1000)
    minutes, seconds = divmod(seconds, 60)
    hours, minutes = divmod(minutes, 60)
    days, hours = divmod(hours, 24)
    parts = [(days, "d"), (hours, "h"), (minutes, "m"), (seconds, "s")]
    return "".join(f"{n}{unit}" for n, unit in parts if n)


def module(context: Context) -> Module | None:
    config = context.settings.cmd_duration
    elapsed = context.properties.cmd_duration
    if elapsed is None or elapsed < config.min_time:
        return None
    values = {"duration": render_time(elapsed)}
    return build_module(ModuleId.CMD_DURATION, config.format, values, style=config.style)
