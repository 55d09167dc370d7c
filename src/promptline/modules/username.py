"""username — shown for root, over SSH, or when ``show_always`` is set."""

from __future__ import annotations

from typing import TYPE_CHECKING

from promptline.domain.identifiers import ModuleId
from promptline.modules._base import build_module

if TYPE_CHECKING:
    from promptline.domain.module import Module
    from promptline.infrastructure.context import Context


def module(context: Context) -> Module | None:
    config = context.settings.username
    user = context.get_env("USER") or context.get_env("LOGNAME")
    if not user:
        return None
    over_ssh = bool(context.get_env("SSH_CONNECTION"))
    if not (config.show_always or over_ssh or user == "root"):
        return None
    return build_module(ModuleId.USERNAME, config.format, {"user": user}, style=config.style)
