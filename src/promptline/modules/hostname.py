"""hostname — the short host name, by default only over SSH."""

from __future__ import annotations

import socket
from typing import TYPE_CHECKING

from promptline.domain.identifiers import ModuleId
from promptline.modules._base import build_module

if TYPE_CHECKING:
    from promptline.domain.module import Module
    from promptline.infrastructure.context import Context


def module(context: Context) -> Module | None:
    config = context.settings.hostname
    if config.ssh_only and not context.get_env("SSH_CONNECTION"):
        return None
    host = socket.gethostname().split(".", 1)[0]
    return build_module(ModuleId.HOSTNAME, config.format, {"hostname": host}, style=config.style)
