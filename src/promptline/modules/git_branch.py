"""git_branch — the checked-out branch, via ``git rev-parse``."""

from __future__ import annotations

from typing import TYPE_CHECKING

from promptline.domain.identifiers import ModuleId
from promptline.modules._base import build_module

if TYPE_CHECKING:
    from promptline.domain.module import Module
    from promptline.infrastructure.context import Context


def module(context: Context) -> Module | None:
    config = context.settings.git_branch
    output = context.exec_cmd("git", "rev-parse", "--abbrev-ref", "HEAD")
    if output is None:
        return None
    branch = output.stdout.strip()
    if not branch:
        return None
    values = {"symbol": config.symbol, "branch": branch}
    return build_module(ModuleId.GIT_BRANCH, config.format, values, style=config.style)
