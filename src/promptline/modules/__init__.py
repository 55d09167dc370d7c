"""Builtin module collaborators and their dispatch table.

Each collaborator is a plain ``compute(context) -> Module | None``.
:func:`handle` looks one up by name, times it and contains its failures.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from datetime import timedelta
from typing import TYPE_CHECKING

from promptline.domain.identifiers import CUSTOM_PREFIX, ModuleId
from promptline.modules import (
    character,
    clock,
    cmd_duration,
    custom,
    directory,
    git_branch,
    hostname,
    jobs,
    line_break,
    python,
    status,
    username,
)

if TYPE_CHECKING:
    from promptline.domain.module import Module
    from promptline.infrastructure.context import Context

logger = logging.getLogger(__name__)

ModuleComputer = Callable[["Context"], "Module | None"]

MODULE_TABLE: dict[str, ModuleComputer] = {
    ModuleId.USERNAME: username.module,
    ModuleId.HOSTNAME: hostname.module,
    ModuleId.DIRECTORY: directory.module,
    ModuleId.GIT_BRANCH: git_branch.module,
    ModuleId.PYTHON: python.module,
    ModuleId.CMD_DURATION: cmd_duration.module,
    ModuleId.LINE_BREAK: line_break.module,
    ModuleId.JOBS: jobs.module,
    ModuleId.TIME: clock.module,
    ModuleId.STATUS: status.module,
    ModuleId.CHARACTER: character.module,
}


def _timed(name: str, compute: Callable[[], Module | None]) -> Module | None:
    start = time.perf_counter()
    try:
        module = compute()
    except Exception:
        logger.warning("Module %s failed", name, exc_info=True)
        return None
    if module is not None:
        module.duration = timedelta(seconds=time.perf_counter() - start)
    return module


def handle(name: str, context: Context) -> Module | None:
    """Compute builtin *name* (or ``custom.<id>``) without disabled checks.

    Returns None for unknown names, for collaborators with nothing to
    show, and for collaborators that raise.
    """
    if name.startswith(CUSTOM_PREFIX):
        module_id = name.removeprefix(CUSTOM_PREFIX)
        return _timed(name, lambda: custom.module(module_id, context))
    compute = MODULE_TABLE.get(name)
    if compute is None:
        return None
    return _timed(name, lambda: compute(context))
