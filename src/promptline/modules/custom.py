"""custom.<id> — output of a user-configured shell command.

``when`` (if set) is run first; a failing condition hides the module.
The command's stdout, stripped, is exposed as ``$output``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from promptline.domain.identifiers import CUSTOM_PREFIX
from promptline.modules._base import build_module

if TYPE_CHECKING:
    from promptline.domain.module import Module
    from promptline.infrastructure.context import Context

logger = logging.getLogger(__name__)


def module(module_id: str, context: Context) -> Module | None:
    config = context.settings.custom_module(module_id)
    if config is None:
        return None
    name = f"{CUSTOM_PREFIX}{module_id}"

    if config.when is not None and context.exec_cmd(*config.shell, config.when) is None:
        logger.debug("Condition for %s not met", name)
        return None

    output = ""
    if config.command:
        result = context.exec_cmd(*config.shell, config.command)
        if result is not None:
            output = result.stdout.strip()

    if not output:
        # Ran, but has nothing to show; still reported by ``timings``.
        return build_module(name, "", {}, description=config.description)
    return build_module(
        name,
        config.format,
        {"output": output},
        style=config.style,
        description=config.description,
    )
