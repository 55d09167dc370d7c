"""Module resolution: which modules does one template variable denote?

Resolution never raises. Unknown or unconfigured names resolve to an
empty list and leave a DEBUG diagnostic for troubleshooting templates.
"""

from __future__ import annotations

from collections.abc import Set
from typing import TYPE_CHECKING

import structlog

from promptline import modules
from promptline.domain.identifiers import ALL_MODULES, CUSTOM, CUSTOM_PREFIX

if TYPE_CHECKING:
    from promptline.config.models import CustomModuleConfig
    from promptline.domain.module import Module
    from promptline.infrastructure.context import Context

log = structlog.get_logger(__name__)


def handle_module(name: str, context: Context, variables: Set[str]) -> list[Module]:
    """Resolve template variable *name* to its ordered modules.

    Args:
        name: Variable as written in the template.
        context: Render context.
        variables: Every variable name the template references; decides
            whether ``custom`` must skip an explicitly placed module.
    """
    resolved: list[Module] = []

    if name in ALL_MODULES:
        if not context.is_module_disabled_in_config(name):
            _extend(resolved, modules.handle(name, context))
    elif name == CUSTOM:
        for module_id, config in (context.get_custom_modules() or {}).items():
            if should_add_implicit_custom_module(module_id, config, variables):
                _extend(resolved, modules.handle(f"{CUSTOM_PREFIX}{module_id}", context))
    elif name.startswith(CUSTOM_PREFIX):
        module_id = name.removeprefix(CUSTOM_PREFIX)
        disabled = context.is_custom_module_disabled_in_config(module_id)
        if disabled is False:
            _extend(resolved, modules.handle(name, context))
        elif disabled is None:
            configured = context.get_custom_modules()
            if configured is None:
                log.debug(
                    "custom module referenced but no configuration was provided",
                    module=module_id,
                )
            else:
                log.debug(
                    "custom module referenced but no configuration was provided",
                    module=module_id,
                    configured=sorted(configured),
                )
    else:
        log.debug(
            "unknown module in top level format",
            expected=sorted(ALL_MODULES),
            received=name,
        )

    return resolved


def should_add_implicit_custom_module(
    module_id: str,
    config: CustomModuleConfig,
    variables: Set[str],
) -> bool:
    """Whether ``$custom`` should emit ``custom.<module_id>``.

    Explicit ``$custom.<module_id>`` placements win; disabled modules never show.
    """
    if f"{CUSTOM_PREFIX}{module_id}" in variables:
        return False
    return not config.disabled


def _extend(resolved: list[Module], module: Module | None) -> None:
    if module is not None:
        resolved.append(module)
