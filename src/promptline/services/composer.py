"""Template composition: turn a parsed template into ordered segments.

``$all`` expands to the fixed prompt order and is the only variable
whose modules are computed concurrently; every other variable resolves
on its own, in template order.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from promptline.domain.identifiers import PROMPT_ORDER, WILDCARD
from promptline.domain.template import PromptTemplate, TemplateError
from promptline.services.evaluator import OrderedEvaluator
from promptline.services.resolver import handle_module

if TYPE_CHECKING:
    from collections.abc import Set

    from promptline.domain.module import Module
    from promptline.domain.segment import Segment
    from promptline.infrastructure.context import Context

logger = logging.getLogger(__name__)


def _evaluator(context: Context) -> OrderedEvaluator:
    return OrderedEvaluator(max_workers=context.settings.max_workers)


def expand_wildcard(context: Context, variables: Set[str]) -> list[Module]:
    """Compute every module of the fixed prompt order, preserving that order."""
    return _evaluator(context).flat_map(
        lambda name: handle_module(name, context, variables),
        PROMPT_ORDER,
    )


def segments_for_variable(name: str, context: Context, variables: Set[str]) -> list[Segment]:
    """Flattened segments for one template variable."""
    if name == WILDCARD:
        found = expand_wildcard(context, variables)
    elif context.is_module_disabled_in_config(name):
        return []
    else:
        found = handle_module(name, context, variables)
    return [segment for module in found for segment in module.segments]


def compose_segments(context: Context, template: PromptTemplate) -> list[Segment]:
    """Substitute every variable of *template* with its module segments."""
    variables = template.variables
    return template.substitute(lambda name: segments_for_variable(name, context, variables))


def compute_modules(context: Context) -> list[Module]:
    """Every module the configured format would show, for diagnostics.

    Includes modules with empty output. Variables are visited in sorted
    order; a broken format yields no modules.
    """
    try:
        template = PromptTemplate(context.settings.format)
    except TemplateError:
        logger.error("Error parsing `format`: %r", context.settings.format)
        return []

    variables = template.variables
    computed: list[Module] = []
    for name in sorted(variables):
        if name == WILDCARD:
            computed.extend(expand_wildcard(context, variables))
        else:
            computed.extend(handle_module(name, context, variables))
    return computed
