"""Helpers shared by the builtin module collaborators."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from promptline.domain.identifiers import DESCRIPTIONS
from promptline.domain.module import Module
from promptline.domain.segment import Segment
from promptline.domain.template import PromptTemplate, TemplateError

logger = logging.getLogger(__name__)


def new_module(name: str, description: str | None = None) -> Module:
    """Create an empty module carrying its builtin description."""
    return Module(name=name, description=description or DESCRIPTIONS.get(name, ""))


def format_segments(
    name: str,
    fmt: str,
    values: Mapping[str, str],
    *,
    style: str | None = None,
) -> list[Segment]:
    """Render a module's own format string.

    A broken format string is reported and yields no output for that module
    only; the rest of the prompt is unaffected.
    """
    try:
        template = PromptTemplate(fmt)
    except TemplateError:
        logger.warning("Error parsing format for module %s: %r", name, fmt)
        return []
    return template.render(values, style=style or None)


def build_module(
    name: str,
    fmt: str,
    values: Mapping[str, str],
    *,
    style: str | None = None,
    description: str | None = None,
) -> Module:
    module = new_module(name, description)
    module.set_segments(format_segments(name, fmt, values, style=style))
    return module
