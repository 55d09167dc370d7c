"""Shell prompt rendering.

The contract is that a render always produces *some* output: a broken
format or an incapable terminal yields a fixed fallback plus a log
record, never an exception.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from promptline import modules
from promptline.domain.shell import Shell, escape_tcsh
from promptline.domain.template import PromptTemplate, TemplateError
from promptline.services.composer import compose_segments

if TYPE_CHECKING:
    from promptline.infrastructure.context import Context

logger = logging.getLogger(__name__)

DUMB_TERMINAL_PROMPT = "promptline disabled due to TERM=dumb > "
PARSE_ERROR_PROMPT = ">"
# Clears from the cursor to the end of screen; works around fish leaving
# stale prompt lines behind on redraw. Other shells must not receive it.
FISH_CLEAR_SCREEN = "\x1b[J"


def get_prompt(context: Context) -> str:
    """Render the configured format for the context's shell."""
    if context.get_env("TERM") == "dumb":
        logger.warning("Under a 'dumb' terminal (TERM=dumb)")
        return DUMB_TERMINAL_PROMPT

    buf: list[str] = []
    if context.shell is Shell.FISH:
        buf.append(FISH_CLEAR_SCREEN)

    try:
        template = PromptTemplate(context.settings.format)
    except TemplateError:
        logger.error("Error parsing `format`: %r", context.settings.format)
        buf.append(PARSE_ERROR_PROMPT)
        return "".join(buf)

    segments = compose_segments(context, template)

    if context.settings.add_newline:
        buf.append("\n")
    buf.extend(segment.ansi_string(context.shell) for segment in segments)
    rendered = "".join(buf)

    if context.shell is Shell.TCSH:
        rendered = escape_tcsh(rendered)
    return rendered


def get_module(name: str, context: Context) -> str:
    """Render a single module by name, ignoring the format; ``""`` if it shows nothing."""
    module = modules.handle(name, context)
    if module is None:
        return ""
    return str(module)
