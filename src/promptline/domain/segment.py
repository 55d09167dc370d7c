"""Segment — the smallest styled unit of prompt output."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from rich.color import ColorSystem
from rich.errors import StyleSyntaxError
from rich.style import Style

from promptline.domain.shell import Shell

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Segment:
    """A text value plus an optional rich style definition.

    Styles use rich's syntax (``"bold green"``, ``"#ff8800 on blue"``).
    """

    text: str
    style: str | None = None

    def ansi_string(self, shell: Shell = Shell.UNKNOWN) -> str:
        """Render the segment with ANSI escapes, wrapped for *shell*."""
        if not self.style or not self.text:
            return self.text
        try:
            style = Style.parse(self.style)
        except StyleSyntaxError:
            logger.warning("Invalid style %r, rendering unstyled", self.style)
            return self.text
        rendered = style.render(self.text, color_system=ColorSystem.TRUECOLOR)
        return shell.wrap_escapes(rendered)

    def __str__(self) -> str:
        return self.text


def styled(text: str, style: str | None = None) -> list[Segment]:
    """Shorthand for a single-segment list; empty text yields no segments."""
    return [Segment(text, style)] if text else []
