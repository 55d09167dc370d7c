"""Diagnostic renderers: module timings and the prompt explanation.

Both lay out columns by display width (grapheme aware) while the cells
themselves carry ANSI styling, so padding is computed from the plain
text and never from the escaped string.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import TYPE_CHECKING

from promptline.domain.identifiers import ModuleId
from promptline.output.width import format_duration, grapheme_width, graphemes, width_graphemes

if TYPE_CHECKING:
    from collections.abc import Iterable

    from promptline.domain.module import Module

TIMINGS_HEADER = "\n Here are the timings of modules in your prompt (>=1ms or output):"
EXPLAIN_HEADER = "\n Here's a breakdown of your prompt:"

# Besides the value column every explain line carries 11 fixed characters:
# ' "{value}" ({duration})  -  {description}'.
PADDING_WIDTH = 11

# Modules with no visible content worth explaining.
DONT_EXPLAIN = frozenset({ModuleId.LINE_BREAK})

_ONE_MS = timedelta(milliseconds=1)


# ── Timings ───────────────────────────────────────────────────────────


@dataclass(frozen=True)
class _ModuleTiming:
    name: str
    name_len: int
    value: str
    duration: timedelta
    duration_len: int


def render_timings(modules: Iterable[Module]) -> str:
    """One line per module that produced output or took at least 1ms, slowest first."""
    timings = [
        _ModuleTiming(
            name=module.name,
            name_len=width_graphemes(module.name),
            value=str(module).replace("\n", "\\n"),
            duration=module.duration,
            duration_len=width_graphemes(format_duration(module.duration)),
        )
        for module in modules
        if not module.is_empty() or module.duration >= _ONE_MS
    ]
    # sorted() stays stable with reverse=True, so ties keep prompt order.
    timings = sorted(timings, key=lambda t: t.duration, reverse=True)

    max_name_width = max((t.name_len for t in timings), default=0)
    max_duration_width = max((t.duration_len for t in timings), default=0)

    lines = [TIMINGS_HEADER]
    for t in timings:
        name_pad = " " * (max_name_width - t.name_len)
        duration_pad = " " * (max_duration_width - t.duration_len)
        lines.append(
            f" {t.name}{name_pad}  -  {duration_pad}{format_duration(t.duration)}  -   \"{t.value}\""
        )
    return "\n".join(lines) + "\n"


# ── Explain ───────────────────────────────────────────────────────────


@dataclass(frozen=True)
class _ModuleInfo:
    value: str
    value_len: int
    desc: str
    duration: str


def description_width(terminal_width: int | None, max_module_width: int) -> int | None:
    """Columns left for descriptions, or None when wrapping is impossible.

    None when the terminal width is unknown or leaves no room at all.
    """
    if terminal_width is None:
        return None
    width = terminal_width - min(terminal_width, max_module_width + PADDING_WIDTH)
    return width or None


def wrap_description(desc: str, wrap_width: int, indent: int) -> str:
    """Word-wrap *desc* to *wrap_width* columns, passing ANSI escapes through.

    Escape sequences start at ESC and end at the first ASCII letter; they
    are copied verbatim and occupy no columns. Continuation lines are
    indented by *indent* spaces. A space that would overflow the line is
    dropped instead of being carried to the next line.
    """
    out: list[str] = []
    current_pos = 0
    escaping = False
    for g in graphemes(desc):
        if g == "\x1b":
            escaping = True
        if escaping:
            out.append(g)
            escaping = not (g.isascii() and g.isalpha())
            continue

        current_pos += grapheme_width(g)
        if g == "\n" or current_pos > wrap_width:
            if g == " " and wrap_width > 1:
                continue
            out.append("\n" + " " * indent)
            if g == "\n":
                current_pos = 0
                continue
            current_pos = 1
        out.append(g)
    return "".join(out)


def render_explain(modules: Iterable[Module], terminal_width: int | None) -> str:
    """Describe each visible module beside its value and duration.

    Descriptions wrap to the terminal; without a usable terminal width
    each description stays on a single line.
    """
    infos: list[_ModuleInfo] = []
    for module in modules:
        if module.name in DONT_EXPLAIN or module.is_empty():
            continue
        duration = format_duration(module.duration)
        infos.append(
            _ModuleInfo(
                value=str(module),
                value_len=width_graphemes(module.value()) + width_graphemes(duration),
                desc=module.description,
                duration=duration,
            )
        )

    max_module_width = max((i.value_len for i in infos), default=0)
    desc_width = description_width(terminal_width, max_module_width)

    lines = [EXPLAIN_HEADER]
    for info in infos:
        pad = " " * (max_module_width - info.value_len)
        prefix = f' "{info.value}" ({info.duration}){pad}  -  '
        if desc_width is None:
            lines.append(prefix + info.desc)
        else:
            indent = max_module_width + PADDING_WIDTH
            lines.append(prefix + wrap_description(info.desc, desc_width, indent))
    return "\n".join(lines) + "\n"
