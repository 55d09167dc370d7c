"""Display-width accounting over grapheme clusters.

A grapheme cluster occupies the width of its widest code point, so a
ZWJ emoji family counts 2 columns and a letter with a combining mark
counts 1, where summing per code point would over-count.
"""

from __future__ import annotations

from datetime import timedelta

import regex
from wcwidth import wcwidth

_GRAPHEME = regex.compile(r"\X")

_ONE_MS = timedelta(milliseconds=1)


def graphemes(text: str) -> list[str]:
    """Split *text* into extended grapheme clusters."""
    return _GRAPHEME.findall(text)


def grapheme_width(grapheme: str) -> int:
    """Columns occupied by a single grapheme cluster (0 for control characters)."""
    widths = [w for w in (wcwidth(ch) for ch in grapheme) if w >= 0]
    return max(widths, default=0)


def width_graphemes(text: str) -> int:
    """Columns occupied by *text*."""
    return sum(grapheme_width(g) for g in graphemes(text))


def format_duration(duration: timedelta) -> str:
    """``<1ms`` below one millisecond, otherwise whole milliseconds."""
    millis = duration // _ONE_MS
    if millis == 0:
        return "<1ms"
    return f"{millis}ms"
