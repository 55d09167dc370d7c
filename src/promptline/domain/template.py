"""Prompt format strings: ``$name`` placeholders between literal text.

Grammar:
- ``$name`` or ``${name}``; a name may carry one dotted suffix
  (``$custom.docker``).
- ``$$`` is a literal dollar sign.
- Any other ``$`` is a parse error.

Literal text becomes unstyled segments (or segments in the caller's
style); each placeholder is replaced by whatever segments the mapper
returns for it.
"""

from __future__ import annotations

import string
from collections.abc import Callable, Mapping
from dataclasses import dataclass

from promptline.domain.segment import Segment


class TemplateError(ValueError):
    """Raised when a format string contains an invalid placeholder."""


class _Placeholders(string.Template):
    idpattern = r"(?a:[_a-z][_a-z0-9]*(?:\.[_a-z0-9][-_a-z0-9]*)?)"


@dataclass(frozen=True)
class _Token:
    text: str
    is_variable: bool = False


SegmentMapper = Callable[[str], "list[Segment] | None"]


class PromptTemplate:
    """A parsed format string.

    Raises:
        TemplateError: On a stray ``$`` (including an unterminated ``${``).
    """

    def __init__(self, source: str) -> None:
        self.source = source
        self._tokens = _tokenize(source)

    @property
    def variables(self) -> frozenset[str]:
        """Distinct variable names referenced by the template."""
        return frozenset(t.text for t in self._tokens if t.is_variable)

    def substitute(self, mapper: SegmentMapper, *, style: str | None = None) -> list[Segment]:
        """Interleave literal text with the segments *mapper* returns.

        A mapper returning ``None`` contributes nothing for that variable.
        """
        segments: list[Segment] = []
        for token in self._tokens:
            if token.is_variable:
                segments.extend(mapper(token.text) or [])
            else:
                segments.append(Segment(token.text, style))
        return segments

    def render(self, values: Mapping[str, str], *, style: str | None = None) -> list[Segment]:
        """Substitute plain string *values*, applying *style* to everything."""

        def mapper(name: str) -> list[Segment] | None:
            value = values.get(name)
            return [Segment(value, style)] if value else None

        return self.substitute(mapper, style=style)


def _tokenize(source: str) -> list[_Token]:
    tokens: list[_Token] = []
    literal: list[str] = []
    pos = 0
    for match in _Placeholders.pattern.finditer(source):
        literal.append(source[pos : match.start()])
        pos = match.end()
        if match.group("escaped") is not None:
            literal.append("$")
            continue
        if match.group("invalid") is not None:
            line = source.count("\n", 0, match.start()) + 1
            msg = f"Invalid placeholder at line {line}, offset {match.start()}: {source!r}"
            raise TemplateError(msg)
        if text := "".join(literal):
            tokens.append(_Token(text))
        literal.clear()
        tokens.append(_Token(match.group("named") or match.group("braced"), is_variable=True))
    literal.append(source[pos:])
    if text := "".join(literal):
        tokens.append(_Token(text))
    return tokens
