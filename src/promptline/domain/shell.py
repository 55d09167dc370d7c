"""Shell dialects and their prompt-string escaping quirks."""

from __future__ import annotations

import re
from enum import StrEnum

# SGR / CSI sequences emitted by the style renderer.
_ESCAPE_SEQUENCE = re.compile(r"\x1b\[[0-9;:]*[A-Za-z]")


class Shell(StrEnum):
    """Shell families the renderer knows how to target."""

    BASH = "bash"
    ZSH = "zsh"
    FISH = "fish"
    TCSH = "tcsh"
    POWERSHELL = "powershell"
    ELVISH = "elvish"
    ION = "ion"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: str | None) -> Shell:
        """Map a user-supplied shell name onto a dialect, defaulting to UNKNOWN."""
        if not value:
            return cls.UNKNOWN
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.UNKNOWN

    def wrap_escapes(self, text: str) -> str:
        """Wrap escape sequences in the non-printing markers of this dialect.

        bash and zsh compute the prompt's visible length themselves; escape
        sequences left unmarked would be counted and break line editing.
        """
        if self is Shell.BASH:
            return _ESCAPE_SEQUENCE.sub(lambda m: f"\\[{m.group(0)}\\]", text)
        if self is Shell.ZSH:
            return _ESCAPE_SEQUENCE.sub(lambda m: f"%{{{m.group(0)}%}}", text)
        return text


def escape_tcsh(text: str) -> str:
    """Escape history expansion and line continuation for tcsh.

    Every ``!`` becomes ``\\!`` and every newline becomes a space followed
    by the two-character sequence ``\\n`` (tcsh needs the space).
    """
    return text.replace("!", "\\!").replace("\n", " \\n")
