"""Module — a named unit of prompt output with its measured duration."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta

from promptline.domain.segment import Segment
from promptline.domain.shell import Shell


@dataclass
class Module:
    """Ordered segments produced by one module computation.

    Attributes:
        name: Identifier as written in the template (``directory``,
            ``custom.foo``).
        description: Human description shown by ``explain``.
        segments: Output in display order; set once by the collaborator.
        duration: Elapsed computation time, attached by the dispatcher.
    """

    name: str
    description: str = ""
    segments: list[Segment] = field(default_factory=list)
    duration: timedelta = field(default_factory=timedelta)

    def is_empty(self) -> bool:
        """True iff the module produced no segments, whatever its duration."""
        return not self.segments

    def set_segments(self, segments: list[Segment]) -> None:
        self.segments = list(segments)

    def value(self) -> str:
        """Plain (unstyled) text of all segments."""
        return "".join(s.text for s in self.segments)

    def ansi_strings(self, shell: Shell = Shell.UNKNOWN) -> list[str]:
        return [s.ansi_string(shell) for s in self.segments]

    def __str__(self) -> str:
        return "".join(self.ansi_strings())
