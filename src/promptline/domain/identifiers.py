"""Builtin module identifiers and the fixed prompt ordering.

The identifier set is closed: every builtin is a member of
:class:`ModuleId`. ``custom`` appears in :data:`PROMPT_ORDER` but is not a
builtin; it expands to the configured custom modules instead.
"""

from __future__ import annotations

from enum import StrEnum


class ModuleId(StrEnum):
    """Builtin prompt modules."""

    USERNAME = "username"
    HOSTNAME = "hostname"
    DIRECTORY = "directory"
    GIT_BRANCH = "git_branch"
    PYTHON = "python"
    CMD_DURATION = "cmd_duration"
    LINE_BREAK = "line_break"
    JOBS = "jobs"
    TIME = "time"
    STATUS = "status"
    CHARACTER = "character"


WILDCARD = "all"
CUSTOM = "custom"
CUSTOM_PREFIX = f"{CUSTOM}."

ALL_MODULES: frozenset[str] = frozenset(m.value for m in ModuleId)

PROMPT_ORDER: tuple[str, ...] = (
    ModuleId.USERNAME,
    ModuleId.HOSTNAME,
    ModuleId.DIRECTORY,
    ModuleId.GIT_BRANCH,
    ModuleId.PYTHON,
    CUSTOM,
    ModuleId.CMD_DURATION,
    ModuleId.LINE_BREAK,
    ModuleId.JOBS,
    ModuleId.TIME,
    ModuleId.STATUS,
    ModuleId.CHARACTER,
)

DESCRIPTIONS: dict[str, str] = {
    ModuleId.USERNAME: "The active user's username",
    ModuleId.HOSTNAME: "The system hostname",
    ModuleId.DIRECTORY: "The current working directory",
    ModuleId.GIT_BRANCH: "The active branch of the repo in your current directory",
    ModuleId.PYTHON: "The active Python virtualenv",
    ModuleId.CMD_DURATION: "How long the last command took to execute",
    ModuleId.LINE_BREAK: "Separates the prompt into two lines",
    ModuleId.JOBS: "The current number of jobs running",
    ModuleId.TIME: "The current local time",
    ModuleId.STATUS: "The status code of the last command",
    ModuleId.CHARACTER: "A character (usually an arrow) beside where the text is entered in your terminal",
}
