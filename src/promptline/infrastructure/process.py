"""External command execution with a hard timeout.

Every failure mode (missing binary, timeout, non-zero exit) degrades to
None so a slow or broken tool never prevents a prompt from appearing.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandOutput:
    """Captured result of a successful command."""

    stdout: str
    stderr: str


def exec_cmd(
    argv: Sequence[str],
    *,
    timeout_ms: int,
    cwd: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> CommandOutput | None:
    """Run *argv* and return its output, or None on any failure."""
    try:
        proc = subprocess.run(
            list(argv),
            cwd=cwd,
            env=dict(env) if env is not None else None,
            capture_output=True,
            text=True,
            timeout=timeout_ms / 1000,
            check=False,
        )
    except FileNotFoundError:
        logger.debug("Executable not found: %s", argv[0])
        return None
    except subprocess.TimeoutExpired:
        logger.warning("Command timed out after %dms: %s", timeout_ms, " ".join(argv))
        return None
    except OSError:
        logger.debug("Failed to execute %s", argv[0], exc_info=True)
        return None

    if proc.returncode != 0:
        logger.debug("Command %s exited with %d", argv[0], proc.returncode)
        return None
    return CommandOutput(stdout=proc.stdout, stderr=proc.stderr)
