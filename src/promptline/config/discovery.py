"""Config file discovery.

Lookup order: ``PROMPTLINE_CONFIG`` env var, a ``promptline.toml`` found
by walking up from the working directory (similar to how git finds
.git/), then ``$XDG_CONFIG_HOME/promptline.toml``.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "promptline.toml"
CONFIG_ENV_VAR = "PROMPTLINE_CONFIG"


def user_config_path() -> Path:
    """Return the per-user config location (may not exist)."""
    base = os.environ.get("XDG_CONFIG_HOME")
    root = Path(base) if base else Path.home() / ".config"
    return root / CONFIG_FILENAME


def find_config(start: Path | None = None) -> Path | None:
    """Locate promptline.toml, or None if no candidate exists.

    An explicit ``PROMPTLINE_CONFIG`` pointing at a missing file yields
    None rather than falling through to the other locations.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        if p.is_file():
            return p
        return None

    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent

    user_path = user_config_path()
    if user_path.is_file():
        return user_path
    return None
