"""Locate ``placectl.toml``.

``PLACECTL_CONFIG`` names the file directly; otherwise the nearest
``placectl.toml`` in the start directory or one of its parents wins.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "placectl.toml"
CONFIG_ENV_VAR = "PLACECTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file for *start* (default: cwd), or None.

    An env var pointing at a missing file disables discovery instead of
    falling back to the walk-up search.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        explicit = Path(env_path)
        return explicit if explicit.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
