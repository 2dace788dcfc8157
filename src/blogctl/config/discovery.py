"""Locate blogctl.toml for a blog checkout.

The file is looked up from the working directory towards the filesystem
root, so commands run from any folder inside a blog pick up its config.
``BLOGCTL_CONFIG`` names a file directly and skips the walk.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "blogctl.toml"
CONFIG_ENV_VAR = "BLOGCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the blogctl.toml governing *start* (default: cwd), or None.

    A ``BLOGCTL_CONFIG`` that points at a missing file yields None rather
    than falling back to the walk.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        override = Path(env_path)
        return override if override.is_file() else None

    directory = (start or Path.cwd()).resolve()
    for candidate_dir in (directory, *directory.parents):
        candidate = candidate_dir / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
