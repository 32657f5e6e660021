"""Locate ``symcipher.toml``.

The file is looked up in the start directory and then each parent in
turn, the way git finds ``.git/``. ``SYMCIPHER_CONFIG`` names a file
directly and disables the search.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "symcipher.toml"
CONFIG_ENV_VAR = "SYMCIPHER_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file governing *start* (default: cwd), or None.

    An env-var path that is not a file yields None rather than falling
    back to the search.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
