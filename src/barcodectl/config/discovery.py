"""Config file discovery.

Walk-up finder locates barcodectl.toml, similar to how git finds .git/.
``BARCODECTL_CONFIG`` pins the file; ``--config`` bypasses discovery
entirely (see :meth:`BarcodeSettings.from_cli`).
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "barcodectl.toml"
CONFIG_ENV_VAR = "BARCODECTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the barcodectl.toml that applies to *start* (default: cwd).

    A ``BARCODECTL_CONFIG`` that names a missing file disables discovery
    instead of falling back to the walk-up search.
    """
    pinned = os.environ.get(CONFIG_ENV_VAR)
    if pinned:
        path = Path(pinned)
        return path if path.is_file() else None

    directory = (start or Path.cwd()).resolve()
    for candidate_dir in (directory, *directory.parents):
        candidate = candidate_dir / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
