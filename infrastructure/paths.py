"""Platform user-data directory lookup."""

from __future__ import annotations

from pathlib import Path

import appdirs


def default_user_data_dir(app_name: str) -> Path:
    """Return the per-user data directory for `app_name` on this platform."""
    return Path(appdirs.user_data_dir(app_name, appauthor=False))
