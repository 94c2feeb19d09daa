"""Where SageMode looks for the tracking service's interval file."""

from __future__ import annotations

import os
from pathlib import Path

from platformdirs import PlatformDirs


APP_NAME = "SageMode"
APP_AUTHOR = "SageMode"
INTERVALS_ENV_VAR = "SAGEMODE_INTERVALS"


def get_data_dir() -> Path:
    """Per-user directory the tracker and the dashboard share."""
    dirs = PlatformDirs(appname=APP_NAME, appauthor=APP_AUTHOR, roaming=True)
    path = Path(dirs.user_data_path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_intervals_path() -> Path:
    """JSON Lines interval file; ``SAGEMODE_INTERVALS`` overrides the default."""
    override = os.environ.get(INTERVALS_ENV_VAR, "").strip()
    if override:
        return Path(override).expanduser()
    return get_data_dir() / "intervals.jsonl"
