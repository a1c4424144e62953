from __future__ import annotations

import os
from pathlib import Path

from platformdirs import PlatformDirs

APP_NAME = "oceanhunter"
RUNTIME_DIR_ENV = "OCEANHUNTER_RUNTIME_DIR"
DEFAULT_ASSETS_DIR = Path("assets")


def _dirs() -> PlatformDirs:
    return PlatformDirs(appname=APP_NAME, appauthor=False)


def default_runtime_dir() -> Path:
    override = os.environ.get(RUNTIME_DIR_ENV, "").strip()
    if override:
        return Path(override).expanduser()
    return Path(_dirs().user_data_path)
