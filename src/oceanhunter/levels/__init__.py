from __future__ import annotations

from .fallback import FALLBACK_LEVELS
from .loader import LevelLoadResult, LevelScriptError, decode_levels, load_levels
from .types import CameraSpec, LevelScript, LevelsDocument, SpawnEvent, WeakPointSpec

__all__ = [
    "FALLBACK_LEVELS",
    "CameraSpec",
    "LevelLoadResult",
    "LevelScript",
    "LevelScriptError",
    "LevelsDocument",
    "SpawnEvent",
    "WeakPointSpec",
    "decode_levels",
    "load_levels",
]
