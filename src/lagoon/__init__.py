from __future__ import annotations

__all__ = [
    "app",
    "assets",
    "audio",
    "config",
    "console",
    "geom",
    "math",
]
