from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import msgspec

from lagoon.console import ConsoleState

from .fallback import FALLBACK_LEVELS
from .types import LevelsDocument

LEVELS_FILE_NAME = "levels.json"


class LevelScriptError(ValueError):
    """Raised when a level document cannot be decoded into a usable script."""


@dataclass(frozen=True, slots=True)
class LevelLoadResult:
    document: LevelsDocument
    source: str
    error: str | None = None

    @property
    def used_fallback(self) -> bool:
        return self.error is not None


def decode_levels(data: bytes | str) -> LevelsDocument:
    try:
        document = msgspec.json.decode(data, type=LevelsDocument)
    except msgspec.DecodeError as exc:
        raise LevelScriptError(str(exc)) from exc
    if not document.levels:
        raise LevelScriptError("level document has no levels")
    return document


def _warn_authoring_issues(document: LevelsDocument, console: ConsoleState) -> None:
    for idx, level in enumerate(document.levels):
        if not level.spawns_sorted():
            console.log.log(f"levels: level {idx} '{level.name}' spawns are not sorted by t")


def load_levels(path: Path | None, console: ConsoleState) -> LevelLoadResult:
    """Load the level document at `path`, substituting the built-in script on any failure."""
    if path is None:
        console.log.log("levels: no level file given, using built-in script")
        return LevelLoadResult(document=FALLBACK_LEVELS, source="<builtin>", error="no level file")
    try:
        raw = path.read_bytes()
    except OSError as exc:
        error = f"cannot read {path}: {exc.strerror or exc}"
        console.log.log(f"levels: {error}; using built-in script")
        return LevelLoadResult(document=FALLBACK_LEVELS, source="<builtin>", error=error)
    try:
        document = decode_levels(raw)
    except LevelScriptError as exc:
        error = f"invalid {path.name}: {exc}"
        console.log.log(f"levels: {error}; using built-in script")
        return LevelLoadResult(document=FALLBACK_LEVELS, source="<builtin>", error=error)
    _warn_authoring_issues(document, console)
    console.log.log(f"levels: loaded {len(document.levels)} level(s) from {path}")
    return LevelLoadResult(document=document, source=str(path))
