from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

CONSOLE_LOG_NAME = "console.log"
MAX_CONSOLE_LINES = 0x1000


def game_build_path(base_dir: Path, name: str) -> Path:
    return base_dir / name


@dataclass(slots=True)
class ConsoleLog:
    base_dir: Path | None
    lines: list[str] = field(default_factory=list)
    flushed_index: int = 0

    def log(self, message: str) -> None:
        self.lines.append(message)
        if len(self.lines) > MAX_CONSOLE_LINES:
            overflow = len(self.lines) - MAX_CONSOLE_LINES
            del self.lines[:overflow]
            self.flushed_index = max(0, self.flushed_index - overflow)

    def clear(self) -> None:
        self.lines.clear()
        self.flushed_index = 0

    def flush(self) -> None:
        # In-memory consoles (tests, headless runs) never touch disk.
        if self.base_dir is None:
            self.flushed_index = len(self.lines)
            return
        if self.flushed_index >= len(self.lines):
            return
        path = game_build_path(self.base_dir, CONSOLE_LOG_NAME)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("a", encoding="utf-8") as handle:
            for line in self.lines[self.flushed_index :]:
                handle.write(line.rstrip() + "\n")
        self.flushed_index = len(self.lines)


@dataclass(slots=True)
class ConsoleState:
    base_dir: Path | None
    log: ConsoleLog


def create_console(base_dir: Path | None) -> ConsoleState:
    return ConsoleState(base_dir=base_dir, log=ConsoleLog(base_dir=base_dir))
