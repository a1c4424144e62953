from __future__ import annotations

from dataclasses import dataclass

from lagoon.config import DEFAULT_MAX_FRAME_DT

MAX_FRAME_DT = DEFAULT_MAX_FRAME_DT


def clamp_frame_dt(dt: float, *, max_dt: float = MAX_FRAME_DT) -> float:
    """Clamp a frame delta to `[0, max_dt]` so hitches cannot tunnel bullets or skip spawns."""
    dt = float(dt)
    if not (dt > 0.0):
        return 0.0
    if dt > float(max_dt):
        return float(max_dt)
    return dt


@dataclass(slots=True)
class FrameClock:
    """Turns host timestamps (seconds) into clamped frame deltas."""

    max_dt: float = MAX_FRAME_DT
    last_time: float | None = None

    def __post_init__(self) -> None:
        if not (float(self.max_dt) > 0.0):
            raise ValueError(f"max_dt must be positive, got {self.max_dt}")

    def reset(self) -> None:
        self.last_time = None

    def tick(self, now: float) -> float:
        now = float(now)
        if self.last_time is None:
            self.last_time = now
            return 0.0
        dt = clamp_frame_dt(now - self.last_time, max_dt=self.max_dt)
        self.last_time = now
        return dt
