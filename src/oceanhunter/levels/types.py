from __future__ import annotations

import msgspec


class SplinePoint(msgspec.Struct, frozen=True):
    x: float = 0.0
    y: float = 0.0


DEFAULT_CAMERA_SPEED = 4.0


class CameraSpec(msgspec.Struct, frozen=True):
    speed: float | None = DEFAULT_CAMERA_SPEED
    spline: tuple[SplinePoint, ...] = ()

    def effective_speed(self) -> float:
        # Zero and null both scroll at the default speed.
        return float(self.speed or DEFAULT_CAMERA_SPEED)


class WeakPointSpec(msgspec.Struct, frozen=True):
    dx: float | None = 0.0
    dy: float | None = 0.0
    hp: float | None = None
    score: float | None = None


class SpawnEvent(msgspec.Struct, frozen=True):
    """One timed spawn. `x`/`y` are fractions of the playfield, resolved to pixels at spawn time.

    Every field has a permissive default: a sparse entry still spawns something. Numeric
    fields also accept null (unset) and JSON floats; `spawn_entity` resolves them.
    """

    t: float = 0.0
    type: str = "fish"
    x: float | None = 0.5
    y: float | None = 0.5
    vx: float | None = 0.0
    vy: float | None = 0.0
    hp: float | None = None
    score: float | None = None
    weakpoints: tuple[WeakPointSpec, ...] | None = ()


class LevelScript(msgspec.Struct, frozen=True):
    name: str = "Untitled"
    length: float = 45.0
    camera: CameraSpec = msgspec.field(default_factory=CameraSpec)
    spawns: tuple[SpawnEvent, ...] = ()

    def spawns_sorted(self) -> bool:
        return all(a.t <= b.t for a, b in zip(self.spawns, self.spawns[1:]))

    def last_trigger(self) -> float:
        return max((event.t for event in self.spawns), default=0.0)


class LevelsDocument(msgspec.Struct, frozen=True):
    levels: tuple[LevelScript, ...] = ()
