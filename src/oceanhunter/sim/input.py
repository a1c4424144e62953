from __future__ import annotations

from dataclasses import dataclass, field

from lagoon.geom import Vec2


@dataclass(frozen=True, slots=True)
class AimInput:
    aim: Vec2 = field(default_factory=Vec2)
    fire_down: bool = False

    def clamped(self, width: float, height: float) -> AimInput:
        return AimInput(aim=self.aim.clamp_rect(0.0, 0.0, float(width), float(height)), fire_down=bool(self.fire_down))
