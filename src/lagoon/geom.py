from __future__ import annotations

from dataclasses import dataclass
import math
from typing import TYPE_CHECKING

from .math import clamp

if TYPE_CHECKING:
    import pyray as rl


@dataclass(slots=True, frozen=True)
class Vec2:
    x: float = 0.0
    y: float = 0.0

    def length_sq(self) -> float:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.sqrt(self.length_sq())

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> Vec2:
        return self * scalar

    def mul_components(self, other: Vec2) -> Vec2:
        return Vec2(self.x * other.x, self.y * other.y)

    def offset(self, *, dx: float = 0.0, dy: float = 0.0) -> Vec2:
        return Vec2(self.x + dx, self.y + dy)

    def to_rl(self) -> rl.Vector2:
        import pyray as rl

        return rl.Vector2(self.x, self.y)

    def to_dict(self, *, ndigits: int | None = None) -> dict[str, float]:
        if ndigits is None:
            return {"x": self.x, "y": self.y}
        return {
            "x": round(self.x, ndigits),
            "y": round(self.y, ndigits),
        }

    def clamp_rect(self, min_x: float, min_y: float, max_x: float, max_y: float) -> Vec2:
        return Vec2(
            x=clamp(self.x, min_x, max_x),
            y=clamp(self.y, min_y, max_y),
        )

    @staticmethod
    def distance_sq(a: Vec2, b: Vec2) -> float:
        dx = b.x - a.x
        dy = b.y - a.y
        return dx * dx + dy * dy


def circles_overlap(a: Vec2, a_radius: float, b: Vec2, b_radius: float) -> bool:
    """Return True when two circles touch or overlap (`d^2 <= (ra + rb)^2`)."""
    reach = float(a_radius) + float(b_radius)
    return Vec2.distance_sq(a, b) <= reach * reach
