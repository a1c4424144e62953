from __future__ import annotations

import math

from lagoon.geom import Vec2

from .entities import (
    DEFAULT_BOSS_HP,
    DEFAULT_BOSS_SCORE,
    DEFAULT_ENEMY_HP,
    DEFAULT_ENEMY_SCORE,
    DEFAULT_WEAK_POINT_HP,
    DEFAULT_WEAK_POINT_SCORE,
    ENEMY_TYPES,
    Archetype,
    Boss,
    Enemy,
    WeakPoint,
)
from .levels.types import SpawnEvent, WeakPointSpec

DEFAULT_SPAWN_FRACTION = 0.5


def _number(value: float | None, default: float) -> float:
    # Null and zero both count as unset.
    if not value:
        return float(default)
    return float(value)


def _hp(value: float | None, default: int) -> int:
    # Fractional hp still needs as many hits as its value rounds up to.
    return int(math.ceil(_number(value, default)))


def _score(value: float | None, default: int) -> int:
    return int(_number(value, default))


def resolve_spawn_pos(event: SpawnEvent, *, width: float, height: float) -> Vec2:
    x = DEFAULT_SPAWN_FRACTION if event.x is None else float(event.x)
    y = DEFAULT_SPAWN_FRACTION if event.y is None else float(event.y)
    return Vec2(x * float(width), y * float(height))


def build_weak_point(spec: WeakPointSpec) -> WeakPoint:
    return WeakPoint(
        offset=Vec2(_number(spec.dx, 0.0), _number(spec.dy, 0.0)),
        hp=_hp(spec.hp, DEFAULT_WEAK_POINT_HP),
        score=_score(spec.score, DEFAULT_WEAK_POINT_SCORE),
    )


def spawn_entity(event: SpawnEvent, *, width: float, height: float) -> Enemy | None:
    """Build the entity for one spawn event, or None for an unknown archetype tag."""
    try:
        archetype = Archetype(event.type)
    except ValueError:
        return None
    pos = resolve_spawn_pos(event, width=width, height=height)
    vel = Vec2(_number(event.vx, 0.0), _number(event.vy, 0.0))
    if archetype is Archetype.BOSS:
        return Boss(
            pos=pos,
            vel=vel,
            hp=_hp(event.hp, DEFAULT_BOSS_HP),
            score=_score(event.score, DEFAULT_BOSS_SCORE),
            weak_points=[build_weak_point(spec) for spec in event.weakpoints or ()],
        )
    enemy_type = ENEMY_TYPES.get(archetype)
    if enemy_type is None:
        # Bullets are never scripted.
        return None
    return enemy_type(
        pos=pos,
        vel=vel,
        hp=_hp(event.hp, DEFAULT_ENEMY_HP),
        score=_score(event.score, DEFAULT_ENEMY_SCORE),
    )
