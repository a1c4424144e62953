from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar

from lagoon.geom import Vec2

ENEMY_RADIUS = 28.0
BOSS_RADIUS = 120.0
WEAK_POINT_RADIUS = 24.0
BULLET_RADIUS = 4.0
BULLET_SPEED = 1200.0

DEFAULT_ENEMY_HP = 1
DEFAULT_ENEMY_SCORE = 50
DEFAULT_BOSS_HP = 60
DEFAULT_BOSS_SCORE = 1000
DEFAULT_WEAK_POINT_HP = 5
DEFAULT_WEAK_POINT_SCORE = 200


class Archetype(str, Enum):
    FISH = "fish"
    EEL = "eel"
    PUFFER = "puffer"
    BOSS = "boss"
    BULLET = "bullet"


class BossState(str, Enum):
    ALIVE = "alive"
    DESTROYED = "destroyed"


@dataclass(slots=True)
class WeakPoint:
    offset: Vec2
    hp: int = DEFAULT_WEAK_POINT_HP
    score: int = DEFAULT_WEAK_POINT_SCORE
    radius: float = WEAK_POINT_RADIUS
    alive: bool = True

    def world_pos(self, center: Vec2) -> Vec2:
        return center + self.offset


@dataclass(slots=True)
class _EntityBase:
    pos: Vec2
    vel: Vec2 = field(default_factory=Vec2)
    radius: float = ENEMY_RADIUS
    hp: int = DEFAULT_ENEMY_HP
    score: int = DEFAULT_ENEMY_SCORE
    age: float = 0.0
    alive: bool = True


@dataclass(slots=True)
class Fish(_EntityBase):
    kind: ClassVar[Archetype] = Archetype.FISH


@dataclass(slots=True)
class Eel(_EntityBase):
    kind: ClassVar[Archetype] = Archetype.EEL


@dataclass(slots=True)
class Puffer(_EntityBase):
    kind: ClassVar[Archetype] = Archetype.PUFFER


@dataclass(slots=True)
class Boss(_EntityBase):
    kind: ClassVar[Archetype] = Archetype.BOSS

    radius: float = BOSS_RADIUS
    hp: int = DEFAULT_BOSS_HP
    score: int = DEFAULT_BOSS_SCORE
    weak_points: list[WeakPoint] = field(default_factory=list)
    state: BossState = BossState.ALIVE

    def all_weak_points_down(self) -> bool:
        # Vacuously true for a boss scripted without weak points.
        return all(not wp.alive for wp in self.weak_points)


@dataclass(slots=True)
class Bullet(_EntityBase):
    kind: ClassVar[Archetype] = Archetype.BULLET

    radius: float = BULLET_RADIUS
    vel: Vec2 = field(default_factory=lambda: Vec2(0.0, -BULLET_SPEED))
    score: int = 0


Enemy = Fish | Eel | Puffer | Boss
Entity = Fish | Eel | Puffer | Boss | Bullet

ENEMY_TYPES: dict[Archetype, type[Fish | Eel | Puffer]] = {
    Archetype.FISH: Fish,
    Archetype.EEL: Eel,
    Archetype.PUFFER: Puffer,
}


def spawn_bullet(pos: Vec2) -> Bullet:
    return Bullet(pos=pos)
