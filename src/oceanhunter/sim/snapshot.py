from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from lagoon.geom import Vec2

from ..entities import Archetype, Boss
from .world import World

AMMO_LABEL = "inf"


@dataclass(frozen=True, slots=True)
class WeakPointView:
    pos: Vec2
    radius: float


@dataclass(frozen=True, slots=True)
class EntityView:
    kind: Archetype
    pos: Vec2
    radius: float
    weak_points: tuple[WeakPointView, ...] = ()


@dataclass(frozen=True, slots=True)
class ParticleView:
    pos: Vec2
    fade: float


@dataclass(frozen=True, slots=True)
class HudView:
    score: int
    lives: int
    wave: int
    ammo: str = AMMO_LABEL


@dataclass(frozen=True, slots=True)
class FrameSnapshot:
    entities: tuple[EntityView, ...]
    particles: tuple[ParticleView, ...]
    hud: HudView
    aim: Vec2
    scroll: float
    level_name: str
    level_time: float

    def to_dict(self, *, ndigits: int = 2) -> dict[str, Any]:
        return {
            "level": self.level_name,
            "time": round(self.level_time, 4),
            "score": self.hud.score,
            "lives": self.hud.lives,
            "wave": self.hud.wave,
            "aim": self.aim.to_dict(ndigits=ndigits),
            "entities": [
                {
                    "kind": view.kind.value,
                    **view.pos.to_dict(ndigits=ndigits),
                    "r": round(view.radius, ndigits),
                    **(
                        {"weak_points": [wp.pos.to_dict(ndigits=ndigits) for wp in view.weak_points]}
                        if view.weak_points
                        else {}
                    ),
                }
                for view in self.entities
            ],
            "particles": len(self.particles),
        }


def build_snapshot(world: World) -> FrameSnapshot:
    """Read-only view of a world for renderers; live weak points are resolved to world space."""
    entities: list[EntityView] = []
    for entity in world.entities:
        if not entity.alive:
            continue
        weak_points: tuple[WeakPointView, ...] = ()
        if isinstance(entity, Boss):
            weak_points = tuple(
                WeakPointView(pos=wp.world_pos(entity.pos), radius=wp.radius) for wp in entity.weak_points if wp.alive
            )
        entities.append(EntityView(kind=entity.kind, pos=entity.pos, radius=entity.radius, weak_points=weak_points))
    particles = tuple(ParticleView(pos=p.pos, fade=p.fade) for p in world.particles.entries)
    state = world.state
    return FrameSnapshot(
        entities=tuple(entities),
        particles=particles,
        hud=HudView(score=state.score, lives=state.lives, wave=state.wave),
        aim=state.aim,
        scroll=state.scroll,
        level_name=world.level.name,
        level_time=state.time,
    )
