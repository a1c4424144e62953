from __future__ import annotations

from collections.abc import Callable
import math

from lagoon.geom import Vec2
from lagoon.math import sign

from .entities import ENEMY_RADIUS, Boss, Bullet, Eel, Entity, Fish, Puffer

FISH_SWAY_AMPLITUDE = 30.0
FISH_SWAY_RATE = 3.0
EEL_WAVE_AMPLITUDE = 40.0
EEL_WAVE_RATE = 4.0
PUFFER_PULSE_BASE = ENEMY_RADIUS
PUFFER_PULSE_AMPLITUDE = 6.0
PUFFER_PULSE_RATE = 3.0
BOSS_TRACK_SPEED_X = 40.0
BOSS_TRACK_SPEED_Y = 20.0
BULLET_CULL_MARGIN = 20.0


def _fish_sway(entity: Fish, dt: float, aim: Vec2) -> None:
    del aim
    sway = math.sin(entity.age * FISH_SWAY_RATE) * FISH_SWAY_AMPLITUDE * dt
    entity.pos = entity.pos.offset(dx=sway)


def _eel_wave(entity: Eel, dt: float, aim: Vec2) -> None:
    del aim
    wave = math.sin(entity.age * EEL_WAVE_RATE) * EEL_WAVE_AMPLITUDE * dt
    entity.pos = entity.pos.offset(dy=wave)


def _puffer_pulse(entity: Puffer, dt: float, aim: Vec2) -> None:
    del dt, aim
    entity.radius = PUFFER_PULSE_BASE + math.sin(entity.age * PUFFER_PULSE_RATE) * PUFFER_PULSE_AMPLITUDE


def _boss_track(entity: Boss, dt: float, aim: Vec2) -> None:
    # Constant-speed homing: only the sign of the offset matters.
    entity.pos = entity.pos.offset(
        dx=sign(aim.x - entity.pos.x) * BOSS_TRACK_SPEED_X * dt,
        dy=sign(aim.y - entity.pos.y) * BOSS_TRACK_SPEED_Y * dt,
    )


def _bullet_cull(entity: Bullet, dt: float, aim: Vec2) -> None:
    del dt, aim
    if entity.pos.y < -BULLET_CULL_MARGIN:
        entity.alive = False


_MOTION_RULES: dict[type, Callable[..., None]] = {
    Fish: _fish_sway,
    Eel: _eel_wave,
    Puffer: _puffer_pulse,
    Boss: _boss_track,
    Bullet: _bullet_cull,
}


def advance_entity(entity: Entity, dt: float, aim: Vec2) -> None:
    """Integrate one entity by `dt` seconds, then apply its archetype rule."""
    entity.age += dt
    entity.pos = entity.pos + entity.vel * dt
    rule = _MOTION_RULES.get(type(entity))
    if rule is not None:
        rule(entity, dt, aim)


def advance_entities(entities: list[Entity], dt: float, aim: Vec2) -> None:
    for entity in entities:
        advance_entity(entity, dt, aim)
