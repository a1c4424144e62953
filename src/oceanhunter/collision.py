from __future__ import annotations

from dataclasses import dataclass
import random

from lagoon.geom import Vec2, circles_overlap

from .entities import Archetype, Boss, Bullet, Enemy, Entity
from .particles import ParticlePool
from .sim.state import GameState

BULLET_DAMAGE = 1


@dataclass(frozen=True, slots=True)
class Hit:
    target: Archetype
    pos: Vec2
    killed: bool
    weak_point_index: int | None = None


def _hit_boss(bullet: Bullet, boss: Boss, state: GameState) -> Hit | None:
    # Only weak points are hit-tested; the body never takes damage.
    for idx, weak_point in enumerate(boss.weak_points):
        if not weak_point.alive:
            continue
        wp_pos = weak_point.world_pos(boss.pos)
        if not circles_overlap(bullet.pos, bullet.radius, wp_pos, weak_point.radius):
            continue
        weak_point.hp -= BULLET_DAMAGE
        bullet.alive = False
        killed = weak_point.hp <= 0
        if killed:
            weak_point.alive = False
            state.award(weak_point.score)
        return Hit(target=Archetype.BOSS, pos=wp_pos, killed=killed, weak_point_index=idx)
    return None


def _hit_enemy(
    bullet: Bullet,
    target: Enemy,
    state: GameState,
    particles: ParticlePool,
    rng: random.Random,
) -> Hit | None:
    if not circles_overlap(bullet.pos, bullet.radius, target.pos, target.radius):
        return None
    target.hp -= BULLET_DAMAGE
    bullet.alive = False
    killed = target.hp <= 0
    if killed:
        target.alive = False
        state.award(target.score)
        particles.spawn_hit_burst(target.pos, rng)
    return Hit(target=target.kind, pos=target.pos, killed=killed)


def resolve_bullet_hits(
    entities: list[Entity],
    state: GameState,
    particles: ParticlePool,
    rng: random.Random,
) -> list[Hit]:
    """Apply every bullet-vs-target hit for this step.

    Bullets are tested in collection order against live targets in collection order. A bullet
    is spent by its first hit and leaves the candidate loop at once, so it can damage at most one
    target per step. Nothing is removed here; dead entities stay in `entities` until the prune.
    """

    hits: list[Hit] = []
    bullets = [entity for entity in entities if isinstance(entity, Bullet) and entity.alive]
    for bullet in bullets:
        for target in entities:
            if isinstance(target, Bullet) or not target.alive:
                continue
            if isinstance(target, Boss):
                hit = _hit_boss(bullet, target, state)
            else:
                hit = _hit_enemy(bullet, target, state, particles, rng)
            if hit is not None:
                hits.append(hit)
                break
    return hits
