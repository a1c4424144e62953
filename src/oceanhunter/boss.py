from __future__ import annotations

import random

from .entities import Boss, BossState, Entity
from .particles import ParticlePool
from .sim.state import GameState


def boss_defeat_due(boss: Boss) -> bool:
    return boss.all_weak_points_down() or boss.hp <= 0


def evaluate_boss(boss: Boss, state: GameState, particles: ParticlePool, rng: random.Random) -> bool:
    """Move `boss` to DESTROYED when its defeat condition holds; returns True on the transition.

    DESTROYED is terminal: later calls are no-ops and the completion bonus is paid once.
    """

    if boss.state is BossState.DESTROYED:
        return False
    if not boss_defeat_due(boss):
        return False
    boss.state = BossState.DESTROYED
    boss.alive = False
    state.award(boss.score)
    particles.spawn_boss_burst(boss.pos, rng)
    return True


def evaluate_bosses(
    entities: list[Entity],
    state: GameState,
    particles: ParticlePool,
    rng: random.Random,
) -> list[Boss]:
    defeated: list[Boss] = []
    for entity in entities:
        if isinstance(entity, Boss) and evaluate_boss(entity, state, particles, rng):
            defeated.append(entity)
    return defeated
