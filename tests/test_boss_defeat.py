from __future__ import annotations

import random

from lagoon.geom import Vec2
from oceanhunter.boss import boss_defeat_due, evaluate_boss, evaluate_bosses
from oceanhunter.collision import resolve_bullet_hits
from oceanhunter.entities import Boss, BossState, Bullet, WeakPoint
from oceanhunter.particles import ParticlePool
from oceanhunter.sim.state import GameState


def _boss() -> Boss:
    return Boss(
        pos=Vec2(640.0, 360.0),
        hp=70,
        score=2500,
        weak_points=[
            WeakPoint(offset=Vec2(-70.0, -90.0), hp=1, score=250),
            WeakPoint(offset=Vec2(70.0, -90.0), hp=1, score=250),
        ],
    )


def test_destroying_all_weak_points_defeats_boss() -> None:
    boss = _boss()
    state = GameState(score=100)
    particles = ParticlePool()
    rng = random.Random(0)
    entities = [boss, Bullet(pos=Vec2(570.0, 270.0)), Bullet(pos=Vec2(710.0, 270.0))]

    hits = resolve_bullet_hits(entities, state, particles, rng)
    defeated = evaluate_bosses(entities, state, particles, rng)

    assert [hit.killed for hit in hits] == [True, True]
    assert defeated == [boss]
    assert boss.state is BossState.DESTROYED
    assert not boss.alive
    assert state.score == 100 + 250 + 250 + 2500
    assert len(particles) == 30


def test_destroyed_is_terminal() -> None:
    boss = _boss()
    for wp in boss.weak_points:
        wp.alive = False
    state = GameState()
    particles = ParticlePool()
    rng = random.Random(0)

    assert evaluate_boss(boss, state, particles, rng)
    assert not evaluate_boss(boss, state, particles, rng)
    assert state.score == 2500
    assert len(particles) == 30


def test_boss_with_partial_weak_points_stays_alive() -> None:
    boss = _boss()
    boss.weak_points[0].alive = False

    assert not boss_defeat_due(boss)
    assert not evaluate_boss(boss, GameState(), ParticlePool(), random.Random(0))
    assert boss.state is BossState.ALIVE


def test_boss_hp_at_zero_defeats_boss() -> None:
    boss = _boss()
    boss.hp = 0
    state = GameState()

    assert boss_defeat_due(boss)
    assert evaluate_boss(boss, state, ParticlePool(), random.Random(0))
    assert boss.state is BossState.DESTROYED
    assert state.score == 2500


def test_boss_without_weak_points_is_destroyed_at_once() -> None:
    boss = Boss(pos=Vec2(), hp=10)
    state = GameState()
    particles = ParticlePool()

    assert boss.all_weak_points_down()
    assert evaluate_bosses([boss], state, particles, random.Random(0)) == [boss]
    assert boss.state is BossState.DESTROYED
    assert state.score == 1000
    assert len(particles) == 30
