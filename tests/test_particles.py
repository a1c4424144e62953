from __future__ import annotations

import random

import pytest

from lagoon.geom import Vec2
from oceanhunter.particles import ParticlePool


def test_hit_burst_spread_and_lifetime() -> None:
    pool = ParticlePool()
    pool.spawn_hit_burst(Vec2(10.0, 20.0), random.Random(7))

    assert len(pool) == 10
    for particle in pool.entries:
        assert particle.pos == Vec2(10.0, 20.0)
        assert -100.0 <= particle.vel.x <= 100.0
        assert -100.0 <= particle.vel.y <= 100.0
        assert particle.lifetime == pytest.approx(0.5)


def test_boss_burst_is_larger() -> None:
    pool = ParticlePool()
    pool.spawn_boss_burst(Vec2(), random.Random(7))

    assert len(pool) == 30
    assert all(particle.lifetime == pytest.approx(0.8) for particle in pool.entries)
    assert all(abs(particle.vel.x) <= 150.0 for particle in pool.entries)


def test_particles_fade_and_expire() -> None:
    pool = ParticlePool()
    pool.spawn_burst(Vec2(), count=3, speed=0.0, lifetime=0.5, rng=random.Random(1))

    assert pool.update(0.25) == 0
    assert pool.entries[0].fade == pytest.approx(0.5)

    assert pool.update(0.25) == 3
    assert len(pool) == 0
