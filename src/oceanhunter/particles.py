from __future__ import annotations

from dataclasses import dataclass
import random

from lagoon.geom import Vec2

HIT_BURST_COUNT = 10
HIT_BURST_SPEED = 200.0
HIT_BURST_LIFETIME = 0.5
BOSS_BURST_COUNT = 30
BOSS_BURST_SPEED = 300.0
BOSS_BURST_LIFETIME = 0.8


@dataclass(slots=True)
class Particle:
    pos: Vec2
    vel: Vec2
    lifetime: float
    age: float = 0.0

    @property
    def expired(self) -> bool:
        return self.age >= self.lifetime

    @property
    def fade(self) -> float:
        if self.lifetime <= 0.0:
            return 1.0
        return min(1.0, self.age / self.lifetime)


class ParticlePool:
    def __init__(self) -> None:
        self._entries: list[Particle] = []

    @property
    def entries(self) -> list[Particle]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def reset(self) -> None:
        self._entries.clear()

    def spawn_burst(
        self,
        pos: Vec2,
        *,
        count: int,
        speed: float,
        lifetime: float,
        rng: random.Random,
    ) -> None:
        """Emit `count` particles at `pos`, each axis velocity uniform in [-speed/2, speed/2]."""
        for _ in range(int(count)):
            vel = Vec2((rng.random() - 0.5) * speed, (rng.random() - 0.5) * speed)
            self._entries.append(Particle(pos=pos, vel=vel, lifetime=float(lifetime)))

    def spawn_hit_burst(self, pos: Vec2, rng: random.Random) -> None:
        self.spawn_burst(pos, count=HIT_BURST_COUNT, speed=HIT_BURST_SPEED, lifetime=HIT_BURST_LIFETIME, rng=rng)

    def spawn_boss_burst(self, pos: Vec2, rng: random.Random) -> None:
        self.spawn_burst(pos, count=BOSS_BURST_COUNT, speed=BOSS_BURST_SPEED, lifetime=BOSS_BURST_LIFETIME, rng=rng)

    def update(self, dt: float) -> int:
        """Advance every particle and drop expired ones; returns the number dropped."""
        for particle in self._entries:
            particle.age += dt
            particle.pos = particle.pos + particle.vel * dt
        before = len(self._entries)
        self._entries = [particle for particle in self._entries if not particle.expired]
        return before - len(self._entries)
