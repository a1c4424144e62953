from __future__ import annotations

from dataclasses import dataclass, field
import random

import msgspec

from lagoon.console import ConsoleState, create_console

from ..boss import evaluate_bosses
from ..collision import Hit, resolve_bullet_hits
from ..entities import Boss, Entity, Enemy, spawn_bullet
from ..levels.types import LevelScript, LevelsDocument
from ..levels.timeline import tick_spawn_timeline
from ..motion import advance_entities
from ..particles import ParticlePool
from ..spawn import spawn_entity
from .clock import clamp_frame_dt
from .input import AimInput
from .state import PARALLAX_SCALE, GameState, SimSettings


@dataclass(slots=True)
class StepEvents:
    dt: float
    spawned: list[Enemy] = field(default_factory=list)
    hits: list[Hit] = field(default_factory=list)
    defeated_bosses: list[Boss] = field(default_factory=list)
    sfx: list[str] = field(default_factory=list)
    shots: int = 0
    level_completed: bool = False


def resolve_level_index(index: int, level_count: int) -> int:
    """Clamp a level index into range; waves past the last level replay it."""
    if level_count <= 0:
        raise ValueError("no levels to select from")
    return max(0, min(int(index), int(level_count) - 1))


def _clone_level(level: LevelScript) -> LevelScript:
    return msgspec.convert(msgspec.to_builtins(level), type=LevelScript)


@dataclass(slots=True)
class World:
    settings: SimSettings
    levels: LevelsDocument
    console: ConsoleState
    rng: random.Random
    state: GameState
    particles: ParticlePool
    entities: list[Entity] = field(default_factory=list)
    active_level: LevelScript | None = None
    level_index: int = 0
    spawn_cursor: int = 0

    @classmethod
    def build(
        cls,
        *,
        levels: LevelsDocument,
        settings: SimSettings | None = None,
        console: ConsoleState | None = None,
        seed: int | None = None,
    ) -> World:
        if not levels.levels:
            raise ValueError("level document has no levels")
        settings = settings if settings is not None else SimSettings()
        world = cls(
            settings=settings,
            levels=levels,
            console=console if console is not None else create_console(None),
            rng=random.Random(seed) if seed is not None else random.Random(),
            state=GameState.new_game(settings),
            particles=ParticlePool(),
        )
        world.start_level(0)
        return world

    @property
    def level(self) -> LevelScript:
        if self.active_level is None:
            raise RuntimeError("no active level; call start_level first")
        return self.active_level

    def new_game(self) -> None:
        self.state = GameState.new_game(self.settings)
        self.start_level(0)

    def start_level(self, level_index: int) -> None:
        idx = resolve_level_index(level_index, len(self.levels.levels))
        self.active_level = _clone_level(self.levels.levels[idx])
        self.level_index = idx
        self.entities = []
        self.particles.reset()
        self.spawn_cursor = 0
        self.state.reset_level_clock()
        self.console.log.log(f"level: wave {self.state.wave} -> '{self.active_level.name}' ({idx})")

    def step(self, dt: float, inp: AimInput | None = None) -> StepEvents:
        """Advance the simulation by one frame.

        Fixed order: spawn, fire, move, collide, boss defeat, particles, prune, progression.
        """

        dt = clamp_frame_dt(dt, max_dt=self.settings.max_frame_dt)
        events = StepEvents(dt=dt)
        state = self.state
        level = self.level

        if inp is not None:
            inp = inp.clamped(self.settings.width, self.settings.height)
            state.aim = inp.aim
            state.shooting = inp.fire_down

        state.time += dt
        state.scroll += level.camera.effective_speed() * dt * PARALLAX_SCALE

        self._spawn_due(events)
        self._auto_fire(events)
        advance_entities(self.entities, dt, state.aim)

        events.hits = resolve_bullet_hits(self.entities, state, self.particles, self.rng)
        events.sfx.extend("hit" for _ in events.hits)

        events.defeated_bosses = evaluate_bosses(self.entities, state, self.particles, self.rng)
        for boss in events.defeated_bosses:
            self.console.log.log(f"boss: destroyed at t={state.time:.2f}, +{boss.score}")

        self.particles.update(dt)
        self.prune()
        events.level_completed = self.check_progression()
        return events

    def _spawn_due(self, events: StepEvents) -> None:
        level = self.level
        self.spawn_cursor, due = tick_spawn_timeline(level.spawns, self.spawn_cursor, self.state.time)
        for event in due:
            entity = spawn_entity(event, width=self.settings.width, height=self.settings.height)
            if entity is None:
                self.console.log.log(f"spawn: unknown archetype {event.type!r} at t={event.t}; skipped")
                continue
            self.entities.append(entity)
            events.spawned.append(entity)
            if isinstance(entity, Boss):
                events.sfx.append("boss")

    def _auto_fire(self, events: StepEvents) -> None:
        state = self.state
        if not state.shooting:
            return
        if state.time - state.last_shot < self.settings.fire_interval:
            return
        self.entities.append(spawn_bullet(state.aim))
        state.last_shot = state.time
        events.shots += 1
        events.sfx.append("shoot")

    def prune(self) -> None:
        self.entities = [entity for entity in self.entities if entity.alive]

    def check_progression(self) -> bool:
        if self.state.time < float(self.level.length):
            return False
        # Spawns scheduled past `length` never fire; the level simply rolls over.
        self.state.wave += 1
        self.start_level(self.state.wave - 1)
        return True
