from __future__ import annotations

import pytest

from lagoon.geom import Vec2
from oceanhunter.entities import Boss, BossState, Bullet, Fish
from oceanhunter.levels import FALLBACK_LEVELS, CameraSpec, LevelScript, LevelsDocument, SpawnEvent, WeakPointSpec
from oceanhunter.levels.timeline import tick_spawn_timeline
from oceanhunter.sim.input import AimInput
from oceanhunter.sim.state import SimSettings
from oceanhunter.sim.world import World, resolve_level_index


def _document(*levels: LevelScript) -> LevelsDocument:
    return LevelsDocument(levels=levels)


def _quiet_level(name: str = "Quiet", length: float = 45.0) -> LevelScript:
    return LevelScript(name=name, length=length, spawns=())


def test_first_fallback_spawn_at_two_seconds() -> None:
    spawns = FALLBACK_LEVELS.levels[0].spawns
    cursor, due = tick_spawn_timeline(spawns, 0, 2.0)
    assert cursor == 1
    assert [event.type for event in due] == ["fish"]

    world = World.build(levels=FALLBACK_LEVELS, seed=1)
    world.state.time = 1.99
    events = world.step(0.02)

    assert len(events.spawned) == 1
    fish = events.spawned[0]
    assert isinstance(fish, Fish)
    assert fish.pos.y == pytest.approx(0.3 * 720.0, abs=1.0)
    assert fish.pos.x == pytest.approx(0.3 * 1280.0, abs=1.0)


def test_step_clamps_long_frames() -> None:
    world = World.build(levels=_document(_quiet_level()), seed=1)

    events = world.step(0.050)

    assert events.dt == pytest.approx(0.033)
    assert world.state.time == pytest.approx(0.033)


def test_level_rollover_at_length() -> None:
    world = World.build(levels=_document(_quiet_level(length=45.0)), seed=1)
    world.state.time = 44.99
    world.entities.append(Fish(pos=Vec2(10.0, 10.0)))

    events = world.step(0.02)

    assert events.level_completed
    assert world.state.wave == 2
    assert world.state.time == 0.0
    assert world.entities == []
    assert len(world.particles) == 0
    assert world.level_index == 0


def test_waves_past_last_level_replay_it() -> None:
    world = World.build(levels=_document(_quiet_level("One", 1.0), _quiet_level("Two", 1.0)), seed=1)

    for _ in range(3):
        world.state.time = 0.99
        assert world.step(0.02).level_completed

    assert world.state.wave == 4
    assert world.level_index == 1
    assert world.level.name == "Two"


def test_resolve_level_index() -> None:
    assert resolve_level_index(0, 3) == 0
    assert resolve_level_index(7, 3) == 2
    with pytest.raises(ValueError):
        resolve_level_index(0, 0)


def test_auto_fire_rate_limited() -> None:
    world = World.build(levels=_document(_quiet_level()), seed=1)
    inp = AimInput(aim=Vec2(640.0, 360.0), fire_down=True)

    shots = sum(world.step(0.033, inp).shots for _ in range(30))

    assert shots == 7


def test_no_fire_without_trigger() -> None:
    world = World.build(levels=_document(_quiet_level()), seed=1)

    events = world.step(0.033, AimInput(aim=Vec2(640.0, 360.0), fire_down=False))

    assert events.shots == 0
    assert world.entities == []


def test_aim_is_clamped_to_playfield() -> None:
    world = World.build(levels=_document(_quiet_level()), settings=SimSettings(width=800, height=600), seed=1)

    world.step(0.016, AimInput(aim=Vec2(-50.0, 9000.0)))

    assert world.state.aim == Vec2(0.0, 600.0)


def test_spawned_entities_move_in_same_step() -> None:
    level = LevelScript(
        name="Boss",
        spawns=(SpawnEvent(t=0.0, type="boss", hp=5, weakpoints=(WeakPointSpec(dx=0.0, dy=-90.0),)),),
    )
    world = World.build(levels=_document(level), seed=1)

    events = world.step(0.016)

    assert len(events.spawned) == 1
    boss = events.spawned[0]
    assert isinstance(boss, Boss)
    assert boss.age == pytest.approx(0.016)
    assert "boss" in events.sfx


def test_unknown_spawn_type_is_logged_and_skipped() -> None:
    level = LevelScript(name="Odd", spawns=(SpawnEvent(t=0.0, type="kraken"), SpawnEvent(t=0.0, type="fish")))
    world = World.build(levels=_document(level), seed=1)

    events = world.step(0.016)

    assert [type(entity) for entity in events.spawned] == [Fish]
    assert any("kraken" in line for line in world.console.log.lines)


def test_shot_kills_enemy_and_is_pruned() -> None:
    level = LevelScript(name="Target", spawns=(SpawnEvent(t=0.0, type="fish", x=0.5, y=0.5, score=75),))
    world = World.build(levels=_document(level), seed=1)
    world.state.time = 0.2
    world.state.last_shot = 0.0

    events = world.step(0.016, AimInput(aim=Vec2(640.0, 360.0), fire_down=True))

    assert events.shots == 1
    assert [hit.killed for hit in events.hits] == [True]
    assert "hit" in events.sfx
    assert world.state.score == 75
    assert world.entities == []
    assert len(world.particles) == 10


def test_level_data_is_not_mutated() -> None:
    document = _document(_quiet_level())
    world = World.build(levels=document, seed=1)

    assert world.level == document.levels[0]
    assert world.level is not document.levels[0]


def test_new_game_resets_state() -> None:
    world = World.build(levels=_document(_quiet_level()), seed=1)
    world.state.score = 500
    world.state.wave = 3

    world.new_game()

    assert world.state.score == 0
    assert world.state.wave == 1
    assert world.state.lives == 3


def test_fallback_level_rolls_over_at_45_seconds() -> None:
    world = World.build(levels=FALLBACK_LEVELS, seed=2)
    world.state.time = 44.99

    events = world.step(0.02, AimInput(aim=Vec2(640.0, 360.0), fire_down=True))

    assert events.level_completed
    assert world.state.wave == 2
    assert world.entities == []
    assert len(world.particles) == 0
    assert world.spawn_cursor == 0
    assert world.state.last_shot == 0.0


def test_boss_without_weak_points_falls_on_spawn_step() -> None:
    level = LevelScript(name="Bare", spawns=(SpawnEvent(t=0.0, type="boss"),))
    world = World.build(levels=_document(level), seed=1)

    events = world.step(0.016)

    boss = events.spawned[0]
    assert isinstance(boss, Boss)
    assert boss.state is BossState.DESTROYED
    assert events.defeated_bosses == [boss]
    assert world.state.score == 1000
    assert len(world.particles) == 30
    assert world.entities == []


def test_fallback_boss_defeat_through_step() -> None:
    world = World.build(levels=FALLBACK_LEVELS, seed=5)
    world.state.time = 24.99
    spawned = world.step(0.02).spawned
    boss = spawned[-1]
    assert isinstance(boss, Boss)
    assert boss.pos == Vec2(640.0, 360.0)
    assert world.state.score == 0

    dt = 0.016
    for weak_point in boss.weak_points:
        target = weak_point.world_pos(boss.pos)
        # Five bullets per weak point, placed so they reach it after this step's move.
        world.entities.extend(Bullet(pos=target.offset(dy=1200.0 * dt)) for _ in range(weak_point.hp))

    events = world.step(dt)

    assert len(events.hits) == 10
    assert events.defeated_bosses == [boss]
    assert boss.state is BossState.DESTROYED
    assert world.state.score == 250 + 250 + 2500
    assert len(world.particles) == 30
    assert boss not in world.entities


def test_zero_camera_speed_scrolls_at_default() -> None:
    level = LevelScript(name="Still", camera=CameraSpec(speed=0.0))
    world = World.build(levels=_document(level), seed=1)

    world.step(0.02)

    assert world.state.scroll == pytest.approx(4.0 * 0.02 * 30.0)
