"""Headless oracle mode.

Runs the simulation without a window at a fixed frame rate, replays an optional input
script, and emits one JSON line of game state every `sample_rate` frames.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import json
from pathlib import Path
import sys
from typing import Any, TextIO

from lagoon.console import ConsoleState, create_console
from lagoon.geom import Vec2

from .levels.types import LevelsDocument
from .sim.input import AimInput
from .sim.snapshot import build_snapshot
from .sim.state import SimSettings
from .sim.world import StepEvents, World


class OutputMode:
    """Output modes for oracle state emission."""

    FULL = "full"  # Every live entity
    SUMMARY = "summary"  # Counters and entity count only


@dataclass(frozen=True, slots=True)
class OracleConfig:
    levels: LevelsDocument
    seed: int
    input_file: Path | None = None
    max_frames: int = 3600  # one minute at 60fps
    frame_rate: int = 60
    sample_rate: int = 60
    output_mode: str = OutputMode.SUMMARY
    settings: SimSettings = field(default_factory=SimSettings)


@dataclass(slots=True)
class FrameInput:
    frame: int
    aim: Vec2 = field(default_factory=Vec2)
    fire_down: bool = False


def load_inputs(path: Path) -> list[FrameInput]:
    """Load an input script.

    Expected format:
    {
        "frames": [
            {"frame": 0, "aim": [640, 200], "fire_down": true},
            {"frame": 90, "aim": [400, 360], "fire_down": false}
        ]
    }

    Each entry holds until the next one.
    """
    data = json.loads(path.read_text(encoding="utf-8"))
    inputs: list[FrameInput] = []
    for entry in data.get("frames", []):
        raw_aim = entry.get("aim", [0.0, 0.0])
        if not isinstance(raw_aim, list) or len(raw_aim) != 2:
            raise ValueError(f"frame {entry.get('frame', 0)} has invalid aim payload: expected [x, y]")
        inputs.append(
            FrameInput(
                frame=int(entry.get("frame", 0)),
                aim=Vec2(float(raw_aim[0]), float(raw_aim[1])),
                fire_down=bool(entry.get("fire_down", False)),
            )
        )
    return sorted(inputs, key=lambda i: i.frame)


def export_frame(frame: int, world: World, events: StepEvents, output_mode: str) -> dict[str, Any]:
    snapshot = build_snapshot(world)
    payload: dict[str, Any] = {
        "frame": frame,
        "level": snapshot.level_name,
        "time": round(snapshot.level_time, 4),
        "score": snapshot.hud.score,
        "wave": snapshot.hud.wave,
        "lives": snapshot.hud.lives,
        "entity_count": len(snapshot.entities),
        "particle_count": len(snapshot.particles),
        "hits": len(events.hits),
    }
    if output_mode == OutputMode.FULL:
        payload["state"] = snapshot.to_dict(ndigits=4)
    return payload


def run_headless(
    config: OracleConfig,
    *,
    out: TextIO | None = None,
    console: ConsoleState | None = None,
) -> World:
    """Run the world for `max_frames` frames, writing JSON lines to `out` (default stdout)."""
    out = out if out is not None else sys.stdout
    world = World.build(
        levels=config.levels,
        settings=config.settings,
        console=console if console is not None else create_console(None),
        seed=config.seed,
    )

    inputs_by_frame: dict[int, FrameInput] = {}
    if config.input_file is not None:
        for inp in load_inputs(config.input_file):
            inputs_by_frame[inp.frame] = inp

    dt = 1.0 / float(config.frame_rate)
    sample_rate = max(1, int(config.sample_rate))
    current = FrameInput(frame=0, aim=world.settings.center)

    for frame in range(int(config.max_frames)):
        current = inputs_by_frame.get(frame, current)
        events = world.step(dt, AimInput(aim=current.aim, fire_down=current.fire_down))
        if frame % sample_rate == 0 or events.level_completed or events.defeated_bosses:
            out.write(json.dumps(export_frame(frame, world, events, config.output_mode), separators=(",", ":")))
            out.write("\n")
    return world
