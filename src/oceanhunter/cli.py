from __future__ import annotations

from pathlib import Path

import typer

from lagoon.config import OCEANHUNTER_CFG_NAME, OCEANHUNTER_CFG_STRUCT, ensure_cfg, load_cfg
from lagoon.console import create_console

from .levels.loader import LEVELS_FILE_NAME, load_levels
from .levels.types import LevelScript, SpawnEvent
from .paths import DEFAULT_ASSETS_DIR, RUNTIME_DIR_ENV, default_runtime_dir
from .sim.state import SimSettings
from .spawn import DEFAULT_SPAWN_FRACTION

app = typer.Typer(add_completion=False)

_BASE_DIR_HELP = f"base path for runtime files (default: per-user OS data dir; override with {RUNTIME_DIR_ENV})"


def _resolve_levels_path(levels: Path | None, assets_dir: Path) -> Path | None:
    if levels is not None:
        return levels
    candidate = assets_dir / LEVELS_FILE_NAME
    return candidate if candidate.is_file() else None


def _format_spawn(idx: int, event: SpawnEvent) -> str:
    x = DEFAULT_SPAWN_FRACTION if event.x is None else event.x
    y = DEFAULT_SPAWN_FRACTION if event.y is None else event.y
    parts = [
        f"{idx:02d}",
        f"t={event.t:6.2f}",
        f"type={event.type:<7s}",
        f"pos=({x:.2f},{y:.2f})",
    ]
    if event.vx or event.vy:
        parts.append(f"vel=({event.vx or 0.0:.1f},{event.vy or 0.0:.1f})")
    if event.hp is not None:
        parts.append(f"hp={event.hp:g}")
    if event.score is not None:
        parts.append(f"score={event.score:g}")
    if event.weakpoints:
        parts.append(f"weakpoints={len(event.weakpoints)}")
    return " ".join(parts)


def _format_level(idx: int, level: LevelScript) -> list[str]:
    header = (
        f"Level {idx} {level.name!r} length={level.length:g}s"
        f" camera.speed={level.camera.effective_speed():g} last_spawn={level.last_trigger():g}s"
    )
    lines = [header]
    for spawn_idx, event in enumerate(level.spawns, start=1):
        line = _format_spawn(spawn_idx, event)
        if event.t > level.length:
            line += "  (after level end, never spawns)"
        lines.append(line)
    return lines


@app.command("levels")
def cmd_levels(
    levels: Path | None = typer.Argument(None, help=f"path to {LEVELS_FILE_NAME} (default: built-in script)"),
) -> None:
    """Print the spawn timeline of every level in a level document."""
    console = create_console(None)
    result = load_levels(levels, console)
    if levels is not None and result.used_fallback:
        typer.echo(f"warning: {result.error}; showing built-in script", err=True)
    typer.echo(f"source: {result.source}")
    for idx, level in enumerate(result.document.levels):
        for line in _format_level(idx, level):
            typer.echo(line)


@app.command("run")
def cmd_run(
    levels: Path | None = typer.Option(None, help=f"path to {LEVELS_FILE_NAME}"),
    assets_dir: Path = typer.Option(DEFAULT_ASSETS_DIR, help="directory holding img/, ui/ and sfx/"),
    base_dir: Path = typer.Option(default_runtime_dir(), "--base-dir", "--runtime-dir", help=_BASE_DIR_HELP),
    seed: int | None = typer.Option(None, help="seed for cosmetic particle randomness"),
    fps: int = typer.Option(60, help="target frame rate"),
) -> None:
    """Open the game window."""
    from lagoon.app import run_view

    from .sim.world import World
    from .views.game import GameView

    console = create_console(base_dir)
    try:
        config = ensure_cfg(base_dir)
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc
    result = load_levels(_resolve_levels_path(levels, assets_dir), console)
    settings = SimSettings.from_config(config)
    world = World.build(levels=result.document, settings=settings, console=console, seed=seed)
    view = GameView(world, config=config, assets_dir=assets_dir, console=console)
    run_view(view, width=config.screen_width, height=config.screen_height, fps=fps)


@app.command("oracle")
def cmd_oracle(
    levels: Path | None = typer.Option(None, help=f"path to {LEVELS_FILE_NAME}"),
    seed: int = typer.Option(0xBEEF, help="RNG seed for deterministic runs"),
    input_file: Path | None = typer.Option(None, "--input-file", "-i", help="JSON file with input sequence"),
    max_frames: int = typer.Option(3600, help="frames to simulate"),
    frame_rate: int = typer.Option(60, help="frame rate for simulation"),
    sample_rate: int = typer.Option(60, "--sample-rate", "-s", help="emit state every N frames"),
    output_mode: str = typer.Option("summary", "--output", "-o", help="output mode: summary or full"),
) -> None:
    """Run the simulation headless, emitting JSON lines of game state."""
    from .oracle import OracleConfig, OutputMode, run_headless

    modes = (OutputMode.SUMMARY, OutputMode.FULL)
    if output_mode not in modes:
        typer.echo(f"Invalid output mode: {output_mode!r}. Choose from: {', '.join(modes)}", err=True)
        raise typer.Exit(code=1)
    if frame_rate <= 0:
        raise typer.BadParameter("frame rate must be positive", param_hint="--frame-rate")

    console = create_console(None)
    result = load_levels(levels, console)
    if levels is not None and result.used_fallback:
        typer.echo(f"warning: {result.error}; using built-in script", err=True)
    config = OracleConfig(
        levels=result.document,
        seed=seed,
        input_file=input_file,
        max_frames=max_frames,
        frame_rate=frame_rate,
        sample_rate=sample_rate,
        output_mode=output_mode,
    )
    try:
        run_headless(config, console=console)
    except (OSError, ValueError) as exc:
        # Covers unreadable or malformed input scripts (json.JSONDecodeError is a ValueError).
        typer.echo(f"oracle: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def _format_cfg_value(value: object) -> str:
    if isinstance(value, (bytes, bytearray)):
        return f"0x{bytes(value).hex()} (len={len(value)})"
    if isinstance(value, float):
        return f"{value:.6g}"
    return str(value)


@app.command("config")
def cmd_config(
    path: Path | None = typer.Option(None, help=f"path to {OCEANHUNTER_CFG_NAME} (default: base-dir/{OCEANHUNTER_CFG_NAME})"),
    base_dir: Path = typer.Option(default_runtime_dir(), "--base-dir", "--runtime-dir", help=_BASE_DIR_HELP),
) -> None:
    """Inspect oceanhunter.cfg configuration values (created with defaults if absent)."""
    try:
        config = load_cfg(path) if path is not None else ensure_cfg(base_dir)
    except (OSError, ValueError) as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(f"path: {config.path}")
    typer.echo(f"screen: {config.screen_width}x{config.screen_height}")
    typer.echo(f"windowed: {config.windowed_flag}")
    typer.echo("fields:")
    for sub in OCEANHUNTER_CFG_STRUCT.subcons:
        name = sub.name
        if not name or name.startswith("reserved"):
            continue
        typer.echo(f"{name}: {_format_cfg_value(config.data[name])}")


def main(argv: list[str] | None = None) -> None:
    app(prog_name="oceanhunter", args=argv)


if __name__ == "__main__":
    main()
