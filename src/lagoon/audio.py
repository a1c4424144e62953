from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import pyray as rl

from .config import GameConfig
from .console import ConsoleState


SFX_FILES: dict[str, tuple[str, ...]] = {
    "shoot": ("sfx/shoot.mp3", "sfx/shoot.ogg", "sfx/shoot.wav"),
    "hit": ("sfx/hit.mp3", "sfx/hit.ogg", "sfx/hit.wav"),
    "boss": ("sfx/boss_roar.mp3", "sfx/boss_roar.ogg", "sfx/boss_roar.wav"),
}


@dataclass(slots=True)
class AudioState:
    ready: bool
    sfx_enabled: bool
    sfx_volume: float
    sounds: dict[str, rl.Sound] = field(default_factory=dict)
    missing: set[str] = field(default_factory=set)


def init_audio_state(config: GameConfig, assets_dir: Path, console: ConsoleState) -> AudioState:
    sfx_enabled = int(config.data.get("sound_disable", 0)) == 0
    sfx_volume = float(config.data.get("sfx_volume", 1.0))
    if not sfx_enabled:
        console.log.log("audio: disabled")
        console.log.flush()
        return AudioState(ready=False, sfx_enabled=False, sfx_volume=sfx_volume)
    if not rl.is_audio_device_ready():
        rl.init_audio_device()
    if not rl.is_audio_device_ready():
        console.log.log("audio: device init failed")
        console.log.flush()
        return AudioState(ready=False, sfx_enabled=False, sfx_volume=sfx_volume)

    state = AudioState(ready=True, sfx_enabled=True, sfx_volume=sfx_volume)
    load_sfx(state, assets_dir, console)
    return state


def load_sfx(state: AudioState, assets_dir: Path, console: ConsoleState) -> None:
    if not state.ready or not state.sfx_enabled:
        return
    for key, candidates in SFX_FILES.items():
        sound = None
        for candidate in candidates:
            path = assets_dir / candidate
            if not path.is_file():
                continue
            sound = rl.load_sound(str(path))
            break
        if sound is None:
            # Missing sounds play as silence.
            state.missing.add(key)
            continue
        rl.set_sound_volume(sound, state.sfx_volume)
        state.sounds[key] = sound
    console.log.log(f"audio: sfx loaded {len(state.sounds)}/{len(SFX_FILES)}")
    if state.missing:
        console.log.log("audio: silent " + ", ".join(sorted(state.missing)))
    console.log.flush()


def play_sfx(state: AudioState, key: str) -> None:
    if not state.ready:
        return
    sound = state.sounds.get(key)
    if sound is None:
        return
    rl.play_sound(sound)


def shutdown_audio(state: AudioState) -> None:
    for sound in state.sounds.values():
        rl.unload_sound(sound)
    state.sounds.clear()
    if state.ready:
        rl.close_audio_device()
        state.ready = False
