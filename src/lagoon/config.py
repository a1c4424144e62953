from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from construct import Byte, Bytes, Float32l, Int32ul, Struct

OCEANHUNTER_CFG_NAME = "oceanhunter.cfg"
OCEANHUNTER_CFG_SIZE = 0x40
RESERVED_SIZE = 0x20

DEFAULT_SCREEN_WIDTH = 1280
DEFAULT_SCREEN_HEIGHT = 720
DEFAULT_LIVES = 3
DEFAULT_FIRE_RATE = 8.0
DEFAULT_MAX_FRAME_DT = 0.033

OCEANHUNTER_CFG_STRUCT = Struct(
    "sound_disable" / Byte,
    "music_disable" / Byte,
    "windowed_flag" / Byte,
    "reserved_03" / Byte,
    "screen_width" / Int32ul,
    "screen_height" / Int32ul,
    "lives" / Int32ul,
    "fire_rate" / Float32l,
    "max_frame_dt" / Float32l,
    "sfx_volume" / Float32l,
    "music_volume" / Float32l,
    "reserved" / Bytes(RESERVED_SIZE),
)


@dataclass(slots=True)
class GameConfig:
    path: Path
    data: dict

    @property
    def screen_width(self) -> int:
        return int(self.data["screen_width"])

    @screen_width.setter
    def screen_width(self, value: int) -> None:
        self.data["screen_width"] = int(value)

    @property
    def screen_height(self) -> int:
        return int(self.data["screen_height"])

    @screen_height.setter
    def screen_height(self, value: int) -> None:
        self.data["screen_height"] = int(value)

    @property
    def windowed_flag(self) -> int:
        return int(self.data["windowed_flag"])

    @windowed_flag.setter
    def windowed_flag(self, value: int) -> None:
        self.data["windowed_flag"] = int(value) & 0xFF

    @property
    def lives(self) -> int:
        return int(self.data["lives"])

    @property
    def fire_rate(self) -> float:
        return float(self.data["fire_rate"])

    @property
    def max_frame_dt(self) -> float:
        # float32 storage; 0.033 reads back as 0.032999999821186066.
        return round(float(self.data["max_frame_dt"]), 6)

    def save(self) -> None:
        self.path.write_bytes(OCEANHUNTER_CFG_STRUCT.build(self.data))


def default_cfg_data() -> dict:
    data = OCEANHUNTER_CFG_STRUCT.parse(bytes(OCEANHUNTER_CFG_SIZE))
    config = GameConfig(path=Path("<memory>"), data=data)
    config.screen_width = DEFAULT_SCREEN_WIDTH
    config.screen_height = DEFAULT_SCREEN_HEIGHT
    config.windowed_flag = 1
    config.data["lives"] = DEFAULT_LIVES
    config.data["fire_rate"] = DEFAULT_FIRE_RATE
    config.data["max_frame_dt"] = DEFAULT_MAX_FRAME_DT
    config.data["sfx_volume"] = 1.0
    config.data["music_volume"] = 1.0
    return data


def _patch_invalid_values(config: GameConfig) -> bool:
    patched = False
    if config.screen_width <= 0 or config.screen_height <= 0:
        config.screen_width = DEFAULT_SCREEN_WIDTH
        config.screen_height = DEFAULT_SCREEN_HEIGHT
        patched = True
    if config.lives < 1:
        config.data["lives"] = DEFAULT_LIVES
        patched = True
    if not (config.fire_rate > 0.0):
        config.data["fire_rate"] = DEFAULT_FIRE_RATE
        patched = True
    if not (config.max_frame_dt > 0.0):
        config.data["max_frame_dt"] = DEFAULT_MAX_FRAME_DT
        patched = True
    return patched


def load_cfg(path: Path) -> GameConfig:
    data = path.read_bytes()
    if len(data) != OCEANHUNTER_CFG_SIZE:
        raise ValueError(f"{path} has unexpected size {len(data)} (expected {OCEANHUNTER_CFG_SIZE})")
    parsed = OCEANHUNTER_CFG_STRUCT.parse(data)
    return GameConfig(path=path, data=parsed)


def ensure_cfg(base_dir: Path) -> GameConfig:
    path = base_dir / OCEANHUNTER_CFG_NAME
    if path.exists():
        config = load_cfg(path)
        # Older or hand-edited files may carry zeroed fields.
        if _patch_invalid_values(config):
            config.save()
        return config
    base_dir.mkdir(parents=True, exist_ok=True)
    config = GameConfig(path=path, data=default_cfg_data())
    config.save()
    return config
