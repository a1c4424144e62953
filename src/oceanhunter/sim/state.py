from __future__ import annotations

from dataclasses import dataclass, field

from lagoon.config import (
    DEFAULT_FIRE_RATE,
    DEFAULT_LIVES,
    DEFAULT_MAX_FRAME_DT,
    DEFAULT_SCREEN_HEIGHT,
    DEFAULT_SCREEN_WIDTH,
    GameConfig,
)
from lagoon.geom import Vec2

PARALLAX_SCALE = 30.0


@dataclass(frozen=True, slots=True)
class SimSettings:
    width: float = float(DEFAULT_SCREEN_WIDTH)
    height: float = float(DEFAULT_SCREEN_HEIGHT)
    lives: int = DEFAULT_LIVES
    fire_rate: float = DEFAULT_FIRE_RATE
    max_frame_dt: float = DEFAULT_MAX_FRAME_DT

    def __post_init__(self) -> None:
        if not (float(self.fire_rate) > 0.0):
            raise ValueError(f"fire_rate must be positive, got {self.fire_rate}")
        if not (float(self.max_frame_dt) > 0.0):
            raise ValueError(f"max_frame_dt must be positive, got {self.max_frame_dt}")

    @property
    def fire_interval(self) -> float:
        return 1.0 / float(self.fire_rate)

    @property
    def center(self) -> Vec2:
        return Vec2(float(self.width) * 0.5, float(self.height) * 0.5)

    @classmethod
    def from_config(cls, config: GameConfig) -> SimSettings:
        return cls(
            width=float(config.screen_width),
            height=float(config.screen_height),
            lives=int(config.lives),
            fire_rate=float(config.fire_rate),
            max_frame_dt=float(config.max_frame_dt),
        )


@dataclass(slots=True)
class GameState:
    score: int = 0
    lives: int = DEFAULT_LIVES
    wave: int = 1
    time: float = 0.0
    shooting: bool = False
    last_shot: float = 0.0
    aim: Vec2 = field(default_factory=Vec2)
    scroll: float = 0.0

    @classmethod
    def new_game(cls, settings: SimSettings) -> GameState:
        return cls(lives=int(settings.lives), aim=settings.center)

    def award(self, points: int) -> None:
        self.score += int(points)

    def reset_level_clock(self) -> None:
        self.time = 0.0
        self.last_shot = 0.0
