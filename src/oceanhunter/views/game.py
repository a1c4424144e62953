from __future__ import annotations

from pathlib import Path

import pyray as rl

from lagoon.assets import TextureCache
from lagoon.audio import AudioState, init_audio_state, play_sfx, shutdown_audio
from lagoon.config import GameConfig
from lagoon.console import ConsoleState
from lagoon.geom import Vec2

from ..entities import Archetype
from ..sim.clock import FrameClock
from ..sim.input import AimInput
from ..sim.snapshot import EntityView, FrameSnapshot, build_snapshot
from ..sim.world import World

WATER_TOP = rl.Color(2, 45, 59, 255)
WATER_BOTTOM = rl.Color(0, 20, 28, 255)
BULLET_COLOR = rl.Color(136, 255, 255, 255)
FISH_COLOR = rl.Color(91, 209, 255, 255)
FISH_EYE_COLOR = rl.Color(2, 69, 94, 255)
EEL_COLOR = rl.Color(127, 255, 212, 255)
PUFFER_COLOR = rl.Color(245, 215, 110, 255)
PUFFER_OUTLINE = rl.Color(202, 169, 78, 255)
BOSS_COLOR = rl.Color(255, 155, 115, 255)
WEAK_POINT_COLOR = rl.Color(255, 98, 98, 255)
PARTICLE_COLOR = (180, 240, 255)
RETICLE_COLOR = rl.Color(157, 223, 255, 255)
HUD_COLOR = rl.Color(255, 255, 255, 153)
OVERLAY_COLOR = rl.Color(0, 0, 0, 160)

RETICLE_RADIUS = 18.0

TEXTURES: dict[str, str] = {
    "bg1": "img/bg_loop_1.png",
    "enemy_fish": "img/enemy_fish.png",
    "boss_jaws": "img/boss_jaws.png",
    "reticle": "ui/reticle.png",
}


def _ring(center: Vec2, radius: float, thickness: float, color: rl.Color) -> None:
    rl.draw_ring(center.to_rl(), max(0.0, radius - thickness * 0.5), radius + thickness * 0.5, 0.0, 360.0, 48, color)


def _draw_texture_centered(texture: rl.Texture2D, center: Vec2, width: float, height: float) -> None:
    src = rl.Rectangle(0.0, 0.0, float(texture.width), float(texture.height))
    dst = rl.Rectangle(center.x - width * 0.5, center.y - height * 0.5, width, height)
    rl.draw_texture_pro(texture, src, dst, rl.Vector2(0.0, 0.0), 0.0, rl.WHITE)


class GameView:
    """Raylib front-end: feeds mouse aim/fire into the world and draws its snapshot."""

    def __init__(self, world: World, *, config: GameConfig, assets_dir: Path, console: ConsoleState) -> None:
        self._world = world
        self._config = config
        self._console = console
        self._textures = TextureCache(assets_dir=assets_dir, console=console)
        self._assets_dir = assets_dir
        self._audio: AudioState | None = None
        self._clock = FrameClock(max_dt=world.settings.max_frame_dt)
        self._started = False

    def open(self) -> None:
        for name, rel_path in TEXTURES.items():
            self._textures.get_or_load(name, rel_path)
        self._audio = init_audio_state(self._config, self._assets_dir, self._console)
        self._console.log.log(f"assets: textures loaded {self._textures.loaded_count()}/{len(TEXTURES)}")
        self._console.log.flush()

    def close(self) -> None:
        self._textures.unload()
        if self._audio is not None:
            shutdown_audio(self._audio)
            self._audio = None
        self._console.log.flush()

    def _read_input(self) -> AimInput:
        if rl.get_touch_point_count() > 0:
            touch = rl.get_touch_position(0)
            return AimInput(aim=Vec2(touch.x, touch.y), fire_down=True)
        mouse = rl.get_mouse_position()
        fire_down = rl.is_mouse_button_down(rl.MouseButton.MOUSE_BUTTON_LEFT)
        return AimInput(aim=Vec2(mouse.x, mouse.y), fire_down=bool(fire_down))

    def _start_game(self) -> None:
        self._world.new_game()
        self._clock.reset()
        self._started = True

    def update(self, dt: float) -> None:
        # Frame deltas come from our own clock so level restarts begin with a zero step.
        del dt
        if not self._started:
            if rl.is_mouse_button_pressed(rl.MouseButton.MOUSE_BUTTON_LEFT):
                self._start_game()
            return
        frame_dt = self._clock.tick(rl.get_time())
        events = self._world.step(frame_dt, self._read_input())
        if events.level_completed:
            self._clock.reset()
            self._console.log.flush()
        if self._audio is not None:
            for key in events.sfx:
                play_sfx(self._audio, key)

    def _draw_background(self, snapshot: FrameSnapshot) -> None:
        width = rl.get_screen_width()
        height = rl.get_screen_height()
        bg = self._textures.texture("bg1")
        if bg is None:
            rl.draw_rectangle_gradient_v(0, 0, width, height, WATER_TOP, WATER_BOTTOM)
            return
        scale = max(width / bg.width, height / bg.height)
        draw_w = bg.width * scale
        draw_h = bg.height * scale
        x = -(snapshot.scroll % draw_w)
        src = rl.Rectangle(0.0, 0.0, float(bg.width), float(bg.height))
        while x < width:
            rl.draw_texture_pro(bg, src, rl.Rectangle(x, 0.0, draw_w, draw_h), rl.Vector2(0.0, 0.0), 0.0, rl.WHITE)
            x += draw_w

    def _draw_entity(self, view: EntityView) -> None:
        pos = view.pos
        if view.kind is Archetype.BULLET:
            rl.draw_circle_v(pos.to_rl(), view.radius, BULLET_COLOR)
        elif view.kind is Archetype.FISH:
            texture = self._textures.texture("enemy_fish")
            if texture is not None:
                _draw_texture_centered(texture, pos, 48.0, 36.0)
            else:
                rl.draw_ellipse(int(pos.x), int(pos.y), 30.0, 16.0, FISH_COLOR)
                rl.draw_rectangle(int(pos.x - 18), int(pos.y - 4), 12, 8, FISH_EYE_COLOR)
        elif view.kind is Archetype.EEL:
            rl.draw_spline_segment_bezier_quadratic(
                pos.offset(dx=-40.0).to_rl(),
                pos.offset(dy=-20.0).to_rl(),
                pos.offset(dx=40.0).to_rl(),
                6.0,
                EEL_COLOR,
            )
        elif view.kind is Archetype.PUFFER:
            rl.draw_circle_v(pos.to_rl(), view.radius, PUFFER_COLOR)
            _ring(pos, view.radius, 3.0, PUFFER_OUTLINE)
        elif view.kind is Archetype.BOSS:
            texture = self._textures.texture("boss_jaws")
            if texture is not None:
                _draw_texture_centered(texture, pos, 240.0, 200.0)
            else:
                rl.draw_circle_v(pos.to_rl(), view.radius - 10.0, BOSS_COLOR)
            for weak_point in view.weak_points:
                _ring(weak_point.pos, weak_point.radius, 3.0, WEAK_POINT_COLOR)

    def _draw_reticle(self, aim: Vec2) -> None:
        texture = self._textures.texture("reticle")
        if texture is not None:
            _draw_texture_centered(texture, aim, 48.0, 48.0)
            return
        _ring(aim, RETICLE_RADIUS, 2.0, RETICLE_COLOR)
        rl.draw_line_v(aim.offset(dx=-10.0).to_rl(), aim.offset(dx=10.0).to_rl(), RETICLE_COLOR)
        rl.draw_line_v(aim.offset(dy=-10.0).to_rl(), aim.offset(dy=10.0).to_rl(), RETICLE_COLOR)

    def _draw_hud(self, snapshot: FrameSnapshot) -> None:
        hud = snapshot.hud
        rl.draw_text(f"Score: {hud.score}", 14, 12, 16, HUD_COLOR)
        rl.draw_text(f"Lives: {hud.lives}", 140, 12, 16, HUD_COLOR)
        rl.draw_text(f"Wave: {hud.wave}", 260, 12, 16, HUD_COLOR)
        rl.draw_text(f"Ammo: {hud.ammo}", 370, 12, 16, HUD_COLOR)

    def draw(self) -> None:
        snapshot = build_snapshot(self._world)
        self._draw_background(snapshot)
        for view in snapshot.entities:
            self._draw_entity(view)
        r, g, b = PARTICLE_COLOR
        for particle in snapshot.particles:
            alpha = int(255 * (1.0 - particle.fade))
            rl.draw_rectangle(int(particle.pos.x), int(particle.pos.y), 3, 3, rl.Color(r, g, b, alpha))
        self._draw_reticle(snapshot.aim)
        self._draw_hud(snapshot)
        if not self._started:
            width = rl.get_screen_width()
            height = rl.get_screen_height()
            rl.draw_rectangle(0, 0, width, height, OVERLAY_COLOR)
            title = "OCEAN HUNTER - click to start"
            rl.draw_text(title, (width - rl.measure_text(title, 32)) // 2, height // 2 - 16, 32, rl.RAYWHITE)
