from __future__ import annotations

from typing import Protocol

import pyray as rl


class View(Protocol):
    def open(self) -> None: ...

    def close(self) -> None: ...

    def update(self, dt: float) -> None: ...

    def draw(self) -> None: ...


def run_view(
    view: View,
    *,
    width: int = 1280,
    height: int = 720,
    title: str = "Ocean Hunter",
    fps: int = 60,
) -> None:
    """Run a Raylib window driving `view` once per frame."""
    rl.init_window(width, height, title)
    rl.set_target_fps(fps)
    view.open()
    try:
        while not rl.window_should_close():
            dt = rl.get_frame_time()
            view.update(dt)
            rl.begin_drawing()
            view.draw()
            rl.end_drawing()
    finally:
        view.close()
        rl.close_window()
