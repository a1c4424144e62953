from __future__ import annotations

from .types import CameraSpec, LevelScript, LevelsDocument, SpawnEvent, SplinePoint, WeakPointSpec

# Built-in script used whenever `levels.json` is missing or unreadable.
FALLBACK_LEVELS = LevelsDocument(
    levels=(
        LevelScript(
            name="Default",
            length=45.0,
            camera=CameraSpec(
                speed=5.0,
                spline=(SplinePoint(x=0.0, y=0.0), SplinePoint(x=3000.0, y=0.0)),
            ),
            spawns=(
                SpawnEvent(t=2.0, type="fish", x=0.3, y=0.3, hp=1, score=50),
                SpawnEvent(t=3.0, type="fish", x=0.7, y=0.25, hp=1, score=50),
                SpawnEvent(t=5.0, type="eel", x=0.5, y=0.7, hp=2, score=100, vx=-40.0),
                SpawnEvent(t=15.0, type="puffer", x=0.4, y=0.55, hp=3, score=150),
                SpawnEvent(
                    t=25.0,
                    type="boss",
                    x=0.5,
                    y=0.5,
                    hp=70,
                    score=2500,
                    weakpoints=(
                        WeakPointSpec(dx=-70.0, dy=-90.0, hp=5, score=250),
                        WeakPointSpec(dx=70.0, dy=-90.0, hp=5, score=250),
                    ),
                ),
            ),
        ),
    )
)
