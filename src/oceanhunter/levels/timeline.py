from __future__ import annotations

from collections.abc import Sequence

from .types import SpawnEvent


def tick_spawn_timeline(
    spawns: Sequence[SpawnEvent],
    cursor: int,
    clock: float,
) -> tuple[int, tuple[SpawnEvent, ...]]:
    """Advance the spawn cursor to the level clock.

    Emits the not-yet-emitted prefix of `spawns` whose trigger time is `<= clock`, in list
    order. Stops at the first event still in the future, so an unsorted list holds back
    everything behind a late entry.

    Returns:
      (updated_cursor, due_events)
    """

    start = max(0, int(cursor))
    end = start
    count = len(spawns)
    while end < count and float(spawns[end].t) <= float(clock):
        end += 1
    if end == start:
        return start, ()
    return end, tuple(spawns[start:end])
