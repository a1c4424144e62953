from __future__ import annotations


def clamp(value: float, low: float, high: float) -> float:
    if value < low:
        return low
    if value > high:
        return high
    return value


def sign(value: float) -> float:
    # Zero stays zero so homing stops once aligned.
    if value > 0.0:
        return 1.0
    if value < 0.0:
        return -1.0
    return 0.0
