"""Keyboard teleoperation of the chassis."""

from __future__ import annotations

DEFAULT_SPEED = 50.0


def key_to_velocity(key, speed: float = DEFAULT_SPEED) -> tuple[float, float]:
    """Map a key (code or character) to ``(vx, vomega)``.

    W/S drive forward/back, A/D turn; any other key stops.
    """
    if isinstance(key, str):
        key = ord(key) if len(key) == 1 else None
    if key == ord("A"):
        return 0.0, -speed
    if key == ord("D"):
        return 0.0, speed
    if key == ord("S"):
        return -speed, 0.0
    if key == ord("W"):
        return speed, 0.0
    return 0.0, 0.0


def mix_speeds(vx: float, vomega: float, limit: float = DEFAULT_SPEED) -> tuple[float, float]:
    """Split into left/right wheel speeds, scaled so neither exceeds ``limit``."""
    speeds = (vx + vomega, vx - vomega)
    max_speed = max(0.0, *(abs(s) for s in speeds))
    scale = limit / max_speed if max_speed > limit else 1.0
    return speeds[0] * scale, speeds[1] * scale