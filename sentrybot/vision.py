"""Target tracking from camera recognition results."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .pid import PositionPID

logger = logging.getLogger(__name__)

NO_TARGET_X = 640
NO_TARGET_Y = 400

VISION_KP = 0.1
VISION_MAX_OUTPUT = 20
VISION_INTEGRAL_LIMIT = 50


def _int16(value: int) -> int:
    return ((int(value) + 0x8000) & 0xFFFF) - 0x8000


def get_offset(length: int, value: int) -> int:
    """Offset of ``value`` from the midpoint of ``length``, as a 16-bit integer."""
    length = _int16(length)
    value = _int16(value)
    half = int(length / 2)
    return _int16(value - half)


@dataclass(frozen=True)
class Detection:
    """A recognised object: its id (0 means none) and image position."""

    id: int = 0
    x: int = 0
    y: int = 0


@dataclass
class Vision:
    """Aim-assist state turning image offsets into gimbal speeds."""

    id: int = 0
    x: int = 0
    y: int = 0
    finally_x: int = 0
    finally_y: int = 0
    depth: int = 0
    width: int = 0
    height: int = 0
    yaw_pid: PositionPID = field(default_factory=PositionPID)
    pitch_pid: PositionPID = field(default_factory=PositionPID)

    def reset(self, width: int, height: int) -> None:
        """Set the image size and reset both aiming loops."""
        self.width = width
        self.height = height
        self.yaw_pid.reset(VISION_KP, 0, 0, VISION_MAX_OUTPUT, VISION_INTEGRAL_LIMIT)
        self.pitch_pid.reset(VISION_KP, 0, 0, VISION_MAX_OUTPUT, VISION_INTEGRAL_LIMIT)

    def update(self, detection: Detection | None) -> None:
        """Take the first recognised object, or none, and compute offsets."""
        detection = detection or Detection()
        self.x = detection.x
        self.y = detection.y
        self.id = detection.id

        if self.id == 0:
            self.x = NO_TARGET_X
            self.y = NO_TARGET_Y

        self.finally_x = get_offset(self.width, self.x)
        self.finally_y = get_offset(self.height, self.y)

    def control(self, yaw_speed: float, pitch_speed: float) -> tuple[float, float]:
        """Run the aiming loops; return their outputs when a target is seen.

        Without a target the given speeds are returned unchanged.
        """
        self.yaw_pid.update(0, self.finally_x)
        self.pitch_pid.update(0, self.finally_y)
        if self.id != 0:
            yaw_speed = self.yaw_pid.pwm
            pitch_speed = self.pitch_pid.pwm
        logger.debug("err_Yaw = %f", self.yaw_pid.err)
        logger.debug("PID_Yaw = %f", self.yaw_pid.pwm)
        return yaw_speed, pitch_speed