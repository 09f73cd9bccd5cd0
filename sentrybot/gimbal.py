"""Gimbal attitude tracking from the inertial unit."""

from __future__ import annotations

from dataclasses import dataclass

PAI = 3.1415926535

PITCH_MAX_RADIAN = 0.81
PITCH_MIN_RADIAN = -1.54
PITCH_CENTRE_RADIAN = (PITCH_MAX_RADIAN + PITCH_MIN_RADIAN) / 2
SINE_STEP_RADIAN = 0.04
DEGREE_IN_RADIANS = 0.0174532925194
YAW_MAX_RADIAN = 3.0
YAW_MIN_RADIAN = -3.0

WRAP_THRESHOLD = 5.5


@dataclass
class Gimbal:
    """Yaw tracking that keeps a continuous angle across the ±pi wrap."""

    euler: tuple[float, float, float] = (0.0, 0.0, 0.0)
    yaw_real_radian: float = 0.0
    yaw_last_radian: float = 0.0
    yaw_counts: int = 0
    yaw_total_radian: float = 0.0

    def update_attitude(self, roll_pitch_yaw) -> float:
        """Take a roll/pitch/yaw reading and return the unwrapped yaw."""
        values = tuple(float(v) for v in roll_pitch_yaw)
        if len(values) != 3:
            raise ValueError(f"expected roll, pitch and yaw, got {len(values)} values")
        self.euler = values

        self.yaw_real_radian = values[2] + PAI
        if self.yaw_real_radian - self.yaw_last_radian < -WRAP_THRESHOLD:
            self.yaw_counts -= 1
        elif self.yaw_last_radian - self.yaw_real_radian < -WRAP_THRESHOLD:
            self.yaw_counts += 1

        self.yaw_total_radian = self.yaw_real_radian + self.yaw_counts * PAI
        self.yaw_last_radian = self.yaw_real_radian
        return self.yaw_total_radian