"""Chassis motion along the rail: encoder distance, cruising and attack positioning."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .gimbal import PAI
from .pid import PositionPID

YAW_REFERENCE_RADIAN = PAI
BEST_ATTACK_DISTANCE = 3.20
CHASSIS_MAX_DISTANCE = 1.55
CHASSIS_MIN_DISTANCE = 0.1

ENCODER_REFERENCE_RADIAN = -28.0
DISTANCE_PER_RADIAN = 0.03

CRUISE_SPEED = 25.0
CRUISE_STOP_DISTANCE = 0.2

ENCODER_KP = 40.0
ENCODER_MAX_OUTPUT = 50


def encoder_distance(radian: float) -> float:
    """Convert an absolute encoder reading to the distance from the rail origin."""
    return (radian - ENCODER_REFERENCE_RADIAN) * DISTANCE_PER_RADIAN


@dataclass
class Cruise:
    """Back-and-forth patrol that reverses near either end of the rail.

    Positive velocity moves left, so it is checked against ``left_distance``;
    negative velocity is checked against ``right_distance``.
    """

    velocity: float = CRUISE_SPEED

    def update(self, left_distance: float, right_distance: float) -> float:
        """Reverse if the obstacle ahead is too close and return the velocity."""
        if self.velocity > 0 and left_distance < CRUISE_STOP_DISTANCE:
            self.velocity = -CRUISE_SPEED
        elif self.velocity < 0 and right_distance < CRUISE_STOP_DISTANCE:
            self.velocity = CRUISE_SPEED
        return self.velocity


@dataclass
class Chassis:
    """Rail chassis state with an encoder position loop.

    Encoder distance grows to the right while velocity is positive to the left.
    """

    yaw_raw_increment_radian: float = 0.0
    yaw_increment_radian: float = 0.0
    increment_distance: float = 0.0
    real_distance: float = 0.0
    target_distance: float = 0.0
    encoder_pid: PositionPID = field(default_factory=PositionPID)

    def update_encoder(self, radian: float) -> float:
        """Store the distance read from the encoder and return it."""
        self.real_distance = encoder_distance(radian)
        return self.real_distance

    def optimal_attack_distance(
        self, yaw_angle: float, yaw_counts: int, depth: float
    ) -> float:
        """Work out how far to move so the target sits at the best attack distance.

        The result is stored as ``increment_distance`` and returned.
        """
        self.yaw_raw_increment_radian = yaw_angle - 0 + 2 * PAI * yaw_counts
        if self.yaw_raw_increment_radian > PAI:
            self.yaw_increment_radian = self.yaw_raw_increment_radian - PAI
        else:
            self.yaw_increment_radian = self.yaw_raw_increment_radian

        a = BEST_ATTACK_DISTANCE
        c = depth
        cos_a = math.cos(self.yaw_increment_radian)
        delta = a**2 - c**2 + c**2 * cos_a**2

        if delta <= 0.0:
            result = cos_a * c
        else:
            result = cos_a * c - math.sqrt(delta)
        self.increment_distance = result
        return result

    def reset_control(self) -> None:
        """Hold the current position and reset the encoder loop."""
        self.target_distance = self.real_distance
        self.increment_distance = 0.0
        self.encoder_pid.pwm = 0.0
        self.encoder_pid.reset(ENCODER_KP, 0.0, 0.0, ENCODER_MAX_OUTPUT, 0)

    def control(self) -> float:
        """Return the chassis velocity, stopping at the ends of the rail."""
        if self.yaw_raw_increment_radian > PAI:
            self.target_distance = self.real_distance - self.increment_distance
            if (
                self.real_distance <= CHASSIS_MIN_DISTANCE
                and self.increment_distance <= 0
            ):
                return 0.0
            if (
                self.real_distance >= CHASSIS_MAX_DISTANCE
                and self.increment_distance >= 0
            ):
                return 0.0
        else:
            self.target_distance = self.increment_distance + self.real_distance
            if (
                self.real_distance <= CHASSIS_MIN_DISTANCE
                and self.increment_distance >= 0
            ):
                return 0.0
            if (
                self.real_distance >= CHASSIS_MAX_DISTANCE
                and self.increment_distance <= 0
            ):
                return 0.0

        self.encoder_pid.update(self.target_distance, self.real_distance)
        return self.encoder_pid.pwm