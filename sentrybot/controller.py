"""Per-step control loop of the sentry: sensors in, motor velocities out."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .chassis import Chassis
from .gimbal import Gimbal
from .vision import Detection, Vision

logger = logging.getLogger(__name__)

CHASSIS_MOTOR = "motor1"
YAW_MOTOR = "motor2"
PITCH_MOTOR = "motor3"
MOTOR_NAMES = (CHASSIS_MOTOR, YAW_MOTOR, PITCH_MOTOR)

TIME_STEP_MS = 8


@dataclass(frozen=True)
class SensorFrame:
    """Sensor readings for one simulation step.

    ``distances`` are the laser ranges; the first is the depth towards the
    target, the second and third look to the right and left ends of the rail.
    """

    encoder_radian: float = 0.0
    roll_pitch_yaw: tuple[float, float, float] = (0.0, 0.0, 0.0)
    detection: Detection | None = None
    distances: tuple[float, ...] = (0.0, 0.0, 0.0)


@dataclass(frozen=True)
class MotorCommand:
    """Velocities for the chassis, yaw and pitch motors."""

    chassis: float = 0.0
    yaw: float = 0.0
    pitch: float = 0.0

    def by_motor(self) -> dict[str, float]:
        """Return the velocities keyed by motor device name."""
        return dict(zip(MOTOR_NAMES, (self.chassis, self.yaw, self.pitch)))


@dataclass
class SentryController:
    """Aim the gimbal at the recognised target and hold the best attack distance."""

    camera_width: int
    camera_height: int
    chassis: Chassis = field(default_factory=Chassis)
    gimbal: Gimbal = field(default_factory=Gimbal)
    vision: Vision = field(default_factory=Vision)
    _initialised: bool = field(default=False, init=False, repr=False)
    _yaw_speed: float = field(default=0.0, init=False, repr=False)
    _pitch_speed: float = field(default=0.0, init=False, repr=False)

    def __post_init__(self) -> None:
        self.vision.reset(self.camera_width, self.camera_height)

    def step(self, frame: SensorFrame) -> MotorCommand:
        """Process one frame of sensor data and return the motor command."""
        distances = tuple(float(d) for d in frame.distances)
        if not distances:
            raise ValueError("at least one laser distance is required")

        self.chassis.update_encoder(frame.encoder_radian)
        self.gimbal.update_attitude(frame.roll_pitch_yaw)
        self.vision.update(frame.detection)

        if not self._initialised:
            # The inertial unit and encoder only give valid values once the
            # first step has run, so the control loops start from here.
            self.chassis.reset_control()
            self.vision.reset(self.camera_width, self.camera_height)
            self._initialised = True

        self._yaw_speed, self._pitch_speed = self.vision.control(
            self._yaw_speed, self._pitch_speed
        )
        self.chassis.optimal_attack_distance(
            self.gimbal.yaw_total_radian, self.gimbal.yaw_counts, distances[0]
        )
        vx = self.chassis.control()

        logger.debug("Distance : %f", distances[0])
        return MotorCommand(chassis=vx, yaw=self._yaw_speed, pitch=self._pitch_speed)