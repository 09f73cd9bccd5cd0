import math

import pytest
from hypothesis import given, strategies as st

from sentrybot.chassis import ENCODER_MAX_OUTPUT, encoder_distance
from sentrybot.controller import (
    MOTOR_NAMES,
    MotorCommand,
    SensorFrame,
    SentryController,
)
from sentrybot.gimbal import PAI
from sentrybot.vision import VISION_MAX_OUTPUT, Detection

WIDTH = 1280
HEIGHT = 800


def make_controller():
    return SentryController(camera_width=WIDTH, camera_height=HEIGHT)


def test_motor_command_by_motor_uses_device_names():
    command = MotorCommand(chassis=1.5, yaw=-2.0, pitch=3.0)
    assert command.by_motor() == {"motor1": 1.5, "motor2": -2.0, "motor3": 3.0}
    assert tuple(command.by_motor()) == MOTOR_NAMES


def test_no_target_leaves_gimbal_still():
    controller = make_controller()
    command = controller.step(SensorFrame(distances=(1.0, 1.0, 1.0)))
    assert command.yaw == 0.0
    assert command.pitch == 0.0


def test_centred_target_gives_zero_gimbal_speed():
    controller = make_controller()
    frame = SensorFrame(
        detection=Detection(id=7, x=WIDTH // 2, y=HEIGHT // 2),
        distances=(1.0, 1.0, 1.0),
    )
    command = controller.step(frame)
    assert command.yaw == 0.0
    assert command.pitch == 0.0


def test_target_right_and_below_turns_gimbal_against_offset():
    controller = make_controller()
    frame = SensorFrame(
        detection=Detection(id=3, x=WIDTH // 2 + 50, y=HEIGHT // 2 + 30),
        distances=(1.0, 1.0, 1.0),
    )
    command = controller.step(frame)
    assert command.yaw < 0
    assert command.pitch < 0
    assert command.yaw == controller.vision.yaw_pid.pwm
    assert command.pitch == controller.vision.pitch_pid.pwm


def test_far_target_saturates_gimbal_speed():
    controller = make_controller()
    frame = SensorFrame(
        detection=Detection(id=1, x=0, y=HEIGHT),
        distances=(1.0, 1.0, 1.0),
    )
    command = controller.step(frame)
    assert command.yaw == VISION_MAX_OUTPUT
    assert command.pitch == -VISION_MAX_OUTPUT


def test_gimbal_speed_held_when_target_lost():
    controller = make_controller()
    seen = controller.step(
        SensorFrame(
            detection=Detection(id=2, x=WIDTH // 2 + 40, y=HEIGHT // 2 - 20),
            distances=(1.0, 1.0, 1.0),
        )
    )
    lost = controller.step(SensorFrame(distances=(1.0, 1.0, 1.0)))
    assert lost.yaw == seen.yaw
    assert lost.pitch == seen.pitch


def test_first_step_targets_current_position():
    controller = make_controller()
    controller.step(SensorFrame(encoder_radian=10.0, distances=(1.0, 1.0, 1.0)))
    assert controller.chassis.real_distance == encoder_distance(10.0)


def test_chassis_follows_encoder_loop_within_rail():
    controller = make_controller()
    frame = SensorFrame(encoder_radian=0.0, distances=(1.0, 1.0, 1.0))
    command = controller.step(frame)
    assert command.chassis == controller.chassis.encoder_pid.pwm
    assert abs(command.chassis) <= ENCODER_MAX_OUTPUT


def test_chassis_stops_at_near_end_when_increment_points_outward():
    controller = make_controller()
    frame = SensorFrame(
        encoder_radian=-28.0,
        roll_pitch_yaw=(0.0, 0.0, -PAI + 0.5),
        distances=(10.0, 1.0, 1.0),
    )
    command = controller.step(frame)
    assert controller.chassis.increment_distance >= 0
    assert command.chassis == 0.0


def test_chassis_stops_at_far_end_when_increment_points_outward():
    controller = make_controller()
    frame = SensorFrame(
        encoder_radian=40.0,
        roll_pitch_yaw=(0.0, 0.0, 0.0),
        distances=(1.0, 1.0, 1.0),
    )
    command = controller.step(frame)
    assert controller.chassis.increment_distance <= 0
    assert command.chassis == 0.0


def test_empty_distances_raise():
    controller = make_controller()
    with pytest.raises(ValueError):
        controller.step(SensorFrame(distances=()))


def test_bad_attitude_raises():
    controller = make_controller()
    with pytest.raises(ValueError):
        controller.step(SensorFrame(roll_pitch_yaw=(0.0, 0.0), distances=(1.0,)))


@given(
    radian=st.floats(min_value=-60.0, max_value=60.0),
    yaw=st.floats(min_value=-3.1, max_value=3.1),
    depth=st.floats(min_value=0.0, max_value=20.0),
    x=st.integers(min_value=0, max_value=WIDTH),
    y=st.integers(min_value=0, max_value=HEIGHT),
)
def test_outputs_stay_within_limits(radian, yaw, depth, x, y):
    controller = make_controller()
    frame = SensorFrame(
        encoder_radian=radian,
        roll_pitch_yaw=(0.0, 0.0, yaw),
        detection=Detection(id=5, x=x, y=y),
        distances=(depth, 1.0, 1.0),
    )
    for _ in range(3):
        command = controller.step(frame)
        assert abs(command.chassis) <= ENCODER_MAX_OUTPUT
        assert abs(command.yaw) <= VISION_MAX_OUTPUT
        assert abs(command.pitch) <= VISION_MAX_OUTPUT
        assert not math.isnan(command.chassis)