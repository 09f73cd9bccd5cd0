# sentrybot

Control logic for a sentry robot that rides along a short rail and carries a
two-axis gimbal. The package works on plain numbers. You pass in sensor readings
(encoder radians, IMU roll/pitch/yaw, a camera detection and laser distances),
and it returns motor velocities.

## Modules

- `sentrybot.mathutil`: small numeric helpers.
  - `map_range` re-maps an integer between ranges. It truncates toward zero and
    raises `ZeroDivisionError` when the input range is empty.
  - `constrain`, `round_half_away`, `radians` and `degrees` are plain conversions
    and clamps.
  - `float_is_zero` is true when a value is below `1e-6`.
  - `index_out_of_bounds` checks a position against a length.
  - The bit helpers are `get_bit`, `set_bit`, `clear_bit` and `toggle_bit`.
- `sentrybot.filters`: `iir_lowpass(value, previous, factor)` runs one step of a
  first-order IIR low-pass filter and returns the new output.
- `sentrybot.pid`: the PID controllers.
  - `PositionPID` accumulates the integral term. `IncrementalPID` adds a
    correction to the previous output on each step.
  - Both have `reset(kp, ki, kd, max_output, integral_limit)`,
    `set_params(kp, ki, kd)` and `update(target, measured)`.
  - Both clamp the integral term and the output with `abs_limit`.
  - Both limits must be whole numbers in the unsigned 32-bit range. Any other
    value raises `ValueError`.
- `sentrybot.ramp`: `SpeedRamp` holds a count, a rate and 16-bit bounds.
  - `step()` adds the rate, clamps the count to the bounds and returns the count
    as an integer.
  - `decay()` shrinks the count by a fifth. Once the count is smaller than one
    step, `decay()` sets it to zero.
  - Bounds outside 16 bits raise `ValueError`.
- `sentrybot.chassis`: positioning along the rail.
  - `encoder_distance` converts an encoder reading to distance from the rail
    origin.
  - `Chassis.update_encoder` stores the current distance.
  - `Chassis.optimal_attack_distance(yaw_angle, yaw_counts, depth)` works out how
    far to move so the target sits at the best attack distance of 3.2.
  - `Chassis.reset_control()` holds the current position.
  - `Chassis.control()` returns the chassis velocity from the encoder position
    loop. It returns 0 at the rail end stops, 0.1 and 1.55.
  - `Cruise.update(left_distance, right_distance)` patrols at ±25 and reverses
    when the obstacle ahead is closer than 0.2.
- `sentrybot.gimbal`: `Gimbal.update_attitude(roll_pitch_yaw)` turns the IMU's yaw
  into a continuous angle across wraps and returns it. It raises `ValueError`
  unless the reading has exactly three values.
- `sentrybot.vision`: camera aiming.
  - `Detection(id, x, y)` is one recognised object. An `id` of 0 means no target.
  - `Vision.update(detection)` computes pixel offsets from the image centre.
    Without a target it uses a fixed point at (640, 400).
  - `Vision.control(yaw_speed, pitch_speed)` runs two PID loops. It returns their
    outputs while a target is seen, and otherwise returns the speeds it was given.
  - `get_offset(length, value)` computes a single offset in 16-bit arithmetic.
- `sentrybot.drive`: keyboard teleoperation helpers.
  - `key_to_velocity(key, speed=50.0)` maps W/S/A/D (a key code or a character)
    to `(vx, vomega)`.
  - `mix_speeds(vx, vomega, limit=50.0)` returns left and right wheel speeds,
    scaled so that neither exceeds the limit.
- `sentrybot.controller`: the full loop.
  - `SentryController(camera_width, camera_height)` takes a `SensorFrame` on each
    `step` and returns a `MotorCommand` with `chassis`, `yaw` and `pitch`
    velocities.
  - `MotorCommand.by_motor()` returns the same velocities keyed by motor name:
    `motor1`, `motor2` and `motor3`.
  - The first entry of `SensorFrame.distances` is the depth to the target. An
    empty `distances` raises `ValueError`.

`sentrybot.vision` and `sentrybot.controller` log their diagnostic values at
`DEBUG` level through the standard `logging` module.

## Examples

```python
from sentrybot.mathutil import map_range, constrain
from sentrybot.filters import iir_lowpass
from sentrybot.vision import get_offset

map_range(5, 0, 10, 0, 100)   # 50
constrain(15, 0, 10)          # 10
iir_lowpass(10.0, 0.0, 0.5)   # 5.0
get_offset(1280, 640)         # 0
```

```python
from sentrybot.pid import PositionPID

pid = PositionPID()
pid.reset(40.0, 0.0, 0.0, 50, 0)
pid.update(1.0, 0.8)          # about 8.0, proportional output clamped to ±50
```

```python
from sentrybot.controller import SensorFrame, SentryController
from sentrybot.vision import Detection

controller = SentryController(camera_width=1280, camera_height=800)
frame = SensorFrame(
    encoder_radian=0.0,
    roll_pitch_yaw=(0.0, 0.0, 0.5),
    detection=Detection(id=1, x=700, y=380),
    distances=(3.0, 1.0, 1.0),
)
command = controller.step(frame)
command.by_motor()            # {"motor1": ..., "motor2": ..., "motor3": ...}
```

## What it does not do

The package does not connect to a simulator or to real hardware. It does not
open cameras, motors, encoders, an IMU or lasers, and it does not run a timed
loop. You call `SentryController.step` yourself, once for each sensor frame, and
apply the returned velocities. It has no command-line program.

## Running the tests

Install the package with its `test` extra, then run pytest from the project root.