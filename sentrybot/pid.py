"""Positional and incremental PID controllers."""

from __future__ import annotations

from dataclasses import dataclass, field

_UINT32_MAX = 0xFFFFFFFF


def abs_limit(value: float, limit: float) -> float:
    """Clamp ``value`` to ``[-limit, limit]``."""
    if value > limit:
        value = limit
    if value < -limit:
        value = -limit
    return value


def _as_limit(value: float) -> int:
    limit = int(value)
    if limit < 0 or limit > _UINT32_MAX:
        raise ValueError(f"limit must be within 0..{_UINT32_MAX}, got {value!r}")
    return limit


@dataclass
class PositionPID:
    """Positional PID: the integral term accumulates the error."""

    kp: float = 0.0
    ki: float = 0.0
    kd: float = 0.0
    max_output: int = 0
    integral_limit: int = 0
    target: float = field(default=0.0, init=False)
    measured: float = field(default=0.0, init=False)
    err: float = field(default=0.0, init=False)
    err_last: float = field(default=0.0, init=False)
    err_change: float = field(default=0.0, init=False)
    p_out: float = field(default=0.0, init=False)
    i_out: float = field(default=0.0, init=False)
    d_out: float = field(default=0.0, init=False)
    pwm: float = field(default=0.0, init=False)

    def __post_init__(self) -> None:
        self.reset(self.kp, self.ki, self.kd, self.max_output, self.integral_limit)

    def reset(self, kp, ki, kd, max_output, integral_limit) -> None:
        """Clear all state and set gains and limits."""
        self.max_output = _as_limit(max_output)
        self.integral_limit = _as_limit(integral_limit)
        self.target = 0.0
        self.measured = 0.0
        self.err = 0.0
        self.err_last = 0.0
        self.err_change = 0.0
        self.kp, self.ki, self.kd = kp, ki, kd
        self.p_out = 0.0
        self.i_out = 0.0
        self.d_out = 0.0
        self.pwm = 0.0

    def set_params(self, kp, ki, kd) -> None:
        """Change the gains, clearing the error history and output."""
        self.err = 0.0
        self.err_last = 0.0
        self.err_change = 0.0
        self.kp, self.ki, self.kd = kp, ki, kd
        self.pwm = 0.0

    def update(self, target: float, measured: float) -> float:
        """Run one control step and return the limited output."""
        self.target = float(target)
        self.measured = float(measured)
        self.err = self.target - self.measured
        self.err_change = self.err - self.err_last

        self.p_out = self.kp * self.err
        self.i_out += self.ki * self.err
        self.d_out = self.kd * (self.err - self.err_last)
        self.i_out = abs_limit(self.i_out, self.integral_limit)

        self.pwm = abs_limit(self.p_out + self.i_out + self.d_out, self.max_output)
        self.err_last = self.err
        return self.pwm


@dataclass
class IncrementalPID:
    """Incremental PID: each step adds a correction to the previous output."""

    kp: float = 0.0
    ki: float = 0.0
    kd: float = 0.0
    max_output: int = 0
    integral_limit: int = 0
    target: float = field(default=0.0, init=False)
    measured: float = field(default=0.0, init=False)
    err: float = field(default=0.0, init=False)
    err_last: float = field(default=0.0, init=False)
    err_before_last: float = field(default=0.0, init=False)
    p_out: float = field(default=0.0, init=False)
    i_out: float = field(default=0.0, init=False)
    d_out: float = field(default=0.0, init=False)
    pwm: float = field(default=0.0, init=False)

    def __post_init__(self) -> None:
        self.reset(self.kp, self.ki, self.kd, self.max_output, self.integral_limit)

    def reset(self, kp, ki, kd, max_output, integral_limit) -> None:
        """Clear all state and set gains and limits."""
        self.target = 0.0
        self.measured = 0.0
        self.err = 0.0
        self.err_last = 0.0
        self.err_before_last = 0.0
        self.kp, self.ki, self.kd = kp, ki, kd
        self.p_out = 0.0
        self.i_out = 0.0
        self.d_out = 0.0
        self.max_output = _as_limit(max_output)
        self.integral_limit = _as_limit(integral_limit)
        self.pwm = 0.0

    def set_params(self, kp, ki, kd) -> None:
        """Change the gains, clearing the error history and output."""
        self.err = 0.0
        self.err_last = 0.0
        self.err_before_last = 0.0
        self.kp, self.ki, self.kd = kp, ki, kd
        self.pwm = 0.0

    def update(self, target: float, measured: float) -> float:
        """Run one control step and return the accumulated, limited output."""
        self.target = target
        self.measured = measured
        self.err = target - measured

        self.p_out = self.kp * (self.err - self.err_last)
        self.i_out = abs_limit(self.ki * self.err, self.integral_limit)
        self.d_out = self.kd * (self.err - 2.0 * self.err_last + self.err_before_last)

        self.pwm = abs_limit(
            self.pwm + self.p_out + self.i_out + self.d_out, self.max_output
        )
        self.err_before_last = self.err_last
        self.err_last = self.err
        return self.pwm