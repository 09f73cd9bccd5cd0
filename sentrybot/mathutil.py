"""Small numeric helpers shared by the control code."""

from __future__ import annotations

HIGH = 0x1
LOW = 0x0
FLOAT_ZERO_THRESHOLD = 1e-6
PI = 3.1415926535897932384626433832795
HALF_PI = 1.5707963267948966192313216916398
TWO_PI = 6.283185307179586476925286766559
DEG_TO_RAD = 0.017453292519943295769236907684886
RAD_TO_DEG = 57.295779513082320876798154814105
EULER = 2.718281828459045235360287471352


def map_range(x: int, in_min: int, in_max: int, out_min: int, out_max: int) -> int:
    """Linearly re-map an integer from one range to another.

    Integer division truncates toward zero. An empty input range raises
    ZeroDivisionError.
    """
    numerator = (x - in_min) * (out_max - out_min)
    denominator = in_max - in_min
    if denominator == 0:
        raise ZeroDivisionError("input range is empty")
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        quotient = -quotient
    return quotient + out_min


def float_is_zero(num: float) -> bool:
    """Return True when ``num`` is below the zero threshold."""
    return num < FLOAT_ZERO_THRESHOLD


def constrain(amt, low, high):
    """Clamp ``amt`` to the closed range ``[low, high]``."""
    if amt < low:
        return low
    if amt > high:
        return high
    return amt


def round_half_away(x: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(x + 0.5) if x >= 0 else int(x - 0.5)


def radians(deg: float) -> float:
    """Convert degrees to radians."""
    return deg * DEG_TO_RAD


def degrees(rad: float) -> float:
    """Convert radians to degrees."""
    return rad * RAD_TO_DEG


def index_out_of_bounds(index: int, length: int) -> bool:
    """Return True when ``index`` is not a valid position in ``length`` items."""
    return index < 0 or index > length - 1


def get_bit(value: int, pos: int) -> int:
    """Return the bit of ``value`` at ``pos`` (0 or 1)."""
    return (value >> pos) & 1


def set_bit(value: int, pos: int) -> int:
    """Return ``value`` with the bit at ``pos`` set."""
    return value | (1 << pos)


def clear_bit(value: int, pos: int) -> int:
    """Return ``value`` with the bit at ``pos`` cleared."""
    return value & ~(1 << pos)


def toggle_bit(value: int, pos: int) -> int:
    """Return ``value`` with the bit at ``pos`` flipped."""
    return value ^ (1 << pos)