"""Signal filters."""

from __future__ import annotations


def iir_lowpass(value: float, previous: float, factor: float) -> float:
    """First-order IIR low-pass step.

    ``factor`` is the attenuation factor, normally between 0 and 1; the new
    filtered value is returned.
    """
    return previous + factor * (value - previous)