"""Speed ramp: step a value toward a bound and decay it back to zero."""

from __future__ import annotations

from dataclasses import dataclass

_INT16_MIN = -32768
_INT16_MAX = 32767


@dataclass
class SpeedRamp:
    """A ramped speed value clamped to ``[min_count, max_count]``."""

    count: float = 0.0
    rate: float = 0.0
    min_count: int = 0
    max_count: int = 0

    def __post_init__(self) -> None:
        for name in ("min_count", "max_count"):
            value = getattr(self, name)
            if not _INT16_MIN <= value <= _INT16_MAX:
                raise ValueError(f"{name} must fit in 16 bits, got {value!r}")

    def step(self) -> int:
        """Add ``rate`` to the count, clamp it, and return it as an integer."""
        self.count += self.rate
        if self.count <= self.min_count:
            self.count = self.min_count
        elif self.count >= self.max_count:
            self.count = self.max_count
        return int(self.count)

    def decay(self) -> None:
        """Shrink the count by a fifth, or zero it once smaller than one step."""
        if abs(self.count) < abs(self.rate):
            self.count = 0
        else:
            self.count -= self.count * 0.2