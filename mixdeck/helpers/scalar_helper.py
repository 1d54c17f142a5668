"""
Slider reading normalization and noise filtering.

Pure functions only: no I/O, no logging, no state. Readings are fractions of
full volume; out-of-range values are passed through the arithmetic unchanged.
"""

from __future__ import annotations

import math
from enum import Enum

# Readings this close to an extreme count as the extreme
SNAP_EPSILON = 0.000001


class NoiseProfile(str, Enum):
    """Noise reduction level selected by the ``noise_reduction`` config key."""

    HIGH = "high"
    LOW = "low"
    DEFAULT = "default"

    @classmethod
    def from_value(cls, value: NoiseProfile | str | None) -> NoiseProfile:
        """Map config text to a profile; anything unrecognised is DEFAULT."""
        if isinstance(value, NoiseProfile):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.DEFAULT

    @property
    def threshold(self) -> float:
        return SIGNIFICANCE_THRESHOLDS[self]


# Median between two round percent values: 0.025 lets volume move in ~3% steps
SIGNIFICANCE_THRESHOLDS: dict[NoiseProfile, float] = {
    NoiseProfile.HIGH: 0.035,
    NoiseProfile.LOW: 0.015,
    NoiseProfile.DEFAULT: 0.025,
}


def normalize_scalar(reading: float) -> float:
    """
    Truncate a reading to two decimal places (0.15442 -> 0.15).

    Floors rather than rounds, so for non-negative readings the result is
    never larger than the input.
    """
    return math.floor(reading * 100) / 100.0


def _almost_equals(a: float, b: float) -> bool:
    return abs(a - b) < SNAP_EPSILON


def is_significant(previous: float, candidate: float, noise_profile: NoiseProfile | str | None = None) -> bool:
    """
    Decide whether ``candidate`` is a real slider move away from ``previous``.

    Args:
        previous: Last accepted reading
        candidate: New reading
        noise_profile: NoiseProfile or its config text (unknown text -> default)

    Returns:
        True if the change reaches the profile's threshold, or if the candidate
        lands on 0.0/1.0 while the previous value was not exactly there.
    """
    threshold = NoiseProfile.from_value(noise_profile).threshold

    if abs(previous - candidate) >= threshold:
        return True

    # Snap to the edges so full mute and full volume stay reachable
    if _almost_equals(candidate, 1.0) and previous != 1.0:
        return True
    if _almost_equals(candidate, 0.0) and previous != 0.0:
        return True

    return False
