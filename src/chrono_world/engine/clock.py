"""Accelerated day clock."""

from __future__ import annotations

import math
from typing import Optional

from chrono_world.exceptions import ConfigurationError
from chrono_world.types import HOURS_PER_DAY, clamp_hour

# Largest float below 1.0; fractions are kept in [0, 1).
_MAX_FRACTION = math.nextafter(1.0, 0.0)

# Fixed yaw and roll of the directional light, in degrees.
LIGHT_YAW = 170.0
LIGHT_ROLL = 0.0


def light_euler_angles(fraction: float) -> tuple[float, float, float]:
    """Directional light rotation for a fraction of the day.

    Args:
        fraction: Time of day in [0, 1).

    Returns:
        (pitch, yaw, roll) in degrees. Pitch is -90 at midnight, 0 at 6am,
        90 at noon.
    """
    return (fraction * 360.0 - 90.0, LIGHT_YAW, LIGHT_ROLL)


class Clock:
    """Accumulates elapsed time into a fraction of a day.

    ``hour`` is always ``floor(fraction * 24)`` and both fields are updated
    together by every mutator.
    """

    def __init__(self, day_duration_seconds: float = 24.0, initial_fraction: float = 0.0):
        """Initialize the clock.

        Args:
            day_duration_seconds: Real seconds for one simulated day.
            initial_fraction: Starting time of day in [0, 1).

        Raises:
            ConfigurationError: If the day duration is not positive.
        """
        self._day_duration = self._check_duration(day_duration_seconds)
        self._fraction = 0.0
        self._hour = 0
        self.set_fraction(initial_fraction)

    @staticmethod
    def _check_duration(value: float) -> float:
        if not value > 0:
            raise ConfigurationError(f"day_duration_seconds must be > 0, got {value!r}")
        return float(value)

    @property
    def day_duration_seconds(self) -> float:
        """Real seconds for one simulated day."""
        return self._day_duration

    @day_duration_seconds.setter
    def day_duration_seconds(self, value: float) -> None:
        self._day_duration = self._check_duration(value)

    @property
    def hour(self) -> int:
        """Current hour, 0-23."""
        return self._hour

    @property
    def fraction(self) -> float:
        """Current fraction of the day, in [0, 1)."""
        return self._fraction

    def get_hour(self) -> int:
        """Get the current hour."""
        return self._hour

    def get_fraction(self) -> float:
        """Get the current fraction of the day."""
        return self._fraction

    def advance(self, delta_seconds: float, day_duration_seconds: Optional[float] = None) -> int:
        """Advance the clock by real elapsed time.

        Args:
            delta_seconds: Real seconds since the last tick.
            day_duration_seconds: Day length for this step only. Defaults to
                the clock's configured duration.

        Returns:
            How many times the day wrapped past midnight during this step.

        Raises:
            ValueError: If delta_seconds is negative.
            ConfigurationError: If the given day duration is not positive.
        """
        if delta_seconds < 0:
            raise ValueError(f"delta_seconds must be non-negative, got {delta_seconds}")
        if day_duration_seconds is None:
            duration = self._day_duration
        else:
            duration = self._check_duration(day_duration_seconds)

        raw = self._fraction + delta_seconds / duration
        wraps = math.floor(raw)
        self._fraction = raw - wraps
        self._hour = self._hour_for(self._fraction)
        return int(wraps)

    def set_fraction(self, fraction: float) -> None:
        """Jump to a fraction of the day, clamped into [0, 1).

        Raises:
            ValueError: If the fraction is NaN or infinite.
        """
        fraction = float(fraction)
        if not math.isfinite(fraction):
            raise ValueError(f"Day fraction must be finite, got {fraction}")
        self._fraction = min(max(fraction, 0.0), _MAX_FRACTION)
        self._hour = self._hour_for(self._fraction)

    def set_hour(self, hour: int) -> None:
        """Jump to the start of an hour, clamped into 0-23."""
        hour = clamp_hour(hour)
        fraction = hour / HOURS_PER_DAY
        # hour / 24 can round to just below the hour boundary.
        while self._hour_for(fraction) < hour:
            fraction = math.nextafter(fraction, 1.0)
        self._fraction = fraction
        self._hour = hour

    @staticmethod
    def _hour_for(fraction: float) -> int:
        return min(int(math.floor(fraction * HOURS_PER_DAY)), HOURS_PER_DAY - 1)
