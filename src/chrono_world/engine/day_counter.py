"""Day and week counting driven by the clock hour."""

from __future__ import annotations

import logging
from typing import Optional

from chrono_world.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class DayCounter:
    """Counts simulated days, once per entry into hour 0."""

    def __init__(self, day: int = 0, week: int = 1, days_per_week: Optional[int] = 7):
        """Initialize the counter.

        Args:
            day: Starting day.
            week: Starting week.
            days_per_week: Days after which the week advances. None disables
                automatic week changes.
        """
        if days_per_week is not None and days_per_week < 1:
            raise ConfigurationError(f"days_per_week must be >= 1, got {days_per_week}")
        self.day = day
        self.week = week
        self._days_per_week = days_per_week
        self._latched = False

    @property
    def latched(self) -> bool:
        """Whether hour 0 has already been counted for the current pass."""
        return self._latched

    def check_rollover(self, hour: int) -> bool:
        """Advance the day on the first tick that lands on hour 0.

        The latch stays set while the hour remains 0 and clears on any other
        hour, so one pass through midnight counts once however many ticks it spans.

        Args:
            hour: The clock hour computed this tick.

        Returns:
            True if the day advanced.
        """
        if hour != 0:
            self._latched = False
            return False
        if self._latched:
            return False
        self._latched = True
        self.trigger_next_day()
        return True

    def credit_days(self, count: int) -> None:
        """Count days whose midnight was never observed by ``check_rollover``."""
        for _ in range(count):
            self.trigger_next_day()

    def trigger_next_day(self) -> None:
        """Advance the day, and the week when a week boundary is reached."""
        self.day += 1
        logger.info("New day triggered: day %d", self.day)
        if self._days_per_week and self.day % self._days_per_week == 0:
            self.trigger_next_week()

    def trigger_next_week(self) -> None:
        """Advance the week."""
        self.week += 1
        logger.info("New week triggered: week %d", self.week)
