"""Clock and calendar text adapter."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from chrono_world.types import UNKNOWN_PHASE, format_hour

if TYPE_CHECKING:
    from chrono_world.types import TickReport


class TimeUIAdapter:
    """Keeps the on-screen time, day and phase labels current."""

    def __init__(self, day_label: Optional[str] = None, week_label: str = "Week"):
        """Initialize the labels.

        Args:
            day_label: Prefix for the day counter. None uses the label carried
                by each snapshot.
            week_label: Prefix for the week counter.
        """
        self.day_label = day_label
        self.week_label = week_label
        self.time_text = format_hour(0)
        self.day_text = f"{day_label or 'Day'} 0"
        self.week_text = f"{week_label} 1"
        self.phase_text = UNKNOWN_PHASE

    def apply(self, report: TickReport) -> None:
        """Refresh every label from the report's snapshot."""
        snapshot = report.snapshot
        self.time_text = format_hour(snapshot.hour)
        self.day_text = f"{self.day_label or snapshot.day_label} {snapshot.day}"
        self.week_text = f"{self.week_label} {snapshot.week}"
        self.phase_text = snapshot.phase_name
