"""Hour-range scheduling of scene object visibility."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional

from chrono_world.exceptions import ConfigurationError, MissingTargetError
from chrono_world.types import (
    EntryHandle,
    ScheduledEntry,
    Transition,
    TransitionKind,
    clamp_hour,
)

logger = logging.getLogger(__name__)


def is_hour_in_range(hour: int, appear_hour: int, disappear_hour: int) -> bool:
    """Check whether an hour falls inside a schedule window.

    The window includes ``appear_hour`` and excludes ``disappear_hour``. When
    ``appear_hour > disappear_hour`` the window wraps past midnight. A window
    with equal bounds is empty.

    Args:
        hour: Hour to test.
        appear_hour: First hour of the window.
        disappear_hour: First hour after the window.

    Returns:
        True if the hour is inside the window.
    """
    hour = clamp_hour(hour)
    appear_hour = clamp_hour(appear_hour)
    disappear_hour = clamp_hour(disappear_hour)

    if appear_hour == disappear_hour:
        return False
    if appear_hour < disappear_hour:
        return appear_hour <= hour < disappear_hour
    return hour >= appear_hour or hour < disappear_hour


class ScheduleEngine:
    """Owns scheduled entries and emits edge-triggered visibility transitions.

    Entries live in an append-only list and are addressed by their index, so a
    handle stays valid for the lifetime of the engine.
    """

    def __init__(self, entries: Iterable[ScheduledEntry] = (), check_interval: float = 0.0):
        """Initialize the schedule engine.

        Args:
            entries: Initial entries.
            check_interval: Seconds between polled checks. 0 checks on every
                hour change.
        """
        if check_interval < 0:
            raise ConfigurationError(f"check_interval must be non-negative, got {check_interval}")
        self._entries: list[ScheduledEntry] = []
        self._check_interval = check_interval
        self._time_since_check = 0.0
        self._last_checked_hour: Optional[int] = None
        for entry in entries:
            self.add(entry)

    def add(self, entry: ScheduledEntry) -> EntryHandle:
        """Register an entry.

        Args:
            entry: The entry to schedule. Its state starts inactive.

        Returns:
            Handle for later lookups.
        """
        self._entries.append(entry)
        return len(self._entries) - 1

    def get(self, handle: EntryHandle) -> ScheduledEntry:
        """Get an entry by handle."""
        return self._entries[handle]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ScheduledEntry]:
        return iter(self._entries)

    @property
    def last_checked_hour(self) -> Optional[int]:
        """Hour of the most recent polled check."""
        return self._last_checked_hour

    def poll(self, hour: int, delta_seconds: float) -> list[Transition]:
        """Evaluate the schedule if a check is due.

        With no check interval, a check is due whenever the hour differs from
        the last checked hour. Otherwise a check is due every ``check_interval``
        seconds.

        Args:
            hour: Current hour.
            delta_seconds: Real seconds since the last poll.

        Returns:
            Transitions from ``evaluate``, or an empty list if no check ran.
        """
        if self._check_interval > 0:
            self._time_since_check += delta_seconds
            if self._time_since_check < self._check_interval:
                return []
            self._time_since_check = 0.0
        elif hour == self._last_checked_hour:
            return []

        self._last_checked_hour = hour
        logger.debug("Checking schedules for hour %d", hour)
        return self.evaluate(hour)

    def evaluate(self, hour: int) -> list[Transition]:
        """Evaluate every entry for an hour.

        A transition is ACTIVATE or DEACTIVATE only when membership differs
        from the entry's stored state. Entries whose target is missing are
        logged and reported as skipped without touching their state.

        Args:
            hour: Current hour.

        Returns:
            One transition per entry, in handle order.
        """
        return [self._evaluate_entry(handle, entry, hour) for handle, entry in enumerate(self._entries)]

    def _evaluate_entry(self, handle: EntryHandle, entry: ScheduledEntry, hour: int) -> Transition:
        try:
            entry.require_target()
        except MissingTargetError as exc:
            logger.warning("%s; skipping schedule check", exc)
            return Transition(handle, entry.name, TransitionKind.NONE, entry.strategy, skipped=True)

        should_be_active = is_hour_in_range(hour, entry.appear_hour, entry.disappear_hour)
        logger.debug(
            "%s: should be active = %s, is active = %s", entry.name, should_be_active, entry.active
        )

        if should_be_active and not entry.active:
            return self._set_active(handle, entry, True)
        if not should_be_active and entry.active:
            return self._set_active(handle, entry, False)
        return Transition(handle, entry.name, TransitionKind.NONE, entry.strategy, target=entry.target)

    def _set_active(self, handle: EntryHandle, entry: ScheduledEntry, active: bool) -> Transition:
        # Renderer handles are discovered lazily, right before the first toggle.
        entry.initialize_components()
        entry.active = active
        kind = TransitionKind.ACTIVATE if active else TransitionKind.DEACTIVATE
        logger.debug("%s %s", "Activated" if active else "Deactivated", entry.name)
        return Transition(
            handle,
            entry.name,
            kind,
            entry.strategy,
            target=entry.target,
            renderers=entry.renderers,
        )

    def force_check(self) -> None:
        """Make the next ``poll`` evaluate regardless of hour or interval."""
        self._last_checked_hour = None
        self._time_since_check = self._check_interval

    def reset_all(self) -> list[Transition]:
        """Deactivate every entry that has a target.

        Returns:
            A DEACTIVATE transition for each entry with a target.
        """
        transitions = []
        for handle, entry in enumerate(self._entries):
            if entry.has_target:
                transitions.append(self._set_active(handle, entry, False))
        logger.debug("All schedules have been reset")
        return transitions

    def reinitialize_components(self) -> None:
        """Rediscover renderer and collider handles for every entry."""
        for entry in self._entries:
            entry.initialized = False
            entry.initialize_components()
        logger.debug("Components reinitialized for all schedules")

    def describe(self, hour: int) -> list[dict]:
        """Describe each entry's state for an hour.

        Entries with a missing target are left out.

        Args:
            hour: Hour to evaluate membership against.

        Returns:
            One dict per entry with its range and current/expected state.
        """
        rows = []
        for entry in self._entries:
            if not entry.has_target:
                continue
            rows.append({
                "name": entry.name,
                "appear_hour": entry.appear_hour,
                "disappear_hour": entry.disappear_hour,
                "should_be_active": is_hour_in_range(hour, entry.appear_hour, entry.disappear_hour),
                "is_active": entry.active,
                "preserve_colliders": entry.preserve_colliders,
            })
        return rows
