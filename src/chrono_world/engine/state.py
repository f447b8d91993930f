"""Snapshot publishing to presentation adapters."""

from __future__ import annotations

from typing import Callable

from chrono_world.types import SimulationSnapshot, TickReport


class SnapshotPublisher:
    """Holds the latest snapshot and notifies subscribers of each report."""

    def __init__(self, initial_snapshot: SimulationSnapshot):
        """Initialize with an initial snapshot.

        Args:
            initial_snapshot: Snapshot before the first tick.
        """
        self._snapshot = initial_snapshot
        self._listeners: list[Callable[[TickReport], None]] = []

    def get_state(self) -> SimulationSnapshot:
        """Get the latest snapshot.

        Returns:
            A copy of the latest snapshot.
        """
        return self._snapshot.copy()

    def publish(self, report: TickReport) -> None:
        """Store the report's snapshot and notify listeners.

        Args:
            report: The report to publish.
        """
        self._snapshot = report.snapshot
        for listener in list(self._listeners):
            listener(report)

    def subscribe(self, listener: Callable[[TickReport], None]) -> Callable[[], None]:
        """Subscribe to published reports.

        Args:
            listener: A function to call with each report.

        Returns:
            An unsubscribe function.
        """
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)
