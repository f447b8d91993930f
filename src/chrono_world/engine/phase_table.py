"""Hour-keyed phase lookup and skybox blend tracking."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from chrono_world.exceptions import ConfigurationError
from chrono_world.types import UNKNOWN_PHASE, BlendState, PhaseEntry

logger = logging.getLogger(__name__)


class PhaseTable:
    """Ordered, read-only table of phases with blend progress for the active one."""

    def __init__(self, entries: Iterable[PhaseEntry] = (), blend_rate: float = 1.0):
        """Initialize the phase table.

        Args:
            entries: Phases in lookup order. Earlier entries win on duplicate hours.
            blend_rate: Blend progress gained per real second.
        """
        if blend_rate < 0:
            raise ConfigurationError(f"blend_rate must be non-negative, got {blend_rate}")
        self._entries: tuple[PhaseEntry, ...] = tuple(entries)
        self._blend_rate = blend_rate
        self._blend = BlendState()

    @property
    def entries(self) -> tuple[PhaseEntry, ...]:
        """All configured phases in lookup order."""
        return self._entries

    @property
    def current(self) -> Optional[PhaseEntry]:
        """Phase matched by the last ``select`` call."""
        return self._blend.phase

    @property
    def blend_progress(self) -> float:
        """Progress through the current phase's transition, 0-1."""
        return self._blend.progress

    def __len__(self) -> int:
        return len(self._entries)

    def lookup(self, hour: int) -> Optional[PhaseEntry]:
        """Find the first phase bound to an hour.

        Args:
            hour: Hour of day, 0-23.

        Returns:
            The first matching entry, or None if no phase is configured for the hour.
        """
        for entry in self._entries:
            if entry.hour == hour:
                return entry
        return None

    def phase_name(self, hour: int) -> str:
        """Name of the phase for an hour, or the unknown-phase sentinel."""
        entry = self.lookup(hour)
        return entry.name if entry is not None else UNKNOWN_PHASE

    def select(self, hour: int) -> Optional[PhaseEntry]:
        """Make the phase for an hour the active one.

        Switching to a different phase (or to no phase) restarts the blend.

        Args:
            hour: Hour of day, 0-23.

        Returns:
            The now-active entry, or None.
        """
        entry = self.lookup(hour)
        if entry is not self._blend.phase:
            if entry is None:
                logger.debug("No phase configured for hour %d", hour)
            else:
                logger.debug("Phase changed to %s at hour %d", entry.name, hour)
            self._blend.phase = entry
            self._blend.reset()
        return entry

    def advance_blend(self, delta_seconds: float) -> float:
        """Advance the active phase's blend.

        Progress grows (clamped to 1) only while the active phase's material is
        blend-capable; otherwise it is held at 0.

        Args:
            delta_seconds: Real seconds since the last tick.

        Returns:
            The new blend progress.
        """
        if delta_seconds < 0:
            raise ValueError(f"delta_seconds must be non-negative, got {delta_seconds}")

        phase = self._blend.phase
        if phase is None or not phase.blend_capable:
            self._blend.reset()
        else:
            self._blend.progress = min(1.0, self._blend.progress + delta_seconds * self._blend_rate)
        return self._blend.progress

    def reset_blend(self) -> None:
        """Forget the active phase and restart blending."""
        self._blend.phase = None
        self._blend.reset()
