"""Snapshot and per-tick report types handed to presentation adapters."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .phases import UNKNOWN_PHASE, PhaseEntry, SkyboxMaterial
from .schedule import Transition
from .time import format_hour


@dataclass(frozen=True)
class EntryStatus:
    """Read-only view of one scheduled entry."""

    name: str
    appear_hour: int
    disappear_hour: int
    active: bool
    preserve_colliders: bool
    has_target: bool


@dataclass
class SimulationSnapshot:
    """Everything the core exposes after a tick."""

    hour: int
    fraction: float
    phase_name: str = UNKNOWN_PHASE
    blend_progress: float = 0.0
    day: int = 0
    week: int = 1
    day_label: str = "Day"
    light_rotation: tuple[float, float, float] = (0.0, 0.0, 0.0)
    entries: list[EntryStatus] = field(default_factory=list)

    @property
    def time_text(self) -> str:
        """Hour as ``HH:00``."""
        return format_hour(self.hour)

    @property
    def day_text(self) -> str:
        """Day counter with its label, e.g. ``Day 3``."""
        return f"{self.day_label} {self.day}"

    def copy(self) -> "SimulationSnapshot":
        """Create a copy."""
        return SimulationSnapshot(
            hour=self.hour,
            fraction=self.fraction,
            phase_name=self.phase_name,
            blend_progress=self.blend_progress,
            day=self.day,
            week=self.week,
            day_label=self.day_label,
            light_rotation=self.light_rotation,
            entries=list(self.entries),
        )

    def to_dict(self) -> dict:
        """Serialize to a plain dict for logging and debugging."""
        return {
            "hour": self.hour,
            "fraction": round(self.fraction, 4),
            "phase": self.phase_name,
            "blend_progress": round(self.blend_progress, 4),
            "day": self.day,
            "week": self.week,
            "day_label": self.day_label,
            "light_rotation": list(self.light_rotation),
            "entries": [
                {
                    "name": e.name,
                    "range": [e.appear_hour, e.disappear_hour],
                    "active": e.active,
                    "preserve_colliders": e.preserve_colliders,
                    "has_target": e.has_target,
                }
                for e in self.entries
            ],
        }


@dataclass(frozen=True)
class EnvironmentUpdate:
    """Phase and skybox state to apply this tick."""

    phase: PhaseEntry
    blend_progress: float

    @property
    def material(self) -> Optional[SkyboxMaterial]:
        """The phase's skybox material, if any."""
        return self.phase.material


@dataclass
class TickReport:
    """What changed during one tick (or one administrative command)."""

    snapshot: SimulationSnapshot
    environment: Optional[EnvironmentUpdate] = None
    days_advanced: int = 0
    transitions: list[Transition] = field(default_factory=list)

    @property
    def changes(self) -> list[Transition]:
        """Transitions that require a toggle."""
        return [t for t in self.transitions if t.changed]
