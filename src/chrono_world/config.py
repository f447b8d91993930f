"""Simulation configuration."""

from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

from chrono_world.exceptions import ConfigurationError
from chrono_world.types import SkyboxMaterial, validate_hour


@dataclass
class PhaseConfig:
    """A phase bound to one hour."""

    name: str
    hour: int
    material: Optional[SkyboxMaterial] = None


@dataclass
class ScheduleConfig:
    """A scene object shown only between two hours."""

    target: str  # Scene object name
    appear_hour: int
    disappear_hour: int
    preserve_colliders: bool = True


@dataclass
class SimulationConfig:
    """Static configuration for a simulation run."""

    day_duration_seconds: float = 24.0
    initial_fraction: float = 0.35
    initial_hour: Optional[int] = None  # overrides initial_fraction
    blend_rate: float = 1.0
    check_interval: float = 0.0
    days_per_week: Optional[int] = 7
    catch_up_skipped_days: bool = True
    day_label: str = "Day"
    phases: list[PhaseConfig] = field(default_factory=list)
    schedules: list[ScheduleConfig] = field(default_factory=list)

    def validate(self) -> "SimulationConfig":
        """Check every value.

        Returns:
            self, for chaining.

        Raises:
            ConfigurationError: On the first invalid value.
        """
        if not self.day_duration_seconds > 0:
            raise ConfigurationError(
                f"day_duration_seconds must be > 0, got {self.day_duration_seconds!r}"
            )
        if not 0.0 <= self.initial_fraction < 1.0:
            raise ConfigurationError(
                f"initial_fraction must be in [0, 1), got {self.initial_fraction!r}"
            )
        if self.initial_hour is not None:
            validate_hour(self.initial_hour, "initial_hour")
        if self.blend_rate < 0:
            raise ConfigurationError(f"blend_rate must be non-negative, got {self.blend_rate!r}")
        if self.check_interval < 0:
            raise ConfigurationError(
                f"check_interval must be non-negative, got {self.check_interval!r}"
            )
        if self.days_per_week is not None and self.days_per_week < 1:
            raise ConfigurationError(f"days_per_week must be >= 1, got {self.days_per_week!r}")

        for phase in self.phases:
            validate_hour(phase.hour, f"Phase '{phase.name}' hour")
        for schedule in self.schedules:
            validate_hour(schedule.appear_hour, f"Schedule '{schedule.target}' appear_hour")
            validate_hour(schedule.disappear_hour, f"Schedule '{schedule.target}' disappear_hour")
        return self

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SimulationConfig":
        """Build a config from a plain mapping, e.g. parsed JSON.

        Args:
            data: Mapping with the same keys as the dataclass fields.

        Returns:
            A validated config.

        Raises:
            ConfigurationError: On unknown keys or invalid values.
        """
        data = dict(data)
        phases = [_phase_from_dict(p) for p in data.pop("phases", [])]
        schedules = [_build(ScheduleConfig, s) for s in data.pop("schedules", [])]
        config = _build(cls, data)
        config.phases = phases
        config.schedules = schedules
        return config.validate()

    @classmethod
    def load(cls, path: Union[str, Path]) -> "SimulationConfig":
        """Load a config from a JSON file.

        Args:
            path: Path to the JSON file.

        Returns:
            A validated config.
        """
        try:
            data = json.loads(Path(path).read_text())
        except json.JSONDecodeError as exc:
            raise ConfigurationError(f"Invalid JSON in {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigurationError(f"Expected a JSON object in {path}")
        return cls.from_dict(data)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a plain dict that ``from_dict`` accepts."""
        return {
            "day_duration_seconds": self.day_duration_seconds,
            "initial_fraction": self.initial_fraction,
            "initial_hour": self.initial_hour,
            "blend_rate": self.blend_rate,
            "check_interval": self.check_interval,
            "days_per_week": self.days_per_week,
            "catch_up_skipped_days": self.catch_up_skipped_days,
            "day_label": self.day_label,
            "phases": [
                {
                    "name": p.name,
                    "hour": p.hour,
                    **({"material": p.material.to_dict()} if p.material else {}),
                }
                for p in self.phases
            ],
            "schedules": [dataclasses.asdict(s) for s in self.schedules],
        }


def _build(cls: type, data: dict[str, Any]) -> Any:
    """Instantiate a dataclass, rejecting unknown or missing keys."""
    known = {f.name for f in dataclasses.fields(cls)}
    unknown = set(data) - known
    if unknown:
        raise ConfigurationError(
            f"Unknown {cls.__name__} keys: {', '.join(sorted(unknown))}"
        )
    try:
        return cls(**data)
    except TypeError as exc:
        raise ConfigurationError(f"Invalid {cls.__name__}: {exc}") from exc


def _phase_from_dict(data: dict[str, Any]) -> PhaseConfig:
    data = dict(data)
    material = data.pop("material", None)
    phase = _build(PhaseConfig, data)
    if material is not None:
        material = dict(material)
        for key in (
            "zenith_color",
            "horizon_color",
            "transition_zenith_color",
            "transition_horizon_color",
        ):
            if material.get(key) is not None:
                material[key] = tuple(material[key])
        phase.material = _build(SkyboxMaterial, material)
    return phase
