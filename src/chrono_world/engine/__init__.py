"""Simulation engine for Chrono World."""

from __future__ import annotations

from .clock import Clock, light_euler_angles
from .phase_table import PhaseTable
from .day_counter import DayCounter
from .schedule import ScheduleEngine, is_hour_in_range
from .state import SnapshotPublisher
from .simulation import SimulationEngine

__all__ = [
    "Clock",
    "light_euler_angles",
    "PhaseTable",
    "DayCounter",
    "ScheduleEngine",
    "is_hour_in_range",
    "SnapshotPublisher",
    "SimulationEngine",
]
