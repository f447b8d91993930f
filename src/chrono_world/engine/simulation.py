"""Simulation context and per-tick driver."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional

from chrono_world.config import SimulationConfig
from chrono_world.types import (
    EntryStatus,
    EnvironmentUpdate,
    PhaseEntry,
    Scene,
    ScheduledEntry,
    SimulationSnapshot,
    TickReport,
    Transition,
)
from .clock import Clock, light_euler_angles
from .day_counter import DayCounter
from .phase_table import PhaseTable
from .schedule import ScheduleEngine
from .state import SnapshotPublisher

logger = logging.getLogger(__name__)


class SimulationEngine:
    """Owns the clock, phase table, day counter and schedule for one run.

    ``tick`` is the only place the components are updated, always in this order:

    1. Clock advances and derives the hour.
    2. PhaseTable selects the hour's phase and advances its blend.
    3. DayCounter checks for a rollover into hour 0.
    4. ScheduleEngine evaluates visibility for the hour.

    The resulting ``TickReport`` is published to subscribers after all four
    steps, so no subscriber sees a half-updated tick.
    """

    def __init__(
        self,
        clock: Clock,
        phases: PhaseTable,
        days: DayCounter,
        schedule: ScheduleEngine,
        catch_up_skipped_days: bool = True,
        day_label: str = "Day",
    ):
        """Initialize the simulation.

        Args:
            clock: Day clock.
            phases: Phase table.
            days: Day counter.
            schedule: Schedule engine.
            catch_up_skipped_days: Count midnights that a single large step
                jumped over.
            day_label: Prefix shown before the day counter.
        """
        self.clock = clock
        self.phases = phases
        self.days = days
        self.schedule = schedule
        self.catch_up_skipped_days = catch_up_skipped_days
        self.day_label = day_label
        self._started = False
        self._publisher = SnapshotPublisher(self._build_snapshot())

    @classmethod
    def from_config(cls, config: SimulationConfig, scene: Optional[Scene] = None) -> "SimulationEngine":
        """Build a simulation from configuration.

        Schedule targets are looked up by name in the scene. Names that are
        not found leave the entry without a target; it is skipped per tick.

        Args:
            config: Simulation configuration.
            scene: Scene holding the schedule targets.

        Returns:
            A new, not yet started simulation.

        Raises:
            ConfigurationError: If the configuration is invalid.
        """
        config.validate()
        scene = scene or Scene(name="empty")

        phases = PhaseTable(
            (PhaseEntry(name=p.name, hour=p.hour, material=p.material) for p in config.phases),
            blend_rate=config.blend_rate,
        )
        entries: list[ScheduledEntry] = []
        for s in config.schedules:
            target = scene.find(s.target)
            if target is None:
                logger.warning("Schedule target '%s' not found in scene '%s'", s.target, scene.name)
            entries.append(
                ScheduledEntry(
                    name=s.target,
                    target=target,
                    appear_hour=s.appear_hour,
                    disappear_hour=s.disappear_hour,
                    preserve_colliders=s.preserve_colliders,
                )
            )

        clock = Clock(config.day_duration_seconds, config.initial_fraction)
        if config.initial_hour is not None:
            clock.set_hour(config.initial_hour)

        return cls(
            clock=clock,
            phases=phases,
            days=DayCounter(days_per_week=config.days_per_week),
            schedule=ScheduleEngine(entries, check_interval=config.check_interval),
            catch_up_skipped_days=config.catch_up_skipped_days,
            day_label=config.day_label,
        )

    @property
    def started(self) -> bool:
        """Whether ``start`` has been called."""
        return self._started

    def start(self) -> TickReport:
        """Hide every scheduled target so materialized state matches the schedule.

        Returns:
            The published report carrying the deactivations.
        """
        self._started = True
        return self.reset_all_schedules()

    def tick(self, delta_seconds: float) -> TickReport:
        """Advance the simulation by one frame.

        The first tick of a simulation that was never started calls ``start``
        before advancing, so the scene agrees with the inactive entries.

        Args:
            delta_seconds: Real seconds since the last frame.

        Returns:
            The published report for this tick.
        """
        if not self._started:
            self.start()

        wraps = self.clock.advance(delta_seconds)
        hour = self.clock.hour

        phase = self.phases.select(hour)
        progress = self.phases.advance_blend(delta_seconds)
        environment = EnvironmentUpdate(phase, progress) if phase is not None else None

        days_advanced = 1 if self.days.check_rollover(hour) else 0
        if self.catch_up_skipped_days and wraps > days_advanced:
            skipped = wraps - days_advanced
            logger.info("Step crossed midnight %d time(s) unobserved; crediting days", skipped)
            self.days.credit_days(skipped)
            days_advanced = wraps

        transitions = self.schedule.poll(hour, delta_seconds)
        return self._publish(environment, days_advanced, transitions)

    def get_state(self) -> SimulationSnapshot:
        """Get the latest published snapshot.

        Returns:
            A copy of the snapshot.
        """
        return self._publisher.get_state()

    def subscribe(self, listener: Callable[[TickReport], None]) -> Callable[[], None]:
        """Subscribe to tick reports.

        Args:
            listener: A function to call with each report.

        Returns:
            An unsubscribe function.
        """
        return self._publisher.subscribe(listener)

    def attach(self, adapters: Iterable) -> None:
        """Subscribe presentation adapters through their ``apply`` method."""
        for adapter in adapters:
            self.subscribe(adapter.apply)

    # Administrative commands

    def force_check(self) -> None:
        """Re-evaluate the schedule on the next tick."""
        self.schedule.force_check()

    def reset_all_schedules(self) -> TickReport:
        """Deactivate every scheduled entry and publish the deactivations."""
        transitions = self.schedule.reset_all()
        logger.info("All schedules have been reset")
        return self._publish(None, 0, transitions)

    def reinitialize_components(self) -> None:
        """Rediscover renderers and colliders for every scheduled entry."""
        self.schedule.reinitialize_components()

    def set_fraction(self, fraction: float) -> None:
        """Jump to a fraction of the day."""
        self.clock.set_fraction(fraction)

    def set_hour(self, hour: int) -> None:
        """Jump to the start of an hour."""
        self.clock.set_hour(hour)

    def jump_to_hour(self, hour: int) -> None:
        """Jump to an hour and re-evaluate the schedule on the next tick."""
        self.clock.set_hour(hour)
        self.schedule.force_check()

    def set_time_to_6am(self) -> None:
        """Jump to 06:00."""
        self.jump_to_hour(6)

    def set_time_to_6pm(self) -> None:
        """Jump to 18:00."""
        self.jump_to_hour(18)

    def debug_current_time(self) -> str:
        """One-line description of the current time."""
        line = (
            f"Current Hour: {self.clock.hour}, "
            f"Time of Day: {self.clock.fraction:.2f}, "
            f"Phase: {self.phases.phase_name(self.clock.hour)}"
        )
        logger.info(line)
        return line

    def dump_state(self) -> dict:
        """Describe the full simulation state.

        Returns:
            The current snapshot as a dict, with expected schedule state.
        """
        state = self._build_snapshot().to_dict()
        state["schedules"] = self.schedule.describe(self.clock.hour)
        logger.info("=== Current Hour: %d === %s", self.clock.hour, state)
        return state

    def _publish(
        self,
        environment: Optional[EnvironmentUpdate],
        days_advanced: int,
        transitions: list[Transition],
    ) -> TickReport:
        report = TickReport(
            snapshot=self._build_snapshot(),
            environment=environment,
            days_advanced=days_advanced,
            transitions=transitions,
        )
        self._publisher.publish(report)
        return report

    def _build_snapshot(self) -> SimulationSnapshot:
        hour = self.clock.hour
        return SimulationSnapshot(
            hour=hour,
            fraction=self.clock.fraction,
            phase_name=self.phases.phase_name(hour),
            blend_progress=self.phases.blend_progress,
            day=self.days.day,
            week=self.days.week,
            day_label=self.day_label,
            light_rotation=light_euler_angles(self.clock.fraction),
            entries=[
                EntryStatus(
                    name=e.name,
                    appear_hour=e.appear_hour,
                    disappear_hour=e.disappear_hour,
                    active=e.active,
                    preserve_colliders=e.preserve_colliders,
                    has_target=e.has_target,
                )
                for e in self.schedule
            ],
        )
