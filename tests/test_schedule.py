"""Tests for hour-range scheduling."""

from __future__ import annotations

import logging

import pytest

from chrono_world.engine import ScheduleEngine, is_hour_in_range
from chrono_world.exceptions import ConfigurationError
from chrono_world.types import (
    MaterializationStrategy,
    RendererComponent,
    ScheduledEntry,
    SceneObject,
    TransitionKind,
)


class TestIsHourInRange:
    """Tests for the window membership rule."""

    @pytest.mark.parametrize("hour,expected", [
        (21, False),
        (22, True),
        (23, True),
        (0, True),
        (5, True),
        (6, False),
        (12, False),
    ])
    def test_wrapping_window(self, hour, expected):
        """Test a window that wraps past midnight."""
        assert is_hour_in_range(hour, 22, 6) is expected

    @pytest.mark.parametrize("hour,expected", [
        (7, False),
        (8, True),
        (16, True),
        (17, False),
    ])
    def test_normal_window(self, hour, expected):
        """Test a same-day window includes appear and excludes disappear."""
        assert is_hour_in_range(hour, 8, 17) is expected

    def test_wrapping_window_covers_night(self):
        """Test 22h-6h is active exactly for the hours 22 through 5."""
        active = {hour for hour in range(24) if is_hour_in_range(hour, 22, 6)}
        assert active == {22, 23, 0, 1, 2, 3, 4, 5}

    def test_zero_width_window_never_active(self):
        """Test equal bounds make an empty window."""
        assert not any(is_hour_in_range(hour, 10, 10) for hour in range(24))

    def test_out_of_range_arguments_clamped(self):
        """Test arguments are clamped into 0-23."""
        assert is_hour_in_range(30, 20, 4) is True
        assert is_hour_in_range(-5, 1, 3) is False


class TestScheduleEngine:
    """Tests for schedule evaluation."""

    def test_add_returns_handles(self, lanterns_entry, watchman_entry):
        """Test handles are stable indices."""
        engine = ScheduleEngine()
        assert engine.add(lanterns_entry) == 0
        assert engine.add(watchman_entry) == 1
        assert engine.get(1) is watchman_entry
        assert len(engine) == 2
        assert list(engine) == [lanterns_entry, watchman_entry]

    def test_negative_interval_rejected(self):
        """Test check interval must be non-negative."""
        with pytest.raises(ConfigurationError):
            ScheduleEngine(check_interval=-1.0)

    def test_activate_on_entering_window(self, lanterns_entry):
        """Test entering the window produces ACTIVATE with discovered renderers."""
        engine = ScheduleEngine([lanterns_entry])
        [transition] = engine.evaluate(23)
        assert transition.kind is TransitionKind.ACTIVATE
        assert transition.strategy is MaterializationStrategy.RENDERERS_ONLY
        assert [r.name for r in transition.renderers] == ["glow_0", "glow_1"]
        assert lanterns_entry.active is True

    def test_edge_triggered(self, lanterns_entry):
        """Test repeated evaluation in the same state produces no change."""
        engine = ScheduleEngine([lanterns_entry])
        engine.evaluate(23)
        [transition] = engine.evaluate(23)
        assert transition.kind is TransitionKind.NONE
        [transition] = engine.evaluate(2)
        assert transition.kind is TransitionKind.NONE

    def test_deactivate_on_leaving_window(self, lanterns_entry):
        """Test leaving the window produces DEACTIVATE."""
        engine = ScheduleEngine([lanterns_entry])
        engine.evaluate(23)
        [transition] = engine.evaluate(6)
        assert transition.kind is TransitionKind.DEACTIVATE
        assert lanterns_entry.active is False

    def test_one_activation_per_day(self, lanterns_entry):
        """Test hourly evaluation over two days activates exactly twice."""
        engine = ScheduleEngine([lanterns_entry])
        kinds = [engine.evaluate(hour % 24)[0].kind for hour in range(12, 60)]
        assert kinds.count(TransitionKind.ACTIVATE) == 2
        assert kinds.count(TransitionKind.DEACTIVATE) == 2

    def test_zero_width_entry_never_activates(self, watchman_object):
        """Test a zero-width window never activates."""
        entry = ScheduledEntry("w", watchman_object, 10, 10)
        engine = ScheduleEngine([entry])
        for hour in range(24):
            assert engine.evaluate(hour)[0].kind is TransitionKind.NONE

    def test_components_discovered_lazily(self, lanterns_entry):
        """Test discovery waits for the first toggle."""
        engine = ScheduleEngine([lanterns_entry])
        engine.evaluate(12)
        assert lanterns_entry.initialized is False
        engine.evaluate(22)
        assert lanterns_entry.initialized is True

    def test_discovery_is_a_snapshot(self, lanterns_entry, lanterns_object):
        """Test renderers added later are not seen until reinitialized."""
        engine = ScheduleEngine([lanterns_entry])
        engine.evaluate(22)
        lanterns_object.children.append(
            SceneObject(name="lantern_2", renderers=[RendererComponent("glow_2")])
        )
        [transition] = engine.evaluate(8)
        assert len(transition.renderers) == 2

        engine.reinitialize_components()
        [transition] = engine.evaluate(22)
        assert len(transition.renderers) == 3

    def test_missing_target_skipped(self, watchman_entry, caplog):
        """Test an entry without a target is skipped and logged."""
        ghost = ScheduledEntry("ghost", None, 20, 4)
        engine = ScheduleEngine([ghost, watchman_entry])
        with caplog.at_level(logging.WARNING, logger="chrono_world"):
            ghost_transition, watchman_transition = engine.evaluate(21)

        assert ghost_transition.skipped
        assert ghost_transition.kind is TransitionKind.NONE
        assert ghost.active is False
        assert watchman_transition.kind is TransitionKind.ACTIVATE
        assert "ghost" in caplog.text

    def test_destroyed_target_keeps_state(self, watchman_entry, watchman_object):
        """Test a target destroyed while active leaves the entry untouched."""
        engine = ScheduleEngine([watchman_entry])
        engine.evaluate(21)
        watchman_object.destroy()
        [transition] = engine.evaluate(12)
        assert transition.skipped
        assert watchman_entry.active is True

    def test_poll_checks_on_hour_change(self, lanterns_entry):
        """Test polling with no interval runs once per hour."""
        engine = ScheduleEngine([lanterns_entry])
        assert len(engine.poll(5, 0.1)) == 1
        assert engine.poll(5, 0.1) == []
        assert len(engine.poll(6, 0.1)) == 1
        assert engine.last_checked_hour == 6

    def test_poll_with_interval(self, lanterns_entry):
        """Test polling with an interval waits for the accumulated time."""
        engine = ScheduleEngine([lanterns_entry], check_interval=2.0)
        assert engine.poll(5, 1.0) == []
        assert len(engine.poll(5, 1.0)) == 1
        assert engine.poll(5, 1.0) == []

    def test_force_check(self, lanterns_entry):
        """Test force_check makes the next poll evaluate."""
        engine = ScheduleEngine([lanterns_entry])
        engine.poll(5, 0.1)
        engine.force_check()
        assert engine.last_checked_hour is None
        assert len(engine.poll(5, 0.0)) == 1

    def test_force_check_with_interval(self, lanterns_entry):
        """Test force_check bypasses the check interval."""
        engine = ScheduleEngine([lanterns_entry], check_interval=10.0)
        engine.force_check()
        assert len(engine.poll(5, 0.0)) == 1

    def test_reset_all(self, lanterns_entry, watchman_entry):
        """Test reset deactivates every entry that has a target."""
        ghost = ScheduledEntry("ghost", None, 20, 4)
        engine = ScheduleEngine([lanterns_entry, watchman_entry, ghost])
        engine.evaluate(23)

        transitions = engine.reset_all()
        assert [t.name for t in transitions] == ["lanterns", "watchman"]
        assert all(t.kind is TransitionKind.DEACTIVATE for t in transitions)
        assert not lanterns_entry.active
        assert not watchman_entry.active

    def test_describe(self, lanterns_entry, watchman_entry):
        """Test describe reports expected and actual state."""
        ghost = ScheduledEntry("ghost", None, 20, 4)
        engine = ScheduleEngine([lanterns_entry, watchman_entry, ghost])
        rows = engine.describe(21)
        assert [r["name"] for r in rows] == ["lanterns", "watchman"]
        assert rows[0]["should_be_active"] is False
        assert rows[1]["should_be_active"] is True
        assert rows[1]["is_active"] is False
        assert rows[1]["preserve_colliders"] is False
