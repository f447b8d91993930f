"""Tests for type definitions."""

from __future__ import annotations

import pytest

from chrono_world.exceptions import ChronoWorldError, ConfigurationError, MissingTargetError
from chrono_world.types import (
    TRANSITION_SHADER,
    UNKNOWN_PHASE,
    BlendState,
    ColliderComponent,
    EntryStatus,
    MaterializationStrategy,
    PhaseEntry,
    RendererComponent,
    Scene,
    SceneObject,
    ScheduledEntry,
    SimulationSnapshot,
    TickReport,
    Transition,
    TransitionKind,
    clamp_hour,
    format_hour,
    validate_hour,
)


class TestTimeHelpers:
    """Tests for hour helpers."""

    def test_validate_hour_accepts_bounds(self):
        """Test 0 and 23 are valid hours."""
        assert validate_hour(0) == 0
        assert validate_hour(23) == 23

    @pytest.mark.parametrize("hour", [-1, 24, 100])
    def test_validate_hour_rejects_out_of_range(self, hour):
        """Test hours outside 0-23 are rejected."""
        with pytest.raises(ConfigurationError):
            validate_hour(hour)

    @pytest.mark.parametrize("hour", [True, 3.0, "7", None])
    def test_validate_hour_rejects_non_integers(self, hour):
        """Test non-integer hours are rejected."""
        with pytest.raises(ConfigurationError):
            validate_hour(hour)

    def test_validate_hour_names_field(self):
        """Test error message names the offending field."""
        with pytest.raises(ConfigurationError, match="appear_hour"):
            validate_hour(25, "appear_hour")

    def test_clamp_hour(self):
        """Test clamping into 0-23."""
        assert clamp_hour(-3) == 0
        assert clamp_hour(30) == 23
        assert clamp_hour(12) == 12

    def test_format_hour(self):
        """Test clock formatting."""
        assert format_hour(7) == "07:00"
        assert format_hour(23) == "23:00"


class TestExceptions:
    """Tests for the exception hierarchy."""

    def test_configuration_error_is_chrono_world_error(self):
        """Test ConfigurationError derives from the root."""
        assert issubclass(ConfigurationError, ChronoWorldError)

    def test_missing_target_error_carries_name(self):
        """Test MissingTargetError keeps the entry name."""
        error = MissingTargetError("lanterns")
        assert error.entry_name == "lanterns"
        assert "lanterns" in str(error)
        assert isinstance(error, ChronoWorldError)


class TestSceneObject:
    """Tests for scene objects."""

    def test_renderers_in_children_walks_hierarchy(self, lanterns_object):
        """Test renderers are collected from every descendant."""
        names = [r.name for r in lanterns_object.renderers_in_children()]
        assert names == ["glow_0", "glow_1"]

    def test_colliders_in_children_walks_hierarchy(self, lanterns_object):
        """Test colliders are collected from every descendant."""
        names = [c.name for c in lanterns_object.colliders_in_children()]
        assert names == ["post_0", "post_1"]

    def test_includes_own_components(self, watchman_object):
        """Test the object's own components are included."""
        assert [r.name for r in watchman_object.renderers_in_children()] == ["body"]

    def test_destroy_invalidates(self, watchman_object):
        """Test destroying marks the object invalid."""
        assert watchman_object.is_valid
        watchman_object.destroy()
        assert not watchman_object.is_valid

    def test_components_enabled_by_default(self):
        """Test components start enabled."""
        assert RendererComponent("r").enabled
        assert ColliderComponent("c").enabled


class TestScene:
    """Tests for scene lookup."""

    def test_find_top_level(self, basic_scene, watchman_object):
        """Test finding a top-level object."""
        assert basic_scene.find("watchman") is watchman_object

    def test_find_nested(self, basic_scene, lanterns_object):
        """Test finding a nested child by name."""
        assert basic_scene.find("lantern_1") is lanterns_object.children[1]

    def test_find_missing(self, basic_scene):
        """Test missing names return None."""
        assert basic_scene.find("dragon") is None

    def test_add_returns_object(self):
        """Test add returns the added object."""
        scene = Scene(name="s")
        obj = SceneObject(name="a")
        assert scene.add(obj) is obj
        assert scene.objects == {"a": obj}


class TestPhaseTypes:
    """Tests for phases and materials."""

    def test_material_blend_capable_by_shader(self, dawn_material, day_material):
        """Test only the transition shader is blend-capable."""
        assert dawn_material.blend_capable
        assert dawn_material.shader == TRANSITION_SHADER
        assert not day_material.blend_capable

    def test_phase_without_material_not_blend_capable(self):
        """Test a phase with no material never blends."""
        assert not PhaseEntry("Noon", 12).blend_capable

    def test_phase_rejects_bad_hour(self):
        """Test phase hours are validated."""
        with pytest.raises(ConfigurationError, match="Phase 'Late'"):
            PhaseEntry("Late", 24)

    def test_material_to_dict_omits_missing_transition_colors(self, day_material):
        """Test serialization leaves out unset transition colours."""
        data = day_material.to_dict()
        assert data["name"] == "day"
        assert "transition_zenith_color" not in data

    def test_material_to_dict_includes_transition_colors(self, dawn_material):
        """Test serialization keeps transition colours as lists."""
        data = dawn_material.to_dict()
        assert data["transition_zenith_color"] == [100, 140, 220]

    def test_blend_state_reset(self):
        """Test blend state reset."""
        state = BlendState(progress=0.7)
        state.reset()
        assert state.progress == 0.0


class TestScheduledEntry:
    """Tests for scheduled entries."""

    def test_starts_inactive_and_uninitialized(self, lanterns_entry):
        """Test new entries are inactive with no discovered components."""
        assert lanterns_entry.active is False
        assert lanterns_entry.initialized is False
        assert lanterns_entry.renderers == ()

    def test_rejects_bad_hours(self, watchman_object):
        """Test appear and disappear hours are validated."""
        with pytest.raises(ConfigurationError):
            ScheduledEntry("w", watchman_object, appear_hour=24, disappear_hour=4)
        with pytest.raises(ConfigurationError):
            ScheduledEntry("w", watchman_object, appear_hour=20, disappear_hour=-1)

    def test_strategy_follows_preserve_colliders(self, lanterns_entry, watchman_entry):
        """Test strategy selection."""
        assert lanterns_entry.strategy is MaterializationStrategy.RENDERERS_ONLY
        assert watchman_entry.strategy is MaterializationStrategy.WHOLE_OBJECT

    def test_require_target_missing(self):
        """Test missing targets raise MissingTargetError."""
        entry = ScheduledEntry("ghost", None, 1, 2)
        assert not entry.has_target
        with pytest.raises(MissingTargetError) as exc_info:
            entry.require_target()
        assert exc_info.value.entry_name == "ghost"

    def test_require_target_destroyed(self, watchman_entry, watchman_object):
        """Test destroyed targets count as missing."""
        watchman_object.destroy()
        assert not watchman_entry.has_target
        with pytest.raises(MissingTargetError):
            watchman_entry.require_target()

    def test_initialize_components_runs_once(self, lanterns_entry, lanterns_object):
        """Test component discovery happens only once."""
        assert lanterns_entry.initialize_components() is True
        assert len(lanterns_entry.renderers) == 2
        assert len(lanterns_entry.colliders) == 2

        lanterns_object.children[0].renderers.append(RendererComponent("extra"))
        assert lanterns_entry.initialize_components() is False
        assert len(lanterns_entry.renderers) == 2

    def test_initialize_components_without_target(self):
        """Test discovery is skipped without a target."""
        entry = ScheduledEntry("ghost", None, 1, 2)
        assert entry.initialize_components() is False
        assert entry.initialized is False

    def test_describe(self, lanterns_entry):
        """Test describe string."""
        assert lanterns_entry.describe() == "lanterns: 22h-6h (Active: False)"


class TestTransition:
    """Tests for transitions."""

    def test_changed(self):
        """Test only ACTIVATE and DEACTIVATE are changes."""
        strategy = MaterializationStrategy.RENDERERS_ONLY
        assert Transition(0, "a", TransitionKind.ACTIVATE, strategy).changed
        assert Transition(0, "a", TransitionKind.DEACTIVATE, strategy).changed
        assert not Transition(0, "a", TransitionKind.NONE, strategy).changed

    def test_equality_ignores_target(self, watchman_object):
        """Test equality compares outcome, not scene handles."""
        strategy = MaterializationStrategy.WHOLE_OBJECT
        with_target = Transition(1, "w", TransitionKind.ACTIVATE, strategy, target=watchman_object)
        without_target = Transition(1, "w", TransitionKind.ACTIVATE, strategy)
        assert with_target == without_target


class TestSimulationSnapshot:
    """Tests for snapshots and reports."""

    def _snapshot(self) -> SimulationSnapshot:
        return SimulationSnapshot(
            hour=7,
            fraction=0.3,
            phase_name="Morning",
            day=2,
            entries=[EntryStatus("lanterns", 22, 6, False, True, True)],
        )

    def test_defaults(self):
        """Test snapshot defaults."""
        snapshot = SimulationSnapshot(hour=0, fraction=0.0)
        assert snapshot.phase_name == UNKNOWN_PHASE
        assert snapshot.day == 0
        assert snapshot.week == 1

    def test_time_text(self):
        """Test time text formatting."""
        assert self._snapshot().time_text == "07:00"

    def test_day_text(self):
        """Test day text joins the label and the counter."""
        assert self._snapshot().day_text == "Day 2"
        snapshot = self._snapshot()
        snapshot.day_label = "Sol"
        assert snapshot.copy().day_text == "Sol 2"

    def test_copy_is_independent(self):
        """Test copies do not share the entries list."""
        snapshot = self._snapshot()
        copy = snapshot.copy()
        copy.entries.clear()
        copy.day = 99
        assert len(snapshot.entries) == 1
        assert snapshot.day == 2

    def test_to_dict(self):
        """Test dict serialization."""
        data = self._snapshot().to_dict()
        assert data["hour"] == 7
        assert data["phase"] == "Morning"
        assert data["entries"][0]["range"] == [22, 6]
        assert data["entries"][0]["has_target"] is True

    def test_report_changes(self):
        """Test the report filters out unchanged transitions."""
        strategy = MaterializationStrategy.RENDERERS_ONLY
        report = TickReport(
            snapshot=self._snapshot(),
            transitions=[
                Transition(0, "a", TransitionKind.NONE, strategy),
                Transition(1, "b", TransitionKind.ACTIVATE, strategy),
            ],
        )
        assert [t.name for t in report.changes] == ["b"]
