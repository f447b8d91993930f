"""Pytest configuration and fixtures."""

from __future__ import annotations

import pytest

from chrono_world.config import PhaseConfig, ScheduleConfig, SimulationConfig
from chrono_world.engine import SimulationEngine
from chrono_world.types import (
    TRANSITION_SHADER,
    ColliderComponent,
    PhaseEntry,
    RendererComponent,
    Scene,
    SceneObject,
    ScheduledEntry,
    SkyboxMaterial,
)


@pytest.fixture
def night_material() -> SkyboxMaterial:
    """Create a plain night skybox."""
    return SkyboxMaterial(name="night", zenith_color=(5, 5, 20), horizon_color=(20, 20, 50))


@pytest.fixture
def dawn_material() -> SkyboxMaterial:
    """Create a blend-capable dawn skybox."""
    return SkyboxMaterial(
        name="dawn",
        shader=TRANSITION_SHADER,
        zenith_color=(20, 20, 60),
        horizon_color=(100, 60, 60),
        transition_zenith_color=(100, 140, 220),
        transition_horizon_color=(240, 180, 120),
    )


@pytest.fixture
def day_material() -> SkyboxMaterial:
    """Create a plain day skybox."""
    return SkyboxMaterial(name="day")


@pytest.fixture
def basic_phases(night_material, dawn_material, day_material) -> list[PhaseEntry]:
    """Create a phase table: night at 0, dawn at 5, day at 8, dusk at 18."""
    return [
        PhaseEntry("Night", 0, night_material),
        PhaseEntry("Dawn", 5, dawn_material),
        PhaseEntry("Day", 8, day_material),
        PhaseEntry("Dusk", 18, dawn_material),
    ]


@pytest.fixture
def lanterns_object() -> SceneObject:
    """Create a parent object with two lanterns, each with a renderer and collider."""
    return SceneObject(
        name="lanterns",
        children=[
            SceneObject(
                name=f"lantern_{i}",
                renderers=[RendererComponent(f"glow_{i}")],
                colliders=[ColliderComponent(f"post_{i}")],
            )
            for i in range(2)
        ],
    )


@pytest.fixture
def watchman_object() -> SceneObject:
    """Create a single object with a renderer and collider."""
    return SceneObject(
        name="watchman",
        renderers=[RendererComponent("body")],
        colliders=[ColliderComponent("capsule")],
    )


@pytest.fixture
def lanterns_entry(lanterns_object) -> ScheduledEntry:
    """Create a 22h-6h entry that keeps colliders."""
    return ScheduledEntry(
        name="lanterns",
        target=lanterns_object,
        appear_hour=22,
        disappear_hour=6,
        preserve_colliders=True,
    )


@pytest.fixture
def watchman_entry(watchman_object) -> ScheduledEntry:
    """Create a 20h-4h entry that toggles the whole object."""
    return ScheduledEntry(
        name="watchman",
        target=watchman_object,
        appear_hour=20,
        disappear_hour=4,
        preserve_colliders=False,
    )


@pytest.fixture
def basic_scene(lanterns_object, watchman_object) -> Scene:
    """Create a scene holding the lanterns and the watchman."""
    scene = Scene(name="test-scene")
    scene.add(lanterns_object)
    scene.add(watchman_object)
    return scene


@pytest.fixture
def basic_config(night_material, dawn_material, day_material) -> SimulationConfig:
    """Create a config where one real second is one simulated hour."""
    return SimulationConfig(
        day_duration_seconds=24.0,
        initial_hour=12,
        phases=[
            PhaseConfig("Night", 0, night_material),
            PhaseConfig("Dawn", 5, dawn_material),
            PhaseConfig("Day", 8, day_material),
            PhaseConfig("Dusk", 18, dawn_material),
        ],
        schedules=[
            ScheduleConfig("lanterns", 22, 6, preserve_colliders=True),
            ScheduleConfig("watchman", 20, 4, preserve_colliders=False),
        ],
    )


@pytest.fixture
def basic_engine(basic_config, basic_scene) -> SimulationEngine:
    """Create a simulation at noon over the basic scene."""
    return SimulationEngine.from_config(basic_config, basic_scene)
