"""Village preset: market by day, lanterns and a watchman by night."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from chrono_world.config import PhaseConfig, ScheduleConfig, SimulationConfig
from chrono_world.types import (
    TRANSITION_SHADER,
    ColliderComponent,
    RendererComponent,
    Scene,
    SceneObject,
    SkyboxMaterial,
)

NIGHT_SKY = SkyboxMaterial(
    name="night_sky",
    zenith_color=(5, 8, 25),
    horizon_color=(25, 30, 60),
)
DAWN_SKY = SkyboxMaterial(
    name="dawn_transition",
    shader=TRANSITION_SHADER,
    zenith_color=(25, 30, 70),
    horizon_color=(90, 60, 80),
    transition_zenith_color=(90, 140, 210),
    transition_horizon_color=(250, 180, 120),
)
DAY_SKY = SkyboxMaterial(
    name="day_sky",
    zenith_color=(60, 130, 230),
    horizon_color=(180, 210, 245),
)
DUSK_SKY = SkyboxMaterial(
    name="dusk_transition",
    shader=TRANSITION_SHADER,
    zenith_color=(70, 110, 200),
    horizon_color=(250, 170, 100),
    transition_zenith_color=(20, 20, 60),
    transition_horizon_color=(120, 50, 70),
)


@dataclass
class VillageConfig:
    """Configuration for the village preset."""

    day_duration_seconds: float = 240.0  # 4 real minutes per day
    initial_hour: int = 8
    market_hours: tuple[int, int] = (8, 17)
    lantern_hours: tuple[int, int] = (19, 6)
    watch_hours: tuple[int, int] = (22, 5)
    bakery_hours: tuple[int, int] = (5, 10)
    lantern_count: int = 3
    check_interval: float = 0.0
    day_label: str = "Day"
    extra_schedules: list[ScheduleConfig] = field(default_factory=list)


def village_phases() -> list[PhaseConfig]:
    """Phase table for the village."""
    return [
        PhaseConfig("Midnight", 0, NIGHT_SKY),
        PhaseConfig("Dawn", 5, DAWN_SKY),
        PhaseConfig("Morning", 7, DAY_SKY),
        PhaseConfig("Noon", 12, DAY_SKY),
        PhaseConfig("Afternoon", 15, DAY_SKY),
        PhaseConfig("Dusk", 18, DUSK_SKY),
        PhaseConfig("Night", 20, NIGHT_SKY),
    ]


def build_village_scene(config: VillageConfig) -> Scene:
    """Build the village scene objects.

    Args:
        config: Village configuration.

    Returns:
        Scene with a market stall, lanterns, a watchman and bakery smoke.
    """
    scene = Scene(name="village")

    scene.add(SceneObject(
        name="market_stall",
        renderers=[RendererComponent("stall_frame")],
        colliders=[ColliderComponent("stall_counter")],
        children=[
            SceneObject(name="awning", renderers=[RendererComponent("awning_cloth")]),
            SceneObject(name="produce", renderers=[RendererComponent("produce_crates")]),
        ],
    ))

    scene.add(SceneObject(
        name="street_lanterns",
        children=[
            SceneObject(
                name=f"lantern_{i}",
                renderers=[RendererComponent(f"lantern_{i}_glow")],
                colliders=[ColliderComponent(f"lantern_{i}_post")],
            )
            for i in range(config.lantern_count)
        ],
    ))

    scene.add(SceneObject(
        name="night_watchman",
        renderers=[RendererComponent("watchman_body")],
        colliders=[ColliderComponent("watchman_capsule")],
    ))

    scene.add(SceneObject(
        name="bakery_smoke",
        renderers=[RendererComponent("chimney_smoke")],
    ))
    return scene


def create_village(config: Optional[VillageConfig] = None) -> tuple[SimulationConfig, Scene]:
    """Create a village simulation setup.

    Args:
        config: Optional village configuration.

    Returns:
        The simulation config and the scene its schedules point at.
    """
    config = config or VillageConfig()

    schedules = [
        ScheduleConfig("market_stall", *config.market_hours, preserve_colliders=True),
        ScheduleConfig("street_lanterns", *config.lantern_hours, preserve_colliders=True),
        ScheduleConfig("night_watchman", *config.watch_hours, preserve_colliders=False),
        ScheduleConfig("bakery_smoke", *config.bakery_hours, preserve_colliders=True),
        *config.extra_schedules,
    ]

    sim_config = SimulationConfig(
        day_duration_seconds=config.day_duration_seconds,
        initial_hour=config.initial_hour,
        check_interval=config.check_interval,
        day_label=config.day_label,
        phases=village_phases(),
        schedules=schedules,
    )
    return sim_config.validate(), build_village_scene(config)
