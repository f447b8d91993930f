"""Harbor preset: fishing boats at dawn, a lighthouse beam through the night."""

from __future__ import annotations

from dataclasses import dataclass
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

SEA_NIGHT = SkyboxMaterial(name="sea_night", zenith_color=(4, 10, 30), horizon_color=(15, 35, 60))
SEA_FOG = SkyboxMaterial(
    name="sea_fog",
    shader=TRANSITION_SHADER,
    zenith_color=(90, 100, 120),
    horizon_color=(150, 160, 170),
    transition_zenith_color=(110, 160, 210),
    transition_horizon_color=(200, 220, 235),
)
SEA_DAY = SkyboxMaterial(name="sea_day", zenith_color=(50, 120, 220), horizon_color=(170, 215, 240))


@dataclass
class HarborConfig:
    """Configuration for the harbor preset."""

    day_duration_seconds: float = 120.0
    initial_hour: int = 4
    boat_hours: tuple[int, int] = (5, 14)
    beam_hours: tuple[int, int] = (19, 7)
    tavern_hours: tuple[int, int] = (18, 2)
    boat_count: int = 2


def create_harbor(config: Optional[HarborConfig] = None) -> tuple[SimulationConfig, Scene]:
    """Create a harbor simulation setup.

    Args:
        config: Optional harbor configuration.

    Returns:
        The simulation config and the scene its schedules point at.
    """
    config = config or HarborConfig()

    scene = Scene(name="harbor")
    scene.add(SceneObject(
        name="fishing_boats",
        children=[
            SceneObject(
                name=f"boat_{i}",
                renderers=[RendererComponent(f"boat_{i}_hull"), RendererComponent(f"boat_{i}_sail")],
                colliders=[ColliderComponent(f"boat_{i}_hull")],
            )
            for i in range(config.boat_count)
        ],
    ))
    scene.add(SceneObject(name="lighthouse_beam", renderers=[RendererComponent("beam_cone")]))
    scene.add(SceneObject(
        name="tavern_lights",
        renderers=[RendererComponent("window_glow"), RendererComponent("sign_lamp")],
    ))

    sim_config = SimulationConfig(
        day_duration_seconds=config.day_duration_seconds,
        initial_hour=config.initial_hour,
        phases=[
            PhaseConfig("Night", 0, SEA_NIGHT),
            PhaseConfig("Morning Fog", 5, SEA_FOG),
            PhaseConfig("Day", 9, SEA_DAY),
            PhaseConfig("Night", 19, SEA_NIGHT),
        ],
        schedules=[
            ScheduleConfig("fishing_boats", *config.boat_hours, preserve_colliders=True),
            ScheduleConfig("lighthouse_beam", *config.beam_hours, preserve_colliders=False),
            ScheduleConfig("tavern_lights", *config.tavern_hours, preserve_colliders=True),
        ],
    )
    return sim_config.validate(), scene
