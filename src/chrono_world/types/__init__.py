"""Type definitions for Chrono World."""

from .time import (
    HOURS_PER_DAY,
    MIN_HOUR,
    MAX_HOUR,
    clamp_hour,
    validate_hour,
    format_hour,
)
from .scene import (
    RendererComponent,
    ColliderComponent,
    SceneObject,
    Scene,
)
from .phases import (
    SkyboxMaterial,
    PhaseEntry,
    BlendState,
    TRANSITION_SHADER,
    DEFAULT_SHADER,
    UNKNOWN_PHASE,
)
from .schedule import (
    ScheduledEntry,
    Transition,
    TransitionKind,
    MaterializationStrategy,
    EntryHandle,
)
from .world import (
    EntryStatus,
    SimulationSnapshot,
    EnvironmentUpdate,
    TickReport,
)

__all__ = [
    # Time
    "HOURS_PER_DAY",
    "MIN_HOUR",
    "MAX_HOUR",
    "clamp_hour",
    "validate_hour",
    "format_hour",
    # Scene
    "RendererComponent",
    "ColliderComponent",
    "SceneObject",
    "Scene",
    # Phases
    "SkyboxMaterial",
    "PhaseEntry",
    "BlendState",
    "TRANSITION_SHADER",
    "DEFAULT_SHADER",
    "UNKNOWN_PHASE",
    # Schedule
    "ScheduledEntry",
    "Transition",
    "TransitionKind",
    "MaterializationStrategy",
    "EntryHandle",
    # World
    "EntryStatus",
    "SimulationSnapshot",
    "EnvironmentUpdate",
    "TickReport",
]
