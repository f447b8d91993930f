"""Phase table types: skybox materials, phase entries and blend state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .time import validate_hour

# Shader whose materials fade between two sky looks.
TRANSITION_SHADER = "Custom/SkyboxTransition"
DEFAULT_SHADER = "Skybox/Procedural"

UNKNOWN_PHASE = "Unknown Phase"


@dataclass(frozen=True)
class SkyboxMaterial:
    """Environment descriptor attached to a phase.

    The core only reads ``blend_capable``; everything else is for the
    skybox adapter.
    """

    name: str
    shader: str = DEFAULT_SHADER
    zenith_color: tuple[int, int, int] = (40, 90, 200)
    horizon_color: tuple[int, int, int] = (170, 200, 240)
    # Colours a transition material fades toward as its factor goes to 1.
    transition_zenith_color: Optional[tuple[int, int, int]] = None
    transition_horizon_color: Optional[tuple[int, int, int]] = None

    @property
    def blend_capable(self) -> bool:
        """Whether this material uses the transition shader."""
        return self.shader == TRANSITION_SHADER

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        data = {
            "name": self.name,
            "shader": self.shader,
            "zenith_color": list(self.zenith_color),
            "horizon_color": list(self.horizon_color),
        }
        if self.transition_zenith_color is not None:
            data["transition_zenith_color"] = list(self.transition_zenith_color)
        if self.transition_horizon_color is not None:
            data["transition_horizon_color"] = list(self.transition_horizon_color)
        return data


@dataclass(frozen=True)
class PhaseEntry:
    """A named phase bound to one hour of the day."""

    name: str
    hour: int
    material: Optional[SkyboxMaterial] = None

    def __post_init__(self) -> None:
        validate_hour(self.hour, f"Phase '{self.name}' hour")

    @property
    def blend_capable(self) -> bool:
        """Whether the phase's material requests blending."""
        return self.material is not None and self.material.blend_capable


@dataclass
class BlendState:
    """Progress through the active phase's skybox transition."""

    progress: float = 0.0
    phase: Optional[PhaseEntry] = field(default=None, repr=False)

    def reset(self) -> None:
        """Return progress to the start."""
        self.progress = 0.0
