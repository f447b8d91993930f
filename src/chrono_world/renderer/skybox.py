"""Skybox adapter and sky preview rendering."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Optional

import numpy as np
from PIL import Image, ImageDraw

if TYPE_CHECKING:
    from chrono_world.types import SkyboxMaterial, TickReport

# Shown when no material has been assigned yet.
FALLBACK_ZENITH = (10, 10, 30)
FALLBACK_HORIZON = (30, 30, 60)
SUN_COLOR = (255, 236, 170)


def _lerp_color(
    a: tuple[int, int, int], b: tuple[int, int, int], t: float
) -> np.ndarray:
    """Linearly interpolate between two RGB colours."""
    t = float(np.clip(t, 0.0, 1.0))
    return np.asarray(a, dtype=np.float64) * (1.0 - t) + np.asarray(b, dtype=np.float64) * t


class SkyboxAdapter:
    """Assigns phase materials as the active skybox."""

    def __init__(self):
        """Initialize with no skybox assigned."""
        self.material: Optional[SkyboxMaterial] = None
        self.transition_factor: float = 0.0
        self.assignments: int = 0
        self._pitch: float = -90.0

    def apply(self, report: TickReport) -> None:
        """Assign the report's material and update its transition factor.

        Reports without an environment update, or whose phase has no
        material, leave the current skybox in place.

        Args:
            report: The tick report.
        """
        self._pitch = report.snapshot.light_rotation[0]
        environment = report.environment
        if environment is None or environment.material is None:
            return

        material = environment.material
        if material.blend_capable:
            self.transition_factor = environment.blend_progress
        else:
            self.transition_factor = 0.0

        if material is not self.material:
            self.material = material
            self.assignments += 1

    def current_colors(self) -> tuple[np.ndarray, np.ndarray]:
        """Zenith and horizon colours after applying the transition factor.

        Returns:
            Two float RGB arrays.
        """
        material = self.material
        if material is None:
            return np.asarray(FALLBACK_ZENITH, float), np.asarray(FALLBACK_HORIZON, float)

        zenith = np.asarray(material.zenith_color, dtype=np.float64)
        horizon = np.asarray(material.horizon_color, dtype=np.float64)
        if material.blend_capable:
            if material.transition_zenith_color is not None:
                zenith = _lerp_color(material.zenith_color, material.transition_zenith_color, self.transition_factor)
            if material.transition_horizon_color is not None:
                horizon = _lerp_color(material.horizon_color, material.transition_horizon_color, self.transition_factor)
        return zenith, horizon

    def render_sky(self, width: int = 320, height: int = 180) -> Image.Image:
        """Render a preview of the current sky.

        Args:
            width: Image width in pixels.
            height: Image height in pixels.

        Returns:
            RGB image with a zenith-to-horizon gradient and the sun, if it is up.
        """
        zenith, horizon = self.current_colors()
        t = np.linspace(0.0, 1.0, height)[:, None]
        column = zenith[None, :] * (1.0 - t) + horizon[None, :] * t
        pixels = np.repeat(column[:, None, :], width, axis=1)
        image = Image.fromarray(np.clip(pixels, 0, 255).astype(np.uint8))

        elevation = math.sin(math.radians(self._pitch))
        if elevation > 0:
            # Sun travels left to right; height follows elevation.
            azimuth = (self._pitch + 90.0) / 360.0
            sun_x = int(azimuth * width)
            sun_y = int((1.0 - elevation) * (height - 1))
            radius = max(2, height // 15)
            draw = ImageDraw.Draw(image)
            draw.ellipse(
                [sun_x - radius, sun_y - radius, sun_x + radius, sun_y + radius],
                fill=SUN_COLOR,
            )
        return image
