"""Directional light adapter."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

import numpy as np

from chrono_world.engine.clock import light_euler_angles

if TYPE_CHECKING:
    from chrono_world.types import TickReport


def rotation_matrix(pitch: float, yaw: float, roll: float) -> np.ndarray:
    """Build a rotation matrix from Euler angles in degrees.

    Roll about Z is applied first, then pitch about X, then yaw about Y.

    Returns:
        3x3 rotation matrix.
    """
    x, y, z = (math.radians(a) for a in (pitch, yaw, roll))
    cx, sx = math.cos(x), math.sin(x)
    cy, sy = math.cos(y), math.sin(y)
    cz, sz = math.cos(z), math.sin(z)

    rot_x = np.array([[1.0, 0.0, 0.0], [0.0, cx, -sx], [0.0, sx, cx]])
    rot_y = np.array([[cy, 0.0, sy], [0.0, 1.0, 0.0], [-sy, 0.0, cy]])
    rot_z = np.array([[cz, -sz, 0.0], [sz, cz, 0.0], [0.0, 0.0, 1.0]])
    return rot_y @ rot_x @ rot_z


class LightingAdapter:
    """Applies the time of day to a directional light."""

    FORWARD = np.array([0.0, 0.0, 1.0])

    def __init__(self):
        """Initialize the adapter with the light pointing at the horizon."""
        self.euler_angles: tuple[float, float, float] = light_euler_angles(0.25)
        self.rotation = rotation_matrix(*self.euler_angles)

    def apply(self, report: TickReport) -> None:
        """Rotate the light for the report's time of day.

        Args:
            report: The tick report.
        """
        self.euler_angles = report.snapshot.light_rotation
        self.rotation = rotation_matrix(*self.euler_angles)

    @property
    def direction(self) -> np.ndarray:
        """Unit vector the light shines along."""
        return self.rotation @ self.FORWARD

    @property
    def intensity(self) -> float:
        """Light strength, 1 with the sun overhead and 0 below the horizon."""
        return float(np.clip(-self.direction[1], 0.0, 1.0))

    @property
    def elevation(self) -> float:
        """Sun elevation above the horizon in degrees."""
        return float(np.degrees(np.arcsin(np.clip(-self.direction[1], -1.0, 1.0))))
