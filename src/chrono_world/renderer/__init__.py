"""Presentation adapters for Chrono World."""

from __future__ import annotations

from .headless import HeadlessRenderer
from .lighting import LightingAdapter, rotation_matrix
from .skybox import SkyboxAdapter
from .time_ui import TimeUIAdapter
from .visibility import VisibilityAdapter

__all__ = [
    "HeadlessRenderer",
    "LightingAdapter",
    "rotation_matrix",
    "SkyboxAdapter",
    "TimeUIAdapter",
    "VisibilityAdapter",
]
