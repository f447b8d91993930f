"""Ready-made simulation setups."""

from __future__ import annotations

from .village import VillageConfig, create_village, village_phases
from .harbor import HarborConfig, create_harbor
from .preset_loader import PresetLoader

__all__ = [
    "VillageConfig",
    "create_village",
    "village_phases",
    "HarborConfig",
    "create_harbor",
    "PresetLoader",
]
