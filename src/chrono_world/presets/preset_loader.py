"""Preset loading and management."""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional

from chrono_world.config import SimulationConfig
from chrono_world.engine import SimulationEngine
from chrono_world.types import Scene

from .village import VillageConfig, create_village
from .harbor import HarborConfig, create_harbor

PresetFactory = Callable[[Optional[Any]], tuple[SimulationConfig, Scene]]


class PresetLoader:
    """Loads and manages named simulation presets."""

    def __init__(self):
        """Initialize the preset loader."""
        self._preset_factories: Dict[str, PresetFactory] = {
            "village": create_village,
            "harbor": create_harbor,
        }
        self._configs: Dict[str, Any] = {
            "village": VillageConfig(),
            "harbor": HarborConfig(),
        }

    @property
    def available_presets(self) -> list[str]:
        """Get list of available preset names.

        Returns:
            List of preset names.
        """
        return list(self._preset_factories.keys())

    def load(
        self,
        preset_name: str,
        config: Optional[Any] = None,
    ) -> tuple[SimulationConfig, Scene]:
        """Load a preset by name.

        Args:
            preset_name: Name of the preset to load.
            config: Optional preset configuration override.

        Returns:
            The simulation config and scene for the preset.

        Raises:
            ValueError: If preset name is not found.
        """
        if preset_name not in self._preset_factories:
            raise ValueError(
                f"Unknown preset: {preset_name}. "
                f"Available: {', '.join(self.available_presets)}"
            )

        factory = self._preset_factories[preset_name]
        return factory(config)

    def build_engine(self, preset_name: str, config: Optional[Any] = None) -> tuple[SimulationEngine, Scene]:
        """Load a preset and build its simulation engine.

        Args:
            preset_name: Name of the preset.
            config: Optional preset configuration override.

        Returns:
            The engine and the scene it drives.
        """
        sim_config, scene = self.load(preset_name, config)
        return SimulationEngine.from_config(sim_config, scene), scene

    def get_config(self, preset_name: str) -> Any:
        """Get the default configuration for a preset.

        Args:
            preset_name: Name of the preset.

        Returns:
            Preset configuration.

        Raises:
            ValueError: If preset name is not found.
        """
        if preset_name not in self._configs:
            raise ValueError(f"Unknown preset: {preset_name}")

        return self._configs[preset_name]

    def register_preset(
        self,
        name: str,
        factory: PresetFactory,
        config: Any,
    ) -> None:
        """Register a new preset.

        Args:
            name: Preset name.
            factory: Factory returning a simulation config and scene.
            config: Default configuration for the preset.
        """
        self._preset_factories[name] = factory
        self._configs[name] = config
