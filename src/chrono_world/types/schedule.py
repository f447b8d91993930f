"""Scheduled visibility types."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from chrono_world.exceptions import MissingTargetError

from .scene import ColliderComponent, RendererComponent, SceneObject
from .time import validate_hour


class TransitionKind(Enum):
    """Outcome of evaluating one entry."""

    ACTIVATE = "activate"
    DEACTIVATE = "deactivate"
    NONE = "none"


class MaterializationStrategy(Enum):
    """How an entry's target is shown and hidden."""

    RENDERERS_ONLY = "renderers_only"  # colliders stay enabled
    WHOLE_OBJECT = "whole_object"


# Stable index of an entry inside a ScheduleEngine.
EntryHandle = int


@dataclass
class ScheduledEntry:
    """A scene object that should only exist between two hours."""

    name: str
    target: Optional[SceneObject]
    appear_hour: int
    disappear_hour: int
    preserve_colliders: bool = True
    # Written only by ScheduleEngine.
    active: bool = field(default=False, init=False)
    initialized: bool = field(default=False, init=False)
    renderers: tuple[RendererComponent, ...] = field(default=(), init=False, repr=False)
    colliders: tuple[ColliderComponent, ...] = field(default=(), init=False, repr=False)

    def __post_init__(self) -> None:
        validate_hour(self.appear_hour, f"Schedule '{self.name}' appear_hour")
        validate_hour(self.disappear_hour, f"Schedule '{self.name}' disappear_hour")

    @property
    def strategy(self) -> MaterializationStrategy:
        """Materialization strategy chosen by ``preserve_colliders``."""
        if self.preserve_colliders:
            return MaterializationStrategy.RENDERERS_ONLY
        return MaterializationStrategy.WHOLE_OBJECT

    @property
    def has_target(self) -> bool:
        """Whether the target exists and has not been destroyed."""
        return self.target is not None and self.target.is_valid

    def require_target(self) -> SceneObject:
        """Get the target, failing if it is gone.

        Raises:
            MissingTargetError: If the target is absent or destroyed.
        """
        if not self.has_target:
            raise MissingTargetError(self.name)
        return self.target

    def initialize_components(self) -> bool:
        """Discover renderer and collider handles under the target.

        Runs at most once; later calls are no-ops until ``initialized`` is
        cleared.

        Returns:
            True if discovery ran on this call.
        """
        if self.initialized or not self.has_target:
            return False
        self.renderers = tuple(self.target.renderers_in_children())
        self.colliders = tuple(self.target.colliders_in_children())
        self.initialized = True
        return True

    def describe(self) -> str:
        """Short human-readable summary."""
        return f"{self.name}: {self.appear_hour}h-{self.disappear_hour}h (Active: {self.active})"


@dataclass(frozen=True)
class Transition:
    """Result of evaluating one entry for one hour.

    Carries everything an adapter needs to materialize the change, so
    adapters never reach back into the engine.
    """

    handle: EntryHandle
    name: str
    kind: TransitionKind
    strategy: MaterializationStrategy
    target: Optional[SceneObject] = field(default=None, compare=False, repr=False)
    renderers: tuple[RendererComponent, ...] = field(default=(), compare=False, repr=False)
    skipped: bool = False

    @property
    def changed(self) -> bool:
        """Whether this transition requires a toggle."""
        return self.kind is not TransitionKind.NONE
