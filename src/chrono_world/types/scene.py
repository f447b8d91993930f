"""Scene object types that scheduled entries point at."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional


@dataclass
class RendererComponent:
    """A drawable part of a scene object."""

    name: str
    enabled: bool = True


@dataclass
class ColliderComponent:
    """A physical part of a scene object."""

    name: str
    enabled: bool = True


@dataclass
class SceneObject:
    """A node in the host scene hierarchy.

    Scheduled entries toggle either the renderers found under a node or the
    node's own ``active`` flag.
    """

    name: str
    renderers: list[RendererComponent] = field(default_factory=list)
    colliders: list[ColliderComponent] = field(default_factory=list)
    children: list["SceneObject"] = field(default_factory=list)
    active: bool = True
    destroyed: bool = False

    @property
    def is_valid(self) -> bool:
        """Whether the object can still be toggled."""
        return not self.destroyed

    def walk(self) -> Iterator["SceneObject"]:
        """Iterate over this object and all of its descendants, depth first."""
        yield self
        for child in self.children:
            yield from child.walk()

    def renderers_in_children(self) -> list[RendererComponent]:
        """Collect renderers on this object and every descendant."""
        return [r for node in self.walk() for r in node.renderers]

    def colliders_in_children(self) -> list[ColliderComponent]:
        """Collect colliders on this object and every descendant."""
        return [c for node in self.walk() for c in node.colliders]

    def destroy(self) -> None:
        """Mark the object as removed from the scene."""
        self.destroyed = True


@dataclass
class Scene:
    """Named collection of top-level scene objects."""

    name: str
    objects: dict[str, SceneObject] = field(default_factory=dict)

    def add(self, obj: SceneObject) -> SceneObject:
        """Add a top-level object, replacing any object with the same name."""
        self.objects[obj.name] = obj
        return obj

    def find(self, name: str) -> Optional[SceneObject]:
        """Find an object by name anywhere in the hierarchy.

        Args:
            name: Object name.

        Returns:
            The first matching object, or None.
        """
        if name in self.objects:
            return self.objects[name]
        for root in self.objects.values():
            for node in root.walk():
                if node.name == name:
                    return node
        return None
