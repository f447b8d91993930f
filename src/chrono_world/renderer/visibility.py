"""Scene object visibility adapter."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chrono_world.types import MaterializationStrategy, TransitionKind

if TYPE_CHECKING:
    from chrono_world.types import TickReport, Transition

logger = logging.getLogger(__name__)


class VisibilityAdapter:
    """Shows and hides scheduled scene objects."""

    def __init__(self):
        """Initialize the adapter."""
        self.applied: list[Transition] = []

    def apply(self, report: TickReport) -> None:
        """Materialize every changed transition in the report.

        Args:
            report: The tick report.
        """
        for transition in report.changes:
            self.apply_transition(transition)

    def apply_transition(self, transition: Transition) -> None:
        """Materialize one transition.

        Renderers-only transitions toggle each discovered renderer and leave
        colliders alone. Whole-object transitions toggle the object itself.

        Args:
            transition: An ACTIVATE or DEACTIVATE transition.
        """
        if transition.kind is TransitionKind.NONE:
            return
        target = transition.target
        if target is None or not target.is_valid:
            logger.warning("Cannot materialize '%s': target is missing", transition.name)
            return

        visible = transition.kind is TransitionKind.ACTIVATE
        if transition.strategy is MaterializationStrategy.RENDERERS_ONLY:
            for renderer in transition.renderers:
                renderer.enabled = visible
        else:
            target.active = visible

        self.applied.append(transition)
        logger.debug("%s %s", "Showing" if visible else "Hiding", transition.name)
