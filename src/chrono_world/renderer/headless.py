"""Headless renderer for testing."""

from __future__ import annotations

import math
import time
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from chrono_world.types import EntryStatus, SimulationSnapshot


class HeadlessRenderer:
    """A headless renderer that creates an ASCII view of the simulation.

    Used for testing and demo environments.
    """

    HUD_HEIGHT = 3

    def __init__(self, width: int = 60, height: int = 16, day_label: Optional[str] = None):
        """Initialize the headless renderer.

        Args:
            width: Screen width in characters.
            height: Screen height in characters.
            day_label: Prefix for the day counter. None uses the label carried
                by each snapshot.
        """
        self.day_label = day_label
        self.width = width
        self.height = height
        self.screen: list[list[str]] = [[" " for _ in range(width)] for _ in range(height)]
        self.last_render_time: float = 0.0
        self.rendered_entries: dict[str, bool] = {}
        self._render_count = 0

    @property
    def render_count(self) -> int:
        """Number of frames rendered."""
        return self._render_count

    def clear(self) -> None:
        """Clear the screen buffer."""
        self.screen = [[" " for _ in range(self.width)] for _ in range(self.height)]
        self.rendered_entries.clear()

    def render_frame(self, snapshot: SimulationSnapshot) -> None:
        """Render a complete frame.

        Args:
            snapshot: The simulation snapshot to render.
        """
        self.clear()
        start_time = time.perf_counter()

        self._render_hud(snapshot)
        self._render_sky(snapshot)

        for row, entry in enumerate(snapshot.entries, start=self.HUD_HEIGHT):
            if row >= self.height:
                break
            self._render_entry(row, entry)

        self.last_render_time = time.perf_counter() - start_time
        self._render_count += 1

    def _render_hud(self, snapshot: SimulationSnapshot) -> None:
        """Render time, calendar and phase."""
        self.draw_text(1, 0, f"{self.day_label or snapshot.day_label} {snapshot.day}", (255, 255, 255))
        self.draw_text(10, 0, f"Week {snapshot.week}", (200, 200, 200))
        self.draw_text(20, 0, snapshot.time_text, (255, 200, 100))
        self.draw_text(28, 0, snapshot.phase_name, (150, 200, 255))
        if snapshot.blend_progress > 0:
            self.draw_text(self.width - 6, 0, f"{int(snapshot.blend_progress * 100):3d}%", (200, 200, 200))
        self.screen[2] = list("─" * self.width)

    def _render_sky(self, snapshot: SimulationSnapshot) -> None:
        """Render one row of sky with the sun or stars."""
        pitch = snapshot.light_rotation[0]
        elevation = math.sin(math.radians(pitch))

        if elevation > 0.2:
            fill = " "
        elif elevation > -0.2:
            fill = "~"
        else:
            fill = "·"
        for x in range(self.width):
            if fill == "·":
                self.screen[1][x] = "*" if (x * 7) % 11 == 0 else ("·" if x % 5 == 0 else " ")
            else:
                self.screen[1][x] = fill

        if elevation > 0:
            sun_x = int((pitch + 90.0) / 360.0 * self.width)
            if 0 <= sun_x < self.width:
                self.screen[1][sun_x] = "O"

    def _render_entry(self, row: int, entry: EntryStatus) -> None:
        """Render one scheduled entry line."""
        if not entry.has_target:
            marker = "[!]"
        elif entry.active:
            marker = "[x]"
        else:
            marker = "[ ]"
        self.rendered_entries[entry.name] = entry.active
        line = f"{marker} {entry.name} {entry.appear_hour}h-{entry.disappear_hour}h"
        self.draw_text(1, row, line, (255, 255, 255))

    def draw_text(
        self,
        x: int,
        y: int,
        text: str,
        color: tuple[int, int, int],
    ) -> None:
        """Draw text at screen position."""
        if y < 0 or y >= self.height:
            return

        for i, char in enumerate(text):
            px = x + i
            if 0 <= px < self.width:
                self.screen[y][px] = char

    def get_screen_string(self) -> str:
        """Get the screen as a string."""
        return "\n".join("".join(row) for row in self.screen)
