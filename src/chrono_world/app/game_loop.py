"""Game loop for coordinating the simulation and renderer."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chrono_world.engine import SimulationEngine
    from chrono_world.renderer.headless import HeadlessRenderer


class GameLoop:
    """Host frame loop that feeds real elapsed time to the simulation."""

    def __init__(
        self,
        engine: SimulationEngine,
        renderer: HeadlessRenderer,
        target_fps: int = 30,
        max_frame_time: float = 0.25,
    ):
        """Initialize the game loop.

        Args:
            engine: The simulation engine.
            renderer: The renderer.
            target_fps: Target frames per second.
            max_frame_time: Longest real step passed to a single tick.
        """
        self.engine = engine
        self.renderer = renderer
        self.target_fps = target_fps
        self.target_frame_time = 1.0 / target_fps
        self.max_frame_time = max_frame_time

        self._running = False
        self._last_time = 0.0
        self._frame_count = 0
        self._fps = 0.0
        self._fps_update_time = 0.0

    def tick(self, dt: float) -> None:
        """Process a single frame.

        Args:
            dt: Delta time in seconds.
        """
        self.engine.tick(dt)
        self.renderer.render_frame(self.engine.get_state())

        # Track FPS
        self._frame_count += 1
        self._fps_update_time += dt
        if self._fps_update_time >= 1.0:
            self._fps = self._frame_count / self._fps_update_time
            self._frame_count = 0
            self._fps_update_time = 0.0

    def start(self) -> None:
        """Start the game loop, hiding scheduled objects before the first frame."""
        if not self.engine.started:
            self.engine.start()
        self._running = True
        self._last_time = time.perf_counter()

    def stop(self) -> None:
        """Stop the game loop."""
        self._running = False

    @property
    def is_running(self) -> bool:
        """Check if loop is running.

        Returns:
            True if running.
        """
        return self._running

    @property
    def fps(self) -> float:
        """Get current FPS.

        Returns:
            Current frames per second.
        """
        return self._fps

    def process_frame(self) -> float:
        """Process a single frame with timing.

        Returns:
            Delta time passed to the simulation.
        """
        current_time = time.perf_counter()
        dt = current_time - self._last_time
        self._last_time = current_time

        # Cap delta time to prevent spiral of death
        if dt > self.max_frame_time:
            dt = self.max_frame_time

        self.tick(dt)

        return dt

    async def run_async(self, max_frames: int | None = None) -> None:
        """Run the game loop asynchronously.

        Args:
            max_frames: Stop after this many frames. None runs until ``stop``.
        """
        import asyncio

        self.start()
        frames = 0
        while self._running:
            frame_start = time.perf_counter()

            self.process_frame()
            frames += 1
            if max_frames is not None and frames >= max_frames:
                self.stop()
                break

            # Calculate sleep time to maintain target FPS
            frame_time = time.perf_counter() - frame_start
            sleep_time = max(0, self.target_frame_time - frame_time)

            if sleep_time > 0:
                await asyncio.sleep(sleep_time)
