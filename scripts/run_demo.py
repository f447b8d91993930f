#!/usr/bin/env python3
"""Run an accelerated day/night demo in headless mode."""

import asyncio
import sys
from pathlib import Path

# Add src to path for running directly
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from chrono_world.app import GameLoop
from chrono_world.logging_config import configure_logging
from chrono_world.presets import PresetLoader
from chrono_world.renderer import (
    HeadlessRenderer,
    LightingAdapter,
    SkyboxAdapter,
    TimeUIAdapter,
    VisibilityAdapter,
)


def print_state(engine, renderer, ui, lighting, skybox):
    """Print current simulation state."""
    state = engine.get_state()
    print("\n" + "=" * 60)
    print(f"{ui.day_text}  {ui.week_text}  {ui.time_text}  ({ui.phase_text})")
    print(f"Fraction: {state.fraction:.3f}  Blend: {state.blend_progress:.2f}")
    print(f"Sun elevation: {lighting.elevation:.1f} deg  Intensity: {lighting.intensity:.2f}")
    print(f"Skybox: {skybox.material.name if skybox.material else '-'}")
    print()
    print("Screen Preview:")
    print("-" * 40)
    for line in renderer.get_screen_string().split("\n")[:10]:
        print(line)
    print("-" * 40)


async def run_demo(preset: str, seconds: float, fps: int, report_every: float):
    """Run the demo.

    Args:
        preset: Preset name.
        seconds: Real seconds to simulate.
        fps: Simulated frames per second.
        report_every: Real seconds between printed reports.
    """
    print("Chrono World Demo")
    print("=" * 60)

    engine, scene = PresetLoader().build_engine(preset)
    renderer = HeadlessRenderer(width=60, height=16)
    ui = TimeUIAdapter()
    lighting = LightingAdapter()
    skybox = SkyboxAdapter()
    engine.attach([ui, lighting, skybox, VisibilityAdapter()])

    loop = GameLoop(engine=engine, renderer=renderer, target_fps=fps)
    loop.start()
    print(f"\n[Preset '{scene.name}' started]")
    print(engine.debug_current_time())

    dt = 1.0 / fps
    elapsed = 0.0
    next_report = 0.0
    while elapsed < seconds:
        loop.tick(dt)
        elapsed += dt
        if elapsed >= next_report:
            print_state(engine, renderer, ui, lighting, skybox)
            next_report += report_every
        await asyncio.sleep(0)

    print("\n" + "=" * 60)
    print("Demo Complete!")
    final = engine.dump_state()
    print(f"  - Day: {final['day']}  Week: {final['week']}")
    for schedule in final["schedules"]:
        print(
            f"  - {schedule['name']}: {schedule['appear_hour']}h-{schedule['disappear_hour']}h "
            f"active={schedule['is_active']}"
        )


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Chrono World headless demo")
    parser.add_argument(
        "--preset",
        default="village",
        help="Preset to run (default: village)",
    )
    parser.add_argument(
        "--seconds",
        type=float,
        default=480.0,
        help="Simulated real seconds (default: 480)",
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=30,
        help="Simulated frames per second (default: 30)",
    )
    parser.add_argument(
        "--report-every",
        type=float,
        default=30.0,
        help="Seconds between printed reports (default: 30)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: CHRONO_WORLD_LOG_LEVEL or INFO)",
    )

    args = parser.parse_args()
    configure_logging(level=args.log_level)

    asyncio.run(run_demo(args.preset, args.seconds, args.fps, args.report_every))


if __name__ == "__main__":
    main()
