#!/usr/bin/env python3
"""Save a rendered sky frame for a given hour."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from chrono_world.presets import PresetLoader
from chrono_world.renderer import SkyboxAdapter


def main():
    hour = int(sys.argv[1]) if len(sys.argv) > 1 else 6
    engine, _ = PresetLoader().build_engine("village")
    skybox = SkyboxAdapter()
    engine.attach([skybox])

    engine.start()
    engine.jump_to_hour(hour)
    # Let a transition material blend part of the way
    for _ in range(15):
        engine.tick(1 / 30)

    output = Path(__file__).parent.parent / f"sky_{hour:02d}.png"
    skybox.render_sky(640, 360).save(output)
    print(f"Saved frame to {output}")
    print(engine.debug_current_time())


if __name__ == "__main__":
    main()
