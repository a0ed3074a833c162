#!/usr/bin/env python3
"""Run a demo of animat in headless mode."""

import argparse
import sys
from pathlib import Path

# Add src to path for running directly
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from animat.engine import AnimationState, AnimationSystem, Grid
from animat.renderer import HeadlessRenderer
from animat.utils import setup_logging


class DemoAtlas:
    """Stand-in for a loaded 8x4 sprite sheet of 32x32 frames."""

    width = 256
    height = 128


def print_frame(tick, system, renderer):
    """Print the animations and draw calls for one tick."""
    print(f"\n[tick {tick}]")
    for name in system.names:
        print(f"  {name}: {system.get(name)!r}")
    for line in renderer.get_summary().splitlines():
        print(f"  draw {line}")


def run_demo(ticks: int, dt: float):
    """Animate a walking and an idle sprite for a number of ticks."""
    atlas = DemoAtlas()
    grid = Grid.for_atlas(atlas, 8, 4)

    system = AnimationSystem(max_dt=0.25)
    walk = system.add("walk", AnimationState(grid.frames("1-8", 1), interval=0.08))
    idle = system.add("idle", AnimationState(grid.frames("1-4", "3-4"), interval=0.2))
    mirrored = system.add("walk_left", walk.clone())
    mirrored.set_flip_horizontal(True)

    renderer = HeadlessRenderer()
    print("animat demo")
    print("=" * 60)

    for tick in range(ticks):
        system.update(dt)
        renderer.clear()
        walk.draw(renderer, atlas, 40, 100)
        mirrored.draw(renderer, atlas, 120, 100)
        idle.draw(renderer, atlas, 200, 100, scale_x=2, scale_y=2)
        print_frame(tick, system, renderer)

        if tick == ticks // 2:
            idle.pause()
            walk.set_speed(2.0)
            print("\n[idle paused, walk at double speed]")


def main():
    parser = argparse.ArgumentParser(description="Run the animat headless demo")
    parser.add_argument("--ticks", type=int, default=10, help="Number of ticks")
    parser.add_argument("--dt", type=float, default=1 / 30, help="Seconds per tick")
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    args = parser.parse_args()

    setup_logging(args.log_level)
    run_demo(args.ticks, args.dt)


if __name__ == "__main__":
    main()
