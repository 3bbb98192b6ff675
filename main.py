"""
Mesopotamia Explorer - walk through ancient Mesopotamia and discover the
inventions that shaped the modern world.

Usage:
    python main.py [--scene <scene.json>] [--fps <n>] [--debug]
"""
import sys
import argparse

from config import FPS, GAME_TITLE
from explorer.content import ARTIFACT_INFO, DEFAULT_SCENE, load_scene_file
from explorer.debug import set_debug
from explorer.engine import GameEngine
from explorer.sim.scheduler import ClockScheduler
from explorer.world import WorldModel, SceneConfigError


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Mesopotamia Explorer - a side-scrolling artifact discovery game"
    )
    parser.add_argument(
        "--scene",
        type=str,
        default=None,
        help="JSON scene file with artifact placements (default: built-in scene)"
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=FPS,
        help=f"Target frame rate (default: {FPS})"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print debug log lines to the console"
    )
    return parser.parse_args(argv)


def build_world(scene_path=None) -> WorldModel:
    """Load the artifact registry + markers and build the world (fails fast on bad data)."""
    if scene_path:
        info, markers = load_scene_file(scene_path)
    else:
        info, markers = ARTIFACT_INFO, DEFAULT_SCENE
    return WorldModel.from_scene(info, markers)


def main(argv=None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    if args.debug:
        set_debug(True)

    print("=" * 50)
    print(f"  {GAME_TITLE}")
    print("=" * 50)
    print()

    try:
        world = build_world(args.scene)
    except SceneConfigError as e:
        print(f"Scene configuration error: {e}", file=sys.stderr)
        return 2

    print(f"Artifacts to find: {world.total_artifacts}")
    print()
    print("Controls:")
    print("  Left/Right or A/D  - Move")
    print("  E                  - Inspect a nearby artifact")
    print("  Space/Enter/Esc    - Close the artifact popup")
    print("  Close window       - Quit")
    print()
    print("Starting game...")
    print()

    game = GameEngine(world=world, scheduler=ClockScheduler(args.fps))
    game.run()

    print("Thanks for playing!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
