"""
QA smoke runner (headless).

Plays a scripted walkthrough with a manual scheduler: hold right across the
world, inspect every artifact that becomes active, close each popup, and check
the end state (all found, mission-complete message). Returns a useful exit code.

Examples:
  python tools/qa_smoke.py
  python tools/qa_smoke.py --render --scene my_scene.json
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

# Headless pygame setup (safe for CI / no-window environments)
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

# Ensure imports work when running as `python tools/qa_smoke.py`
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from config import MSG_MISSION_COMPLETE  # noqa: E402
from explorer.content import ARTIFACT_INFO, DEFAULT_SCENE, load_scene_file  # noqa: E402
from explorer.debug import set_debug  # noqa: E402
from explorer.engine import GameEngine  # noqa: E402
from explorer.sim.scheduler import ManualScheduler  # noqa: E402
from explorer.world import WorldModel, SceneConfigError  # noqa: E402


class RecordingSink:
    """Keeps every snapshot instead of drawing it."""

    def __init__(self):
        self.frames = []

    def apply(self, snapshot):
        self.frames.append(snapshot)


def walkthrough(engine: GameEngine, scheduler: ManualScheduler, max_frames: int) -> list[str]:
    """Drive the engine to the right edge, inspecting artifacts. Returns failure strings."""
    failures: list[str] = []
    world = engine.world
    state = engine.state

    engine.start()
    scheduler.step()
    engine.key_down("d")
    frames = 0
    while frames < max_frames:
        scheduler.step()
        frames += 1
        snap = engine.render_sync.last_snapshot

        if not 0 <= state.player_x <= world.max_player_x:
            failures.append(f"frame {frames}: player_x={state.player_x} out of bounds")

        if snap.active_artifact_id and not snap.popup_visible:
            before = state.found_count
            engine.key_down("e")
            engine.key_up("e")
            scheduler.step()
            frames += 1
            snap = engine.render_sync.last_snapshot
            if not snap.popup_visible:
                failures.append(f"frame {frames}: popup did not open for {snap.active_artifact_id}")
            if state.found_count != before + 1:
                failures.append(f"frame {frames}: found_count {before} -> {state.found_count}")

            frozen_x = state.player_x
            scheduler.step(3)
            frames += 3
            if state.player_x != frozen_x:
                failures.append(f"frame {frames}: player moved while popup open")

            engine.key_down("space")
            engine.key_up("space")
            scheduler.step()
            frames += 1
            print(f"[qa_smoke] frame={frames} x={state.player_x:g} {state.found_text}")

        if state.found_count == world.total_artifacts and state.player_x >= world.max_player_x:
            break

    engine.key_up("d")
    scheduler.step()

    if state.found_count != world.total_artifacts:
        failures.append(f"found {state.found_count} of {world.total_artifacts} artifacts")
    if state.message != MSG_MISSION_COMPLETE:
        failures.append(f"final message was {state.message!r}")
    return failures


def main() -> int:
    ap = argparse.ArgumentParser(description="Run the headless QA walkthrough")
    ap.add_argument("--scene", type=str, default=None, help="JSON scene file (default: built-in scene)")
    ap.add_argument("--max-frames", type=int, default=5000, help="frame budget for the walkthrough")
    ap.add_argument("--render", action="store_true", help="render through the pygame view (dummy video driver)")
    ap.add_argument("--debug", action="store_true", help="print engine debug log lines")
    ns = ap.parse_args()

    if ns.debug:
        set_debug(True)

    try:
        if ns.scene:
            info, markers = load_scene_file(ns.scene)
        else:
            info, markers = ARTIFACT_INFO, DEFAULT_SCENE
        world = WorldModel.from_scene(info, markers)
    except SceneConfigError as e:
        print(f"[qa_smoke] ERROR: {e}")
        return 2

    scheduler = ManualScheduler()
    sink = None if ns.render else RecordingSink()
    engine = GameEngine(world=world, scheduler=scheduler, sink=sink)

    print(f"\n[qa_smoke] === walkthrough ({world.total_artifacts} artifacts, render={ns.render}) ===")
    failures = walkthrough(engine, scheduler, ns.max_frames)
    for f in failures:
        print(f"[qa_smoke] FAIL: {f}")

    rc = 1 if failures else 0
    print("\n[qa_smoke] DONE:", "PASS" if rc == 0 else f"FAIL (rc={rc})")
    return rc


if __name__ == "__main__":
    raise SystemExit(main())
