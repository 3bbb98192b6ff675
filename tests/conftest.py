from __future__ import annotations

import os

# Headless pygame for any test that touches the display.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest  # noqa: E402

from explorer.content import ARTIFACT_INFO  # noqa: E402
from explorer.engine import GameEngine  # noqa: E402
from explorer.sim.scheduler import ManualScheduler  # noqa: E402
from explorer.state import GameState  # noqa: E402
from explorer.world import WorldModel  # noqa: E402


class RecordingSink:
    def __init__(self) -> None:
        self.frames = []

    def apply(self, snapshot) -> None:
        self.frames.append(snapshot)


def make_world(xs=(100, 500, 900), **geometry) -> WorldModel:
    types = list(ARTIFACT_INFO)
    markers = [{"type": types[i % len(types)], "x": x} for i, x in enumerate(xs)]
    return WorldModel.from_scene(ARTIFACT_INFO, markers, **geometry)


@pytest.fixture
def world() -> WorldModel:
    return make_world()


@pytest.fixture
def state(world: WorldModel) -> GameState:
    return GameState.new(world)


@pytest.fixture
def headless():
    """(engine, scheduler, sink) wired without a window."""
    scheduler = ManualScheduler()
    sink = RecordingSink()
    engine = GameEngine(world=make_world(), scheduler=scheduler, sink=sink)
    engine.start()
    return engine, scheduler, sink


@pytest.fixture
def world_factory():
    return make_world
