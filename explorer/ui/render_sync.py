"""
RenderSync - maps game state onto the presentation layer once per frame.
"""
from __future__ import annotations

from typing import Protocol

from explorer.sim.contracts import FrameSnapshot
from explorer.state import GameState


class RenderSink(Protocol):
    def apply(self, snapshot: FrameSnapshot) -> None:
        """Present one complete frame."""


def build_snapshot(state: GameState, camera_x: float) -> FrameSnapshot:
    session = state.session
    artifact = session.artifact if session.is_open else None
    active = state.active_artifact
    return FrameSnapshot(
        player_world_x=state.player_x,
        player_screen_x=state.player_x - camera_x,
        world_offset_x=-camera_x,
        message=state.message,
        popup_visible=session.is_open,
        popup_title=artifact.name if artifact else "",
        popup_body=artifact.description if artifact else "",
        found_text=state.found_text,
        active_artifact_id=active.artifact_id if active else None,
        collected_ids=frozenset(a.artifact_id for a in state.world.artifacts if a.collected),
    )


class RenderSync:
    """Builds the frame snapshot, then hands it to the sink in one call."""

    def __init__(self, sink: RenderSink):
        self.sink = sink
        self.last_snapshot: FrameSnapshot | None = None

    def sync(self, state: GameState, camera_x: float) -> FrameSnapshot:
        snapshot = build_snapshot(state, camera_x)
        self.sink.apply(snapshot)
        self.last_snapshot = snapshot
        return snapshot
