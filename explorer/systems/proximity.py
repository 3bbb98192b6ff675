"""
Proximity detection - which artifact (if any) the player can inspect right now.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Optional

from config import MSG_NEARBY
from explorer.entities import Artifact

if TYPE_CHECKING:
    from explorer.state import GameState


def find_nearest(artifacts: Iterable[Artifact], x: float, threshold: float) -> Optional[Artifact]:
    """
    Nearest uncollected artifact strictly closer than `threshold`.

    Ties go to the first artifact in iteration order.
    """
    closest = None
    min_distance = threshold
    for artifact in artifacts:
        if artifact.collected:
            continue
        dx = artifact.distance_to(x)
        if dx < min_distance:
            min_distance = dx
            closest = artifact
    return closest


class ProximityDetector:
    """Runs every frame; updates the active artifact and status message."""

    def scan(self, state: GameState) -> Optional[Artifact]:
        closest = find_nearest(state.world.artifacts, state.player_x, state.world.proximity_threshold)
        # Popup open: state is paused, keep the message and active artifact as they are.
        if state.session.is_open:
            return closest

        state.active_artifact = closest
        if closest is not None:
            state.message = MSG_NEARBY.format(name=closest.name)
        else:
            state.message = state.idle_message()
        return closest
