"""
Interaction state machine (EXPLORING <-> POPUP_OPEN).

Opening a popup on an artifact is also what collects it; the found counter
only ever moves forward.
"""
from __future__ import annotations

from enum import Enum, auto
from typing import TYPE_CHECKING, Optional

from config import MSG_DISCOVERY, MSG_ALL_FOUND, MSG_MISSION_COMPLETE, MSG_EXPLORE
from explorer.debug import debug_log
from explorer.entities import Artifact

if TYPE_CHECKING:
    from explorer.state import GameState


class InteractionMode(Enum):
    EXPLORING = auto()
    POPUP_OPEN = auto()


class InteractionController:
    """Opens and closes the artifact popup."""

    def mode(self, state: GameState) -> InteractionMode:
        return InteractionMode.POPUP_OPEN if state.session.is_open else InteractionMode.EXPLORING

    def try_open(self, state: GameState, artifact: Optional[Artifact]) -> bool:
        """
        Inspect `artifact`. Returns True if the popup opened.

        Only uncollected artifacts can be inspected; anything else is a no-op.
        """
        if state.session.is_open or artifact is None or artifact.collected:
            return False

        state.session.is_open = True
        state.session.artifact = artifact

        if artifact.mark_collected():
            state.found_count += 1
            debug_log(f"Collected {artifact.artifact_id} ({state.found_count}/{state.total_artifacts})")
            if state.all_found:
                state.message = MSG_ALL_FOUND
            else:
                state.message = MSG_DISCOVERY
        debug_log(f"Popup opened: {artifact.name}")
        return True

    def close(self, state: GameState) -> bool:
        """Close the popup. Returns False (and changes nothing) if none is open."""
        if not state.session.is_open:
            return False

        state.session.clear()
        state.message = MSG_MISSION_COMPLETE if state.all_found else MSG_EXPLORE
        debug_log("Popup closed")
        return True
