"""
Player movement and camera follow.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from explorer.world import WorldModel

if TYPE_CHECKING:
    from explorer.state import GameState


def camera_offset(world: WorldModel, player_x: float) -> float:
    """Camera keeps the player roughly centered, never showing past the world edges."""
    camera_x = player_x - world.viewport_width / 2
    return max(0, min(world.max_camera_x, camera_x))


class MovementController:
    """Advances the player one frame from the held keys."""

    def step(self, state: GameState) -> float:
        """
        Move the player (unless a popup is open) and return the camera offset.

        Left subtracts and right adds independently, so holding both is a no-op.
        """
        if not state.session.is_open:
            world = state.world
            x = state.player_x
            if state.input.moving_left:
                x -= world.speed
            if state.input.moving_right:
                x += world.speed
            state.player_x = world.clamp_player_x(x)
        return camera_offset(state.world, state.player_x)
