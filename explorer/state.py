"""
Game state - the single owner of everything that changes while playing.

Systems receive a GameState and mutate it through their own methods; nothing
else in the package keeps mutable game state at module level.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from config import MSG_EXPLORE, MSG_MISSION_COMPLETE, MSG_FOUND_COUNTER
from explorer.entities import Artifact
from explorer.systems.input_state import InputState
from explorer.world import WorldModel


@dataclass(slots=True)
class InteractionSession:
    """The popup currently on screen (if any)."""

    is_open: bool = False
    artifact: Optional[Artifact] = None

    def clear(self):
        self.is_open = False
        self.artifact = None


@dataclass
class GameState:
    world: WorldModel
    player_x: float = 0
    active_artifact: Optional[Artifact] = None
    message: str = MSG_EXPLORE
    found_count: int = 0
    session: InteractionSession = field(default_factory=InteractionSession)
    input: InputState = field(default_factory=InputState)

    @classmethod
    def new(cls, world: WorldModel) -> "GameState":
        return cls(world=world, player_x=world.clamp_player_x(world.start_x))

    @property
    def total_artifacts(self) -> int:
        return self.world.total_artifacts

    @property
    def popup_open(self) -> bool:
        return self.session.is_open

    @property
    def all_found(self) -> bool:
        return self.found_count == self.total_artifacts

    @property
    def found_text(self) -> str:
        return MSG_FOUND_COUNTER.format(found=self.found_count, total=self.total_artifacts)

    def idle_message(self) -> str:
        """Prompt shown when nothing is nearby and no popup is open."""
        return MSG_MISSION_COMPLETE if self.all_found else MSG_EXPLORE
