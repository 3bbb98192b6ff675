"""
Thin, stable data contracts between the game loop and presentation.

FrameSnapshot is built in full before anything is drawn, so a sink only ever
sees a consistent frame.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any


@dataclass(frozen=True, slots=True)
class FrameSnapshot:
    """Everything the presentation layer needs for one frame."""

    player_world_x: float
    player_screen_x: float
    world_offset_x: float
    message: str
    popup_visible: bool
    popup_title: str
    popup_body: str
    found_text: str
    active_artifact_id: str | None = None
    collected_ids: frozenset[str] = frozenset()

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        d["collected_ids"] = sorted(self.collected_ids)
        return d
