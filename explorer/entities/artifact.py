"""
Artifact entity - a fixed, inspectable world object.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Artifact:
    """An artifact placed in the world. Only `collected` changes after startup."""

    artifact_id: str
    type_id: str
    x: float
    name: str
    description: str
    collected: bool = False

    def distance_to(self, x: float) -> float:
        """Horizontal distance from a world X position."""
        return abs(float(x) - float(self.x))

    def mark_collected(self) -> bool:
        """Flip to collected. Returns True only on the first call."""
        if self.collected:
            return False
        self.collected = True
        return True
