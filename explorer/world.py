"""
World model - geometry constants and the artifact registry.

Built once at startup from the artifact text registry and scene markers.
Malformed startup data raises SceneConfigError here rather than surfacing per-frame.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Sequence

from config import (
    GAME_WIDTH, WORLD_WIDTH, PLAYER_WIDTH, PLAYER_SPEED,
    PLAYER_START_X, PROXIMITY_THRESHOLD,
)
from explorer.entities import Artifact


class SceneConfigError(ValueError):
    """Startup data is inconsistent (unknown artifact type, bad coordinates, bad geometry)."""


@dataclass(slots=True)
class WorldModel:
    """Static world geometry plus the artifacts placed in it (registry order)."""

    world_width: float = WORLD_WIDTH
    viewport_width: float = GAME_WIDTH
    player_width: float = PLAYER_WIDTH
    speed: float = PLAYER_SPEED
    proximity_threshold: float = PROXIMITY_THRESHOLD
    start_x: float = PLAYER_START_X
    artifacts: list[Artifact] = field(default_factory=list)

    def __post_init__(self):
        self.validate_geometry()

    def validate_geometry(self):
        if self.world_width <= 0:
            raise SceneConfigError(f"world width must be positive (got {self.world_width})")
        if self.viewport_width <= 0 or self.viewport_width > self.world_width:
            raise SceneConfigError(
                f"viewport width {self.viewport_width} must be in (0, {self.world_width}]"
            )
        if self.player_width <= 0 or self.player_width > self.world_width:
            raise SceneConfigError(
                f"player width {self.player_width} must be in (0, {self.world_width}]"
            )
        if self.speed <= 0:
            raise SceneConfigError(f"player speed must be positive (got {self.speed})")
        if self.proximity_threshold <= 0:
            raise SceneConfigError(f"proximity threshold must be positive (got {self.proximity_threshold})")

    @property
    def max_player_x(self) -> float:
        return self.world_width - self.player_width

    @property
    def max_camera_x(self) -> float:
        return self.world_width - self.viewport_width

    @property
    def total_artifacts(self) -> int:
        return len(self.artifacts)

    def clamp_player_x(self, x: float) -> float:
        """Clamp a player position into [0, world_width - player_width]."""
        return max(0, min(self.max_player_x, x))

    def get_artifact(self, artifact_id: str) -> Artifact | None:
        return next((a for a in self.artifacts if a.artifact_id == artifact_id), None)

    @classmethod
    def from_scene(
        cls,
        info: Mapping[str, Mapping[str, str]],
        markers: Sequence[Mapping],
        **geometry,
    ) -> "WorldModel":
        """
        Build the world from an artifact text registry and placed scene markers.

        Each marker needs a `type` present in `info` and a numeric world `x` inside
        [0, world_width]. Marker ids are `<type>-<n>` in placement order.
        """
        world = cls(**geometry)
        counts: dict[str, int] = {}
        for index, marker in enumerate(markers):
            type_id = str(marker.get("type", "") or "").strip()
            if not type_id:
                raise SceneConfigError(f"artifact marker #{index} has no type")
            entry = info.get(type_id)
            if entry is None:
                raise SceneConfigError(f"artifact marker #{index}: unknown artifact type '{type_id}'")
            name = entry.get("name")
            description = entry.get("description")
            if not name or not description:
                raise SceneConfigError(f"artifact type '{type_id}' is missing a name or description")

            raw_x = marker.get("x")
            if isinstance(raw_x, bool):
                raise SceneConfigError(f"artifact marker #{index} ('{type_id}') has a non-numeric x")
            try:
                x = float(raw_x)
            except (TypeError, ValueError, OverflowError):
                raise SceneConfigError(
                    f"artifact marker #{index} ('{type_id}') has a non-numeric x: {raw_x!r}"
                ) from None
            if not 0 <= x <= world.world_width:
                raise SceneConfigError(
                    f"artifact marker #{index} ('{type_id}') x={x:g} is outside the world [0, {world.world_width:g}]"
                )

            counts[type_id] = counts.get(type_id, 0) + 1
            world.artifacts.append(
                Artifact(
                    artifact_id=f"{type_id}-{counts[type_id]}",
                    type_id=type_id,
                    x=x,
                    name=str(name),
                    description=str(description),
                )
            )
        world.start_x = world.clamp_player_x(world.start_x)
        return world
