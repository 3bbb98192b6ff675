"""
Pygame presentation sink.

Draws a complete frame from a FrameSnapshot: sky/backdrop (parallax), ground,
artifacts, player, HUD and (when visible) the artifact popup, then flips once.
"""
from __future__ import annotations

import pygame

from config import (
    GAME_WIDTH, GAME_HEIGHT, GAME_TITLE, GROUND_Y,
    PLAYER_WIDTH, PLAYER_HEIGHT, ARTIFACT_SIZE,
    COLOR_SKY, COLOR_SKY_FAR, COLOR_GROUND, COLOR_GROUND_EDGE, COLOR_RIVER, COLOR_ZIGGURAT,
    COLOR_PLAYER, COLOR_PLAYER_HEAD,
    COLOR_ARTIFACT, COLOR_ARTIFACT_ACTIVE, COLOR_ARTIFACT_COLLECTED,
)
from explorer.graphics.font_cache import render_text_cached
from explorer.sim.contracts import FrameSnapshot
from explorer.ui.hud import HUD
from explorer.ui.popup import ArtifactPopup
from explorer.ui.theme import UITheme
from explorer.world import WorldModel


class PygameView:
    """Owns the window surface and renders snapshots onto it."""

    def __init__(self, world: WorldModel, screen: pygame.Surface | None = None):
        self.world = world
        if screen is None:
            screen = pygame.display.set_mode((GAME_WIDTH, GAME_HEIGHT))
            pygame.display.set_caption(GAME_TITLE)
        self.screen = screen
        self.width, self.height = self.screen.get_size()
        self.theme = UITheme()
        self.hud = HUD(self.width, self.theme)
        self.popup = ArtifactPopup(self.width, self.height, self.theme)

        # Static backdrop (sky + far ziggurats) built once, scrolled at half speed.
        self._backdrop = self._build_backdrop()

    def _build_backdrop(self) -> pygame.Surface:
        far_w = int(self.world.world_width // 2 + self.width)
        surf = pygame.Surface((far_w, GROUND_Y))
        surf.fill(COLOR_SKY)
        pygame.draw.rect(surf, COLOR_SKY_FAR, (0, GROUND_Y - 90, far_w, 90))
        for base_x in range(120, far_w, 420):
            # Stepped ziggurat silhouette
            for step in range(4):
                w = 180 - step * 40
                h = 22
                x = base_x + step * 20
                y = GROUND_Y - (step + 1) * h
                pygame.draw.rect(surf, COLOR_ZIGGURAT, (x, y, w, h))
        return surf

    def apply(self, snapshot: FrameSnapshot) -> None:
        offset = int(snapshot.world_offset_x)
        screen = self.screen

        # Backdrop (parallax)
        screen.blit(self._backdrop, (offset // 2, 0))

        # Ground + river band
        pygame.draw.rect(screen, COLOR_GROUND, (0, GROUND_Y, self.width, self.height - GROUND_Y))
        pygame.draw.line(screen, COLOR_GROUND_EDGE, (0, GROUND_Y), (self.width, GROUND_Y), 3)
        pygame.draw.rect(screen, COLOR_RIVER, (0, self.height - 28, self.width, 16))

        self._render_artifacts(screen, snapshot, offset)
        self._render_player(screen, snapshot)

        self.hud.render(screen, snapshot.message, snapshot.found_text)
        if snapshot.popup_visible:
            self.popup.render(screen, snapshot.popup_title, snapshot.popup_body)

        pygame.display.flip()

    def _render_artifacts(self, screen: pygame.Surface, snapshot: FrameSnapshot, offset: int):
        half = ARTIFACT_SIZE // 2
        for artifact in self.world.artifacts:
            sx = int(artifact.x) + offset
            if sx < -ARTIFACT_SIZE or sx > self.width + ARTIFACT_SIZE:
                continue
            rect = pygame.Rect(sx - half, GROUND_Y - ARTIFACT_SIZE, ARTIFACT_SIZE, ARTIFACT_SIZE)
            if artifact.artifact_id in snapshot.collected_ids:
                color = COLOR_ARTIFACT_COLLECTED
            elif artifact.artifact_id == snapshot.active_artifact_id:
                color = COLOR_ARTIFACT_ACTIVE
            else:
                color = COLOR_ARTIFACT
            pygame.draw.rect(screen, color, rect, border_radius=4)
            pygame.draw.rect(screen, COLOR_GROUND_EDGE, rect, 2, border_radius=4)

            if artifact.artifact_id == snapshot.active_artifact_id and not snapshot.popup_visible:
                hint = render_text_cached(self.theme.body_size, "E", self.theme.accent)
                screen.blit(hint, hint.get_rect(midbottom=(sx, rect.top - 6)))

    def _render_player(self, screen: pygame.Surface, snapshot: FrameSnapshot):
        px = int(snapshot.player_screen_x)
        body = pygame.Rect(px, GROUND_Y - PLAYER_HEIGHT, PLAYER_WIDTH, PLAYER_HEIGHT)
        pygame.draw.rect(screen, COLOR_PLAYER, body.inflate(-6, -14).move(0, 7))
        pygame.draw.circle(screen, COLOR_PLAYER_HEAD, (body.centerx, body.top + 8), 8)
