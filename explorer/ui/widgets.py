"""
Tiny UI widgets with cached surfaces to avoid per-frame allocations.
"""

from __future__ import annotations

from dataclasses import dataclass
import pygame


@dataclass
class Panel:
    rect: pygame.Rect
    bg_rgb: tuple[int, int, int]
    border_rgb: tuple[int, int, int]
    alpha: int = 225
    border_w: int = 2

    _cache_surf: pygame.Surface | None = None
    _cache_size: tuple[int, int] = (0, 0)

    def render(self, surface: pygame.Surface):
        w, h = int(self.rect.width), int(self.rect.height)
        if w <= 0 or h <= 0:
            return
        if self._cache_surf is None or self._cache_size != (w, h):
            self._cache_surf = pygame.Surface((w, h), pygame.SRCALPHA)
            self._cache_size = (w, h)
            self._cache_surf.fill((*self.bg_rgb, int(self.alpha)))
            pygame.draw.rect(self._cache_surf, self.border_rgb, (0, 0, w, h), int(self.border_w))
        surface.blit(self._cache_surf, (int(self.rect.x), int(self.rect.y)))


@dataclass
class Button:
    """Clickable text button (hit test only; the owner decides what a click does)."""

    rect: pygame.Rect
    label: str
    bg_rgb: tuple[int, int, int]
    border_rgb: tuple[int, int, int]
    text_rgb: tuple[int, int, int]

    def hit_test(self, pos: tuple[int, int]) -> bool:
        return self.rect.collidepoint(pos)

    def render(self, surface: pygame.Surface, font: pygame.font.Font):
        pygame.draw.rect(surface, self.bg_rgb, self.rect)
        pygame.draw.rect(surface, self.border_rgb, self.rect, 2)
        text = font.render(self.label, True, self.text_rgb)
        surface.blit(text, text.get_rect(center=self.rect.center))
