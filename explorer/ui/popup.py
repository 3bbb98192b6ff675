"""
Artifact popup - centered modal with the artifact's name, description and a close button.
"""
import pygame

from config import POPUP_WIDTH, POPUP_HEIGHT
from explorer.graphics.font_cache import clip_lines, get_font, render_text_cached, wrap_text
from explorer.ui.theme import UITheme
from explorer.ui.widgets import Panel, Button


class ArtifactPopup:
    """Draws the popup; the engine asks it whether a click hit the close button."""

    def __init__(self, screen_width: int, screen_height: int, theme: UITheme | None = None):
        self.theme = theme or UITheme()
        self.rect = pygame.Rect(0, 0, POPUP_WIDTH, POPUP_HEIGHT)
        self.rect.center = (screen_width // 2, screen_height // 2)
        self.panel = Panel(
            rect=self.rect,
            bg_rgb=self.theme.panel_bg,
            border_rgb=self.theme.accent,
            alpha=245,
            border_w=3,
        )
        self._backdrop = pygame.Surface((screen_width, screen_height), pygame.SRCALPHA)
        self._backdrop.fill((0, 0, 0, self.theme.backdrop_alpha))

        btn_w, btn_h = 150, 34
        self.close_button = Button(
            rect=pygame.Rect(
                self.rect.centerx - btn_w // 2,
                self.rect.bottom - btn_h - self.theme.popup_pad,
                btn_w,
                btn_h,
            ),
            label="Close (Space)",
            bg_rgb=self.theme.panel_border,
            border_rgb=self.theme.accent,
            text_rgb=self.theme.text,
        )
        self._body_key = None
        self._body_lines = []

    def hit_close(self, pos) -> bool:
        return self.close_button.hit_test(pos)

    def render(self, surface: pygame.Surface, title: str, body: str):
        t = self.theme
        surface.blit(self._backdrop, (0, 0))
        self.panel.render(surface)

        x = self.rect.x + t.popup_pad
        y = self.rect.y + t.popup_pad
        title_surf = render_text_cached(t.title_size, title, t.accent)
        surface.blit(title_surf, (x, y))
        y += title_surf.get_height() + 8

        max_width = self.rect.width - t.popup_pad * 2
        font = get_font(t.body_size)
        line_h = font.get_linesize()
        if self._body_key != body:
            self._body_key = body
            max_lines = (self.close_button.rect.top - 6 - y) // line_h
            self._body_lines = clip_lines(font, wrap_text(font, body, max_width), max_lines, max_width)
        for line in self._body_lines:
            surface.blit(render_text_cached(t.body_size, line, t.dim), (x, y))
            y += line_h

        self.close_button.render(surface, get_font(t.small_size))
