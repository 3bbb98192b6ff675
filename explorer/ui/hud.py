"""
Heads-up display: status message and found counter.
"""
import pygame

from explorer.graphics.font_cache import get_font, render_text_cached, wrap_text
from explorer.ui.theme import UITheme
from explorer.ui.widgets import Panel


class HUD:
    """Top bar with the status message (left) and the found counter (right)."""

    def __init__(self, screen_width: int, theme: UITheme | None = None):
        self.screen_width = screen_width
        self.theme = theme or UITheme()
        self.panel = Panel(
            rect=pygame.Rect(0, 0, screen_width, self.theme.hud_bar_h),
            bg_rgb=self.theme.panel_bg,
            border_rgb=self.theme.panel_border,
            alpha=self.theme.panel_alpha,
        )
        # Message wrap is cached by text; messages change only on state transitions.
        self._message_text = None
        self._message_lines = []

    def _lines_for(self, message: str, max_width: int) -> list:
        if message != self._message_text:
            self._message_text = message
            self._message_lines = wrap_text(get_font(self.theme.small_size), message, max_width)
        return self._message_lines

    def render(self, surface: pygame.Surface, message: str, found_text: str):
        t = self.theme
        self.panel.render(surface)

        counter = render_text_cached(t.small_size, found_text, t.accent)
        counter_x = self.screen_width - counter.get_width() - t.margin
        surface.blit(counter, (counter_x, (t.hud_bar_h - counter.get_height()) // 2))

        max_width = counter_x - t.margin * 3
        lines = self._lines_for(message, max_width)
        line_h = get_font(t.small_size).get_linesize()
        y = max(4, (t.hud_bar_h - line_h * len(lines)) // 2)
        for line in lines:
            surface.blit(render_text_cached(t.small_size, line, t.text), (t.margin, y))
            y += line_h
