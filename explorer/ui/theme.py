"""
UI theme primitives.

A small, centralized place for HUD/popup sizing and colors.
"""

from __future__ import annotations

from dataclasses import dataclass

from config import COLOR_UI_BG, COLOR_UI_BORDER, COLOR_WHITE, COLOR_GOLD, HUD_BAR_HEIGHT


@dataclass(slots=True)
class UITheme:
    # Layout
    hud_bar_h: int = HUD_BAR_HEIGHT
    margin: int = 10
    popup_pad: int = 18

    # Colors
    panel_bg: tuple[int, int, int] = COLOR_UI_BG
    panel_border: tuple[int, int, int] = COLOR_UI_BORDER
    text: tuple[int, int, int] = COLOR_WHITE
    accent: tuple[int, int, int] = COLOR_GOLD
    dim: tuple[int, int, int] = (200, 190, 170)

    # Alpha (panel fill)
    panel_alpha: int = 225
    backdrop_alpha: int = 140

    # Font sizes
    title_size: int = 34
    body_size: int = 22
    small_size: int = 20
