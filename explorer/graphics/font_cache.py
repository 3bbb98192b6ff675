"""
Lightweight pygame font + text cache.

Fonts are created once per size. Static labels (artifact names, the found
counter between pickups, popup paragraphs) are cached as rendered surfaces so
the per-frame render loop does no font work for unchanged text.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

import pygame

_FONT_CACHE: Dict[int, pygame.font.Font] = {}
_TEXT_CACHE: Dict[Tuple[int, str, Tuple[int, int, int]], pygame.Surface] = {}
_TEXT_CACHE_MAX = 256


def get_font(size: int) -> pygame.font.Font:
    """Get (and cache) the default font at a given size. Safe to call after pygame.font.init()."""
    s = int(size)
    font = _FONT_CACHE.get(s)
    if font is None:
        font = pygame.font.Font(None, s)
        _FONT_CACHE[s] = font
    return font


def render_text_cached(
    size: int,
    text: str,
    color: Tuple[int, int, int],
    antialias: bool = True,
) -> pygame.Surface:
    """Render and cache a single line of text."""
    key = (int(size), str(text), (int(color[0]), int(color[1]), int(color[2])))
    surf = _TEXT_CACHE.get(key)
    if surf is None:
        # Bound the cache; oldest entry goes first.
        if len(_TEXT_CACHE) >= _TEXT_CACHE_MAX:
            _TEXT_CACHE.pop(next(iter(_TEXT_CACHE)))
        surf = get_font(size).render(str(text), bool(antialias), color)
        _TEXT_CACHE[key] = surf
    return surf


def wrap_text(font: pygame.font.Font, text: str, max_width: int) -> List[str]:
    """Greedy word wrap so each line renders no wider than `max_width` pixels."""
    lines: List[str] = []
    for paragraph in str(text or "").split("\n"):
        words = paragraph.split()
        if not words:
            lines.append("")
            continue
        line = words[0]
        for word in words[1:]:
            candidate = f"{line} {word}"
            if font.size(candidate)[0] <= max_width:
                line = candidate
            else:
                lines.append(line)
                line = word
        lines.append(line)
    return lines


def clip_lines(font: pygame.font.Font, lines: List[str], max_lines: int, max_width: int) -> List[str]:
    """Keep at most `max_lines`; when text is cut, the last kept line ends with "..."."""
    if len(lines) <= max_lines:
        return list(lines)
    if max_lines <= 0:
        return []
    kept = list(lines[:max_lines])
    last = kept[-1].rstrip()
    while last and font.size(last + "...")[0] > max_width:
        last = last[:-1].rstrip()
    kept[-1] = last + "..."
    return kept


def clear_caches() -> None:
    """Drop cached fonts and surfaces (needed after pygame.quit())."""
    _FONT_CACHE.clear()
    _TEXT_CACHE.clear()
