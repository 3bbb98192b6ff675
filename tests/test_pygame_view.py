from __future__ import annotations

import pygame
import pytest

from explorer.engine import GameEngine
from explorer.graphics.font_cache import clear_caches, clip_lines, wrap_text, get_font
from explorer.sim.scheduler import ManualScheduler


@pytest.fixture
def windowed_engine(world_factory):
    scheduler = ManualScheduler()
    engine = GameEngine(world=world_factory(), scheduler=scheduler)
    engine.start()
    yield engine, scheduler
    clear_caches()
    pygame.quit()


def test_renders_frames_and_close_button_click(windowed_engine) -> None:
    engine, scheduler = windowed_engine
    assert engine.view is not None
    scheduler.step()
    engine.key_down("e")
    scheduler.step()
    assert engine.state.popup_open

    # Clicking outside the button does nothing.
    engine.click((0, 0))
    assert engine.state.popup_open

    engine.click(engine.view.popup.close_button.rect.center)
    assert not engine.state.popup_open
    scheduler.step()
    assert engine.view.screen.get_size() == (800, 400)


def test_wrap_text_respects_width(windowed_engine) -> None:
    font = get_font(22)
    lines = wrap_text(font, "word " * 60, 200)
    assert len(lines) > 1
    assert all(font.size(line)[0] <= 200 for line in lines)


def test_clip_lines_marks_cut_text(windowed_engine) -> None:
    font = get_font(22)
    lines = wrap_text(font, "word " * 60, 200)
    clipped = clip_lines(font, lines, 2, 200)
    assert len(clipped) == 2
    assert clipped[0] == lines[0]
    assert clipped[-1].endswith("...")
    assert font.size(clipped[-1])[0] <= 200
    assert clip_lines(font, lines[:2], 2, 200) == lines[:2]
    assert clip_lines(font, lines, 0, 200) == []


def test_long_popup_body_is_clipped_with_ellipsis(windowed_engine) -> None:
    engine, scheduler = windowed_engine
    popup = engine.view.popup
    popup.render(engine.view.screen, "Long", "lorem ipsum " * 200)
    assert popup._body_lines[-1].endswith("...")
    last_y = popup.rect.y + popup.theme.popup_pad
    line_h = get_font(popup.theme.body_size).get_linesize()
    assert last_y + line_h * len(popup._body_lines) < popup.close_button.rect.top
