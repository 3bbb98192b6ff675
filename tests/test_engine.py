from __future__ import annotations

import pygame

from config import MSG_DISCOVERY, MSG_EXPLORE, MSG_MISSION_COMPLETE
from explorer.engine import key_identifier


def test_first_frame_detects_artifact_under_player(headless) -> None:
    engine, scheduler, sink = headless
    scheduler.step()
    snap = sink.frames[-1]
    assert snap.active_artifact_id == "cuneiform-1"
    assert snap.message == "You see a Cuneiform Tablet. Press E to inspect it."
    assert scheduler.has_pending


def test_interact_opens_popup_on_next_frame(headless) -> None:
    engine, scheduler, sink = headless
    scheduler.step()
    engine.key_down("E")
    scheduler.step()
    snap = sink.frames[-1]
    assert snap.popup_visible is True
    assert snap.popup_title == "Cuneiform Tablet"
    assert snap.message == MSG_DISCOVERY
    assert snap.found_text == "Artifacts found: 1 / 3"


def test_held_interact_key_counts_as_one_press(headless) -> None:
    engine, scheduler, sink = headless
    scheduler.step()
    engine.key_down("e")
    scheduler.step()
    engine.key_down("space")
    # Auto-repeat keydown without a keyup is not a new press.
    engine.key_down("e")
    engine.key_up("space")
    engine.state.player_x = 500
    scheduler.step()
    assert sink.frames[-1].popup_visible is False
    assert engine.state.found_count == 1


def test_movement_frozen_while_popup_open_and_not_replayed(headless) -> None:
    engine, scheduler, sink = headless
    scheduler.step()
    engine.key_down("e")
    engine.key_up("e")
    scheduler.step()
    x_open = engine.state.player_x

    engine.key_down("d")
    scheduler.step(10)
    assert engine.state.player_x == x_open

    engine.key_down("escape")
    assert engine.state.player_x == x_open
    assert engine.state.message == MSG_EXPLORE
    scheduler.step()
    # Still holding right: exactly one frame of movement, nothing queued.
    assert engine.state.player_x == x_open + engine.world.speed


def test_other_keys_do_not_close_popup(headless) -> None:
    engine, scheduler, sink = headless
    scheduler.step()
    engine.key_down("e")
    scheduler.step()
    for key in ("a", "arrowright", "e", "q"):
        engine.key_down(key)
        engine.key_up(key)
    scheduler.step()
    assert sink.frames[-1].popup_visible is True


def test_close_while_closed_is_noop(headless) -> None:
    engine, scheduler, sink = headless
    scheduler.step()
    message = engine.state.message
    assert engine.close_popup() is False
    engine.key_down("enter")
    assert engine.state.message == message
    assert engine.state.session.is_open is False


def test_stopped_engine_does_not_reschedule(headless) -> None:
    engine, scheduler, sink = headless
    engine.running = False
    scheduler.step()
    assert not scheduler.has_pending
    assert sink.frames == []


def test_full_walkthrough_reaches_mission_complete(headless) -> None:
    engine, scheduler, sink = headless
    world = engine.world
    engine.key_down("arrowright")
    for _ in range(2000):
        scheduler.step()
        snap = sink.frames[-1]
        assert 0 <= snap.player_world_x <= world.max_player_x
        if snap.active_artifact_id and not snap.popup_visible:
            engine.key_down("e")
            engine.key_up("e")
            scheduler.step()
            engine.key_down("space")
            engine.key_up("space")
        if engine.state.player_x == world.max_player_x:
            break

    engine.key_up("arrowright")
    scheduler.step()
    assert engine.state.found_count == world.total_artifacts
    assert all(a.collected for a in world.artifacts)
    assert sink.frames[-1].message == MSG_MISSION_COMPLETE
    assert sink.frames[-1].found_text == "Artifacts found: 3 / 3"


def test_key_identifier_special_keys() -> None:
    assert key_identifier(pygame.K_LEFT) == "arrowleft"
    assert key_identifier(pygame.K_RIGHT) == "arrowright"
    assert key_identifier(pygame.K_RETURN) == "enter"
    assert key_identifier(pygame.K_KP_ENTER) == "enter"
    assert key_identifier(pygame.K_SPACE) == "space"
    assert key_identifier(pygame.K_ESCAPE) == "escape"
