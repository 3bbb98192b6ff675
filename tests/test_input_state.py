from __future__ import annotations

from explorer.systems.input_state import InputState, is_close_key, normalize_key


def test_held_state_is_case_insensitive_and_last_writer_wins() -> None:
    keys = InputState()
    keys.set_key_held("ArrowLeft", True)
    assert keys.is_held("arrowleft") is True
    assert keys.moving_left is True

    keys.set_key_held("ARROWLEFT", False)
    assert keys.is_held("ArrowLeft") is False
    assert keys.moving_left is False


def test_a_and_d_are_movement_keys() -> None:
    keys = InputState()
    keys.set_key_held("D", True)
    assert keys.moving_right is True
    assert keys.moving_left is False
    keys.set_key_held("a", True)
    assert keys.moving_left is True


def test_interaction_press_is_consumed_once() -> None:
    keys = InputState()
    assert keys.consume_interaction_press() is False
    keys.press_interaction()
    assert keys.consume_interaction_press() is True
    assert keys.consume_interaction_press() is False


def test_interaction_press_is_discarded_while_popup_open() -> None:
    keys = InputState()
    keys.press_interaction()
    assert keys.consume_interaction_press(popup_open=True) is False
    # Not replayed once the popup closes.
    assert keys.consume_interaction_press(popup_open=False) is False


def test_close_keys() -> None:
    for key in (" ", "Space", "Enter", "return", "Escape"):
        assert is_close_key(key), key
    for key in ("e", "a", "arrowright", ""):
        assert not is_close_key(key), key
    assert normalize_key(None) == ""


def test_release_all_clears_keys_and_pending_press() -> None:
    keys = InputState()
    keys.set_key_held("d", True)
    keys.press_interaction()
    keys.release_all()
    assert keys.moving_right is False
    assert keys.consume_interaction_press() is False
