import pytest

from glengine.input import ESCAPE_KEYSYM, InputState


def test_initial_state_not_pressed():
    assert InputState().is_escape_pressed() is False


def test_escape_down_then_up():
    state = InputState()
    state.key_down(ESCAPE_KEYSYM)
    assert state.is_escape_pressed() is True
    state.key_up(ESCAPE_KEYSYM)
    assert state.is_escape_pressed() is False


def test_escape_keysym_value():
    state = InputState()
    state.key_down(65307)
    assert state.is_escape_pressed() is True


@pytest.mark.parametrize("symbol", [0, 97, 65293, 65306, 65308])
def test_other_keys_ignored_on_press(symbol):
    state = InputState()
    state.key_down(symbol)
    assert state.is_escape_pressed() is False


@pytest.mark.parametrize("symbol", [0, 97, 65293])
def test_other_keys_do_not_release_escape(symbol):
    state = InputState()
    state.key_down(ESCAPE_KEYSYM)
    state.key_up(symbol)
    assert state.is_escape_pressed() is True


def test_states_are_independent():
    first, second = InputState(), InputState()
    first.key_down(ESCAPE_KEYSYM)
    assert first.is_escape_pressed() is True
    assert second.is_escape_pressed() is False


def test_repeated_press_stays_pressed():
    state = InputState()
    state.key_down(ESCAPE_KEYSYM)
    state.key_down(ESCAPE_KEYSYM)
    assert state.is_escape_pressed() is True
    state.key_up(ESCAPE_KEYSYM)
    assert state.is_escape_pressed() is False