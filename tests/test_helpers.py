import pytest

from caesar_app.domain.events import CiphertextEdited, Direction, PlaintextEdited
from caesar_app.ui.helpers import edit_event, panel_order, parse_shift
from caesar_app.ui_state import AppState


@pytest.mark.parametrize(
    "text, expected",
    [
        ("7", 7),
        (" 12 ", 12),
        ("-3", -3),
        ("8.0", 8),
        ("9.", 9),
        ("", None),
        ("   ", None),
        (None, None),
        ("abc", None),
        ("7.5", None),
        ("1e", None),
        ("1e1", None),
        ("1e5", None),
        ("inf", None),
    ],
)
def test_parse_shift(text, expected):
    assert parse_shift(text) == expected


def test_panel_order_puts_active_field_first():
    state = AppState()
    assert state.derived_field == "ciphertext"
    assert panel_order(state) == [("plaintext", "Input"), ("ciphertext", "Output")]

    state.direction = Direction.DECRYPT
    assert state.derived_field == "plaintext"
    assert panel_order(state) == [("ciphertext", "Input"), ("plaintext", "Output")]


def test_edit_event():
    assert edit_event("plaintext", "a") == PlaintextEdited("a")
    assert edit_event("ciphertext", "b") == CiphertextEdited("b")
    with pytest.raises(ValueError):
        edit_event("shift", "1")
