"""
helpers.py - UI helper functions
Single responsibility: small formatting and parsing helpers used across UI.
"""
import re

from caesar_app.config import COLOR_CIPHERTEXT, COLOR_PLAINTEXT
from caesar_app.domain.events import CiphertextEdited, PlaintextEdited

FIELD_TITLES = {"plaintext": "Plaintext", "ciphertext": "Ciphertext"}
FIELD_COLORS = {"plaintext": COLOR_PLAINTEXT, "ciphertext": COLOR_CIPHERTEXT}
_SHIFT_RE = re.compile(r"([+-]?\d+)(?:\.0*)?")


def parse_shift(text: str | None) -> int | None:
    """Parse stepper text into an int; None when it is not a whole number."""
    if text is None:
        return None
    s = text.strip()
    if not s:
        return None
    # "7.0" is what a float-backed stepper would display
    match = _SHIFT_RE.fullmatch(s)
    if not match:
        return None
    return int(match.group(1))


def panel_order(state) -> list[tuple[str, str]]:
    """(field, role label) pairs, active field first."""
    return [(state.source_field, "Input"), (state.derived_field, "Output")]


def edit_event(field: str, text: str) -> PlaintextEdited | CiphertextEdited:
    if field == "plaintext":
        return PlaintextEdited(text)
    if field == "ciphertext":
        return CiphertextEdited(text)
    raise ValueError(f"Unknown text field: {field!r}")
