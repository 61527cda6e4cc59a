"""
sync_service.py - Plaintext/ciphertext synchronization
Single responsibility: apply one input event to AppState and recompute the
derived text field so the pair stays consistent.

Only the field that matches the current direction accepts edits; edits to the
other field are reverted. Recomputation writes the derived field directly and
is never fed back through ``handle``.
"""
import logging

from caesar_app.config import SHIFT_MAX, SHIFT_MIN
from caesar_app.domain.cipher import decrypt, encrypt
from caesar_app.domain.events import (
    CiphertextEdited,
    Direction,
    DirectionChanged,
    Event,
    PlaintextEdited,
    ShiftChanged,
)
from caesar_app.ui_state import AppState

logger = logging.getLogger(__name__)


def clamp_shift(value: int) -> int:
    return max(SHIFT_MIN, min(SHIFT_MAX, int(value)))


def _recompute(state: AppState) -> None:
    if state.direction is Direction.ENCRYPT:
        state.ciphertext = encrypt(state.plaintext, state.shift)
    else:
        state.plaintext = decrypt(state.ciphertext, state.shift)


def change_direction(state: AppState, direction: Direction) -> None:
    """Flip the active field. Texts are left as-is until the next edit."""
    if direction is state.direction:
        return
    logger.debug("direction %s -> %s", state.direction.name, direction.name)
    state.direction = direction


def change_shift(state: AppState, shift: int) -> None:
    shift = clamp_shift(shift)
    logger.debug("shift %d -> %d", state.shift, shift)
    state.shift = shift
    _recompute(state)


def edit_plaintext(state: AppState, text: str) -> bool:
    """Return True if the edit was applied, False if it was reverted."""
    if state.direction is not Direction.ENCRYPT:
        logger.debug("plaintext edit rejected in %s mode", state.direction.name)
        return False
    state.plaintext = text
    _recompute(state)
    return True


def edit_ciphertext(state: AppState, text: str) -> bool:
    """Return True if the edit was applied, False if it was reverted."""
    if state.direction is not Direction.DECRYPT:
        logger.debug("ciphertext edit rejected in %s mode", state.direction.name)
        return False
    state.ciphertext = text
    _recompute(state)
    return True


def handle(state: AppState, event: Event) -> AppState:
    match event:
        case DirectionChanged(direction=direction):
            change_direction(state, direction)
        case ShiftChanged(shift=shift):
            change_shift(state, shift)
        case PlaintextEdited(text=text):
            edit_plaintext(state, text)
        case CiphertextEdited(text=text):
            edit_ciphertext(state, text)
        case _:
            raise TypeError(f"Unsupported event: {event!r}")
    return state
