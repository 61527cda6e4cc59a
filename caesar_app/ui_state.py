"""
ui_state.py - UI state container
"""
from caesar_app.config import DEFAULT_SHIFT
from caesar_app.domain.cipher import decrypt, encrypt
from caesar_app.domain.events import Direction


class AppState:
    def __init__(self):
        self.direction: Direction = Direction.ENCRYPT
        self.shift: int = DEFAULT_SHIFT  # SHIFT_MIN..SHIFT_MAX
        self.plaintext: str = ""
        self.ciphertext: str = ""

    @property
    def source_field(self) -> str:
        """Name of the field the user edits in the current direction."""
        return "plaintext" if self.direction is Direction.ENCRYPT else "ciphertext"

    @property
    def derived_field(self) -> str:
        return "ciphertext" if self.direction is Direction.ENCRYPT else "plaintext"

    def is_consistent(self) -> bool:
        if self.direction is Direction.ENCRYPT:
            return self.ciphertext == encrypt(self.plaintext, self.shift)
        return self.plaintext == decrypt(self.ciphertext, self.shift)

    def __repr__(self) -> str:
        return (
            f"AppState(direction={self.direction.name}, shift={self.shift}, "
            f"plaintext={self.plaintext!r}, ciphertext={self.ciphertext!r})"
        )
