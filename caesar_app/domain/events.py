"""
events.py - Input events and conversion direction
Single responsibility: typed containers for the edits the UI reports.
"""
from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"

    @property
    def label(self) -> str:
        return "Encryption" if self is Direction.ENCRYPT else "Decryption"


@dataclass(frozen=True)
class DirectionChanged:
    direction: Direction


@dataclass(frozen=True)
class ShiftChanged:
    shift: int


@dataclass(frozen=True)
class PlaintextEdited:
    text: str


@dataclass(frozen=True)
class CiphertextEdited:
    text: str


Event = DirectionChanged | ShiftChanged | PlaintextEdited | CiphertextEdited
