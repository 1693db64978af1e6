"""Logical input actions delivered to the round controller.

Raw device events are decoded by the UI; only these reach the engine.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Optional, Union

ALPHABET = frozenset(string.ascii_uppercase)


@dataclass(frozen=True)
class Letter:
    char: str

    def __post_init__(self) -> None:
        char = self.char.upper() if isinstance(self.char, str) else self.char
        if not isinstance(char, str) or len(char) != 1 or char not in ALPHABET:
            raise ValueError(f"Letter expects a single character A-Z, got {self.char!r}")
        object.__setattr__(self, "char", char)


@dataclass(frozen=True)
class Enter:
    pass


@dataclass(frozen=True)
class Backspace:
    pass


@dataclass(frozen=True)
class ArrowLeft:
    pass


@dataclass(frozen=True)
class ArrowRight:
    pass


@dataclass(frozen=True)
class TileClick:
    index: int


@dataclass(frozen=True)
class HintRequest:
    pass


@dataclass(frozen=True)
class AdvanceLevel:
    pass


@dataclass(frozen=True)
class RestartLevel:
    pass


@dataclass(frozen=True)
class ResetToZero:
    pass


Action = Union[
    Letter,
    Enter,
    Backspace,
    ArrowLeft,
    ArrowRight,
    TileClick,
    HintRequest,
    AdvanceLevel,
    RestartLevel,
    ResetToZero,
]

_NAMED_KEYS = {
    "ENTER": Enter,
    "RETURN": Enter,
    "BACKSPACE": Backspace,
    "ARROWLEFT": ArrowLeft,
    "LEFT": ArrowLeft,
    "ARROWRIGHT": ArrowRight,
    "RIGHT": ArrowRight,
}


def action_for_key(key: str) -> Optional[Action]:
    """Decode a key name ("ENTER", "a", "ArrowLeft", ...) into an action, or None."""
    name = key.strip().upper()
    if name in _NAMED_KEYS:
        return _NAMED_KEYS[name]()
    if len(name) == 1 and name in ALPHABET:
        return Letter(name)
    return None
