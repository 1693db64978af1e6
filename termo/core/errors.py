"""Error taxonomy for the game engine.

Rejected player actions are non-fatal: they carry a user-facing message and
whether the input row should shake, and never leave the round half-updated.
"""

from __future__ import annotations


class TermoError(Exception):
    """Base class for all game errors."""


class RejectedAction(TermoError):
    """A player action that was refused without changing the round."""

    message: str = "Action not allowed"
    shake: bool = True

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class IncompleteGuess(RejectedAction):
    message = "Incomplete word"


class UnknownWord(RejectedAction):
    message = "Unknown word"

    def __init__(self, word: str) -> None:
        self.word = word
        super().__init__()


class InsufficientScore(RejectedAction):
    shake = False

    def __init__(self, cost: int) -> None:
        self.cost = cost
        super().__init__(f"Not enough points! ({cost} pts)")


class NoHintableSlot(RejectedAction):
    message = "Free an unrevealed slot for the hint!"


class PoolExhausted(TermoError):
    """Raised when there are fewer eligible words than boards to fill."""

    def __init__(self, requested: int, available: int) -> None:
        self.requested = requested
        self.available = available
        super().__init__(
            f"Cannot select {requested} distinct words from {available} eligible words"
        )


class DictionaryFetchFailed(TermoError):
    """The remote word list could not be downloaded or decoded."""
