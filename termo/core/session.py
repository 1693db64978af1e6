from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from termo.core.config import GameConfig


class GameStatus(str, Enum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


@dataclass
class Session:
    """Progress that outlives a single level: the level number, score and hint price."""

    level: int = 0
    score: int = 0
    hint_cost: int = 5

    def num_words(self, config: GameConfig) -> int:
        return config.num_words(self.level)

    def max_challenges(self, config: GameConfig) -> int:
        return config.max_challenges(self.level)


@dataclass
class HintState:
    """Letters bought for the current target board, keyed by slot index."""

    revealed: Dict[int, str] = field(default_factory=dict)
    target: Optional[int] = None

    def clear(self) -> None:
        self.revealed = {}
        self.target = None


@dataclass
class Round:
    """Everything that belongs to one level attempt.

    A new Round replaces the old one wholesale on every level initialisation.
    """

    solutions: Tuple[str, ...]
    max_challenges: int
    guesses: List[str] = field(default_factory=list)
    solved: List[bool] = field(default_factory=list)
    buffer: List[str] = field(default_factory=list)
    cursor: int = 0
    hints: HintState = field(default_factory=HintState)
    status: GameStatus = GameStatus.PLAYING

    def __post_init__(self) -> None:
        if not self.solved:
            self.solved = [False] * len(self.solutions)
        if not self.buffer:
            self.buffer = [""] * self.word_length

    @property
    def word_length(self) -> int:
        return len(self.solutions[0]) if self.solutions else 0

    @property
    def num_words(self) -> int:
        return len(self.solutions)

    def first_unsolved(self) -> Optional[int]:
        return next((i for i, done in enumerate(self.solved) if not done), None)

    def all_solved(self) -> bool:
        return all(self.solved)

    def empty_buffer(self) -> List[str]:
        return [""] * self.word_length

    def prefilled_buffer(self) -> List[str]:
        """An empty buffer with the bought hint letters put back in place."""
        buffer = self.empty_buffer()
        for index, letter in self.hints.revealed.items():
            buffer[index] = letter
        return buffer


@dataclass(frozen=True)
class TurnResult:
    """Outcome of one accepted submission."""

    word: str
    solved_boards: Tuple[int, ...]
    points: int
    status: GameStatus


@dataclass(frozen=True)
class HintReveal:
    """A letter bought with the hint button."""

    index: int
    letter: str
    cost: int
