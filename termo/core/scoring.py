"""Per-letter scoring of a guess against one solution."""

from __future__ import annotations

from enum import Enum
from typing import List, Tuple

MAX_POINTS = 100
POINTS_DECAY = 15
MIN_POINTS = 10


class CharStatus(str, Enum):
    """Status of a letter in a scored guess. INITIAL marks unscored tiles and keys."""

    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"
    INITIAL = "initial"


def score_guess(guess: str, solution: str) -> Tuple[CharStatus, ...]:
    """Score ``guess`` against ``solution`` letter by letter.

    Two passes:
      * exact matches are CORRECT and consume their solution position;
      * every other letter takes the lowest unconsumed matching position in
        the solution (PRESENT) or is ABSENT.

    Each solution letter is credited to at most one guess position, so
    repeated letters on either side are scored the way players expect.
    """
    if len(guess) != len(solution):
        raise ValueError(
            f"Guess and solution lengths differ: {len(guess)} != {len(solution)}"
        )

    statuses: List[CharStatus] = [CharStatus.ABSENT] * len(guess)
    consumed = [False] * len(solution)

    for i, (g, s) in enumerate(zip(guess, solution)):
        if g == s:
            statuses[i] = CharStatus.CORRECT
            consumed[i] = True

    for i, letter in enumerate(guess):
        if statuses[i] is CharStatus.CORRECT:
            continue
        for j, candidate in enumerate(solution):
            if not consumed[j] and candidate == letter:
                statuses[i] = CharStatus.PRESENT
                consumed[j] = True
                break

    return tuple(statuses)


def points_for_solve(attempts_before: int) -> int:
    """Points for solving a board after ``attempts_before`` earlier guesses."""
    return max(MIN_POINTS, MAX_POINTS - POINTS_DECAY * attempts_before)
