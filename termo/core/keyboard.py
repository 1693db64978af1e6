from __future__ import annotations

from typing import Dict, Sequence

from termo.core.scoring import CharStatus, score_guess

KEYBOARD_ROWS = (
    ("Q", "W", "E", "R", "T", "Y", "U", "I", "O", "P"),
    ("A", "S", "D", "F", "G", "H", "J", "K", "L"),
    ("Z", "X", "C", "V", "B", "N", "M"),
)

_PRIORITY = {
    CharStatus.INITIAL: 0,
    CharStatus.ABSENT: 1,
    CharStatus.PRESENT: 2,
    CharStatus.CORRECT: 3,
}


def aggregate_key_statuses(
    guesses: Sequence[str],
    solutions: Sequence[str],
    solved: Sequence[bool],
) -> Dict[str, CharStatus]:
    """Best known status per letter over every guess and every unsolved board.

    CORRECT beats PRESENT beats ABSENT, so a key is never downgraded. Solved
    boards stop contributing evidence once they are solved.
    """
    statuses: Dict[str, CharStatus] = {}
    for guess in guesses:
        for solution, is_solved in zip(solutions, solved):
            if is_solved:
                continue
            for letter, status in zip(guess, score_guess(guess, solution)):
                current = statuses.get(letter, CharStatus.INITIAL)
                if _PRIORITY[status] > _PRIORITY[current]:
                    statuses[letter] = status
    return statuses
