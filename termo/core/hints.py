"""Paid hints: reveal one letter of the first unsolved board into the guess."""

from __future__ import annotations

import logging
import random

from termo.core.errors import InsufficientScore, NoHintableSlot
from termo.core.session import HintReveal, Round, Session

logger = logging.getLogger(__name__)


class HintEngine:
    """Sells hint letters. Each purchase raises the price of the next by ``cost_step``."""

    def __init__(self, rng: random.Random, cost_step: int = 5) -> None:
        self._rng = rng
        self._cost_step = cost_step

    def request(self, session: Session, round_: Round) -> HintReveal:
        """Reveal one letter of the target board, charging the current hint cost.

        Raises InsufficientScore or NoHintableSlot without touching any state.
        """
        if session.score < session.hint_cost:
            raise InsufficientScore(session.hint_cost)

        first_unsolved = round_.first_unsolved()
        if first_unsolved is None:
            raise RuntimeError("No unsolved board to hint while the round is playing")

        target = round_.hints.target
        retarget = target is None or round_.solved[target] or target != first_unsolved
        revealed = {} if retarget else round_.hints.revealed

        candidates = [
            i for i, char in enumerate(round_.buffer) if char == "" and i not in revealed
        ]
        if not candidates:
            raise NoHintableSlot()

        if retarget:
            round_.hints.target = first_unsolved
            round_.hints.revealed = {}

        index = self._rng.choice(candidates)
        letter = round_.solutions[first_unsolved][index]
        round_.hints.revealed[index] = letter
        round_.buffer[index] = letter

        cost = session.hint_cost
        session.score -= cost
        session.hint_cost += self._cost_step

        if index == round_.cursor:
            cursor = round_.cursor
            while cursor < round_.word_length - 1 and round_.buffer[cursor] != "":
                cursor += 1
            round_.cursor = cursor

        logger.debug("Hint for board %d: slot %d = %s (-%d)", first_unsolved, index, letter, cost)
        return HintReveal(index=index, letter=letter, cost=cost)
