"""The round controller: session state and the Playing/Won/Lost state machine."""

from __future__ import annotations

import itertools
import logging
import random
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from termo.core.actions import (
    Action,
    AdvanceLevel,
    ArrowLeft,
    ArrowRight,
    Backspace,
    Enter,
    HintRequest,
    Letter,
    ResetToZero,
    RestartLevel,
    TileClick,
)
from termo.core.config import GameConfig
from termo.core.errors import IncompleteGuess, RejectedAction, UnknownWord
from termo.core.hints import HintEngine
from termo.core.scoring import points_for_solve
from termo.core.session import GameStatus, HintReveal, Round, Session, TurnResult
from termo.core.snapshot import RoundSnapshot, build_snapshot
from termo.core.words import ValidationVocabulary, WordPool

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Toast:
    text: str
    id: int


class RoundController:
    """Owns the session and the current round; applies one input action at a time.

    Every operation validates before it mutates, so a rejected action leaves the
    round exactly as it was apart from the transient toast/shake feedback.
    Feedback signals carry ids: ``clear_toast``/``clear_shake`` only clear the
    signal they were scheduled for, and level initialisation drops all of them.
    """

    def __init__(
        self,
        config: GameConfig,
        pool: WordPool,
        vocabulary: ValidationVocabulary,
        rng: Optional[random.Random] = None,
        level: int = 0,
        score: int = 0,
    ) -> None:
        if pool.length != config.word_length:
            raise ValueError(
                f"Word pool length {pool.length} does not match word_length {config.word_length}"
            )
        self._config = config
        self._pool = pool
        self._vocabulary = vocabulary
        self._rng = rng if rng is not None else random.Random()
        self._hint_engine = HintEngine(self._rng, config.hint_cost_step)
        self._signal_ids = itertools.count(1)
        self._toast: Optional[Toast] = None
        self._shake_id: Optional[int] = None
        self._session = Session(level=level, score=score, hint_cost=config.hint_base_cost)
        self._round = self._new_round(level)
        self._log_level_start()

    # ------------------------------------------------------------------
    # State access
    # ------------------------------------------------------------------

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def session(self) -> Session:
        return self._session

    @property
    def round(self) -> Round:
        return self._round

    @property
    def vocabulary(self) -> ValidationVocabulary:
        return self._vocabulary

    @property
    def status(self) -> GameStatus:
        return self._round.status

    @property
    def level(self) -> int:
        return self._session.level

    @property
    def score(self) -> int:
        return self._session.score

    @property
    def hint_cost(self) -> int:
        return self._session.hint_cost

    @property
    def cursor(self) -> int:
        return self._round.cursor

    @property
    def buffer(self) -> Tuple[str, ...]:
        return tuple(self._round.buffer)

    @property
    def guesses(self) -> Tuple[str, ...]:
        return tuple(self._round.guesses)

    @property
    def solved(self) -> Tuple[bool, ...]:
        return tuple(self._round.solved)

    @property
    def solutions(self) -> Tuple[str, ...]:
        return self._round.solutions

    @property
    def toast(self) -> Optional[Toast]:
        return self._toast

    @property
    def shake_id(self) -> Optional[int]:
        return self._shake_id

    @property
    def shaking(self) -> bool:
        return self._shake_id is not None

    def snapshot(self) -> RoundSnapshot:
        return build_snapshot(
            self._session,
            self._round,
            toast=self._toast.text if self._toast else None,
            shake=self.shaking,
        )

    # ------------------------------------------------------------------
    # Transient feedback
    # ------------------------------------------------------------------

    def clear_toast(self, toast_id: int) -> bool:
        """Clear the toast if it is still the one with ``toast_id``."""
        if self._toast is None or self._toast.id != toast_id:
            return False
        self._toast = None
        return True

    def clear_shake(self, shake_id: int) -> bool:
        """Stop the shake if it is still the one with ``shake_id``."""
        if self._shake_id != shake_id:
            return False
        self._shake_id = None
        return True

    def _show_toast(self, text: str) -> Toast:
        self._toast = Toast(text=text, id=next(self._signal_ids))
        return self._toast

    def _reject(self, error: RejectedAction) -> None:
        logger.debug("Rejected: %s", error.message)
        self._show_toast(error.message)
        if error.shake:
            self._shake_id = next(self._signal_ids)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def dispatch(self, action: Action) -> Union[TurnResult, HintReveal, None]:
        """Apply one action. Rejections become toast/shake feedback, never exceptions."""
        try:
            if isinstance(action, Letter):
                self.type_letter(action.char)
            elif isinstance(action, Backspace):
                self.backspace()
            elif isinstance(action, ArrowLeft):
                self.move_cursor(-1)
            elif isinstance(action, ArrowRight):
                self.move_cursor(1)
            elif isinstance(action, TileClick):
                self.click_tile(action.index)
            elif isinstance(action, Enter):
                return self.submit()
            elif isinstance(action, HintRequest):
                return self.request_hint()
            elif isinstance(action, AdvanceLevel):
                self.advance_level()
            elif isinstance(action, RestartLevel):
                self.restart_level()
            elif isinstance(action, ResetToZero):
                self.reset_to_zero()
            else:
                raise TypeError(f"Unknown action: {action!r}")
        except RejectedAction as e:
            self._reject(e)
        return None

    # ------------------------------------------------------------------
    # Guess buffer editing
    # ------------------------------------------------------------------

    def _playing(self, what: str) -> bool:
        if self._round.status is GameStatus.PLAYING:
            return True
        logger.debug("Ignoring %s while %s", what, self._round.status.value)
        return False

    def type_letter(self, char: str) -> None:
        if not self._playing("letter"):
            return
        r = self._round
        r.buffer[r.cursor] = Letter(char).char
        if r.cursor < r.word_length - 1:
            r.cursor += 1

    def backspace(self) -> None:
        if not self._playing("backspace"):
            return
        r = self._round
        if r.buffer[r.cursor] != "":
            r.buffer[r.cursor] = ""
        else:
            r.cursor = max(0, r.cursor - 1)
            r.buffer[r.cursor] = ""

    def move_cursor(self, delta: int) -> None:
        r = self._round
        r.cursor = max(0, min(r.word_length - 1, r.cursor + delta))

    def click_tile(self, index: int) -> None:
        if not self._playing("tile click"):
            return
        if 0 <= index < self._round.word_length:
            self._round.cursor = index

    # ------------------------------------------------------------------
    # Turns and hints
    # ------------------------------------------------------------------

    def submit(self) -> Optional[TurnResult]:
        """Submit the guess buffer.

        Raises IncompleteGuess or UnknownWord without changing the round.
        """
        if not self._playing("submit"):
            return None
        r = self._round
        word = "".join(r.buffer)
        if "" in r.buffer or len(word) != r.word_length:
            raise IncompleteGuess()
        if not self._vocabulary.is_valid_guess(word):
            raise UnknownWord(word)

        attempts_before = len(r.guesses)
        r.guesses.append(word)

        solved_now = []
        turn_points = 0
        for i, solution in enumerate(r.solutions):
            if not r.solved[i] and solution == word:
                r.solved[i] = True
                solved_now.append(i)
                turn_points += points_for_solve(attempts_before)
        self._session.score += turn_points

        if r.hints.target is not None and r.solved[r.hints.target]:
            r.hints.clear()
            r.buffer = r.empty_buffer()
        else:
            r.buffer = r.prefilled_buffer()
        r.cursor = 0

        if r.all_solved():
            r.status = GameStatus.WON
            self._show_toast(
                f"+{turn_points} pts • Level complete!" if turn_points else "Level complete!"
            )
            logger.info("Level %d complete, score %d", self._session.level, self._session.score)
        elif len(r.guesses) >= r.max_challenges:
            r.status = GameStatus.LOST
            self._show_toast("Out of attempts!")
            logger.info("Level %d lost, solutions were %s", self._session.level, ", ".join(r.solutions))
        elif turn_points:
            self._show_toast(f"+{turn_points} points!")

        return TurnResult(
            word=word,
            solved_boards=tuple(solved_now),
            points=turn_points,
            status=r.status,
        )

    def request_hint(self) -> Optional[HintReveal]:
        """Buy a hint letter. Raises InsufficientScore or NoHintableSlot."""
        if not self._playing("hint"):
            return None
        return self._hint_engine.request(self._session, self._round)

    # ------------------------------------------------------------------
    # Level transitions
    # ------------------------------------------------------------------

    def advance_level(self) -> None:
        if self._round.status is not GameStatus.WON:
            logger.debug("Ignoring level advance while %s", self._round.status.value)
            return
        self._start_level(self._session.level + 1, self._session.score)

    def restart_level(self) -> None:
        if self._round.status is GameStatus.PLAYING:
            logger.debug("Ignoring restart while playing")
            return
        self._start_level(self._session.level, self._session.score)

    def reset_to_zero(self) -> None:
        self._start_level(0, 0)

    def _new_round(self, level: int) -> Round:
        solutions = self._pool.select(self._config.num_words(level), self._rng)
        return Round(
            solutions=tuple(solutions),
            max_challenges=self._config.max_challenges(level),
        )

    def _start_level(self, level: int, score: int) -> None:
        # PoolExhausted propagates from here before anything is replaced
        new_round = self._new_round(level)
        self._round = new_round
        self._session.level = level
        self._session.score = score
        self._session.hint_cost = self._config.hint_base_cost
        self._toast = None
        self._shake_id = None
        self._log_level_start()

    def _log_level_start(self) -> None:
        logger.info(
            "Level %d: %d word(s), %d attempts",
            self._session.level,
            self._round.num_words,
            self._round.max_challenges,
        )
        logger.debug("Solutions: %s", ", ".join(self._round.solutions))
