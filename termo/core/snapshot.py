"""Read-only view of a round for rendering."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from termo.core.keyboard import aggregate_key_statuses
from termo.core.scoring import CharStatus, score_guess
from termo.core.session import GameStatus, Round, Session


@dataclass(frozen=True)
class TileView:
    char: str
    status: CharStatus


@dataclass(frozen=True)
class RowView:
    tiles: Tuple[TileView, ...]
    active: bool = False
    dimmed: bool = False
    cursor: Optional[int] = None


@dataclass(frozen=True)
class BoardView:
    solved: bool
    rows: Tuple[RowView, ...]


@dataclass(frozen=True)
class RoundSnapshot:
    level: int
    score: int
    hint_cost: int
    num_words: int
    max_challenges: int
    status: GameStatus
    boards: Tuple[BoardView, ...]
    key_statuses: Mapping[str, CharStatus]
    solutions: Tuple[str, ...]
    toast: Optional[str] = None
    shake: bool = False

    @property
    def can_afford_hint(self) -> bool:
        return self.score >= self.hint_cost


def _blank_row(length: int, dimmed: bool = False) -> RowView:
    return RowView(
        tiles=tuple(TileView("", CharStatus.INITIAL) for _ in range(length)),
        dimmed=dimmed,
    )


def _board_view(round_: Round, board: int) -> BoardView:
    solution = round_.solutions[board]
    solved = round_.solved[board]
    length = round_.word_length
    solved_at = round_.guesses.index(solution) if solved else None

    rows = []
    for row in range(round_.max_challenges):
        if row < len(round_.guesses):
            guess = round_.guesses[row]
            if solved_at is not None and row > solved_at:
                # guesses made after the board was solved are hidden on it
                rows.append(_blank_row(length, dimmed=True))
                continue
            statuses = score_guess(guess, solution)
            rows.append(
                RowView(tiles=tuple(TileView(c, s) for c, s in zip(guess, statuses)))
            )
        elif row == len(round_.guesses):
            if solved:
                rows.append(_blank_row(length, dimmed=True))
                continue
            rows.append(
                RowView(
                    tiles=tuple(TileView(c, CharStatus.INITIAL) for c in round_.buffer),
                    active=True,
                    cursor=round_.cursor,
                )
            )
        else:
            rows.append(_blank_row(length))
    return BoardView(solved=solved, rows=tuple(rows))


def build_snapshot(
    session: Session,
    round_: Round,
    toast: Optional[str] = None,
    shake: bool = False,
) -> RoundSnapshot:
    keys = aggregate_key_statuses(round_.guesses, round_.solutions, round_.solved)
    return RoundSnapshot(
        level=session.level,
        score=session.score,
        hint_cost=session.hint_cost,
        num_words=round_.num_words,
        max_challenges=round_.max_challenges,
        status=round_.status,
        boards=tuple(_board_view(round_, i) for i in range(round_.num_words)),
        key_statuses=MappingProxyType(dict(keys)),
        solutions=tuple(round_.solutions),
        toast=toast,
        shake=shake,
    )
