"""Tests for termo.core.snapshot – the read-only render model."""

from __future__ import annotations

import pytest

from termo.core.scoring import CharStatus
from termo.core.session import GameStatus, Round, Session
from termo.core.snapshot import build_snapshot


def _round(*solutions: str, max_challenges: int = 6) -> Round:
    return Round(solutions=tuple(solutions), max_challenges=max_challenges)


class TestSnapshotShape:
    def test_fresh_round(self):
        snap = build_snapshot(Session(), _round("TERMO"))
        assert snap.status is GameStatus.PLAYING
        assert snap.num_words == 1
        assert len(snap.boards) == 1
        rows = snap.boards[0].rows
        assert len(rows) == 6
        assert rows[0].active
        assert rows[0].cursor == 0
        assert not any(r.active for r in rows[1:])
        assert all(len(r.tiles) == 5 for r in rows)
        assert all(t.status is CharStatus.INITIAL for r in rows for t in r.tiles)

    def test_header_fields(self):
        snap = build_snapshot(Session(level=2, score=35, hint_cost=15), _round("TERMO"))
        assert snap.level == 2
        assert snap.score == 35
        assert snap.hint_cost == 15
        assert snap.can_afford_hint

    def test_cannot_afford_hint(self):
        snap = build_snapshot(Session(score=4, hint_cost=5), _round("TERMO"))
        assert not snap.can_afford_hint

    def test_buffer_and_cursor_in_active_row(self):
        r = _round("TERMO")
        r.buffer = ["T", "E", "", "", ""]
        r.cursor = 2
        row = build_snapshot(Session(), r).boards[0].rows[0]
        assert [t.char for t in row.tiles] == ["T", "E", "", "", ""]
        assert row.cursor == 2

    def test_scored_rows(self):
        r = _round("TERMO")
        r.guesses = ["TOQUE"]
        rows = build_snapshot(Session(), r).boards[0].rows
        assert [t.char for t in rows[0].tiles] == list("TOQUE")
        assert rows[0].tiles[0].status is CharStatus.CORRECT
        assert rows[0].tiles[1].status is CharStatus.PRESENT
        assert not rows[0].active
        assert rows[1].active

    def test_snapshot_is_frozen(self):
        snap = build_snapshot(Session(), _round("TERMO"))
        with pytest.raises(AttributeError):
            snap.score = 10  # type: ignore[misc]
        with pytest.raises(TypeError):
            snap.key_statuses["A"] = CharStatus.CORRECT  # type: ignore[index]


class TestSolvedBoards:
    def test_rows_after_solve_are_hidden(self):
        r = _round("TERMO", "PODER", max_challenges=7)
        r.guesses = ["TERMO", "CARTA"]
        r.solved = [True, False]
        solved_board, open_board = build_snapshot(Session(), r).boards

        assert solved_board.solved
        assert [t.char for t in solved_board.rows[0].tiles] == list("TERMO")
        assert all(t.status is CharStatus.CORRECT for t in solved_board.rows[0].tiles)
        assert solved_board.rows[1].dimmed
        assert all(t.char == "" for t in solved_board.rows[1].tiles)
        # input row on a solved board is dimmed and inactive
        assert solved_board.rows[2].dimmed
        assert not solved_board.rows[2].active

        assert not open_board.solved
        assert [t.char for t in open_board.rows[1].tiles] == list("CARTA")
        assert open_board.rows[2].active

    def test_key_statuses_ignore_solved_boards(self):
        r = _round("TERMO", "PODER", max_challenges=7)
        r.guesses = ["TERMO"]
        r.solved = [True, False]
        keys = build_snapshot(Session(), r).key_statuses
        assert keys["T"] is CharStatus.ABSENT
        assert keys["O"] is CharStatus.PRESENT

    def test_solutions_exposed(self):
        snap = build_snapshot(Session(), _round("TERMO", "PODER"))
        assert snap.solutions == ("TERMO", "PODER")
