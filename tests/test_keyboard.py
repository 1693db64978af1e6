"""Tests for termo.core.keyboard – keyboard status aggregation."""

from __future__ import annotations

from termo.core.keyboard import KEYBOARD_ROWS, aggregate_key_statuses
from termo.core.scoring import CharStatus


class TestKeyboardRows:
    def test_covers_alphabet_once(self):
        letters = [k for row in KEYBOARD_ROWS for k in row]
        assert sorted(letters) == [chr(c) for c in range(ord("A"), ord("Z") + 1)]


class TestAggregate:
    def test_no_guesses(self):
        assert aggregate_key_statuses([], ["TERMO"], [False]) == {}

    def test_single_board(self):
        statuses = aggregate_key_statuses(["TOQUE"], ["TERMO"], [False])
        assert statuses["T"] is CharStatus.CORRECT
        assert statuses["O"] is CharStatus.PRESENT
        assert statuses["E"] is CharStatus.PRESENT
        assert statuses["Q"] is CharStatus.ABSENT
        assert statuses["U"] is CharStatus.ABSENT

    def test_best_status_across_boards(self):
        # R is absent for CASAL but present for TERMO
        statuses = aggregate_key_statuses(["PODER"], ["CASAL", "TERMO"], [False, False])
        assert statuses["R"] is CharStatus.PRESENT
        assert statuses["P"] is CharStatus.ABSENT

    def test_correct_never_downgraded(self):
        statuses = aggregate_key_statuses(["TERMO", "OUTRA"], ["TERMO", "CASAL"], [False, False])
        assert statuses["T"] is CharStatus.CORRECT
        assert statuses["R"] is CharStatus.CORRECT

    def test_present_never_downgraded(self):
        # the second R of RARAS is absent against PODER, which has a single R
        statuses = aggregate_key_statuses(["CARTA", "RARAS"], ["PODER"], [False])
        assert statuses["R"] is CharStatus.PRESENT
        assert statuses["A"] is CharStatus.ABSENT

    def test_solved_boards_contribute_nothing(self):
        # the only board is solved, so nothing is classified at all
        assert aggregate_key_statuses(["TERMO"], ["TERMO"], [True]) == {}

    def test_only_unsolved_boards_count(self):
        statuses = aggregate_key_statuses(["TERMO"], ["TERMO", "CASAL"], [True, False])
        assert statuses["T"] is CharStatus.ABSENT
        assert statuses["E"] is CharStatus.ABSENT
