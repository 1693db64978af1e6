"""Tests for termo.core.actions – logical input actions."""

from __future__ import annotations

import pytest

from termo.core.actions import (
    ArrowLeft,
    ArrowRight,
    Backspace,
    Enter,
    Letter,
    TileClick,
    action_for_key,
)


class TestLetter:
    def test_uppercases(self):
        assert Letter("a").char == "A"

    def test_equality(self):
        assert Letter("b") == Letter("B")

    @pytest.mark.parametrize("bad", ["", "AB", "1", "Ç", " "])
    def test_rejects_non_letters(self, bad: str):
        with pytest.raises(ValueError):
            Letter(bad)


class TestActionForKey:
    @pytest.mark.parametrize(
        "key, expected",
        [
            ("ENTER", Enter()),
            ("Enter", Enter()),
            ("Return", Enter()),
            ("BACKSPACE", Backspace()),
            ("ArrowLeft", ArrowLeft()),
            ("ARROWRIGHT", ArrowRight()),
            ("q", Letter("Q")),
            ("Z", Letter("Z")),
        ],
    )
    def test_known_keys(self, key, expected):
        assert action_for_key(key) == expected

    @pytest.mark.parametrize("key", ["", " ", "1", "Shift", "Ç", "F5"])
    def test_unknown_keys(self, key: str):
        assert action_for_key(key) is None

    def test_tile_click_is_plain_data(self):
        assert TileClick(3).index == 3
