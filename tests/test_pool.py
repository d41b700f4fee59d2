"""Unit tests for the letter pool."""

from __future__ import annotations

from rackwords.constants import LETTER_DATA, TILE_DISTRIBUTION, LetterInfo
from rackwords.pool import LetterPool


class TestLetterPool:
    def test_full_pool(self) -> None:
        pool = LetterPool()
        assert pool.remaining() == sum(TILE_DISTRIBUTION.values()) == 98
        assert pool.remaining("E") == 12
        assert pool.remaining("?") == 0

    def test_point_values(self) -> None:
        values = LetterPool().point_values()
        assert values["Q"] == 10
        assert values["A"] == 1
        assert "?" not in values

    def test_point_values_follow_letter_table(self) -> None:
        pool = LetterPool({"A": LetterInfo(1, 5), "B": LetterInfo(1, 0)})
        assert pool.point_values() == {"A": 5, "B": 0}

    def test_remove_word(self) -> None:
        pool = LetterPool()
        pool.remove_word("CAT")
        assert pool.remaining("C") == 1
        assert pool.remaining("A") == 8
        assert pool.remaining("T") == 5

    def test_remove_word_stops_at_zero(self) -> None:
        pool = LetterPool()
        pool.remove_word("ZZZ")
        assert pool.remaining("Z") == 0

    def test_letter_data_not_mutated(self) -> None:
        before = dict(LETTER_DATA)
        pool = LetterPool(seed=1)
        pool.remove_word("QUIZ")
        pool.draw_rack(7)
        assert LETTER_DATA == before

    def test_draw_only_available_letters(self) -> None:
        pool = LetterPool({"A": LetterInfo(0, 1), "B": LetterInfo(2, 3)}, seed=3)
        assert pool.draw() == "B"
        assert pool.draw() == "B"
        assert pool.draw() is None
        assert pool.is_empty()

    def test_draw_rack_size(self) -> None:
        pool = LetterPool(seed=42)
        rack = pool.draw_rack(7)
        assert len(rack) == 7
        assert pool.remaining() == 98 - 7

    def test_draw_rack_runs_dry(self) -> None:
        pool = LetterPool({"A": LetterInfo(2, 1)})
        assert pool.draw_rack(5) == ["A", "A"]

    def test_seed_reproducible(self) -> None:
        assert LetterPool(seed=7).draw_rack(7) == LetterPool(seed=7).draw_rack(7)
