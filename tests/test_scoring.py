"""Unit tests for word scoring and ranking."""

from __future__ import annotations

from rackwords.scoring import ScoredWord, rank_words, word_points


class TestWordPoints:
    def test_standard_values(self) -> None:
        # C3 + A1 + T1 + S1
        assert word_points("CATS") == 6
        assert word_points("QUIZ") == 22

    def test_custom_table(self) -> None:
        assert word_points("AB", {"A": 5}) == 5

    def test_empty_word(self) -> None:
        assert word_points("") == 0


class TestRankWords:
    def test_highest_first(self) -> None:
        ranked = rank_words(["CAT", "QUIZ", "AT"])
        assert [s.word for s in ranked] == ["QUIZ", "CAT", "AT"]

    def test_ties_alphabetical(self) -> None:
        # ACT, CAT and TAC all score 5
        ranked = rank_words(["TAC", "CAT", "ACT"])
        assert ranked == [ScoredWord("ACT", 5), ScoredWord("CAT", 5), ScoredWord("TAC", 5)]

    def test_duplicates_collapse(self) -> None:
        assert rank_words(["CAT", "CAT"]) == [ScoredWord("CAT", 5)]

    def test_empty(self) -> None:
        assert rank_words([]) == []
