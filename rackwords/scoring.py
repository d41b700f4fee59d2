"""Point values for playable words and ranking of the results."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from rackwords.constants import LETTER_POINTS


@dataclass(frozen=True)
class ScoredWord:
    word: str
    points: int


def word_points(word: str, points: Mapping[str, int] | None = None) -> int:
    """Sum of the letter values in *word*. Letters with no value count 0."""
    table = points if points is not None else LETTER_POINTS
    return sum(table.get(ch, 0) for ch in word)


def rank_words(words: Iterable[str],
               points: Mapping[str, int] | None = None) -> list[ScoredWord]:
    """Score each distinct word, highest first, ties in alphabetical order."""
    scored = [ScoredWord(w, word_points(w, points)) for w in set(words)]
    return sorted(scored, key=lambda s: (-s.points, s.word))
