"""Scrabble letter data and round settings."""

from __future__ import annotations

from typing import NamedTuple


class LetterInfo(NamedTuple):
    tiles: int
    points: int


# Standard English Scrabble letters (98 lettered tiles, blanks excluded)
LETTER_DATA: dict[str, LetterInfo] = {
    "A": LetterInfo(9, 1),  "B": LetterInfo(2, 3),  "C": LetterInfo(2, 3),
    "D": LetterInfo(4, 2),  "E": LetterInfo(12, 1), "F": LetterInfo(2, 4),
    "G": LetterInfo(3, 2),  "H": LetterInfo(2, 4),  "I": LetterInfo(9, 1),
    "J": LetterInfo(1, 8),  "K": LetterInfo(1, 5),  "L": LetterInfo(4, 1),
    "M": LetterInfo(2, 3),  "N": LetterInfo(6, 1),  "O": LetterInfo(8, 1),
    "P": LetterInfo(2, 3),  "Q": LetterInfo(1, 10), "R": LetterInfo(6, 1),
    "S": LetterInfo(4, 1),  "T": LetterInfo(6, 1),  "U": LetterInfo(4, 1),
    "V": LetterInfo(2, 4),  "W": LetterInfo(2, 4),  "X": LetterInfo(1, 8),
    "Y": LetterInfo(2, 4),  "Z": LetterInfo(1, 10),
}

TILE_DISTRIBUTION: dict[str, int] = {ch: info.tiles for ch, info in LETTER_DATA.items()}

LETTER_POINTS: dict[str, int] = {ch: info.points for ch, info in LETTER_DATA.items()}

# Percent chance that a round starts with no word on the board
NO_WORD_PROB = 10

MIN_RACK_LETTERS = 1
MAX_RACK_LETTERS = 7
