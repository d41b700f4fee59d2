"""Ordered word list loaded from a newline-delimited text file."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

log = logging.getLogger(__name__)


class EmptyDictionaryError(ValueError):
    """Raised when a dictionary holds no words to search."""


class Dictionary:
    """Uppercase words in file order, with a set alongside for lookups.

    Duplicates are kept; the finder reports whatever order the source had.
    """

    def __init__(self, words: list[str] | None = None) -> None:
        self._words: list[str] = []
        self._lookup: set[str] = set()
        for word in words or []:
            self.add(word)

    def load(self, path: str | Path) -> None:
        """Load words from a file (one word per line)."""
        with open(path, encoding="utf-8") as f:
            for line in f:
                word = line.strip()
                if word:
                    self.add(word)
        log.info("Loaded %s words from %s", f"{len(self._words):,}", path)

    def add(self, word: str) -> None:
        word = word.upper()
        self._words.append(word)
        self._lookup.add(word)

    def is_valid_word(self, word: str) -> bool:
        return word.upper() in self._lookup

    @property
    def words(self) -> list[str]:
        return list(self._words)

    @property
    def word_count(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __getitem__(self, index: int) -> str:
        return self._words[index]

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.is_valid_word(word)


def load_dictionary(path: str | Path) -> Dictionary:
    """Load a word file, rejecting one with no words in it."""
    d = Dictionary()
    d.load(path)
    if not d.word_count:
        raise EmptyDictionaryError(f"Dictionary at {path} contains no words")
    return d


def load_default_dictionary() -> Dictionary:
    """Load the word list from the data/ directory."""
    data_dir = Path(__file__).resolve().parent.parent / "data"
    path = data_dir / "dictionary.txt"
    if not path.exists():
        raise FileNotFoundError(
            f"Dictionary not found at {path}. "
            "Download a Scrabble word list and place it at data/dictionary.txt"
        )
    return load_dictionary(path)
