"""Find dictionary words playable from a rack off a word already on the board.

A candidate word is playable in one of two ways:

1. It contains the board (anchor) word, and every letter around that
   occurrence comes from the rack.
2. It does not contain the anchor word, and it can be spelled from the
   rack plus at most one letter borrowed from the anchor word.

The checks are ordered. A candidate that contains the anchor word is decided
by the first check alone, even if the rack cannot cover the extra letters.
Pass ``fallthrough_on_shortfall=True`` to let such a candidate try the second
check instead. Both readings accept the same words: a rack short of a letter
around the anchor is also short of it for the whole word, and the one borrow
cannot make up a letter the anchor itself already needs.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Mapping


def rack_from_letters(letters: Iterable[str]) -> Counter[str]:
    """Turn a list of tiles into a letter -> count rack."""
    return Counter(letters)


def _covers(letters: str, available: Counter[str]) -> bool:
    """Consume *letters* from *available*; False at the first one missing."""
    for ch in letters:
        if available[ch] > 0:
            available[ch] -= 1
        else:
            return False
    return True


def _extends_anchor(candidate: str, anchor_word: str, index: int,
                    rack: Mapping[str, int]) -> bool:
    before = candidate[:index]
    after = candidate[index + len(anchor_word):]
    return _covers(before + after, Counter(rack))


def _borrows_one(candidate: str, anchor_word: str, rack: Mapping[str, int]) -> bool:
    available = Counter(rack)
    borrowed = False
    for ch in candidate:
        if available[ch] > 0:
            available[ch] -= 1
        elif not borrowed and ch in anchor_word:
            borrowed = True
        else:
            return False
    return True


def can_form_word(candidate: str, anchor_word: str, rack: Mapping[str, int],
                  *, fallthrough_on_shortfall: bool = False) -> bool:
    """Can *candidate* be played off *anchor_word* with the tiles in *rack*?

    Input is expected in uppercase. *rack* is read, never modified.
    """
    if candidate == anchor_word:
        return False

    # Leftmost occurrence only; an empty anchor matches at 0
    index = candidate.find(anchor_word)
    if index != -1:
        if _extends_anchor(candidate, anchor_word, index, rack):
            return True
        if not fallthrough_on_shortfall:
            return False

    return _borrows_one(candidate, anchor_word, rack)


def find_playable_words(dictionary: Iterable[str], anchor_word: str,
                        rack: Mapping[str, int],
                        *, fallthrough_on_shortfall: bool = False) -> list[str]:
    """Every word in *dictionary* that ``can_form_word`` accepts, in dictionary order."""
    return [
        word for word in dictionary
        if can_form_word(word, anchor_word, rack,
                         fallthrough_on_shortfall=fallthrough_on_shortfall)
    ]
