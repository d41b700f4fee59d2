"""Letter pool: tracks tiles left in the bag and handles random draws."""

from __future__ import annotations

import logging
import random

from rackwords.constants import LETTER_DATA, LetterInfo

log = logging.getLogger(__name__)


class LetterPool:
    """Per-letter tile counts for one game, drawn from a fixed letter table."""

    def __init__(self, letter_data: dict[str, LetterInfo] | None = None,
                 seed: int | None = None) -> None:
        """Copy tile counts out of *letter_data*; the table itself is never touched."""
        self._letter_data = letter_data if letter_data is not None else LETTER_DATA
        self._tiles: dict[str, int] = {
            ch: info.tiles for ch, info in self._letter_data.items()
        }
        self._rng = random.Random(seed)

    def remaining(self, letter: str | None = None) -> int:
        """Tiles left for *letter*, or in the whole pool."""
        if letter is None:
            return sum(self._tiles.values())
        return self._tiles.get(letter, 0)

    def is_empty(self) -> bool:
        return self.remaining() == 0

    def point_values(self) -> dict[str, int]:
        """Letter -> points for this pool's letter table."""
        return {ch: info.points for ch, info in self._letter_data.items()}

    def remove_word(self, word: str) -> None:
        """Take the tiles of a word already on the board out of the pool."""
        for ch in word:
            if self._tiles.get(ch, 0) > 0:
                self._tiles[ch] -= 1
            else:
                log.debug("No %s tile left to remove for board word %s", ch, word)

    def draw(self) -> str | None:
        """Take one tile of a random letter that still has tiles. None if empty."""
        available = [ch for ch, count in self._tiles.items() if count > 0]
        if not available:
            return None
        letter = self._rng.choice(available)
        self._tiles[letter] -= 1
        return letter

    def draw_rack(self, size: int) -> list[str]:
        """Draw up to *size* tiles; fewer if the pool runs out."""
        rack: list[str] = []
        for _ in range(size):
            letter = self.draw()
            if letter is None:
                log.warning("Pool ran out after drawing %d of %d tiles", len(rack), size)
                break
            rack.append(letter)
        return rack
