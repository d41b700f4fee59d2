"""Round setup and solving: pick a board word, deal a rack, find the plays."""

from __future__ import annotations

import logging
import random
from collections import Counter
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from rackwords.constants import MAX_RACK_LETTERS, MIN_RACK_LETTERS, NO_WORD_PROB
from rackwords.dictionary import EmptyDictionaryError
from rackwords.finder import find_playable_words, rack_from_letters
from rackwords.pool import LetterPool
from rackwords.scoring import ScoredWord, rank_words

log = logging.getLogger(__name__)


@dataclass
class Round:
    """The board word (empty for none) and the rack tiles for one round."""
    anchor_word: str
    rack: list[str] = field(default_factory=list)

    @property
    def rack_counts(self) -> Counter[str]:
        return rack_from_letters(self.rack)


@dataclass
class RoundResult:
    game_round: Round
    playable: list[str]
    ranked: list[ScoredWord]

    @property
    def has_play(self) -> bool:
        return bool(self.playable)

    @property
    def best(self) -> ScoredWord | None:
        return self.ranked[0] if self.ranked else None


def random_rack_size(rng: random.Random) -> int:
    """Roll 0-10 and clamp it to the allowed rack size."""
    size = round(rng.random() * 10)
    return max(MIN_RACK_LETTERS, min(MAX_RACK_LETTERS, size))


def deal_round(dictionary: Sequence[str], pool: LetterPool,
               rng: random.Random | None = None,
               no_word_prob: int = NO_WORD_PROB) -> Round:
    """Set up a random round, taking the board word and rack tiles out of *pool*."""
    if not len(dictionary):
        raise EmptyDictionaryError("Cannot deal a round from an empty dictionary")
    rng = rng or random.Random()

    anchor_word = ""
    if round(rng.random() * 100) >= no_word_prob:
        anchor_word = dictionary[rng.randrange(len(dictionary))]
        pool.remove_word(anchor_word)

    rack = pool.draw_rack(random_rack_size(rng))
    log.debug("Dealt round: board word %r, rack %s", anchor_word, rack)
    return Round(anchor_word, rack)


def play_round(dictionary: Sequence[str], game_round: Round,
               points: Mapping[str, int] | None = None,
               fallthrough_on_shortfall: bool = False) -> RoundResult:
    """Find and rank every word playable this round.

    An empty dictionary is refused up front; an empty result from a
    non-empty dictionary just means there is no play.
    """
    if not len(dictionary):
        raise EmptyDictionaryError("Cannot search an empty dictionary")

    playable = find_playable_words(
        dictionary, game_round.anchor_word, game_round.rack_counts,
        fallthrough_on_shortfall=fallthrough_on_shortfall,
    )
    log.info("Found %d playable words for board word %r",
             len(playable), game_round.anchor_word)
    return RoundResult(game_round, playable, rank_words(playable, points))
