"""CLI entry point for the rack word finder."""

from __future__ import annotations

import argparse
import json
import logging
import random
import re
import sys

from rackwords.constants import MAX_RACK_LETTERS
from rackwords.dictionary import (
    Dictionary,
    EmptyDictionaryError,
    load_default_dictionary,
    load_dictionary,
)
from rackwords.display import print_result, result_to_json
from rackwords.game import Round, deal_round, play_round, random_rack_size
from rackwords.pool import LetterPool


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Rack word finder — list the words playable off a board word",
    )
    parser.add_argument(
        "--dictionary", "-d",
        type=str,
        help="Word list, one word per line (default: data/dictionary.txt)",
    )
    parser.add_argument(
        "--anchor", "-a",
        type=str,
        help='Word already on the board; "" for none. Random if omitted',
    )
    parser.add_argument(
        "--rack", "-r",
        type=str,
        help='Rack letters, e.g. "SDE" or "S,D,E". Random if omitted',
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed for the random board word and rack",
    )
    parser.add_argument(
        "--top", "-n",
        type=int,
        default=1,
        help="Number of ranked words to show (default: 1)",
    )
    parser.add_argument(
        "--fallthrough",
        action="store_true",
        help="Let words containing the board word also try the one-borrow rule",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )
    args = parser.parse_args(argv)

    if args.rack is not None:
        try:
            args.rack = parse_rack(args.rack)
        except ValueError as e:
            parser.error(str(e))
    if args.anchor is not None:
        args.anchor = args.anchor.strip().upper()
        if args.anchor and not re.fullmatch(r"[A-Z]+", args.anchor):
            parser.error(f"Board word must be letters A-Z, got {args.anchor!r}")
    return args


def parse_rack(raw: str) -> list[str]:
    """Parse "SDE" or "S,D,E" into a list of uppercase tiles."""
    raw = raw.strip().upper()
    letters = list(re.sub(r"[,\s]+", "", raw))
    if any(not re.fullmatch(r"[A-Z]", ch) for ch in letters):
        raise ValueError(f"Rack must be letters A-Z, got {raw!r}")
    if len(letters) > MAX_RACK_LETTERS:
        raise ValueError(f"Rack holds at most {MAX_RACK_LETTERS} letters, got {len(letters)}")
    return letters


def setup_round(args: argparse.Namespace, dictionary: Dictionary,
                pool: LetterPool) -> Round:
    """Build the round from the CLI flags, dealing whatever was left out."""
    rng = random.Random(args.seed)

    if args.anchor is None:
        dealt = deal_round(dictionary, pool, rng)
        if args.rack is not None:
            dealt.rack = list(args.rack)
        return dealt

    if args.rack is not None:
        return Round(args.anchor, list(args.rack))

    pool.remove_word(args.anchor)
    return Round(args.anchor, pool.draw_rack(random_rack_size(rng)))


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # 1. Load dictionary
    try:
        if args.dictionary:
            dictionary = load_dictionary(args.dictionary)
        else:
            dictionary = load_default_dictionary()
    except (OSError, UnicodeDecodeError, EmptyDictionaryError) as e:
        print(f"Could not load dictionary: {e}", file=sys.stderr)
        sys.exit(2)

    # 2. Board word and rack
    pool = LetterPool(seed=args.seed)
    game_round = setup_round(args, dictionary, pool)

    # 3. Solve
    result = play_round(dictionary, game_round, points=pool.point_values(),
                        fallthrough_on_shortfall=args.fallthrough)

    # 4. Display
    if args.json:
        print(json.dumps(result_to_json(result), indent=2))
    else:
        print_result(result, top=args.top)

    if not result.has_play:
        sys.exit(1)


if __name__ == "__main__":
    main()
