"""Terminal rendering of round results."""

from __future__ import annotations

from rackwords.game import RoundResult

BANNER = "\n".join([
    "=======================",
    "        Results        ",
    "=======================",
])

NO_PLAY_MESSAGE = (
    "Unfortunately no valid word can be made with this combination. "
    "Better luck next time!"
)


def format_anchor(anchor_word: str) -> str:
    return f'"{anchor_word}"' if anchor_word else "(none)"


def render_result(result: RoundResult, top: int = 1) -> str:
    """Render the round summary and the highest scoring word(s)."""
    game_round = result.game_round
    lines = [
        BANNER,
        "",
        f"The word on the board was: {format_anchor(game_round.anchor_word)}",
        "",
        f'The letters available on the rack were: "{", ".join(game_round.rack)}"',
        "",
    ]

    best = result.best
    if best is None:
        lines.append(NO_PLAY_MESSAGE)
        return "\n".join(lines)

    lines.append(
        f"The highest scoring valid word that can be played is: "
        f"{best.word} worth {best.points} points!"
    )
    runners_up = result.ranked[1:max(top, 1)]
    if runners_up:
        lines.append("")
        lines.append(f"Other plays ({len(result.ranked) - 1} more):")
        for scored in runners_up:
            lines.append(f"  {scored.word:<15s} {scored.points:>3d}")
    return "\n".join(lines)


def result_to_json(result: RoundResult) -> dict:
    """Serialize a RoundResult to a plain dict."""
    game_round = result.game_round
    best = result.best
    return {
        "anchor_word": game_round.anchor_word,
        "rack": list(game_round.rack),
        "playable": list(result.playable),
        "ranked": [{"word": s.word, "points": s.points} for s in result.ranked],
        "best": {"word": best.word, "points": best.points} if best else None,
    }


def print_result(result: RoundResult, top: int = 1) -> None:
    print("\n" + render_result(result, top=top) + "\n")
