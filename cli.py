"""Command-line driver for a single blackjack round."""

import argparse
import logging
from random import Random
from typing import Callable, Iterator, Sequence

from api.schemas import RoundStateResponse
from config import config
from core.game.engine import BlackjackRound

logger = logging.getLogger(__name__)

ACTIONS = {"h": "hit", "s": "stand"}
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class InvalidActionError(ValueError):
    """Raised for an action the round does not understand."""


def parse_actions(script: str) -> list[str]:
    """
    Turn an action script like 'hhs' or 'h,h,s' into action names.

    Raises:
        InvalidActionError: If the script contains an unknown action
    """
    actions = []
    for char in script.replace(",", "").replace(" ", "").lower():
        if char not in ACTIONS:
            raise InvalidActionError(f"Unknown action {char!r} (use h or s)")
        actions.append(ACTIONS[char])
    return actions


def _prompt_actions(read: Callable[[str], str]) -> Iterator[str]:
    """Yield actions typed at the prompt. End of input stops the stream."""
    while True:
        try:
            answer = read("[h]it or [s]tand? ").strip().lower()[:1]
        except EOFError:
            return
        if answer in ACTIONS:
            yield ACTIONS[answer]


def describe(game: BlackjackRound) -> str:
    """Render the table as two lines of text."""
    return (
        f"Dealer: {game.dealer_cards()} ({game.dealer_points()})\n"
        f"Player: {game.player_cards()} ({game.player_points()})"
    )


def play_round(
    game: BlackjackRound,
    actions: Sequence[str] | None = None,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> str:
    """
    Drive a round to completion and return its status.

    Actions come from ``actions`` when given, otherwise they are read
    interactively. A script that runs out, or end of input at the
    prompt, stands.
    """
    source = iter(actions) if actions is not None else _prompt_actions(read)

    write(describe(game))
    while not game.is_complete:
        action = next(source, "stand")
        getattr(game, action)()
        write(f"> {action}")
        write(describe(game))

    write(f"Result: {game.status}")
    return game.status


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play one round of blackjack")
    parser.add_argument("--seed", type=int, help="RNG seed for the deck", default=None)
    parser.add_argument(
        "--actions",
        help="Scripted actions, e.g. 'hhs' (h = hit, s = stand)",
        default=None,
    )
    parser.add_argument(
        "--dealer-stands-on",
        type=int,
        help="Total at which the dealer stops drawing",
        default=None,
    )
    parser.add_argument("--json", action="store_true", help="Print the final round state as JSON")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level",
        default=None,
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=(args.log_level or config.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    seed = args.seed if args.seed is not None else config.game.seed
    rng = Random(seed) if seed is not None else None

    try:
        actions = parse_actions(args.actions) if args.actions is not None else None
        game = BlackjackRound(rng=rng, dealer_stands_on=args.dealer_stands_on)
    except ValueError as exc:
        logger.error("%s", exc)
        return 2

    logger.debug("Dealt round with seed %s", seed)
    play_round(game, actions)

    if args.json:
        print(RoundStateResponse.from_round(game).model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
