"""
Command-line interface: a human against one of the computer opponents.
"""

import argparse
import logging
import random
from typing import Callable, List, Optional, Sequence

from ttt_engine.api import Mover, strategy_mover
from ttt_engine.core.types import Outcome
from ttt_engine.games.board import Board
from ttt_engine.games.match import Match
from ttt_engine.rounds.controller import RoundController
from ttt_engine.strategies.strategy import Strategy
from ttt_engine.utils.config import DEFAULT_OPPONENT, FIRST_MOVE_CHOICES, OPPONENTS, Config
from ttt_engine.utils.factory import create_opponent, parse_symbol, resolve_first_mover

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Play tic-tac-toe against a computer opponent"
    )
    parser.add_argument(
        "--opponent", "-o",
        choices=list(OPPONENTS.keys()),
        default=DEFAULT_OPPONENT,
        help=f"Computer opponent (default: {DEFAULT_OPPONENT})",
    )
    parser.add_argument(
        "--marker", "-m",
        type=str,
        default="X",
        help="Your marker, a single character (default: X)",
    )
    parser.add_argument(
        "--first", "-f",
        choices=list(FIRST_MOVE_CHOICES),
        default="human",
        help="Who opens the first round; openers alternate afterwards (default: human)",
    )
    parser.add_argument(
        "--rounds", "-r",
        type=int,
        default=1,
        help="Rounds to play (default: 1)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the computer's random choices",
    )
    parser.add_argument(
        "--self-play",
        action="store_true",
        help="The opponent's strategy plays both sides (no human input)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def joinor(items: List[int], delimiter: str = ", ", conjunction: str = "or") -> str:
    """Render [1, 2, 3] as '1, 2, or 3'."""
    words = [str(i) for i in items]
    if len(words) <= 1:
        return "".join(words)
    if len(words) == 2:
        return f"{words[0]} {conjunction} {words[1]}"
    return delimiter.join(words[:-1]) + f"{delimiter}{conjunction} {words[-1]}"


def human_mover(read: Callable[[str], str] = input, write: Callable[[str], None] = print) -> Mover:
    """Mover that prompts until a free cell number is typed."""

    def _move(board: Board) -> int:
        free = sorted(board.free_cells())
        while True:
            raw = read(f"Choose a square ({joinor(free)}): ").strip()
            try:
                cell = int(raw)
            except ValueError:
                write("Please type a square number.")
                continue
            if board.is_free(cell):
                return cell
            write("Sorry, that's not a valid choice.")

    return _move


def _describe(outcome: Outcome, config: Config) -> str:
    if outcome.winner == config.human_symbol:
        return "You won!"
    if outcome.winner == config.computer_symbol:
        return f"{config.opponent_name} won!"
    return "The board is full! It's a tie."


def _show_move(match: Match, symbol: str, cell: int) -> None:
    print(f"\n{symbol} plays {cell}")
    print(match.board.state_string())


def build_controller(config: Config, self_play: bool, rng: random.Random) -> RoundController:
    computer = create_opponent(config)
    movers = {config.computer_symbol: strategy_mover(computer, rng)}
    if self_play:
        mirror = Strategy(config.strategy_kind, config.human_symbol, config.computer_symbol)
        movers[config.human_symbol] = strategy_mover(mirror, rng)
    else:
        movers[config.human_symbol] = human_mover()

    first = resolve_first_mover(config, rng)
    return RoundController(config.symbols, first, movers)


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = Config(
            opponent=args.opponent,
            human_symbol=parse_symbol(args.marker),
            first=args.first,
            rounds=args.rounds,
            seed=args.seed,
        )
    except ValueError as e:
        parser.error(str(e))

    rng = random.Random(config.seed)
    controller = build_controller(config, args.self_play, rng)

    print(f"You ({config.human_symbol}) vs. {config.opponent_name} ({config.computer_symbol})")
    print(Board.guide_string())

    for _ in range(config.rounds):
        if controller.match.is_over():
            controller.next_round()
        print(f"\n{controller.first_mover} moves first")
        print(controller.match.board.state_string())

        outcome = controller.play_round(on_move=_show_move)
        score = controller.scoreboard
        print(f"\n{_describe(outcome, config)}")
        print(
            f"You: {score.wins_for(config.human_symbol)}   "
            f"{config.opponent_name}: {score.wins_for(config.computer_symbol)}   "
            f"Ties: {score.ties}"
        )

    logger.info("Played %d round(s)", controller.rounds_played)


if __name__ == "__main__":
    main()
