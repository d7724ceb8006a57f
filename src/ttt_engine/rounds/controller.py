"""
Round controller - repeats matches between the same two symbols.

Owns the first-mover alternation across rounds and the running score.
Score state lives on the controller instance, never at module level.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Callable, Dict, Mapping, Optional, Sequence

from ttt_engine.api import Mover, play_match
from ttt_engine.core.types import MatchStatus, Outcome, Symbol
from ttt_engine.games.board import Board
from ttt_engine.games.match import Match

logger = logging.getLogger(__name__)


def random_first_mover(symbols: Sequence[Symbol], rng: Optional[random.Random] = None) -> Symbol:
    """Pick who opens the first round at random."""
    return (rng or random).choice(list(symbols))


@dataclass
class Scoreboard:
    """Wins per symbol plus ties."""

    wins: Dict[Symbol, int] = field(default_factory=dict)
    ties: int = 0

    def record(self, outcome: Outcome) -> None:
        if outcome.status is MatchStatus.WON:
            self.wins[outcome.winner] = self.wins.get(outcome.winner, 0) + 1
        elif outcome.status is MatchStatus.DRAWN:
            self.ties += 1
        else:
            raise ValueError("Cannot record a match that is still in progress")

    def wins_for(self, symbol: Symbol) -> int:
        return self.wins.get(symbol, 0)

    @property
    def total(self) -> int:
        return sum(self.wins.values()) + self.ties


class RoundController:
    """
    Plays rounds of one match setup, alternating who opens each round.
    """

    def __init__(
        self,
        symbols: Sequence[Symbol],
        first_mover: Symbol,
        movers: Mapping[Symbol, Mover],
        board: Optional[Board] = None,
    ):
        self.match = Match(board if board is not None else Board(), symbols, first_mover)
        missing = [s for s in self.match.symbols if s not in movers]
        if missing:
            raise ValueError(f"No mover for symbol(s): {missing}")

        self.movers = dict(movers)
        self.scoreboard = Scoreboard(wins={s: 0 for s in self.match.symbols})
        self.rounds_played = 0

    @property
    def first_mover(self) -> Symbol:
        """Symbol that opens the next (or current) round."""
        return self.match.first_mover

    def play_round(self, on_move: Optional[Callable[[Match, Symbol, int], None]] = None) -> Outcome:
        """
        Play one match to completion and record it.

        The finished board stays visible until the next call, which first
        hands the opening move to the other symbol.
        """
        if self.match.is_over():
            self.next_round()

        outcome = play_match(self.match, self.movers, on_move)
        self.scoreboard.record(outcome)
        self.rounds_played += 1
        logger.info(
            "Round %d: %s (score %s, ties %d)",
            self.rounds_played,
            f"{outcome.winner} won" if outcome.winner else "draw",
            self.scoreboard.wins,
            self.scoreboard.ties,
        )
        return outcome

    def next_round(self) -> None:
        """Clear the board and hand the opening move to the other symbol."""
        self.match.restart(self.match.opponent_of(self.match.first_mover))
