"""
Public API for playing matches.

Usage:
    from ttt_engine import Board, Match, Strategy, StrategyKind, play_match, strategy_mover

    match = Match(Board(), ("X", "O"), first_mover="X")
    hal = Strategy(StrategyKind.OPTIMAL, "O", "X")
    outcome = play_match(match, {"X": read_cell, "O": strategy_mover(hal)})
"""

from __future__ import annotations

import random
from typing import Callable, Mapping, Optional

from ttt_engine.core.types import Outcome, Symbol
from ttt_engine.games.board import Board
from ttt_engine.games.match import Match
from ttt_engine.strategies.strategy import Strategy

# A mover turns the current board into a chosen cell: a Strategy, or a
# human input collaborator that only returns free cells.
Mover = Callable[[Board], int]


def strategy_mover(strategy: Strategy, rng: Optional[random.Random] = None) -> Mover:
    """Adapt a Strategy to the mover shape, binding its random source."""

    def _move(board: Board) -> int:
        return strategy.choose(board, rng)

    return _move


def play_match(
    match: Match,
    movers: Mapping[Symbol, Mover],
    on_move: Optional[Callable[[Match, Symbol, int], None]] = None,
) -> Outcome:
    """
    Play ``match`` to completion.

    Parameters
    ----------
    match : Match
        An in-progress match.
    movers : Mapping[Symbol, Mover]
        One mover per symbol in the match.
    on_move : callable, optional
        Called after every applied move with (match, symbol, cell).

    Errors raised by a mover or by Match.submit propagate unchanged.
    """
    missing = [s for s in match.symbols if s not in movers]
    if missing:
        raise ValueError(f"No mover for symbol(s): {missing}")

    while not match.is_over():
        symbol = match.current_mover
        cell = movers[symbol](match.board)
        match.submit(cell)
        if on_move is not None:
            on_move(match, symbol, cell)

    return match.outcome()


__all__ = [
    "Mover",
    "play_match",
    "strategy_mover",
]
