"""
ttt_engine - a two-player tic-tac-toe engine with computer opponents.

This package provides the board, the match state machine, and three
opponent strategies (random, avoidant, optimal).

Quick Start:
    from ttt_engine import Board, Match, Strategy, StrategyKind, play_match, strategy_mover

    match = Match(Board(), ("X", "O"), first_mover="X")
    hal = Strategy(StrategyKind.OPTIMAL, "X", "O")
    roomba = Strategy(StrategyKind.AVOIDANT, "O", "X")
    outcome = play_match(match, {"X": strategy_mover(hal), "O": strategy_mover(roomba)})

Modules:
    core       - Cell constants, winning lines, outcomes and errors
    games      - Board and Match
    strategies - Threat detection and the opponent strategies
    rounds     - Repeated matches with alternating openers and a score
"""

from ttt_engine.api import play_match, strategy_mover, Mover

from ttt_engine.core import (
    MatchStatus,
    Outcome,
    GameError,
    InvalidMove,
    MatchAlreadyOver,
    NoMovesAvailable,
)
from ttt_engine.games import Board, Match
from ttt_engine.strategies import Strategy, StrategyKind, threatened_cells
from ttt_engine.rounds import RoundController, Scoreboard

__version__ = "1.0.0"

__all__ = [
    # Main API
    "play_match",
    "strategy_mover",
    "Mover",
    "Board",
    "Match",
    "Strategy",
    "StrategyKind",
    "threatened_cells",
    "RoundController",
    "Scoreboard",
    # Types
    "MatchStatus",
    "Outcome",
    # Errors
    "GameError",
    "InvalidMove",
    "MatchAlreadyOver",
    "NoMovesAvailable",
]
