"""
Factory functions for creating strategies and matches.
"""

import random
from typing import Optional, Sequence

from ttt_engine.core.types import is_valid_symbol
from ttt_engine.games.board import Board
from ttt_engine.games.match import Match
from ttt_engine.rounds.controller import random_first_mover
from ttt_engine.strategies.strategy import Strategy, StrategyKind
from ttt_engine.utils.config import Config


def create_strategy(name: str, symbol: str, opponent: str) -> Strategy:
    """
    Create a strategy by name.

    Args:
        name: Strategy name, case-insensitive (e.g., "optimal")
        symbol: The strategy's own symbol
        opponent: The opposing symbol

    Returns:
        Strategy bound to both symbols
    """
    return Strategy(StrategyKind.from_name(name), symbol, opponent)


def create_opponent(config: Config) -> Strategy:
    """The computer's strategy for a configuration."""
    return Strategy(config.strategy_kind, config.computer_symbol, config.human_symbol)


def create_match(
    symbols: Sequence[str],
    first_mover: Optional[str] = None,
    board: Optional[Board] = None,
) -> Match:
    """
    Create a match on a fresh (or supplied, empty) board.

    Args:
        symbols: The two distinct symbols
        first_mover: Symbol that moves first (defaults to symbols[0])
        board: Board to play on; a new one if None
    """
    return Match(board if board is not None else Board(), symbols, first_mover)


def resolve_first_mover(config: Config, rng: Optional[random.Random] = None) -> str:
    """Turn the human/computer/random choice into a symbol."""
    if config.first == "human":
        return config.human_symbol
    if config.first == "computer":
        return config.computer_symbol
    return random_first_mover(config.symbols, rng)


def parse_symbol(raw: str) -> str:
    """Normalize a typed marker: stripped, upper-cased, one character."""
    symbol = raw.strip().upper()
    if not is_valid_symbol(symbol):
        raise ValueError(f"Invalid marker {raw!r}: must be one non-blank character")
    return symbol
