"""
Core module - fundamental types, constants and errors.

This module provides the building blocks used throughout the engine.
"""

from ttt_engine.core.types import (
    BOARD_SIDE,
    NUM_CELLS,
    CELLS,
    CORNERS,
    CENTER,
    WINNING_LINES,
    Symbol,
    MatchStatus,
    Outcome,
    is_valid_cell,
    is_valid_symbol,
)
from ttt_engine.core.errors import (
    GameError,
    InvalidMove,
    MatchAlreadyOver,
    NoMovesAvailable,
)

__all__ = [
    # Constants
    "BOARD_SIDE",
    "NUM_CELLS",
    "CELLS",
    "CORNERS",
    "CENTER",
    "WINNING_LINES",
    # Types
    "Symbol",
    "MatchStatus",
    "Outcome",
    # Functions
    "is_valid_cell",
    "is_valid_symbol",
    # Errors
    "GameError",
    "InvalidMove",
    "MatchAlreadyOver",
    "NoMovesAvailable",
]
