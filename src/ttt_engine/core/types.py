"""
Core types, constants, and data structures.

This module contains the fundamental types used throughout the engine:
- Cell numbering and the fixed winning-line table
- MatchStatus / Outcome: the terminal-state vocabulary
"""

from __future__ import annotations

from enum import Enum, auto
from typing import NamedTuple, Optional

import numpy as np


# ╔═════════════════════════════════════════════════════════════════════════════╗
# ║                          CELL NUMBERING                                     ║
# ║                                                                             ║
# ║                             1 | 2 | 3                                       ║
# ║                             4 | 5 | 6                                       ║
# ║                             7 | 8 | 9                                       ║
# ╚═════════════════════════════════════════════════════════════════════════════╝

BOARD_SIDE = 3
NUM_CELLS = BOARD_SIDE * BOARD_SIDE

CELLS = tuple(range(1, NUM_CELLS + 1))
CORNERS = (1, 3, 7, 9)
CENTER = 5

# Winning lines in scan order: rows, then columns, then diagonals.
# winner() returns the first completed line in this order.
WINNING_LINES = np.array([
    [1, 2, 3], [4, 5, 6], [7, 8, 9],  # rows
    [1, 4, 7], [2, 5, 8], [3, 6, 9],  # cols
    [1, 5, 9], [3, 5, 7],             # diagonals
], dtype=np.int8)
WINNING_LINES.setflags(write=False)

# A symbol is a single non-blank character, e.g. "X" or "O"
Symbol = str


class MatchStatus(Enum):
    IN_PROGRESS = auto()
    WON = auto()
    DRAWN = auto()

    @property
    def is_terminal(self) -> bool:
        return self is not MatchStatus.IN_PROGRESS


class Outcome(NamedTuple):
    """Match state derived from the board: status plus the winning symbol."""

    status: MatchStatus
    winner: Optional[Symbol] = None

    @property
    def is_terminal(self) -> bool:
        return self.status.is_terminal

    @classmethod
    def won(cls, symbol: Symbol) -> "Outcome":
        return cls(MatchStatus.WON, symbol)

    @classmethod
    def drawn(cls) -> "Outcome":
        return cls(MatchStatus.DRAWN)

    @classmethod
    def in_progress(cls) -> "Outcome":
        return cls(MatchStatus.IN_PROGRESS)


def is_valid_cell(cell) -> bool:
    """Return True if cell is an integer index in 1..9 (bools excluded)."""
    if isinstance(cell, bool):
        return False
    if not isinstance(cell, (int, np.integer)):
        return False
    return 1 <= int(cell) <= NUM_CELLS


def is_valid_symbol(symbol) -> bool:
    """Return True if symbol is a single, non-blank character."""
    return isinstance(symbol, str) and len(symbol) == 1 and not symbol.isspace()
