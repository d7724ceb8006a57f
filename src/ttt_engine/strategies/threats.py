"""
Threat detection shared by the strategies.

A threatened cell is a free cell that would complete a winning line for a
given symbol. Called with the mover's own symbol it finds winning moves;
called with the opponent's symbol it finds cells that must be blocked.
"""

from __future__ import annotations

from typing import List

from ttt_engine.core.types import WINNING_LINES, Symbol
from ttt_engine.games.board import Board
from ttt_engine.games.board_rules import count_marks, line_values


def threatened_cells(board: Board, symbol: Symbol) -> List[int]:
    """
    Free cells completing a line for ``symbol``.

    Returned in line-scan order (rows, columns, diagonals) without
    duplicates, so ``[0]`` is deterministic. May be empty.
    """
    found: List[int] = []
    for line, values in zip(WINNING_LINES, line_values(board.cells)):
        if count_marks(values, symbol) != 2:
            continue
        for cell, value in zip(line, values):
            if value is None and int(cell) not in found:
                found.append(int(cell))
    return found
