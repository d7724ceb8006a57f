"""
Board - the 3x3 grid of cells.

Cells are numbered 1..9 row-major. Each cell is either empty (None) or
holds one symbol. A marked cell is only cleared by reset().
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Set

import numpy as np

from ttt_engine.core.errors import InvalidMove
from ttt_engine.core.types import CORNERS, Symbol, is_valid_cell, is_valid_symbol
from ttt_engine.games.board_rules import (
    board_full,
    empty_cells,
    empty_indices,
    line_owner,
    line_values,
)

EMPTY_STRING = " "

GUIDE = "\n".join([
    " ----------- ",
    "| 1 | 2 | 3 |",
    "|---+---+---|",
    "| 4 | 5 | 6 |",
    "|---+---+---|",
    "| 7 | 8 | 9 |",
    " ----------- ",
])


class Board:
    """Fixed 3x3 board backed by a flat object array."""

    __slots__ = ("cells",)

    def __init__(self):
        self.cells = empty_cells()

    def __getitem__(self, cell: int) -> Optional[Symbol]:
        return self.marker_at(cell)

    def __repr__(self) -> str:
        marks = "".join(EMPTY_STRING if v is None else v for v in self.cells)
        return f"Board({marks!r})"

    @classmethod
    def from_marks(cls, marks: Iterable[Optional[Symbol]]) -> "Board":
        """
        Build a board directly from nine cell values (None or " " for empty).

        Skips turn-order rules, so it can express positions unreachable in
        play. Meant for tests and analysis tools.
        """
        values = [None if m in (None, EMPTY_STRING) else m for m in marks]
        if len(values) != 9:
            raise ValueError(f"Expected 9 cells, got {len(values)}")
        board = cls()
        for cell, symbol in enumerate(values, start=1):
            if symbol is not None:
                board.mark(cell, symbol)
        return board

    def copy(self) -> "Board":
        b = Board.__new__(Board)
        b.cells = self.cells.copy()
        return b

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def marker_at(self, cell: int) -> Optional[Symbol]:
        if not is_valid_cell(cell):
            raise InvalidMove(f"Cell {cell!r} is out of range (1-9)", cell)
        return self.cells[int(cell) - 1]

    def is_free(self, cell: int) -> bool:
        return is_valid_cell(cell) and self.cells[int(cell) - 1] is None

    def free_cells(self) -> Set[int]:
        return set(empty_indices(self.cells))

    def free_corners(self) -> List[int]:
        """Empty corners in fixed order 1, 3, 7, 9."""
        return [c for c in CORNERS if self.cells[c - 1] is None]

    def is_empty(self) -> bool:
        return all(v is None for v in self.cells)

    def is_full(self) -> bool:
        return board_full(self.cells)

    def mark_count(self) -> int:
        return sum(v is not None for v in self.cells)

    def line_owner(self, line: Iterable[int]) -> Optional[Symbol]:
        """
        Symbol that marks every cell of ``line``, or None.

        Raises:
            InvalidMove: line is not three cells in 1..9.
        """
        cells = list(line)
        if len(cells) != 3 or not all(is_valid_cell(c) for c in cells):
            raise InvalidMove(f"Line {tuple(cells)!r} must be three cells in 1-9")
        idx = np.fromiter((int(c) - 1 for c in cells), dtype=np.intp)
        return line_owner(self.cells[idx])

    def winner(self) -> Optional[Symbol]:
        """
        Symbol owning the first completed line in scan order
        (rows, then columns, then diagonals), or None.
        """
        for values in line_values(self.cells):
            owner = line_owner(values)
            if owner is not None:
                return owner
        return None

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def mark(self, cell: int, symbol: Symbol) -> None:
        """
        Mark an empty cell with ``symbol``.

        Raises:
            InvalidMove: cell out of range, already marked, or bad symbol.
                         The board is left untouched.
        """
        if not is_valid_symbol(symbol):
            raise InvalidMove(f"Invalid symbol {symbol!r}", cell)
        if not is_valid_cell(cell):
            raise InvalidMove(f"Cell {cell!r} is out of range (1-9)", cell)

        i = int(cell) - 1
        if self.cells[i] is not None:
            raise InvalidMove(f"Cell {cell} is already marked by {self.cells[i]}", cell)

        self.cells[i] = symbol

    def reset(self) -> None:
        """Empty all nine cells in place."""
        self.cells[:] = None

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def state_string(self) -> str:
        strings = [EMPTY_STRING if v is None else v for v in self.cells]
        lines = ["╭───┬───┬───╮"]
        for i in range(3):
            row = "│ " + " │ ".join(strings[i * 3:i * 3 + 3]) + " │"
            lines.append(row)
            if i < 2:
                lines.append("├───┼───┼───┤")
        lines.append("╰───┴───┴───╯")
        return "\n".join(lines)

    @staticmethod
    def guide_string() -> str:
        """Cell numbering guide shown to human players."""
        return GUIDE
