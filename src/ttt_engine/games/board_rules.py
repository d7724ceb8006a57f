"""
NumPy utilities for the 3x3 board.

The board is a flat object array of nine cells holding either None (empty)
or a symbol string. Cell ``n`` (1..9) lives at index ``n - 1``.
"""

from __future__ import annotations

from typing import List, Optional

import numpy as np

from ttt_engine.core.types import NUM_CELLS, WINNING_LINES

# Zero-based view of the winning-line table for fancy indexing
_LINE_INDICES = WINNING_LINES.astype(np.intp) - 1


def empty_cells() -> np.ndarray:
    """Return a fresh flat board with every cell empty."""
    return np.full(NUM_CELLS, None, dtype=object)


def all_equal(line: np.ndarray) -> bool:
    """
    Return True if:
    - line is nonempty
    - first value is not None
    - all values equal the first
    """
    if line.size == 0:
        return False

    first = line[0]
    if first is None:
        return False

    return bool(np.all(line == first))


def line_values(cells: np.ndarray) -> np.ndarray:
    """
    Values of all eight winning lines as an (8, 3) array, in scan order.
    Fancy indexing copies, so callers may not write back through it.
    """
    return cells[_LINE_INDICES]


def line_owner(values: np.ndarray) -> Optional[str]:
    """Symbol filling every cell of one line, or None."""
    return values[0] if all_equal(values) else None


def count_marks(values: np.ndarray, symbol: str) -> int:
    """Number of cells in ``values`` holding ``symbol``."""
    return int(np.count_nonzero(values == symbol))


def empty_indices(cells: np.ndarray) -> List[int]:
    """Cell numbers (1..9) of the empty cells, ascending."""
    return [i + 1 for i, v in enumerate(cells) if v is None]


def board_full(cells: np.ndarray) -> bool:
    """
    Return True if the board has no None values.
    Python-level scan is fastest for None checks.
    """
    return all(x is not None for x in cells.flat)
