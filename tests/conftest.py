"""
Shared test fixtures for ttt_engine tests.

Design principles:
- Boards built from readable 9-character strings
- Seeded random sources so stochastic strategies are reproducible
- Minimal, focused fixtures
"""

import random
from typing import Callable, List

import pytest

from ttt_engine.games.board import Board
from ttt_engine.games.match import Match


def board_from(layout: str) -> Board:
    """
    Board from a layout string, row-major, '.' for empty.

    Whitespace and '/' row separators are ignored: "XX./.O./..."
    """
    chars = [c for c in layout if c not in " /\n"]
    return Board.from_marks(None if c == "." else c for c in chars)


def scripted(cells: List[int]) -> Callable[[Board], int]:
    """Mover replaying a fixed list of cells."""
    queue = list(cells)

    def _move(board: Board) -> int:
        return queue.pop(0)

    return _move


# =============================================================================
# Board Fixtures
# =============================================================================

@pytest.fixture
def board() -> Board:
    """Fresh empty board."""
    return Board()


@pytest.fixture
def drawn_board() -> Board:
    """Full board with no winning line: X O X / X X O / O X O."""
    return board_from("XOX/XXO/OXO")


# =============================================================================
# Match Fixtures
# =============================================================================

@pytest.fixture
def match(board: Board) -> Match:
    """X vs O on a fresh board, X to move."""
    return Match(board, ("X", "O"), first_mover="X")


# =============================================================================
# Random Fixtures
# =============================================================================

@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture(params=range(10))
def seeded_rng(request) -> random.Random:
    """A handful of independent seeds."""
    return random.Random(request.param)


# =============================================================================
# Builder Fixtures
# =============================================================================

@pytest.fixture
def make_board() -> Callable[[str], Board]:
    """Factory fixture wrapping board_from()."""
    return board_from


@pytest.fixture
def make_scripted() -> Callable[[List[int]], Callable[[Board], int]]:
    """Factory fixture wrapping scripted()."""
    return scripted
