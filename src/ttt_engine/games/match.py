"""
Match - turn state machine for one game to completion.

States: IN_PROGRESS -> WON(symbol) | DRAWN. The status is always derived
from the board; the match itself only owns the turn cursor.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Set, Tuple

from ttt_engine.core.errors import InvalidMove, MatchAlreadyOver
from ttt_engine.core.types import MatchStatus, Outcome, Symbol, is_valid_symbol
from ttt_engine.games.board import Board

logger = logging.getLogger(__name__)


def _validate_symbols(symbols: Sequence[Symbol]) -> Tuple[Symbol, Symbol]:
    if len(symbols) != 2:
        raise ValueError(f"A match needs exactly two symbols, got {len(symbols)}")
    first, second = symbols
    for s in (first, second):
        if not is_valid_symbol(s):
            raise ValueError(f"Invalid symbol {s!r}: must be one non-blank character")
    if first == second:
        raise ValueError(f"Symbols must be distinct, both are {first!r}")
    return first, second


class Match:
    """
    Orchestrates one game: alternates movers, applies cells, halts on win/draw.

    Each submit() marks and then re-evaluates the board before returning,
    so no caller ever observes a marked board with a stale status.
    """

    __slots__ = ("board", "symbols", "first_mover", "_mover")

    def __init__(
        self,
        board: Board,
        symbols: Sequence[Symbol],
        first_mover: Optional[Symbol] = None,
    ):
        self.symbols = _validate_symbols(symbols)
        if first_mover is None:
            first_mover = self.symbols[0]
        self._check_member(first_mover)
        if not board.is_empty():
            raise ValueError("A match must start on an empty board")

        self.board = board
        self.first_mover = first_mover
        self._mover = first_mover

    def _check_member(self, symbol: Symbol) -> None:
        if symbol not in self.symbols:
            raise ValueError(f"{symbol!r} is not playing in this match {self.symbols}")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def current_mover(self) -> Symbol:
        return self._mover

    def opponent_of(self, symbol: Symbol) -> Symbol:
        self._check_member(symbol)
        return self.symbols[1] if symbol == self.symbols[0] else self.symbols[0]

    def free_cells(self) -> Set[int]:
        return self.board.free_cells()

    @property
    def move_count(self) -> int:
        return self.board.mark_count()

    def outcome(self) -> Outcome:
        winner = self.board.winner()
        if winner is not None:
            return Outcome.won(winner)
        if self.board.is_full():
            return Outcome.drawn()
        return Outcome.in_progress()

    @property
    def status(self) -> MatchStatus:
        return self.outcome().status

    @property
    def winner(self) -> Optional[Symbol]:
        return self.board.winner()

    def is_over(self) -> bool:
        return self.status.is_terminal

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def submit(self, cell: int) -> MatchStatus:
        """
        Apply the current mover's chosen cell.

        Returns:
            The new status.

        Raises:
            MatchAlreadyOver: the match is already won or drawn.
            InvalidMove: the cell is out of range or taken. Nothing changes.
        """
        before = self.outcome()
        if before.is_terminal:
            raise MatchAlreadyOver(before)

        mover = self._mover
        self.board.mark(cell, mover)
        logger.debug("%s marks cell %s", mover, cell)

        after = self.outcome()
        if after.status is MatchStatus.WON:
            logger.info("%s wins after %d moves", after.winner, self.move_count)
        elif after.status is MatchStatus.DRAWN:
            logger.info("Board full, match drawn")
        else:
            self._mover = self.opponent_of(mover)
        return after.status

    def restart(self, first_mover: Optional[Symbol] = None) -> None:
        """Clear the board and put the turn cursor back at the first mover."""
        if first_mover is not None:
            self._check_member(first_mover)
            self.first_mover = first_mover
        self.board.reset()
        self._mover = self.first_mover
