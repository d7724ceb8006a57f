"""
Opponent strategies.

One frozen Strategy value with a single choose() entry point that
dispatches on StrategyKind:

- RANDOM:   uniform over free cells
- AVOIDANT: never volunteers a win, never defends (beginner opponent)
- OPTIMAL:  win, else block, else center, else corner (one-ply heuristic)

Randomness comes from a caller-supplied random.Random so games are
reproducible under a seed.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional

from ttt_engine.core.errors import NoMovesAvailable
from ttt_engine.core.types import CENTER, Symbol, is_valid_symbol
from ttt_engine.games.board import Board
from ttt_engine.strategies.threats import threatened_cells


class StrategyKind(Enum):
    RANDOM = "random"
    AVOIDANT = "avoidant"
    OPTIMAL = "optimal"

    @classmethod
    def from_name(cls, name: str) -> "StrategyKind":
        try:
            return cls(name.strip().lower())
        except ValueError:
            available = ", ".join(k.value for k in cls)
            raise ValueError(f"Unknown strategy: {name}. Available: {available}") from None


def _pick(cells: List[int], rng: Optional[random.Random]) -> int:
    """Uniform choice over cells in ascending order."""
    ordered = sorted(cells)
    return (rng or random).choice(ordered)


def _choose_random(strategy: "Strategy", board: Board, free: List[int], rng) -> int:
    return _pick(free, rng)


def _choose_avoidant(strategy: "Strategy", board: Board, free: List[int], rng) -> int:
    to_avoid = threatened_cells(board, strategy.symbol)
    if not to_avoid:
        return _pick(free, rng)

    safe = [c for c in free if c not in to_avoid]
    if not safe:
        # Every free cell completes a line: forced to win
        return _pick(free, rng)
    return _pick(safe, rng)


def _choose_optimal(strategy: "Strategy", board: Board, free: List[int], rng) -> int:
    own = threatened_cells(board, strategy.symbol)
    if own:
        return own[0]

    theirs = threatened_cells(board, strategy.opponent)
    if theirs:
        return theirs[0]

    if board.is_free(CENTER):
        return CENTER

    corners = board.free_corners()
    if corners:
        return corners[0]

    return _pick(free, rng)


_CHOOSERS: Dict[StrategyKind, Callable[..., int]] = {
    StrategyKind.RANDOM: _choose_random,
    StrategyKind.AVOIDANT: _choose_avoidant,
    StrategyKind.OPTIMAL: _choose_optimal,
}


@dataclass(frozen=True)
class Strategy:
    """A decision rule bound to its own symbol and the opponent's."""

    kind: StrategyKind
    symbol: Symbol
    opponent: Symbol

    def __post_init__(self):
        if not isinstance(self.kind, StrategyKind):
            raise ValueError(f"Unknown strategy kind: {self.kind!r}")
        for s in (self.symbol, self.opponent):
            if not is_valid_symbol(s):
                raise ValueError(f"Invalid symbol {s!r}: must be one non-blank character")
        if self.symbol == self.opponent:
            raise ValueError(f"Symbols must be distinct, both are {self.symbol!r}")

    def choose(self, board: Board, rng: Optional[random.Random] = None) -> int:
        """
        Pick a free cell for ``symbol`` on ``board``.

        Args:
            board: Current board (not modified)
            rng: Random source for stochastic steps; module random if None

        Returns:
            Cell index in 1..9

        Raises:
            NoMovesAvailable: the board is full
        """
        free = sorted(board.free_cells())
        if not free:
            raise NoMovesAvailable(f"{self.kind.value} strategy has no free cell to choose")
        return _CHOOSERS[self.kind](self, board, free, rng)
