"""
Exception hierarchy for the engine.

All errors are local and recoverable: the caller decides whether to re-prompt
a human or treat the failure as a programming error.
"""

from __future__ import annotations

from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ttt_engine.core.types import Outcome


class GameError(Exception):
    """Base class for every error raised by the engine."""


class InvalidMove(GameError, ValueError):
    """Cell out of the 1-9 range, already marked, or an unusable symbol."""

    def __init__(self, message: str, cell: Optional[object] = None):
        super().__init__(message)
        self.cell = cell


class MatchAlreadyOver(GameError, RuntimeError):
    """A move was submitted after the match reached a terminal state."""

    def __init__(self, outcome: "Outcome"):
        super().__init__(f"Match is already over ({outcome.status.name.lower()})")
        self.outcome = outcome


class NoMovesAvailable(GameError, LookupError):
    """A strategy was asked to choose on a full board."""
