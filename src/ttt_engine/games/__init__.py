"""
Games module - board and match state machine.
"""

from ttt_engine.games.board import Board
from ttt_engine.games.match import Match
from ttt_engine.games.board_rules import all_equal, board_full, line_values

__all__ = [
    "Board",
    "Match",
    "all_equal",
    "board_full",
    "line_values",
]
