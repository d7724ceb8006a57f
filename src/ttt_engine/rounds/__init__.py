"""
Rounds module - repeated matches with alternating openers and a score.
"""

from ttt_engine.rounds.controller import RoundController, Scoreboard, random_first_mover

__all__ = [
    "RoundController",
    "Scoreboard",
    "random_first_mover",
]
