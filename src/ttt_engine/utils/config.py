"""
Configuration and opponent registry.
"""

from typing import Optional

from ttt_engine.core.types import is_valid_symbol
from ttt_engine.strategies.strategy import StrategyKind


# ---------------------------------------------------------------------------
# Registries
# ---------------------------------------------------------------------------

# Difficulty -> (display name, strategy)
OPPONENTS = {
    "beginner": ("DJ Roomba", StrategyKind.AVOIDANT),
    "moderate": ("R2D2", StrategyKind.RANDOM),
    "advanced": ("Hal", StrategyKind.OPTIMAL),
}

FIRST_MOVE_CHOICES = ("human", "computer", "random")


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

DEFAULT_SYMBOLS = ("X", "O")
DEFAULT_OPPONENT = "advanced"


def other_symbol(symbol: str) -> str:
    """The symbol the computer takes against ``symbol``."""
    return DEFAULT_SYMBOLS[1] if symbol == DEFAULT_SYMBOLS[0] else DEFAULT_SYMBOLS[0]


class Config:
    """Play configuration with sensible defaults."""

    def __init__(
        self,
        opponent: str = DEFAULT_OPPONENT,
        human_symbol: str = DEFAULT_SYMBOLS[0],
        first: str = "human",
        rounds: int = 1,
        seed: Optional[int] = None,
    ):
        if opponent not in OPPONENTS:
            available = ", ".join(OPPONENTS.keys())
            raise ValueError(f"Unknown opponent: {opponent}. Available: {available}")
        if not is_valid_symbol(human_symbol):
            raise ValueError(f"Invalid marker {human_symbol!r}: must be one non-blank character")
        if first not in FIRST_MOVE_CHOICES:
            raise ValueError(f"Invalid first mover: {first}. Expected one of {FIRST_MOVE_CHOICES}")
        if rounds < 1:
            raise ValueError(f"Rounds must be positive, got {rounds}")

        self.opponent = opponent
        self.human_symbol = human_symbol
        self.first = first
        self.rounds = rounds
        self.seed = seed

        # Derive dependent values
        self.computer_symbol = other_symbol(human_symbol)
        self.opponent_name, self.strategy_kind = OPPONENTS[opponent]

    @property
    def symbols(self):
        return (self.human_symbol, self.computer_symbol)


# Default configuration
DEFAULT_CONFIG = Config()
