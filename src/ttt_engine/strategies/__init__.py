"""
Strategies module - opponent decision rules.

Provides the main entry points:
- Strategy.choose(): one cell for the bound symbol
- threatened_cells(): the shared win/block detector
"""

from ttt_engine.strategies.strategy import Strategy, StrategyKind
from ttt_engine.strategies.threats import threatened_cells

__all__ = [
    "Strategy",
    "StrategyKind",
    "threatened_cells",
]
