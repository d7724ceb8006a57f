"""
Tests for ttt_engine.strategies.strategy

Tests the random, avoidant and optimal opponents.
"""

import random

import pytest

from ttt_engine.core.errors import NoMovesAvailable
from ttt_engine.strategies.strategy import Strategy, StrategyKind


def _strategy(kind: StrategyKind, symbol: str = "X") -> Strategy:
    return Strategy(kind, symbol, "O" if symbol == "X" else "X")


class TestStrategyKind:
    """StrategyKind parsing."""

    @pytest.mark.parametrize("name,kind", [
        ("random", StrategyKind.RANDOM),
        ("Avoidant", StrategyKind.AVOIDANT),
        (" OPTIMAL ", StrategyKind.OPTIMAL),
    ])
    def test_from_name(self, name, kind):
        assert StrategyKind.from_name(name) is kind

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Available"):
            StrategyKind.from_name("minimax")


class TestStrategyValue:
    """Strategy construction and immutability."""

    def test_frozen(self):
        s = _strategy(StrategyKind.RANDOM)
        with pytest.raises(AttributeError):
            s.symbol = "Z"

    def test_equal_symbols_rejected(self):
        with pytest.raises(ValueError):
            Strategy(StrategyKind.OPTIMAL, "X", "X")

    def test_bad_kind_rejected(self):
        with pytest.raises(ValueError):
            Strategy("optimal", "X", "O")

    @pytest.mark.parametrize("kind", list(StrategyKind))
    def test_every_kind_chooses_a_free_cell(self, kind, make_board, seeded_rng):
        b = make_board("XO./.X./O..")
        assert _strategy(kind).choose(b, seeded_rng) in b.free_cells()

    @pytest.mark.parametrize("kind", list(StrategyKind))
    def test_full_board_raises(self, kind, drawn_board):
        with pytest.raises(NoMovesAvailable):
            _strategy(kind).choose(drawn_board, random.Random(0))

    @pytest.mark.parametrize("kind", list(StrategyKind))
    def test_choose_does_not_mark(self, kind, make_board):
        b = make_board("XO./.../...")
        _strategy(kind).choose(b, random.Random(0))
        assert b.free_cells() == set(range(3, 10))

    def test_default_random_source(self, board):
        """Without an rng the module-level random functions are used."""
        assert _strategy(StrategyKind.RANDOM).choose(board) in range(1, 10)


class TestRandomStrategy:
    """RANDOM picks uniformly among free cells."""

    def test_only_free_cells(self, make_board, seeded_rng):
        b = make_board("XOX/OX./...")
        s = _strategy(StrategyKind.RANDOM)
        for _ in range(20):
            assert s.choose(b, seeded_rng) in b.free_cells()

    def test_reproducible_with_seed(self, board):
        s = _strategy(StrategyKind.RANDOM)
        first = [s.choose(board, random.Random(7)) for _ in range(5)]
        again = [s.choose(board, random.Random(7)) for _ in range(5)]
        assert first == again

    def test_covers_all_free_cells(self, board, rng):
        s = _strategy(StrategyKind.RANDOM)
        seen = {s.choose(board, rng) for _ in range(300)}
        assert seen == set(range(1, 10))


class TestAvoidantStrategy:
    """AVOIDANT never volunteers a win unless forced."""

    def test_avoids_own_winning_cell(self, make_board, seeded_rng):
        b = make_board("XX./.O./O..")
        s = _strategy(StrategyKind.AVOIDANT)
        for _ in range(20):
            cell = s.choose(b, seeded_rng)
            assert cell != 3
            assert cell in b.free_cells()

    def test_does_not_defend(self, make_board, rng):
        """Blocking is not preferred: other cells get picked too."""
        b = make_board("OO./.X./...")
        s = _strategy(StrategyKind.AVOIDANT)
        seen = {s.choose(b, rng) for _ in range(200)}
        assert seen == b.free_cells()

    def test_no_threat_uses_all_free_cells(self, make_board, rng):
        b = make_board("X../.../..O")
        s = _strategy(StrategyKind.AVOIDANT)
        seen = {s.choose(b, rng) for _ in range(300)}
        assert seen == b.free_cells()

    def test_forced_completion(self, make_board, seeded_rng):
        """Only self-completing cells left: still returns a free cell."""
        b = make_board("XX./OOX/OXO")
        assert _strategy(StrategyKind.AVOIDANT).choose(b, seeded_rng) == 3

    def test_forced_among_several(self, make_board, seeded_rng):
        """Every free cell completes a line for X."""
        # X X . / X O O / . O X  ->  3 completes row 1, 7 completes column 1
        b = make_board("XX./XOO/.OX")
        assert _strategy(StrategyKind.AVOIDANT).choose(b, seeded_rng) in {3, 7}


class TestOptimalStrategy:
    """OPTIMAL: win, block, center, corner, random."""

    def test_takes_win_over_block(self, make_board, seeded_rng):
        """Own two-in-a-row is completed even when the opponent threatens."""
        b = make_board("XX./OO./X..")
        assert _strategy(StrategyKind.OPTIMAL, "O").choose(b, seeded_rng) == 6

    def test_takes_win(self, make_board, seeded_rng):
        b = make_board("X.O/XO./...")
        assert _strategy(StrategyKind.OPTIMAL, "X").choose(b, seeded_rng) == 7

    def test_first_win_in_scan_order(self, make_board):
        b = make_board("X.X/.O./XO.")
        # row 1 -> 2 comes before column 1 -> 4
        assert _strategy(StrategyKind.OPTIMAL, "X").choose(b) == 2

    def test_blocks(self, make_board, seeded_rng):
        b = make_board("XX./.O./...")
        assert _strategy(StrategyKind.OPTIMAL, "O").choose(b, seeded_rng) == 3

    def test_blocks_diagonal(self, make_board):
        b = make_board("X.O/.X./...")
        assert _strategy(StrategyKind.OPTIMAL, "O").choose(b) == 9

    def test_takes_center(self, make_board, seeded_rng):
        b = make_board("X../.../...")
        assert _strategy(StrategyKind.OPTIMAL, "O").choose(b, seeded_rng) == 5

    def test_opening_move_is_center(self, board):
        assert _strategy(StrategyKind.OPTIMAL).choose(board) == 5

    def test_takes_first_free_corner(self, make_board, seeded_rng):
        b = make_board("O../.X./..X")
        # X's 5-9 diagonal is blocked by O at 1: no threats, center taken
        assert _strategy(StrategyKind.OPTIMAL, "O").choose(b, seeded_rng) == 3

    def test_corner_order(self, make_board):
        b = make_board("OXO/.X./.O.")
        # No threats either way, center taken: corners 1 and 3 are gone
        assert _strategy(StrategyKind.OPTIMAL, "X").choose(b) == 7

    def test_random_fallback(self, make_board, seeded_rng):
        """No threats, center and corners taken: a remaining edge."""
        b = make_board("XXO/OOX/X.O")
        assert _strategy(StrategyKind.OPTIMAL, "X").choose(b, seeded_rng) == 8

    def test_one_ply_limitation(self, make_board):
        """Greedy heuristic walks into a fork: it does not look ahead."""
        # X opens a corner, O takes center, X takes the opposite corner.
        b = make_board("X../.O./..X")
        # O plays the first free corner, allowing X a fork
        assert _strategy(StrategyKind.OPTIMAL, "O").choose(b) == 3
