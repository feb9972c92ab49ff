"""Tests for the selection scoring strategies."""

import math

import numpy as np
import pytest

from monte.mcts import (
    ExploreFirst,
    RandomScore,
    UCB1,
    exploit,
    get_strategy,
    list_strategies,
)


class TestUCB1:
    def test_formula_has_no_square_root(self):
        strategy = UCB1(2.0)
        expected = 3.0 / 4.0 + 2.0 * (math.log(10.0) / 4.0)
        assert strategy(3.0, 4.0, 10.0) == pytest.approx(expected)

    def test_zero_exploration_is_exploitation(self):
        assert UCB1(0.0)(3.0, 4.0, 10.0) == exploit(3.0, 4.0, 10.0)

    def test_unvisited_children_score_high(self):
        strategy = UCB1(1.41)
        assert strategy(0.0, 1e-5, 5.0) > strategy(4.0, 4.0, 5.0)

    def test_negative_exploration_raises(self):
        with pytest.raises(ValueError):
            UCB1(-1.0)


class TestOtherStrategies:
    def test_explore_first(self):
        strategy = ExploreFirst()
        assert strategy(100.0, 4.0, 10.0) == 0.25
        assert strategy(0.0, 1.0, 10.0) > strategy(0.0, 2.0, 10.0)

    def test_random_in_unit_interval(self):
        strategy = RandomScore(np.random.default_rng(0))
        scores = [strategy(1.0, 1.0, 1.0) for _ in range(100)]
        assert all(0.0 <= s < 1.0 for s in scores)
        assert len(set(scores)) > 1

    def test_random_is_seeded(self):
        a = RandomScore(np.random.default_rng(5))
        b = RandomScore(np.random.default_rng(5))
        assert [a(0, 1, 1) for _ in range(5)] == [b(0, 1, 1) for _ in range(5)]

    def test_exploit(self):
        assert exploit(3.0, 4.0, 100.0) == 0.75


class TestRegistry:
    def test_list_strategies(self):
        assert list_strategies() == ["ucb1", "random", "explore-first"]

    def test_get_strategy(self):
        assert isinstance(get_strategy("ucb1"), UCB1)
        assert get_strategy("ucb1", exploration=0.7).exploration == 0.7
        assert isinstance(get_strategy("random"), RandomScore)
        assert isinstance(get_strategy("explore-first"), ExploreFirst)

    def test_random_strategy_uses_given_rng(self):
        rng = np.random.default_rng(0)
        assert get_strategy("random", rng=rng).rng is rng

    def test_unknown_strategy_raises(self):
        with pytest.raises(ValueError, match="Unknown strategy"):
            get_strategy("greedy")
