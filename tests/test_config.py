"""Tests for configuration loading and validation."""

import pytest

from monte.mcts import RandomScore, UCB1
from monte.utils import (
    ArenaConfig,
    Config,
    MCTSConfig,
    get_default_config,
    make_rng,
    make_strategy,
)


class TestConfig:
    def test_defaults(self):
        config = get_default_config()
        assert config.mcts.cycles == 1000
        assert config.mcts.strategy == "ucb1"
        assert config.play.game == "tictactoe"
        assert config.play.reuse_tree
        assert config.seed is None

    def test_invalid_values_raise(self):
        with pytest.raises(ValueError):
            MCTSConfig(cycles=0)
        with pytest.raises(ValueError):
            MCTSConfig(exploration=-0.1)
        with pytest.raises(ValueError):
            MCTSConfig(strategy="greedy")
        with pytest.raises(ValueError):
            ArenaConfig(games=0)

    def test_save_and_load(self, tmp_path):
        config = Config(mcts=MCTSConfig(cycles=50, strategy="explore-first"), seed=3)
        config.play.game = "connect4"
        path = tmp_path / "config.yaml"

        config.save(str(path))
        loaded = Config.load(str(path))

        assert loaded == config

    def test_load_partial_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("mcts:\n  cycles: 25\nplay:\n  reuse_tree: false\n")

        config = Config.load(str(path))

        assert config.mcts.cycles == 25
        assert config.mcts.strategy == "ucb1"
        assert not config.play.reuse_tree
        assert config.verbose

    def test_load_empty_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert Config.load(str(path)) == Config()


class TestMakeStrategy:
    def test_ucb1(self):
        strategy = make_strategy(MCTSConfig(exploration=0.3))
        assert isinstance(strategy, UCB1)
        assert strategy.exploration == 0.3

    def test_random_shares_rng(self):
        rng = make_rng(1)
        strategy = make_strategy(MCTSConfig(strategy="random"), rng)
        assert isinstance(strategy, RandomScore)
        assert strategy.rng is rng
