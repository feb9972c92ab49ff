"""Tests for logging and tree display helpers."""

import random

import numpy as np

from monte.mcts import MCTS, UCB1
from monte.utils import Logger, build_tree, make_rng, print_tree, set_seed

from conftest import Nim


class TestLogger:
    def test_debug_messages_gated(self, capsys):
        Logger(verbose=True, debug=False).log_debug("hidden")
        assert "hidden" not in capsys.readouterr().out

        Logger(verbose=True, debug=True).log_debug("shown")
        assert "shown" in capsys.readouterr().out

    def test_quiet_logger_prints_nothing(self, capsys):
        logger = Logger(verbose=False, debug=True)
        logger.log_info("info")
        logger.log_debug("debug")
        assert capsys.readouterr().out == ""
        assert logger.log_file is None

    def test_engine_reports_advice(self, capsys):
        game = Nim(pile=2)
        engine = MCTS(game, UCB1(1.41), rng=make_rng(0), logger=Logger(debug=True))

        engine.advise(game, 20)

        out = capsys.readouterr().out
        assert "Player 1" in out
        assert "20 cycles" in out


class TestTreeDisplay:
    def test_build_tree_skips_unvisited(self):
        game = Nim(pile=2)
        engine = MCTS(game, UCB1(1.41), rng=make_rng(0))
        tree = engine.new_tree(game)
        engine.search(tree)

        assert len(build_tree(tree).children) == 0

        for _ in range(5):
            engine.search(tree)
        assert len(build_tree(tree).children) == 2

    def test_depth_limit(self):
        game = Nim(pile=4)
        engine = MCTS(game, UCB1(1.41), rng=make_rng(0))
        tree = engine.new_tree(game)
        for _ in range(50):
            engine.search(tree)

        shallow = build_tree(tree, max_depth=1)
        assert all(len(branch.children) == 0 for branch in shallow.children)

        deep = build_tree(tree, max_depth=2)
        assert any(len(branch.children) > 0 for branch in deep.children)

    def test_print_tree(self, capsys):
        game = Nim(pile=2)
        engine = MCTS(game, UCB1(1.41), rng=make_rng(0))
        tree = engine.new_tree(game)
        for _ in range(5):
            engine.search(tree)

        print_tree(tree)
        assert "winner=1" in capsys.readouterr().out


class TestSeed:
    def test_set_seed(self):
        set_seed(11)
        first = (random.random(), np.random.rand())
        set_seed(11)
        assert (random.random(), np.random.rand()) == first

    def test_make_rng(self):
        assert make_rng(4).random() == make_rng(4).random()
