"""Smoke tests for the command-line interface."""

from typer.testing import CliRunner

from monte.cli import app


runner = CliRunner()


class TestCLI:
    def test_list_games(self):
        result = runner.invoke(app, ["list-games"])
        assert result.exit_code == 0
        assert "tictactoe" in result.output
        assert "connect4" in result.output

    def test_play_tictactoe(self):
        result = runner.invoke(app, ["play", "tictactoe", "--cycles", "20", "--seed", "1"])
        assert result.exit_code == 0
        assert "Winner" in result.output or "Draw" in result.output

    def test_play_without_tree(self):
        result = runner.invoke(
            app, ["play", "tictactoe", "--cycles", "10", "--no-tree", "--seed", "2", "--show-tree"]
        )
        assert result.exit_code == 0
        assert "Tree-less game" in result.output

    def test_play_with_config(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("mcts:\n  cycles: 5\n  strategy: explore-first\nverbose: false\n")

        result = runner.invoke(app, ["play", "--config", str(path)])

        assert result.exit_code == 0
        assert "5 cycles per move" in result.output

    def test_play_unknown_game(self):
        result = runner.invoke(app, ["play", "chess"])
        assert result.exit_code == 1
        assert "Unknown game" in result.output

    def test_play_bad_cycles(self):
        result = runner.invoke(app, ["play", "tictactoe", "--cycles", "0"])
        assert result.exit_code == 1

    def test_arena(self):
        result = runner.invoke(
            app, ["arena", "tictactoe", "--games", "2", "--cycles", "10", "--seed", "0"]
        )
        assert result.exit_code == 0
        assert "Score" in result.output

    def test_arena_unknown_strategy(self):
        result = runner.invoke(app, ["arena", "--a", "greedy"])
        assert result.exit_code == 1
        assert "Unknown strategy" in result.output
