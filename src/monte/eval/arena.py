"""
Engine-vs-engine games and strategy matches.

play_game() drives one game with an engine per seat. Engines keep their
trees between moves when asked to; a tree that never explored the move an
opponent actually played is rebuilt from the new position.

Arena plays two scoring strategies against each other in a two-player game,
alternating who goes first.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Sequence
import numpy as np

from ..errors import ChoiceNotFoundError
from ..games.base import Game, NO_WINNER
from ..mcts import MCTS, Node, ScoringStrategy, get_strategy
from ..utils.logging import Logger, MoveRecord


@dataclass
class GameResult:
    """Outcome of one game."""

    winner: int
    moves: list[Any] = field(default_factory=list)

    @property
    def num_moves(self) -> int:
        return len(self.moves)


@dataclass
class ArenaResult:
    """Results from a strategy match, from strategy A's perspective."""

    wins: int
    losses: int
    draws: int
    total_games: int
    win_rate: float

    @property
    def score(self) -> float:
        """Win rate counting draws as half."""
        return (self.wins + 0.5 * self.draws) / self.total_games if self.total_games > 0 else 0.0


def _advance(
    trees: dict[int, Node],
    engines: Sequence[MCTS],
    mover: int,
    move: Any,
    state: Game,
) -> None:
    """Move the other engines' trees past move; rebuild trees that never saw it."""
    by_key = {id(engine): engine for engine in engines}
    for key, tree in list(trees.items()):
        if key == mover:
            # advise_with_tree already committed this one
            continue
        try:
            tree.choose(move)
        except ChoiceNotFoundError:
            trees[key] = by_key[key].new_tree(state)


def play_game(
    game: Game,
    engines: Sequence[MCTS],
    cycles: int,
    reuse_tree: bool = True,
    logger: Optional[Logger] = None,
    on_move: Optional[Callable[[Game, Node], None]] = None,
) -> GameResult:
    """
    Play one game, engines[i] moving for player i+1.

    The same engine may sit in several seats; it then shares one tree.

    Args:
        game: Starting position (not modified)
        engines: One engine per player
        cycles: Simulation passes per move
        reuse_tree: Keep each engine's tree between moves
        logger: Optional logger for per-move records
        on_move: Optional callback(state, tree) after each move; tree is the
            mover's tree, committed to the move just played

    Returns:
        GameResult with the winner and the moves played
    """
    if len(engines) != game.num_players():
        raise ValueError(
            f"Need {game.num_players()} engines, got {len(engines)}"
        )

    state = game.copy()
    trees: dict[int, Node] = {}
    result = GameResult(winner=NO_WINNER)

    while state.legal_moves():
        player = state.turn()
        engine = engines[player - 1]

        key = id(engine)
        if not reuse_tree or key not in trees:
            trees[key] = engine.new_tree(state)
        tree = trees[key]

        start = time.perf_counter()
        choice = engine.advise_with_tree(tree, cycles)
        elapsed = time.perf_counter() - start
        if choice is None:
            break

        state.apply_move(choice)
        result.moves.append(choice)

        if logger is not None:
            logger.log_move(MoveRecord(
                move_number=result.num_moves,
                player=player,
                choice=choice,
                cycles=cycles,
                visits=tree.visits,
                win_rate=float(tree.wins[player - 1] / tree.visits) if tree.visits > 0 else 0.0,
                elapsed=elapsed,
            ))

        if on_move is not None:
            on_move(state, tree)

        if reuse_tree:
            _advance(trees, engines, key, choice, state)

    result.winner = state.winner()
    return result


class Arena:
    """
    Arena for strategy matches.

    Args:
        cycles: Simulation passes per move
        reuse_tree: Keep trees between moves
        rng: Random generator shared by both engines
    """

    def __init__(
        self,
        cycles: int = 1000,
        reuse_tree: bool = True,
        rng: Optional[np.random.Generator] = None,
    ):
        self.cycles = cycles
        self.reuse_tree = reuse_tree
        self.rng = rng if rng is not None else np.random.default_rng()

    def _engine(self, game: Game, strategy: ScoringStrategy | str) -> MCTS:
        if isinstance(strategy, str):
            strategy = get_strategy(strategy, rng=self.rng)
        return MCTS(game, strategy, rng=self.rng)

    def evaluate(
        self,
        game: Game,
        strategy_a: ScoringStrategy | str,
        strategy_b: ScoringStrategy | str,
        num_games: int = 10,
        progress_callback: Callable[[int, str], None] = None,
    ) -> ArenaResult:
        """
        Play strategy A against strategy B.

        Plays num_games games from game's position, alternating who goes
        first.

        Args:
            game: Two-player starting position
            strategy_a: Strategy under test
            strategy_b: Opponent strategy
            num_games: Number of games to play
            progress_callback: Optional callback(games_completed, result)

        Returns:
            ArenaResult from strategy A's perspective
        """
        if game.num_players() != 2:
            raise ValueError("Arena matches need a two-player game")

        engine_a = self._engine(game, strategy_a)
        engine_b = self._engine(game, strategy_b)

        wins = 0
        losses = 0
        draws = 0

        for i in range(num_games):
            # Alternate who plays first
            if i % 2 == 0:
                seat_a = 1
                outcome = play_game(game, [engine_a, engine_b], self.cycles, self.reuse_tree)
            else:
                seat_a = 2
                outcome = play_game(game, [engine_b, engine_a], self.cycles, self.reuse_tree)

            if outcome.winner == NO_WINNER:
                draws += 1
                result = "D"
            elif outcome.winner == seat_a:
                wins += 1
                result = "W"
            else:
                losses += 1
                result = "L"

            if progress_callback:
                progress_callback(i + 1, result)

        total = wins + losses + draws
        win_rate = wins / total if total > 0 else 0.0

        return ArenaResult(
            wins=wins,
            losses=losses,
            draws=draws,
            total_games=total,
            win_rate=win_rate,
        )
