"""
MCTS search with random playouts.

One simulation pass:
1. Select: from the root, follow the highest scoring child until reaching
   an unvisited node or a node with a cached winner
2. Expand: an unvisited node gets one random playout and one child per
   legal move; a node without moves caches the playout's winner
3. Backup: add the pass's winner to every node on the path

After the passes, the move with the best win rate is recommended and the
tree is committed to it.
"""

from __future__ import annotations

import time
from typing import Any, Optional, Union
import numpy as np

from ..errors import DeadEndError
from ..games.base import Game
from .node import Node, check_winner
from .scoring import ScoringStrategy, get_strategy


class MCTS:
    """
    Monte Carlo Tree Search engine.

    Args:
        initial_game_state: Any position of the game; only its player count
            is read
        strategy: Scoring strategy, or its name (see list_strategies())
        exploration: UCB1 constant when strategy is given by name
        rng: Random generator for playouts, tie-breaks and the random
            strategy (a fresh unseeded one if None)
        logger: Optional Logger receiving a summary of each advise call
    """

    def __init__(
        self,
        initial_game_state: Game,
        strategy: Union[ScoringStrategy, str] = "ucb1",
        exploration: float = 1.41,
        rng: Optional[np.random.Generator] = None,
        logger=None,
    ):
        self.num_players = initial_game_state.num_players()
        self.rng = rng if rng is not None else np.random.default_rng()
        if isinstance(strategy, str):
            strategy = get_strategy(strategy, exploration=exploration, rng=self.rng)
        self.strategy = strategy
        self.logger = logger

    def new_tree(self, game_state: Game) -> Node:
        """Create a fresh tree for advise_with_tree()."""
        return Node.root(game_state, self.num_players)

    def advise(self, game_state: Game, cycles: int) -> Optional[Any]:
        """
        Recommend a move using a fresh tree.

        Args:
            game_state: Position to move from (not modified)
            cycles: Number of simulation passes

        Returns:
            Best move, or None if the position is terminal
        """
        return self.advise_with_tree(self.new_tree(game_state), cycles)

    def advise_with_tree(self, tree: Node, cycles: int) -> Optional[Any]:
        """
        Recommend a move, reusing and growing a caller-owned tree.

        On return the tree has been committed to the recommended move: it
        now holds that child's subtree and the siblings are gone.

        Args:
            tree: Tree rooted at the current position
            cycles: Number of simulation passes

        Returns:
            Best move, or None if the position is terminal (or the tree is
            still unexpanded after zero cycles)
        """
        if cycles < 0:
            raise ValueError("Cycles must be non-negative")

        if not tree.game_state.legal_moves():
            return None

        start = time.perf_counter()
        for _ in range(cycles):
            self.search(tree)

        turn = tree.game_state.turn()
        choice = tree.best_choice(self.rng)
        if choice is None:
            return None

        if self.logger is not None:
            self._log_advice(tree, turn, choice, cycles, time.perf_counter() - start)

        tree.choose(choice)
        return choice

    def search(self, node: Node) -> int:
        """
        Run one simulation pass from node.

        Returns:
            The winner resolved by this pass
        """
        path = [node]

        # Selection: descend while the node is expanded and not terminal
        while node.visits > 0 and node.winner is None:
            index = node.best_child_index(
                node.game_state.turn(), self.strategy, self.rng
            )
            if index is None:
                raise DeadEndError("Tried to branch on dead end node")
            node = node.children[index]
            path.append(node)

        if node.visits == 0:
            winner = self._expand(node)
        else:
            winner = node.winner

        # Backup
        for visited in reversed(path):
            visited.update(winner)

        return winner

    def _expand(self, node: Node) -> int:
        """Play out a copy of the node's position and create its children."""
        winner = node.game_state.copy().random_playout(self.rng)
        check_winner(winner, self.num_players)

        for move in node.game_state.legal_moves():
            next_state = node.game_state.copy()
            next_state.apply_move(move)
            node.children.append(
                Node(game_state=next_state, num_players=self.num_players, choice=move)
            )

        if not node.children:
            node.winner = winner

        return winner

    def _log_advice(
        self,
        tree: Node,
        player: int,
        choice: Any,
        cycles: int,
        elapsed: float,
    ) -> None:
        stats = next(s for s in tree.child_stats(player) if s["choice"] == choice)
        self.logger.log_debug(
            f"Player {player}: {choice!r} after {cycles} cycles "
            f"(win rate {stats['win_rate']:.3f} over {stats['visits']:.0f} visits, "
            f"root visits {tree.visits:.0f}, {elapsed * 1000:.1f}ms)"
        )
