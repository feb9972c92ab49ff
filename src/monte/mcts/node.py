"""
MCTS Node data structure.

Each node represents a game position and stores:
- wins[p]: win credit for player p+1 over every pass through this node
- visits: number of passes through this node
- children: one node per legal move, created on the first visit
- winner: the cached outcome once the node is known to be terminal

A node owns its children outright; there are no parent links.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields
from typing import Any, Optional
import numpy as np

from ..errors import ChoiceNotFoundError, InvalidWinnerError
from ..games.base import Game, NO_WINNER
from .scoring import ScoringFn, exploit


# Added to a child's visits when scoring, so unvisited children can be scored
EPSILON = 1e-5

# Credit added per pass. Draws split it evenly between all players.
CREDIT = 1.0


def check_winner(winner: int, num_players: int) -> int:
    """Return winner if it is NO_WINNER or a player id, else raise."""
    if winner < NO_WINNER or winner > num_players:
        raise InvalidWinnerError(winner, num_players)
    return winner


@dataclass
class Node:
    """
    MCTS tree node.

    Children are created during expansion, one per legal move.
    """

    game_state: Game  # Position this node represents (owned copy)
    num_players: int

    choice: Any = None  # Move that led here (None at the root)

    # Statistics
    wins: np.ndarray = field(default=None)
    visits: float = 0.0

    children: list[Node] = field(default_factory=list)

    # Cached outcome of a terminal node
    winner: Optional[int] = None

    def __post_init__(self):
        if self.wins is None:
            self.wins = np.zeros(self.num_players, dtype=np.float64)

    @classmethod
    def root(cls, game_state: Game, num_players: Optional[int] = None) -> Node:
        """Create a statistics-free root for a copy of game_state."""
        if num_players is None:
            num_players = game_state.num_players()
        return cls(game_state=game_state.copy(), num_players=num_players)

    @property
    def is_terminal(self) -> bool:
        """True once the node's winner has been cached."""
        return self.winner is not None

    @property
    def is_expanded(self) -> bool:
        return len(self.children) > 0

    def update(self, winner: int) -> int:
        """
        Backpropagate one pass's outcome into this node.

        A win credits the winner; a draw (NO_WINNER) splits the credit
        across all players.

        Returns:
            winner, unchanged
        """
        check_winner(winner, self.num_players)

        if winner != NO_WINNER:
            self.wins[winner - 1] += CREDIT
        else:
            self.wins += CREDIT / self.num_players

        self.visits += CREDIT
        return winner

    def best_child_index(
        self,
        player: int,
        scoring: ScoringFn,
        rng: Optional[np.random.Generator] = None,
    ) -> Optional[int]:
        """
        Index of the child scoring highest for player.

        Ties are broken uniformly at random.

        Args:
            player: Id of the player choosing
            scoring: (wins, visits, parent_visits) -> score
            rng: Random generator for tie-breaking

        Returns:
            Child index, or None if the node has no children
        """
        if not self.children:
            return None

        best: list[int] = []
        best_score = float("-inf")

        for i, child in enumerate(self.children):
            score = scoring(
                float(child.wins[player - 1]),
                child.visits + EPSILON,
                self.visits,
            )
            if score > best_score:
                best = [i]
                best_score = score
            elif score == best_score:
                best.append(i)

        if len(best) == 1:
            return best[0]
        if rng is None:
            rng = np.random.default_rng()
        return best[int(rng.integers(len(best)))]

    def best_choice(self, rng: Optional[np.random.Generator] = None) -> Any:
        """
        Move with the best empirical win rate for the player to move.

        Exploration bonuses are ignored here. Returns None for a childless
        node.
        """
        index = self.best_child_index(self.game_state.turn(), exploit, rng)
        if index is None:
            return None
        return self.children[index].choice

    def choose(self, choice: Any) -> None:
        """
        Commit to choice: this node becomes the matching child.

        The child's subtree is kept and its siblings are dropped. The node
        object itself is updated in place, so callers holding it see the
        new root.

        Raises:
            ChoiceNotFoundError: If no child holds choice
        """
        for i, child in enumerate(self.children):
            if child.choice == choice:
                chosen = self.children.pop(i)
                break
        else:
            raise ChoiceNotFoundError(choice)

        for f in fields(self):
            setattr(self, f.name, getattr(chosen, f.name))

    def child_stats(self, player: Optional[int] = None) -> list[dict]:
        """
        Per-child statistics from player's point of view.

        Defaults to the player to move at this node.
        """
        if player is None:
            player = self.game_state.turn()

        stats = []
        for child in self.children:
            wins = float(child.wins[player - 1])
            stats.append({
                "choice": child.choice,
                "wins": wins,
                "visits": child.visits,
                "win_rate": wins / child.visits if child.visits > 0 else 0.0,
            })
        return stats

    def to_dict(self, max_depth: Optional[int] = None) -> dict:
        """
        Structured view of this node and its subtree, for debugging.

        Unvisited leaves are empty dicts and terminal nodes report their
        cached winner instead of their wins.
        """
        if not self.children and self.visits == 0:
            return {}
        if self.winner is not None:
            return {
                "choice": self.choice,
                "winner": self.winner,
                "visits": self.visits,
            }

        if max_depth is not None and max_depth <= 0:
            children = []
        else:
            next_depth = None if max_depth is None else max_depth - 1
            children = [child.to_dict(next_depth) for child in self.children]

        return {
            "choice": self.choice,
            "wins": self.wins.tolist(),
            "visits": self.visits,
            "children": children,
        }

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), default=repr)

    def __repr__(self) -> str:
        return (
            f"Node(choice={self.choice!r}, visits={self.visits}, "
            f"children={len(self.children)}, winner={self.winner})"
        )
