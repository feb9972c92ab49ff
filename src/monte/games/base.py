"""
Abstract base class for games the search engine can play.

The engine doesn't know anything about the game rules. A game object is a
mutable position that can:
1. Report how many players there are and whose turn it is
2. List the legal moves (empty exactly when the game is over)
3. Apply a move in place, advancing the turn
4. Report the winner (0 = nobody, either still playing or a draw)
5. Copy itself, so the engine can explore branches without touching the
   caller's position
"""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import TypeVar, Generic, Optional
import numpy as np


# Type variable for a game's move
Move = TypeVar('Move')

# Winner id meaning "no winner": game still running, or drawn
NO_WINNER = 0


class Game(ABC, Generic[Move]):
    """
    Abstract base class for any turn-based perfect-information game.

    Players are identified by 1-indexed ids (1..num_players). Subclasses
    implement the five abstract methods; random_playout() is derived from
    them.
    """

    @abstractmethod
    def num_players(self) -> int:
        """Number of players. Must not change over the game's lifetime."""
        pass

    @abstractmethod
    def turn(self) -> int:
        """Id of the player to move."""
        pass

    @abstractmethod
    def legal_moves(self) -> list[Move]:
        """
        Return the legal moves from this position.

        Must be empty exactly when the position is terminal (won or drawn).
        A decided game must not report moves.
        """
        pass

    @abstractmethod
    def apply_move(self, move: Move) -> None:
        """
        Apply move in place and advance the turn.

        Behaviour is undefined if move was not in the last legal_moves()
        result.
        """
        pass

    @abstractmethod
    def winner(self) -> int:
        """Return the winning player's id, or NO_WINNER."""
        pass

    def copy(self) -> Game[Move]:
        """
        Create an independent copy of this position.

        Override if your state needs special copying logic.
        """
        return copy.deepcopy(self)

    def random_playout(self, rng: Optional[np.random.Generator] = None) -> int:
        """
        Play uniformly random legal moves until none remain.

        Mutates this position; the engine always calls it on a copy.

        Args:
            rng: Random generator (a fresh unseeded one if None)

        Returns:
            The final winner()
        """
        if rng is None:
            rng = np.random.default_rng()

        moves = self.legal_moves()
        while moves:
            self.apply_move(moves[int(rng.integers(len(moves)))])
            moves = self.legal_moves()

        return self.winner()

    def render(self) -> str:
        """
        Render the position as a string for display.

        Optional - default returns empty string.
        """
        return ""


# Registry of available games
_GAME_REGISTRY: dict[str, type[Game]] = {}


def register_game(name: str):
    """Decorator to register a game class."""
    def decorator(cls: type[Game]):
        _GAME_REGISTRY[name] = cls
        return cls
    return decorator


def get_game(name: str) -> Game:
    """Get a new game, in its starting position, by name."""
    if name not in _GAME_REGISTRY:
        available = ", ".join(_GAME_REGISTRY.keys())
        raise ValueError(f"Unknown game '{name}'. Available: {available}")
    return _GAME_REGISTRY[name]()


def list_games() -> list[str]:
    """List all registered games."""
    return list(_GAME_REGISTRY.keys())
