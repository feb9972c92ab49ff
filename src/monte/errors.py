"""
Exceptions raised when a caller breaks the game or engine contract.

None of these are raised for ordinary play: a terminal position makes the
engine return None, and a draw is simply winner 0.
"""

from __future__ import annotations


class MonteError(Exception):
    """Base class for engine contract violations."""


class ChoiceNotFoundError(MonteError, LookupError):
    """A tree was asked to commit to a move that none of its children hold."""

    def __init__(self, choice):
        super().__init__(f"The node does not include choice {choice!r}")
        self.choice = choice


class DeadEndError(MonteError, RuntimeError):
    """Tried to branch on a visited node that has neither children nor a winner."""


class InvalidWinnerError(MonteError, ValueError):
    """A game reported a winner id outside 0..num_players."""

    def __init__(self, winner: int, num_players: int):
        super().__init__(
            f"Winner {winner} is not 0 or a player id in 1..{num_players}"
        )
        self.winner = winner
        self.num_players = num_players
