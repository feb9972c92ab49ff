"""Small games with known outcomes, shared by the tests."""

from __future__ import annotations

import numpy as np
import pytest

from monte.games import Game, NO_WINNER


class SingleMoveWin(Game[str]):
    """One legal move; playing it wins for the mover."""

    def __init__(self):
        self.played = False

    def num_players(self) -> int:
        return 2

    def turn(self) -> int:
        return 2 if self.played else 1

    def legal_moves(self) -> list[str]:
        return [] if self.played else ["win"]

    def apply_move(self, move: str) -> None:
        self.played = True

    def winner(self) -> int:
        return 1 if self.played else NO_WINNER


class ForcedDraw(Game[int]):
    """Players alternate picking 0 or 1 for a fixed number of turns. Always a draw."""

    def __init__(self, length: int = 4, players: int = 2):
        self.length = length
        self.players = players
        self.played = 0

    def num_players(self) -> int:
        return self.players

    def turn(self) -> int:
        return self.played % self.players + 1

    def legal_moves(self) -> list[int]:
        return [] if self.played >= self.length else [0, 1]

    def apply_move(self, move: int) -> None:
        self.played += 1

    def winner(self) -> int:
        return NO_WINNER


class Finished(Game[int]):
    """A game that is over before it starts."""

    def __init__(self, decided: int = NO_WINNER):
        self.decided = decided
        self.legal_calls = 0

    def num_players(self) -> int:
        return 2

    def turn(self) -> int:
        return 1

    def legal_moves(self) -> list[int]:
        self.legal_calls += 1
        return []

    def apply_move(self, move: int) -> None:
        raise ValueError("Game is over")

    def winner(self) -> int:
        return self.decided


class Nim(Game[int]):
    """Take 1 or 2 from a pile; whoever takes the last stone wins."""

    def __init__(self, pile: int = 4, players: int = 2):
        self.pile = pile
        self.players = players
        self.to_move = 1
        self.last_mover = NO_WINNER

    def num_players(self) -> int:
        return self.players

    def turn(self) -> int:
        return self.to_move

    def legal_moves(self) -> list[int]:
        return [take for take in (1, 2) if take <= self.pile]

    def apply_move(self, move: int) -> None:
        self.pile -= move
        self.last_mover = self.to_move
        self.to_move = self.to_move % self.players + 1

    def winner(self) -> int:
        return self.last_mover if self.pile == 0 else NO_WINNER


class BadWinner(SingleMoveWin):
    """Reports a winner id that doesn't exist."""

    def winner(self) -> int:
        return 7 if self.played else NO_WINNER


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(42)
