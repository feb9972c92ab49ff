"""
Game implementations for the search engine.

Each game implements the Game interface from base.py.
"""

from .base import (
    Game,
    Move,
    NO_WINNER,
    register_game,
    get_game,
    list_games,
)

# Import games to register them
from . import connect4
from . import tictactoe
from .connect4 import Connect4
from .tictactoe import TicTacToe

__all__ = [
    "Game",
    "Move",
    "NO_WINNER",
    "register_game",
    "get_game",
    "list_games",
    "Connect4",
    "TicTacToe",
]
