"""
Monte - Monte Carlo Tree Search for any turn-based game.

Give the engine a position of any perfect-information game that implements
the Game interface, and it recommends a move by playing random games from
there and weighting the outcomes.

Included games:
- Tic-Tac-Toe
- Connect 4

Usage:
    from monte.games import get_game
    from monte.mcts import MCTS, UCB1

    game = get_game('tictactoe')
    mcts = MCTS(game, UCB1(1.41))

    # Fresh tree every move
    move = mcts.advise(game, 1000)

    # Or keep statistics between moves
    tree = mcts.new_tree(game)
    while (move := mcts.advise_with_tree(tree, 1000)) is not None:
        game.apply_move(move)
"""

__version__ = "0.1.0"

from . import errors
from . import games
from . import mcts
from . import eval
from . import utils

__all__ = [
    "errors",
    "games",
    "mcts",
    "eval",
    "utils",
    "__version__",
]
