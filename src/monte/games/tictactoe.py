"""
Tic-Tac-Toe game implementation.

Simple 3x3 game - perfect for checking the engine.
Should always draw once the engine is given enough cycles.

Rules:
- 3x3 board
- Players alternate placing their mark (player 1 = X, player 2 = O)
- First to get 3 in a row (horizontal, vertical, diagonal) wins
- If board fills with no winner, it's a draw
"""

from __future__ import annotations

import numpy as np

from .base import Game, NO_WINNER, register_game


BOARD_SIZE = 3
NUM_CELLS = BOARD_SIZE * BOARD_SIZE


@register_game("tictactoe")
class TicTacToe(Game[int]):
    """
    Tic-Tac-Toe position.

    Moves are cell indices (0-8), mapping to positions:
    0 | 1 | 2
    ---------
    3 | 4 | 5
    ---------
    6 | 7 | 8

    The board stores player ids (0 = empty).
    """

    # Winning lines (indices into flattened board)
    WINNING_LINES = [
        # Rows
        [0, 1, 2],
        [3, 4, 5],
        [6, 7, 8],
        # Columns
        [0, 3, 6],
        [1, 4, 7],
        [2, 5, 8],
        # Diagonals
        [0, 4, 8],
        [2, 4, 6],
    ]

    def __init__(self, board: np.ndarray = None, to_move: int = 1):
        if board is None:
            board = np.zeros(NUM_CELLS, dtype=np.int8)
        board = np.asarray(board, dtype=np.int8).reshape(-1)
        if board.shape != (NUM_CELLS,):
            raise ValueError(f"Board must have {NUM_CELLS} cells")
        self.board = board
        self.to_move = to_move

    def copy(self) -> TicTacToe:
        return TicTacToe(board=self.board.copy(), to_move=self.to_move)

    def num_players(self) -> int:
        return 2

    def turn(self) -> int:
        return self.to_move

    def legal_moves(self) -> list[int]:
        """Return empty cells, or nothing once someone has won."""
        if self.winner() != NO_WINNER:
            return []
        return [i for i in range(NUM_CELLS) if self.board[i] == 0]

    def apply_move(self, move: int) -> None:
        if move < 0 or move >= NUM_CELLS:
            raise ValueError(f"Invalid move {move}, must be 0-{NUM_CELLS - 1}")
        if self.board[move] != 0:
            raise ValueError(f"Cell {move} is already occupied")

        self.board[move] = self.to_move
        self.to_move = 2 if self.to_move == 1 else 1

    def winner(self) -> int:
        for line in self.WINNING_LINES:
            first = self.board[line[0]]
            if first != 0 and all(self.board[i] == first for i in line):
                return int(first)
        return NO_WINNER

    def render(self) -> str:
        """Render board as ASCII art."""
        symbols = {0: ".", 1: "X", 2: "O"}

        lines = []
        for r in range(BOARD_SIZE):
            row_str = " | ".join(
                symbols[int(self.board[r * BOARD_SIZE + c])]
                for c in range(BOARD_SIZE)
            )
            lines.append(f" {row_str} ")
            if r < BOARD_SIZE - 1:
                lines.append("-----------")

        return "\n".join(lines)


def create_game() -> TicTacToe:
    """Create an empty Tic-Tac-Toe board."""
    return TicTacToe()
