"""
Connect 4 game implementation.

Rules:
- 6 rows x 7 columns board
- Players drop pieces into columns
- First to get 4 in a row (horizontal, vertical, or diagonal) wins
- If board fills up with no winner, it's a draw

Board representation:
- 1 = player 1's pieces
- 2 = player 2's pieces
- 0 = empty
"""

from __future__ import annotations

import numpy as np

from .base import Game, NO_WINNER, register_game


# Board dimensions
ROWS = 6
COLS = 7
WIN_LENGTH = 4

# (dr, dc) directions checked through the last piece dropped
DIRECTIONS = [(0, 1), (1, 0), (1, 1), (1, -1)]


@register_game("connect4")
class Connect4(Game[int]):
    """
    Connect 4 position.

    Moves are column indices (0-6). Only the lines through the most recent
    piece can complete a win, so the winner is settled as each move is
    applied.
    """

    def __init__(
        self,
        board: np.ndarray = None,
        to_move: int = 1,
        winner: int = NO_WINNER,
    ):
        if board is None:
            board = np.zeros((ROWS, COLS), dtype=np.int8)
        if board.shape != (ROWS, COLS):
            raise ValueError(f"Board must be {ROWS}x{COLS}")
        self.board = board.astype(np.int8, copy=False)
        self.to_move = to_move
        self._winner = winner

    def copy(self) -> Connect4:
        return Connect4(
            board=self.board.copy(),
            to_move=self.to_move,
            winner=self._winner,
        )

    def num_players(self) -> int:
        return 2

    def turn(self) -> int:
        return self.to_move

    def legal_moves(self) -> list[int]:
        """Return columns that aren't full, or nothing once someone has won."""
        if self._winner != NO_WINNER:
            return []
        return [c for c in range(COLS) if self.board[0, c] == 0]

    def apply_move(self, move: int) -> None:
        """Drop the mover's piece in a column."""
        if move < 0 or move >= COLS:
            raise ValueError(f"Invalid move {move}, must be 0-{COLS-1}")

        if self.board[0, move] != 0:
            raise ValueError(f"Column {move} is full")

        # Find lowest empty row in column
        row = ROWS - 1
        while row >= 0 and self.board[row, move] != 0:
            row -= 1

        self.board[row, move] = self.to_move
        if self._completes_line(row, move):
            self._winner = self.to_move

        self.to_move = 2 if self.to_move == 1 else 1

    def winner(self) -> int:
        return self._winner

    def render(self) -> str:
        """Render board as ASCII art."""
        symbols = {0: ".", 1: "X", 2: "O"}

        lines = []
        lines.append(" " + " ".join(str(i) for i in range(COLS)))
        lines.append("-" * (COLS * 2 + 1))

        for r in range(ROWS):
            row_str = "|" + "|".join(
                symbols[int(self.board[r, c])] for c in range(COLS)
            ) + "|"
            lines.append(row_str)

        lines.append("-" * (COLS * 2 + 1))
        return "\n".join(lines)

    # --- Helper methods ---

    def _completes_line(self, row: int, col: int) -> bool:
        """Check if the piece at (row, col) is part of 4 in a row."""
        player = self.board[row, col]
        for dr, dc in DIRECTIONS:
            count = 1
            count += self._count_run(row, col, dr, dc, player)
            count += self._count_run(row, col, -dr, -dc, player)
            if count >= WIN_LENGTH:
                return True
        return False

    def _count_run(self, r: int, c: int, dr: int, dc: int, player: int) -> int:
        """Count player's pieces from (r,c) in direction (dr,dc), excluding (r,c)."""
        count = 0
        r, c = r + dr, c + dc
        while 0 <= r < ROWS and 0 <= c < COLS and self.board[r, c] == player:
            count += 1
            r, c = r + dr, c + dc
        return count


def create_game() -> Connect4:
    """Create an empty Connect 4 board."""
    return Connect4()
