"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from typing import Optional, Sequence, Tuple
from .game_state import GameStatus, Player


Line = Tuple[int, int, int]

# All possible winning lines, as cell indices
WINNING_LINES: Tuple[Line, ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally)

    Works on any 9-cell sequence, so the AI can use it on
    its scratch boards too.
    """

    WINNING_LINES = WINNING_LINES

    def check_winner(self, board: Sequence[Optional[Player]]) -> Optional[Player]:
        """
        Check if there's a winner.

        Args:
            board: The 9 cells.

        Returns:
            The winning Player, or None if no winner yet.
        """
        line = self.get_winning_line(board)
        return board[line[0]] if line is not None else None

    def get_winning_line(self, board: Sequence[Optional[Player]]) -> Optional[Line]:
        """
        Get the winning line if there is one.

        Lines are checked in WINNING_LINES order and the first match wins.

        Args:
            board: The 9 cells.

        Returns:
            The winning line as a tuple of indices, or None.
        """
        for a, b, c in self.WINNING_LINES:
            if board[a] is not None and board[a] == board[b] == board[c]:
                return (a, b, c)
        return None

    def check_draw(self, board: Sequence[Optional[Player]]) -> bool:
        """
        Check if the game is a draw.

        A draw occurs when all cells are filled AND there is no winner.
        """
        if self.check_winner(board) is not None:
            return False

        return all(cell is not None for cell in board)

    def evaluate(self, board: Sequence[Optional[Player]]) -> Tuple[GameStatus, Optional[Line]]:
        """
        Classify a board.

        Args:
            board: The 9 cells.

        Returns:
            (status, winning_line) - winning_line is None unless someone won.
        """
        line = self.get_winning_line(board)

        if line is not None:
            return GameStatus.won_by(board[line[0]]), line
        if all(cell is not None for cell in board):
            return GameStatus.DRAW, None

        return GameStatus.IN_PROGRESS, None
