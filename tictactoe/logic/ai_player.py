"""
AI player for TicTacToe.
Uses the Minimax algorithm to choose the best move.
"""

import logging
from typing import Optional, Sequence, Union, List

from .game_state import GameState, Player, BOARD_CELLS
from .win_checker import WinChecker

logger = logging.getLogger(__name__)

# Score of a win on the very next move; a win found N moves deeper is worth
# WIN_SCORE - N, so faster wins and slower losses are preferred
WIN_SCORE = 10


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The AI will always play optimally - it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).
    """

    def __init__(self, player: Player = Player.O):
        """
        Initialize the AI player.

        Args:
            player: Which player the AI controls (default: O)
        """
        self.player = player
        self.win_checker = WinChecker()

        # Keep track of how many positions we've evaluated (for debugging)
        self.moves_evaluated = 0

    def get_best_move(self, board: Union[GameState, Sequence[Optional[Player]]]) -> int:
        """
        Get the best move for the AI's player.

        Every empty cell is tried in index order and scored with a full
        Minimax search. The first cell with the highest score wins, so
        ties go to the lowest index.

        Args:
            board: The current game state or its 9 cells. Never modified.

        Returns:
            Index (0-8) of the best move.

        Raises:
            ValueError: if the board is malformed, already won, or full.
        """
        if isinstance(board, GameState):
            board = board.board

        # Scratch copy - all speculative moves happen here
        cells = list(board)
        self._check_playable(cells)

        self.moves_evaluated = 0
        valid_moves = [i for i, cell in enumerate(cells) if cell is None]

        # Special case: if only one move, just take it
        if len(valid_moves) == 1:
            return valid_moves[0]

        best_score = float('-inf')
        best_move = valid_moves[0]

        for index in valid_moves:
            # Try this move
            cells[index] = self.player
            score = self._minimax(cells, depth=0, is_maximizing=False)
            cells[index] = None

            if score > best_score:
                best_score = score
                best_move = index

        logger.debug(
            "AI evaluated %d positions. Best move for %s: %d (score: %s)",
            self.moves_evaluated, self.player.value, best_move, best_score
        )

        return best_move

    def _check_playable(self, cells: List[Optional[Player]]):
        """Refuse boards the search has no answer for."""
        if len(cells) != BOARD_CELLS:
            raise ValueError(f"Board must have {BOARD_CELLS} cells, got {len(cells)}")
        if self.win_checker.check_winner(cells) is not None:
            raise ValueError("Cannot pick a move: the game is already won")
        if None not in cells:
            raise ValueError("Cannot pick a move: the board is full")

    def _minimax(
        self,
        cells: List[Optional[Player]],
        depth: int,
        is_maximizing: bool,
        alpha: float = float('-inf'),
        beta: float = float('inf')
    ) -> float:
        """
        Minimax algorithm with alpha-beta pruning.

        Every mark placed in `cells` is removed again before returning.

        Args:
            cells: Scratch board to search from.
            depth: How many moves after the root move we are.
            is_maximizing: True if it's the AI's turn.
            alpha: Alpha value for pruning.
            beta: Beta value for pruning.

        Returns:
            The score of the position.
        """
        self.moves_evaluated += 1

        # Check terminal states
        winner = self.win_checker.check_winner(cells)

        if winner == self.player:
            return WIN_SCORE - depth  # Win (prefer faster wins)
        elif winner is not None:
            return depth - WIN_SCORE  # Loss (prefer slower losses)
        elif None not in cells:
            return 0  # Draw

        if is_maximizing:
            max_score = float('-inf')
            for index in range(BOARD_CELLS):
                if cells[index] is not None:
                    continue
                cells[index] = self.player
                score = self._minimax(cells, depth + 1, False, alpha, beta)
                cells[index] = None
                max_score = max(max_score, score)
                alpha = max(alpha, score)
                if beta <= alpha:
                    break  # Prune
            return max_score
        else:
            opponent = self.player.opposite()
            min_score = float('inf')
            for index in range(BOARD_CELLS):
                if cells[index] is not None:
                    continue
                cells[index] = opponent
                score = self._minimax(cells, depth + 1, True, alpha, beta)
                cells[index] = None
                min_score = min(min_score, score)
                beta = min(beta, score)
                if beta <= alpha:
                    break  # Prune
            return min_score

    def get_move_suggestion(self, board: Union[GameState, Sequence[Optional[Player]]]) -> str:
        """
        Get a human-readable move suggestion.

        Args:
            board: The current game state or its 9 cells.

        Returns:
            A string describing the suggested move.
        """
        index = self.get_best_move(board)
        row, col = divmod(index, 3)

        return f"Play {self.player.value} at cell {index + 1} (row {row + 1}, column {col + 1})"


def best_move(board: Union[GameState, Sequence[Optional[Player]]], mark: Player) -> int:
    """Shortcut for AIPlayer(mark).get_best_move(board)."""
    return AIPlayer(mark).get_best_move(board)
