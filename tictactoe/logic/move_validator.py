"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from typing import Optional, List
from dataclasses import dataclass
from .game_state import GameState, BOARD_CELLS


class InvalidMove(Exception):
    """
    A move that breaks the rules.

    This is the only error a player can cause. It is returned to the
    caller (see MoveResult), not raised, and the caller simply ignores
    the input.
    """

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None

    def to_error(self) -> Optional[InvalidMove]:
        """Get the InvalidMove for a failed validation."""
        if self.is_valid:
            return None
        return InvalidMove(self.error_message or "Invalid move")


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. Cell index must be on the board (0-8)
    3. Can only place on empty cells
    """

    def validate_move(self, game_state: GameState, index: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            index: Cell to place the mark in (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if game is over
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        # Check if index is in valid range (bool is an int, but not a cell)
        if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index < BOARD_CELLS:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position {index!r}. Not a cell on the board."
            )

        # Check if cell is empty
        occupant = game_state.board[index]
        if occupant is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"That cell is already occupied by {occupant.value}"
            )

        # All checks passed!
        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game_state: GameState) -> List[int]:
        """
        Get all valid moves for the current player.

        Args:
            game_state: Current game state.

        Returns:
            List of valid cell indices.
        """
        if game_state.is_game_over:
            return []

        return game_state.get_empty_cells()
