"""
Game engine for TicTacToe.
Ties the game state, move validator, and win checker together
so every move is validated, applied, and scored in one step.
"""

import logging
from typing import Optional, Sequence, Tuple, List
from dataclasses import dataclass

from .game_state import GameState, GameStatus, Player, BOARD_CELLS
from .move_validator import MoveValidator, InvalidMove
from .win_checker import WinChecker, Line

logger = logging.getLogger(__name__)


@dataclass
class MoveResult:
    """
    Result of applying a move.

    On success `status` is the status after the move. On failure
    `error` holds the InvalidMove and `status` is the unchanged status.
    """
    is_valid: bool
    status: GameStatus
    winning_line: Optional[Line] = None
    error: Optional[InvalidMove] = None


class GameEngine:
    """
    Owns one live game.

    State machine:
        IN_PROGRESS --apply_move--> IN_PROGRESS | X_WON | O_WON | DRAW
        X_WON / O_WON / DRAW are terminal, only reset() leaves them.
    """

    def __init__(self, state: Optional[GameState] = None):
        self.state = state if state is not None else GameState()
        self.validator = MoveValidator()
        self.win_checker = WinChecker()

    @classmethod
    def from_board(
        cls,
        cells: Sequence[Optional[Player]],
        current_player: Optional[Player] = None
    ) -> "GameEngine":
        """
        Build an engine around an existing position.

        Args:
            cells: The 9 cells.
            current_player: Who moves next. If None, X when both players
                have the same number of marks, otherwise O.

        Returns:
            A GameEngine with its status already evaluated.
        """
        if len(cells) != BOARD_CELLS:
            raise ValueError(f"Board must have {BOARD_CELLS} cells, got {len(cells)}")

        board = list(cells)
        if current_player is None:
            x_count = board.count(Player.X)
            o_count = board.count(Player.O)
            current_player = Player.X if x_count == o_count else Player.O

        state = GameState(board=board, current_player=current_player)
        engine = cls(state)
        state.status, state.winning_line = engine.win_checker.evaluate(board)
        return engine

    # ==================== VIEWS ====================

    @property
    def board(self) -> Tuple[Optional[Player], ...]:
        """Snapshot of the board, safe to hand to the UI or the AI."""
        return tuple(self.state.board)

    @property
    def current_player(self) -> Player:
        return self.state.current_player

    @property
    def status(self) -> GameStatus:
        return self.state.status

    @property
    def winning_line(self) -> Optional[Line]:
        return self.state.winning_line

    @property
    def is_game_over(self) -> bool:
        return self.state.is_game_over

    def get_empty_cells(self) -> List[int]:
        return self.state.get_empty_cells()

    # ==================== ACTIONS ====================

    def apply_move(self, index: int, mark: Player) -> MoveResult:
        """
        Validate and apply a move, then update the game status.

        Args:
            index: Cell to play (0-8).
            mark: The mark to place.

        Returns:
            MoveResult. Invalid moves leave the game untouched.
        """
        validation = self.validator.validate_move(self.state, index)
        if not validation.is_valid:
            logger.debug("Rejected %s at %r: %s", mark.value, index, validation.error_message)
            return MoveResult(
                is_valid=False,
                status=self.state.status,
                winning_line=self.state.winning_line,
                error=validation.to_error()
            )

        self.state.place(index, mark)

        status, line = self.win_checker.evaluate(self.state.board)
        self.state.status = status
        self.state.winning_line = line

        if status.is_over:
            logger.info("Game over after %d moves: %s", len(self.state.moves), status.value)

        return MoveResult(is_valid=True, status=status, winning_line=line)

    def reset(self):
        """Clear the board for a new game. X moves first."""
        self.state = GameState()
