"""
Game state management for TicTacToe.
Tracks the board, current player, game status, and move history.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field


# Board cells are numbered 0-8, row by row
BOARD_CELLS = 9


class Player(Enum):
    """The two players in the game."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X


class GameMode(Enum):
    """Who controls the O player."""
    HUMAN_VS_HUMAN = "pvp"
    HUMAN_VS_COMPUTER = "pvc"


class GameStatus(Enum):
    """Where the game is in its lifecycle."""
    IN_PROGRESS = "in_progress"
    X_WON = "x_won"
    O_WON = "o_won"
    DRAW = "draw"

    @classmethod
    def won_by(cls, player: Player) -> "GameStatus":
        """Get the status for a win by the given player."""
        return cls.X_WON if player == Player.X else cls.O_WON

    @property
    def is_over(self) -> bool:
        """True for Won and Draw - no more moves are accepted."""
        return self != GameStatus.IN_PROGRESS

    @property
    def winner(self) -> Optional[Player]:
        """The winning player, or None for draws and unfinished games."""
        if self == GameStatus.X_WON:
            return Player.X
        if self == GameStatus.O_WON:
            return Player.O
        return None


# A board is 9 cells, None means empty
Board = List[Optional[Player]]


@dataclass
class Move:
    """
    A move in the game.
    """
    player: Player          # Who made the move
    index: int              # Cell (0-8)
    move_number: int        # Which move this is in the game (0-8)


@dataclass
class GameState:
    """
    The complete state of the TicTacToe game.

    Tracks:
    - The 9 cells of the board
    - Current player
    - Move history
    - Game status (in progress, won, draw) and the winning line
    """

    # The board - None means empty, otherwise the Player who owns the cell
    board: Board = field(default_factory=lambda: [None] * BOARD_CELLS)

    # Current player's turn
    current_player: Player = Player.X

    # Move history
    moves: List[Move] = field(default_factory=list)

    # Game result
    status: GameStatus = GameStatus.IN_PROGRESS
    winning_line: Optional[Tuple[int, int, int]] = None

    @property
    def is_game_over(self) -> bool:
        return self.status.is_over

    def place(self, index: int, player: Player) -> Move:
        """
        Write a mark into a cell and pass the turn.

        No rules are checked here (MoveValidator does that) and the
        status is not updated (WinChecker does that).

        Args:
            index: Cell index (0-8).
            player: Who is moving.

        Returns:
            The recorded Move.
        """
        self.board[index] = player

        move = Move(
            player=player,
            index=index,
            move_number=len(self.moves)
        )
        self.moves.append(move)

        self.current_player = player.opposite()

        return move

    def get_empty_cells(self) -> List[int]:
        """
        Get all empty cells on the board.

        Returns:
            List of cell indices, in ascending order.
        """
        return [i for i, cell in enumerate(self.board) if cell is None]

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        return GameState(
            board=list(self.board),
            current_player=self.current_player,
            moves=list(self.moves),
            status=self.status,
            winning_line=self.winning_line
        )

    def render(self) -> str:
        """Draw the board as text, empty cells show their 1-9 number."""
        symbols = [
            cell.value if cell is not None else str(i + 1)
            for i, cell in enumerate(self.board)
        ]
        rows = [" " + " | ".join(symbols[r:r + 3]) for r in (0, 3, 6)]
        return "\n---+---+---\n".join(rows)
