"""
Game session for TicTacToe.

Sits between a front-end and the game engine:
- Turns clicks into moves for whoever's turn it is
- Schedules the computer's reply after a short "thinking" pause
- Keeps the score across games
- Drops a computer reply that was scheduled before a reset
"""

import logging
from typing import Any, Callable, List, Optional, Tuple

from .config import GameConfig
from .logic.ai_player import AIPlayer
from .logic.engine import GameEngine, MoveResult
from .logic.game_state import GameMode, GameStatus, Player
from .logic.move_validator import InvalidMove
from .logic.scoreboard import ScoreBoard

logger = logging.getLogger(__name__)

# scheduler(delay_ms, callback) - runs callback later, e.g. Tk's root.after
Scheduler = Callable[[int, Callable[[], None]], Any]


def run_now(delay_ms: int, callback: Callable[[], None]):
    """Scheduler that ignores the delay and runs the callback straight away."""
    callback()


class GameSession:
    """
    One series of games between two humans or a human and the computer.

    Game flow (Player vs Computer):
    1. Human (X) clicks a cell
    2. Session applies the move and, if the game goes on, schedules the computer
    3. Clicks are ignored while the computer is thinking
    4. Computer (O) picks its move with Minimax and the session applies it
    5. Repeat until someone wins or it's a draw
    """

    def __init__(
        self,
        mode: GameMode = GameMode.HUMAN_VS_HUMAN,
        scheduler: Optional[Scheduler] = None,
        config: type = GameConfig,
        delay_ms: Optional[int] = None
    ):
        """
        Initialize the session.

        Args:
            mode: Who controls O.
            scheduler: How to run the computer's move later (default: right away).
            config: Game settings.
            delay_ms: Computer "thinking" pause, overrides the config value.
        """
        self.config = config
        self.mode = mode
        self.scheduler = scheduler if scheduler is not None else run_now
        self.delay_ms = config.COMPUTER_DELAY_MS if delay_ms is None else delay_ms

        self.engine = GameEngine()
        self.scores = ScoreBoard()
        self.ai = AIPlayer(config.COMPUTER_PLAYER)

        # True between the human's move and the computer's reply
        self.computer_pending = False

        # Bumped on every reset; scheduled computer moves from an older
        # generation are dropped
        self._generation = 0

        self._listeners: List[Callable[[], None]] = []

    # ==================== VIEWS ====================

    @property
    def board(self) -> Tuple[Optional[Player], ...]:
        return self.engine.board

    @property
    def current_player(self) -> Player:
        return self.engine.current_player

    @property
    def status(self) -> GameStatus:
        return self.engine.status

    @property
    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        return self.engine.winning_line

    @property
    def vs_computer(self) -> bool:
        return self.mode == GameMode.HUMAN_VS_COMPUTER

    def accepts_input(self) -> bool:
        """True if a click on an empty cell would be played right now."""
        if self.computer_pending or self.engine.is_game_over:
            return False
        return not self.vs_computer or self.current_player == self.config.HUMAN_PLAYER

    def player_name(self, player: Player) -> str:
        """Display name of a player in the current mode."""
        if self.vs_computer:
            return "Player" if player == self.config.HUMAN_PLAYER else "Computer"
        return "Player 1" if player == self.config.FIRST_PLAYER else "Player 2"

    def status_text(self) -> str:
        """One-line description of the game for a status bar."""
        status = self.engine.status

        if status == GameStatus.DRAW:
            return "It's a draw!"
        if status.is_over:
            return f"{self.player_name(status.winner)} wins!"
        if self.computer_pending:
            return "Computer is thinking..."
        if self.vs_computer:
            if self.current_player == self.config.HUMAN_PLAYER:
                return "Your turn"
            return "Computer's turn"
        return f"Player {self.current_player.value}'s turn"

    def add_listener(self, callback: Callable[[], None]):
        """Call `callback` with no arguments after every state change."""
        self._listeners.append(callback)

    # ==================== ACTIONS ====================

    def handle_cell_click(self, index: int) -> MoveResult:
        """
        Play the current player's mark at `index`.

        Args:
            index: Cell that was clicked (0-8).

        Returns:
            MoveResult. Rejected clicks change nothing.
        """
        if self.computer_pending:
            return self._reject(index, "Computer is thinking")

        if (self.vs_computer and not self.engine.is_game_over
                and self.current_player != self.config.HUMAN_PLAYER):
            return self._reject(index, "It's not your turn")

        result = self._play(index, self.current_player)

        if result.is_valid and self._computer_to_move():
            self._schedule_computer_move()

        return result

    def set_mode(self, mode: GameMode):
        """Switch between Player vs Player and Player vs Computer."""
        if mode == self.mode:
            return

        logger.info("Mode changed: %s -> %s", self.mode.value, mode.value)
        self.mode = mode
        self.new_series()

    def reset(self):
        """Start a new game. Scores are kept."""
        self._generation += 1
        self.computer_pending = False
        self.engine.reset()
        self._notify()

    def new_series(self):
        """Start a new game and clear the scores."""
        self.scores.clear()
        self.reset()

    # ==================== INTERNALS ====================

    def _play(self, index: int, mark: Player) -> MoveResult:
        result = self.engine.apply_move(index, mark)

        if result.is_valid:
            if result.status.is_over:
                # Only a valid move can end the game, so this runs once per game
                self.scores.record(result.status)
                logger.info("Result: %s, scores %s", result.status.value, self.scores.as_dict())
            self._notify()

        return result

    def _reject(self, index: int, reason: str) -> MoveResult:
        logger.debug("Ignored click on %r: %s", index, reason)
        return MoveResult(
            is_valid=False,
            status=self.engine.status,
            winning_line=self.engine.winning_line,
            error=InvalidMove(reason)
        )

    def _computer_to_move(self) -> bool:
        return (
            self.vs_computer
            and not self.engine.is_game_over
            and self.current_player == self.config.COMPUTER_PLAYER
        )

    def _schedule_computer_move(self):
        self.computer_pending = True
        generation = self._generation
        self._notify()

        self.scheduler(self.delay_ms, lambda: self._computer_move(generation))

    def _computer_move(self, generation: int):
        """Play the computer's move, unless the game was reset meanwhile."""
        if generation != self._generation or not self._computer_to_move():
            logger.debug("Dropped stale computer move (generation %d)", generation)
            return

        index = self.ai.get_best_move(self.engine.board)
        self.computer_pending = False
        self._play(index, self.config.COMPUTER_PLAYER)

    def _notify(self):
        for callback in self._listeners:
            callback()
