"""
Score tally for TicTacToe.
Counts wins and draws across a series of games.
"""

from dataclasses import dataclass
from typing import Dict

from .game_state import GameStatus, Player


@dataclass
class ScoreBoard:
    """
    Wins per player and draws.

    Survives single-game resets; only clear() starts a new series.
    """
    x_wins: int = 0
    o_wins: int = 0
    draws: int = 0

    def record(self, status: GameStatus):
        """
        Count a finished game.

        Args:
            status: The final status of the game.
        """
        if status == GameStatus.X_WON:
            self.x_wins += 1
        elif status == GameStatus.O_WON:
            self.o_wins += 1
        elif status == GameStatus.DRAW:
            self.draws += 1
        else:
            raise ValueError(f"Cannot score an unfinished game ({status.value})")

    def wins_for(self, player: Player) -> int:
        return self.x_wins if player == Player.X else self.o_wins

    def clear(self):
        """Zero all counters for a new series."""
        self.x_wins = 0
        self.o_wins = 0
        self.draws = 0

    def as_dict(self) -> Dict[str, int]:
        return {"X": self.x_wins, "O": self.o_wins, "draw": self.draws}
