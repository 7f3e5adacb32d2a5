"""
Logic module for TicTacToe.
Handles game state, rules, scoring, and the AI opponent.
"""

from .game_state import GameState, GameMode, GameStatus, Move, Player
from .move_validator import MoveValidator, ValidationResult, InvalidMove
from .win_checker import WinChecker, WINNING_LINES
from .engine import GameEngine, MoveResult
from .ai_player import AIPlayer, best_move
from .scoreboard import ScoreBoard
