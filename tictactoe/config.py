"""
Game configuration for TicTacToe.
All the settings for the board, the computer opponent, and the window.
"""

from .logic.game_state import Player


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to tune the look and feel!
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid, cells numbered 0-8 row by row
    BOARD_SIZE = 3

    # ==================== PLAYER SETTINGS ====================
    # X always opens the game
    FIRST_PLAYER = Player.X

    # In Player vs Computer mode the human is X and the computer is O
    HUMAN_PLAYER = Player.X
    COMPUTER_PLAYER = Player.O

    # ==================== AI SETTINGS ====================
    # Pause before the computer answers, so the human sees it "thinking"
    COMPUTER_DELAY_MS = 800

    # ==================== UI SETTINGS ====================
    WINDOW_TITLE = "TicTacToe"
    CELL_SIZE_PX = 120
    BOARD_PADDING_PX = 10
    MARK_PADDING_PX = 28
    MARK_WIDTH = 8
    GRID_WIDTH = 4
    WINNING_LINE_WIDTH = 6

    BG_COLOR = '#1a1a2e'
    BOARD_COLOR = '#16213e'
    GRID_COLOR = '#0f3460'
    X_COLOR = '#f87171'
    O_COLOR = '#00d4ff'
    WINNING_LINE_COLOR = '#ffd700'
    TEXT_COLOR = 'white'
    RESET_BUTTON_COLOR = '#6366f1'
    QUIT_BUTTON_COLOR = '#ef4444'
    ACTIVE_BUTTON_COLOR = '#10b981'
    BUTTON_COLOR = '#2d3748'

    TITLE_FONT = ('Segoe UI', 16, 'bold')
    TEXT_FONT = ('Segoe UI', 11)
    STATUS_FONT = ('Segoe UI', 12)
    BUTTON_FONT = ('Segoe UI', 10, 'bold')
    CONTROL_FONT = ('Segoe UI', 11, 'bold')
    QUIT_FONT = ('Segoe UI', 10)
