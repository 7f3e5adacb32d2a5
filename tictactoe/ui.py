"""
TicTacToe UI
A graphical interface for TicTacToe using Tkinter.

Shows:
- The board, with a line through the winning cells
- Game status and whose turn it is
- Mode selection (Player vs Player / Player vs Computer)
- Score for X, O, and draws
"""

import logging
import tkinter as tk
from tkinter import ttk
from typing import Optional

from .config import GameConfig
from .logic.game_state import GameMode, Player
from .session import GameSession

logger = logging.getLogger(__name__)


class TicTacToeUI:
    """
    Main UI class for TicTacToe.

    All game rules live in GameSession; this class only draws its state
    and forwards clicks to it.
    """

    def __init__(
        self,
        mode: GameMode = GameMode.HUMAN_VS_COMPUTER,
        delay_ms: Optional[int] = None,
        config: type = GameConfig
    ):
        """Initialize the UI."""
        self.config = config

        # Create UI first, the session needs root.after as its scheduler
        self._create_ui()

        self.session = GameSession(
            mode=mode,
            scheduler=self.root.after,
            config=config,
            delay_ms=delay_ms
        )
        self.session.add_listener(self._refresh)

        self._refresh()

    def _create_ui(self):
        """Create the Tkinter UI."""
        cfg = self.config

        self.root = tk.Tk()
        self.root.title(cfg.WINDOW_TITLE)
        self.root.configure(bg=cfg.BG_COLOR)
        self.root.resizable(False, False)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=cfg.BG_COLOR)
        style.configure('TLabel', background=cfg.BG_COLOR, foreground=cfg.TEXT_COLOR, font=cfg.TEXT_FONT)
        style.configure('Title.TLabel', font=cfg.TITLE_FONT, foreground=cfg.O_COLOR)
        style.configure('Status.TLabel', font=cfg.STATUS_FONT, foreground=cfg.WINNING_LINE_COLOR)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Left panel - Board
        board_px = cfg.CELL_SIZE_PX * cfg.BOARD_SIZE + 2 * cfg.BOARD_PADDING_PX
        self.board_canvas = tk.Canvas(
            main_frame,
            width=board_px,
            height=board_px,
            bg=cfg.BOARD_COLOR,
            highlightthickness=2,
            highlightbackground=cfg.O_COLOR
        )
        self.board_canvas.pack(side=tk.LEFT, padx=(0, 10))
        self.board_canvas.bind("<Button-1>", self._on_board_click)

        # Right panel
        right_frame = ttk.Frame(main_frame, width=300)
        right_frame.pack(side=tk.RIGHT, fill=tk.Y)

        ttk.Label(right_frame, text="TicTacToe", style='Title.TLabel').pack(pady=(0, 5))

        self.status_label = ttk.Label(right_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)

        self.turn_label = ttk.Label(right_frame, text="Turn: -")
        self.turn_label.pack()

        # Mode section
        ttk.Separator(right_frame, orient='horizontal').pack(fill=tk.X, pady=15)
        ttk.Label(right_frame, text="Mode", style='Title.TLabel').pack()

        mode_frame = ttk.Frame(right_frame)
        mode_frame.pack(pady=10)

        self.mode_buttons = {}
        for text, mode in [("Player vs Player", GameMode.HUMAN_VS_HUMAN),
                           ("Player vs Computer", GameMode.HUMAN_VS_COMPUTER)]:
            btn = tk.Button(
                mode_frame,
                text=text,
                font=cfg.BUTTON_FONT,
                width=16,
                bg=cfg.BUTTON_COLOR,
                fg=cfg.TEXT_COLOR,
                activebackground=cfg.ACTIVE_BUTTON_COLOR,
                command=lambda m=mode: self._set_mode(m)
            )
            btn.pack(pady=2)
            self.mode_buttons[mode] = btn

        # Score section
        ttk.Separator(right_frame, orient='horizontal').pack(fill=tk.X, pady=15)
        ttk.Label(right_frame, text="Score", style='Title.TLabel').pack()

        self.score_x_label = ttk.Label(right_frame, text="")
        self.score_x_label.pack()
        self.score_o_label = ttk.Label(right_frame, text="")
        self.score_o_label.pack()
        self.score_draw_label = ttk.Label(right_frame, text="")
        self.score_draw_label.pack()

        # Control buttons
        ttk.Separator(right_frame, orient='horizontal').pack(fill=tk.X, pady=15)

        control_frame = ttk.Frame(right_frame)
        control_frame.pack(pady=10)

        tk.Button(
            control_frame,
            text="Reset",
            font=cfg.CONTROL_FONT,
            bg=cfg.RESET_BUTTON_COLOR,
            fg=cfg.TEXT_COLOR,
            width=10,
            command=self._reset_game
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="New Game",
            font=cfg.CONTROL_FONT,
            bg=cfg.ACTIVE_BUTTON_COLOR,
            fg=cfg.TEXT_COLOR,
            width=10,
            command=self._new_game
        ).pack(side=tk.LEFT, padx=5)

        # Quit button
        tk.Button(
            right_frame,
            text="Quit",
            font=cfg.QUIT_FONT,
            bg=cfg.QUIT_BUTTON_COLOR,
            fg=cfg.TEXT_COLOR,
            width=22,
            command=self._quit
        ).pack(pady=10)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    # ==================== INPUT ====================

    def _on_board_click(self, event):
        """Turn a canvas click into a cell index and play it."""
        index = self._cell_at(event.x, event.y)
        if index is None:
            return

        # Rejected clicks (occupied cell, computer thinking, game over) are just ignored
        self.session.handle_cell_click(index)

    def _cell_at(self, x: int, y: int) -> Optional[int]:
        cfg = self.config
        col = (x - cfg.BOARD_PADDING_PX) // cfg.CELL_SIZE_PX
        row = (y - cfg.BOARD_PADDING_PX) // cfg.CELL_SIZE_PX
        if 0 <= row < cfg.BOARD_SIZE and 0 <= col < cfg.BOARD_SIZE:
            return row * cfg.BOARD_SIZE + col
        return None

    def _set_mode(self, mode: GameMode):
        self.session.set_mode(mode)
        # set_mode only notifies when the mode actually changed
        self._refresh()

    def _reset_game(self):
        """Start a new game, keep the score."""
        self.session.reset()

    def _new_game(self):
        """Start a new game and clear the score."""
        self.session.new_series()

    def _quit(self):
        """Quit the application."""
        logger.info("Quitting...")
        self.root.quit()
        self.root.destroy()

    # ==================== DRAWING ====================

    def _refresh(self):
        """Redraw everything from the session state."""
        self._draw_board()
        self._update_game_info()

    def _cell_center(self, index: int):
        cfg = self.config
        row, col = divmod(index, cfg.BOARD_SIZE)
        x = cfg.BOARD_PADDING_PX + col * cfg.CELL_SIZE_PX + cfg.CELL_SIZE_PX // 2
        y = cfg.BOARD_PADDING_PX + row * cfg.CELL_SIZE_PX + cfg.CELL_SIZE_PX // 2
        return x, y

    def _draw_board(self):
        """Draw grid, marks, and the winning line."""
        cfg = self.config
        canvas = self.board_canvas
        canvas.delete("all")

        # Grid lines
        start = cfg.BOARD_PADDING_PX
        end = cfg.BOARD_PADDING_PX + cfg.BOARD_SIZE * cfg.CELL_SIZE_PX
        for i in range(1, cfg.BOARD_SIZE):
            offset = start + i * cfg.CELL_SIZE_PX
            canvas.create_line(offset, start, offset, end, fill=cfg.GRID_COLOR, width=cfg.GRID_WIDTH)
            canvas.create_line(start, offset, end, offset, fill=cfg.GRID_COLOR, width=cfg.GRID_WIDTH)

        # Marks
        half = cfg.CELL_SIZE_PX // 2 - cfg.MARK_PADDING_PX
        for index, cell in enumerate(self.session.board):
            if cell is None:
                continue
            x, y = self._cell_center(index)
            if cell == Player.X:
                canvas.create_line(x - half, y - half, x + half, y + half,
                                   fill=cfg.X_COLOR, width=cfg.MARK_WIDTH, capstyle=tk.ROUND)
                canvas.create_line(x - half, y + half, x + half, y - half,
                                   fill=cfg.X_COLOR, width=cfg.MARK_WIDTH, capstyle=tk.ROUND)
            else:
                canvas.create_oval(x - half, y - half, x + half, y + half,
                                   outline=cfg.O_COLOR, width=cfg.MARK_WIDTH)

        # Winning line - from the center of the first cell to the center of the last
        line = self.session.winning_line
        if line is not None:
            x1, y1 = self._cell_center(line[0])
            x2, y2 = self._cell_center(line[-1])
            canvas.create_line(x1, y1, x2, y2, fill=cfg.WINNING_LINE_COLOR,
                               width=cfg.WINNING_LINE_WIDTH, capstyle=tk.ROUND)

    def _update_game_info(self):
        """Update status, turn, mode, and score labels."""
        cfg = self.config
        session = self.session

        self.status_label.configure(text=session.status_text())

        if session.status.is_over:
            self.turn_label.configure(text="Game Over")
        else:
            current = session.current_player
            self.turn_label.configure(text=f"Turn: {session.player_name(current)} ({current.value})")

        for mode, btn in self.mode_buttons.items():
            if mode == session.mode:
                btn.configure(bg=cfg.ACTIVE_BUTTON_COLOR, fg='black')
            else:
                btn.configure(bg=cfg.BUTTON_COLOR, fg=cfg.TEXT_COLOR)

        scores = session.scores
        self.score_x_label.configure(text=f"{session.player_name(Player.X)} (X): {scores.x_wins}")
        self.score_o_label.configure(text=f"{session.player_name(Player.O)} (O): {scores.o_wins}")
        self.score_draw_label.configure(text=f"Draws: {scores.draws}")

        # Ignore board clicks while the computer is thinking
        self.board_canvas.configure(cursor="watch" if session.computer_pending else "hand2")

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()

