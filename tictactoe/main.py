"""
Main entry point for TicTacToe.

Starts the Tkinter UI by default, or a console game with --no-ui.

Run this script to play TicTacToe against a friend or the computer!
"""

import argparse
import logging
import time
from typing import Callable, Optional

from .config import GameConfig
from .logic.ai_player import AIPlayer
from .logic.game_state import BOARD_CELLS, GameMode, GameStatus
from .session import GameSession


class ConsoleGame:
    """
    TicTacToe in the terminal.

    Cells are numbered 1-9:
        1 | 2 | 3
        4 | 5 | 6
        7 | 8 | 9

    Commands: r = reset game, n = new game (clears score),
    h = hint, q = quit.
    """

    def __init__(self, mode: GameMode, delay_ms: Optional[int] = None, input_func: Callable[[str], str] = input):
        self.session = GameSession(
            mode=mode,
            scheduler=self._sleep_then_run,
            delay_ms=delay_ms
        )
        self.input = input_func
        self.is_running = False

    @staticmethod
    def _sleep_then_run(delay_ms: int, callback: Callable[[], None]):
        """Blocking scheduler - the terminal has nothing else to do meanwhile."""
        time.sleep(delay_ms / 1000)
        callback()

    def start(self):
        """Start the game."""
        print("\n" + "=" * 40)
        print("   TicTacToe")
        print("=" * 40)
        if self.session.vs_computer:
            print("   You play X, the computer plays O")
        print("   Commands: 1-9 play, r reset, n new game, h hint, q quit")
        print("=" * 40)

        self.is_running = True
        self._game_loop()

    def _game_loop(self):
        """Main game loop."""
        while self.is_running:
            self._show_board()

            if self.session.status.is_over:
                self._show_game_result()
                answer = self.input("Play again? [y/n]: ").strip().lower()
                if answer.startswith("y"):
                    self.session.reset()
                else:
                    self.is_running = False
                continue

            command = self.input(f"{self.session.status_text()} > ").strip().lower()
            self._handle_command(command)

    def _handle_command(self, command: str):
        if command == "q":
            print("\nGame quit by user.")
            self.is_running = False
        elif command == "r":
            self.session.reset()
        elif command == "n":
            self.session.new_series()
        elif command == "h":
            adviser = AIPlayer(self.session.current_player)
            print(adviser.get_move_suggestion(self.session.board))
        elif command.isdecimal() and 1 <= int(command) <= BOARD_CELLS:
            result = self.session.handle_cell_click(int(command) - 1)
            if not result.is_valid:
                print(f"Illegal move: {result.error.reason}. Try again.")
        else:
            print("Please type a cell number 1-9, or r / n / h / q.")

    def _show_board(self):
        print()
        print(self.session.engine.state.render())
        print()

    def _show_game_result(self):
        """Show the result and the running score."""
        status = self.session.status
        if status == GameStatus.DRAW:
            print("It's a draw! Good game!")
        else:
            print(f"{self.session.player_name(status.winner)} wins!")

        scores = self.session.scores
        print(f"Score - X: {scores.x_wins}  O: {scores.o_wins}  Draws: {scores.draws}\n")


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in GameMode],
        default=GameMode.HUMAN_VS_COMPUTER.value,
        help="pvp = two players, pvc = play against the computer"
    )
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--delay-ms",
        type=int,
        default=GameConfig.COMPUTER_DELAY_MS,
        help="How long the computer 'thinks' before moving"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug output (rejected moves, AI statistics)"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    mode = GameMode(args.mode)

    # Launch UI by default
    if not args.no_ui:
        from .ui import TicTacToeUI
        ui = TicTacToeUI(mode=mode, delay_ms=args.delay_ms)
        ui.run()
        return

    # Console mode (--no-ui)
    game = ConsoleGame(mode=mode, delay_ms=args.delay_ms)

    try:
        game.start()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
