"""
Tests for the game session (turn order, computer moves, scores)
and the console front-end.
"""

from tictactoe.config import GameConfig
from tictactoe.logic.game_state import GameMode, GameStatus, Player
from tictactoe.main import ConsoleGame
from tictactoe.session import GameSession

X, O = Player.X, Player.O


class FakeScheduler:
    """Collects scheduled callbacks so tests decide when they run."""

    def __init__(self):
        self.pending = []

    def __call__(self, delay_ms, callback):
        self.pending.append((delay_ms, callback))

    def run_all(self):
        pending, self.pending = self.pending, []
        for _, callback in pending:
            callback()


def play(session, *cells):
    for index in cells:
        assert session.handle_cell_click(index).is_valid


# ==================== PLAYER VS PLAYER ====================

def test_pvp_alternates_players():
    session = GameSession(GameMode.HUMAN_VS_HUMAN)

    play(session, 0, 4)

    assert session.board[0] == X
    assert session.board[4] == O
    assert session.current_player == X
    assert session.status_text() == "Player X's turn"


def test_win_is_scored_exactly_once():
    session = GameSession(GameMode.HUMAN_VS_HUMAN)

    play(session, 0, 3, 1, 4, 2)

    assert session.status == GameStatus.X_WON
    assert session.winning_line == (0, 1, 2)
    assert session.status_text() == "Player 1 wins!"

    for index in range(9):
        assert not session.handle_cell_click(index).is_valid

    assert session.scores.as_dict() == {"X": 1, "O": 0, "draw": 0}


def test_draw_is_scored():
    session = GameSession(GameMode.HUMAN_VS_HUMAN)

    # X O X / X O O / O X X
    play(session, 0, 1, 2, 4, 3, 5, 7, 6, 8)

    assert session.status == GameStatus.DRAW
    assert session.status_text() == "It's a draw!"
    assert session.scores.draws == 1


def test_occupied_cell_is_ignored():
    session = GameSession(GameMode.HUMAN_VS_HUMAN)
    play(session, 4)

    result = session.handle_cell_click(4)

    assert not result.is_valid
    assert session.current_player == O


def test_reset_keeps_scores():
    session = GameSession(GameMode.HUMAN_VS_HUMAN)
    play(session, 0, 3, 1, 4, 2)

    session.reset()

    assert session.board == (None,) * 9
    assert session.status == GameStatus.IN_PROGRESS
    assert session.current_player == X
    assert session.scores.x_wins == 1
    assert session.handle_cell_click(0).is_valid


def test_reset_mid_game_keeps_scores():
    session = GameSession(GameMode.HUMAN_VS_HUMAN)
    play(session, 0, 3, 1, 4, 2)
    session.reset()
    play(session, 4, 0)
    before = session.scores.as_dict()

    session.reset()

    assert session.board == (None,) * 9
    assert session.scores.as_dict() == before


def test_new_series_clears_scores():
    session = GameSession(GameMode.HUMAN_VS_HUMAN)
    play(session, 0, 3, 1, 4, 2)

    session.new_series()

    assert session.scores.as_dict() == {"X": 0, "O": 0, "draw": 0}
    assert session.board == (None,) * 9


def test_player_names_depend_on_mode():
    session = GameSession(GameMode.HUMAN_VS_HUMAN)
    assert session.player_name(X) == "Player 1"
    assert session.player_name(O) == "Player 2"

    session.set_mode(GameMode.HUMAN_VS_COMPUTER)
    assert session.player_name(X) == "Player"
    assert session.player_name(O) == "Computer"


def test_listeners_are_notified():
    session = GameSession(GameMode.HUMAN_VS_HUMAN)
    calls = []
    session.add_listener(lambda: calls.append(session.board))

    play(session, 4)
    session.handle_cell_click(4)
    session.reset()

    assert len(calls) == 2
    assert calls[0][4] == X


# ==================== PLAYER VS COMPUTER ====================

def test_computer_replies_after_delay():
    scheduler = FakeScheduler()
    session = GameSession(GameMode.HUMAN_VS_COMPUTER, scheduler=scheduler)

    play(session, 0)

    assert session.computer_pending
    assert not session.accepts_input()
    assert session.status_text() == "Computer is thinking..."
    assert scheduler.pending[0][0] == GameConfig.COMPUTER_DELAY_MS
    assert session.board.count(O) == 0

    scheduler.run_all()

    assert not session.computer_pending
    assert session.board[4] == O
    assert session.current_player == X
    assert session.status_text() == "Your turn"


def test_clicks_ignored_while_computer_thinks():
    scheduler = FakeScheduler()
    session = GameSession(GameMode.HUMAN_VS_COMPUTER, scheduler=scheduler)
    play(session, 0)

    result = session.handle_cell_click(8)

    assert not result.is_valid
    assert session.board[8] is None
    assert len(scheduler.pending) == 1


def test_reset_drops_pending_computer_move():
    scheduler = FakeScheduler()
    session = GameSession(GameMode.HUMAN_VS_COMPUTER, scheduler=scheduler)
    play(session, 0)

    session.reset()
    scheduler.run_all()

    assert session.board == (None,) * 9
    assert session.current_player == X
    assert not session.computer_pending


def test_stale_move_does_not_hit_new_game():
    scheduler = FakeScheduler()
    session = GameSession(GameMode.HUMAN_VS_COMPUTER, scheduler=scheduler)
    play(session, 0)
    stale = scheduler.pending.pop()

    session.reset()
    play(session, 8)
    stale[1]()

    assert session.board.count(O) == 0
    assert session.computer_pending

    scheduler.run_all()
    assert session.board.count(O) == 1


def test_computer_never_loses_in_session():
    session = GameSession(GameMode.HUMAN_VS_COMPUTER)

    while not session.status.is_over:
        first_empty = session.board.index(None)
        play(session, first_empty)

    assert session.status in (GameStatus.O_WON, GameStatus.DRAW)
    assert session.scores.x_wins == 0
    assert session.scores.o_wins + session.scores.draws == 1


def test_computer_win_is_scored_once():
    session = GameSession(GameMode.HUMAN_VS_COMPUTER)

    # X: 0, O: 4, X: 1, O blocks 2, X: 3, O wins 6 (2-4-6)
    play(session, 0, 1, 3)

    assert session.status == GameStatus.O_WON
    assert session.winning_line == (2, 4, 6)
    assert session.status_text() == "Computer wins!"
    assert session.scores.o_wins == 1


def test_set_mode_starts_new_series():
    session = GameSession(GameMode.HUMAN_VS_HUMAN)
    play(session, 0, 3, 1, 4, 2)

    session.set_mode(GameMode.HUMAN_VS_HUMAN)
    assert session.scores.x_wins == 1

    session.set_mode(GameMode.HUMAN_VS_COMPUTER)
    assert session.mode == GameMode.HUMAN_VS_COMPUTER
    assert session.scores.x_wins == 0
    assert session.board == (None,) * 9


def test_custom_delay():
    scheduler = FakeScheduler()
    session = GameSession(GameMode.HUMAN_VS_COMPUTER, scheduler=scheduler, delay_ms=5)
    play(session, 4)
    assert scheduler.pending[0][0] == 5


# ==================== CONSOLE ====================

def scripted(*answers):
    answers = iter(answers)
    return lambda prompt: next(answers)


def test_console_plays_and_quits(capsys):
    game = ConsoleGame(GameMode.HUMAN_VS_HUMAN, delay_ms=0, input_func=scripted("5", "5", "x", "q"))

    game.start()

    out = capsys.readouterr().out
    assert game.session.board[4] == X
    assert "Illegal move" in out
    assert "Please type a cell number" in out
    assert "Game quit by user." in out


def test_console_game_against_computer(capsys):
    game = ConsoleGame(GameMode.HUMAN_VS_COMPUTER, delay_ms=0, input_func=scripted("1", "2", "4", "n"))

    game.start()

    out = capsys.readouterr().out
    assert "Computer wins!" in out
    assert "Score - X: 0  O: 1  Draws: 0" in out
    assert not game.is_running


def test_console_rejects_non_cell_input(capsys):
    game = ConsoleGame(GameMode.HUMAN_VS_HUMAN, delay_ms=0, input_func=scripted("²", "0", "10", "q"))

    game.start()

    out = capsys.readouterr().out
    assert out.count("Please type a cell number 1-9") == 3
    assert "0-8" not in out
    assert game.session.board == (None,) * 9
    assert "Game quit by user." in out


def test_config_matches_board():
    from tictactoe.logic.game_state import BOARD_CELLS
    assert GameConfig.BOARD_SIZE ** 2 == BOARD_CELLS
    assert not hasattr(GameConfig, "CELL_COUNT")


def test_ui_takes_colors_and_fonts_from_config():
    import re
    from pathlib import Path

    import tictactoe

    source = (Path(tictactoe.__file__).parent / "ui.py").read_text(encoding="utf-8")

    assert re.search(r"'#[0-9a-fA-F]{6}'", source) is None
    assert "'Segoe UI'" not in source
    assert "'white'" not in source
