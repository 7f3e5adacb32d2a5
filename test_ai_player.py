"""
Tests for the Minimax AI player.
"""

import pytest

from tictactoe.logic.ai_player import AIPlayer, best_move
from tictactoe.logic.engine import GameEngine
from tictactoe.logic.game_state import GameState, GameStatus, Player

X, O, _ = Player.X, Player.O, None


def test_answers_corner_opening_with_center():
    assert best_move([X, _, _, _, _, _, _, _, _], O) == 4


def test_takes_immediate_win():
    assert best_move([O, O, _, X, X, _, X, _, _], O) == 2


def test_blocks_immediate_loss():
    assert best_move([X, X, _, _, O, _, _, _, _], O) == 2


def test_works_for_x_too():
    # X wins on 5 rather than blocking O on 2
    assert best_move([O, O, _, X, X, _, _, _, _], X) == 5


def test_does_not_touch_callers_board():
    board = [X, _, _, _, O, _, _, _, X]
    before = list(board)

    best_move(board, O)

    assert board == before


def test_accepts_game_state():
    game = GameState()
    game.place(0, X)

    ai = AIPlayer(O)
    assert ai.get_best_move(game) == 4
    assert ai.moves_evaluated > 0
    assert game.board == [X] + [None] * 8


@pytest.mark.parametrize("opening", range(9))
def test_never_picks_occupied_cell(opening):
    board = [None] * 9
    board[opening] = X

    move = best_move(board, O)

    assert board[move] is None


def test_last_empty_cell_is_taken():
    assert best_move([X, O, X, O, X, O, O, X, _], O) == 8


def test_solver_against_itself_is_a_draw():
    engine = GameEngine()

    while not engine.is_game_over:
        move = best_move(engine.board, engine.current_player)
        assert engine.board[move] is None
        assert engine.apply_move(move, engine.current_player).is_valid

    assert engine.status == GameStatus.DRAW


def test_computer_never_loses_to_naive_play():
    engine = GameEngine()
    ai = AIPlayer(O)

    while not engine.is_game_over:
        if engine.current_player == X:
            engine.apply_move(engine.get_empty_cells()[0], X)
        else:
            engine.apply_move(ai.get_best_move(engine.board), O)

    assert engine.status in (GameStatus.O_WON, GameStatus.DRAW)


def test_prefers_faster_win():
    # O can win now on 2, or later; the immediate win must be chosen
    board = [O, O, _, X, _, _, X, X, _]
    assert best_move(board, O) == 2


@pytest.mark.parametrize("board", [
    [X, X, X, O, O, _, _, _, _],
    [X, O, X, O, X, O, O, X, O],
    [X, O],
])
def test_rejects_unplayable_boards(board):
    with pytest.raises(ValueError):
        best_move(board, O)


def test_move_suggestion_text():
    suggestion = AIPlayer(O).get_move_suggestion([X, _, _, _, _, _, _, _, _])
    assert suggestion == "Play O at cell 5 (row 2, column 2)"


# ==================== TIE-BREAK ====================

def test_empty_board_ties_go_to_first_cell():
    # Every opening is a draw with best play
    assert best_move([None] * 9, O) == 0
    assert best_move([None] * 9, X) == 0


def test_equal_replies_to_center_pick_first_corner():
    # All four corners hold the draw; edges lose
    assert best_move([_, _, _, _, X, _, _, _, _], O) == 0


def test_two_immediate_wins_pick_lower_index():
    # O wins on 2 (2-4-6) or on 8 (0-4-8), both worth the same
    board = [O, X, _, X, O, X, O, X, _]
    assert best_move(board, O) == 2
