"""
Tests for the minimax computer player.
"""

import pytest

from logic import AIPlayer, Board, Cell, GameConfig, InvariantViolation


@pytest.fixture
def ai():
    return AIPlayer(GameConfig())


def test_takes_the_winning_move(ai):
    # Computer has (0,0),(0,1); player threatens (1,2)
    board = Board.from_rows(["OO ", "XX ", "  X"])

    assert ai.get_best_move(board) == (0, 2)


def test_blocks_the_player(ai):
    board = Board.from_rows(["XX ", " O ", "   "])

    assert ai.get_best_move(board) == (0, 2)


def test_blocks_a_column_threat(ai):
    board = Board.from_rows(["X  ", "XO ", "   "])

    assert ai.get_best_move(board) == (2, 0)


def test_prefers_winning_over_blocking(ai):
    # Both sides have two on a row; winning now beats blocking
    board = Board.from_rows(["XX ", "OO ", "X  "])

    assert ai.get_best_move(board) == (1, 2)


def test_tie_goes_to_first_cell_in_row_major_order(ai):
    # Both empty cells lead to a draw
    board = Board.from_rows(["XXO", "OOX", "X  "])

    assert ai.score_move(board, 2, 1) == ai.score_move(board, 2, 2) == 0
    assert ai.get_best_move(board) == (2, 1)


def test_search_is_deterministic_and_restores_board(ai):
    board = Board.from_rows(["X  ", "   ", "   "])
    before = board.tobytes()

    first = ai.get_best_move(board)
    second = ai.get_best_move(board)

    assert first == second == (1, 1)
    assert board.tobytes() == before
    assert ai.positions_evaluated > 0


def test_minimax_scores_terminal_positions(ai):
    player_line = Board.from_rows(["XXX", "OO ", "   "])
    computer_line = Board.from_rows(["OOO", "XX ", "X  "])
    draw = Board.from_rows(["XOX", "XOO", "OXX"])

    assert ai.minimax(player_line, depth=3, is_maximizing=True) == -7
    assert ai.minimax(computer_line, depth=2, is_maximizing=False) == 8
    assert ai.minimax(draw, depth=4, is_maximizing=True) == 0


def test_minimax_prefers_faster_wins(ai):
    # Computer to move: immediate win at (0,2) scores 10
    board = Board.from_rows(["OO ", "XX ", "  X"])

    assert ai.score_move(board, 0, 2) == 10
    # Not taking the win lets the player win on the next ply
    assert ai.score_move(board, 2, 0) == -9


def test_full_board_is_an_invariant_violation(ai):
    with pytest.raises(InvariantViolation):
        ai.get_best_move(Board.from_rows(["XOX", "XOO", "OXX"]))


def test_won_board_is_an_invariant_violation(ai):
    with pytest.raises(InvariantViolation):
        ai.get_best_move(Board.from_rows(["XXX", "OO ", "   "]))


def test_scores_follow_config():
    class BigScores(GameConfig):
        WIN_SCORE = 100

    ai = AIPlayer(BigScores())
    board = Board.from_rows(["OO ", "XX ", "  X"])

    assert ai.score_move(board, 0, 2) == 100


def test_verbose_prints_summary(capsys):
    ai = AIPlayer(GameConfig(verbose=True))
    ai.get_best_move(Board.from_rows(["XX ", " O ", "   "]))

    assert "AI evaluated" in capsys.readouterr().out


def test_player_mark_is_always_the_opponent(ai):
    assert ai.mark == Cell.COMPUTER
    assert ai.opponent == Cell.PLAYER
