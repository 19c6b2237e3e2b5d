"""
Headless tests for the Tkinter shell: clicks reach the engine and the
window reflects what the engine reports.
"""

from types import SimpleNamespace

import pytest

tk = pytest.importorskip("tkinter")

import ui
from logic import Board, Cell, GameState


@pytest.fixture
def app(monkeypatch):
    dialogs = []
    monkeypatch.setattr(
        ui.messagebox, "showinfo", lambda title, message, **kwargs: dialogs.append(message)
    )

    try:
        window = ui.TicTacToeUI()
    except tk.TclError:
        pytest.skip("Tk unavailable in headless environment")

    window.root.withdraw()
    window.dialogs = dialogs
    try:
        yield window
    finally:
        window.root.destroy()


def click(window, x, y):
    window._on_click(SimpleNamespace(x=x, y=y))


def test_click_plays_a_move_and_the_computer_replies(app):
    click(app, 50, 50)

    assert [move.cell for move in app.engine.history] == [(0, 0), (1, 1)]
    assert app.engine.board.get(1, 1) == Cell.COMPUTER
    assert str(app.status_label.cget("text")) == app.display_config.IN_PROGRESS_MESSAGE


def test_clicks_on_filled_cells_are_ignored(app):
    click(app, 50, 50)
    before = app.engine.board.tobytes()

    click(app, 50, 50)
    click(app, 150, 150)

    assert app.engine.board.tobytes() == before
    assert len(app.engine.history) == 2
    assert app.dialogs == []


def test_winning_click_shows_result(app):
    app.engine.board = Board.from_rows(["XX ", "OO ", "   "])

    click(app, 250, 50)

    assert app.engine.state == GameState.PLAYER_WINS
    assert app.dialogs == ["Player wins!"]
    assert str(app.status_label.cget("text")) == "Player wins!"


def test_new_game_resets_the_board(app):
    click(app, 50, 50)

    app._new_game()

    assert app.engine.board == Board()
    assert app.engine.history == []
    assert app.engine.player_turn
