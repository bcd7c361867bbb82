"""Offscreen tests for the board widget and main window."""

import pytest
from PySide6.QtCore import QEvent, QPointF, Qt
from PySide6.QtGui import QMouseEvent

from tictactoe.game_logic import Cell, GameEngine, Player
from tictactoe.ui.board_widget import BoardWidget
from tictactoe.ui.main_window import TicTacToeWindow


def release_at(widget, x, y, button=Qt.LeftButton):
    event = QMouseEvent(QEvent.MouseButtonRelease, QPointF(x, y), QPointF(x, y),
                        button, Qt.NoButton, Qt.NoModifier)
    widget.mouseReleaseEvent(event)


@pytest.fixture
def board(qapp):
    widget = BoardWidget(GameEngine())
    widget.resize(300, 300)
    yield widget
    widget.deleteLater()


@pytest.fixture
def window(qapp, monkeypatch):
    win = TicTacToeWindow()
    win.shown_results = []
    # replace the blocking modal
    monkeypatch.setattr(win, "_show_result_box",
                        lambda title, text: win.shown_results.append((title, text)))
    yield win
    win.deleteLater()


class TestBoardWidget:

    @pytest.mark.parametrize("x, y, index", [
        (10, 10, 0), (150, 10, 1), (290, 10, 2),
        (10, 150, 3), (150, 150, 4), (290, 290, 8),
    ])
    def test_index_at_square_grid(self, board, x, y, index):
        assert board.index_at(x, y) == index

    def test_grid_is_centred_in_wide_widget(self, board):
        board.resize(400, 300)
        assert board.grid_geometry() == (50, 0, 300)
        assert board.index_at(40, 100) is None
        assert board.index_at(60, 10) == 0

    def test_click_emits_index(self, board):
        clicked = []
        board.cell_clicked.connect(clicked.append)
        release_at(board, 150, 290)
        assert clicked == [7]

    def test_disabled_and_outside_clicks_are_ignored(self, board):
        clicked = []
        board.cell_clicked.connect(clicked.append)
        release_at(board, 150, 150, button=Qt.RightButton)
        board.resize(400, 300)
        release_at(board, 10, 10)
        board.set_accept_clicks(False)
        release_at(board, 200, 150)
        assert clicked == []
        assert not board.accepts_clicks()

    def test_square_aspect(self, board):
        assert board.hasHeightForWidth()
        assert board.heightForWidth(120) == 120


class TestMainWindow:

    def test_starts_with_x_to_move(self, window):
        assert window.message_label.text() == "It's X's turn"
        assert window.board_widget.accepts_clicks()

    def test_click_places_mark_and_flips_turn(self, window):
        window.board_widget.cell_clicked.emit(4)
        state = window.engine.current_state()
        assert state.board[4] is Cell.X
        assert window.message_label.text() == "It's O's turn"

    def test_occupied_click_is_ignored(self, window):
        window._on_cell_clicked(4)
        before = window.engine.current_state()
        window._on_cell_clicked(4)
        assert window.engine.current_state() == before
        assert window.message_label.text() == "It's O's turn"

    def test_win_shows_message_then_resets(self, window):
        for index in [0, 3, 1, 4, 2]:
            window._on_cell_clicked(index)
        assert window.shown_results == [("Player X Wins!", "Congratulations!")]
        assert window.engine.current_state() == GameEngine().current_state()
        assert window.message_label.text() == "It's X's turn"

    def test_draw_shows_message(self, window):
        for index in [0, 1, 2, 4, 3, 5, 7, 6, 8]:
            window._on_cell_clicked(index)
        assert window.shown_results == [("Game Draw!", "It's a tie!")]

    def test_finished_game_disables_board_until_closed(self, qapp, monkeypatch):
        win = TicTacToeWindow()
        seen = {}

        def fake_box(title, text):
            seen["accepts_clicks"] = win.board_widget.accepts_clicks()
            seen["label"] = win.message_label.text()

        monkeypatch.setattr(win, "_show_result_box", fake_box)
        for index in [0, 3, 1, 4, 8, 5]:
            win._on_cell_clicked(index)
        assert seen == {"accepts_clicks": False, "label": "Player O Wins!"}
        win.deleteLater()

    def test_reset_button(self, window):
        window._on_cell_clicked(0)
        window.reset_button.click()
        state = window.engine.current_state()
        assert state.current_player is Player.X
        assert window.engine.move_count == 0

    def test_uses_given_engine(self, qapp):
        engine = GameEngine()
        engine.apply_move(0)
        win = TicTacToeWindow(engine)
        assert win.message_label.text() == "It's O's turn"
        win.deleteLater()
