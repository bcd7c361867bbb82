from ..game_logic import GameEngine, MoveError, result_message, turn_message
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QMessageBox, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot

WINDOW_TITLE = "Tic-Tac-Toe"
WINDOW_SIZE = (360, 420)


class TicTacToeWindow(QMainWindow):
    """
    main window UI and game flow
    """
    def __init__(self, engine=None):
        """
        init engine, ui widgets, signals
        """
        super().__init__()
        self.engine = engine if engine is not None else GameEngine()
        self.board_widget = BoardWidget(self.engine, parent=self)
        self._setup_ui()
        self._render()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(*WINDOW_SIZE)
        self.setStyleSheet("""
            QMainWindow { background-color: #222; }
            QPushButton { padding: 4px 12px; }
        """)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self._create_bottom_controls()     # status + reset
        self.main_layout.addWidget(self.controls_bottom_widget)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        new_action = QAction("New Game", self)
        new_action.triggered.connect(self.reset_game)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(new_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_bottom_controls(self):
        # status label + reset button
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.controls_bottom_widget.setStyleSheet("background: transparent;")
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.message_label.setWordWrap(True)
        self.reset_button = QPushButton("Reset"); self.reset_button.clicked.connect(self.reset_game)
        hl.addWidget(self.message_label)
        hl.addStretch(1)
        hl.addWidget(self.reset_button)

    def _update_message(self, text, is_success=False, is_turn=False):
        # set message text + style
        style = "color: #eee;"
        if is_success: style = "color: lime; font-weight: bold;"
        elif is_turn:  style = "color: #8acaff; font-weight: bold;"
        self.message_label.setStyleSheet(style)
        self.message_label.setText(text)

    def _render(self):
        # redraw board + status from current engine state
        state = self.engine.current_state()
        self.board_widget.set_accept_clicks(not state.status.is_terminal)
        self.board_widget.update()
        if state.status.is_terminal:
            title, _ = result_message(state.status)
            self._update_message(title, is_success=True)
        else:
            self._update_message(turn_message(state.current_player), is_turn=True)

    def _show_result_box(self, title, text):
        # blocks until the user closes it
        QMessageBox.information(self, title, text)

    @Slot(int)
    def _on_cell_clicked(self, index):
        try:
            change = self.engine.apply_move(index)
        except MoveError as e:
            # taken cell or finished game, board already reflects it
            print(f"[!] move ignored: {e}")
            return
        self._render()
        if change.status.is_terminal:
            print(f"[*] game over: {change.status}")
            self._show_result_box(*result_message(change.status))
            self.reset_game()  # closing the message starts a new game

    @Slot()
    def reset_game(self):
        # back to a fresh board, x to move
        self.engine.reset()
        print("[*] new game, X to move")
        self._render()
