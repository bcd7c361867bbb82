import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from PySide6.QtGui import QPalette, QColor
from tictactoe.ui.main_window import TicTacToeWindow

# -----------------------------------------------------------------------------
# THEME
# -----------------------------------------------------------------------------

APP_STYLE = 'Fusion'

# palette role -> color for the dark theme
DARK_PALETTE = {
    QPalette.Window: QColor(53, 53, 53),
    QPalette.WindowText: Qt.white,
    QPalette.Base: QColor(35, 35, 35),
    QPalette.AlternateBase: QColor(53, 53, 53),
    QPalette.Text: Qt.white,
    QPalette.Button: QColor(66, 66, 66),
    QPalette.ButtonText: Qt.white,
    QPalette.Highlight: QColor(42, 130, 218),
    QPalette.HighlightedText: Qt.white,
}

DISABLED_COLOR = QColor(127, 127, 127)
DISABLED_ROLES = (QPalette.Text, QPalette.ButtonText, QPalette.WindowText)


def apply_default_palette(app: QApplication):
    """
    Apply the dark theme palette, greying out disabled text and buttons.
    """
    palette = QPalette()
    for role, color in DARK_PALETTE.items():
        palette.setColor(role, color)
    for role in DISABLED_ROLES:
        palette.setColor(QPalette.Disabled, role, DISABLED_COLOR)
    app.setPalette(palette)


# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def run():
    app = QApplication.instance() or QApplication(sys.argv)
    app.setStyle(APP_STYLE)
    apply_default_palette(app)

    window = TicTacToeWindow()
    window.show()
    return app.exec()


if __name__ == '__main__':
    sys.exit(run())
