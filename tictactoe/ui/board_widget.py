from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QPointF, QRectF
from PySide6.QtGui import QPainter, QColor, QPen

from ..game_logic import Cell

GRID_SIZE = 3
BACKGROUND_COLOR = "#333"
GRID_COLOR = "#555"
X_COLOR = "#8acaff"
O_COLOR = "#ff8a8a"
WIN_HIGHLIGHT_COLOR = "#4a5a3a"


class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board
    """
    cell_clicked = Signal(int)  # emits row-major cell index on click

    def __init__(self, engine, parent=None):
        super().__init__(parent)
        self.engine = engine  # only read from, moves go through the window
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))
        self._accept_clicks = True      # toggle click handling

    def set_accept_clicks(self, accept):
        # enable/disable user input
        self._accept_clicks = accept

    def accepts_clicks(self):
        return self._accept_clicks

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def grid_geometry(self):
        """
        (offset_x, offset_y, side) of the centred square grid
        """
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w - side) / 2, (h - side) / 2, side

    def index_at(self, x, y):
        """
        cell index under widget coords, or None outside the grid
        """
        ox, oy, side = self.grid_geometry()
        if side <= 0 or not (ox <= x < ox + side and oy <= y < oy + side):
            return None
        cell = side / GRID_SIZE
        col = int((x - ox) // cell); row = int((y - oy) // cell)
        # clamp to valid range
        row = max(0, min(row, GRID_SIZE - 1)); col = max(0, min(col, GRID_SIZE - 1))
        return row * GRID_SIZE + col

    def paintEvent(self, event):
        """
        draw grid, X/O marks, and highlight winning line
        """
        state = self.engine.current_state()
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            offset_x, offset_y, side = self.grid_geometry()
            painter.fillRect(self.rect(), QColor(BACKGROUND_COLOR))
            cell_size = side / GRID_SIZE
            # winning cells first so marks draw over them
            for index in state.winning_line or ():
                r, c = divmod(index, GRID_SIZE)
                painter.fillRect(
                    QRectF(offset_x + c*cell_size, offset_y + r*cell_size,
                           cell_size, cell_size),
                    QColor(WIN_HIGHLIGHT_COLOR))
            # grid lines
            painter.setPen(QPen(QColor(GRID_COLOR), 2))
            for i in range(1, GRID_SIZE):
                x = offset_x + i*cell_size
                painter.drawLine(int(x), int(offset_y), int(x), int(offset_y+side))
                y = offset_y + i*cell_size
                painter.drawLine(int(offset_x), int(y), int(offset_x+side), int(y))
            # draw marks
            for index, mark in enumerate(state.board):
                if mark is Cell.EMPTY:
                    continue
                r, c = divmod(index, GRID_SIZE)
                cx = offset_x + c*cell_size + cell_size/2
                cy = offset_y + r*cell_size + cell_size/2
                rad = cell_size/2 * 0.7
                if mark is Cell.X:
                    painter.setPen(QPen(QColor(X_COLOR), 4))
                    # two crossing lines
                    painter.drawLine(QPointF(cx-rad, cy-rad), QPointF(cx+rad, cy+rad))
                    painter.drawLine(QPointF(cx+rad, cy-rad), QPointF(cx-rad, cy+rad))
                else:
                    painter.setPen(QPen(QColor(O_COLOR), 4))
                    painter.drawEllipse(QPointF(cx, cy), rad, rad)
        finally:
            painter.end()

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        if not self._accept_clicks or event.button() != Qt.LeftButton:
            return
        pos = event.position()
        index = self.index_at(pos.x(), pos.y())
        if index is not None:
            self.cell_clicked.emit(index)  # notify main window
