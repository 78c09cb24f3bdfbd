from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QPointF, QRectF
from PySide6.QtGui import QPainter, QPen

from ..game_logic import BOARD_CELLS, Mark
from . import theme

GRID_SIZE = 3


def cell_description(mark, index):
    # e.g. "Cell 1, empty" / "Cell 5, X"
    return f"Cell {index + 1}, {mark.value if mark is not Mark.EMPTY else 'empty'}"


class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board
    """
    cell_clicked = Signal(int)  # emits cell index 0-8 on click

    def __init__(self, session, parent=None):
        super().__init__(parent)
        self.session = session          # reference to game state
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))
        self.setAccessibleName("Tic Tac Toe board")
        self._accept_clicks = True      # toggle click handling
        self._theme = theme.LIGHT

    def set_accept_clicks(self, accept):
        # enable/disable user input
        self._accept_clicks = accept

    def set_theme(self, name):
        self._theme = name
        self.update()

    def refresh(self):
        """
        repaint and refresh the accessible description of all cells
        """
        board = self.session.board
        self.setAccessibleDescription("; ".join(
            cell_description(mark, i) for i, mark in enumerate(board)))
        self.update()

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _grid_geometry(self):
        # square area centred in the widget: (offset_x, offset_y, side)
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w - side) / 2, (h - side) / 2, side

    def cell_rect(self, index):
        ox, oy, side = self._grid_geometry()
        cell = side / GRID_SIZE
        row, col = divmod(index, GRID_SIZE)
        return QRectF(ox + col * cell, oy + row * cell, cell, cell)

    def index_at(self, point):
        """
        map a widget position to a cell index, None outside the grid
        """
        ox, oy, side = self._grid_geometry()
        if side <= 0:
            return None
        x, y = point.x(), point.y()
        if not (ox <= x < ox + side and oy <= y < oy + side):
            return None
        cell = side / GRID_SIZE
        col = int((x - ox) // cell); row = int((y - oy) // cell)
        # clamp to valid range
        row = max(0, min(row, GRID_SIZE - 1)); col = max(0, min(col, GRID_SIZE - 1))
        return row * GRID_SIZE + col

    def paintEvent(self, event):
        """
        draw grid, X/O marks, and highlight the winning line
        """
        colors = theme.BOARD_COLORS[self._theme]
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            ox, oy, side = self._grid_geometry()
            cell = side / GRID_SIZE
            painter.fillRect(self.rect(), colors["background"])
            # winning cells first so marks draw on top
            for i in self.session.outcome.line:
                painter.fillRect(self.cell_rect(i), colors["highlight"])
            # grid lines
            painter.setPen(QPen(colors["grid"], 2))
            for i in range(1, GRID_SIZE):
                x = ox + i * cell
                painter.drawLine(int(x), int(oy), int(x), int(oy + side))
                y = oy + i * cell
                painter.drawLine(int(ox), int(y), int(ox + side), int(y))
            # draw marks
            board = self.session.board
            for i in range(BOARD_CELLS):
                sym = board[i]
                if sym is Mark.EMPTY: continue
                center = self.cell_rect(i).center()
                cx, cy = center.x(), center.y()
                rad = cell / 2 * 0.6
                if sym is Mark.X:
                    painter.setPen(QPen(colors["x"], 4, Qt.SolidLine, Qt.RoundCap))
                    # two crossing lines
                    painter.drawLine(QPointF(cx - rad, cy - rad), QPointF(cx + rad, cy + rad))
                    painter.drawLine(QPointF(cx + rad, cy - rad), QPointF(cx - rad, cy + rad))
                else:
                    painter.setPen(QPen(colors["o"], 4))
                    painter.drawEllipse(QPointF(cx, cy), rad, rad)
        finally:
            painter.end()

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        if not self._accept_clicks or self.session.is_game_over:
            return
        index = self.index_at(event.position())
        # occupied cells behave like disabled buttons
        if index is None or not self.session.is_cell_empty(index):
            return
        self.cell_clicked.emit(index)  # notify main window
