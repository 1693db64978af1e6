"""Game board and on-screen keyboard widgets."""

from __future__ import annotations

from typing import Mapping, Optional

from PySide6.QtCore import QRect, Qt, QTimer, Signal
from PySide6.QtGui import QColor, QMouseEvent, QPainter, QPen
from PySide6.QtWidgets import QHBoxLayout, QPushButton, QSizePolicy, QVBoxLayout, QWidget

from termo.core.keyboard import KEYBOARD_ROWS
from termo.core.scoring import CharStatus
from termo.core.snapshot import BoardView
from termo.ui.colors import TermoColors, dimmed, key_fill, status_fill

SHAKE_OFFSETS = (0, -6, 6, -4, 4, -2, 2, 0)


def tile_size_for_level(level: int) -> int:
    """Tile edge in pixels; boards shrink as more of them share the window."""
    if level == 0:
        return 56
    if level == 1:
        return 40
    return 32


class BoardWidget(QWidget):
    """Paints one board: scored rows, the active input row and empty rows."""

    tile_clicked = Signal(int)

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._board: Optional[BoardView] = None
        self._tile = 56
        self._gap = 4
        self._shake_step = 0
        self._shake_timer = QTimer(self)
        self._shake_timer.setInterval(50)
        self._shake_timer.timeout.connect(self._advance_shake)

    def set_board(self, board: BoardView, tile_size: int) -> None:
        self._board = board
        self._tile = tile_size
        self.setFixedSize(self._content_width(), self._content_height())
        self.update()

    def set_shaking(self, shaking: bool) -> None:
        if shaking and not self._shake_timer.isActive():
            self._shake_step = 0
            self._shake_timer.start()
        elif not shaking:
            self._shake_timer.stop()
            self._shake_step = 0
            self.update()

    def _advance_shake(self) -> None:
        self._shake_step = (self._shake_step + 1) % len(SHAKE_OFFSETS)
        self.update()

    def _content_width(self) -> int:
        if not self._board or not self._board.rows:
            return 0
        n = len(self._board.rows[0].tiles)
        return n * self._tile + (n - 1) * self._gap + 2 * max(SHAKE_OFFSETS)

    def _content_height(self) -> int:
        if not self._board:
            return 0
        n = len(self._board.rows)
        return n * self._tile + (n - 1) * self._gap

    def _tile_rect(self, row: int, col: int, x_offset: int = 0) -> QRect:
        x = max(SHAKE_OFFSETS) + col * (self._tile + self._gap) + x_offset
        y = row * (self._tile + self._gap)
        return QRect(x, y, self._tile, self._tile)

    def mousePressEvent(self, event: QMouseEvent) -> None:
        """Report clicks on tiles of the active row."""
        if self._board is not None:
            pos = event.position().toPoint()
            for r, row in enumerate(self._board.rows):
                if not row.active:
                    continue
                for c in range(len(row.tiles)):
                    if self._tile_rect(r, c).contains(pos):
                        self.tile_clicked.emit(c)
                        return
        super().mousePressEvent(event)

    def paintEvent(self, event) -> None:
        """Paint every row of the board."""
        super().paintEvent(event)
        if not self._board:
            return
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)
        font = painter.font()
        font.setPointSize(max(9, int(self._tile * 0.4)))
        font.setBold(True)
        painter.setFont(font)

        for r, row in enumerate(self._board.rows):
            offset = SHAKE_OFFSETS[self._shake_step] if row.active else 0
            for c, tile in enumerate(row.tiles):
                rect = self._tile_rect(r, c, offset)
                fill = status_fill(tile.status)
                if tile.status is CharStatus.INITIAL:
                    border = TermoColors.TILE_BORDER_FILLED if tile.char else TermoColors.TILE_BORDER_EMPTY
                else:
                    border = fill
                if row.dimmed:
                    fill, border = dimmed(fill), dimmed(border)

                painter.setBrush(QColor(fill))
                if row.active and row.cursor == c:
                    painter.setPen(QPen(QColor(TermoColors.CURSOR), 2))
                    painter.drawRect(rect)
                    painter.fillRect(
                        QRect(rect.left(), rect.bottom() - 3, rect.width(), 4),
                        QColor(TermoColors.CURSOR),
                    )
                else:
                    painter.setPen(QPen(QColor(border), 2))
                    painter.drawRect(rect)

                if tile.char:
                    painter.setPen(QColor(TermoColors.TEXT))
                    painter.drawText(rect, Qt.AlignCenter, tile.char)


class KeyboardWidget(QWidget):
    """On-screen QWERTY keyboard coloured by the best known status per letter."""

    key_pressed = Signal(str)

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._buttons: dict[str, QPushButton] = {}
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 0, 4, 0)
        layout.setSpacing(6)

        for i, row in enumerate(KEYBOARD_ROWS):
            row_layout = QHBoxLayout()
            row_layout.setSpacing(4)
            for letter in row:
                button = self._make_button(letter, letter)
                self._buttons[letter] = button
                row_layout.addWidget(button)
            if i == len(KEYBOARD_ROWS) - 1:
                row_layout.addWidget(self._make_button("⌫", "BACKSPACE", max_width=50))
                row_layout.addWidget(self._make_button("ENT", "ENTER", max_width=50))
            layout.addLayout(row_layout)

        self.set_statuses({})

    def _make_button(self, text: str, key: str, max_width: Optional[int] = None) -> QPushButton:
        button = QPushButton(text)
        button.setFocusPolicy(Qt.NoFocus)
        button.setCursor(Qt.PointingHandCursor)
        button.setMinimumHeight(44)
        button.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Fixed)
        if max_width is not None:
            button.setMaximumWidth(max_width)
            button.setStyleSheet(self._style(TermoColors.KEY_DEFAULT))
        button.clicked.connect(lambda _checked=False, k=key: self.key_pressed.emit(k))
        return button

    @staticmethod
    def _style(fill: str) -> str:
        return (
            f"QPushButton {{ background: {fill}; color: {TermoColors.TEXT};"
            " border: none; border-radius: 4px; font-weight: bold; }"
        )

    def set_statuses(self, statuses: Mapping[str, CharStatus]) -> None:
        for letter, button in self._buttons.items():
            button.setStyleSheet(self._style(key_fill(statuses.get(letter, CharStatus.INITIAL))))
