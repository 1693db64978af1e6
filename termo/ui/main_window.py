from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import Qt, QTimer, Signal
from PySide6.QtGui import QKeyEvent
from PySide6.QtWidgets import (
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from termo.core.actions import (
    Action,
    AdvanceLevel,
    HintRequest,
    ResetToZero,
    RestartLevel,
    TileClick,
    action_for_key,
)
from termo.core.errors import PoolExhausted
from termo.core.round import RoundController
from termo.core.session import GameStatus, Round
from termo.core.snapshot import RoundSnapshot
from termo.ui.board_widgets import BoardWidget, KeyboardWidget, tile_size_for_level
from termo.ui.colors import TermoColors

logger = logging.getLogger(__name__)

MAX_BOARD_COLUMNS = 4


class MainWindow(QMainWindow):
    """Game window: header, boards, hint button, keyboard and level controls.

    Every user input is turned into one logical action and handed to the
    controller; the window then re-renders from a fresh snapshot. Toast and
    shake timers are single-shot and are stopped whenever a new level starts.
    """

    dictionary_loaded = Signal(int)

    def __init__(self, controller: RoundController) -> None:
        super().__init__()
        self._controller = controller
        self._current_round: Optional[Round] = None
        self._board_widgets: list[BoardWidget] = []
        self._pending_toast_id: Optional[int] = None
        self._pending_shake_id: Optional[int] = None

        self._toast_timer = QTimer(self)
        self._toast_timer.setSingleShot(True)
        self._toast_timer.timeout.connect(self._expire_toast)
        self._shake_timer = QTimer(self)
        self._shake_timer.setSingleShot(True)
        self._shake_timer.timeout.connect(self._expire_shake)

        self._level_label: Optional[QLabel] = None
        self._score_label: Optional[QLabel] = None
        self._online_label: Optional[QLabel] = None
        self._toast_label: Optional[QLabel] = None
        self._boards_layout: Optional[QGridLayout] = None
        self._hint_button: Optional[QPushButton] = None
        self._keyboard: Optional[KeyboardWidget] = None
        self._controls: Optional[QWidget] = None
        self._next_button: Optional[QPushButton] = None
        self._retry_button: Optional[QPushButton] = None
        self._reset_button: Optional[QPushButton] = None
        self._solutions_label: Optional[QLabel] = None

        self.dictionary_loaded.connect(self._on_dictionary_loaded)
        self.setWindowTitle("Termo")
        self._build_ui()
        self._render()

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------

    def _build_ui(self) -> None:
        central = QWidget()
        central.setStyleSheet(f"background: {TermoColors.BG}; color: {TermoColors.TEXT};")
        root = QVBoxLayout(central)
        root.setContentsMargins(8, 8, 8, 8)

        header = QHBoxLayout()
        title_col = QVBoxLayout()
        title = QLabel("TERMO")
        title.setStyleSheet("font-size: 24px; font-weight: bold; letter-spacing: 2px;")
        self._level_label = QLabel()
        self._level_label.setStyleSheet(f"font-size: 11px; color: {TermoColors.TEXT_MUTED};")
        title_col.addWidget(title)
        title_col.addWidget(self._level_label)
        header.addLayout(title_col)
        header.addStretch(1)

        score_col = QVBoxLayout()
        self._score_label = QLabel()
        self._score_label.setAlignment(Qt.AlignRight)
        self._online_label = QLabel("ONLINE")
        self._online_label.setAlignment(Qt.AlignRight)
        self._online_label.setToolTip("Online dictionary")
        self._online_label.setStyleSheet(f"font-size: 10px; color: {TermoColors.CORRECT};")
        self._online_label.setVisible(False)
        score_col.addWidget(self._score_label)
        score_col.addWidget(self._online_label)
        header.addLayout(score_col)
        root.addLayout(header)

        self._toast_label = QLabel()
        self._toast_label.setAlignment(Qt.AlignCenter)
        self._toast_label.setStyleSheet(
            f"background: {TermoColors.TOAST_BG}; color: {TermoColors.TOAST_TEXT};"
            " font-weight: bold; padding: 6px 12px; border-radius: 4px;"
        )
        self._toast_label.setVisible(False)
        root.addWidget(self._toast_label, 0, Qt.AlignHCenter)

        boards_container = QWidget()
        self._boards_layout = QGridLayout(boards_container)
        self._boards_layout.setSpacing(16)
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QScrollArea.NoFrame)
        scroll.setFocusPolicy(Qt.NoFocus)
        scroll.setWidget(boards_container)
        root.addWidget(scroll, 1)

        hint_row = QHBoxLayout()
        hint_row.addStretch(1)
        self._hint_button = QPushButton()
        self._hint_button.setFocusPolicy(Qt.NoFocus)
        self._hint_button.clicked.connect(lambda: self._dispatch(HintRequest()))
        hint_row.addWidget(self._hint_button)
        root.addLayout(hint_row)

        self._keyboard = KeyboardWidget()
        self._keyboard.key_pressed.connect(self._on_virtual_key)
        root.addWidget(self._keyboard)

        self._controls = QWidget()
        controls_layout = QVBoxLayout(self._controls)
        self._solutions_label = QLabel()
        self._solutions_label.setAlignment(Qt.AlignCenter)
        self._solutions_label.setStyleSheet(
            f"background: {TermoColors.ABSENT}; padding: 6px; border-radius: 4px;"
        )
        self._next_button = self._control_button("Next level →", TermoColors.NEXT_LEVEL, AdvanceLevel())
        self._retry_button = self._control_button("Try again", TermoColors.RETRY, RestartLevel())
        self._reset_button = self._control_button("Restart from zero", TermoColors.RESET, ResetToZero())
        for widget in (self._solutions_label, self._next_button, self._retry_button, self._reset_button):
            controls_layout.addWidget(widget)
        root.addWidget(self._controls, 0, Qt.AlignHCenter)

        self.setCentralWidget(central)
        self.setFocusPolicy(Qt.StrongFocus)
        self.resize(720, 900)

    def _control_button(self, text: str, color: str, action: Action) -> QPushButton:
        button = QPushButton(text)
        button.setFocusPolicy(Qt.NoFocus)
        button.setMinimumWidth(280)
        button.setStyleSheet(
            f"QPushButton {{ background: {color}; color: {TermoColors.TEXT};"
            " font-weight: bold; padding: 10px; border-radius: 4px; }"
        )
        button.clicked.connect(lambda: self._dispatch(action))
        return button

    def _rebuild_boards(self, count: int) -> None:
        for widget in self._board_widgets:
            self._boards_layout.removeWidget(widget)
            widget.deleteLater()
        self._board_widgets = []
        columns = min(count, MAX_BOARD_COLUMNS)
        for i in range(count):
            board = BoardWidget()
            board.tile_clicked.connect(lambda index: self._dispatch(TileClick(index)))
            self._boards_layout.addWidget(board, i // columns, i % columns, Qt.AlignTop)
            self._board_widgets.append(board)

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def keyPressEvent(self, event: QKeyEvent) -> None:
        """Translate a physical key press into a game action."""
        if event.modifiers() & (
            Qt.KeyboardModifier.ControlModifier
            | Qt.KeyboardModifier.MetaModifier
            | Qt.KeyboardModifier.AltModifier
        ):
            super().keyPressEvent(event)
            return
        key = event.key()
        if key in (Qt.Key.Key_Return, Qt.Key.Key_Enter):
            name = "ENTER"
        elif key == Qt.Key.Key_Backspace:
            name = "BACKSPACE"
        elif key == Qt.Key.Key_Left:
            name = "ARROWLEFT"
        elif key == Qt.Key.Key_Right:
            name = "ARROWRIGHT"
        else:
            name = event.text()
        action = action_for_key(name) if name else None
        if action is None:
            super().keyPressEvent(event)
            return
        self._dispatch(action)

    def _on_virtual_key(self, key: str) -> None:
        action = action_for_key(key)
        if action is not None:
            self._dispatch(action)

    def _dispatch(self, action: Action) -> None:
        try:
            self._controller.dispatch(action)
        except PoolExhausted as e:
            logger.error("Cannot start level: %s", e)
            QMessageBox.information(self, "Termo", "There are not enough words left for the next level.")
        self._render()

    def _on_dictionary_loaded(self, added: int) -> None:
        logger.debug("Dictionary merge finished with %d new words", added)
        self._online_label.setVisible(self._controller.vocabulary.augmented)

    # ------------------------------------------------------------------
    # Transient feedback
    # ------------------------------------------------------------------

    def _schedule_feedback(self) -> None:
        config = self._controller.config
        toast = self._controller.toast
        if toast is not None and toast.id != self._pending_toast_id:
            self._pending_toast_id = toast.id
            self._toast_timer.start(config.toast_ms)
        shake_id = self._controller.shake_id
        if shake_id is not None and shake_id != self._pending_shake_id:
            self._pending_shake_id = shake_id
            self._shake_timer.start(config.shake_ms)

    def _cancel_feedback(self) -> None:
        self._toast_timer.stop()
        self._shake_timer.stop()
        self._pending_toast_id = None
        self._pending_shake_id = None

    def _expire_toast(self) -> None:
        if self._pending_toast_id is not None:
            self._controller.clear_toast(self._pending_toast_id)
        self._render()

    def _expire_shake(self) -> None:
        if self._pending_shake_id is not None:
            self._controller.clear_shake(self._pending_shake_id)
        self._render()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _render(self) -> None:
        if self._controller.round is not self._current_round:
            self._cancel_feedback()
            self._current_round = self._controller.round
            self._rebuild_boards(self._controller.round.num_words)
        self._schedule_feedback()
        self._render_snapshot(self._controller.snapshot())

    def _render_snapshot(self, snap: RoundSnapshot) -> None:
        noun = "WORDS" if snap.num_words > 1 else "WORD"
        self._level_label.setText(f"LEVEL {snap.level} • {snap.num_words} {noun}")
        self._score_label.setText(
            f"<span style='font-size: 20px; font-weight: bold; color: {TermoColors.CORRECT};'>"
            f"{snap.score}</span> <span style='color: {TermoColors.TEXT_MUTED};'>PTS</span>"
        )

        self._toast_label.setText(snap.toast or "")
        self._toast_label.setVisible(bool(snap.toast))

        tile = tile_size_for_level(snap.level)
        for widget, board in zip(self._board_widgets, snap.boards):
            widget.set_board(board, tile)
            widget.set_shaking(snap.shake)

        playing = snap.status is GameStatus.PLAYING
        self._hint_button.setVisible(playing)
        self._hint_button.setEnabled(snap.can_afford_hint)
        hint_color = TermoColors.HINT if snap.can_afford_hint else TermoColors.HINT_DISABLED
        self._hint_button.setText(f"💡 HINT  {snap.hint_cost} pts")
        self._hint_button.setStyleSheet(
            f"QPushButton {{ background: transparent; color: {hint_color};"
            f" border: 1px solid {hint_color}; border-radius: 12px;"
            " padding: 4px 12px; font-weight: bold; }"
        )

        self._keyboard.set_statuses(snap.key_statuses)

        self._controls.setVisible(not playing)
        won = snap.status is GameStatus.WON
        self._next_button.setVisible(won)
        self._retry_button.setVisible(not won)
        self._reset_button.setVisible(not won)
        self._solutions_label.setVisible(snap.status is GameStatus.LOST)
        self._solutions_label.setText("Solutions: " + ", ".join(snap.solutions))
