"""MainWindow — top-level window: board, status line, new-game button."""

from __future__ import annotations

from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from fusionchess.core.enums import Color, GameStatus
from fusionchess.game.controller import GameController
from fusionchess.ui.board_widget import BoardWidget
from fusionchess.ui.settings import AppSettings

RULES_TEXT = (
    "Standard chess moves.\n"
    "Click a piece, then click a destination.\n"
    "Yellow squares: normal moves. Pink squares: fusion moves.\n"
    "Move onto an allied piece (except the king) to fuse;\n"
    "fused pieces combine their moves.\n"
    "Kings cannot be left in check."
)


def status_text(status: GameStatus, side_to_move: Color, winner: Color | None) -> str:
    """One-line description of the game status for the status label."""
    side = str(side_to_move).capitalize()
    if status == GameStatus.CHECK:
        return f"{side} is in CHECK!"
    if status == GameStatus.CHECKMATE and winner is not None:
        return f"CHECKMATE! {str(winner).capitalize()} wins!"
    if status == GameStatus.STALEMATE:
        return "STALEMATE! It's a draw!"
    return f"{side}'s turn"


class MainWindow(QMainWindow):
    """Main application window for Fusion Chess."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self.setWindowTitle("Fusion Chess")
        self.setMinimumSize(720, 520)

        self._controller = GameController()
        self._settings = settings if settings is not None else AppSettings()

        self._setup_ui()
        self._board.apply_settings(self._settings)
        self._refresh_status()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QHBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        self._board = BoardWidget(self._controller)
        self._board.state_changed.connect(self._refresh_status)
        root.addWidget(self._board, stretch=3)

        right = QVBoxLayout()
        right.setSpacing(6)

        self._status_label = QLabel()
        self._status_label.setFont(QFont("Sans Serif", 13, QFont.Weight.Bold))
        self._status_label.setWordWrap(True)
        right.addWidget(self._status_label)

        self._btn_new = QPushButton("New Game")
        self._btn_new.setMinimumHeight(36)
        self._btn_new.clicked.connect(self._on_new_game)
        right.addWidget(self._btn_new)

        rules = QLabel(RULES_TEXT)
        rules.setWordWrap(True)
        right.addWidget(rules)
        right.addStretch(1)

        right_widget = QWidget()
        right_widget.setLayout(right)
        right_widget.setFixedWidth(260)
        root.addWidget(right_widget)

    # ── Slots ────────────────────────────────────────────────────────────

    @property
    def controller(self) -> GameController:
        return self._controller

    @property
    def board_widget(self) -> BoardWidget:
        return self._board

    def status_message(self) -> str:
        return self._status_label.text()

    def _on_new_game(self) -> None:
        self._controller.reset()
        self._board.update()
        self._refresh_status()

    def _refresh_status(self) -> None:
        c = self._controller
        self._status_label.setText(
            status_text(c.game_status, c.current_player, c.get_winner())
        )
        self._btn_new.setText("Start New Game" if c.is_game_over() else "New Game")
