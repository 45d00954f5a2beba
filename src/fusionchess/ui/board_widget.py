"""BoardWidget — paints the board and forwards clicks to the controller."""

from __future__ import annotations

from PyQt6.QtCore import QPointF, QRectF, Qt, pyqtSignal
from PyQt6.QtGui import QFont, QMouseEvent, QPainter, QPaintEvent
from PyQt6.QtWidgets import QSizePolicy, QWidget

from fusionchess.core.enums import Color, GameStatus
from fusionchess.core.types import Square
from fusionchess.game.controller import GameController, SelectResult
from fusionchess.ui.settings import AppSettings
from fusionchess.ui.theme import BoardTheme


class BoardWidget(QWidget):
    """Renders the board, selection, move targets and pieces.

    Clicks drive :meth:`GameController.select_square`; normal targets and
    fusion targets are highlighted in different colours.

    Signals:
        state_changed(): Emitted after every handled click.
        move_made(): Emitted when a click completed a move.
    """

    state_changed = pyqtSignal()
    move_made = pyqtSignal()

    def __init__(
        self,
        controller: GameController | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._controller = controller if controller is not None else GameController()
        self._theme = BoardTheme.default()
        self._show_coordinates = True
        self._show_legal_moves = True

        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(320, 320)

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def controller(self) -> GameController:
        return self._controller

    def apply_settings(self, settings: AppSettings) -> None:
        self._theme = BoardTheme.by_name(settings.board_theme)
        self._show_coordinates = settings.show_coordinates
        self._show_legal_moves = settings.show_legal_moves
        self.update()

    def tile_size(self) -> float:
        return min(self.width(), self.height()) / 8

    def square_at(self, pos: QPointF) -> Square | None:
        """Board square under widget coordinates *pos*, if any."""
        tile = self.tile_size()
        if tile <= 0 or pos.x() < 0 or pos.y() < 0:
            return None
        row, col = int(pos.y() // tile), int(pos.x() // tile)
        if row > 7 or col > 7:
            return None
        return (row, col)

    def click_square(self, sq: Square) -> SelectResult:
        result = self._controller.select_square(*sq)
        self.update()
        self.state_changed.emit()
        if result.moved:
            self.move_made.emit()
        return result

    # ── Qt events ────────────────────────────────────────────────────────

    def mousePressEvent(self, event: QMouseEvent | None) -> None:
        if event is None or event.button() != Qt.MouseButton.LeftButton:
            return super().mousePressEvent(event)
        sq = self.square_at(event.position())
        if sq is not None:
            self.click_square(sq)

    def paintEvent(self, event: QPaintEvent | None) -> None:
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing)
            self._draw_squares(painter)
            self._draw_highlights(painter)
            self._draw_pieces(painter)
        finally:
            painter.end()

    # ── Drawing ──────────────────────────────────────────────────────────

    def _rect(self, sq: Square) -> QRectF:
        t = self.tile_size()
        row, col = sq
        return QRectF(col * t, row * t, t, t)

    def _draw_squares(self, painter: QPainter) -> None:
        t = self.tile_size()
        font = QFont("Sans Serif", max(7, int(t // 8)))
        painter.setFont(font)
        theme = self._theme
        for row in range(8):
            for col in range(8):
                is_light = (row + col) % 2 == 0
                color = theme.light_square if is_light else theme.dark_square
                rect = self._rect((row, col))
                painter.fillRect(rect, color)
                if not self._show_coordinates:
                    continue
                painter.setPen(
                    theme.coord_dark if is_light else theme.coord_light
                )
                # Rank numbers (left edge), file letters (bottom edge)
                if col == 0:
                    painter.drawText(
                        rect.adjusted(2, 1, 0, 0),
                        Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop,
                        str(8 - row),
                    )
                if row == 7:
                    painter.drawText(
                        rect.adjusted(0, 0, -3, -1),
                        Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignBottom,
                        chr(ord("a") + col),
                    )

    def _draw_highlights(self, painter: QPainter) -> None:
        controller = self._controller
        state = controller.state
        if state.status in (GameStatus.CHECK, GameStatus.CHECKMATE):
            king_sq = state.board().king_square(state.side_to_move)
            if king_sq is not None:
                painter.fillRect(self._rect(king_sq), self._theme.highlight_check)

        selected = controller.selected_square
        if selected is None:
            return
        painter.fillRect(self._rect(selected), self._theme.highlight_from)
        if not self._show_legal_moves:
            return
        for candidate in controller.possible_moves:
            color = (
                self._theme.highlight_fusion
                if candidate.is_fusion
                else self._theme.highlight_to
            )
            painter.fillRect(self._rect(candidate.to_sq), color)

    def _draw_pieces(self, painter: QPainter) -> None:
        t = self.tile_size()
        glyph_font = QFont("Sans Serif", max(8, int(t * 0.55)))
        fused_font = QFont("Sans Serif", max(6, int(t * 0.22)))
        fused_font.setBold(True)
        for row, cells in enumerate(self._controller.state.cells):
            for col, piece in enumerate(cells):
                if piece is None:
                    continue
                if piece.is_fused:
                    painter.setFont(fused_font)
                    painter.setPen(
                        self._theme.white_piece
                        if piece.color == Color.WHITE
                        else self._theme.black_piece
                    )
                else:
                    painter.setFont(glyph_font)
                    painter.setPen(self._theme.black_piece)
                painter.drawText(
                    self._rect((row, col)), Qt.AlignmentFlag.AlignCenter, piece.symbol
                )
