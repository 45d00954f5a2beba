"""Tests for BoardWidget click handling and painting."""

from __future__ import annotations

from PyQt6.QtCore import QPointF

from fusionchess.core.enums import Color
from fusionchess.core.types import D2, E2, E4, parse_square
from fusionchess.game.controller import GameController
from fusionchess.ui.board_widget import BoardWidget
from fusionchess.ui.settings import AppSettings
from fusionchess.ui.theme import THEME_NAMES, BoardTheme


def _widget(size: int = 400) -> BoardWidget:
    widget = BoardWidget()
    widget.resize(size, size)
    return widget


def test_square_at_maps_widget_coordinates() -> None:
    widget = _widget(400)
    assert widget.tile_size() == 50
    assert widget.square_at(QPointF(10, 10)) == parse_square("a8")
    assert widget.square_at(QPointF(75, 325)) == parse_square("b2")
    assert widget.square_at(QPointF(399, 399)) == parse_square("h1")


def test_square_at_outside_board_is_none() -> None:
    widget = _widget(400)
    assert widget.square_at(QPointF(-1, 10)) is None
    assert widget.square_at(QPointF(10, 401)) is None


def test_click_selects_then_moves() -> None:
    widget = _widget()
    changes: list[int] = []
    moves: list[int] = []
    widget.state_changed.connect(lambda: changes.append(1))
    widget.move_made.connect(lambda: moves.append(1))

    first = widget.click_square(E2)
    assert not first.moved
    assert widget.controller.selected_square == E2

    second = widget.click_square(E4)
    assert second.moved
    assert widget.controller.current_player == Color.BLACK
    assert len(changes) == 2
    assert len(moves) == 1


def test_shares_given_controller() -> None:
    controller = GameController()
    widget = BoardWidget(controller)
    widget.click_square(parse_square("b1"))
    widget.click_square(D2)
    assert controller.move_history[-1].move.is_fusion


def test_paint_with_selection_and_fused_piece() -> None:
    widget = _widget(320)
    widget.click_square(parse_square("b1"))
    widget.click_square(D2)
    widget.click_square(parse_square("e7"))
    assert widget.controller.possible_moves
    pixmap = widget.grab()
    assert not pixmap.isNull()


def test_apply_settings() -> None:
    widget = _widget()
    widget.apply_settings(
        AppSettings(board_theme="Blue", show_coordinates=False, show_legal_moves=False)
    )
    assert widget._theme == BoardTheme.blue()
    assert not widget._show_coordinates
    assert not widget._show_legal_moves
    assert not widget.grab().isNull()


def test_unknown_theme_falls_back_to_classic() -> None:
    assert BoardTheme.by_name("Neon") == BoardTheme.default()
    assert set(THEME_NAMES) == {"Classic", "Blue"}
