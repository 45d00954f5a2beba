"""Tests for position text parsing/serialization and square names."""

import pytest

from fusionchess.core.board import Board
from fusionchess.core.enums import Color, PieceType
from fusionchess.core.notation import STARTING_FEN, parse_fen, to_fen
from fusionchess.core.piece import Piece
from fusionchess.core.types import (
    E2,
    InvalidCoordinateError,
    parse_square,
    square_name,
    validate_square,
)


class TestSquareNames:
    def test_square_name(self) -> None:
        assert square_name(E2) == "e2"
        assert square_name((0, 0)) == "a8"
        assert square_name((7, 7)) == "h1"

    def test_parse_square(self) -> None:
        assert parse_square("e2") == (6, 4)
        assert parse_square("a8") == (0, 0)

    @pytest.mark.parametrize("name", ["", "e9", "i1", "e22"])
    def test_parse_square_invalid(self, name: str) -> None:
        with pytest.raises(InvalidCoordinateError):
            parse_square(name)

    def test_validate_square(self) -> None:
        assert validate_square(3, 4) == (3, 4)
        with pytest.raises(InvalidCoordinateError):
            validate_square(8, 0)
        with pytest.raises(ValueError):
            validate_square(0, -1)


class TestParseFen:
    def test_starting_position(self) -> None:
        board, side = parse_fen(STARTING_FEN)
        assert board == Board.initial()
        assert side == Color.WHITE

    def test_side_defaults_to_white(self) -> None:
        _, side = parse_fen("4k3/8/8/8/8/8/8/4K3")
        assert side == Color.WHITE

    def test_black_to_move(self) -> None:
        _, side = parse_fen("4k3/8/8/8/8/8/8/4K3 b")
        assert side == Color.BLACK

    def test_fused_group(self) -> None:
        board, _ = parse_fen("4k3/8/8/8/3(RN)4/8/8/4K3 w")
        assert board[(4, 3)] == Piece.fused(
            Color.WHITE, [PieceType.ROOK, PieceType.KNIGHT]
        )

    def test_black_fused_group(self) -> None:
        board, _ = parse_fen("(bnq)3k3/8/8/8/8/8/8/4K3 b")
        piece = board[(0, 0)]
        assert piece is not None
        assert piece.color == Color.BLACK
        assert piece.kinds == {PieceType.BISHOP, PieceType.KNIGHT, PieceType.QUEEN}

    @pytest.mark.parametrize(
        "fen",
        [
            "",
            "8/8/8/8/8/8/8 w",  # seven ranks
            "9/8/8/8/8/8/8/8 w",
            "4k4/8/8/8/8/8/8/4K3 w",  # rank too wide
            "4k2/8/8/8/8/8/8/4K3 w",  # rank too short
            "4k3/8/8/8/8/8/8/4K3 x",
            "4k3/8/8/8/8/8/8/4K3 w extra",
            "(Rn)3k3/8/8/8/8/8/8/4K3 w",  # mixed colors
            "(R3k3/8/8/8/8/8/8/4K3 w",  # unclosed group
            "(KQ)3k3/8/8/8/8/8/8/8 w",  # fused king
            "(R)3k3/8/8/8/8/8/8/4K3 w",  # group of one
        ],
    )
    def test_invalid(self, fen: str) -> None:
        with pytest.raises(ValueError):
            parse_fen(fen)


class TestToFen:
    def test_starting_position(self) -> None:
        assert to_fen(Board.initial(), Color.WHITE) == STARTING_FEN

    @pytest.mark.parametrize(
        "fen",
        [
            "4k3/8/8/8/3(NR)4/8/8/4K3 w",
            "r3k2r/ppp2ppp/2n1b3/3qp3/3P4/2(NB)2N2/PPP2PPP/R2QK2R b",
            "(pnq)3k3/8/8/8/8/8/8/4K3 b",
        ],
    )
    def test_round_trip(self, fen: str) -> None:
        board, side = parse_fen(fen)
        assert to_fen(board, side) == fen

    def test_fused_kinds_written_in_canonical_order(self) -> None:
        board, side = parse_fen("4k3/8/8/8/3(RN)4/8/8/4K3 w")
        assert to_fen(board, side) == "4k3/8/8/8/3(NR)4/8/8/4K3 w"
