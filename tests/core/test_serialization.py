"""Tests for the JSON-friendly wire payloads."""

import pytest

from fusionchess.core.board import Board
from fusionchess.core.enums import Color, PieceType
from fusionchess.core.move import Move, MoveCandidate
from fusionchess.core.notation import parse_fen
from fusionchess.core.piece import Piece
from fusionchess.core.serialization import (
    board_from_payload,
    board_to_payload,
    candidate_to_dict,
    color_from_name,
    move_to_dict,
    piece_from_dict,
    piece_to_dict,
    square_from_dict,
    square_to_dict,
)
from fusionchess.core.types import E2, E4, InvalidCoordinateError


class TestPieces:
    def test_plain_piece(self) -> None:
        piece = Piece.of(Color.WHITE, PieceType.ROOK)
        assert piece_to_dict(piece) == {"color": "white", "kind": "rook"}

    def test_fused_piece_in_type_order(self) -> None:
        piece = Piece.fused(Color.BLACK, [PieceType.ROOK, PieceType.PAWN])
        assert piece_to_dict(piece) == {
            "color": "black",
            "fusedKinds": ["pawn", "rook"],
        }

    def test_empty_cell(self) -> None:
        assert piece_to_dict(None) is None
        assert piece_from_dict(None) is None

    def test_parse_fused(self) -> None:
        data = {"color": "white", "fusedKinds": ["knight", "bishop"]}
        assert piece_from_dict(data) == Piece.fused(
            Color.WHITE, [PieceType.BISHOP, PieceType.KNIGHT]
        )

    @pytest.mark.parametrize(
        "data",
        [
            {"color": "green", "kind": "rook"},
            {"color": "white", "kind": "dragon"},
            {"color": "white", "fusedKinds": []},
            {"color": "white", "fusedKinds": ["king", "rook"]},
        ],
    )
    def test_invalid_piece(self, data: dict[str, object]) -> None:
        with pytest.raises(ValueError):
            piece_from_dict(data)

    def test_color_from_name(self) -> None:
        assert color_from_name("black") == Color.BLACK
        with pytest.raises(ValueError):
            color_from_name("BLACK")


class TestSquaresAndMoves:
    def test_square(self) -> None:
        assert square_to_dict(E2) == {"row": 6, "col": 4}
        assert square_to_dict(None) is None
        assert square_from_dict({"row": 6, "col": 4}) == E2

    def test_square_off_board(self) -> None:
        with pytest.raises(InvalidCoordinateError):
            square_from_dict({"row": 9, "col": 0})

    def test_candidate(self) -> None:
        assert candidate_to_dict(MoveCandidate(E4, is_fusion=True)) == {
            "row": 4,
            "col": 4,
            "isFusion": True,
        }

    def test_move(self) -> None:
        assert move_to_dict(Move(E2, E4)) == {
            "from": {"row": 6, "col": 4},
            "to": {"row": 4, "col": 4},
            "isFusion": False,
        }


class TestBoardPayload:
    def test_shape(self) -> None:
        payload = board_to_payload(Board.initial())
        assert len(payload) == 8
        assert all(len(row) == 8 for row in payload)
        assert payload[0][4] == {"color": "black", "kind": "king"}
        assert payload[7][3] == {"color": "white", "kind": "queen"}
        assert payload[4][4] is None

    def test_round_trip_with_fused_pieces(self) -> None:
        board, _ = parse_fen("r3k2r/ppp2ppp/2n1b3/3qp3/3P4/2(NB)2N2/PPP2PPP/R2QK2R w")
        assert board_from_payload(board_to_payload(board)) == board

    def test_rejects_wrong_shape(self) -> None:
        payload = board_to_payload(Board.initial())
        with pytest.raises(ValueError):
            board_from_payload(payload[:7])
        payload[3] = payload[3][:5]
        with pytest.raises(ValueError):
            board_from_payload(payload)
