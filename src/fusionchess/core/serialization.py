"""JSON-friendly payloads shared by the UI, transport and persistence layers.

Piece shape: ``{"color": "white", "kind": "rook"}`` for a plain piece,
``{"color": "white", "fusedKinds": ["knight", "rook"]}`` for a fused one.
Fused kinds are listed in piece-type order.
"""

from __future__ import annotations

from typing import Any

from fusionchess.core.board import Board
from fusionchess.core.enums import Color, PieceType
from fusionchess.core.move import Move, MoveCandidate
from fusionchess.core.piece import Piece
from fusionchess.core.types import Square, validate_square

_COLORS: dict[str, Color] = {str(c): c for c in Color}
_KINDS: dict[str, PieceType] = {str(k): k for k in PieceType}


def color_from_name(name: str) -> Color:
    try:
        return _COLORS[name]
    except KeyError:
        raise ValueError(f"Invalid color: {name!r}") from None


def piece_to_dict(piece: Piece | None) -> dict[str, Any] | None:
    if piece is None:
        return None
    if piece.is_fused:
        return {
            "color": str(piece.color),
            "fusedKinds": [str(k) for k in piece.sorted_kinds],
        }
    return {"color": str(piece.color), "kind": str(piece.kind)}


def piece_from_dict(data: dict[str, Any] | None) -> Piece | None:
    if data is None:
        return None
    color = color_from_name(data.get("color", ""))
    names = data["fusedKinds"] if "fusedKinds" in data else [data.get("kind", "")]
    try:
        kinds = frozenset(_KINDS[name] for name in names)
    except KeyError as exc:
        raise ValueError(f"Invalid piece kind: {exc.args[0]!r}") from None
    return Piece(color, kinds)


def square_to_dict(sq: Square | None) -> dict[str, int] | None:
    if sq is None:
        return None
    return {"row": sq[0], "col": sq[1]}


def square_from_dict(data: dict[str, Any]) -> Square:
    return validate_square(int(data["row"]), int(data["col"]))


def candidate_to_dict(candidate: MoveCandidate) -> dict[str, Any]:
    return {"row": candidate.row, "col": candidate.col, "isFusion": candidate.is_fusion}


def move_to_dict(move: Move) -> dict[str, Any]:
    return {
        "from": square_to_dict(move.from_sq),
        "to": square_to_dict(move.to_sq),
        "isFusion": move.is_fusion,
    }


def board_to_payload(board: Board) -> list[list[dict[str, Any] | None]]:
    """8x8 nested list, row 0 first."""
    return [
        [piece_to_dict(board[(row, col)]) for col in range(8)] for row in range(8)
    ]


def board_from_payload(payload: list[list[dict[str, Any] | None]]) -> Board:
    """Rebuild a board from :func:`board_to_payload` output."""
    if len(payload) != 8 or any(len(row) != 8 for row in payload):
        raise ValueError("Board payload must be 8x8")
    board = Board()
    for row, cells in enumerate(payload):
        for col, cell in enumerate(cells):
            board[(row, col)] = piece_from_dict(cell)
    return board
