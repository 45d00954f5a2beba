"""Core domain layer — pure fusion chess rules with zero external dependencies.

Quick start::

    from fusionchess.core import Board, MoveGenerator, Rules, Color

    board = Board.initial()
    gen = MoveGenerator(board)
    for candidate in gen.legal_moves((7, 1)):
        print(candidate)
    print(Rules.game_status(board, Color.WHITE))
"""

from fusionchess.core.board import Board
from fusionchess.core.enums import Color, GameStatus, PieceType
from fusionchess.core.fusion import can_fuse, fuse
from fusionchess.core.move import Move, MoveCandidate
from fusionchess.core.move_generator import MoveGenerator, apply_move
from fusionchess.core.notation import STARTING_FEN, parse_fen, to_fen
from fusionchess.core.piece import Piece
from fusionchess.core.rules import Rules
from fusionchess.core.types import (
    InvalidCoordinateError,
    Square,
    is_on_board,
    parse_square,
    square_name,
    validate_square,
)

__all__ = [
    # Enums
    "Color",
    "GameStatus",
    "PieceType",
    # Types / helpers
    "InvalidCoordinateError",
    "Square",
    "is_on_board",
    "parse_square",
    "square_name",
    "validate_square",
    # Domain objects
    "Board",
    "Move",
    "MoveCandidate",
    "MoveGenerator",
    "Piece",
    "Rules",
    "apply_move",
    "can_fuse",
    "fuse",
    # Notation
    "STARTING_FEN",
    "parse_fen",
    "to_fen",
]
