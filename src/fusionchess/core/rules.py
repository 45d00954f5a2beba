"""High-level rules: check, checkmate, stalemate and game status."""

from __future__ import annotations

from fusionchess.core.board import Board
from fusionchess.core.enums import Color, GameStatus
from fusionchess.core.move_generator import MoveGenerator


class Rules:
    """Static rule-checker that operates on a :class:`Board` and a side.

    Checkmate is the only win condition. Kings are never captured: the
    legality filter rejects every move that leaves the mover's king
    attacked, so a king capture can never be a legal reply.
    """

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        return MoveGenerator(board).is_king_in_check(color)

    @staticmethod
    def has_legal_move(board: Board, color: Color) -> bool:
        return MoveGenerator(board).has_legal_move(color)

    @staticmethod
    def is_checkmate(board: Board, color: Color) -> bool:
        return Rules.game_status(board, color) == GameStatus.CHECKMATE

    @staticmethod
    def is_stalemate(board: Board, color: Color) -> bool:
        return Rules.game_status(board, color) == GameStatus.STALEMATE

    @staticmethod
    def game_status(board: Board, side_to_move: Color) -> GameStatus:
        """Classify the position for *side_to_move*."""
        gen = MoveGenerator(board)
        in_check = gen.is_king_in_check(side_to_move)
        if not gen.has_legal_move(side_to_move):
            return GameStatus.CHECKMATE if in_check else GameStatus.STALEMATE
        if in_check:
            return GameStatus.CHECK
        return GameStatus.PLAYING

    @staticmethod
    def winner(status: GameStatus, side_to_move: Color) -> Color | None:
        """The side that delivered mate, ``None`` for any other status."""
        if status == GameStatus.CHECKMATE:
            return side_to_move.opposite
        return None
