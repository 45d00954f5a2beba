"""Immutable game state and its pure transition function."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from fusionchess.core.board import Board, Cells
from fusionchess.core.enums import Color, GameStatus
from fusionchess.core.move import Move, MoveCandidate
from fusionchess.core.move_generator import MoveGenerator, apply_move
from fusionchess.core.notation import parse_fen, to_fen
from fusionchess.core.piece import Piece
from fusionchess.core.rules import Rules
from fusionchess.core.types import Square, validate_square


class IllegalMoveError(ValueError):
    """Raised when a proposed move is illegal for the current state."""


class GameOverError(IllegalMoveError):
    """Raised when a move is attempted after checkmate or stalemate."""


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """A single entry in the move history.

    ``captured`` holds the enemy piece taken by a capture, or the allied
    piece absorbed by a fusion; it is ``None`` for a quiet move.
    """

    move: Move
    piece: Piece
    captured: Piece | None
    status_after: GameStatus

    @property
    def was_capture(self) -> bool:
        return self.captured is not None and not self.move.is_fusion

    @property
    def was_check(self) -> bool:
        return self.status_after in (GameStatus.CHECK, GameStatus.CHECKMATE)


@dataclass(frozen=True, slots=True)
class GameState:
    """Board snapshot + side to move + derived status + history.

    Values are never mutated. :meth:`apply_move` and :meth:`undo` return a
    new state, so snapshots can be kept, compared and shared freely.
    """

    cells: Cells
    side_to_move: Color = Color.WHITE
    status: GameStatus = GameStatus.PLAYING
    history: tuple[MoveRecord, ...] = ()

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def from_board(cls, board: Board, side_to_move: Color = Color.WHITE) -> GameState:
        return cls(
            cells=board.cells(),
            side_to_move=side_to_move,
            status=Rules.game_status(board, side_to_move),
        )

    @classmethod
    def initial(cls) -> GameState:
        """Standard starting position, white to move."""
        return cls.from_board(Board.initial(), Color.WHITE)

    @classmethod
    def from_fen(cls, fen: str) -> GameState:
        board, side = parse_fen(fen)
        return cls.from_board(board, side)

    @classmethod
    def replay(cls, moves: Iterable[Move], start: GameState | None = None) -> GameState:
        """Apply *moves* in order from *start* (default: initial position)."""
        state = start if start is not None else cls.initial()
        for move in moves:
            state = state.apply_move(move)
        return state

    # ── Queries ──────────────────────────────────────────────────────────

    def board(self) -> Board:
        """A fresh mutable copy of the board."""
        return Board.from_cells(self.cells)

    def piece_at(self, sq: Square) -> Piece | None:
        row, col = validate_square(*sq)
        return self.cells[row][col]

    def legal_moves(self, sq: Square) -> list[MoveCandidate]:
        """Legal destinations for the piece on *sq* (any color)."""
        validate_square(*sq)
        return MoveGenerator(self.board()).legal_moves(sq)

    def all_legal_moves(self, color: Color | None = None) -> list[Move]:
        """Legal moves for *color* (default: the side to move)."""
        side = self.side_to_move if color is None else color
        return MoveGenerator(self.board()).all_legal_moves(side)

    def find_move(self, from_sq: Square, to_sq: Square) -> Move | None:
        """The legal move *from_sq* → *to_sq* for the side to move, if any."""
        piece = self.piece_at(from_sq)
        validate_square(*to_sq)
        if piece is None or piece.color != self.side_to_move:
            return None
        for candidate in self.legal_moves(from_sq):
            if candidate.to_sq == to_sq:
                return Move.from_candidate(from_sq, candidate)
        return None

    @property
    def is_game_over(self) -> bool:
        return self.status.is_terminal

    @property
    def winner(self) -> Color | None:
        return Rules.winner(self.status, self.side_to_move)

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.history)

    @property
    def last_move(self) -> Move | None:
        return self.history[-1].move if self.history else None

    def to_fen(self) -> str:
        return to_fen(self.board(), self.side_to_move)

    # ── Transitions ──────────────────────────────────────────────────────

    def apply_move(self, move: Move) -> GameState:
        """Return the state after *move*.

        Only the origin and destination of *move* are trusted; whether it
        fuses is decided by the engine.

        Raises:
            GameOverError: if the game already ended.
            IllegalMoveError: if the move is not legal for the side to move.
        """
        if self.is_game_over:
            raise GameOverError(f"Game is over ({self.status}); {move} rejected")
        legal = self.find_move(move.from_sq, move.to_sq)
        if legal is None:
            raise IllegalMoveError(f"Illegal move for {self.side_to_move}: {move}")

        board = self.board()
        piece = board[legal.from_sq]
        assert piece is not None
        captured = apply_move(board, legal)

        side = self.side_to_move.opposite
        status = Rules.game_status(board, side)
        record = MoveRecord(legal, piece, captured, status)
        return GameState(board.cells(), side, status, self.history + (record,))

    def undo(self) -> GameState:
        """Return the state before the last move."""
        if not self.history:
            raise IllegalMoveError("No move to undo")
        record = self.history[-1]

        board = self.board()
        board[record.move.from_sq] = record.piece
        board[record.move.to_sq] = record.captured

        side = self.side_to_move.opposite
        return GameState(
            board.cells(), side, Rules.game_status(board, side), self.history[:-1]
        )
