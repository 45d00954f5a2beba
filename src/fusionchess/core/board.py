"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator

from fusionchess.core.enums import Color, PieceType
from fusionchess.core.piece import Piece
from fusionchess.core.types import BOARD_SIZE, Square, is_on_board, validate_square

Cells = tuple[tuple[Piece | None, ...], ...]

BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 8x8 grid of optional pieces. Pure storage, no rules."""

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * (BOARD_SIZE * BOARD_SIZE)

    @staticmethod
    def _index(sq: Square) -> int:
        row, col = validate_square(*sq)
        return row * BOARD_SIZE + col

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[self._index(sq)]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._squares[self._index(sq)] = piece

    def cell_at(self, row: int, col: int) -> Piece | None:
        return self[(row, col)]

    @staticmethod
    def is_on_board(row: int, col: int) -> bool:
        return is_on_board(row, col)

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """Yield ``(square, piece)`` for every occupied cell, row-major."""
        for idx, piece in enumerate(self._squares):
            if piece is not None:
                yield divmod(idx, BOARD_SIZE), piece

    def pieces(self, color: Color) -> list[Square]:
        """Squares occupied by *color*, row-major."""
        return [sq for sq, piece in self.occupied() if piece.color == color]

    def king_square(self, color: Color) -> Square | None:
        """Square of *color*'s king, or ``None`` if it is missing."""
        for sq, piece in self.occupied():
            if piece.color == color and piece.is_king:
                return sq
        return None

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    def cells(self) -> Cells:
        """Immutable row-by-row snapshot of the board."""
        return tuple(
            tuple(self._squares[row * BOARD_SIZE : (row + 1) * BOARD_SIZE])
            for row in range(BOARD_SIZE)
        )

    # -- Factory ------------------------------------------------------------

    @classmethod
    def from_cells(cls, cells: Cells) -> Board:
        if len(cells) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in cells):
            raise ValueError("Board snapshot must be 8x8")
        b = cls()
        b._squares = [piece for row in cells for piece in row]
        return b

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position: black on rows 0-1, white on rows 6-7."""
        b = cls()
        for col in range(BOARD_SIZE):
            b[(1, col)] = Piece.of(Color.BLACK, PieceType.PAWN)
            b[(6, col)] = Piece.of(Color.WHITE, PieceType.PAWN)

        for col, pt in enumerate(BACK_RANK):
            b[(0, col)] = Piece.of(Color.BLACK, pt)
            b[(7, col)] = Piece.of(Color.WHITE, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE):
            line = []
            for col in range(BOARD_SIZE):
                p = self[(row, col)]
                line.append(str(p) if p else ".")
            rows.append(f"{BOARD_SIZE - row} {' '.join(line)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
