"""Raw and legal move generation + check detection."""

from __future__ import annotations

from collections.abc import Callable

from fusionchess.core.board import Board
from fusionchess.core.enums import Color, PieceType
from fusionchess.core.fusion import fuse
from fusionchess.core.move import Move, MoveCandidate
from fusionchess.core.piece import Piece
from fusionchess.core.types import Square, is_on_board

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = ROOK_DIRS + BISHOP_DIRS

# Pawn geometry per color: (row step, home row)
_PAWN_STEP: dict[Color, tuple[int, int]] = {
    Color.WHITE: (-1, 6),
    Color.BLACK: (1, 1),
}

_ALL_SQUARES: tuple[Square, ...] = tuple((r, c) for r in range(8) for c in range(8))


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[Square, ...]]:
    targets: dict[Square, tuple[Square, ...]] = {}
    for row, col in _ALL_SQUARES:
        targets[(row, col)] = tuple(
            (row + dr, col + dc)
            for dr, dc in offsets
            if is_on_board(row + dr, col + dc)
        )
    return targets


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[tuple[Square, ...], ...]]:
    rays_per_square: dict[Square, tuple[tuple[Square, ...], ...]] = {}
    for row, col in _ALL_SQUARES:
        square_rays: list[tuple[Square, ...]] = []
        for dr, dc in directions:
            r, c = row + dr, col + dc
            ray: list[Square] = []
            while is_on_board(r, c):
                ray.append((r, c))
                r += dr
                c += dc
            square_rays.append(tuple(ray))
        rays_per_square[(row, col)] = tuple(square_rays)
    return rays_per_square


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)

_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_ROOK_RAYS = _build_rays(ROOK_DIRS)
_QUEEN_RAYS = _build_rays(QUEEN_DIRS)


def apply_move(board: Board, move: Move) -> Piece | None:
    """Play *move* on *board* in place and return the displaced piece.

    A fusion move replaces the target with the fused piece; any other move
    overwrites the destination (capturing whatever stood there).
    """
    piece = board[move.from_sq]
    if piece is None:
        raise ValueError(f"No piece on {move.from_sq}")
    target = board[move.to_sq]

    if move.is_fusion:
        if target is None:
            raise ValueError(f"Fusion target {move.to_sq} is empty")
        board[move.to_sq] = fuse(piece, target)
    else:
        board[move.to_sq] = piece
    board[move.from_sq] = None
    return target


class MoveGenerator:
    """Generates raw and legal moves for the pieces on a :class:`Board`.

    Legality probing mutates the board in place but always restores it
    before returning, even if evaluation raises.
    """

    __slots__ = ("_board", "_kind_generators")

    def __init__(self, board: Board) -> None:
        self._board = board
        self._kind_generators: dict[
            PieceType, Callable[[Square, Color, list[MoveCandidate]], None]
        ] = {
            PieceType.PAWN: self._gen_pawn,
            PieceType.KNIGHT: self._gen_knight,
            PieceType.BISHOP: self._gen_bishop,
            PieceType.ROOK: self._gen_rook,
            PieceType.QUEEN: self._gen_queen,
            PieceType.KING: self._gen_king,
        }

    # -- Public API ---------------------------------------------------------

    def raw_moves(self, sq: Square) -> list[MoveCandidate]:
        """Destinations for the piece on *sq*, ignoring king safety.

        Moves of every constituent kind are merged; a destination reached
        by several kinds appears once, as first generated.
        """
        piece = self._board[sq]
        if piece is None:
            return []

        candidates: list[MoveCandidate] = []
        for kind in piece.sorted_kinds:  # PieceType order, not fusion order
            self._kind_generators[kind](sq, piece.color, candidates)

        seen: set[Square] = set()
        unique: list[MoveCandidate] = []
        for candidate in candidates:
            if candidate.to_sq in seen:
                continue
            seen.add(candidate.to_sq)
            unique.append(candidate)
        return unique

    def legal_moves(self, sq: Square) -> list[MoveCandidate]:
        """Raw moves of the piece on *sq* that keep its own king safe."""
        return [c for c in self.raw_moves(sq) if self._is_safe(sq, c)]

    def all_legal_moves(self, color: Color) -> list[Move]:
        """Every legal move for *color*, grouped by origin square."""
        moves: list[Move] = []
        for from_sq in self._board.pieces(color):
            for candidate in self.legal_moves(from_sq):
                moves.append(Move.from_candidate(from_sq, candidate))
        return moves

    def has_legal_move(self, color: Color) -> bool:
        return any(self.legal_moves(sq) for sq in self._board.pieces(color))

    # -- Check detection ----------------------------------------------------

    def is_king_in_check(self, color: Color) -> bool:
        """Is *color*'s king reachable by any opposing raw move?"""
        king_sq = self._board.king_square(color)
        if king_sq is None:
            return False
        return self.is_square_attacked(king_sq, color.opposite)

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        """Is *sq* among the raw destinations of any *by_color* piece?"""
        return bool(self.attackers(sq, by_color))

    def attackers(self, sq: Square, by_color: Color) -> list[Square]:
        """Squares of *by_color* pieces whose raw moves include *sq*."""
        return [
            from_sq
            for from_sq in self._board.pieces(by_color)
            if any(c.to_sq == sq for c in self.raw_moves(from_sq))
        ]

    # -- Legality check -----------------------------------------------------

    def _is_safe(self, from_sq: Square, candidate: MoveCandidate) -> bool:
        board = self._board
        mover = board[from_sq]
        assert mover is not None
        target = board[candidate.to_sq]
        try:
            apply_move(board, Move.from_candidate(from_sq, candidate))
            return not self.is_king_in_check(mover.color)
        finally:
            board[from_sq] = mover
            board[candidate.to_sq] = target

    # -- Kind-specific generators (private) ---------------------------------

    def _classify(self, to_sq: Square, color: Color) -> MoveCandidate | None:
        """Empty → move, enemy → capture, ally without king → fusion."""
        target = self._board[to_sq]
        if target is None or target.color != color:
            return MoveCandidate(to_sq)
        if not target.is_king:
            return MoveCandidate(to_sq, is_fusion=True)
        return None

    def _gen_pawn(self, sq: Square, color: Color, moves: list[MoveCandidate]) -> None:
        board = self._board
        row, col = sq
        step, home_row = _PAWN_STEP[color]

        one_step = (row + step, col)
        if is_on_board(*one_step) and board.is_empty(one_step):
            moves.append(MoveCandidate(one_step))
            two_step = (row + 2 * step, col)
            if row == home_row and board.is_empty(two_step):
                moves.append(MoveCandidate(two_step))

        for dc in (-1, 1):
            cap_sq = (row + step, col + dc)
            if not is_on_board(*cap_sq) or board.is_empty(cap_sq):
                continue
            candidate = self._classify(cap_sq, color)
            if candidate is not None:
                moves.append(candidate)

    def _gen_knight(self, sq: Square, color: Color, moves: list[MoveCandidate]) -> None:
        for to_sq in _KNIGHT_TARGETS[sq]:
            candidate = self._classify(to_sq, color)
            if candidate is not None:
                moves.append(candidate)

    def _gen_bishop(self, sq: Square, color: Color, moves: list[MoveCandidate]) -> None:
        self._gen_sliding(color, _BISHOP_RAYS[sq], moves)

    def _gen_rook(self, sq: Square, color: Color, moves: list[MoveCandidate]) -> None:
        self._gen_sliding(color, _ROOK_RAYS[sq], moves)

    def _gen_queen(self, sq: Square, color: Color, moves: list[MoveCandidate]) -> None:
        self._gen_sliding(color, _QUEEN_RAYS[sq], moves)

    def _gen_sliding(
        self,
        color: Color,
        rays: tuple[tuple[Square, ...], ...],
        moves: list[MoveCandidate],
    ) -> None:
        board = self._board
        for ray in rays:
            for to_sq in ray:
                if board.is_empty(to_sq):
                    moves.append(MoveCandidate(to_sq))
                    continue
                candidate = self._classify(to_sq, color)
                if candidate is not None:
                    moves.append(candidate)
                break

    def _gen_king(self, sq: Square, color: Color, moves: list[MoveCandidate]) -> None:
        # Kings never fuse: allied squares are simply blocked.
        board = self._board
        for to_sq in _KING_TARGETS[sq]:
            target = board[to_sq]
            if target is None or target.color != color:
                moves.append(MoveCandidate(to_sq))
