"""Piece value object — a single kind or a fused set of kinds."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from fusionchess.core.enums import Color, PieceType

# FEN-style letter ↔ PieceType (uppercase = white, lowercase = black)
_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "P",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}
_KINDS_BY_LETTER: dict[str, PieceType] = {v: k for k, v in _LETTERS.items()}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object: a color plus the set of kinds it embodies.

    A plain piece has exactly one kind. A fused piece has two or more, and
    moves as the union of them. Kings never take part in fusion, so a kind
    set containing KING always has size one.
    """

    color: Color
    kinds: frozenset[PieceType]

    def __post_init__(self) -> None:
        if not self.kinds:
            raise ValueError("A piece needs at least one kind")
        if PieceType.KING in self.kinds and len(self.kinds) > 1:
            raise ValueError("A king cannot be part of a fused piece")

    @classmethod
    def of(cls, color: Color, kind: PieceType) -> Piece:
        """Plain (unfused) piece of a single *kind*."""
        return cls(color, frozenset((kind,)))

    @classmethod
    def fused(cls, color: Color, kinds: Iterable[PieceType]) -> Piece:
        return cls(color, frozenset(kinds))

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def kind(self) -> PieceType | None:
        """The single kind of an unfused piece, ``None`` when fused."""
        if len(self.kinds) != 1:
            return None
        return next(iter(self.kinds))

    @property
    def is_fused(self) -> bool:
        return len(self.kinds) > 1

    @property
    def is_king(self) -> bool:
        return PieceType.KING in self.kinds

    @property
    def sorted_kinds(self) -> tuple[PieceType, ...]:
        """Kinds in canonical (piece-type) order."""
        return tuple(sorted(self.kinds))

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN-style text: 'N' → white knight, '(rn)' → black rook+knight."""
        letters = "".join(_LETTERS[k] for k in self.sorted_kinds)
        if self.color == Color.BLACK:
            letters = letters.lower()
        return f"({letters})" if self.is_fused else letters

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create a plain piece from a FEN character, e.g. 'N' → white knight."""
        kind = _KINDS_BY_LETTER.get(char.upper()) if len(char) == 1 else None
        if kind is None:
            raise ValueError(f"Invalid piece character: {char!r}")
        color = Color.WHITE if char.isupper() else Color.BLACK
        return cls.of(color, kind)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, or short names like 'R+N' for fused pieces."""
        if self.is_fused:
            return "+".join(_LETTERS[k] for k in self.sorted_kinds)
        return _UNICODE[(self.color, next(iter(self.kinds)))]
