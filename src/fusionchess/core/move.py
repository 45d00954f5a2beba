"""Move value objects."""

from __future__ import annotations

from dataclasses import dataclass

from fusionchess.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class MoveCandidate:
    """A destination reachable by the piece on some origin square."""

    to_sq: Square
    is_fusion: bool = False

    @property
    def row(self) -> int:
        return self.to_sq[0]

    @property
    def col(self) -> int:
        return self.to_sq[1]

    def __str__(self) -> str:
        return square_name(self.to_sq)


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single move.

    ``is_fusion`` marks a move onto an allied non-king piece, which merges
    the two pieces instead of capturing.
    """

    from_sq: Square
    to_sq: Square
    is_fusion: bool = False

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)}"

    @classmethod
    def from_candidate(cls, from_sq: Square, candidate: MoveCandidate) -> Move:
        return cls(from_sq, candidate.to_sq, candidate.is_fusion)
