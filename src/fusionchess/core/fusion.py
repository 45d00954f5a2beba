"""Fusion — merging a moving piece into an allied piece."""

from __future__ import annotations

from fusionchess.core.piece import Piece


def can_fuse(mover: Piece, target: Piece) -> bool:
    """Whether *mover* may merge into *target*.

    Both pieces must share a color and neither may be (or contain) a king.
    """
    return mover.color == target.color and not mover.is_king and not target.is_king


def fuse(mover: Piece, target: Piece) -> Piece:
    """Composite piece: mover's color, union of both kind sets."""
    if not can_fuse(mover, target):
        raise ValueError(f"Cannot fuse {mover} into {target}")
    return Piece(mover.color, mover.kinds | target.kinds)
