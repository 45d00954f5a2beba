"""FEN-style position text: parsing and serialization.

Only piece placement and side to move are encoded. Fused pieces are
written as a parenthesised group of letters, e.g. ``(RN)`` for a white
rook+knight or ``(bnq)`` for a black bishop+knight+queen.
"""

from __future__ import annotations

from fusionchess.core.board import Board
from fusionchess.core.enums import Color
from fusionchess.core.piece import Piece

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w"


def _parse_group(group: str, fen: str) -> Piece:
    pieces = [Piece.from_char(ch) for ch in group]
    if len(pieces) < 2:
        raise ValueError(f"Fused group needs at least two kinds: {fen!r}")
    colors = {p.color for p in pieces}
    if len(colors) != 1:
        raise ValueError(f"Mixed colors in fused group {group!r}: {fen!r}")
    kinds = frozenset().union(*(p.kinds for p in pieces))
    return Piece(colors.pop(), kinds)


def parse_fen(fen: str) -> tuple[Board, Color]:
    """Parse position text into a :class:`Board` and the side to move."""
    parts = fen.split()
    if not (1 <= len(parts) <= 2):
        raise ValueError(f"Invalid FEN (need 1-2 fields): {fen!r}")

    ranks = parts[0].split("/")
    if len(ranks) != 8:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")

    board = Board()
    for row, rank_text in enumerate(ranks):
        col = 0
        i = 0
        while i < len(rank_text):
            ch = rank_text[i]
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                col += step
                i += 1
            else:
                if col >= 8:
                    raise ValueError(f"Invalid FEN rank width: {fen!r}")
                if ch == "(":
                    end = rank_text.find(")", i)
                    if end < 0:
                        raise ValueError(f"Unclosed fused group: {fen!r}")
                    board[(row, col)] = _parse_group(rank_text[i + 1 : end], fen)
                    i = end + 1
                else:
                    board[(row, col)] = Piece.from_char(ch)
                    i += 1
                col += 1
            if col > 8:
                raise ValueError(f"Invalid FEN rank width: {fen!r}")
        if col != 8:
            raise ValueError(f"Invalid FEN rank width: {fen!r}")

    side_part = parts[1] if len(parts) == 2 else "w"
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise ValueError(f"Invalid FEN side-to-move field: {side_part!r}")

    return board, side


def to_fen(board: Board, side_to_move: Color) -> str:
    """Serialize *board* and *side_to_move* into position text."""
    ranks: list[str] = []
    for row in range(8):
        empty = 0
        text = ""
        for col in range(8):
            piece = board[(row, col)]
            if piece is None:
                empty += 1
                continue
            if empty:
                text += str(empty)
                empty = 0
            text += str(piece)
        if empty:
            text += str(empty)
        ranks.append(text)
    side = "w" if side_to_move == Color.WHITE else "b"
    return f"{'/'.join(ranks)} {side}"
