"""GameController — the public surface of the engine.

Owns the current immutable :class:`GameState` plus the transient
selection (``Idle`` / ``Selected``) and turns square clicks into moves.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from fusionchess.core.enums import Color, GameStatus
from fusionchess.core.move import Move, MoveCandidate
from fusionchess.core.serialization import (
    board_to_payload,
    candidate_to_dict,
    square_to_dict,
)
from fusionchess.core.types import Square, validate_square
from fusionchess.game.state import GameState, IllegalMoveError, MoveRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, GameState], None]  # move, state after
GameOverCallback = Callable[[GameStatus, Color | None], None]  # status, winner
ResetCallback = Callable[[], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_reset: list[ResetCallback] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class SelectResult:
    """Outcome of :meth:`GameController.select_square`."""

    moved: bool
    state: dict[str, Any]


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Selection state machine over a fusion chess game.

    Thread-safety: methods are meant to be called from a single thread
    (the UI thread, or one request handler at a time on a server).
    """

    __slots__ = ("_state", "_selected", "_possible_moves", "events")

    def __init__(self) -> None:
        self._state = GameState.initial()
        self._selected: Square | None = None
        self._possible_moves: list[MoveCandidate] = []
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def current_player(self) -> Color:
        return self._state.side_to_move

    @property
    def game_status(self) -> GameStatus:
        return self._state.status

    @property
    def selected_square(self) -> Square | None:
        return self._selected

    @property
    def possible_moves(self) -> list[MoveCandidate]:
        return list(self._possible_moves)

    @property
    def move_history(self) -> tuple[MoveRecord, ...]:
        return self._state.history

    def is_game_over(self) -> bool:
        return self._state.is_game_over

    def get_winner(self) -> Color | None:
        return self._state.winner

    # ── Lifecycle ────────────────────────────────────────────────────────

    def initialize(self) -> dict[str, Any]:
        """Start a game from the standard position."""
        return self.load(GameState.initial())

    def reset(self) -> dict[str, Any]:
        """Discard the current game and start over."""
        payload = self.initialize()
        _LOGGER.debug("Game reset")
        for cb in self.events.on_reset:
            cb()
        return payload

    def load(self, state: GameState) -> dict[str, Any]:
        """Continue from an arbitrary *state* (e.g. a replayed game)."""
        self._state = state
        self._clear_selection()
        return self.to_dict()

    # ── Selection state machine ──────────────────────────────────────────

    def select_square(self, row: int, col: int) -> SelectResult:
        """Handle a click on (row, col).

        Idle: selecting a piece of the side to move selects it.
        Selected: clicking a listed destination plays the move; anything
        else drops the selection.
        """
        sq = validate_square(row, col)
        if self._state.is_game_over:
            return SelectResult(False, self.to_dict())

        if self._selected is not None:
            candidate = next((c for c in self._possible_moves if c.to_sq == sq), None)
            from_sq = self._selected
            self._clear_selection()
            if candidate is not None:
                self._play(Move.from_candidate(from_sq, candidate))
                return SelectResult(True, self.to_dict())
            return SelectResult(False, self.to_dict())

        piece = self._state.piece_at(sq)
        if piece is not None and piece.color == self._state.side_to_move:
            self._selected = sq
            self._possible_moves = self._state.legal_moves(sq)
        return SelectResult(False, self.to_dict())

    def get_possible_moves(self, row: int, col: int) -> list[MoveCandidate]:
        """Legal destinations for the piece on (row, col).

        Empty for an empty square and once the game is over.
        """
        sq = validate_square(row, col)
        if self._state.is_game_over:
            return []
        return self._state.legal_moves(sq)

    def get_all_possible_moves(self, color: Color) -> list[Move]:
        if self._state.is_game_over:
            return []
        return self._state.all_legal_moves(color)

    # ── Programmatic moves ───────────────────────────────────────────────

    def submit_move(self, move: Move) -> bool:
        """Play *move* if legal. Returns True if it was applied."""
        try:
            self._play(move)
        except IllegalMoveError as exc:
            _LOGGER.debug("Rejected move %s: %s", move, exc)
            return False
        self._clear_selection()
        return True

    def undo_move(self) -> bool:
        """Take back the last move. Returns True on success."""
        if not self._state.history:
            return False
        self._state = self._state.undo()
        self._clear_selection()
        return True

    # ── Serialisation ────────────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        """Wire payload for the UI / network layer."""
        state = self._state
        winner = state.winner
        return {
            "board": board_to_payload(state.board()),
            "currentPlayer": str(state.side_to_move),
            "selectedSquare": square_to_dict(self._selected),
            "possibleMoves": [candidate_to_dict(c) for c in self._possible_moves],
            "gameStatus": str(state.status),
            "isGameOver": state.is_game_over,
            "winner": str(winner) if winner is not None else None,
        }

    # ── Internal helpers ─────────────────────────────────────────────────

    def _play(self, move: Move) -> None:
        self._state = self._state.apply_move(move)
        played = self._state.history[-1].move
        _LOGGER.debug(
            "Played %s (fusion=%s), status %s",
            played,
            played.is_fusion,
            self._state.status,
        )
        for cb in self.events.on_move:
            cb(played, self._state)
        if self._state.is_game_over:
            for game_over_cb in self.events.on_game_over:
                game_over_cb(self._state.status, self._state.winner)

    def _clear_selection(self) -> None:
        self._selected = None
        self._possible_moves = []
