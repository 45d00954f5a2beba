"""GameRoom — authoritative game held by the hosting side.

Remote peers only ever send ``(player_id, from, to)``. The room checks the
sender's seat and turn, then replays the move through its own controller;
a peer-computed game state is never accepted.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from fusionchess.core.enums import Color
from fusionchess.core.move import Move
from fusionchess.core.serialization import move_to_dict
from fusionchess.core.types import Square, validate_square
from fusionchess.game.controller import GameController

_LOGGER = logging.getLogger(__name__)


class RoomFullError(ValueError):
    """Raised when a third player asks for a seat."""


@dataclass(frozen=True, slots=True)
class Player:
    """A seated participant."""

    player_id: str
    name: str
    color: Color


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    """Result of a remote move submission."""

    accepted: bool
    reason: str
    state: dict[str, Any]


class GameRoom:
    """Two seats and one authoritative :class:`GameController`."""

    __slots__ = ("room_id", "_players", "_controller", "_last_move")

    def __init__(self, room_id: str) -> None:
        self.room_id = room_id
        self._players: dict[str, Player] = {}
        self._controller = GameController()
        self._last_move: Move | None = None

    # ── Seats ────────────────────────────────────────────────────────────

    @property
    def controller(self) -> GameController:
        return self._controller

    @property
    def players(self) -> list[Player]:
        return sorted(self._players.values(), key=lambda p: p.color)

    @property
    def is_full(self) -> bool:
        return len(self._players) == 2

    def player(self, player_id: str) -> Player | None:
        return self._players.get(player_id)

    def seat(self, player_id: str, name: str = "") -> Player:
        """Seat *player_id*: the first player gets white, the second black.

        Seating an already-seated id returns the existing seat.
        """
        existing = self._players.get(player_id)
        if existing is not None:
            return existing
        if self.is_full:
            raise RoomFullError(f"Room {self.room_id} is full")

        taken = {p.color for p in self._players.values()}
        color = Color.WHITE if Color.WHITE not in taken else Color.BLACK
        player = Player(player_id, name or f"Player ({color})", color)
        self._players[player_id] = player
        _LOGGER.info("Room %s: %s seated as %s", self.room_id, player.name, color)
        return player

    # ── Moves ────────────────────────────────────────────────────────────

    def submit_move(
        self, player_id: str, from_sq: Square, to_sq: Square
    ) -> MoveOutcome:
        """Validate and apply a move sent by *player_id*."""
        player = self._players.get(player_id)
        if player is None:
            return self._reject(player_id, "Player not found in room")
        if not self.is_full:
            return self._reject(player_id, "Waiting for opponent")

        controller = self._controller
        if controller.is_game_over():
            return self._reject(player_id, f"Game is over ({controller.game_status})")
        if player.color != controller.current_player:
            return self._reject(
                player_id,
                f"Not your turn: {controller.current_player} to move, "
                f"you are {player.color}",
            )

        try:
            move = Move(validate_square(*from_sq), validate_square(*to_sq))
        except (TypeError, ValueError) as exc:
            return self._reject(player_id, str(exc))

        if not controller.submit_move(move):
            return self._reject(player_id, f"Illegal move {move}")

        self._last_move = controller.move_history[-1].move
        _LOGGER.info(
            "Room %s: %s played %s (%s)",
            self.room_id,
            player.name,
            self._last_move,
            controller.game_status,
        )
        return MoveOutcome(True, "", self.to_dict())

    def reset(self) -> dict[str, Any]:
        self._controller.reset()
        self._last_move = None
        _LOGGER.info("Room %s: game reset", self.room_id)
        return self.to_dict()

    # ── Serialisation ────────────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        return {
            "roomId": self.room_id,
            "players": [
                {"id": p.player_id, "name": p.name, "color": str(p.color)}
                for p in self.players
            ],
            "waitingForOpponent": not self.is_full,
            "lastMove": move_to_dict(self._last_move) if self._last_move else None,
            "gameState": self._controller.to_dict(),
        }

    def _reject(self, player_id: str, reason: str) -> MoveOutcome:
        _LOGGER.warning(
            "Room %s: move from %s rejected: %s", self.room_id, player_id, reason
        )
        return MoveOutcome(False, reason, self.to_dict())
