"""Game management layer — immutable state, selection controller, rooms.

Quick start::

    from fusionchess.game import GameController

    ctrl = GameController()
    ctrl.select_square(6, 4)           # pick the e2 pawn
    result = ctrl.select_square(4, 4)  # e2-e4
    assert result.moved
"""

from fusionchess.game.controller import GameController, GameEvents, SelectResult
from fusionchess.game.room import GameRoom, MoveOutcome, Player, RoomFullError
from fusionchess.game.state import (
    GameOverError,
    GameState,
    IllegalMoveError,
    MoveRecord,
)

__all__ = [
    # State
    "GameOverError",
    "GameState",
    "IllegalMoveError",
    "MoveRecord",
    # Controller
    "GameController",
    "GameEvents",
    "SelectResult",
    # Rooms
    "GameRoom",
    "MoveOutcome",
    "Player",
    "RoomFullError",
]
