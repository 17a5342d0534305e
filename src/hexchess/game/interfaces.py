"""Abstract interfaces for the game layer.

Front ends depend on :class:`IGameController`, not on the concrete
controller.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hexchess.core.cell import CellLike
    from hexchess.core.template import BoardTemplate


class GamePhase(IntEnum):
    """Finite-state-machine states for a game session."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def new_game(self, template: BoardTemplate | None = None) -> None:
        """Set up a new game, from the standard layout unless *template* is given."""

    @abstractmethod
    def submit_move(self, origin: CellLike, destination: CellLike) -> bool:
        """Submit a move for the side to move. Returns True if applied."""
