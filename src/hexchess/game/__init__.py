"""Game management layer: turn order and move events on top of the core.

Quick start::

    from hexchess.game import GameController

    ctrl = GameController()
    ctrl.new_game()
    ctrl.submit_move((0, 4), (2, 6))
"""

from hexchess.game.controller import GameController, GameEvents
from hexchess.game.interfaces import GamePhase, IGameController

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameController",
    # Concrete
    "GameController",
    "GameEvents",
]
