"""GameController: owns one Board and tracks whose turn it is.

Emits events via simple callbacks so front ends and tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from hexchess.core.board import Board
from hexchess.core.cell import Cell, CellLike
from hexchess.core.enums import PieceColor, PieceKind
from hexchess.core.template import BoardTemplate
from hexchess.game.interfaces import GamePhase, IGameController

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Cell, Cell, Board], None]  # origin, destination, board
CaptureCallback = Callable[[PieceColor, PieceKind], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_capture: list[CaptureCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Alternates turns between White and Black on a single :class:`Board`.

    The board itself only checks that the mover owns the piece; this class
    supplies the mover from its own turn counter. Methods are meant to be
    called from a single thread.
    """

    __slots__ = ("_board", "_side_to_move", "_ply", "_phase", "events")

    def __init__(self) -> None:
        self._board: Board | None = None
        self._side_to_move = PieceColor.WHITE
        self._ply = 0
        self._phase = GamePhase.NOT_STARTED
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        if self._board is None:
            raise RuntimeError("No game in progress; call new_game() first")
        return self._board

    @property
    def side_to_move(self) -> PieceColor:
        return self._side_to_move

    @property
    def ply(self) -> int:
        """Number of moves applied since the game started."""
        return self._ply

    @property
    def phase(self) -> GamePhase:
        return self._phase

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(self, template: BoardTemplate | None = None) -> None:
        if template is None:
            template = BoardTemplate.standard()
        self._board = Board(template)
        self._side_to_move = PieceColor.WHITE
        self._ply = 0
        _LOGGER.debug("New game with %d pieces", len(template))
        self._set_phase(GamePhase.AWAITING_MOVE)

    def submit_move(self, origin: CellLike, destination: CellLike) -> bool:
        if self._phase != GamePhase.AWAITING_MOVE or self._board is None:
            _LOGGER.info("Move submitted while %s; ignored", self._phase.name)
            return False

        origin = Cell.of(origin)
        destination = Cell.of(destination)
        board = self._board
        graves_before = len(board.grave)
        if not board.make_move(origin, self._side_to_move, destination):
            return False

        _LOGGER.debug(
            "Ply %d: %s moved %s -> %s",
            self._ply + 1,
            self._side_to_move,
            origin,
            destination,
        )
        self._ply += 1
        self._side_to_move = self._side_to_move.opposite

        for cb in self.events.on_move:
            cb(origin, destination, board)
        for color, kind in board.grave[graves_before:]:
            for capture_cb in self.events.on_capture:
                capture_cb(color, kind)
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _set_phase(self, phase: GamePhase) -> None:
        self._phase = phase
        for cb in self.events.on_phase_changed:
            cb(phase)
