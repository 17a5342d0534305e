"""Board - piece placement, legal destinations and move application."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from hexchess.core.cell import EMPTY_CELL, Cell, CellLike, Offset
from hexchess.core.enums import PieceColor, PieceKind
from hexchess.core.errors import InvariantViolation
from hexchess.core.geometry import BOARD_SIZE, is_on_board, row_bounds
from hexchess.core.piece import Piece, pawn_capture_directions, pawn_forward
from hexchess.core.template import BoardTemplate

_LOGGER = logging.getLogger(__name__)

GraveEntry = tuple[PieceColor, PieceKind]


def _pawn_backward(color: PieceColor) -> Offset:
    dr, dl = pawn_forward(color)
    return (-dr, -dl)


class Board:
    """Mutable 91-cell board that keeps every piece's destinations current.

    Both internal mappings are keyed by all 91 valid cells for the whole
    life of the board. Destinations are recomputed from scratch in
    :meth:`recompute` after every accepted move, so a query never sees a
    stale set.
    """

    __slots__ = ("_pieces", "_destinations", "_grave", "_pinned")

    def __init__(self, template: BoardTemplate | None = None) -> None:
        if template is None:
            template = BoardTemplate()
        self._pieces: dict[Cell, Piece | None] = template.placement()
        self._destinations: dict[Cell, set[Cell]] = template.empty_destinations()
        self._grave: list[GraveEntry] = []
        self._pinned: frozenset[Cell] = frozenset()
        self.recompute()

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        return cls(BoardTemplate.standard())

    def _key(self, cell: CellLike) -> Cell:
        key = Cell.of(cell)
        if key not in self._pieces:
            raise ValueError(f"Cell {key} is not on the board")
        return key

    # -- Queries --------------------------------------------------------------

    def __getitem__(self, cell: CellLike) -> Piece | None:
        return self._pieces[self._key(cell)]

    def piece_at(self, cell: CellLike) -> Piece | None:
        return self._pieces[self._key(cell)]

    def is_empty(self, cell: CellLike) -> bool:
        return self._pieces[self._key(cell)] is None

    def destinations(self, cell: CellLike) -> frozenset[Cell]:
        """Cells the piece on *cell* may currently move to (empty if none)."""
        return frozenset(self._destinations[self._key(cell)])

    def destination_map(self) -> dict[Cell, frozenset[Cell]]:
        """Snapshot of the destinations of every cell."""
        return {cell: frozenset(dests) for cell, dests in self._destinations.items()}

    def pieces(self) -> Iterator[tuple[Cell, Piece]]:
        """Occupied cells with their pieces, in row-major cell order."""
        for cell, piece in self._pieces.items():
            if piece is not None:
                yield cell, piece

    @property
    def cells(self) -> tuple[Cell, ...]:
        return tuple(self._pieces)

    @property
    def grave(self) -> tuple[GraveEntry, ...]:
        """``(color, kind)`` of every captured piece, oldest first."""
        return tuple(self._grave)

    @property
    def pinned(self) -> frozenset[Cell]:
        """Cells found absolutely pinned by the last recomputation."""
        return self._pinned

    # -- Move application -------------------------------------------------------

    def make_move(
        self,
        origin: CellLike,
        mover_color: PieceColor,
        destination: CellLike,
    ) -> bool:
        """Move the piece on *origin* to *destination* if the move is legal.

        Returns ``False`` without touching any state when *origin* is empty,
        holds a piece of another color than *mover_color*, or cannot reach
        *destination*. Turn order is not checked.
        """
        origin = Cell.of(origin)
        destination = Cell.of(destination)

        piece = self._pieces.get(origin)
        if piece is None:
            _LOGGER.debug("Rejected %s -> %s: no piece on origin", origin, destination)
            return False
        if piece.color != mover_color:
            _LOGGER.debug(
                "Rejected %s -> %s: piece is %s, mover is %s",
                origin,
                destination,
                piece.color,
                mover_color,
            )
            return False
        if destination not in self._destinations[origin]:
            _LOGGER.debug("Rejected %s -> %s: destination not reachable", origin, destination)
            return False

        captured = self._pieces[destination]
        if captured is not None:
            self._grave.append((captured.color, captured.kind))
            _LOGGER.debug(
                "%s %s captures %s %s on %s",
                piece.color,
                piece.kind.name,
                captured.color,
                captured.kind.name,
                destination,
            )

        piece.move(destination)
        self._pieces[destination] = piece
        self._pieces[origin] = None
        self.recompute()
        return True

    # -- Legality pipeline ------------------------------------------------------

    def recompute(self) -> None:
        """Rebuild every destination set from the current placement.

        Passes run in a fixed order, each one reading only what the previous
        passes produced: occupancy trim with pin detection, pin enforcement,
        king safety, pawn capture filtering.
        """
        for dests in self._destinations.values():
            dests.clear()

        occupied = list(self.pieces())
        pinned: set[Cell] = set()
        for cell, piece in occupied:
            self._trim_rays(cell, piece, pinned)

        # A pinned piece may not move at all, not even along the pin line.
        for cell in pinned:
            self._destinations[cell].clear()

        self._guard_kings(occupied)
        self._filter_pawn_diagonals(occupied)
        self._pinned = frozenset(pinned)
        _LOGGER.debug(
            "Recomputed destinations for %d pieces, %d pinned", len(occupied), len(pinned)
        )

    def _trim_rays(self, cell: Cell, piece: Piece, pinned: set[Cell]) -> None:
        """Walk each ray against occupancy and record absolute pins.

        After the first enemy piece (a capture) the walk goes on without
        adding cells; if the next piece met is the enemy king, the captured
        cell is pinned.
        """
        dests = self._destinations[cell]
        for ray in piece.rays():
            pin_candidate = EMPTY_CELL
            past_capture = False
            for target in ray:
                occupant = self._pieces[target]
                if not past_capture:
                    if occupant is None:
                        dests.add(target)
                        continue
                    if occupant.color == piece.color:
                        break
                    dests.add(target)
                    pin_candidate = target
                    past_capture = True
                    continue
                if occupant is None:
                    continue
                if occupant.color != piece.color and occupant.kind == PieceKind.KING:
                    if pin_candidate.is_empty():
                        raise InvariantViolation(
                            f"Pin found from {cell} without a pinned piece"
                        )
                    pinned.add(pin_candidate)
                break

    def _guard_kings(self, occupied: list[tuple[Cell, Piece]]) -> None:
        """Drop king destinations that an enemy piece can also reach."""
        reach: dict[PieceColor, set[Cell]] = {color: set() for color in PieceColor}
        for cell, piece in occupied:
            reach[piece.color].update(self._destinations[cell])

        for cell, piece in occupied:
            if piece.kind != PieceKind.KING:
                continue
            threatened = {
                target
                for target in reach[piece.color.opposite]
                if cell.is_king_adjacent(target)
            }
            self._destinations[cell] -= threatened

    def _filter_pawn_diagonals(self, occupied: list[tuple[Cell, Piece]]) -> None:
        """Keep pawn diagonals only for captures and en-passant captures."""
        for cell, piece in occupied:
            if piece.kind != PieceKind.PAWN:
                continue
            dests = self._destinations[cell]
            backward = _pawn_backward(piece.color)
            for direction in pawn_capture_directions(piece.color):
                target = cell.step(direction)
                occupant = self._pieces.get(target)
                if occupant is not None and occupant.color != piece.color:
                    continue
                companion = target.step(backward)
                # Off-board companion keeps the move even with nothing to take.
                if not is_on_board(companion):
                    continue
                victim = self._pieces[companion]
                if victim is not None and victim.has_en_passant_flag:
                    continue
                dests.discard(target)

    # -- Dunder helpers -----------------------------------------------------

    def __repr__(self) -> str:
        rows: list[str] = []
        for r_diag in range(BOARD_SIZE - 1, -1, -1):
            low, high = row_bounds(r_diag)
            row = []
            for l_diag in range(low, high + 1):
                p = self._pieces[Cell(r_diag, l_diag)]
                row.append(str(p) if p else ".")
            indent = " " * (BOARD_SIZE - len(row))
            rows.append(f"{r_diag:>2} {indent}{' '.join(row)}")
        return "\n".join(rows)
