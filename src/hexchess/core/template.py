"""BoardTemplate - initial piece placement a :class:`Board` is built from."""

from __future__ import annotations

from collections.abc import Iterable

from hexchess.core.cell import Cell
from hexchess.core.enums import PieceColor, PieceKind, SpecialRule
from hexchess.core.errors import SetupConflictError
from hexchess.core.geometry import VALID_CELLS, is_on_board
from hexchess.core.piece import Piece


class BoardTemplate:
    """Placement of pieces over the 91 cells, filled one piece at a time.

    A template can seed any number of boards: :meth:`placement` hands out
    copies of the pieces, never the pieces themselves.
    """

    __slots__ = ("_placement",)

    def __init__(self, pieces: Iterable[Piece] = ()) -> None:
        self._placement: dict[Cell, Piece | None] = dict.fromkeys(VALID_CELLS)
        for piece in pieces:
            self.add_piece(piece)

    # -- Mutation -----------------------------------------------------------

    def add_piece(self, piece: Piece) -> None:
        """Place *piece* on its own cell.

        Raises:
            SetupConflictError: If the cell already holds a piece.
            ValueError: If the piece's cell is not on the board.
        """
        cell = piece.position
        if not is_on_board(cell):
            raise ValueError(f"Cell {cell} is not on the board")
        if self._placement[cell] is not None:
            raise SetupConflictError(f"Cell {cell} is already occupied")
        self._placement[cell] = piece

    # -- Access ---------------------------------------------------------------

    def __getitem__(self, cell: Cell) -> Piece | None:
        return self._placement[cell]

    def __len__(self) -> int:
        """Number of pieces placed so far."""
        return sum(piece is not None for piece in self._placement.values())

    def placement(self) -> dict[Cell, Piece | None]:
        """Fresh cell → piece mapping covering every valid cell."""
        return {
            cell: None if piece is None else piece.copy()
            for cell, piece in self._placement.items()
        }

    @staticmethod
    def empty_destinations() -> dict[Cell, set[Cell]]:
        """Cell → destination mapping with an empty set for every valid cell."""
        return {cell: set() for cell in VALID_CELLS}

    # -- Factory ------------------------------------------------------------

    @classmethod
    def standard(cls) -> BoardTemplate:
        """Starting position: white holds the (0, 0) corner, black (10, 10)."""
        t = cls()
        white, black = PieceColor.WHITE, PieceColor.BLACK

        for i in range(5):
            t.add_piece(Piece(white, PieceKind.PAWN, Cell(i, 4), SpecialRule.TWO_INITIAL_MOVE))
            t.add_piece(
                Piece(black, PieceKind.PAWN, Cell(i + 6, 6), SpecialRule.TWO_INITIAL_MOVE)
            )
        for i in range(4):
            t.add_piece(Piece(white, PieceKind.PAWN, Cell(4, i), SpecialRule.TWO_INITIAL_MOVE))
            t.add_piece(
                Piece(black, PieceKind.PAWN, Cell(6, i + 7), SpecialRule.TWO_INITIAL_MOVE)
            )

        for i in range(3):
            t.add_piece(Piece(white, PieceKind.BISHOP, Cell(i, i)))
            t.add_piece(Piece(black, PieceKind.BISHOP, Cell(i + 8, i + 8)))

        back_pieces = [
            (PieceKind.ROOK, (0, 3), (10, 7)),
            (PieceKind.ROOK, (3, 0), (7, 10)),
            (PieceKind.KNIGHT, (0, 2), (10, 8)),
            (PieceKind.KNIGHT, (2, 0), (8, 10)),
            (PieceKind.KING, (1, 0), (10, 9)),
            (PieceKind.QUEEN, (0, 1), (9, 10)),
        ]
        for kind, white_cell, black_cell in back_pieces:
            t.add_piece(Piece(white, kind, Cell.of(white_cell)))
            t.add_piece(Piece(black, kind, Cell.of(black_cell)))
        return t
