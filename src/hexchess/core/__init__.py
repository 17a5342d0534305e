"""Core domain layer: hexagonal chess rules with zero external dependencies.

Quick start::

    from hexchess.core import Board, Cell, PieceColor

    board = Board.initial()
    print(sorted(board.destinations(Cell(0, 4))))
    board.make_move(Cell(0, 4), PieceColor.WHITE, Cell(2, 6))
"""

from hexchess.core.board import Board
from hexchess.core.cell import EMPTY_CELL, Cell
from hexchess.core.enums import PieceColor, PieceKind, SpecialRule
from hexchess.core.errors import HexChessError, InvariantViolation, SetupConflictError
from hexchess.core.geometry import (
    ALL_DIRECTIONS,
    CELL_COUNT,
    DIAGONAL_DIRECTIONS,
    KNIGHT_LEAPS,
    ORTHOGONAL_DIRECTIONS,
    UNBOUNDED,
    VALID_CELLS,
    is_on_board,
)
from hexchess.core.piece import Piece
from hexchess.core.ray import Ray
from hexchess.core.template import BoardTemplate

__all__ = [
    # Enums / flags
    "PieceColor",
    "PieceKind",
    "SpecialRule",
    # Geometry
    "ALL_DIRECTIONS",
    "CELL_COUNT",
    "DIAGONAL_DIRECTIONS",
    "EMPTY_CELL",
    "KNIGHT_LEAPS",
    "ORTHOGONAL_DIRECTIONS",
    "UNBOUNDED",
    "VALID_CELLS",
    "is_on_board",
    # Domain objects
    "Board",
    "BoardTemplate",
    "Cell",
    "Piece",
    "Ray",
    # Errors
    "HexChessError",
    "InvariantViolation",
    "SetupConflictError",
]
