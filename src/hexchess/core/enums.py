"""Core enumerations and flags for the hexagonal chess domain."""

from __future__ import annotations

from enum import IntEnum, IntFlag, auto


class PieceColor(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> PieceColor:
        return PieceColor(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """Piece archetypes ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class SpecialRule(IntFlag):
    """Pawn special-rule flags."""

    NONE = 0
    CAN_BE_EN_PASSANTED = auto()
    TWO_INITIAL_MOVE = auto()
    PROMOTION = auto()
