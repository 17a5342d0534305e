"""Cell value object and adjacency helpers.

Cells are addressed on two diagonal axes ``(r_diag, l_diag)``. The board
occupies the hexagon described in :mod:`hexchess.core.geometry`; the pair
``(-1, -1)`` is reserved as the "no cell" sentinel.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias, Union

Offset: TypeAlias = tuple[int, int]

# The six unit steps of the lattice.
PAWN_ADJACENT_OFFSETS: frozenset[Offset] = frozenset(
    {(1, 1), (1, 0), (0, -1), (-1, -1), (-1, 0), (0, 1)}
)

# Added to the unit steps when testing whether a cell threatens a king.
KING_EXTRA_OFFSETS: frozenset[Offset] = frozenset(
    {(2, 1), (1, -1), (-1, -2), (-2, -1), (-1, 1), (1, 2)}
)

KING_ADJACENT_OFFSETS: frozenset[Offset] = PAWN_ADJACENT_OFFSETS | KING_EXTRA_OFFSETS


@dataclass(frozen=True, slots=True, order=True)
class Cell:
    """Immutable coordinate pair on the two diagonal axes."""

    r_diag: int
    l_diag: int

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def of(cls, value: CellLike) -> Cell:
        """Coerce a ``Cell`` or an ``(r_diag, l_diag)`` pair into a ``Cell``."""
        if isinstance(value, Cell):
            return value
        r_diag, l_diag = value
        return cls(r_diag, l_diag)

    @classmethod
    def empty(cls) -> Cell:
        return EMPTY_CELL

    def is_empty(self) -> bool:
        return self.r_diag == -1 or self.l_diag == -1

    # ── Geometry ─────────────────────────────────────────────────────────

    def step(self, offset: Offset) -> Cell:
        """Cell reached by translating this one by *offset*."""
        dr, dl = offset
        return Cell(self.r_diag + dr, self.l_diag + dl)

    def offset_to(self, other: Cell) -> Offset:
        return (other.r_diag - self.r_diag, other.l_diag - self.l_diag)

    def is_pawn_adjacent(self, other: Cell) -> bool:
        """Whether *other* is one unit step away."""
        return self.offset_to(other) in PAWN_ADJACENT_OFFSETS

    def is_king_adjacent(self, other: Cell) -> bool:
        """Whether *other* is close enough to threaten a king standing here."""
        return self.offset_to(other) in KING_ADJACENT_OFFSETS

    def as_tuple(self) -> Offset:
        return (self.r_diag, self.l_diag)

    def __str__(self) -> str:
        return f"{self.r_diag} {self.l_diag}"


EMPTY_CELL = Cell(-1, -1)

CellLike: TypeAlias = Union[Cell, tuple[int, int]]
