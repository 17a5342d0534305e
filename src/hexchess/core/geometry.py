"""Board boundary and direction tables.

Layout (row = ``r_diag``, columns = admissible ``l_diag`` values)::

    row  0: 0..5        row  6: 1..10
    row  1: 0..6        row  7: 2..10
    row  2: 0..7        row  8: 3..10
    row  3: 0..8        row  9: 4..10
    row  4: 0..9        row 10: 5..10
    row  5: 0..10

Directions are ``(dr, dl)`` offsets named after clock positions: even hours
are the six orthogonal unit steps, odd hours the six diagonals. Knight leaps
come in a left/right pair around each odd hour.
"""

from __future__ import annotations

from hexchess.core.cell import Cell, CellLike, Offset

BOARD_SIZE = 11
CELL_COUNT = 91

# Step limit used by sliding pieces; longer than any line on the board.
UNBOUNDED = BOARD_SIZE * 2


def row_bounds(r_diag: int) -> tuple[int, int]:
    """Inclusive ``l_diag`` range of row *r_diag* (which must be 0–10)."""
    if r_diag <= 5:
        return (0, 5 + r_diag)
    return (r_diag - 5, 10)


def is_on_board(cell: CellLike) -> bool:
    """Whether *cell* is one of the 91 cells of the hexagon."""
    r_diag, l_diag = cell.as_tuple() if isinstance(cell, Cell) else cell
    if not 0 <= r_diag < BOARD_SIZE:
        return False
    low, high = row_bounds(r_diag)
    return low <= l_diag <= high


def _build_valid_cells() -> tuple[Cell, ...]:
    cells: list[Cell] = []
    for r_diag in range(BOARD_SIZE):
        low, high = row_bounds(r_diag)
        cells.extend(Cell(r_diag, l_diag) for l_diag in range(low, high + 1))
    if len(cells) != CELL_COUNT:
        raise RuntimeError(f"Board layout has {len(cells)} cells, expected {CELL_COUNT}")
    return tuple(cells)


VALID_CELLS: tuple[Cell, ...] = _build_valid_cells()


# ── Orthogonal unit steps ───────────────────────────────────────────────────

ORTHO_00: Offset = (1, 1)
ORTHO_02: Offset = (1, 0)
ORTHO_04: Offset = (0, -1)
ORTHO_06: Offset = (-1, -1)
ORTHO_08: Offset = (-1, 0)
ORTHO_10: Offset = (0, 1)

# ── Diagonal steps (sum of the two neighbouring orthogonals) ─────────────

DIAG_01: Offset = (2, 1)
DIAG_03: Offset = (1, -1)
DIAG_05: Offset = (-1, -2)
DIAG_07: Offset = (-2, -1)
DIAG_09: Offset = (-1, 1)
DIAG_11: Offset = (1, 2)

# ── Knight leaps ─────────────────────────────────────────────────────────────

KNIGHT_01L: Offset = (3, 2)
KNIGHT_01R: Offset = (3, 1)
KNIGHT_03L: Offset = (2, -1)
KNIGHT_03R: Offset = (1, -2)
KNIGHT_05L: Offset = (-1, -3)
KNIGHT_05R: Offset = (-2, -3)
KNIGHT_07L: Offset = (-3, -2)
KNIGHT_07R: Offset = (-3, -1)
KNIGHT_09L: Offset = (-2, 1)
KNIGHT_09R: Offset = (-1, 2)
KNIGHT_11L: Offset = (1, 3)
KNIGHT_11R: Offset = (2, 3)

ORTHOGONAL_DIRECTIONS: tuple[Offset, ...] = (
    ORTHO_00,
    ORTHO_02,
    ORTHO_04,
    ORTHO_06,
    ORTHO_08,
    ORTHO_10,
)
DIAGONAL_DIRECTIONS: tuple[Offset, ...] = (
    DIAG_01,
    DIAG_03,
    DIAG_05,
    DIAG_07,
    DIAG_09,
    DIAG_11,
)
ALL_DIRECTIONS: tuple[Offset, ...] = ORTHOGONAL_DIRECTIONS + DIAGONAL_DIRECTIONS
KNIGHT_LEAPS: tuple[Offset, ...] = (
    KNIGHT_01L,
    KNIGHT_01R,
    KNIGHT_03L,
    KNIGHT_03R,
    KNIGHT_05L,
    KNIGHT_05R,
    KNIGHT_07L,
    KNIGHT_07R,
    KNIGHT_09L,
    KNIGHT_09R,
    KNIGHT_11L,
    KNIGHT_11R,
)
