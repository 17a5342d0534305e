"""Piece entity: identity, position, pawn flags and movement pattern."""

from __future__ import annotations

from collections.abc import Callable

from hexchess.core.cell import Cell
from hexchess.core.enums import PieceColor, PieceKind, SpecialRule
from hexchess.core.errors import InvariantViolation
from hexchess.core.geometry import (
    ALL_DIRECTIONS,
    DIAGONAL_DIRECTIONS,
    KNIGHT_LEAPS,
    ORTHO_00,
    ORTHO_02,
    ORTHO_04,
    ORTHO_06,
    ORTHO_08,
    ORTHO_10,
    ORTHOGONAL_DIRECTIONS,
    UNBOUNDED,
)
from hexchess.core.ray import Ray

# Board letters, uppercase = white
_CHARS: dict[tuple[PieceColor, PieceKind], str] = {
    (PieceColor.WHITE, PieceKind.PAWN): "P",
    (PieceColor.WHITE, PieceKind.KNIGHT): "N",
    (PieceColor.WHITE, PieceKind.BISHOP): "B",
    (PieceColor.WHITE, PieceKind.ROOK): "R",
    (PieceColor.WHITE, PieceKind.QUEEN): "Q",
    (PieceColor.WHITE, PieceKind.KING): "K",
    (PieceColor.BLACK, PieceKind.PAWN): "p",
    (PieceColor.BLACK, PieceKind.KNIGHT): "n",
    (PieceColor.BLACK, PieceKind.BISHOP): "b",
    (PieceColor.BLACK, PieceKind.ROOK): "r",
    (PieceColor.BLACK, PieceKind.QUEEN): "q",
    (PieceColor.BLACK, PieceKind.KING): "k",
}


# -- Pawn geometry ------------------------------------------------------------


def pawn_forward(color: PieceColor) -> tuple[int, int]:
    if color == PieceColor.WHITE:
        return ORTHO_00
    if color == PieceColor.BLACK:
        return ORTHO_06
    raise InvariantViolation(f"Unknown piece color: {color!r}")


def pawn_capture_directions(color: PieceColor) -> tuple[tuple[int, int], ...]:
    if color == PieceColor.WHITE:
        return (ORTHO_02, ORTHO_10)
    if color == PieceColor.BLACK:
        return (ORTHO_04, ORTHO_08)
    raise InvariantViolation(f"Unknown piece color: {color!r}")


def is_pawn_start(color: PieceColor, cell: Cell) -> bool:
    """Whether *cell* lies on *color*'s pawn starting band.

    The band is the two straight edges meeting at the side's corner, pushed
    four cells inwards.
    """
    rd, ld = cell.r_diag, cell.l_diag
    if color == PieceColor.WHITE:
        return (rd == 4 and 0 <= ld <= 4) or (0 <= rd <= 4 and ld == 4)
    if color == PieceColor.BLACK:
        return (rd == 6 and 6 <= ld <= 10) or (6 <= rd <= 10 and ld == 6)
    raise InvariantViolation(f"Unknown piece color: {color!r}")


def is_promotion_cell(color: PieceColor, cell: Cell) -> bool:
    """Whether *cell* is on the far edge for *color*'s pawns."""
    if color == PieceColor.WHITE:
        return cell.r_diag == 10 or cell.l_diag == 10
    if color == PieceColor.BLACK:
        return cell.r_diag == 0 or cell.l_diag == 0
    raise InvariantViolation(f"Unknown piece color: {color!r}")


# -- Movement patterns --------------------------------------------------------


def _king_rays(piece: Piece) -> list[Ray]:
    return [Ray(piece.position, d, 1) for d in ALL_DIRECTIONS]


def _queen_rays(piece: Piece) -> list[Ray]:
    return [Ray(piece.position, d, UNBOUNDED) for d in ALL_DIRECTIONS]


def _rook_rays(piece: Piece) -> list[Ray]:
    return [Ray(piece.position, d, UNBOUNDED) for d in ORTHOGONAL_DIRECTIONS]


def _bishop_rays(piece: Piece) -> list[Ray]:
    return [Ray(piece.position, d, UNBOUNDED) for d in DIAGONAL_DIRECTIONS]


def _knight_rays(piece: Piece) -> list[Ray]:
    return [Ray(piece.position, d, 1) for d in KNIGHT_LEAPS]


def _pawn_rays(piece: Piece) -> list[Ray]:
    forward_steps = 2 if piece.has_double_step else 1
    rays = [Ray(piece.position, pawn_forward(piece.color), forward_steps)]
    rays.extend(
        Ray(piece.position, d, 1) for d in pawn_capture_directions(piece.color)
    )
    return rays


_PATTERNS: dict[PieceKind, Callable[[Piece], list[Ray]]] = {
    PieceKind.KING: _king_rays,
    PieceKind.QUEEN: _queen_rays,
    PieceKind.ROOK: _rook_rays,
    PieceKind.BISHOP: _bishop_rays,
    PieceKind.KNIGHT: _knight_rays,
    PieceKind.PAWN: _pawn_rays,
}


class Piece:
    """A piece on the board, tagged by color and kind.

    Only pawns carry :class:`SpecialRule` flags; for every other kind the
    flag properties are always ``False``.
    """

    __slots__ = ("color", "kind", "_position", "_rules")

    def __init__(
        self,
        color: PieceColor,
        kind: PieceKind,
        position: Cell,
        rules: SpecialRule = SpecialRule.NONE,
    ) -> None:
        if rules and kind != PieceKind.PAWN:
            raise ValueError(f"Only pawns carry special rules, got {kind.name}")
        self.color = PieceColor(color)
        self.kind = PieceKind(kind)
        self._position = Cell.of(position)
        self._rules = SpecialRule(rules)

    def copy(self) -> Piece:
        return Piece(self.color, self.kind, self._position, self._rules)

    # ── State ────────────────────────────────────────────────────────────

    @property
    def position(self) -> Cell:
        return self._position

    @property
    def rules(self) -> SpecialRule:
        return self._rules

    @property
    def can_promote(self) -> bool:
        return bool(self._rules & SpecialRule.PROMOTION)

    @property
    def has_en_passant_flag(self) -> bool:
        return bool(self._rules & SpecialRule.CAN_BE_EN_PASSANTED)

    @property
    def has_double_step(self) -> bool:
        return bool(self._rules & SpecialRule.TWO_INITIAL_MOVE)

    # ── Behaviour ────────────────────────────────────────────────────────

    def rays(self) -> list[Ray]:
        """Movement pattern as independent rays, ignoring all other pieces."""
        return _PATTERNS[self.kind](self)

    def move(self, cell: Cell) -> None:
        """Relocate to *cell* and update the pawn flags."""
        origin = self._position
        self._position = cell
        if self.kind != PieceKind.PAWN:
            return

        if is_promotion_cell(self.color, cell):
            self._rules |= SpecialRule.PROMOTION
        # The en-passant window lasts exactly one ply.
        self._rules &= ~SpecialRule.CAN_BE_EN_PASSANTED
        if self.has_double_step and not is_pawn_start(self.color, cell):
            self._rules &= ~SpecialRule.TWO_INITIAL_MOVE
            if not origin.is_pawn_adjacent(cell):
                self._rules |= SpecialRule.CAN_BE_EN_PASSANTED

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Piece letter (uppercase = white, lowercase = black)."""
        return _CHARS[(self.color, self.kind)]

    def __repr__(self) -> str:
        return (
            f"Piece({self.color.name}, {self.kind.name}, {self._position}, "
            f"{self._rules!r})"
        )
