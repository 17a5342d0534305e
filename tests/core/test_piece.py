"""Tests for Piece: movement patterns and pawn flag transitions."""

import pytest

from hexchess.core.cell import Cell
from hexchess.core.enums import PieceColor, PieceKind, SpecialRule
from hexchess.core.errors import InvariantViolation
from hexchess.core.geometry import ORTHO_00, ORTHO_02, ORTHO_04, ORTHO_06, ORTHO_08, ORTHO_10
from hexchess.core.piece import (
    Piece,
    is_pawn_start,
    is_promotion_cell,
    pawn_capture_directions,
    pawn_forward,
)

W, B = PieceColor.WHITE, PieceColor.BLACK
TWO = SpecialRule.TWO_INITIAL_MOVE


def _cells(piece: Piece) -> set[Cell]:
    return {cell for ray in piece.rays() for cell in ray}


class TestPatterns:
    @pytest.mark.parametrize(
        ("kind", "ray_count", "cell_count"),
        [
            (PieceKind.KING, 12, 12),
            (PieceKind.QUEEN, 12, 42),
            (PieceKind.ROOK, 6, 30),
            (PieceKind.BISHOP, 6, 12),
            (PieceKind.KNIGHT, 12, 12),
        ],
    )
    def test_centre_patterns(
        self, kind: PieceKind, ray_count: int, cell_count: int
    ) -> None:
        piece = Piece(W, kind, Cell(5, 5))
        assert len(piece.rays()) == ray_count
        assert len(_cells(piece)) == cell_count

    def test_rook_rays_each_five_from_centre(self) -> None:
        rook = Piece(W, PieceKind.ROOK, Cell(5, 5))
        assert [len(list(ray)) for ray in rook.rays()] == [5] * 6

    def test_king_in_corner(self) -> None:
        king = Piece(B, PieceKind.KING, Cell(0, 0))
        assert _cells(king) == {
            Cell(1, 1), Cell(1, 0), Cell(0, 1), Cell(2, 1), Cell(1, 2)
        }

    def test_pattern_ignores_color(self) -> None:
        white = Piece(W, PieceKind.KNIGHT, Cell(3, 3))
        black = Piece(B, PieceKind.KNIGHT, Cell(3, 3))
        assert _cells(white) == _cells(black)

    def test_white_pawn_with_double_step(self) -> None:
        pawn = Piece(W, PieceKind.PAWN, Cell(4, 4), TWO)
        forward, *captures = pawn.rays()
        assert forward.direction == ORTHO_00
        assert list(forward) == [Cell(5, 5), Cell(6, 6)]
        assert [r.direction for r in captures] == [ORTHO_02, ORTHO_10]
        assert all(r.max_steps == 1 for r in captures)

    def test_black_pawn_single_step(self) -> None:
        pawn = Piece(B, PieceKind.PAWN, Cell(6, 6))
        forward, *captures = pawn.rays()
        assert forward.direction == ORTHO_06
        assert list(forward) == [Cell(5, 5)]
        assert [r.direction for r in captures] == [ORTHO_04, ORTHO_08]

    def test_pawn_helpers_reject_unknown_color(self) -> None:
        with pytest.raises(InvariantViolation):
            pawn_forward(2)  # type: ignore[arg-type]
        with pytest.raises(InvariantViolation):
            pawn_capture_directions(7)  # type: ignore[arg-type]
        with pytest.raises(InvariantViolation):
            is_pawn_start(-1, Cell(4, 4))  # type: ignore[arg-type]


class TestConstruction:
    def test_flags_default_false(self) -> None:
        rook = Piece(W, PieceKind.ROOK, Cell(0, 3))
        assert not rook.can_promote
        assert not rook.has_en_passant_flag
        assert not rook.has_double_step

    def test_non_pawn_rejects_rules(self) -> None:
        with pytest.raises(ValueError, match="Only pawns"):
            Piece(W, PieceKind.KNIGHT, Cell(0, 2), TWO)

    def test_letters(self) -> None:
        assert str(Piece(B, PieceKind.KNIGHT, Cell(10, 8))) == "n"
        assert str(Piece(W, PieceKind.KING, Cell(1, 0))) == "K"

    def test_copy_is_independent(self) -> None:
        pawn = Piece(W, PieceKind.PAWN, Cell(4, 4), TWO)
        clone = pawn.copy()
        clone.move(Cell(6, 6))
        assert pawn.position == Cell(4, 4)
        assert pawn.has_double_step
        assert clone.has_en_passant_flag

    def test_accepts_tuple_position(self) -> None:
        assert Piece(W, PieceKind.KING, (1, 0)).position == Cell(1, 0)


class TestPawnMove:
    def test_single_step_clears_double_step(self) -> None:
        pawn = Piece(W, PieceKind.PAWN, Cell(4, 4), TWO)
        pawn.move(Cell(5, 5))
        assert pawn.position == Cell(5, 5)
        assert not pawn.has_en_passant_flag
        assert not pawn.can_promote
        assert not pawn.has_double_step

    def test_double_step_sets_en_passant(self) -> None:
        pawn = Piece(B, PieceKind.PAWN, Cell(6, 7), TWO)
        pawn.move(Cell(4, 5))
        assert pawn.has_en_passant_flag
        assert not pawn.has_double_step

    def test_en_passant_flag_lasts_one_move(self) -> None:
        pawn = Piece(W, PieceKind.PAWN, Cell(4, 4), TWO)
        pawn.move(Cell(6, 6))
        assert pawn.has_en_passant_flag
        pawn.move(Cell(7, 7))
        assert not pawn.has_en_passant_flag

    def test_move_along_start_band_keeps_double_step(self) -> None:
        pawn = Piece(W, PieceKind.PAWN, Cell(0, 4), TWO)
        pawn.move(Cell(1, 4))
        assert pawn.has_double_step
        assert not pawn.has_en_passant_flag

    def test_white_promotion(self) -> None:
        pawn = Piece(W, PieceKind.PAWN, Cell(9, 9))
        pawn.move(Cell(10, 10))
        assert pawn.can_promote

    def test_white_promotion_on_side_edge(self) -> None:
        pawn = Piece(W, PieceKind.PAWN, Cell(5, 9))
        pawn.move(Cell(5, 10))
        assert pawn.can_promote

    def test_black_promotion(self) -> None:
        pawn = Piece(B, PieceKind.PAWN, Cell(1, 1))
        pawn.move(Cell(0, 0))
        assert pawn.can_promote

    def test_non_pawn_move_only_relocates(self) -> None:
        queen = Piece(B, PieceKind.QUEEN, Cell(9, 10))
        queen.move(Cell(0, 0))
        assert queen.position == Cell(0, 0)
        assert queen.rules == SpecialRule.NONE


class TestPawnBands:
    def test_white_start_band(self) -> None:
        assert is_pawn_start(W, Cell(4, 0))
        assert is_pawn_start(W, Cell(0, 4))
        assert is_pawn_start(W, Cell(4, 4))
        assert not is_pawn_start(W, Cell(5, 5))
        assert not is_pawn_start(W, Cell(3, 3))

    def test_black_start_band(self) -> None:
        assert is_pawn_start(B, Cell(6, 10))
        assert is_pawn_start(B, Cell(10, 6))
        assert not is_pawn_start(B, Cell(7, 7))

    def test_promotion_cells(self) -> None:
        assert is_promotion_cell(W, Cell(10, 5))
        assert is_promotion_cell(W, Cell(5, 10))
        assert not is_promotion_cell(W, Cell(0, 0))
        assert is_promotion_cell(B, Cell(5, 0))
        assert is_promotion_cell(B, Cell(0, 5))
        assert not is_promotion_cell(B, Cell(10, 10))
