"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from hexchess.core.board import Board
from hexchess.core.piece import Piece
from hexchess.core.template import BoardTemplate


@pytest.fixture()
def make_board() -> Callable[..., Board]:
    """Factory building a board from the given pieces only."""

    def _make(*pieces: Piece) -> Board:
        return Board(BoardTemplate(pieces))

    return _make


@pytest.fixture()
def standard_board() -> Board:
    return Board.initial()
