"""Exception types raised by the rules engine.

Rejected move requests are not errors: :meth:`Board.make_move` reports them
by returning ``False``.
"""

from __future__ import annotations


class HexChessError(Exception):
    """Base class for all hexchess errors."""


class SetupConflictError(HexChessError, ValueError):
    """A template was asked to put a second piece on an occupied cell."""


class InvariantViolation(HexChessError, RuntimeError):
    """Internal state that the rules can never produce was encountered."""
