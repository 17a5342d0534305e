"""Lazy, restartable sequences of cells along one direction."""

from __future__ import annotations

from collections.abc import Callable, Iterator

from hexchess.core.cell import Cell, Offset
from hexchess.core.geometry import UNBOUNDED, is_on_board

BoundaryRule = Callable[[Cell], bool]


class Ray:
    """Cells reached by repeatedly stepping *direction* from *origin*.

    The origin itself is never yielded. Iteration stops after *max_steps*
    cells or at the first cell rejected by *boundary*, whichever comes
    first. Every ``iter()`` call starts over from the origin, so a ray can
    be walked any number of times. Occupancy is not considered here.
    """

    __slots__ = ("origin", "direction", "max_steps", "boundary")

    def __init__(
        self,
        origin: Cell,
        direction: Offset,
        max_steps: int = UNBOUNDED,
        boundary: BoundaryRule = is_on_board,
    ) -> None:
        self.origin = origin
        self.direction = direction
        self.max_steps = max_steps
        self.boundary = boundary

    def __iter__(self) -> Iterator[Cell]:
        cell = self.origin
        for _ in range(self.max_steps):
            cell = cell.step(self.direction)
            if not self.boundary(cell):
                return
            yield cell

    def __repr__(self) -> str:
        return (
            f"Ray(origin={self.origin}, direction={self.direction}, "
            f"max_steps={self.max_steps})"
        )
