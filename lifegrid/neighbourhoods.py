"""Rules that decide which cells count as a cell's neighbours."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from lifegrid.cells import BaseCell, Board
from lifegrid.geometry import Point


def _cells_at(board: Board, position: Point, offsets: Iterable[tuple[int, int]]) -> list[BaseCell]:
    rows = len(board)
    cols = len(board[0])
    found = []
    for dx, dy in offsets:
        target = position.offset(dx, dy)
        if 0 <= target.x < rows and 0 <= target.y < cols:
            found.append(board[target.x][target.y])
    return found


class BaseNeighbourhood(ABC):
    """Selects the neighbours of a position on a board."""

    @abstractmethod
    def neighbours(self, board: Board, position: Point) -> list[BaseCell]:
        """Return the cells neighbouring ``position``; cells off the board are omitted."""


class MooreNeighbourhood(BaseNeighbourhood):
    """The eight surrounding cells, including diagonals."""

    _OFFSETS = tuple(
        (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)
    )

    def neighbours(self, board: Board, position: Point) -> list[BaseCell]:
        return _cells_at(board, position, self._OFFSETS)


class VonNeumannNeighbourhood(BaseNeighbourhood):
    """The four orthogonally adjacent cells."""

    _OFFSETS = ((-1, 0), (0, 1), (1, 0), (0, -1))

    def neighbours(self, board: Board, position: Point) -> list[BaseCell]:
        return _cells_at(board, position, self._OFFSETS)