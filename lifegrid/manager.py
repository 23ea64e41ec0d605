"""The game state: a board plus the selected rules."""

from __future__ import annotations

from dataclasses import dataclass

from lifegrid.cells import Board, CellLifeState
from lifegrid.cycle import BaseGameCycleBehaviour
from lifegrid.geometry import Point
from lifegrid.neighbourhoods import BaseNeighbourhood
from lifegrid.repository import ConfigurationRepository

_BOARD_SIZE = Point(10, 10)


@dataclass(frozen=True)
class CellState:
    """A snapshot of one cell: its life state and type name."""

    state: CellLifeState
    cell_type: str


class GameOfLifeManager:
    """Owns a 10x10 board, initially filled with cells of type ``"empty"``."""

    def __init__(self, repository: ConfigurationRepository) -> None:
        self._repository = repository.copy()
        self._size = _BOARD_SIZE
        empty = self._repository.cell_factory("empty")
        self._board: Board = [
            [empty.create(Point(x, y)) for y in range(self._size.y)]
            for x in range(self._size.x)
        ]
        self._neighbourhood: BaseNeighbourhood | None = None
        self._behaviour: BaseGameCycleBehaviour | None = None

    def select_game_cycle_behaviour(self, name: str) -> None:
        self._behaviour = self._repository.game_cycle_behaviour(name)

    def select_neighbourhood(self, name: str) -> None:
        self._neighbourhood = self._repository.neighbourhood(name)

    @property
    def board(self) -> list[list[CellState]]:
        """A snapshot of the board, indexed ``[x][y]``."""
        return [[CellState(cell.life_state, cell.cell_type) for cell in row] for row in self._board]

    def set_cell(self, position: Point, cell_type: str) -> None:
        """Place a new cell of ``cell_type`` at ``position``."""
        factory = self._repository.cell_factory(cell_type)
        if not (0 <= position.x < self._size.x and 0 <= position.y < self._size.y):
            raise IndexError(f"position ({position.x}, {position.y}) is outside the board")
        self._board[position.x][position.y] = factory.create(position)

    def perform_cycle(self) -> None:
        """Advance the board one generation using the selected rules."""
        if self._behaviour is None:
            raise RuntimeError("no game cycle behaviour selected")
        if self._neighbourhood is None:
            raise RuntimeError("no neighbourhood selected")
        self._behaviour.perform_cycle(self._board, self._neighbourhood)