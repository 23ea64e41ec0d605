"""Cells following Conway's rules: survive on 2 or 3, born on 3."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from lifegrid.cells import BaseCell, BaseCellFactory, CellLifeState
from lifegrid.geometry import Point

if TYPE_CHECKING:
    from lifegrid.neighbourhoods import BaseNeighbourhood

logger = logging.getLogger(__name__)


class ClassicCell(BaseCell):
    """A Game of Life cell that starts alive."""

    def kill(self) -> None:
        self._life_state = CellLifeState.DEAD

    def keep_alive(self, neighbourhood: BaseNeighbourhood) -> None:
        self._life_state = CellLifeState.ALIVE

    def resurrect(self) -> None:
        self._life_state = CellLifeState.ALIVE

    def next_life_state(self, neighbours: list[BaseCell]) -> CellLifeState:
        live = sum(1 for cell in neighbours if cell.life_state is CellLifeState.ALIVE)
        logger.debug("live neighbours of %s: %d", self.position, live)

        if self.life_state is CellLifeState.ALIVE:
            return CellLifeState.ALIVE if live in (2, 3) else CellLifeState.DEAD
        return CellLifeState.ALIVE if live == 3 else CellLifeState.DEAD

    @property
    def cell_type(self) -> str:
        return "default"


class ClassicCellFactory(BaseCellFactory):
    """Creates :class:`ClassicCell` instances."""

    def create(self, position: Point) -> BaseCell:
        return ClassicCell(position)