"""Cells, their life states and the factories that create them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING

from lifegrid.geometry import Point

if TYPE_CHECKING:
    from lifegrid.neighbourhoods import BaseNeighbourhood


class CellLifeState(Enum):
    """Whether a cell is alive or dead."""

    ALIVE = "alive"
    DEAD = "dead"


class BaseCell(ABC):
    """A cell on the board. New cells start alive."""

    def __init__(self, position: Point) -> None:
        self._position = position
        self._life_state = CellLifeState.ALIVE

    @property
    def position(self) -> Point:
        return self._position

    @property
    def life_state(self) -> CellLifeState:
        return self._life_state

    @abstractmethod
    def kill(self) -> None:
        """Called when the cell goes from alive to dead."""

    @abstractmethod
    def keep_alive(self, neighbourhood: BaseNeighbourhood) -> None:
        """Called when the cell stays alive through a cycle."""

    @abstractmethod
    def resurrect(self) -> None:
        """Called when the cell goes from dead to alive."""

    @abstractmethod
    def next_life_state(self, neighbours: list[BaseCell]) -> CellLifeState:
        """Return the state this cell should have after the next cycle."""

    @property
    @abstractmethod
    def cell_type(self) -> str:
        """The name of this kind of cell."""


Board = list[list[BaseCell]]


class BaseCellFactory(ABC):
    """Creates cells of one kind."""

    @abstractmethod
    def create(self, position: Point) -> BaseCell:
        """Return a new cell at ``position``."""


class EmptyCell(BaseCell):
    """A cell that is always dead and never changes."""

    def __init__(self, position: Point) -> None:
        super().__init__(position)
        self._life_state = CellLifeState.DEAD

    def kill(self) -> None:
        pass

    def keep_alive(self, neighbourhood: BaseNeighbourhood) -> None:
        pass

    def resurrect(self) -> None:
        pass

    def next_life_state(self, neighbours: list[BaseCell]) -> CellLifeState:
        return CellLifeState.DEAD

    @property
    def cell_type(self) -> str:
        return "empty"


class EmptyCellFactory(BaseCellFactory):
    """Creates :class:`EmptyCell` instances."""

    def create(self, position: Point) -> BaseCell:
        return EmptyCell(position)