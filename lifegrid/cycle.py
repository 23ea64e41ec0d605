"""How one generation of the board turns into the next."""

from __future__ import annotations

from abc import ABC, abstractmethod

from lifegrid.cells import Board, CellLifeState
from lifegrid.geometry import Point
from lifegrid.neighbourhoods import BaseNeighbourhood


class BaseGameCycleBehaviour(ABC):
    """Advances a board by one generation."""

    @abstractmethod
    def perform_cycle(self, board: Board, neighbourhood: BaseNeighbourhood) -> None:
        """Update the cells of ``board`` in place."""


class DefaultGameCycleBehaviour(BaseGameCycleBehaviour):
    """Computes every cell's next state first, then applies the transitions."""

    def perform_cycle(self, board: Board, neighbourhood: BaseNeighbourhood) -> None:
        next_states = [
            [
                cell.next_life_state(neighbourhood.neighbours(board, Point(x, y)))
                for y, cell in enumerate(row)
            ]
            for x, row in enumerate(board)
        ]

        for row, states in zip(board, next_states):
            for cell, upcoming in zip(row, states):
                current = cell.life_state
                if current is CellLifeState.ALIVE and upcoming is CellLifeState.DEAD:
                    cell.kill()
                elif current is CellLifeState.DEAD and upcoming is CellLifeState.ALIVE:
                    cell.resurrect()
                elif current is CellLifeState.ALIVE and upcoming is CellLifeState.ALIVE:
                    cell.keep_alive(neighbourhood)