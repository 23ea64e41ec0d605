"""Assembles a game manager with the built-in components registered."""

from __future__ import annotations

from lifegrid.cells import BaseCellFactory, EmptyCellFactory
from lifegrid.cycle import BaseGameCycleBehaviour, DefaultGameCycleBehaviour
from lifegrid.manager import GameOfLifeManager
from lifegrid.neighbourhoods import BaseNeighbourhood, MooreNeighbourhood
from lifegrid.repository import ConfigurationRepository


class GameOfLifeBuilder:
    """Starts with the ``"moore"`` neighbourhood, ``"default"`` behaviour and ``"empty"`` cells."""

    def __init__(self) -> None:
        self._repository = ConfigurationRepository()
        self._repository.add_neighbourhood("moore", MooreNeighbourhood())
        self._repository.add_game_cycle_behaviour("default", DefaultGameCycleBehaviour())
        self._repository.add_cell_factory("empty", EmptyCellFactory())

    def add_neighbourhood(self, name: str, neighbourhood: BaseNeighbourhood) -> None:
        self._repository.add_neighbourhood(name, neighbourhood)

    def add_game_cycle_behaviour(self, name: str, behaviour: BaseGameCycleBehaviour) -> None:
        self._repository.add_game_cycle_behaviour(name, behaviour)

    def add_cell_factory(self, name: str, factory: BaseCellFactory) -> None:
        self._repository.add_cell_factory(name, factory)

    def build(self) -> GameOfLifeManager:
        """Return a manager with the ``"default"`` behaviour and ``"moore"`` neighbourhood selected."""
        manager = GameOfLifeManager(self._repository)
        manager.select_game_cycle_behaviour("default")
        manager.select_neighbourhood("moore")
        return manager