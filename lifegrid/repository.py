"""A registry of named neighbourhoods, cell factories and cycle behaviours."""

from __future__ import annotations

from lifegrid.cells import BaseCellFactory
from lifegrid.cycle import BaseGameCycleBehaviour
from lifegrid.neighbourhoods import BaseNeighbourhood


class ConfigurationRepository:
    """Holds the components a game can select by name.

    Looking up a name that was never registered raises :class:`KeyError`.
    """

    def __init__(self) -> None:
        self._neighbourhoods: dict[str, BaseNeighbourhood] = {}
        self._cell_factories: dict[str, BaseCellFactory] = {}
        self._game_cycle_behaviours: dict[str, BaseGameCycleBehaviour] = {}

    def add_neighbourhood(self, key: str, neighbourhood: BaseNeighbourhood) -> None:
        self._neighbourhoods[key] = neighbourhood

    def neighbourhood(self, key: str) -> BaseNeighbourhood:
        try:
            return self._neighbourhoods[key]
        except KeyError:
            raise KeyError(f"no neighbourhood named {key!r}") from None

    def add_cell_factory(self, key: str, factory: BaseCellFactory) -> None:
        self._cell_factories[key] = factory

    def cell_factory(self, key: str) -> BaseCellFactory:
        try:
            return self._cell_factories[key]
        except KeyError:
            raise KeyError(f"no cell type named {key!r}") from None

    def add_game_cycle_behaviour(self, key: str, behaviour: BaseGameCycleBehaviour) -> None:
        self._game_cycle_behaviours[key] = behaviour

    def game_cycle_behaviour(self, key: str) -> BaseGameCycleBehaviour:
        try:
            return self._game_cycle_behaviours[key]
        except KeyError:
            raise KeyError(f"no game cycle behaviour named {key!r}") from None

    def copy(self) -> ConfigurationRepository:
        """Return a repository with the same registrations; later changes to either are independent."""
        duplicate = ConfigurationRepository()
        duplicate._neighbourhoods = dict(self._neighbourhoods)
        duplicate._cell_factories = dict(self._cell_factories)
        duplicate._game_cycle_behaviours = dict(self._game_cycle_behaviours)
        return duplicate