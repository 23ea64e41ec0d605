import pytest

from lifegrid.cells import EmptyCellFactory
from lifegrid.cycle import DefaultGameCycleBehaviour
from lifegrid.neighbourhoods import MooreNeighbourhood, VonNeumannNeighbourhood
from lifegrid.repository import ConfigurationRepository


def test_registered_components_are_returned():
    repository = ConfigurationRepository()
    neighbourhood = MooreNeighbourhood()
    factory = EmptyCellFactory()
    behaviour = DefaultGameCycleBehaviour()
    repository.add_neighbourhood("moore", neighbourhood)
    repository.add_cell_factory("empty", factory)
    repository.add_game_cycle_behaviour("default", behaviour)

    assert repository.neighbourhood("moore") is neighbourhood
    assert repository.cell_factory("empty") is factory
    assert repository.game_cycle_behaviour("default") is behaviour


def test_missing_neighbourhood_raises_key_error():
    repository = ConfigurationRepository()
    with pytest.raises(KeyError) as excinfo:
        repository.neighbourhood("missing")
    assert "missing" in str(excinfo.value)


def test_missing_cell_factory_raises_key_error():
    repository = ConfigurationRepository()
    with pytest.raises(KeyError) as excinfo:
        repository.cell_factory("missing")
    assert "missing" in str(excinfo.value)


def test_missing_game_cycle_behaviour_raises_key_error():
    repository = ConfigurationRepository()
    with pytest.raises(KeyError) as excinfo:
        repository.game_cycle_behaviour("missing")
    assert "missing" in str(excinfo.value)


def test_registering_again_replaces():
    repository = ConfigurationRepository()
    repository.add_neighbourhood("n", MooreNeighbourhood())
    replacement = VonNeumannNeighbourhood()
    repository.add_neighbourhood("n", replacement)
    assert repository.neighbourhood("n") is replacement


def test_kinds_have_separate_namespaces():
    repository = ConfigurationRepository()
    repository.add_neighbourhood("default", MooreNeighbourhood())
    with pytest.raises(KeyError):
        repository.cell_factory("default")


def test_copy_shares_components_but_not_registrations():
    repository = ConfigurationRepository()
    neighbourhood = MooreNeighbourhood()
    repository.add_neighbourhood("moore", neighbourhood)

    duplicate = repository.copy()
    assert duplicate.neighbourhood("moore") is neighbourhood

    duplicate.add_neighbourhood("vonNeumann", VonNeumannNeighbourhood())
    with pytest.raises(KeyError):
        repository.neighbourhood("vonNeumann")

    repository.add_cell_factory("empty", EmptyCellFactory())
    with pytest.raises(KeyError):
        duplicate.cell_factory("empty")