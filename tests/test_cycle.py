import pytest

from lifegrid.cells import BaseCell, CellLifeState
from lifegrid.classic import ClassicCellFactory
from lifegrid.cycle import BaseGameCycleBehaviour, DefaultGameCycleBehaviour
from lifegrid.geometry import Point
from lifegrid.neighbourhoods import MooreNeighbourhood


def _board(rows, cols, alive):
    factory = ClassicCellFactory()
    board = []
    for x in range(rows):
        row = []
        for y in range(cols):
            cell = factory.create(Point(x, y))
            if Point(x, y) not in alive:
                cell.kill()
            row.append(cell)
        board.append(row)
    return board


def _alive(board):
    return {cell.position for row in board for cell in row if cell.life_state is CellLifeState.ALIVE}


class _RecordingCell(BaseCell):
    def __init__(self, position, upcoming):
        super().__init__(position)
        self.upcoming = upcoming
        self.calls = []

    def kill(self):
        self.calls.append("kill")
        self._life_state = CellLifeState.DEAD

    def keep_alive(self, neighbourhood):
        self.calls.append(("keep_alive", neighbourhood))

    def resurrect(self):
        self.calls.append("resurrect")
        self._life_state = CellLifeState.ALIVE

    def next_life_state(self, neighbours):
        return self.upcoming

    @property
    def cell_type(self):
        return "recording"


def test_base_behaviour_is_abstract():
    with pytest.raises(TypeError):
        BaseGameCycleBehaviour()


def test_blinker_flips_orientation():
    vertical = {Point(1, 2), Point(2, 2), Point(3, 2)}
    board = _board(5, 5, vertical)
    DefaultGameCycleBehaviour().perform_cycle(board, MooreNeighbourhood())
    assert _alive(board) == {Point(2, 1), Point(2, 2), Point(2, 3)}


def test_blinker_has_period_two():
    vertical = {Point(1, 2), Point(2, 2), Point(3, 2)}
    board = _board(5, 5, vertical)
    behaviour = DefaultGameCycleBehaviour()
    behaviour.perform_cycle(board, MooreNeighbourhood())
    assert _alive(board) != vertical
    behaviour.perform_cycle(board, MooreNeighbourhood())
    assert _alive(board) == vertical


def test_block_is_still_life():
    block = {Point(1, 1), Point(1, 2), Point(2, 1), Point(2, 2)}
    board = _board(4, 4, block)
    DefaultGameCycleBehaviour().perform_cycle(board, MooreNeighbourhood())
    assert _alive(board) == block


def test_lonely_cell_dies():
    board = _board(3, 3, {Point(1, 1)})
    DefaultGameCycleBehaviour().perform_cycle(board, MooreNeighbourhood())
    assert _alive(board) == set()


def test_transitions_call_matching_hooks():
    neighbourhood = MooreNeighbourhood()
    dying = _RecordingCell(Point(0, 0), CellLifeState.DEAD)
    surviving = _RecordingCell(Point(0, 1), CellLifeState.ALIVE)
    reviving = _RecordingCell(Point(1, 0), CellLifeState.ALIVE)
    reviving.kill()
    reviving.calls.clear()
    staying_dead = _RecordingCell(Point(1, 1), CellLifeState.DEAD)
    staying_dead.kill()
    staying_dead.calls.clear()
    board = [[dying, surviving], [reviving, staying_dead]]

    DefaultGameCycleBehaviour().perform_cycle(board, neighbourhood)

    assert dying.calls == ["kill"]
    assert surviving.calls == [("keep_alive", neighbourhood)]
    assert reviving.calls == ["resurrect"]
    assert staying_dead.calls == []