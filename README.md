# lifegrid

A small cellular automaton engine with an interactive command line. It runs
Conway's Game of Life out of the box. Cell types, neighbourhoods and cycle
rules are pluggable, so you can register your own.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Interactive use

```
lifegrid
```

This prints a greeting and opens a `>` prompt on a 10×10 board where every
cell starts as an `empty` cell. The shell reads one command per line until
`exit` or the end of input. The commands are:

- `help`: list all commands with a short description
- `exit`: leave the program
- `printBoard`: draw the board in a frame, one row per line. A live `default`
  cell is shown as `*`, a dead `default` cell as `#`, an `empty` cell as a
  blank, and a live cell of any other type as `?`.
- `set <x> <y> <cell_type>`: place a new cell of the given type, `default` or
  `empty`, at row `x`, column `y`. New `default` cells start alive.
- `changeNeighbourhood <type>`: switch between `moore` (the 8 surrounding
  cells) and `vonNeumann` (the 4 orthogonal cells)
- `changeGameCycleBehaviour <type>`: select a registered cycle behaviour.
  Only `default` is available.
- `cycle [n]`: advance the game by `n` generations. `n` defaults to 1 and must
  be positive.

A command with the wrong number of arguments prints a usage error. An unknown
name, a position outside the board or a non-numeric number is reported as
`Error executing command: ...`, and the shell keeps running.

Example session that builds a blinker:

```
>  set 1 0 default
>  set 1 1 default
>  set 1 2 default
>  cycle
>  printBoard
```

## Library use

```python
from lifegrid.builder import GameOfLifeBuilder
from lifegrid.cells import CellLifeState
from lifegrid.classic import ClassicCellFactory
from lifegrid.geometry import Point

builder = GameOfLifeBuilder()
builder.add_cell_factory("default", ClassicCellFactory())
manager = builder.build()

for y in range(3):
    manager.set_cell(Point(1, y), "default")
manager.perform_cycle()

for row in manager.board:
    print(" ".join("*" if cell.state is CellLifeState.ALIVE else "." for cell in row))
```

`GameOfLifeBuilder` registers the `moore` neighbourhood, the `default` cycle
behaviour and the `empty` cell factory. `build()` returns a
`GameOfLifeManager` with `default` and `moore` selected.

`GameOfLifeManager.board` is a snapshot: a list of rows of `CellState`
values, each holding `state` (a `CellLifeState`) and `cell_type`. Selecting
or placing a name that was never registered raises `KeyError`; placing a cell
outside the board raises `IndexError`.

The command shell can be embedded with `lifegrid.cli.GameOfLifeCli`, which
takes a manager and optional input and output streams.

### Extending

- Subclass `lifegrid.cells.BaseCell` and `lifegrid.cells.BaseCellFactory` to
  add new kinds of cell.
- Subclass `lifegrid.neighbourhoods.BaseNeighbourhood` to define which cells
  count as neighbours.
- Subclass `lifegrid.cycle.BaseGameCycleBehaviour` to change how a generation
  is computed.
- Subclass `lifegrid.commands.BaseCommandHandler` and pass it to
  `GameOfLifeCli.register_command_handler` to add a command.

Register each new part on a `GameOfLifeBuilder` before you call `build()`.

## Limitations

- The board is always 10×10 and its edges do not wrap around.
- There is no way to save or load a board; state lives only for the session.
- The `lifegrid` command takes no options; new cell types, neighbourhoods and
  behaviours can only be added from Python.