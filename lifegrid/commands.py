"""Command handlers for the interactive shell."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TextIO

from lifegrid.cells import CellLifeState
from lifegrid.geometry import Point
from lifegrid.manager import GameOfLifeManager

_INT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _parse_int(text: str) -> int:
    """Read a leading integer, ignoring leading whitespace and trailing text."""
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"invalid integer: {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise OverflowError(f"integer out of range: {text!r}")
    return value


class BaseCommandHandler(ABC):
    """One command the shell can run against a game."""

    @abstractmethod
    def handle(self, manager: GameOfLifeManager, args: Sequence[str], out: TextIO) -> None:
        """Run the command with ``args``, writing any messages to ``out``."""

    @property
    @abstractmethod
    def description(self) -> str:
        """A one-line explanation shown by ``help``."""


class PrintBoardCommandHandler(BaseCommandHandler):
    """Draws the board inside a frame."""

    _SYMBOLS = {"empty": " ", "default": "*"}

    def _symbol(self, state: CellLifeState, cell_type: str) -> str:
        if state is CellLifeState.ALIVE or cell_type == "empty":
            return self._SYMBOLS.get(cell_type, "?")
        return "#"

    def handle(self, manager: GameOfLifeManager, args: Sequence[str], out: TextIO) -> None:
        board = manager.board
        border = "+" + "-" * (len(board[0]) * 2 + 1) + "+\n"
        out.write(border)
        for row in board:
            cells = "".join(f"{self._symbol(cell.state, cell.cell_type)} " for cell in row)
            out.write(f"| {cells}|\n")
        out.write(border)

    @property
    def description(self) -> str:
        return "Prints the current state of the board"


class SetCommandHandler(BaseCommandHandler):
    """Places a cell of a named type at given coordinates."""

    def handle(self, manager: GameOfLifeManager, args: Sequence[str], out: TextIO) -> None:
        if len(args) != 3:
            out.write("Error: Set command requires 3 arguments: <x> <y> <cell_type>\n")
            return
        x = _parse_int(args[0])
        y = _parse_int(args[1])
        manager.set_cell(Point(x, y), args[2])
        out.write("Cell set successfully!\n")

    @property
    def description(self) -> str:
        return "Sets a cell of specified type at given coordinates. Usage: set <x> <y> <cell_type>"


class ChangeNeighbourhoodCommandHandler(BaseCommandHandler):
    """Selects a registered neighbourhood by name."""

    def handle(self, manager: GameOfLifeManager, args: Sequence[str], out: TextIO) -> None:
        if len(args) != 1:
            out.write(
                "Error: Change neighbourhood command requires an argument: <neighbourhood_type>\n"
            )
            return
        name = args[0]
        manager.select_neighbourhood(name)
        out.write(f"Neighbourhood type changed to: {name}\n")

    @property
    def description(self) -> str:
        return "Changes the neighbourhood type. Usage: neighbourhood <type>"


class ChangeGameCycleBehaviourCommandHandler(BaseCommandHandler):
    """Selects a registered game cycle behaviour by name."""

    def handle(self, manager: GameOfLifeManager, args: Sequence[str], out: TextIO) -> None:
        if len(args) != 1:
            out.write(
                "Error: Change game cycle behaviour command requires an argument: <behaviour_type>\n"
            )
            return
        name = args[0]
        manager.select_game_cycle_behaviour(name)
        out.write(f"Game cycle behaviour changed to: {name}\n")

    @property
    def description(self) -> str:
        return "Changes the game cycle behaviour type. Usage: behaviour <type>"


class CycleCommandHandler(BaseCommandHandler):
    """Advances the game by a number of generations, one by default."""

    def handle(self, manager: GameOfLifeManager, args: Sequence[str], out: TextIO) -> None:
        if len(args) > 1:
            out.write("Error: Cycle command accepts at most 1 argument (number of cycles)\n")
            return
        cycles = _parse_int(args[0]) if args else 1
        if cycles <= 0:
            out.write("Error: Number of cycles must be positive\n")
            return
        for _ in range(cycles):
            manager.perform_cycle()
        out.write(f"Advanced {cycles} cycle(s)\n")

    @property
    def description(self) -> str:
        return (
            "Advances the game by specified number of cycles. "
            "Usage: cycle [number_of_cycles]. Default is 1 cycle."
        )