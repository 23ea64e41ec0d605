"""The interactive shell for playing the game."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import TextIO

from lifegrid.builder import GameOfLifeBuilder
from lifegrid.classic import ClassicCellFactory
from lifegrid.commands import (
    BaseCommandHandler,
    ChangeGameCycleBehaviourCommandHandler,
    ChangeNeighbourhoodCommandHandler,
    CycleCommandHandler,
    PrintBoardCommandHandler,
    SetCommandHandler,
)
from lifegrid.manager import GameOfLifeManager
from lifegrid.neighbourhoods import VonNeumannNeighbourhood

_WHITESPACE = " \t\n\v\f\r"


def _error_message(error: Exception) -> str:
    if isinstance(error, KeyError) and error.args:
        return str(error.args[0])
    return str(error)


class GameOfLifeCli:
    """Reads commands line by line and runs them against a game."""

    def __init__(
        self,
        manager: GameOfLifeManager,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self._manager = manager
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._handlers: dict[str, BaseCommandHandler] = {
            "printBoard": PrintBoardCommandHandler(),
            "set": SetCommandHandler(),
            "changeNeighbourhood": ChangeNeighbourhoodCommandHandler(),
            "changeGameCycleBehaviour": ChangeGameCycleBehaviourCommandHandler(),
            "cycle": CycleCommandHandler(),
        }

    def register_command_handler(self, command: str, handler: BaseCommandHandler) -> None:
        """Add or replace the handler for ``command``."""
        self._handlers[command] = handler

    def _write(self, text: str) -> None:
        self._stdout.write(text)

    def _print_help(self) -> None:
        self._write("Available commands:\n")
        self._write("- exit - Exit the program\n")
        self._write("- help - List all commands\n")
        for name in sorted(self._handlers):
            self._write(f"- {name} - {self._handlers[name].description}\n")
        self._write("\n")
        self._stdout.flush()

    def run(self) -> None:
        """Process commands until ``exit`` or end of input."""
        self._write("Welcome to Game of Life CLI!\n")
        self._write("Type 'help' for available commands.\n")

        while True:
            self._write(">  ")
            self._stdout.flush()
            raw = self._stdin.readline()
            if not raw:
                break
            line = raw.strip(_WHITESPACE)
            if not line:
                continue

            command, space, rest = line.partition(" ")
            args = rest.split() if space else []

            if command == "exit":
                break
            if command == "help":
                self._print_help()
                continue

            handler = self._handlers.get(command)
            if handler is None:
                self._write(f"Unknown command: {command}\n")
                self._write("Type 'help' for available commands.\n")
                continue

            try:
                handler.handle(self._manager, args, self._stdout)
            except Exception as error:  # noqa: BLE001 - any failure is reported to the user
                self._write(f"Error executing command: {_error_message(error)}\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Start the interactive shell with the classic cell and von Neumann neighbourhood available."""
    parser = argparse.ArgumentParser(prog="lifegrid", description="Interactive Game of Life.")
    parser.parse_args(argv)

    print("Hello World")

    builder = GameOfLifeBuilder()
    builder.add_cell_factory("default", ClassicCellFactory())
    builder.add_neighbourhood("vonNeumann", VonNeumannNeighbourhood())

    GameOfLifeCli(builder.build()).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())