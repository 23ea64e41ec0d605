"""Coordinates on the game board."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """An immutable board coordinate: ``x`` selects the row, ``y`` the column."""

    x: int
    y: int

    def offset(self, dx: int, dy: int) -> Point:
        """Return the point shifted by ``dx`` rows and ``dy`` columns."""
        return Point(self.x + dx, self.y + dy)