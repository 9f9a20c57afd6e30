"""Positions of things drawn on the board."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ObjPos:
    """A board coordinate together with the character drawn there."""

    x: int = 0
    y: int = 0
    symbol: str = ""

    def is_pos_equal(self, other: ObjPos) -> bool:
        """Return True when *other* sits on the same cell, whatever its symbol."""
        return self.x == other.x and self.y == other.y

    def symbol_if_pos_equal(self, other: ObjPos) -> str:
        """Return this symbol if *other* shares the cell, else an empty string."""
        return self.symbol if self.is_pos_equal(other) else ""