"""Food placement on the board."""

from __future__ import annotations

import random

from .objpos import ObjPos
from .poslist import PosList

REGULAR_SYMBOL = "*"
SPECIAL_SYMBOL = "0"
REGULAR_COUNT = 3
SPECIAL_COUNT = 2

# Food is placed strictly inside the border of a 30 by 15 board.
_MIN_X, _MAX_X = 1, 28
_MIN_Y, _MAX_Y = 1, 13


class Food:
    """Keeps the current food items and places fresh ones away from the snake."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.positions = PosList()

    def _free_cell_count(self, occupied: set[tuple[int, int]]) -> int:
        total = (_MAX_X - _MIN_X + 1) * (_MAX_Y - _MIN_Y + 1)
        inside = {
            (x, y)
            for x, y in occupied
            if _MIN_X <= x <= _MAX_X and _MIN_Y <= y <= _MAX_Y
        }
        return total - len(inside)

    def _place(self, symbol: str, taken: set[tuple[int, int]]) -> None:
        while True:
            x = self.rng.randint(_MIN_X, _MAX_X)
            y = self.rng.randint(_MIN_Y, _MAX_Y)
            if (x, y) not in taken:
                taken.add((x, y))
                self.positions.insert_tail(ObjPos(x, y, symbol))
                return

    def generate(self, snake) -> PosList:
        """Replace all food with three regular and two special items.

        No item lands on the snake or on another item. Raises ValueError
        if the snake leaves too few free cells for all of them.
        """
        occupied = {(part.x, part.y) for part in snake}
        if self._free_cell_count(occupied) < REGULAR_COUNT + SPECIAL_COUNT:
            raise ValueError("not enough free cells to place food")
        self.positions.clear()
        taken = set(occupied)
        for _ in range(REGULAR_COUNT):
            self._place(REGULAR_SYMBOL, taken)
        for _ in range(SPECIAL_COUNT):
            self._place(SPECIAL_SYMBOL, taken)
        return self.positions