"""The snake controlled by the player."""

from __future__ import annotations

from enum import Enum, IntEnum

from .food import REGULAR_SYMBOL, SPECIAL_SYMBOL
from .objpos import ObjPos
from .poslist import PosList

ESCAPE = "\x1b"


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    STOP = "stop"


class FoodKind(IntEnum):
    NONE = 0
    REGULAR = 1
    SPECIAL = 2


_KEYS = {
    "w": Direction.UP,
    "a": Direction.LEFT,
    "s": Direction.DOWN,
    "d": Direction.RIGHT,
}

_OPPOSITE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

_STEP = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.STOP: (0, 0),
}


class Player:
    """A snake whose head is the first element of its body."""

    def __init__(self, mechs, food) -> None:
        self.mechs = mechs
        self.food = food
        self.direction = Direction.STOP
        self.body = PosList([ObjPos(mechs.board_x // 2, mechs.board_y // 2, "@")])

    def update_direction(self) -> Direction:
        """Turn according to the current key; ESC ends the game."""
        key = self.mechs.read_input()
        if key == ESCAPE:
            self.mechs.set_exit()
        elif key in _KEYS:
            wanted = _KEYS[key]
            if self.direction != _OPPOSITE[wanted]:
                self.direction = wanted
        return self.direction

    def _wrap(self, value: int, size: int) -> int:
        if value == 0:
            return size - 2
        if value == size - 1:
            return 1
        return value

    def move(self) -> ObjPos:
        """Advance one cell, wrapping through the border; return the new head."""
        head = self.body.head()
        dx, dy = _STEP[self.direction]
        new_head = ObjPos(
            self._wrap(head.x + dx, self.mechs.board_x),
            self._wrap(head.y + dy, self.mechs.board_y),
            head.symbol,
        )
        self.body.insert_head(new_head)
        self.body.remove_tail()
        return self.body.head()

    def check_food_consumption(self) -> FoodKind:
        """Return which kind of food, if any, lies under the head."""
        head = self.body.head()
        for item in self.food.positions:
            if item.is_pos_equal(head):
                if item.symbol == REGULAR_SYMBOL:
                    return FoodKind.REGULAR
                if item.symbol == SPECIAL_SYMBOL:
                    return FoodKind.SPECIAL
        return FoodKind.NONE

    def check_self_collision(self) -> bool:
        """Return True if the head overlaps the body beyond its first segment."""
        head = self.body.head()
        return any(part.is_pos_equal(head) for part in list(self.body)[2:])

    def grow(self) -> None:
        """Lengthen the snake by one by doubling its head."""
        self.body.insert_head(self.body.head())