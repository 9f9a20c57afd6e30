"""A bounded, ordered list of board positions."""

from __future__ import annotations

from collections.abc import Iterator

from .objpos import ObjPos

DEFAULT_CAPACITY = 200


class PosList:
    """Ordered positions with a fixed capacity; index 0 is the head.

    Insertions into a full list are ignored and removals from an empty list
    do nothing, so a snake that reaches capacity keeps moving without growing.
    """

    def __init__(self, positions=(), capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[ObjPos] = []
        for pos in positions:
            self.insert_tail(pos)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[ObjPos]:
        return iter(list(self._items))

    def __getitem__(self, index):
        return self._items[index]

    def __repr__(self) -> str:
        return f"PosList({self._items!r}, capacity={self.capacity})"

    @property
    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def insert_head(self, pos: ObjPos) -> bool:
        """Put *pos* in front; return False if the list was full."""
        if self.is_full:
            return False
        self._items.insert(0, pos)
        return True

    def insert_tail(self, pos: ObjPos) -> bool:
        """Put *pos* at the end; return False if the list was full."""
        if self.is_full:
            return False
        self._items.append(pos)
        return True

    def remove_head(self) -> None:
        if self._items:
            del self._items[0]

    def remove_tail(self) -> None:
        if self._items:
            self._items.pop()

    def clear(self) -> None:
        self._items.clear()

    def head(self) -> ObjPos:
        """Return the first position; raise IndexError when empty."""
        if not self._items:
            raise IndexError("head of an empty PosList")
        return self._items[0]

    def tail(self) -> ObjPos:
        """Return the last position; raise IndexError when empty."""
        if not self._items:
            raise IndexError("tail of an empty PosList")
        return self._items[-1]