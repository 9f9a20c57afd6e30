import dataclasses

import pytest

from snakeboard.objpos import ObjPos


def test_default_position_is_origin_without_symbol():
    pos = ObjPos()
    assert (pos.x, pos.y, pos.symbol) == (0, 0, "")


def test_same_cell_different_symbol_is_equal_position():
    assert ObjPos(3, 4, "@").is_pos_equal(ObjPos(3, 4, "*"))


@pytest.mark.parametrize("other", [ObjPos(3, 5, "@"), ObjPos(2, 4, "@"), ObjPos(0, 0, "@")])
def test_different_cell_is_not_equal_position(other):
    assert not ObjPos(3, 4, "@").is_pos_equal(other)


def test_symbol_if_pos_equal_returns_own_symbol():
    assert ObjPos(1, 2, "*").symbol_if_pos_equal(ObjPos(1, 2, "@")) == "*"


def test_symbol_if_pos_equal_returns_empty_when_apart():
    assert ObjPos(1, 2, "*").symbol_if_pos_equal(ObjPos(2, 1, "*")) == ""


def test_positions_are_values():
    pos = ObjPos(5, 6, "0")
    with pytest.raises(dataclasses.FrozenInstanceError):
        pos.x = 7  # type: ignore[misc]
    moved = dataclasses.replace(pos, x=7)
    assert (moved.x, moved.y, moved.symbol) == (7, 6, "0")
    assert pos.x == 5