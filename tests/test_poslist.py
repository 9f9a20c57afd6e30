import pytest

from snakeboard.objpos import ObjPos
from snakeboard.poslist import DEFAULT_CAPACITY, PosList


def _pos(i):
    return ObjPos(i, i + 1, "*")


def test_new_list_is_empty_with_source_capacity():
    lst = PosList()
    assert len(lst) == 0
    assert lst.capacity == 200 == DEFAULT_CAPACITY


def test_insert_head_puts_item_first():
    lst = PosList()
    lst.insert_head(_pos(1))
    lst.insert_head(_pos(2))
    assert list(lst) == [_pos(2), _pos(1)]
    assert lst.head() == _pos(2)
    assert lst.tail() == _pos(1)


def test_insert_tail_puts_item_last():
    lst = PosList()
    lst.insert_tail(_pos(1))
    lst.insert_tail(_pos(2))
    assert [lst[0], lst[1]] == [_pos(1), _pos(2)]
    assert lst[-1] == lst.tail()


def test_remove_head_and_tail():
    lst = PosList([_pos(i) for i in range(4)])
    lst.remove_head()
    lst.remove_tail()
    assert list(lst) == [_pos(1), _pos(2)]


def test_removals_on_empty_list_do_nothing():
    lst = PosList()
    lst.remove_head()
    lst.remove_tail()
    assert len(lst) == 0


def test_head_and_tail_of_empty_list_raise():
    lst = PosList()
    with pytest.raises(IndexError):
        lst.head()
    with pytest.raises(IndexError):
        lst.tail()


def test_full_list_ignores_inserts():
    lst = PosList([_pos(i) for i in range(3)], capacity=3)
    assert lst.is_full
    assert lst.insert_head(_pos(9)) is False
    assert lst.insert_tail(_pos(9)) is False
    assert list(lst) == [_pos(0), _pos(1), _pos(2)]


def test_insert_reports_success():
    lst = PosList(capacity=1)
    assert lst.insert_tail(_pos(0)) is True
    assert len(lst) == 1


def test_clear_empties_list():
    lst = PosList([_pos(i) for i in range(5)])
    lst.clear()
    assert len(lst) == 0
    assert list(lst) == []


def test_move_step_keeps_length():
    lst = PosList([_pos(i) for i in range(3)])
    lst.insert_head(_pos(7))
    lst.remove_tail()
    assert len(lst) == 3
    assert list(lst) == [_pos(7), _pos(0), _pos(1)]


def test_iteration_snapshot_survives_mutation():
    lst = PosList([_pos(0), _pos(1)])
    seen = []
    for pos in lst:
        seen.append(pos)
        lst.remove_tail()
    assert seen == [_pos(0), _pos(1)]


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        PosList(capacity=-1)