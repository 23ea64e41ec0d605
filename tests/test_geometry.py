import dataclasses

import pytest

from lifegrid.geometry import Point


def test_points_with_same_coordinates_are_equal_and_hash_alike():
    point = Point(4, 7)
    assert (point.x, point.y) == (4, 7)
    assert point == Point(4, 7)
    assert len({Point(4, 7), Point(4, 7)}) == 1


def test_points_with_different_coordinates_differ():
    assert Point(4, 7) != Point(7, 4)


def test_offset_moves_point():
    assert Point(2, 3).offset(1, -1) == Point(3, 2)


@pytest.mark.parametrize("dx, dy", [(0, 0), (1, 1), (-3, 5), (9, -2)])
def test_offset_round_trip(dx, dy):
    origin = Point(5, 6)
    assert origin.offset(dx, dy).offset(-dx, -dy) == origin


def test_offset_leaves_original_untouched():
    origin = Point(1, 1)
    moved = origin.offset(2, 2)
    assert origin.x == 1 and origin.y == 1
    assert moved.x == origin.x + 2


def test_point_is_immutable():
    point = Point(0, 0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        point.x = 3
    assert point.x == 0
    assert point == Point(0, 0)