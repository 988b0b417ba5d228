from typing import Tuple

import pytest

from maze_chase.components import Position
from maze_chase.directions import DIRECTION_PRIORITY, Direction


@pytest.mark.parametrize(
    "direction, expected",
    [
        (Direction.UP, Direction.DOWN),
        (Direction.DOWN, Direction.UP),
        (Direction.LEFT, Direction.RIGHT),
        (Direction.RIGHT, Direction.LEFT),
    ],
)
def test_opposite(direction: Direction, expected: Direction) -> None:
    assert direction.opposite() == expected
    assert direction.opposite().opposite() == direction


@pytest.mark.parametrize(
    "direction, expected",
    [
        (Direction.UP, (2, 1)),
        (Direction.DOWN, (2, 3)),
        (Direction.LEFT, (1, 2)),
        (Direction.RIGHT, (3, 2)),
    ],
)
def test_translate(direction: Direction, expected: Tuple[int, int]) -> None:
    assert Position(2, 2).translate(direction) == Position(*expected)


def test_translate_then_opposite_returns_home() -> None:
    start = Position(4, 7)
    for direction in Direction:
        assert start.translate(direction).translate(direction.opposite()) == start


def test_distance_is_squared_euclidean() -> None:
    assert Position(4, 3).distance(Position(3, 0)) == 10
    assert Position(3, 4).distance(Position(3, 0)) == 16
    assert Position(1, 1).distance(Position(1, 1)) == 0
    assert Position(0, 0).distance(Position(2, 5)) == Position(2, 5).distance(
        Position(0, 0)
    )


def test_positions_hash_by_coordinates() -> None:
    assert Position(1, 2) == Position(1, 2)
    assert len({Position(1, 2), Position(1, 2), Position(2, 1)}) == 2


def test_adjacency() -> None:
    center = Position(3, 3)
    assert center.is_adjacent_or_equal(center)
    assert center.is_adjacent_or_equal(Position(3, 4))
    assert not center.is_adjacent_or_equal(Position(4, 4))
    assert not center.is_adjacent_or_equal(Position(3, 5))


def test_priority_order_is_up_left_down_right() -> None:
    assert DIRECTION_PRIORITY == (
        Direction.UP,
        Direction.LEFT,
        Direction.DOWN,
        Direction.RIGHT,
    )
    assert set(DIRECTION_PRIORITY) == set(Direction)
