import dataclasses

import pytest

from spacetrash.utils import Direction, Polar, Position2D, UserInput, Vector2D


def test_direction_lookup_by_value():
    assert Direction(0) is Direction.CENTRE
    assert Direction(5) is Direction.S
    assert Direction(8) is Direction.NW


def test_directions_go_clockwise_from_north():
    names = [Direction(value).name for value in range(9)]
    assert names == ["CENTRE", "N", "NE", "E", "SE", "S", "SW", "W", "NW"]


def test_user_input_holds_fields():
    user_input = UserInput(Direction.E, 0.75)
    assert user_input.d is Direction.E
    assert user_input.mag == 0.75


def test_vector_round_trip_through_tuple():
    vector = Vector2D(1.5, -2.0)
    assert Vector2D(*dataclasses.astuple(vector)) == vector


def test_polar_is_immutable():
    polar = Polar(1.0, 90.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        polar.mag = 2.0  # type: ignore[misc]
    assert polar.mag == 1.0
    assert polar.angle == 90.0


def test_position_replace_keeps_other_axis():
    pos = Position2D(3, 4)
    moved = dataclasses.replace(pos, x=10)
    assert moved == Position2D(10, 4)
    assert pos == Position2D(3, 4)