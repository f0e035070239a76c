from __future__ import annotations

import pytest

from turtlegrid.model.errors import InvalidArgumentError
from turtlegrid.model.orientation import Displacement, Facing
from turtlegrid.model.turtle import Turtle


def test_position_and_displacement(turtle):
    assert turtle.position == (0, 0, 0)
    assert turtle.apply_displacement(Displacement(1, 0, 0)) == (1, 0, 0)
    assert turtle.apply_displacement(Displacement(0, 0, -1)) == (1, 0, -1)
    assert (turtle.x, turtle.y, turtle.z) == (1, 0, -1)


def test_turtle_rotation_methods(turtle):
    turtle.rotate_right()
    assert turtle.facing == Facing.RIGHT
    turtle.rotate_right()
    assert turtle.facing == Facing.BACKWARD
    turtle.rotate_left()
    turtle.rotate_left()
    assert turtle.facing == Facing.FORWARD


@pytest.mark.parametrize(
    "facing, front",
    [
        (Facing.FORWARD, (5, 64, 9)),
        (Facing.BACKWARD, (5, 64, 11)),
        (Facing.LEFT, (4, 64, 10)),
        (Facing.RIGHT, (6, 64, 10)),
    ],
)
def test_front_cell(facing, front):
    turtle = Turtle(id=2, uuid="b", x=5, y=64, z=10, facing=facing)
    assert turtle.front_cell() == front


def test_inspected_cells_are_below_front_above():
    turtle = Turtle(id=2, uuid="b", x=5, y=64, z=10, facing=Facing.RIGHT)
    assert turtle.inspected_cells() == [(5, 63, 10), (6, 64, 10), (5, 65, 10)]


def test_dict_roundtrip_keeps_rotation_name():
    turtle = Turtle(id=3, uuid="c", x=-4, y=70, z=12, facing=Facing.LEFT)
    data = turtle.to_dict()
    assert data == {"id": 3, "uuid": "c", "x": -4, "y": 70, "z": 12, "rotation": "Left"}
    assert Turtle.from_dict(data) == turtle


def test_from_dict_accepts_numeric_rotation():
    data = {"id": 3, "uuid": "c", "x": 0, "y": 0, "z": 0, "rotation": 2}
    assert Turtle.from_dict(data).facing == Facing.BACKWARD


@pytest.mark.parametrize("rotation", ["North", "forward", 4, -1, None])
def test_from_dict_rejects_unknown_rotation(rotation):
    data = {"id": 3, "uuid": "c", "x": 0, "y": 0, "z": 0, "rotation": rotation}
    with pytest.raises(InvalidArgumentError):
        Turtle.from_dict(data)


def test_from_dict_reports_missing_fields():
    with pytest.raises(InvalidArgumentError, match="rotation"):
        Turtle.from_dict({"id": 3, "uuid": "c", "x": 0, "y": 0, "z": 0})


@pytest.mark.parametrize(
    "field, value",
    [("x", 1.5), ("y", "64"), ("id", True), ("uuid", ""), ("uuid", 12)],
)
def test_from_dict_rejects_ill_typed_fields(field, value):
    data = {"id": 3, "uuid": "c", "x": 0, "y": 0, "z": 0, "rotation": "Forward"}
    data[field] = value
    with pytest.raises(InvalidArgumentError):
        Turtle.from_dict(data)


@pytest.mark.parametrize("payload", [[1, "c", 0, 0, 0, "Forward"], "Forward", None, 42])
def test_from_dict_rejects_non_object_payloads(payload):
    with pytest.raises(InvalidArgumentError):
        Turtle.from_dict(payload)
