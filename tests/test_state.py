from __future__ import annotations

import pytest

from turtlegrid.app.state import TurtleStore
from turtlegrid.model.commands import CANNOT_MOVE_REASON
from turtlegrid.model.errors import TurtleResponseError
from turtlegrid.model.orientation import Facing, MoveDirection


@pytest.fixture
def store(qapp, turtle):
    return TurtleStore(turtle)


@pytest.fixture
def changes(store):
    received = []
    store.turtle_changed.connect(lambda t: received.append(t))
    return received


def test_set_turtle_emits(qapp, turtle):
    store = TurtleStore()
    received = []
    store.turtle_changed.connect(lambda t: received.append(t))

    assert store.turtle is None
    store.set_turtle(turtle)
    assert store.turtle is turtle
    assert received == [turtle]

    store.set_turtle(None)
    assert received[-1] is None


def test_rotation_is_visible_to_subscribers(store, changes, turtle):
    store.rotate_right()
    assert changes[-1] is turtle
    assert turtle.facing == Facing.RIGHT

    store.rotate_right()
    assert turtle.facing == Facing.BACKWARD

    store.rotate_left()
    assert turtle.facing == Facing.RIGHT
    assert len(changes) == 3


def test_move_applies_displacement(store, changes, turtle):
    store.move(MoveDirection.FORWARD)
    assert turtle.position == (0, 0, -1)
    assert changes == [turtle]


def test_apply_response_success(store, changes, turtle):
    result = store.apply_response(MoveDirection.BACKWARD, "true")
    assert result.ok
    assert turtle.position == (0, 0, 1)
    assert len(changes) == 1


def test_apply_response_failure_emits_move_failed(store, changes, turtle):
    failures = []
    store.move_failed.connect(lambda reason: failures.append(reason))

    result = store.apply_response(MoveDirection.FORWARD, "false")

    assert not result.ok
    assert failures == [CANNOT_MOVE_REASON]
    assert changes == []
    assert turtle.position == (0, 0, 0)


def test_apply_response_garbage_propagates(store, changes):
    with pytest.raises(TurtleResponseError):
        store.apply_response(MoveDirection.FORWARD, "maybe")
    assert changes == []


def test_operations_without_turtle_raise(qapp):
    store = TurtleStore()
    with pytest.raises(RuntimeError):
        store.rotate_right()
    with pytest.raises(RuntimeError):
        store.move(MoveDirection.FORWARD)
    with pytest.raises(RuntimeError):
        store.apply_response(MoveDirection.FORWARD, "true")
