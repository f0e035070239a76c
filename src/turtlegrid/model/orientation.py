"""
Orientation Engine
==================
Movement and rotation algebra of a grid turtle.

Coordinate system: facing Forward looks down -Z, Backward +Z, Left -X and
Right +X. Y is vertical and never changes through horizontal movement.

Functions:
    compute_displacement: (facing, move) -> Displacement
    rotate_right / rotate_left: turn a turtle one step in place
    placement_for: facing -> PlacementParameters for the renderer
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from math import pi
import logging
from typing import Dict, Tuple, TYPE_CHECKING

import numpy as np

from turtlegrid.model.errors import InvalidArgumentError, InvalidEncodingError

if TYPE_CHECKING:
    import numpy.typing as npt
    from turtlegrid.model.turtle import Turtle

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------------------
# Enums
# ------------------------------------------------------------------------------
class Facing(StrEnum):
    """Cardinal direction a turtle points toward."""
    FORWARD = "Forward"
    RIGHT = "Right"
    BACKWARD = "Backward"
    LEFT = "Left"


class MoveDirection(StrEnum):
    """A requested action: translation (Forward/Backward) or turn (Left/Right)."""
    FORWARD = "Forward"
    BACKWARD = "Backward"
    LEFT = "Left"
    RIGHT = "Right"


# Clockwise order; the index of each facing is its numeric encoding.
FACING_CYCLE: Tuple[Facing, ...] = (
    Facing.FORWARD,
    Facing.RIGHT,
    Facing.BACKWARD,
    Facing.LEFT,
)

TRANSLATIONS = frozenset({MoveDirection.FORWARD, MoveDirection.BACKWARD})
TURNS = frozenset({MoveDirection.LEFT, MoveDirection.RIGHT})


# ------------------------------------------------------------------------------
# Data Structures
# ------------------------------------------------------------------------------
@dataclass(frozen=True)
class Displacement:
    """Signed per-axis delta of a single grid step."""
    dx: int
    dy: int
    dz: int

    def __neg__(self) -> Displacement:
        return Displacement(-self.dx, -self.dy, -self.dz)

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.dx, self.dy, self.dz)

    def to_array(self) -> npt.NDArray[np.int64]:
        return np.array([self.dx, self.dy, self.dz], dtype=np.int64)


@dataclass(frozen=True)
class PlacementParameters:
    """
    Offsets and yaw that align the turtle model with its grid cell.

    start_x/start_z are added to the cell coordinates, rot_y is the rotation
    about the vertical axis in radians.
    """
    start_x: float
    start_z: float
    rot_y: float

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.start_x, self.start_z, self.rot_y)


# Unit step of a forward move for each facing; backward is the negation.
_FORWARD_STEP: Dict[Facing, Displacement] = {
    Facing.FORWARD: Displacement(0, 0, -1),
    Facing.BACKWARD: Displacement(0, 0, 1),
    Facing.LEFT: Displacement(-1, 0, 0),
    Facing.RIGHT: Displacement(1, 0, 0),
}

_PLACEMENTS: Dict[Facing, PlacementParameters] = {
    Facing.FORWARD: PlacementParameters(start_x=0.5, start_z=-0.5, rot_y=-pi / 2),
    Facing.BACKWARD: PlacementParameters(start_x=-0.5, start_z=0.5, rot_y=pi / 2),
    Facing.LEFT: PlacementParameters(start_x=-0.5, start_z=-0.5, rot_y=0.0),
    Facing.RIGHT: PlacementParameters(start_x=0.5, start_z=0.5, rot_y=pi),
}


# ------------------------------------------------------------------------------
# Encoding
# ------------------------------------------------------------------------------
def _require_facing(facing: Facing) -> None:
    # MoveDirection members compare equal to Facing members with the same name,
    # so the type has to be checked explicitly.
    if not isinstance(facing, Facing):
        raise TypeError(f"Expected a Facing, got {facing!r}")


def encode_facing(facing: Facing) -> int:
    """Return the numeric code of a facing (Forward=0, Right=1, Backward=2, Left=3)."""
    _require_facing(facing)
    return FACING_CYCLE.index(facing)


def decode_facing(code: int) -> Facing:
    """
    Turn a numeric code back into a Facing.

    Raises:
        InvalidEncodingError: If the code is not one of 0, 1, 2, 3.
    """
    if isinstance(code, bool) or not isinstance(code, (int, np.integer)):
        raise InvalidEncodingError(f"Facing code must be an integer, got {code!r}")
    if not 0 <= code < len(FACING_CYCLE):
        raise InvalidEncodingError(f"Facing code {code} is outside 0..{len(FACING_CYCLE) - 1}")
    return FACING_CYCLE[int(code)]


# ------------------------------------------------------------------------------
# Operations
# ------------------------------------------------------------------------------
def compute_displacement(facing: Facing, move: MoveDirection) -> Displacement:
    """
    Displacement of a one-cell translation relative to the current facing.

    Args:
        facing: Current facing of the turtle.
        move: MoveDirection.FORWARD or MoveDirection.BACKWARD.

    Raises:
        InvalidArgumentError: If `move` is a turn or not a MoveDirection at all.
    """
    _require_facing(facing)
    if not isinstance(move, MoveDirection) or move not in TRANSLATIONS:
        raise InvalidArgumentError(
            f"Only Forward/Backward can be translated, got {move!r}"
        )

    step = _FORWARD_STEP[facing]
    if move == MoveDirection.BACKWARD:
        step = -step
    return step


def turned_right(facing: Facing) -> Facing:
    """Facing after one clockwise turn."""
    return decode_facing((encode_facing(facing) + 1) % len(FACING_CYCLE))


def turned_left(facing: Facing) -> Facing:
    """Facing after one counter-clockwise turn."""
    return decode_facing((encode_facing(facing) - 1) % len(FACING_CYCLE))


def rotate_right(turtle: Turtle) -> None:
    """Turn the turtle one step clockwise, in place."""
    previous = turtle.facing
    turtle.facing = turned_right(previous)
    logger.debug(f"Turtle {turtle.uuid} turned right: {previous} -> {turtle.facing}")


def rotate_left(turtle: Turtle) -> None:
    """Turn the turtle one step counter-clockwise, in place."""
    previous = turtle.facing
    turtle.facing = turned_left(previous)
    logger.debug(f"Turtle {turtle.uuid} turned left: {previous} -> {turtle.facing}")


def placement_for(facing: Facing) -> PlacementParameters:
    """Model offsets and yaw for a turtle facing `facing`."""
    _require_facing(facing)
    return _PLACEMENTS[facing]
