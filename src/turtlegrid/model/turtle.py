"""
Turtle Entity
=============
The grid turtle as held by the session: identity, integer cell and facing.

The dict form mirrors the JSON the server sends:
    {"id": 1, "uuid": "...", "x": 0, "y": 64, "z": 0, "rotation": "Forward"}
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any, Dict, List, Mapping, Tuple

from turtlegrid.model.errors import InvalidArgumentError, InvalidEncodingError
from turtlegrid.model.orientation import (
    Displacement,
    Facing,
    MoveDirection,
    compute_displacement,
    decode_facing,
    rotate_left,
    rotate_right,
)

logger = logging.getLogger(__name__)

Cell = Tuple[int, int, int]


@dataclass
class Turtle:
    """A turtle occupying one grid cell."""
    id: int
    uuid: str
    x: int = 0
    y: int = 0
    z: int = 0
    facing: Facing = Facing.FORWARD

    @property
    def position(self) -> Cell:
        return (self.x, self.y, self.z)

    def apply_displacement(self, displacement: Displacement) -> Cell:
        """Add `displacement` to the stored position and return the new cell."""
        self.x += displacement.dx
        self.y += displacement.dy
        self.z += displacement.dz
        return self.position

    def rotate_right(self) -> None:
        rotate_right(self)

    def rotate_left(self) -> None:
        rotate_left(self)

    def front_cell(self) -> Cell:
        """The cell directly in front of the turtle."""
        step = compute_displacement(self.facing, MoveDirection.FORWARD)
        return (self.x + step.dx, self.y + step.dy, self.z + step.dz)

    def inspected_cells(self) -> List[Cell]:
        """Cells examined by a surroundings scan: below, in front, above."""
        return [
            (self.x, self.y - 1, self.z),
            self.front_cell(),
            (self.x, self.y + 1, self.z),
        ]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "uuid": self.uuid,
            "x": self.x,
            "y": self.y,
            "z": self.z,
            "rotation": self.facing.value,
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> Turtle:
        """
        Build a turtle from its JSON form.

        `rotation` may be a facing name ("Left") or its numeric code (3).

        Raises:
            InvalidArgumentError: If a field is missing, has the wrong type or
                the rotation is unknown.
        """
        if not isinstance(data, Mapping):
            raise InvalidArgumentError(f"Turtle payload must be an object, got {type(data).__name__}")

        missing = [key for key in ("id", "uuid", "x", "y", "z", "rotation") if key not in data]
        if missing:
            raise InvalidArgumentError(f"Turtle payload is missing fields: {', '.join(missing)}")

        for key in ("id", "x", "y", "z"):
            value = data[key]
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidArgumentError(f"Turtle field '{key}' must be an integer, got {value!r}")

        if not isinstance(data["uuid"], str) or not data["uuid"]:
            raise InvalidArgumentError(f"Turtle field 'uuid' must be a non-empty string, got {data['uuid']!r}")

        return Turtle(
            id=data["id"],
            uuid=data["uuid"],
            x=data["x"],
            y=data["y"],
            z=data["z"],
            facing=_parse_rotation(data["rotation"]),
        )


def _parse_rotation(rotation: Any) -> Facing:
    if isinstance(rotation, str):
        try:
            return Facing(rotation)
        except ValueError:
            raise InvalidArgumentError(f"Unknown turtle rotation: {rotation!r}") from None
    try:
        return decode_facing(rotation)
    except InvalidEncodingError as e:
        logger.error(f"Rejected turtle rotation {rotation!r}: {e}")
        raise InvalidArgumentError(f"Unknown turtle rotation: {rotation!r}") from e
