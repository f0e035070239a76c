from __future__ import annotations

import logging
from PySide6.QtCore import QObject, Signal

from turtlegrid.model.commands import MoveResult, apply_move, interpret_move_response
from turtlegrid.model.orientation import MoveDirection

from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from turtlegrid.model.turtle import Turtle

logger = logging.getLogger(__name__)


class TurtleStore(QObject):
    """Holds the session's turtle and notifies subscribers after every change."""
    turtle_changed = Signal(object)
    move_failed = Signal(str)

    def __init__(self, turtle: Optional[Turtle] = None) -> None:
        super().__init__()
        self._turtle = turtle

    @property
    def turtle(self) -> Optional[Turtle]:
        return self._turtle

    def set_turtle(self, turtle: Optional[Turtle]) -> None:
        self._turtle = turtle
        if turtle is not None:
            logger.info(f"Selected turtle {turtle.uuid} at {turtle.position} facing {turtle.facing}")
        self.turtle_changed.emit(turtle)

    def _require_turtle(self) -> Turtle:
        if self._turtle is None:
            raise RuntimeError("No turtle selected.")
        return self._turtle

    def rotate_right(self) -> None:
        turtle = self._require_turtle()
        turtle.rotate_right()
        self.turtle_changed.emit(turtle)

    def rotate_left(self) -> None:
        turtle = self._require_turtle()
        turtle.rotate_left()
        self.turtle_changed.emit(turtle)

    def move(self, direction: MoveDirection) -> None:
        """Apply a move locally, as if the remote turtle had confirmed it."""
        self.apply_result(direction, MoveResult.success())

    def apply_response(self, direction: MoveDirection, response: str) -> MoveResult:
        """Interpret the raw answer of a remote move and mirror it locally."""
        self._require_turtle()
        return self.apply_result(direction, interpret_move_response(response))

    def apply_result(self, direction: MoveDirection, result: MoveResult) -> MoveResult:
        turtle = self._require_turtle()
        apply_move(turtle, direction, result)
        if result.ok:
            self.turtle_changed.emit(turtle)
        else:
            self.move_failed.emit(result.reason or "")
        return result
