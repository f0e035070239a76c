"""
Error Taxonomy
==============
Typed errors raised by the model layer.

Callers catch the specific subclasses; everything derives from
TurtleGridError so a collaborator can catch the whole family at its boundary.
"""
from __future__ import annotations

from typing import Optional

__all__ = [
    "TurtleGridError",
    "InvalidArgumentError",
    "InvalidEncodingError",
    "TurtleResponseError",
    "format_error",
]


class TurtleGridError(Exception):
    """Base class for all typed errors in turtlegrid."""
    pass


class InvalidArgumentError(TurtleGridError):
    """A request outside the accepted set (e.g. a turn passed as a translation)."""
    pass


class InvalidEncodingError(TurtleGridError):
    """A numeric facing code outside {0, 1, 2, 3}."""
    pass


class TurtleResponseError(TurtleGridError):
    """The remote turtle answered with something other than 'true' or 'false'."""

    def __init__(self, response: str, message: Optional[str] = None) -> None:
        self.response = response
        super().__init__(message or f"Invalid turtle response ({response})")


def format_error(e: BaseException) -> str:
    """Return a short message like 'InvalidArgumentError: detail'."""
    name = e.__class__.__name__
    msg = str(e).strip()
    return f"{name}: {msg}" if msg else name
