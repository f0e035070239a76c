"""
Remote Command Protocol
=======================
Lua payloads sent to a remote turtle and interpretation of its answers.

The transport itself (HTTP/WebSocket, timeouts) lives outside this package;
it sends `command_for(move)`, hands the raw text answer to
`interpret_move_response` and applies the outcome with `apply_move`.
Scans pair the three inspect answers with `Turtle.inspected_cells()`; digging
clears the cell in front of the turtle. Nothing here retries.
"""
from __future__ import annotations

from dataclasses import dataclass
import json
import logging
from typing import Any, Dict, List, Optional, Sequence

from turtlegrid.model.errors import InvalidArgumentError, TurtleResponseError
from turtlegrid.model.orientation import MoveDirection, TRANSLATIONS, compute_displacement
from turtlegrid.model.turtle import Cell, Turtle

logger = logging.getLogger(__name__)

MOVE_COMMANDS: Dict[MoveDirection, str] = {
    MoveDirection.FORWARD: "local a, b = turtle.forward() return a",
    MoveDirection.BACKWARD: "local a, b = turtle.back() return a",
    MoveDirection.RIGHT: "local a, b = turtle.turnRight() return a",
    MoveDirection.LEFT: "local a, b = turtle.turnLeft() return a",
}

INSPECT_DOWN_COMMAND = "local has_block, data = turtle.inspectDown() return textutils.serialiseJSON(data)"
INSPECT_FORWARD_COMMAND = "local has_block, data = turtle.inspect() return textutils.serialiseJSON(data)"
INSPECT_UP_COMMAND = "local has_block, data = turtle.inspectUp() return textutils.serialiseJSON(data)"

# Same order as Turtle.inspected_cells()
INSPECT_COMMANDS = (INSPECT_DOWN_COMMAND, INSPECT_FORWARD_COMMAND, INSPECT_UP_COMMAND)

# What serialiseJSON gives for the message of an empty inspect
NO_BLOCK_RESPONSE = "\"No block to inspect\""

DIG_COMMAND = "return turtle.dig()"

CANNOT_MOVE_REASON = "Cannot move turtle"


@dataclass(frozen=True)
class MoveResult:
    """Outcome of a remote move: success, or failure with a textual reason."""
    ok: bool
    reason: Optional[str] = None

    @staticmethod
    def success() -> MoveResult:
        return MoveResult(ok=True)

    @staticmethod
    def failure(reason: str) -> MoveResult:
        return MoveResult(ok=False, reason=reason)


@dataclass(frozen=True)
class BlockObservation:
    """What an inspect saw in one cell. `name` is None for an empty cell."""
    cell: Cell
    name: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return self.name is None


def _require_text(response: Any) -> str:
    # Transports hand over None when the socket closed mid-request
    if not isinstance(response, str):
        raise TurtleResponseError(repr(response))
    return response.strip()


def command_for(move: MoveDirection) -> str:
    """Lua payload that performs `move` on the remote turtle."""
    if not isinstance(move, MoveDirection):
        raise InvalidArgumentError(f"Expected a MoveDirection, got {move!r}")
    return MOVE_COMMANDS[move]


def interpret_move_response(response: str) -> MoveResult:
    """
    Translate the raw answer of a move command.

    Raises:
        TurtleResponseError: If the answer is neither "true" nor "false".
    """
    match _require_text(response):
        case "true":
            return MoveResult.success()
        case "false":
            return MoveResult.failure(CANNOT_MOVE_REASON)
        case _:
            raise TurtleResponseError(response)


def interpret_inspect_response(response: str) -> Optional[str]:
    """
    Block name reported by an inspect command, or None if the cell is empty.

    Raises:
        TurtleResponseError: If the answer is not the empty-cell message or a
            JSON object with a string `name`.
    """
    text = _require_text(response)
    if text == NO_BLOCK_RESPONSE:
        return None

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise TurtleResponseError(response, f"Inspect response is not valid JSON ({response})") from e

    name = data.get("name") if isinstance(data, dict) else None
    if not isinstance(name, str) or not name:
        raise TurtleResponseError(response, f"Inspect response has no block name ({response})")
    return name


def scan_surroundings(turtle: Turtle, responses: Sequence[str]) -> List[BlockObservation]:
    """
    Pair the answers of INSPECT_COMMANDS with the cells they looked at.

    `responses` must be in the order the commands were sent: down, forward, up.
    """
    if len(responses) != len(INSPECT_COMMANDS):
        raise InvalidArgumentError(
            f"Expected {len(INSPECT_COMMANDS)} inspect responses, got {len(responses)}"
        )

    observations = [
        BlockObservation(cell=cell, name=interpret_inspect_response(response))
        for cell, response in zip(turtle.inspected_cells(), responses)
    ]
    logger.debug(f"Turtle {turtle.uuid} scanned {observations}")
    return observations


def interpret_dig_response(turtle: Turtle, response: str) -> Optional[Cell]:
    """
    Cell cleared by DIG_COMMAND, or None if there was nothing to dig.

    Raises:
        TurtleResponseError: If the answer is neither "true" nor "false".
    """
    match _require_text(response):
        case "true":
            cell = turtle.front_cell()
            logger.debug(f"Turtle {turtle.uuid} dug {cell}")
            return cell
        case "false":
            return None
        case _:
            raise TurtleResponseError(response, f"Unexpected dig response ({response})")


def apply_move(turtle: Turtle, move: MoveDirection, result: MoveResult) -> MoveResult:
    """
    Mirror a remote move on the local turtle.

    Turns rotate the facing, translations shift the position. A failed result
    leaves the turtle untouched.
    """
    if not isinstance(move, MoveDirection):
        raise InvalidArgumentError(f"Expected a MoveDirection, got {move!r}")

    if not result.ok:
        logger.warning(f"Turtle {turtle.uuid} did not move {move}: {result.reason}")
        return result

    if move in TRANSLATIONS:
        position = turtle.apply_displacement(compute_displacement(turtle.facing, move))
        logger.debug(f"Turtle {turtle.uuid} moved {move} to {position}")
    elif move == MoveDirection.RIGHT:
        turtle.rotate_right()
    else:
        turtle.rotate_left()
    return result
