"""Pure single-instruction transitions.

Nothing in this module knows about grid bounds or scents; the simulator
decides whether a produced position is acceptable.
"""

from __future__ import annotations

from mars_robots.domain.model import Coordinate, Instruction, Orientation, Position

# Orientation -> (dx, dy) for one forward move
FORWARD_DELTAS: dict[Orientation, tuple[int, int]] = {
    Orientation.NORTH: (0, 1),
    Orientation.EAST: (1, 0),
    Orientation.SOUTH: (0, -1),
    Orientation.WEST: (-1, 0),
}

# Instruction -> quarter turns clockwise
TURN_STEPS: dict[Instruction, int] = {
    Instruction.LEFT: -1,
    Instruction.RIGHT: 1,
}


def rotate(position: Position, instruction: Instruction) -> Position:
    """Turn 90 degrees in place; the coordinate is never touched."""
    if instruction not in TURN_STEPS:
        raise AssertionError(f"not a turn instruction: {instruction!r}")
    return Position(position.coordinate, position.orientation.turned(TURN_STEPS[instruction]))


def move_forward(position: Position) -> Position:
    """Advance one grid point along the current heading."""
    if position.orientation not in FORWARD_DELTAS:
        raise AssertionError(f"unknown orientation: {position.orientation!r}")
    dx, dy = FORWARD_DELTAS[position.orientation]
    return Position(
        Coordinate(position.coordinate.x + dx, position.coordinate.y + dy),
        position.orientation,
    )


def apply_instruction(position: Position, instruction: Instruction) -> Position:
    """Return the position reached by applying ``instruction`` to ``position``.

    Total over the three legal instructions. Anything else means a caller
    bypassed the parser and is raised as ``AssertionError``.
    """
    if instruction is Instruction.FORWARD:
        return move_forward(position)
    if instruction is Instruction.LEFT or instruction is Instruction.RIGHT:
        return rotate(position, instruction)
    raise AssertionError(f"unhandled instruction: {instruction!r}")
