"""Text input parser.

Input layout::

    5 3          <- grid upper-right corner (lower-left is always 0 0)
    1 1 E        <- robot start position
    RFRFRFRF     <- robot instructions

    3 2 N        <- next robot, separated by one or more blank lines
    FRRFLLFFRRFLL

Parsing is structural only. Whether a start position lies on the grid is the
simulator's business.
"""

from __future__ import annotations

import logging
import re

from mars_robots.config.constants import FORWARD_ALIASES, INSTRUCTION_LETTERS
from mars_robots.config.types import ParseConfig
from mars_robots.domain.model import (
    Coordinate,
    GridBounds,
    Instruction,
    Orientation,
    Position,
    RobotSpec,
    SimulationInput,
)
from mars_robots.io.errors import (
    InvalidInstruction,
    InvalidOrientation,
    MalformedGridLine,
    MalformedRobotBlock,
)

logger = logging.getLogger(__name__)

_INTEGER_TOKEN = re.compile(r"-?[0-9]+")

# (line_number, stripped_text)
_NumberedLine = tuple[int, str]


def _split_blocks(text: str) -> list[list[_NumberedLine]]:
    """Group non-blank lines into blocks separated by blank lines."""
    blocks: list[list[_NumberedLine]] = []
    current: list[_NumberedLine] = []
    for line_number, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if not line:
            if current:
                blocks.append(current)
                current = []
            continue
        current.append((line_number, line))
    if current:
        blocks.append(current)
    return blocks


def _parse_non_negative_int(token: str, line_number: int | None) -> int:
    if not (token.isascii() and token.isdigit()):
        raise MalformedGridLine(token, line_number, "expected a non-negative integer")
    return int(token)


def _parse_int(token: str, line_number: int | None) -> int:
    # int() alone would also take "+1", "1_0" and non-ASCII digits
    if _INTEGER_TOKEN.fullmatch(token) is None:
        raise MalformedRobotBlock(token, line_number, "expected an integer coordinate")
    return int(token)


def parse_grid_line(
    line: str, line_number: int | None = 1, config: ParseConfig | None = None
) -> GridBounds:
    """Parse ``"xMax yMax"`` into grid bounds anchored at the origin."""
    config = config or ParseConfig()
    tokens = line.split()
    if len(tokens) != 2:
        raise MalformedGridLine(line, line_number, "expected exactly two integers")
    x_max, y_max = (_parse_non_negative_int(token, line_number) for token in tokens)
    if config.strict:
        for token, value in zip(tokens, (x_max, y_max), strict=True):
            if value > config.max_coordinate:
                raise MalformedGridLine(
                    token, line_number, f"coordinate exceeds {config.max_coordinate}"
                )
    return GridBounds(upper_right=Coordinate(x_max, y_max))


def parse_orientation(token: str, line_number: int | None = None) -> Orientation:
    """Map a single N/E/S/W letter to its ``Orientation``."""
    try:
        return Orientation(token)
    except ValueError as exc:
        valid = "/".join(o.value for o in Orientation)
        raise InvalidOrientation(token, line_number, f"expected one of {valid}") from exc


def parse_instruction(
    char: str, line_number: int | None = None, allow_alias: bool = True
) -> Instruction:
    """Map a single instruction letter to its ``Instruction``."""
    if allow_alias and char in FORWARD_ALIASES:
        return Instruction.FORWARD
    try:
        return Instruction(char)
    except ValueError as exc:
        valid = "/".join(INSTRUCTION_LETTERS)
        raise InvalidInstruction(char, line_number, f"expected one of {valid}") from exc


def parse_instructions(
    line: str, line_number: int | None = None, config: ParseConfig | None = None
) -> tuple[Instruction, ...]:
    """Map each character of an instruction string, left to right."""
    config = config or ParseConfig()
    if config.strict and len(line) > config.max_instruction_length:
        raise InvalidInstruction(
            line,
            line_number,
            f"instruction string longer than {config.max_instruction_length}",
        )
    return tuple(
        parse_instruction(char, line_number, allow_alias=config.allow_forward_alias)
        for char in line
    )


def parse_position(line: str, line_number: int | None = None) -> Position:
    """Parse ``"x y O"`` into a start ``Position``."""
    tokens = line.split()
    if len(tokens) != 3:
        raise MalformedRobotBlock(line, line_number, "expected 'x y orientation'")
    x_raw, y_raw, orientation_raw = tokens
    return Position(
        Coordinate(_parse_int(x_raw, line_number), _parse_int(y_raw, line_number)),
        parse_orientation(orientation_raw, line_number),
    )


def _parse_robot_block(block: list[_NumberedLine], config: ParseConfig) -> RobotSpec:
    first_number, first_line = block[0]
    if len(block) < 2:
        raise MalformedRobotBlock(first_line, first_number, "missing instruction line")
    if len(block) > 2:
        extra_number, extra_line = block[2]
        raise MalformedRobotBlock(
            extra_line, extra_number, "robot blocks must have exactly two lines"
        )
    second_number, second_line = block[1]
    return RobotSpec(
        start=parse_position(first_line, first_number),
        instructions=parse_instructions(second_line, second_number, config),
    )


def parse_input(text: str, config: ParseConfig | None = None) -> SimulationInput:
    """Parse raw input text into a ``SimulationInput``.

    The first non-blank line gives the grid; it may share a block with the
    first robot (no blank line in between). Any malformed token aborts the
    whole parse.
    """
    config = config or ParseConfig()
    blocks = _split_blocks(text)
    if not blocks:
        raise MalformedGridLine("", None, "input is empty")

    grid_number, grid_line = blocks[0][0]
    bounds = parse_grid_line(grid_line, grid_number, config)

    robot_blocks = blocks[1:]
    if len(blocks[0]) > 1:
        robot_blocks = [blocks[0][1:], *robot_blocks]

    robots = tuple(_parse_robot_block(block, config) for block in robot_blocks)
    logger.debug(
        "parsed grid %dx%d with %d robots", bounds.upper_right.x, bounds.upper_right.y, len(robots)
    )
    return SimulationInput(bounds=bounds, robots=robots)
