"""I/O layer: input parsing, report formatting and run persistence."""

from mars_robots.io.errors import (
    InputParseError,
    InvalidInstruction,
    InvalidOrientation,
    MalformedGridLine,
    MalformedRobotBlock,
)
from mars_robots.io.parser import (
    parse_grid_line,
    parse_input,
    parse_instruction,
    parse_instructions,
    parse_orientation,
    parse_position,
)

__all__ = [
    "InputParseError",
    "InvalidInstruction",
    "InvalidOrientation",
    "MalformedGridLine",
    "MalformedRobotBlock",
    "parse_grid_line",
    "parse_input",
    "parse_instruction",
    "parse_instructions",
    "parse_orientation",
    "parse_position",
]
