"""Robots on a bounded grid with scent memory.

Typical use::

    from mars_robots import parse_input, run_simulation, format_report

    run = run_simulation(parse_input(text))
    print(format_report(run))
"""

from mars_robots.domain.model import (
    Coordinate,
    GridBounds,
    Instruction,
    Orientation,
    Position,
    RobotSpec,
    SimulationInput,
)
from mars_robots.domain.step import apply_instruction
from mars_robots.io.errors import (
    InputParseError,
    InvalidInstruction,
    InvalidOrientation,
    MalformedGridLine,
    MalformedRobotBlock,
)
from mars_robots.io.parser import parse_input
from mars_robots.io.report import format_outcome, format_report
from mars_robots.simulation.engine import (
    RobotOutcome,
    ScentSet,
    SimulationRun,
    run_robot,
    run_simulation,
)

__all__ = [
    "Coordinate",
    "GridBounds",
    "InputParseError",
    "Instruction",
    "InvalidInstruction",
    "InvalidOrientation",
    "MalformedGridLine",
    "MalformedRobotBlock",
    "Orientation",
    "Position",
    "RobotOutcome",
    "RobotSpec",
    "ScentSet",
    "SimulationInput",
    "SimulationRun",
    "apply_instruction",
    "format_outcome",
    "format_report",
    "parse_input",
    "run_robot",
    "run_simulation",
]
