"""Domain layer: grid model and single-instruction transitions."""

from mars_robots.domain.model import (
    Coordinate,
    GridBounds,
    Instruction,
    Orientation,
    Position,
    RobotSpec,
    SimulationInput,
)
from mars_robots.domain.step import apply_instruction, move_forward, rotate

__all__ = [
    "Coordinate",
    "GridBounds",
    "Instruction",
    "Orientation",
    "Position",
    "RobotSpec",
    "SimulationInput",
    "apply_instruction",
    "move_forward",
    "rotate",
]
