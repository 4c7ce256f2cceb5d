"""Typed domain model for grid coordinates, robot poses and run inputs.

Every value here is immutable: applying an instruction produces a new
``Position`` rather than mutating the old one, and a ``SimulationInput`` can
be re-run any number of times with identical results.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from mars_robots.config.constants import GRID_ORIGIN, ORIENTATION_ORDER


class Orientation(Enum):
    """Cardinal heading of a robot."""

    NORTH = "N"
    EAST = "E"
    SOUTH = "S"
    WEST = "W"

    def turned(self, steps: int) -> Orientation:
        """Return the heading ``steps`` quarter turns clockwise (negative = anticlockwise)."""
        idx = ORIENTATION_ORDER.index(self.value)
        return Orientation(ORIENTATION_ORDER[(idx + steps) % len(ORIENTATION_ORDER)])


class Instruction(Enum):
    """Single robot command."""

    LEFT = "L"
    RIGHT = "R"
    FORWARD = "F"


@dataclass(frozen=True)
class Coordinate:
    """Integer grid point. Range is checked by ``GridBounds``, not here."""

    x: int
    y: int

    def __str__(self) -> str:
        return f"{self.x} {self.y}"


@dataclass(frozen=True)
class Position:
    """A coordinate paired with a heading."""

    coordinate: Coordinate
    orientation: Orientation

    @property
    def x(self) -> int:
        return self.coordinate.x

    @property
    def y(self) -> int:
        return self.coordinate.y

    def __str__(self) -> str:
        return f"{self.coordinate} {self.orientation.value}"


@dataclass(frozen=True)
class GridBounds:
    """Inclusive rectangle ``[lower_left.x, upper_right.x] x [lower_left.y, upper_right.y]``."""

    upper_right: Coordinate
    lower_left: Coordinate = Coordinate(*GRID_ORIGIN)

    @property
    def width(self) -> int:
        """Number of grid columns."""
        return self.upper_right.x - self.lower_left.x + 1

    @property
    def height(self) -> int:
        """Number of grid rows."""
        return self.upper_right.y - self.lower_left.y + 1

    def contains(self, coordinate: Coordinate) -> bool:
        """True when ``coordinate`` lies on the grid (both corners inclusive)."""
        return (
            self.lower_left.x <= coordinate.x <= self.upper_right.x
            and self.lower_left.y <= coordinate.y <= self.upper_right.y
        )


@dataclass(frozen=True)
class RobotSpec:
    """Start pose plus the ordered instructions for one robot."""

    start: Position
    instructions: tuple[Instruction, ...] = ()


@dataclass(frozen=True)
class SimulationInput:
    """Grid plus robots in the order they are deployed.

    Order matters: a robot can only benefit from scents left by robots
    listed before it.
    """

    bounds: GridBounds
    robots: tuple[RobotSpec, ...] = ()
