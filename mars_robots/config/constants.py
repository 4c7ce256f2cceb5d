"""Centralized domain constants for robot simulations.

All literals shared by the parser, simulator, report formatter and renderer
are defined here. Consuming modules should import from this module rather
than defining their own inline literals.
"""

from __future__ import annotations

ORIENTATION_ORDER: tuple[str, ...] = ("N", "E", "S", "W")
"""Cardinal orientation letters in clockwise order; turning right advances one step."""

INSTRUCTION_LETTERS: tuple[str, ...] = ("L", "R", "F")
"""Instruction letters accepted by the parser: turn left, turn right, move forward."""

FORWARD_ALIASES: tuple[str, ...] = ("M",)
"""Extra letters read as move-forward (the classic rover variant uses ``M``)."""

LOST_SUFFIX = "LOST"
"""Marker appended to a report line when the robot fell off the grid."""

GRID_ORIGIN: tuple[int, int] = (0, 0)
"""Lower-left grid corner. Always the origin."""

MAX_GRID_COORDINATE = 50
"""Largest grid coordinate accepted when strict parsing is enabled."""

MAX_INSTRUCTION_LENGTH = 100
"""Longest instruction string accepted when strict parsing is enabled."""

DEFAULT_OUT_DIR = "data"
"""Default output directory for persisted runs."""

FIGURE_DPI = 150
"""Default resolution for rendered path figures."""

CELL_SIZE_INCHES = 0.6
"""Default on-figure size of one grid cell."""

MIN_FIGURE_INCHES = 3.0
"""Lower bound on either figure dimension so tiny grids stay legible."""
