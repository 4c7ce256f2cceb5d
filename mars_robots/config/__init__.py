"""Configuration layer: constants and typed config dataclasses."""

from mars_robots.config.constants import (
    CELL_SIZE_INCHES,
    DEFAULT_OUT_DIR,
    FIGURE_DPI,
    FORWARD_ALIASES,
    GRID_ORIGIN,
    INSTRUCTION_LETTERS,
    LOST_SUFFIX,
    MAX_GRID_COORDINATE,
    MAX_INSTRUCTION_LENGTH,
    ORIENTATION_ORDER,
)
from mars_robots.config.types import OutputFormat, ParseConfig, RenderConfig, RunConfig

__all__ = [
    "CELL_SIZE_INCHES",
    "DEFAULT_OUT_DIR",
    "FIGURE_DPI",
    "FORWARD_ALIASES",
    "GRID_ORIGIN",
    "INSTRUCTION_LETTERS",
    "LOST_SUFFIX",
    "MAX_GRID_COORDINATE",
    "MAX_INSTRUCTION_LENGTH",
    "ORIENTATION_ORDER",
    "OutputFormat",
    "ParseConfig",
    "RenderConfig",
    "RunConfig",
]
