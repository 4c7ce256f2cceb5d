"""Configuration dataclasses for parsing, rendering and CLI runs.

All frozen dataclasses that parameterise a simulation run live here. Each one
validates itself in ``__post_init__`` so that an invalid combination fails at
construction time rather than halfway through a run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from mars_robots.config.constants import (
    CELL_SIZE_INCHES,
    DEFAULT_OUT_DIR,
    FIGURE_DPI,
    MAX_GRID_COORDINATE,
    MAX_INSTRUCTION_LENGTH,
)

__all__ = [
    "OutputFormat",
    "ParseConfig",
    "RenderConfig",
    "RunConfig",
]


class OutputFormat(Enum):
    """How the CLI prints the final robot states."""

    TEXT = "text"
    JSON = "json"


@dataclass(frozen=True)
class ParseConfig:
    """Parser knobs.

    ``strict`` additionally enforces the grid-size and instruction-length
    limits of the original rover problem statement.
    """

    strict: bool = False
    max_coordinate: int = MAX_GRID_COORDINATE
    max_instruction_length: int = MAX_INSTRUCTION_LENGTH
    allow_forward_alias: bool = True

    def __post_init__(self) -> None:
        if self.max_coordinate < 0:
            raise ValueError("max_coordinate must be >= 0")
        if self.max_instruction_length < 1:
            raise ValueError("max_instruction_length must be >= 1")


@dataclass(frozen=True)
class RenderConfig:
    """Path-figure rendering settings."""

    dpi: int = FIGURE_DPI
    cell_size: float = CELL_SIZE_INCHES
    show_scents: bool = True
    show_visit_heatmap: bool = False
    theme: str = "default"

    def __post_init__(self) -> None:
        if self.dpi < 1:
            raise ValueError("dpi must be >= 1")
        if self.cell_size <= 0.0:
            raise ValueError("cell_size must be > 0")
        if not self.theme:
            raise ValueError("theme must not be empty")


@dataclass(frozen=True)
class RunConfig:
    """Top-level settings for one CLI ``run`` invocation."""

    input_path: Path | None = None
    out_dir: Path = Path(DEFAULT_OUT_DIR)
    persist: bool = False
    render_path: Path | None = None
    output_format: OutputFormat = OutputFormat.TEXT
    parse: ParseConfig = field(default_factory=ParseConfig)
    render: RenderConfig = field(default_factory=RenderConfig)

    def __post_init__(self) -> None:
        if self.render_path is not None and self.render_path.suffix.lower() not in {
            ".png",
            ".pdf",
            ".svg",
        }:
            raise ValueError("render_path must end in .png, .pdf or .svg")

