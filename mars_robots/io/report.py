"""Text and JSON renderings of simulation outcomes."""

from __future__ import annotations

from mars_robots.config.constants import LOST_SUFFIX
from mars_robots.domain.model import Position
from mars_robots.simulation.engine import RobotOutcome, SimulationRun


def format_position(position: Position) -> str:
    """``"x y O"``."""
    return f"{position.x} {position.y} {position.orientation.value}"


def format_outcome(outcome: RobotOutcome) -> str:
    """``"x y O"`` with a trailing ``" LOST"`` when the robot fell off."""
    line = format_position(outcome.final)
    if outcome.lost:
        line = f"{line} {LOST_SUFFIX}"
    return line


def format_lines(run: SimulationRun) -> list[str]:
    return [format_outcome(outcome) for outcome in run.outcomes]


def format_report(run: SimulationRun) -> str:
    """One line per robot, in input order."""
    return "\n".join(format_lines(run))


def run_summary(run: SimulationRun) -> dict[str, object]:
    """JSON-serialisable description of a run."""
    return {
        "grid": {
            "lower_left": [run.bounds.lower_left.x, run.bounds.lower_left.y],
            "upper_right": [run.bounds.upper_right.x, run.bounds.upper_right.y],
        },
        "robots": len(run.outcomes),
        "lost": run.lost_count,
        "scents": [[c.x, c.y] for c in sorted(run.scents, key=lambda c: (c.x, c.y))],
        "outcomes": [
            {
                "robot_index": outcome.robot_index,
                "x": outcome.final.x,
                "y": outcome.final.y,
                "orientation": outcome.final.orientation.value,
                "lost": outcome.lost,
                "line": format_outcome(outcome),
            }
            for outcome in run.outcomes
        ],
    }
