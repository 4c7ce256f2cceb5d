"""Tests for mars_robots.io.report module."""

from __future__ import annotations

import json

from mars_robots.domain.model import Coordinate, GridBounds, Orientation, Position
from mars_robots.io.report import (
    format_outcome,
    format_report,
    run_summary,
)
from mars_robots.simulation.engine import RobotOutcome, SimulationRun


def _outcome(index: int, x: int, y: int, o: Orientation, lost: bool) -> RobotOutcome:
    final = Position(Coordinate(x, y), o)
    return RobotOutcome(robot_index=index, final=final, lost=lost, visited=(final,))


def test_format_outcome_survivor() -> None:
    assert format_outcome(_outcome(0, 1, 1, Orientation.EAST, False)) == "1 1 E"


def test_format_outcome_lost() -> None:
    assert format_outcome(_outcome(0, 3, 3, Orientation.NORTH, True)) == "3 3 N LOST"


def test_format_report_keeps_order() -> None:
    run = SimulationRun(
        bounds=GridBounds(upper_right=Coordinate(5, 3)),
        outcomes=(
            _outcome(0, 1, 1, Orientation.EAST, False),
            _outcome(1, 3, 3, Orientation.NORTH, True),
        ),
        scents=frozenset({Coordinate(3, 3)}),
    )
    assert format_report(run) == "1 1 E\n3 3 N LOST"


def test_format_report_empty_run() -> None:
    run = SimulationRun(GridBounds(upper_right=Coordinate(1, 1)), (), frozenset())
    assert format_report(run) == ""


def test_run_summary_is_json_serialisable() -> None:
    run = SimulationRun(
        bounds=GridBounds(upper_right=Coordinate(5, 3)),
        outcomes=(_outcome(0, 3, 3, Orientation.NORTH, True),),
        scents=frozenset({Coordinate(3, 3)}),
    )
    summary = json.loads(json.dumps(run_summary(run)))
    assert summary["grid"] == {"lower_left": [0, 0], "upper_right": [5, 3]}
    assert summary["lost"] == 1
    assert summary["scents"] == [[3, 3]]
    assert summary["outcomes"][0]["line"] == "3 3 N LOST"
