"""Simulation engine: sequential robot execution with scent memory."""

from mars_robots.simulation.engine import (
    RobotOutcome,
    ScentSet,
    SimulationRun,
    run_robot,
    run_simulation,
)

__all__ = [
    "RobotOutcome",
    "ScentSet",
    "SimulationRun",
    "run_robot",
    "run_simulation",
]
