"""Sequential robot simulator with scent memory.

Scent invariant: a robot lost from coordinate ``c`` leaves a scent at ``c``.
Every later robot standing on ``c`` ignores any instruction that would take
it off the grid, whatever its heading. Robots run strictly in input order and
a robot never sees scents from robots deployed after it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from mars_robots.domain.model import Coordinate, GridBounds, Position, RobotSpec, SimulationInput
from mars_robots.domain.step import apply_instruction

logger = logging.getLogger(__name__)


class ScentSet:
    """Coordinates robots have fallen from during one run. Only ever grows."""

    def __init__(self, initial: Iterable[Coordinate] = ()) -> None:
        self._coordinates: set[Coordinate] = set(initial)

    def add(self, coordinate: Coordinate) -> None:
        self._coordinates.add(coordinate)

    def __contains__(self, coordinate: object) -> bool:
        return coordinate in self._coordinates

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(sorted(self._coordinates, key=lambda c: (c.x, c.y)))

    def __len__(self) -> int:
        return len(self._coordinates)

    def snapshot(self) -> frozenset[Coordinate]:
        """Immutable copy of the current markers."""
        return frozenset(self._coordinates)


@dataclass(frozen=True)
class RobotOutcome:
    """Final state of one robot.

    ``visited`` starts with the start position and records every accepted
    transition, turns included. Skipped (scent-protected) instructions and the
    losing move are not recorded.
    """

    robot_index: int
    final: Position
    lost: bool
    visited: tuple[Position, ...]

    @property
    def executed_steps(self) -> int:
        """Number of instructions that changed the robot's position."""
        return len(self.visited) - 1


@dataclass(frozen=True)
class SimulationRun:
    """Result of one full simulation: outcomes in input order plus final scents."""

    bounds: GridBounds
    outcomes: tuple[RobotOutcome, ...]
    scents: frozenset[Coordinate]

    @property
    def lost_count(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.lost)


def run_robot(
    spec: RobotSpec, bounds: GridBounds, scents: ScentSet, robot_index: int = 0
) -> RobotOutcome:
    """Execute one robot to completion or loss, adding a scent if it is lost."""
    current = spec.start
    visited: list[Position] = [current]
    lost = False

    if not bounds.contains(current.coordinate):
        logger.warning("robot %d starts off the grid at %s", robot_index, current)

    logger.debug("robot %d starting at %s", robot_index, current)
    for instruction in spec.instructions:
        candidate = apply_instruction(current, instruction)
        if bounds.contains(candidate.coordinate):
            current = candidate
            visited.append(current)
            continue
        if current.coordinate in scents:
            logger.debug(
                "robot %d ignores %s at scented %s", robot_index, instruction.value, current
            )
            continue
        lost = True
        scents.add(current.coordinate)
        logger.debug("robot %d lost moving from %s to %s", robot_index, current, candidate)
        break

    return RobotOutcome(
        robot_index=robot_index,
        final=current,
        lost=lost,
        visited=tuple(visited),
    )


def run_simulation(
    simulation_input: SimulationInput, scents: ScentSet | None = None
) -> SimulationRun:
    """Run every robot in input order against a scent set owned by this run.

    ``scents`` may be passed to seed the run with markers (for example to
    continue a previous expedition); it is mutated in place.
    """
    scents = scents if scents is not None else ScentSet()
    outcomes: list[RobotOutcome] = []
    for robot_index, spec in enumerate(simulation_input.robots):
        outcomes.append(run_robot(spec, simulation_input.bounds, scents, robot_index))
    run = SimulationRun(
        bounds=simulation_input.bounds,
        outcomes=tuple(outcomes),
        scents=scents.snapshot(),
    )
    logger.info(
        "simulated %d robots, %d lost, %d scents",
        len(run.outcomes),
        run.lost_count,
        len(run.scents),
    )
    return run
