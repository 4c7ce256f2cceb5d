"""Parquet/JSON persistence for simulation runs."""

from __future__ import annotations

import json
import logging
from collections import defaultdict
from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from mars_robots.domain.model import Coordinate, GridBounds, Orientation, Position
from mars_robots.io.paths import (
    logs_dir,
    outcomes_path,
    paths_log_path,
    run_summary_path,
    scents_path,
)
from mars_robots.io.report import run_summary
from mars_robots.io.schemas import (
    OUTCOME_SCHEMA,
    OUTCOME_SCHEMA_VERSION,
    PATH_SCHEMA,
    SCENT_SCHEMA,
)
from mars_robots.simulation.engine import RobotOutcome, SimulationRun

logger = logging.getLogger(__name__)


def _outcome_columns(run: SimulationRun, n_instructions: list[int]) -> dict[str, list]:
    columns: dict[str, list] = {name: [] for name in OUTCOME_SCHEMA.names}
    for outcome, count in zip(run.outcomes, n_instructions, strict=True):
        columns["schema_version"].append(OUTCOME_SCHEMA_VERSION)
        columns["robot_index"].append(outcome.robot_index)
        columns["x"].append(outcome.final.x)
        columns["y"].append(outcome.final.y)
        columns["orientation"].append(outcome.final.orientation.value)
        columns["lost"].append(outcome.lost)
        columns["n_instructions"].append(count)
        columns["n_visited"].append(len(outcome.visited))
    return columns


def _path_columns(run: SimulationRun) -> dict[str, list]:
    columns: dict[str, list] = {name: [] for name in PATH_SCHEMA.names}
    for outcome in run.outcomes:
        for step, position in enumerate(outcome.visited):
            columns["robot_index"].append(outcome.robot_index)
            columns["step"].append(step)
            columns["x"].append(position.x)
            columns["y"].append(position.y)
            columns["orientation"].append(position.orientation.value)
    return columns


def write_run(
    run: SimulationRun, out_dir: Path, n_instructions: list[int] | None = None
) -> dict[str, Path]:
    """Persist outcomes, visited paths, scents and a JSON summary under ``out_dir/logs``.

    ``n_instructions`` gives the per-robot instruction counts; when omitted the
    executed step counts are recorded instead.
    """
    if n_instructions is None:
        n_instructions = [outcome.executed_steps for outcome in run.outcomes]
    if len(n_instructions) != len(run.outcomes):
        raise ValueError("n_instructions must have one entry per robot")

    logs_dir(out_dir).mkdir(parents=True, exist_ok=True)
    written = {
        "outcomes": outcomes_path(out_dir),
        "paths": paths_log_path(out_dir),
        "scents": scents_path(out_dir),
        "summary": run_summary_path(out_dir),
    }
    pq.write_table(
        pa.Table.from_pydict(_outcome_columns(run, n_instructions), schema=OUTCOME_SCHEMA),
        written["outcomes"],
    )
    pq.write_table(
        pa.Table.from_pydict(_path_columns(run), schema=PATH_SCHEMA),
        written["paths"],
    )
    ordered_scents = sorted(run.scents, key=lambda c: (c.x, c.y))
    pq.write_table(
        pa.Table.from_pydict(
            {"x": [c.x for c in ordered_scents], "y": [c.y for c in ordered_scents]},
            schema=SCENT_SCHEMA,
        ),
        written["scents"],
    )
    written["summary"].write_text(json.dumps(run_summary(run), ensure_ascii=False, indent=2))
    logger.info("wrote run artifacts to %s", logs_dir(out_dir))
    return written


def read_scents(path: Path) -> frozenset[Coordinate]:
    table = pq.read_table(path, schema=SCENT_SCHEMA)
    return frozenset(
        Coordinate(int(row["x"]), int(row["y"])) for row in table.to_pylist()
    )


def read_paths(path: Path) -> dict[int, tuple[Position, ...]]:
    """Load visited paths keyed by robot index, each ordered by step."""
    table = pq.read_table(path, schema=PATH_SCHEMA)
    rows_by_robot: dict[int, list[dict]] = defaultdict(list)
    for row in table.to_pylist():
        rows_by_robot[int(row["robot_index"])].append(row)
    paths: dict[int, tuple[Position, ...]] = {}
    for robot_index, rows in rows_by_robot.items():
        rows.sort(key=lambda r: int(r["step"]))
        paths[robot_index] = tuple(
            Position(Coordinate(int(r["x"]), int(r["y"])), Orientation(r["orientation"]))
            for r in rows
        )
    return paths


def read_outcomes(path: Path) -> list[dict[str, object]]:
    """Load outcome rows; rejects files written with a different schema version."""
    table = pq.read_table(path, schema=OUTCOME_SCHEMA)
    rows = table.to_pylist()
    for row in rows:
        if row["schema_version"] != OUTCOME_SCHEMA_VERSION:
            raise ValueError(
                f"unsupported outcome schema_version: {row['schema_version']!r}"
            )
    return rows


def read_run(out_dir: Path) -> SimulationRun:
    """Rebuild a ``SimulationRun`` from artifacts written by :func:`write_run`."""
    summary_file = run_summary_path(out_dir)
    if not summary_file.exists():
        raise FileNotFoundError(f"run summary not found: {summary_file}")
    summary = json.loads(summary_file.read_text())
    try:
        lower_left = Coordinate(*summary["grid"]["lower_left"])
        upper_right = Coordinate(*summary["grid"]["upper_right"])
    except (KeyError, TypeError) as exc:
        raise ValueError(f"run summary missing grid bounds: {summary_file}") from exc

    paths = read_paths(paths_log_path(out_dir))
    outcomes: list[RobotOutcome] = []
    for row in read_outcomes(outcomes_path(out_dir)):
        robot_index = int(row["robot_index"])  # type: ignore[call-overload]
        final = Position(
            Coordinate(int(row["x"]), int(row["y"])),  # type: ignore[call-overload]
            Orientation(row["orientation"]),
        )
        outcomes.append(
            RobotOutcome(
                robot_index=robot_index,
                final=final,
                lost=bool(row["lost"]),
                visited=paths.get(robot_index, (final,)),
            )
        )
    outcomes.sort(key=lambda o: o.robot_index)
    return SimulationRun(
        bounds=GridBounds(upper_right=upper_right, lower_left=lower_left),
        outcomes=tuple(outcomes),
        scents=read_scents(scents_path(out_dir)),
    )
