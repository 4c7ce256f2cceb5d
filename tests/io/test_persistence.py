"""Tests for mars_robots.io.persistence module."""

from __future__ import annotations

import json
from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq
import pytest

from mars_robots.domain.model import Coordinate
from mars_robots.io.parser import parse_input
from mars_robots.io.paths import outcomes_path, resolve_within_base
from mars_robots.io.persistence import read_outcomes, read_run, write_run
from mars_robots.io.schemas import OUTCOME_SCHEMA, PATH_SCHEMA
from mars_robots.simulation.engine import run_simulation

SAMPLE_INPUT = """5 3
1 1 E
RFRFRFRF

3 2 N
FRRFLLFFRRFLL

0 3 W
LLFFFLFLFL
"""


def _sample_run():
    parsed = parse_input(SAMPLE_INPUT)
    return parsed, run_simulation(parsed)


def test_write_run_creates_all_artifacts(tmp_path: Path) -> None:
    parsed, run = _sample_run()
    written = write_run(run, tmp_path, [len(r.instructions) for r in parsed.robots])
    for path in written.values():
        assert path.exists()
    assert written["outcomes"] == outcomes_path(tmp_path)


def test_outcome_table_matches_schema(tmp_path: Path) -> None:
    parsed, run = _sample_run()
    write_run(run, tmp_path, [len(r.instructions) for r in parsed.robots])
    table = pq.read_table(outcomes_path(tmp_path))
    assert table.schema.equals(OUTCOME_SCHEMA)
    rows = table.to_pylist()
    assert [row["lost"] for row in rows] == [False, True, False]
    assert [row["n_instructions"] for row in rows] == [8, 13, 10]


def test_path_rows_start_at_step_zero(tmp_path: Path) -> None:
    _, run = _sample_run()
    written = write_run(run, tmp_path)
    table = pq.read_table(written["paths"])
    assert table.schema.equals(PATH_SCHEMA)
    first_rows = [row for row in table.to_pylist() if row["step"] == 0]
    assert [(r["x"], r["y"], r["orientation"]) for r in first_rows] == [
        (1, 1, "E"),
        (3, 2, "N"),
        (0, 3, "W"),
    ]


def test_summary_json_lists_scents(tmp_path: Path) -> None:
    _, run = _sample_run()
    written = write_run(run, tmp_path)
    summary = json.loads(written["summary"].read_text())
    assert summary["scents"] == [[3, 3]]
    assert summary["robots"] == 3


def test_read_run_round_trips(tmp_path: Path) -> None:
    _, run = _sample_run()
    write_run(run, tmp_path)
    assert read_run(tmp_path) == run


def test_read_run_handles_empty_run(tmp_path: Path) -> None:
    run = run_simulation(parse_input("2 2\n"))
    write_run(run, tmp_path)
    restored = read_run(tmp_path)
    assert restored.outcomes == ()
    assert restored.scents == frozenset()
    assert restored.bounds.upper_right == Coordinate(2, 2)


def test_read_run_requires_summary(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        read_run(tmp_path)


def test_read_outcomes_rejects_unknown_schema_version(tmp_path: Path) -> None:
    _, run = _sample_run()
    write_run(run, tmp_path)
    table = pq.read_table(outcomes_path(tmp_path))
    bumped = table.set_column(0, "schema_version", pa.array([99] * table.num_rows, pa.int64()))
    pq.write_table(bumped, outcomes_path(tmp_path))
    with pytest.raises(ValueError, match="schema_version"):
        read_outcomes(outcomes_path(tmp_path))


def test_write_run_rejects_mismatched_counts(tmp_path: Path) -> None:
    _, run = _sample_run()
    with pytest.raises(ValueError, match="one entry per robot"):
        write_run(run, tmp_path, [1])


def test_resolve_within_base_rejects_escape(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="escapes"):
        resolve_within_base(Path("../outside.png"), tmp_path)
    assert resolve_within_base(Path("fig.png"), tmp_path) == (tmp_path / "fig.png").resolve()
