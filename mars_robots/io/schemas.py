"""Parquet schema definitions for persisted simulation runs.

All Arrow schemas used when writing outcomes, visited paths and scent
markers are centralised here so that the writer and the reader work against
the same column contracts.
"""

from __future__ import annotations

import pyarrow as pa

# ---------------------------------------------------------------------------
# Schema version constants
# ---------------------------------------------------------------------------

OUTCOME_SCHEMA_VERSION = 1

# ---------------------------------------------------------------------------
# Run artifact schemas
# ---------------------------------------------------------------------------

OUTCOME_SCHEMA = pa.schema(
    [
        ("schema_version", pa.int64()),
        ("robot_index", pa.int64()),
        ("x", pa.int64()),
        ("y", pa.int64()),
        ("orientation", pa.string()),
        ("lost", pa.bool_()),
        ("n_instructions", pa.int64()),
        ("n_visited", pa.int64()),
    ]
)

PATH_SCHEMA = pa.schema(
    [
        ("robot_index", pa.int64()),
        ("step", pa.int64()),
        ("x", pa.int64()),
        ("y", pa.int64()),
        ("orientation", pa.string()),
    ]
)

SCENT_SCHEMA = pa.schema(
    [
        ("x", pa.int64()),
        ("y", pa.int64()),
    ]
)
