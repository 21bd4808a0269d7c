"""SQLite persistence of equation coefficient state."""

from __future__ import annotations

import json
import sqlite3
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Sequence

from chembalance.logging import logger
from chembalance.models import EquationState
from chembalance.preferences import EquationSet, validate_initial_coefficient

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS snapshot (
  id INTEGER PRIMARY KEY,
  name TEXT NOT NULL,
  collection TEXT,
  initial_coefficient INTEGER,
  created_utc TEXT,
  notes TEXT
);
CREATE TABLE IF NOT EXISTS equation_state (
  snapshot_id INTEGER REFERENCES snapshot(id) ON DELETE CASCADE,
  position INTEGER,
  equation_key TEXT,
  coefficients JSON,
  initial_coefficients JSON,
  PRIMARY KEY (snapshot_id, equation_key)
);
"""


def connect(project_file: str | Path) -> sqlite3.Connection:
    """Open (and create) a SQLite project file."""
    path = Path(project_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    connection = sqlite3.connect(path)
    connection.execute("PRAGMA foreign_keys = ON;")
    return connection


def ensure_schema(connection: sqlite3.Connection) -> None:
    """Ensure the snapshot tables exist in the project file."""
    connection.executescript(SCHEMA_SQL)
    connection.commit()


def save_snapshot(
    connection: sqlite3.Connection,
    equation_set: EquationSet,
    name: str,
    collection: str | None = None,
    notes: str | None = None,
    created_utc: str | None = None,
) -> int:
    """Persist the state of every equation in `equation_set` and return the snapshot ID."""
    created_utc = created_utc or _utc_now()
    cursor = connection.execute(
        "INSERT INTO snapshot (name, collection, initial_coefficient, created_utc, notes)"
        " VALUES (?, ?, ?, ?, ?)",
        (name, collection, equation_set.preferences.initial_coefficient, created_utc, notes),
    )
    snapshot_id = int(cursor.lastrowid)
    connection.executemany(
        "INSERT INTO equation_state (snapshot_id, position, equation_key, coefficients, initial_coefficients)"
        " VALUES (?, ?, ?, ?, ?)",
        [
            (
                snapshot_id,
                position,
                state.key,
                _json_dumps(state.coefficients),
                _json_dumps(state.initial_coefficients),
            )
            for position, state in enumerate(equation.get_state() for equation in equation_set)
        ],
    )
    connection.commit()
    logger.debug("Saved snapshot %d (%s) with %d equations", snapshot_id, name, len(equation_set))
    return snapshot_id


def load_snapshot_initial_coefficient(connection: sqlite3.Connection, snapshot_id: int) -> int | None:
    """Read the initial coefficient preference that was in effect when the snapshot was saved."""
    row = connection.execute("SELECT initial_coefficient FROM snapshot WHERE id = ?", (snapshot_id,)).fetchone()
    if row is None:
        raise ValueError(f"No snapshot with id {snapshot_id}")
    return row[0]


def load_snapshot(connection: sqlite3.Connection, snapshot_id: int) -> List[EquationState]:
    """Read the equation states of a snapshot, in the order they were saved."""
    load_snapshot_initial_coefficient(connection, snapshot_id)

    rows = connection.execute(
        "SELECT equation_key, coefficients, initial_coefficients FROM equation_state"
        " WHERE snapshot_id = ? ORDER BY position",
        (snapshot_id,),
    ).fetchall()
    return [
        EquationState(
            key=key,
            coefficients=tuple(json.loads(coefficients)),
            initial_coefficients=tuple(json.loads(initial_coefficients)),
        )
        for key, coefficients, initial_coefficients in rows
    ]


def restore_snapshot(
    connection: sqlite3.Connection,
    snapshot_id: int,
    equation_set: EquationSet,
) -> List[EquationState]:
    """Apply a saved snapshot to `equation_set`, including its initial coefficient preference.

    The preference and every equation state are validated before anything is
    written, so a snapshot that does not fit the set leaves it untouched.
    Restoring the preference rewrites the initial coefficients of every
    equation that follows it; current coefficients come from the snapshot.
    """
    initial_coefficient = load_snapshot_initial_coefficient(connection, snapshot_id)
    states = load_snapshot(connection, snapshot_id)
    unknown = [state.key for state in states if state.key not in equation_set]
    if unknown:
        raise ValueError(f"Snapshot {snapshot_id} has equations not in this set: {', '.join(unknown)}")
    if initial_coefficient is not None:
        validate_initial_coefficient(initial_coefficient)
    for state in states:
        equation_set.get(state.key).validate_state(state)

    if initial_coefficient is not None:
        equation_set.preferences.initial_coefficient = initial_coefficient
    for state in states:
        equation_set.get(state.key).set_state(state)
    logger.debug("Restored snapshot %d into %d equations", snapshot_id, len(states))
    return states


def _json_dumps(payload: Sequence[int]) -> str:
    return json.dumps(list(payload))


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()
