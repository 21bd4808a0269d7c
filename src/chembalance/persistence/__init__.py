"""Persistence helpers for chembalance."""

from chembalance.persistence.sqlite_store import (
    connect,
    ensure_schema,
    load_snapshot,
    load_snapshot_initial_coefficient,
    restore_snapshot,
    save_snapshot,
)

__all__ = [
    "connect",
    "ensure_schema",
    "load_snapshot",
    "load_snapshot_initial_coefficient",
    "restore_snapshot",
    "save_snapshot",
]
