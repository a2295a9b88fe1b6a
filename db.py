"""SQLite storage for ponds, named snapshots of a pond, and search runs."""

from __future__ import annotations

import logging
import os
import sqlite3
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional, Sequence

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = str((Path(__file__).parent / "ponds.db").resolve())

SCHEMA = (
    "CREATE TABLE IF NOT EXISTS ponds ("
    " id TEXT PRIMARY KEY, state_json TEXT NOT NULL, updated_at TEXT NOT NULL)",
    "CREATE TABLE IF NOT EXISTS snapshots ("
    " pond_id TEXT NOT NULL, name TEXT NOT NULL, state_json TEXT NOT NULL,"
    " created_at TEXT NOT NULL, PRIMARY KEY (pond_id, name))",
    "CREATE TABLE IF NOT EXISTS runs ("
    " id INTEGER PRIMARY KEY AUTOINCREMENT, pond_id TEXT NOT NULL,"
    " result_json TEXT NOT NULL, created_at TEXT NOT NULL)",
    "CREATE INDEX IF NOT EXISTS runs_by_pond ON runs (pond_id, id)",
)

# Paths whose schema has been created in this process.
_ready: set[str] = set()


def db_path() -> str:
    return os.environ.get("FROGPATH_DB_PATH", DEFAULT_DB_PATH)


def _connect() -> sqlite3.Connection:
    # One connection per call; the path may change between calls (tests set the env var).
    path = db_path()
    con = sqlite3.connect(path)
    if path not in _ready:
        for ddl in SCHEMA:
            con.execute(ddl)
        con.commit()
        _ready.add(path)
        logger.info("pond store ready at %s", path)
    return con


def _write(sql: str, params: Sequence[Any] = ()) -> sqlite3.Cursor:
    with _connect() as con:
        return con.execute(sql, params)


def _column(sql: str, params: Sequence[Any] = ()) -> list[str]:
    with _connect() as con:
        return [row[0] for row in con.execute(sql, params)]


def _value(sql: str, params: Sequence[Any] = ()) -> Optional[str]:
    values = _column(sql, params)
    return values[0] if values else None


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


# --- ponds ---

def list_pond_ids() -> list[str]:
    return _column("SELECT id FROM ponds ORDER BY updated_at DESC")


def create_pond(pond_id: str, state_json: str) -> None:
    _write("INSERT INTO ponds(id, state_json, updated_at) VALUES(?,?,?)", (pond_id, state_json, _now_iso()))


def get_pond_json(pond_id: str) -> Optional[str]:
    return _value("SELECT state_json FROM ponds WHERE id = ?", (pond_id,))


def save_pond_json(pond_id: str, state_json: str) -> None:
    _write(
        "INSERT INTO ponds(id, state_json, updated_at) VALUES(?,?,?) "
        "ON CONFLICT(id) DO UPDATE SET state_json = excluded.state_json, updated_at = excluded.updated_at",
        (pond_id, state_json, _now_iso()),
    )


# --- snapshots ---

def save_snapshot(pond_id: str, name: str, state_json: str) -> None:
    _write(
        "INSERT OR REPLACE INTO snapshots(pond_id, name, state_json, created_at) VALUES(?,?,?,?)",
        (pond_id, name, state_json, _now_iso()),
    )


def load_snapshot(pond_id: str, name: str) -> Optional[str]:
    return _value("SELECT state_json FROM snapshots WHERE pond_id = ? AND name = ?", (pond_id, name))


def list_snapshots(pond_id: str) -> list[str]:
    return _column("SELECT name FROM snapshots WHERE pond_id = ? ORDER BY created_at DESC", (pond_id,))


# --- runs ---

def record_run(pond_id: str, result_json: str) -> int:
    cur = _write(
        "INSERT INTO runs(pond_id, result_json, created_at) VALUES(?,?,?)",
        (pond_id, result_json, _now_iso()),
    )
    return int(cur.lastrowid)


def list_runs(pond_id: str, limit: int = 20) -> list[str]:
    """Result JSON of the latest runs, most recent first."""
    return _column(
        "SELECT result_json FROM runs WHERE pond_id = ? ORDER BY id DESC LIMIT ?",
        (pond_id, limit),
    )
