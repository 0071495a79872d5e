"""SQLite access and random Chinese administrative addresses."""

from __future__ import annotations

import os
import sqlite3
from typing import Any

from .core import number

ADDRESS_TABLE = "cnarea_2016"
ADDRESS_ROWS = 752233
ADDRESS_FIELDS = (
    "area_code",
    "zip_code",
    "city_code",
    "area_name",
    "name",
    "short_name",
    "lng",
    "lat",
)


def connect_sqlite(db_path: str | os.PathLike[str]) -> sqlite3.Connection:
    """Open an existing SQLite database and check that it answers.

    Raises FileNotFoundError when the file does not exist and sqlite3.Error
    when it cannot be opened or queried.
    """
    path = os.fspath(db_path)
    os.stat(path)
    conn = sqlite3.connect(path, check_same_thread=False)
    try:
        conn.execute("SELECT 1").close()
    except sqlite3.Error:
        conn.close()
        raise
    return conn


def create_conn(db_path: str | os.PathLike[str]) -> sqlite3.Connection:
    """Like connect_sqlite, but report a failure on standard output before raising."""
    try:
        return connect_sqlite(db_path)
    except (OSError, sqlite3.Error) as exc:
        print(f"连接SQLite错误! dbPath: {os.fspath(db_path)} error: {exc}")
        raise


def _text(value: Any) -> str:
    if value is None:
        return "NULL"
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


def query_sqlite(conn: sqlite3.Connection, query: str, *args: Any) -> list[dict[str, str]]:
    """Run a query and return its rows as dicts of text; NULL becomes "NULL"."""
    cursor = conn.execute(query, args)
    try:
        columns = [column[0] for column in cursor.description or ()]
        return [{name: _text(value) for name, value in zip(columns, row)} for row in cursor]
    finally:
        cursor.close()


def address_columns(conn: sqlite3.Connection, *args: str) -> list[dict[str, str]]:
    """Fetch the given columns (all when none) of a randomly chosen area row."""
    uid = number(1, ADDRESS_ROWS)
    selected = ",".join(args) if args else "*"
    return query_sqlite(conn, f"SELECT {selected} FROM {ADDRESS_TABLE} WHERE uid = ?", uid)


def address(conn: sqlite3.Connection) -> dict[str, str]:
    """A random area as a dict of its address fields; missing columns give ""."""
    rows = address_columns(conn)
    if not rows:
        raise LookupError(f"no row in {ADDRESS_TABLE} for the chosen uid")
    row = rows[0]
    return {field: row.get(field, "") for field in ADDRESS_FIELDS}