"""Copy the Chinese administrative area table from MySQL into SQLite."""

from __future__ import annotations

import argparse
import sqlite3
import time
from collections.abc import Iterable, Mapping, Sequence
from contextlib import closing
from pathlib import Path

import pymysql

DEFAULT_DB_PATH = "../bin/data/data.db"
PASSWORD = "password"

FIELDS = (
    "level",
    "area_code",
    "zip_code",
    "city_code",
    "area_name",
    "name",
    "short_name",
    "lng",
    "lat",
)

_CREATE_TABLE = """CREATE TABLE IF NOT EXISTS cnarea_2016 (
    uid INTEGER PRIMARY KEY AUTOINCREMENT,
    level VARCHAR(64),
    area_code VARCHAR(64),
    zip_code VARCHAR(64),
    city_code VARCHAR(64),
    area_name VARCHAR(64),
    name VARCHAR(64),
    short_name VARCHAR(64),
    lng VARCHAR(64),
    lat VARCHAR(64)
)"""

_INSERT = (
    f"INSERT INTO cnarea_2016({', '.join(FIELDS)}) "
    f"VALUES ({', '.join('?' for _ in FIELDS)})"
)

_MYSQL_COLUMNS = (
    "level",
    "area_code",
    "zip_code",
    "city_code",
    "name",
    "short_name",
    "merger_name",
    "lng",
    "lat",
)


def init_sqlite(db_path: str | Path) -> None:
    """Replace the database file with a fresh one holding an empty area table."""
    path = Path(db_path)
    path.unlink(missing_ok=True)
    with closing(sqlite3.connect(path)) as conn:
        with conn:
            conn.execute(_CREATE_TABLE)


def _area_row(values: Sequence[object]) -> dict[str, str]:
    if any(value is None for value in values):
        raise ValueError(f"NULL value in area row: {values!r}")
    source = dict(zip(_MYSQL_COLUMNS, (str(value) for value in values)))
    source["area_name"] = source.pop("merger_name")
    return {field: source[field] for field in FIELDS}


def extract_mysql(
    host: str = "localhost",
    port: int = 3306,
    user: str = "root",
    password: str = PASSWORD,
    database: str = "cnarea",
) -> tuple[list[dict[str, str]], int]:
    """Read every area row from MySQL; returns the rows and the counted total."""
    conn = pymysql.connect(
        host=host,
        port=port,
        user=user,
        password=password,
        database=database,
        charset="utf8",
        connect_timeout=10,
    )
    try:
        with conn.cursor() as cursor:
            cursor.execute("SELECT count(1) num FROM cnarea_2016")
            (total,) = cursor.fetchone()
            cursor.execute(f"SELECT {', '.join(_MYSQL_COLUMNS)} FROM cnarea_2016")
            rows = [_area_row(values) for values in cursor]
    finally:
        conn.close()
    return rows, int(total)


def load_sqlite(db_path: str | Path, rows: Iterable[Mapping[str, str]]) -> None:
    """Insert the rows into the area table in one transaction; missing fields give ""."""
    with closing(sqlite3.connect(db_path)) as conn:
        with conn:
            conn.executemany(
                _INSERT, ([row.get(field, "") for field in FIELDS] for row in rows)
            )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the whole migration from MySQL to SQLite."""
    parser = argparse.ArgumentParser(description="Copy cnarea_2016 from MySQL into SQLite.")
    parser.add_argument("--db", default=DEFAULT_DB_PATH, help="SQLite file to (re)create")
    parser.add_argument("--host", default="localhost")
    parser.add_argument("--port", type=int, default=3306)
    parser.add_argument("--user", default="root")
    parser.add_argument("--password", default=PASSWORD)
    parser.add_argument("--database", default="cnarea")
    args = parser.parse_args(argv)

    started = time.perf_counter()
    init_sqlite(args.db)
    rows, total = extract_mysql(args.host, args.port, args.user, args.password, args.database)
    print(f"total rows: {total}")
    load_sqlite(args.db, rows)
    print("MySQL-->SQLite 迁移数据耗时", f"{time.perf_counter() - started:.3f}s")
    return 0