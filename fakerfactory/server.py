"""HTTP service that returns batches of fake records."""

from __future__ import annotations

import logging
import re
import sqlite3
import sys
from collections.abc import Callable, Sequence
from typing import Any

from flask import Flask, Response, abort, jsonify, request

from .attributes import car_brand, color, gender
from .database import address, create_conn
from .dates import age, now_date, now_timestamp
from .internet import device_id, ipv4_address, ipv6_address, password, rand_mac_address
from .phone import imei, imsi, rand_meid
from .travel import airline_info, flight_seat, train_seat, train_trips, voyage
from .useragent import user_agent

MAX_RECORDS = 10000
DEFAULT_PORT = "8001"
DEFAULT_DB_PATH = "./data/data.db"
LOG_FILE = "serve.log"
ROUTE = "/api/v1/fakerfactory"

UNSUPPORTED = "暂未支持的字段"
PENDING = "暂未支持"
INVALID_PARAMS = "请输入有效的参数"

_INTEGER = re.compile(r"[+-]?[0-9]+")

_GENERATORS: dict[str, Callable[[], Any]] = {
    "color": lambda: color("zh_CN"),
    "sex": lambda: gender("zh_CN"),
    "age": age,
    "password": lambda: password(True, True, True, True, True, 10),
    "voyage": voyage,
    "airlineinfo": airline_info,
    "traintrips": train_trips,
    "trainseat": train_seat,
    "flightseat": flight_seat,
    "ipv4": ipv4_address,
    "ipv6": ipv6_address,
    "mac": rand_mac_address,
    "imsi": imsi,
    "imei": imei,
    "meid": rand_meid,
    "deviceid": device_id,
    "date": now_date,
    "capturetime": now_timestamp,
    "useragent": user_agent,
    "carbrand": lambda: car_brand("zh_CN"),
}
_PENDING_COLUMNS = frozenset({"gapassport", "twpassport"})


def match_faker(column: str, conn: sqlite3.Connection) -> Any:
    """Generate one value for a (lower-case) column name."""
    if column == "address":
        return address(conn)
    generator = _GENERATORS.get(column)
    if generator is not None:
        return generator()
    if column in _PENDING_COLUMNS:
        return PENDING
    return UNSUPPORTED


def fake_records(
    columns: str, number: str, conn: sqlite3.Connection
) -> tuple[list[dict[str, Any]], int]:
    """Build up to 10000 records for the comma-separated columns.

    Raises ValueError when number is not an integer.
    """
    if not _INTEGER.fullmatch(number):
        raise ValueError(f"invalid record count: {number!r}")
    count = min(int(number), MAX_RECORDS)
    names = columns.split(",")
    records = [
        {name: match_faker(name.lower(), conn) for name in names} for _ in range(count)
    ]
    return records, len(records)


def _body(status: str, code: str, count: int | None, records: Any) -> dict[str, Any]:
    return {
        "status": {"status": status, "code": code},
        "data": {"count": count, "records": records},
    }


def _invalid_body() -> dict[str, Any]:
    return _body("error", "100", None, INVALID_PARAMS)


def create_app(conn: sqlite3.Connection) -> Flask:
    """The web application serving fake records from GET and POST requests."""
    app = Flask(__name__)
    app.json.ensure_ascii = False

    def generate(columns: str, number: str) -> Response:
        try:
            records, count = fake_records(columns, number, conn)
        except ValueError:
            abort(500)
        return jsonify(_body("ok", "0", count, records or None))

    @app.before_request
    def preflight() -> Response | None:
        headers = request.headers
        if (
            request.method == "OPTIONS"
            and "Origin" in headers
            and "Access-Control-Request-Method" in headers
        ):
            response = app.make_response(("", 204))
            response.headers["Access-Control-Allow-Methods"] = (
                "GET,POST,PUT,PATCH,DELETE,HEAD,OPTIONS"
            )
            response.headers["Access-Control-Allow-Headers"] = (
                "Origin,Content-Length,Content-Type"
            )
            response.headers["Access-Control-Max-Age"] = "43200"
            return response
        return None

    @app.after_request
    def allow_any_origin(response: Response) -> Response:
        if "Origin" in request.headers:
            response.headers["Access-Control-Allow-Origin"] = "*"
        return response

    @app.get(ROUTE)
    def get_faker() -> Response:
        columns = request.args.get("columns", "")
        number = request.args.get("number", "")
        if not columns or not number:
            return jsonify(_invalid_body())
        return generate(columns, number)

    @app.post(ROUTE)
    def post_faker() -> Any:
        payload = request.get_json(silent=True)
        fields = payload if isinstance(payload, dict) else {}
        columns = fields.get("columns")
        number = fields.get("number")
        if not (isinstance(columns, str) and columns and isinstance(number, str) and number):
            return jsonify(_invalid_body()), 400
        return generate(columns, number)

    return app


def _log_to_file(path: str) -> None:
    handler = logging.FileHandler(path, mode="w", encoding="utf-8")
    logger = logging.getLogger("werkzeug")
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    logger.propagate = False


def main(argv: Sequence[str] | None = None) -> int:
    """Start the service: main([port, db_path])."""
    args = list(sys.argv[1:] if argv is None else argv)
    port = args[0] if args else DEFAULT_PORT
    db_path = args[1] if len(args) > 1 else DEFAULT_DB_PATH
    print("args==>", args)

    conn = create_conn(db_path)
    try:
        try:
            port_number = int(port)
        except ValueError:
            raise SystemExit(f"在{port}端口启动服务失败！") from None
        _log_to_file(LOG_FILE)
        app = create_app(conn)
        try:
            app.run(host="0.0.0.0", port=port_number)
        except (OSError, OverflowError) as exc:
            raise SystemExit(f"在{port}端口启动服务失败！") from exc
    finally:
        conn.close()
    return 0