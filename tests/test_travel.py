import re

import pytest

from fakerfactory.core import seed
from fakerfactory.data import FLIGHTS, SEATS, TRAINS
from fakerfactory.travel import (
    airline_info,
    airline_name,
    flight_seat,
    train_seat,
    train_trips,
    voyage,
)


@pytest.fixture(autouse=True)
def _seeded():
    seed(99)


def test_voyage_shape():
    lengths = set()
    for _ in range(200):
        value = voyage()
        code, digits = value[:2], value[2:]
        assert code in FLIGHTS["airline_code"]
        assert re.fullmatch(r"\d{3,4}", digits)
        assert 100 <= int(digits) <= 9999
        lengths.add(len(digits))
    assert lengths == {3, 4}


def test_airline_name_in_list():
    assert {airline_name() for _ in range(100)} <= set(FLIGHTS["airline_name"])


def test_airline_info_matches_data():
    for _ in range(100):
        info = airline_info()
        assert set(info) == {"code", "name"}
        index = FLIGHTS["airline_code"].index(info["code"])
        assert FLIGHTS["airline_name"][index] == info["name"]


def test_airline_info_keeps_trailing_space():
    names = {airline_info()["name"] for _ in range(500)}
    assert "南方航空 " in names


def test_train_seat_shape():
    for _ in range(200):
        value = train_seat()
        match = re.fullmatch(r"(\d+)([A-Z]?)", value)
        assert match
        row, letter = int(match[1]), match[2]
        if letter:
            assert letter in SEATS["train"]
            assert 1 <= row <= 15
        else:
            assert 1 <= row <= 120


def test_flight_seat_shape():
    for _ in range(200):
        match = re.fullmatch(r"(\d+)([A-Z])", flight_seat())
        assert match
        assert 1 <= int(match[1]) <= 15
        assert match[2] in SEATS["flight"]


def test_train_trips_shape():
    for _ in range(200):
        match = re.fullmatch(r"([A-Z]?)(\d+)", train_trips())
        assert match
        assert match[1] in TRAINS["prefix"]
        assert 1 <= int(match[2]) <= 9999