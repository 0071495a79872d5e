import re

import pytest

from fakerfactory.core import seed
from fakerfactory.phone import imei, imsi, luhn, meid, rand_meid


@pytest.fixture(autouse=True)
def _seeded():
    seed(2024)


def test_imsi_shape():
    networks = {"00", "01", "02", "03", "04", "05", "06", "07", "08", "09", "10", "20"}
    for _ in range(100):
        value = imsi()
        assert re.fullmatch(r"\d{15}", value)
        assert value.startswith("460")
        assert value[3:5] in networks
        assert int(value[5:]) >= 1


def test_imei_shape_and_check_digit():
    for _ in range(100):
        value = imei()
        assert re.fullmatch(r"\d{15}", value)
        assert value[:2] in {"86", "35", "01"}
        assert int(value[-1]) == luhn([int(ch) for ch in value[:-1]])


def test_luhn_worked_example():
    assert luhn([7, 9, 9, 2, 7, 3, 9, 8, 7, 1]) == 3


def test_luhn_of_nothing():
    assert luhn([]) == 0


def test_luhn_is_a_digit():
    seed(7)
    for _ in range(50):
        value = imei()
        assert 0 <= luhn([int(ch) for ch in value[:14]]) <= 9


def test_meid_lower_case():
    for _ in range(100):
        value = meid(True)
        assert re.fullmatch(r"[0-9a-f]{14}", value)
        assert 0xA0 <= int(value[:2], 16) <= 0xFF


def test_meid_upper_case():
    for _ in range(100):
        value = meid(False)
        assert re.fullmatch(r"[0-9A-F]{14}", value)
        assert 0xA0 <= int(value[:2], 16) <= 0xFF


def test_rand_meid_uses_one_case():
    for _ in range(100):
        value = rand_meid()
        assert len(value) == 14
        assert set(value) <= set("0123456789abcdef") or set(value) <= set("0123456789ABCDEF")
        assert 0xA0 <= int(value[:2], 16) <= 0xFF