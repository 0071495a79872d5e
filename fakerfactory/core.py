"""Random primitives shared by the generators."""

from __future__ import annotations

import random
import string
import struct
import time
from collections.abc import Sequence
from typing import TypeVar

from . import data

_T = TypeVar("_T")

_rng = random.Random()

_LETTERS = string.ascii_lowercase
_DIGITS = string.digits

_MAX_INT64 = 2**63 - 1
_MIN_INT64 = -(2**63)
_SMALLEST_FLOAT32 = 1.401298464324817e-45
_MAX_FLOAT32 = 3.4028234663852886e38
_SMALLEST_FLOAT64 = 5e-324
_MAX_FLOAT64 = 1.7976931348623157e308


def seed(value: int) -> None:
    """Seed the generator; 0 seeds it from the current time."""
    _rng.seed(time.time_ns() if value == 0 else value)


def rand_value(category: str, key: str) -> str:
    """Pick a random entry from a word list, or "" when the list is unknown."""
    if not data.has_values(category, key):
        return ""
    return _rng.choice(data.DATA[category][key])


def rand_int_range(low: int, high: int) -> int:
    """Random integer in [low, high]; ValueError when high < low."""
    if low == high:
        return low
    if high < low:
        raise ValueError(f"empty range [{low}, {high}]")
    return _rng.randint(low, high)


def rand_float_range(low: float, high: float) -> float:
    """Random float in [low, high)."""
    if low == high:
        return low
    return _rng.random() * (high - low) + low


def number(low: int, high: int) -> int:
    """Random integer between low and high inclusive."""
    return rand_int_range(low, high)


def uint8() -> int:
    return rand_int_range(0, 2**8 - 1)


def uint16() -> int:
    return rand_int_range(0, 2**16 - 1)


def uint32() -> int:
    return rand_int_range(0, 2**32 - 1)


def uint64() -> int:
    return _rng.randrange(_MAX_INT64)


def int8() -> int:
    return rand_int_range(-(2**7), 2**7 - 1)


def int16() -> int:
    return rand_int_range(-(2**15), 2**15 - 1)


def int32() -> int:
    return rand_int_range(-(2**31), 2**31 - 1)


def int64() -> int:
    return _rng.randrange(_MAX_INT64) + _MIN_INT64


def float32() -> float:
    """Random value rounded to single precision."""
    value = rand_float_range(_SMALLEST_FLOAT32, _MAX_FLOAT32)
    return struct.unpack("<f", struct.pack("<f", value))[0]


def float64() -> float:
    return rand_float_range(_SMALLEST_FLOAT64, _MAX_FLOAT64)


def numerify(text: str) -> str:
    """Replace every '#' with a digit; a leading '0' becomes non-zero."""
    if not text:
        return text
    chars = [_DIGITS[_rng.randrange(9)] if ch == "#" else ch for ch in text]
    if chars[0] == "0":
        chars[0] = _DIGITS[_rng.randrange(8) + 1]
    return "".join(chars)


def lexify(text: str) -> str:
    """Replace every '?' with a random lower-case letter."""
    return "".join(_rng.choice(_LETTERS) if ch == "?" else ch for ch in text)


def letter() -> str:
    """A single random lower-case letter."""
    return _rng.choice(_LETTERS)


def _shuffled(values: Sequence[_T]) -> list[_T]:
    items = list(values)
    for i in range(len(items)):
        j = _rng.randrange(i + 1)
        items[i], items[j] = items[j], items[i]
    return items


def shuffle_ints(values: Sequence[int]) -> list[int]:
    """Return the integers in random order."""
    return _shuffled(values)


def shuffle_strings(values: Sequence[str]) -> list[str]:
    """Return the strings in random order."""
    return _shuffled(values)


def rand_string(values: Sequence[str]) -> str:
    """Pick one of the strings; IndexError when there are none."""
    return _rng.choice(values)


def rand_bool(values: Sequence[bool]) -> bool:
    """Pick one of the booleans; IndexError when there are none."""
    return _rng.choice(values)