"""Random flights, airlines, train trips and seats."""

from __future__ import annotations

from .core import number, rand_value


def voyage() -> str:
    """A flight number: an airline code followed by three or four digits."""
    if number(0, 9) % 2 == 0:
        digits = f"{number(1000, 9999):04d}"
    else:
        digits = f"{number(100, 999):03d}"
    return rand_value("flight", "airline_code") + digits


def airline_name() -> str:
    """A random airline name."""
    return rand_value("flight", "airline_name")


def airline_info() -> dict[str, str]:
    """A random airline as {"code": ..., "name": ...}."""
    info = rand_value("flight", "airline_info")
    fields = dict(pair.split("=", 1) for pair in info.split(","))
    return {"code": fields["code"], "name": fields["name"]}


def train_seat() -> str:
    """A train seat: a row and letter, or a plain seat number up to 120."""
    if number(0, 4) % 2 == 0:
        row = number(1, 15)
        return f"{row}{rand_value('seat', 'train')}"
    return str(number(1, 120))


def flight_seat() -> str:
    """A flight seat: a row from 1 to 15 and a seat letter."""
    row = number(1, 15)
    return f"{row}{rand_value('seat', 'flight')}"


def train_trips() -> str:
    """A train number: a class letter (possibly none) and up to four digits."""
    digits = str(number(1, 9999))
    return rand_value("train", "prefix") + digits