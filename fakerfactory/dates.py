"""Random dates, times, birthdays and ages."""

from __future__ import annotations

import calendar
import time
from datetime import datetime, timedelta, timezone

from .core import number

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
_WEEKDAYS = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")
_LONG_MONTHS = frozenset({1, 3, 5, 7, 8, 10, 12})
_MAX_AGE = 105


def now_timestamp() -> str:
    """Current time in whole Unix seconds."""
    return str(int(time.time()))


def now_date() -> str:
    """Current local time as YYYYMMDD,hh:mm:ss."""
    return datetime.now().strftime("%Y%m%d,%H:%M:%S")


def _normalised(
    year_: int, month_: int, day_: int, hour_: int, minute_: int, second_: int, nanos: int
) -> datetime:
    """Build a UTC datetime, letting out-of-range months and days roll over."""
    years, month_index = divmod(year_ * 12 + month_ - 1, 12)
    base = datetime(years, month_index + 1, 1, tzinfo=timezone.utc)
    return base + timedelta(
        days=day_ - 1,
        hours=hour_,
        minutes=minute_,
        seconds=second_,
        microseconds=nanos // 1000,
    )


def date() -> datetime:
    """A random UTC datetime."""
    year_ = year()
    month_ = number(0, 12)
    day_ = day()
    hour_ = hour()
    minute_ = minute()
    second_ = second()
    nanos = nanosecond()
    return _normalised(year_, month_, day_, hour_, minute_, second_, nanos)


def _to_nanoseconds(moment: datetime) -> int:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    delta = moment - _EPOCH
    return (delta.days * 86_400 + delta.seconds) * 1_000_000_000 + delta.microseconds * 1_000


def date_range(start: datetime, end: datetime) -> datetime:
    """A random UTC datetime between start and end; naive inputs are read as UTC."""
    nanos = number(_to_nanoseconds(start), _to_nanoseconds(end))
    return _EPOCH + timedelta(microseconds=nanos // 1000)


def month() -> str:
    """A random English month name."""
    return _MONTHS[number(1, 12) - 1]


def day() -> int:
    return number(1, 31)


def week_day() -> str:
    """A random English weekday name."""
    return _WEEKDAYS[number(0, 6)]


def year() -> int:
    """A random year from 1900 to the current year."""
    return number(1900, datetime.now().year)


def hour() -> int:
    return number(0, 23)


def minute() -> int:
    return number(0, 59)


def second() -> int:
    return number(0, 59)


def nanosecond() -> int:
    return number(0, 999_999_999)


def birthday() -> str:
    """A random birth date as YYYYMMDD within the last 105 years."""
    this_year = datetime.now().year
    year_ = number(this_year - _MAX_AGE, this_year)
    month_ = number(1, 12)
    if month_ in _LONG_MONTHS:
        last_day = 31
    elif month_ == 2:
        last_day = 28 if calendar.isleap(year_) else 29
    else:
        last_day = 30
    return f"{year_}{month_:02d}{number(1, last_day):02d}"


def age() -> str:
    """A random age from 0 to 105."""
    return str(number(0, _MAX_AGE))