"""Mobile network identifiers: IMSI, IMEI and MEID."""

from __future__ import annotations

from collections.abc import Sequence

from .core import number, rand_bool, rand_string

_MCC_CHINA = "460"
_MNCS = ("00", "01", "02", "03", "04", "05", "06", "07", "08", "09", "10", "20")
_TAC_PREFIXES = ("86", "35", "01")


def imsi() -> str:
    """A 15-digit Chinese IMSI: MCC 460, a network code and a 10-digit MSIN."""
    mnc = rand_string(_MNCS)
    msin = f"{number(1, 9_999_999_999):010d}"
    return _MCC_CHINA + mnc + msin


def imei() -> str:
    """A 15-digit IMEI: 8-digit TAC, 6-digit serial and a Luhn check digit."""
    tac = rand_string(_TAC_PREFIXES) + f"{number(1, 999_999):06d}"
    serial = f"{number(1, 999_999):06d}"
    body = tac + serial
    return body + str(luhn([int(ch) for ch in body]))


def meid(letter_type: bool) -> str:
    """A 14-hex-digit MEID; letter_type True keeps lower case, False upper case."""
    value = (
        f"{number(160, 255):02x}"
        f"{number(0, 16_777_215):06x}"
        f"{number(0, 16_777_215):06x}"
    )
    return value if letter_type else value.upper()


def rand_meid() -> str:
    """An MEID in random letter case."""
    return meid(rand_bool((True, False)))


def luhn(digits: Sequence[int]) -> int:
    """The Luhn check digit for the given digits."""
    padded = [*digits, 0]
    total = 0
    for position, digit in enumerate(padded):
        if position % 2:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return total * 9 % 10