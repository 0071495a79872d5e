"""Random network values: addresses, MACs, device ids and passwords."""

from __future__ import annotations

from .core import number, rand_bool, rand_string, rand_value

_HEX = "0123456789ABCDEF"
# The second hex digit of the first octet is always even.
_HEX_EVEN = "02468ACE"
_VENDORS = ("FIBERHOME", "TAIJIXXXX", "MEIYAXXXXX", "ZHAOWUXXX")

_LOWER = "abcdefghijklmnopqrstuvwxyz"
_UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_NUMERIC = "0123456789"
_SPECIAL = "!@#$%&?-_"
_SPACE = " "


def domain_suffix() -> str:
    """A random top-level domain such as com or org."""
    return rand_value("internet", "domain_suffix")


def http_method() -> str:
    """A random HTTP method name."""
    return rand_value("internet", "http_method")


def ipv4_address() -> str:
    """A random IPv4 address with every octet between 2 and 255."""
    return ".".join(str(number(2, 255)) for _ in range(4))


def ipv6_address() -> str:
    """A random IPv6 address under the 2001:cafe prefix."""
    groups = ":".join(f"{number(0, 65535):x}" for _ in range(6))
    return f"2001:cafe:{groups}"


def mac_address(sep: str, upper: bool) -> str:
    """A random MAC address joined by sep, in upper or lower case."""
    octets = [rand_string(_HEX) + rand_string(_HEX_EVEN)]
    octets.extend(rand_string(_HEX) + rand_string(_HEX) for _ in range(5))
    mac = sep.join(octets)
    return mac if upper else mac.lower()


def rand_mac_address() -> str:
    """A MAC address with a random separator and letter case."""
    sep = rand_string(("-", ":"))
    upper = rand_bool((True, False))
    return mac_address(sep, upper)


def device_id() -> str:
    """A capture device id: a vendor tag followed by a MAC without separators."""
    upper = rand_bool((True, False))
    vendor = rand_string(_VENDORS)
    return vendor + mac_address("", upper)


def password(
    lower: bool, upper: bool, numeric: bool, special: bool, space: bool, length: int
) -> str:
    """A random password drawn from the selected character classes.

    With no class selected, lower-case letters and digits are used.
    """
    if length < 0:
        raise ValueError(f"negative password length: {length}")
    classes = (
        (lower, _LOWER),
        (upper, _UPPER),
        (numeric, _NUMERIC),
        (special, _SPECIAL),
        (space, _SPACE),
    )
    pool = "".join(chars for wanted, chars in classes if wanted) or _LOWER + _NUMERIC
    return "".join(rand_string(pool) for _ in range(length))