"""Random colours, car brands and genders in a chosen language."""

from __future__ import annotations

from .core import rand_string, rand_value


def _pick(category: str, langs: tuple[str, ...]) -> str:
    """Pick a language at random, then a value from its word list.

    An unknown language gives ""; no language at all raises IndexError.
    """
    return rand_value(category, rand_string(langs))


def color(*args: str) -> str:
    """A random colour name in one of the given languages (zh_CN, en_US)."""
    return _pick("color", args)


def car_brand(*args: str) -> str:
    """A random car brand in one of the given languages (zh_CN, en_US)."""
    return _pick("carbrand", args)


def gender(*args: str) -> str:
    """A random gender in one of the given languages (zh_CN, en_US)."""
    return _pick("gender", args)