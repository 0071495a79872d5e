"""Random browser user-agent strings."""

from __future__ import annotations

from .core import rand_int_range, rand_string, rand_value
from .dates import date


def _linux_platform() -> str:
    return "X11; Linux " + rand_value("computer", "linux_processor")


def _mac_platform() -> str:
    processor = rand_value("computer", "mac_processor")
    return (
        f"Macintosh; {processor} Mac OS X 10_"
        f"{rand_int_range(5, 9)}_{rand_int_range(0, 10)}"
    )


def _windows_platform() -> str:
    return rand_value("computer", "windows_platform")


def _random_platform() -> str:
    platforms = [_linux_platform(), _mac_platform(), _windows_platform()]
    return rand_string(platforms)


def user_agent() -> str:
    """A user agent of a randomly chosen browser."""
    generators = (
        chrome_user_agent,
        firefox_user_agent,
        safari_user_agent,
        opera_user_agent,
        chrome_user_agent,
    )
    return generators[rand_int_range(0, 4)]()


def chrome_user_agent() -> str:
    """A random Chrome user agent."""
    webkit = f"{rand_int_range(531, 536)}{rand_int_range(0, 2)}"
    major = rand_int_range(36, 40)
    build = rand_int_range(800, 899)
    return (
        f"Mozilla/5.0 ({_random_platform()}) AppleWebKit/{webkit} "
        f"(KHTML, like Gecko) Chrome/{major}.0.{build}.0 Mobile Safari/{webkit}"
    )


def firefox_user_agent() -> str:
    """A random Firefox user agent; the Gecko date is written year-day-month."""
    moment = date()
    gecko = f"{moment.year:04d}-{moment.day:02d}-{moment.month:02d}"
    ver = f"Gecko/{gecko} Firefox/{rand_int_range(35, 37)}.0"
    platforms = [
        f"({_windows_platform()}; en-US; rv:1.9.{rand_int_range(0, 3)}.20) {ver}",
        f"({_linux_platform()}; rv:{rand_int_range(5, 8)}.0) {ver}",
        f"({_mac_platform()} rv:{rand_int_range(2, 7)}.0) {ver}",
    ]
    return "Mozilla/5.0 " + rand_string(platforms)


def safari_user_agent() -> str:
    """A random Safari user agent, desktop or mobile."""
    webkit = f"{rand_int_range(531, 536)}.{rand_int_range(1, 51)}.{rand_int_range(1, 8)}"
    ver = f"{rand_int_range(4, 6)}.{rand_int_range(0, 2)}"
    mobile_devices = ("iPhone; CPU iPhone OS", "iPad; CPU OS")

    windows = (
        f"(Windows; U; {_windows_platform()}) AppleWebKit/{webkit} "
        f"(KHTML, like Gecko) Version/{ver} Safari/{webkit}"
    )
    mac = (
        f"({_mac_platform()} rv:{rand_int_range(4, 7)}.0; en-US) AppleWebKit/{webkit} "
        f"(KHTML, like Gecko) Version/{ver} Safari/{webkit}"
    )
    device = rand_string(mobile_devices)
    os_version = f"{rand_int_range(7, 9)}_{rand_int_range(0, 3)}_{rand_int_range(1, 3)}"
    mobile_version = rand_int_range(3, 5)
    mobile_build = rand_int_range(111, 120)
    mobile = (
        f"({device} {os_version} like Mac OS X; en-US) AppleWebKit/{webkit} "
        f"(KHTML, like Gecko) Version/{mobile_version}.0.5 Mobile/8B{mobile_build} "
        f"Safari/6{webkit}"
    )
    return "Mozilla/5.0 " + rand_string([windows, mac, mobile])


def opera_user_agent() -> str:
    """A random Opera user agent."""
    platform = (
        f"({_random_platform()}; en-US) Presto/2.{rand_int_range(8, 13)}."
        f"{rand_int_range(160, 355)} Version/{rand_int_range(10, 13)}.00"
    )
    return f"Opera/{rand_int_range(8, 10)}.{rand_int_range(10, 99)} {platform}"