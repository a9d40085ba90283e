"""
Hour/minute-aware ordering for time-of-day strings.

Guide times are display strings like "5:00" or "12:30". Plain string order
puts "12:00" before "5:00", so every sort of start times goes through here.
Malformed strings raise TimeParseError rather than sorting somewhere plausible.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..infra.exceptions import TimeParseError


def _is_ascii_number(text: str) -> bool:
    return text.isascii() and text.isdecimal()


def parse_time(value: str) -> tuple[int, int]:
    """Split an "H:MM" string into (hour, minute)."""
    if not isinstance(value, str):
        raise TimeParseError(value, "not a string")
    parts = value.strip().split(":")
    if len(parts) != 2:
        raise TimeParseError(value, "expected exactly one ':'")
    hour_text, minute_text = parts
    if not _is_ascii_number(hour_text) or not _is_ascii_number(minute_text):
        raise TimeParseError(value, "hour and minute must be digits")
    if len(minute_text) != 2:
        raise TimeParseError(value, "minute must be two digits")
    return int(hour_text), int(minute_text)


def time_sort_key(value: str) -> tuple[int, int]:
    return parse_time(value)


def compare_times(a: str, b: str) -> int:
    """Negative if a sorts before b, zero if equal, positive otherwise."""
    a_hour, a_min = parse_time(a)
    b_hour, b_min = parse_time(b)
    if a_hour != b_hour:
        return a_hour - b_hour
    return a_min - b_min


def sort_times(times: Iterable[str]) -> list[str]:
    """Return a new list of time strings in hour/minute order (stable on ties)."""
    return sorted(times, key=time_sort_key)
