"""
"Today" labels for highlighting the current day column.

Dates in the guide are pre-formatted labels, never parsed. Today is matched
by exact string equality against the same long en-US format.
"""

from __future__ import annotations

from datetime import date, datetime

from ..infra.settings import settings

_WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
_MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def format_date_label(value: date) -> str:
    """Format as "Monday, October 6, 2025" regardless of process locale."""
    return f"{_WEEKDAYS[value.weekday()]}, {_MONTHS[value.month - 1]} {value.day}, {value.year}"


def today_label(now: datetime | date | None = None) -> str:
    """Local machine date as a guide label; no timezone conversion."""
    if now is None:
        now = datetime.now()
    if isinstance(now, datetime):
        now = now.date()
    return format_date_label(now)


def is_today(label: str, today_override: str | None = None) -> bool:
    today = today_override or settings.today_override or today_label()
    return label == today
