"""
Shared types and enums for tvguide.

This module contains the closed timezone set and the spreadsheet column
vocabulary that the domain, usecases and CLI layers agree on.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class TimezoneCode(str, Enum):
    """Closed set of timezone codes a guide row or region may use."""

    WAT = "WAT"
    CAT = "CAT"
    EST = "EST"

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]


# Spreadsheet header names, in the order the schedule sheets declare them.
COLUMN_REGION = "Region"
COLUMN_DATE = "Date"
COLUMN_START_TIME = "Start Time"
COLUMN_END_TIME = "End Time"
COLUMN_TITLE = "Title"
COLUMN_SEASON = "Season"
COLUMN_EPISODE = "Episode"
COLUMN_SUBTITLE = "Subtitle"
COLUMN_TEXT_COLOR = "Text Color"
COLUMN_BG_COLOR = "BG Color"
COLUMN_TIMEZONE = "Timezone"

REQUIRED_COLUMNS: tuple[str, ...] = (
    COLUMN_REGION,
    COLUMN_DATE,
    COLUMN_START_TIME,
    COLUMN_END_TIME,
    COLUMN_TITLE,
    COLUMN_SEASON,
    COLUMN_EPISODE,
    COLUMN_SUBTITLE,
    COLUMN_TEXT_COLOR,
    COLUMN_BG_COLOR,
    COLUMN_TIMEZONE,
)

# Columns that must carry a value on every row (the rest are display-only).
REQUIRED_VALUES: tuple[str, ...] = (
    COLUMN_REGION,
    COLUMN_DATE,
    COLUMN_START_TIME,
    COLUMN_END_TIME,
    COLUMN_TITLE,
)

# Type aliases for raw structures crossing the build boundary
RawRow = dict[str, Any]
TimezoneMap = dict[str, list[TimezoneCode]]
