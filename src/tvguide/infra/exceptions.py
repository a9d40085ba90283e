"""
Custom exceptions for tvguide operations.

Build-step errors are fatal and abort the whole conversion. Query-time code
only raises TimeParseError, and only for malformed time strings.
"""

from __future__ import annotations

from collections.abc import Sequence


class TvGuideError(Exception):
    """Base exception for all tvguide errors."""

    pass


class SchemaError(TvGuideError):
    """Raised when a raw sheet is missing a required column or value."""

    def __init__(
        self,
        message: str,
        *,
        missing: str | None = None,
        found: Sequence[str] | None = None,
        row_number: int | None = None,
    ) -> None:
        self.missing = missing
        self.found = list(found) if found is not None else []
        self.row_number = row_number
        super().__init__(message)


class MalformedTimezoneMapError(TvGuideError):
    """Raised when the timezone map payload or a region's entry is not a list."""

    def __init__(self, message: str, *, region: str | None = None) -> None:
        self.region = region
        super().__init__(message)


class InvalidTimezoneError(TvGuideError):
    """Raised when a timezone code falls outside the closed set."""

    def __init__(
        self,
        code: object,
        valid: Sequence[str],
        *,
        region: str | None = None,
        row_number: int | None = None,
    ) -> None:
        self.code = code
        self.valid = list(valid)
        self.region = region
        self.row_number = row_number
        where = ""
        if region is not None:
            where = f" for region '{region}'"
        elif row_number is not None:
            where = f" in row {row_number}"
        super().__init__(
            f"Invalid timezone: {code}{where}. Must be one of: {', '.join(self.valid)}"
        )


class MissingTimezoneMappingError(TvGuideError):
    """Raised when a declared region has no timezone assignment."""

    def __init__(self, region: str) -> None:
        self.region = region
        super().__init__(f"Missing timezone mapping for region: {region}")


class TimeParseError(TvGuideError, ValueError):
    """Raised when a time-of-day string cannot be split into hour and minute."""

    def __init__(self, value: object, reason: str | None = None) -> None:
        self.value = value
        detail = f" ({reason})" if reason else ""
        super().__init__(f"Invalid time of day '{value}'. Expected H:MM{detail}")


class SheetReadError(TvGuideError):
    """Raised when the source spreadsheet cannot be opened or is empty."""

    pass


class DatasetLoadError(TvGuideError):
    """Raised when a persisted guide document cannot be fetched, decoded or validated."""

    pass


class UnknownRegionWarning(UserWarning):
    """Emitted when rows reference a region absent from the declared list."""

    def __init__(self, region: str) -> None:
        self.region = region
        super().__init__(f'Region "{region}" found in data but not in regions list')
