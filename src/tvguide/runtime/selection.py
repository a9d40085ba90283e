"""
Selection defaults and timezone availability.

All functions are pure over the dataset and safe to call on every region
change.
"""

from __future__ import annotations

from ..domain.schemas import GuideDataset
from ..shared.types import TimezoneCode

# South Africa is a single-timezone market: only CAT is ever offered there,
# whatever the dataset's mapping declares. This is a fixed rule, there is no
# configuration for further overrides.
SINGLE_TIMEZONE_REGION = "South Africa"
SINGLE_TIMEZONE_CODE = TimezoneCode.CAT


def available_timezones(dataset: GuideDataset, region: str) -> list[TimezoneCode]:
    """Timezones offered for ``region``; empty when the region is unknown."""
    if region == SINGLE_TIMEZONE_REGION:
        return [SINGLE_TIMEZONE_CODE]
    return list(dataset.timezones_by_region.get(region, []))


def default_region(dataset: GuideDataset) -> str | None:
    """First declared region, or None when none are declared."""
    if not dataset.regions:
        return None
    return dataset.regions[0]


def default_timezone(dataset: GuideDataset, region: str) -> TimezoneCode | None:
    """First timezone offered for ``region``, or None."""
    timezones = available_timezones(dataset, region)
    return timezones[0] if timezones else None
