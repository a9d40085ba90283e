"""
Guide view composition.

Combines the selection policy and the grid indexer into the single value a
presentation layer renders: which region and timezone are active, which
timezones can be switched to, the grid itself and the label of today.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from ..domain.schemas import GuideDataset
from ..infra.settings import settings
from ..shared.types import TimezoneCode
from .grid import GuideGrid, build_grid
from .selection import available_timezones, default_region, default_timezone
from .today import is_today, today_label


@dataclass(frozen=True)
class Selection:
    """Active (region, timezone) pair; timezone is None when nothing is offered."""

    region: str | None
    timezone: TimezoneCode | None


@dataclass(frozen=True)
class GuideView:
    selection: Selection
    regions: list[str]
    timezones: list[TimezoneCode]
    grid: GuideGrid
    today: str
    highlight_today: bool = True
    todays: list[str] = field(default_factory=list)

    def is_today(self, day: str) -> bool:
        return self.highlight_today and day in self.todays

    def to_dict(self) -> dict[str, Any]:
        return {
            "region": self.selection.region,
            "timezone": self.selection.timezone.value if self.selection.timezone else None,
            "regions": list(self.regions),
            "timezones": [code.value for code in self.timezones],
            "today": self.today if self.highlight_today else None,
            **self.grid.to_dict(),
        }


def enabled_regions(dataset: GuideDataset, regions_enabled: Sequence[str] | None = None) -> list[str]:
    """Caller's enabled regions when given, else the dataset's declaration order."""
    if regions_enabled:
        return list(regions_enabled)
    return list(dataset.regions)


def resolve_selection(
    dataset: GuideDataset,
    region: str | None = None,
    timezone: TimezoneCode | str | None = None,
) -> Selection:
    """
    Pick the active selection, falling back to the dataset defaults.

    An explicit timezone is kept only when it is offered for the resolved
    region; otherwise the region's default timezone is used.
    """
    active_region = region or default_region(dataset)
    if active_region is None:
        return Selection(region=None, timezone=None)

    offered = available_timezones(dataset, active_region)
    if timezone is not None:
        try:
            code = TimezoneCode(timezone)
        except ValueError:
            code = None
        if code is not None and code in offered:
            return Selection(region=active_region, timezone=code)
    return Selection(region=active_region, timezone=default_timezone(dataset, active_region))


def build_view(
    dataset: GuideDataset,
    selection: Selection,
    *,
    regions_enabled: Sequence[str] | None = None,
    today_override: str | None = None,
    highlight_today: bool = True,
) -> GuideView:
    if selection.region is None:
        grid = GuideGrid()
        timezones: list[TimezoneCode] = []
    else:
        grid = build_grid(dataset, selection.region, selection.timezone)
        timezones = available_timezones(dataset, selection.region)
    today = today_override or settings.today_override or today_label()
    return GuideView(
        selection=selection,
        regions=enabled_regions(dataset, regions_enabled),
        timezones=timezones,
        grid=grid,
        today=today,
        highlight_today=highlight_today,
        todays=[day for day in grid.days if is_today(day, today)],
    )
