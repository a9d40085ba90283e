"""
Grid indexer: turn a dataset into the day x time view for one selection.

The grid is recomputed from scratch on every call; nothing is cached and the
dataset is never modified.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..domain.schemas import GuideDataset, GuideRow
from ..shared.types import TimezoneCode
from .time_ordering import sort_times


@dataclass(frozen=True)
class GuideGrid:
    """
    Derived view for a (region, timezone) selection.

    ``days`` are sorted by plain string order of the date label, ``times`` by
    hour/minute. ``cells[day][time]`` lists the rows in that slot in their
    original relative order; every day x time combination is present, possibly
    empty.
    """

    days: list[str] = field(default_factory=list)
    times: list[str] = field(default_factory=list)
    cells: dict[str, dict[str, list[GuideRow]]] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.cells

    def cell(self, day: str, time: str) -> list[GuideRow]:
        return self.cells.get(day, {}).get(time, [])

    def row_count(self) -> int:
        return sum(len(rows) for slots in self.cells.values() for rows in slots.values())

    def to_dict(self) -> dict[str, Any]:
        return {
            "days": list(self.days),
            "times": list(self.times),
            "grid": {
                day: {time: [row.to_document() for row in rows] for time, rows in slots.items()}
                for day, slots in self.cells.items()
            },
        }


def filter_rows(
    dataset: GuideDataset, region: str, timezone: TimezoneCode | str | None
) -> list[GuideRow]:
    """Rows matching both region and timezone, in source order."""
    if timezone is None:
        return []
    try:
        code = TimezoneCode(timezone)
    except ValueError:
        return []
    return [row for row in dataset.rows if row.region == region and row.timezone == code]


def build_grid(
    dataset: GuideDataset, region: str, timezone: TimezoneCode | str | None
) -> GuideGrid:
    """Index the rows of one selection into a day x time grid."""
    rows = filter_rows(dataset, region, timezone)
    if not rows:
        return GuideGrid()

    days = sorted({row.date for row in rows})
    # first-seen order keeps ties like "5:00" vs "05:00" stable
    times = sort_times(dict.fromkeys(row.start_time for row in rows))

    cells: dict[str, dict[str, list[GuideRow]]] = {
        day: {time: [] for time in times} for day in days
    }
    for row in rows:
        cells[row.date][row.start_time].append(row)

    return GuideGrid(days=days, times=times, cells=cells)
