"""
Global test configuration for tvguide.

Provides guide rows, datasets and sheet-writing helpers shared by the unit and
contract tests.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure the project src directory is importable without relying on external environment.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from tvguide.domain.schemas import GuideDataset  # noqa: E402
from tvguide.shared.types import REQUIRED_COLUMNS  # noqa: E402

MONDAY = "Monday, October 6, 2025"
TUESDAY = "Tuesday, October 7, 2025"


def make_raw_row(
    region: str = "A",
    date: str = MONDAY,
    start: str = "6:00",
    end: str = "6:30",
    title: str = "Morning Show",
    timezone: str = "CAT",
    **extra,
) -> dict:
    row = {
        "Region": region,
        "Date": date,
        "Start Time": start,
        "End Time": end,
        "Title": title,
        "Timezone": timezone,
    }
    row.update(extra)
    return row


@pytest.fixture
def raw_rows() -> list[dict]:
    """Two A/CAT rows out of time order plus one B/WAT row."""
    return [
        make_raw_row(start="6:00", end="6:30", title="Morning Show"),
        make_raw_row(start="5:30", end="6:00", title="Early News", Season=1, Episode=4),
        make_raw_row(region="B", timezone="WAT", start="5:30", end="6:00", title="Other Feed"),
    ]


@pytest.fixture
def dataset(raw_rows) -> GuideDataset:
    return GuideDataset.model_validate(
        {
            "channelId": "test-channel",
            "regions": ["A", "B"],
            "timezonesByRegion": {"A": ["CAT"], "B": ["WAT", "EST"]},
            "rows": raw_rows,
        }
    )


@pytest.fixture
def write_xlsx(tmp_path):
    """Write rows to a one-sheet workbook and return its path."""
    from openpyxl import Workbook

    def _write(rows: list[dict], headers: list[str] | None = None, name: str = "guide.xlsx") -> Path:
        cols = list(headers if headers is not None else REQUIRED_COLUMNS)
        wb = Workbook()
        ws = wb.active
        ws.append(cols)
        for row in rows:
            ws.append([row.get(col) for col in cols])
        path = tmp_path / name
        wb.save(path)
        return path

    return _write


@pytest.fixture(autouse=True)
def _reset_logging():
    """Drop the CLI's stderr handler so later tests never write to a closed stream."""
    yield
    import logging

    import structlog

    from tvguide.infra.logging import HANDLER_NAME

    root = logging.getLogger()
    root.handlers[:] = [h for h in root.handlers if h.get_name() != HANDLER_NAME]
    structlog.reset_defaults()
    root.setLevel(logging.WARNING)
