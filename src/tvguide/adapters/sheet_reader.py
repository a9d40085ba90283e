"""
Spreadsheet reader for schedule sheets.

Reads the first worksheet of an Excel workbook (openpyxl) or a CSV file into
a header row plus one mapping per data row. Empty cells are left out of the
row mapping and blank rows are skipped. Excel date and time cells are turned
into the guide's display strings so the rest of the pipeline only sees text.
"""

from __future__ import annotations

import csv
from dataclasses import dataclass, field
from datetime import date, datetime, time
from pathlib import Path
from typing import Any
from zipfile import BadZipFile

import structlog
from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from ..infra.exceptions import SheetReadError
from ..runtime.today import format_date_label
from ..shared.types import COLUMN_EPISODE, COLUMN_SEASON

_log = structlog.get_logger(__name__)

EXCEL_SUFFIXES = {".xlsx", ".xlsm"}
CSV_SUFFIXES = {".csv"}
_EXCEL_TIME_EPOCHS = (date(1899, 12, 30), date(1899, 12, 31))
NUMERIC_COLUMNS = {COLUMN_SEASON, COLUMN_EPISODE}


@dataclass
class SheetData:
    headers: list[str]
    rows: list[dict[str, Any]] = field(default_factory=list)


def normalize_cell(value: Any) -> Any:
    """Convert a raw cell value into the form stored in the guide document."""
    if value is None:
        return None
    if isinstance(value, datetime):
        if value.date() in _EXCEL_TIME_EPOCHS:
            # time-only cells come back anchored on the Excel epoch
            return f"{value.hour}:{value.minute:02d}"
        return format_date_label(value.date())
    if isinstance(value, date):
        return format_date_label(value)
    if isinstance(value, time):
        return f"{value.hour}:{value.minute:02d}"
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


def _rows_to_records(header_cells: list[Any], body: list[list[Any]]) -> SheetData:
    headers = [str(h).strip() if h is not None else "" for h in header_cells]
    records: list[dict[str, Any]] = []
    for cells in body:
        record: dict[str, Any] = {}
        for name, raw in zip(headers, cells):
            if not name:
                continue
            value = normalize_cell(raw)
            if value is not None:
                record[name] = value
        if record:
            records.append(record)
    return SheetData(headers=[h for h in headers if h], rows=records)


def _read_excel(path: Path) -> SheetData:
    try:
        workbook = load_workbook(path, read_only=True, data_only=True)
    except (InvalidFileException, BadZipFile, OSError, ValueError, KeyError) as e:
        raise SheetReadError(f"Cannot open workbook {path}: {e}") from e
    try:
        worksheet = workbook.worksheets[0]
        all_rows = [list(r) for r in worksheet.iter_rows(values_only=True)]
    finally:
        workbook.close()
    if not all_rows:
        raise SheetReadError(f"Worksheet is empty: {path}")
    return _rows_to_records(all_rows[0], all_rows[1:])


def _read_csv(path: Path) -> SheetData:
    with open(path, newline="", encoding="utf-8-sig") as f:
        all_rows = [row for row in csv.reader(f)]
    if not all_rows:
        raise SheetReadError(f"CSV file is empty: {path}")
    headers = [h.strip() for h in all_rows[0]]
    body = [
        [_csv_value(name, cell) for name, cell in zip(headers, row)] for row in all_rows[1:]
    ]
    return _rows_to_records(all_rows[0], body)


def _csv_value(column: str, cell: str) -> Any:
    # only Season and Episode are numeric; colors like 000000 must stay text
    text = cell.strip()
    if column in NUMERIC_COLUMNS and text.isascii() and text.isdecimal():
        return int(text)
    return text


def read_sheet(path: str | Path) -> SheetData:
    """Read the first sheet of ``path``.

    Raises:
        SheetReadError: File missing, unsupported type, or no header row
    """
    sheet_path = Path(path)
    if not sheet_path.is_file():
        raise SheetReadError(f"Excel file not found: {sheet_path}")

    suffix = sheet_path.suffix.lower()
    if suffix in EXCEL_SUFFIXES:
        data = _read_excel(sheet_path)
    elif suffix in CSV_SUFFIXES:
        data = _read_csv(sheet_path)
    else:
        raise SheetReadError(
            f"Unsupported sheet type '{suffix}' for {sheet_path}; "
            f"expected one of {sorted(EXCEL_SUFFIXES | CSV_SUFFIXES)}"
        )

    _log.debug("sheet_read", path=str(sheet_path), headers=data.headers, rows=len(data.rows))
    return data
