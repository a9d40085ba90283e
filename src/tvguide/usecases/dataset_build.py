"""
Guide dataset assembly.

Turns schema-checked sheet rows, a declared region list and a declared
region -> timezone map into a GuideDataset, and persists it. Every failure is
fatal and raised before anything is written; unknown regions in the rows are
only warned about.
"""

from __future__ import annotations

import json
import os
import tempfile
import warnings
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import structlog
from pydantic import ValidationError

from ..adapters.sheet_reader import read_sheet
from ..domain.schemas import GuideDataset, GuideRow
from ..infra.exceptions import (
    InvalidTimezoneError,
    MalformedTimezoneMapError,
    MissingTimezoneMappingError,
    SchemaError,
    UnknownRegionWarning,
)
from ..shared.types import COLUMN_TIMEZONE, TimezoneCode, TimezoneMap
from .schema_validate import validate_columns

_log = structlog.get_logger(__name__)


@dataclass
class ConversionSummary:
    """What a conversion produced, for reporting on stdout."""

    source: str
    out: str
    channel_id: str
    row_count: int
    regions: list[str]
    timezones_by_region: dict[str, list[str]]
    unknown_regions: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "source": self.source,
            "out": self.out,
            "channelId": self.channel_id,
            "rows": self.row_count,
            "regions": self.regions,
            "timezonesByRegion": self.timezones_by_region,
            "unknownRegions": self.unknown_regions,
        }

    def lines(self) -> list[str]:
        assignments = "; ".join(
            f"{region}: {','.join(codes)}" for region, codes in self.timezones_by_region.items()
        )
        return [
            f"Successfully converted {self.source} to {self.out}",
            f"Processed {self.row_count} rows",
            f"Regions: {', '.join(self.regions)}",
            f"Timezones: {assignments}",
        ]


def parse_regions(regions: str | Sequence[str]) -> list[str]:
    """Parse a comma-delimited region list into trimmed, distinct, non-empty names."""
    items = regions.split(",") if isinstance(regions, str) else list(regions)
    names = [str(item).strip() for item in items]
    parsed = list(dict.fromkeys(name for name in names if name))
    if not parsed:
        raise SchemaError("Region list is empty")
    return parsed


def parse_timezone_map(payload: str | Mapping[str, Any]) -> TimezoneMap:
    """Parse and check the region -> timezone-codes payload.

    Raises:
        MalformedTimezoneMapError: Payload is not a JSON object or an entry is not a list
        InvalidTimezoneError: A code falls outside the closed timezone set
    """
    if isinstance(payload, str):
        try:
            parsed = json.loads(payload)
        except json.JSONDecodeError as e:
            raise MalformedTimezoneMapError(f"Invalid timezone map JSON: {e}") from e
    else:
        parsed = payload

    if not isinstance(parsed, Mapping):
        raise MalformedTimezoneMapError(
            f"Timezone map must be a JSON object, got {type(parsed).__name__}"
        )

    valid = TimezoneCode.values()
    result: TimezoneMap = {}
    for region, codes in parsed.items():
        if not isinstance(codes, list):
            raise MalformedTimezoneMapError(
                f"Timezone map for {region} must be an array", region=str(region)
            )
        for code in codes:
            if code not in valid:
                raise InvalidTimezoneError(code, valid, region=str(region))
        result[str(region)] = [TimezoneCode(code) for code in codes]
    return result


def validate_row(raw: Mapping[str, Any], row_number: int) -> GuideRow:
    """Validate one raw sheet row; ``row_number`` is 1-based over data rows."""
    try:
        return GuideRow.model_validate(dict(raw))
    except ValidationError as e:
        first = e.errors()[0]
        column = str(first["loc"][0]) if first.get("loc") else "?"
        if column == COLUMN_TIMEZONE and first["type"] != "missing":
            raise InvalidTimezoneError(
                raw.get(COLUMN_TIMEZONE), TimezoneCode.values(), row_number=row_number
            ) from e
        raise SchemaError(
            f"Row {row_number}: invalid value for column '{column}': {first['msg']}",
            missing=column,
            found=list(raw.keys()),
            row_number=row_number,
        ) from e


def find_unknown_regions(rows: Iterable[GuideRow], declared: Sequence[str]) -> list[str]:
    """Regions referenced by rows but absent from ``declared``, first-seen order."""
    seen = dict.fromkeys(row.region for row in rows)
    return [region for region in seen if region not in declared]


def build_dataset(
    rows: Iterable[Mapping[str, Any] | GuideRow],
    *,
    channel_id: str,
    regions: str | Sequence[str],
    timezone_map: str | Mapping[str, Any],
) -> GuideDataset:
    """
    Assemble a GuideDataset from checked rows and the caller's declarations.

    Rows are carried through in source order. Rows in undeclared regions emit
    an UnknownRegionWarning and are kept.

    Raises:
        MalformedTimezoneMapError, InvalidTimezoneError: Bad timezone map
        SchemaError, InvalidTimezoneError: A row fails validation
        MissingTimezoneMappingError: A declared region has no timezones
    """
    timezones_by_region = parse_timezone_map(timezone_map)
    region_list = parse_regions(regions)

    guide_rows = [
        row if isinstance(row, GuideRow) else validate_row(row, index)
        for index, row in enumerate(rows, start=1)
    ]

    for region in find_unknown_regions(guide_rows, region_list):
        _log.warning("unknown_region", region=region, channel_id=channel_id)
        warnings.warn(UnknownRegionWarning(region), stacklevel=2)

    for region in region_list:
        if not timezones_by_region.get(region):
            raise MissingTimezoneMappingError(region)

    dataset = GuideDataset(
        channel_id=channel_id,
        regions=region_list,
        timezones_by_region=timezones_by_region,
        rows=guide_rows,
    )
    _log.info(
        "dataset_built",
        channel_id=channel_id,
        rows=len(guide_rows),
        regions=region_list,
    )
    return dataset


def write_dataset(dataset: GuideDataset, out: str | Path) -> Path:
    """Write the persisted document atomically, creating parent directories."""
    out_path = Path(out)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(prefix=f".{out_path.name}.", dir=out_path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(dataset.to_document(), f, indent=2, ensure_ascii=False)
            f.write("\n")
        os.replace(tmp_name, out_path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    return out_path


def convert_sheet(
    excel: str | Path,
    *,
    channel_id: str,
    regions: str | Sequence[str],
    timezone_map: str | Mapping[str, Any],
    out: str | Path,
) -> ConversionSummary:
    """Read, check, build and persist; nothing is written unless every step passes."""
    sheet = read_sheet(excel)
    validate_columns(sheet.headers)

    dataset = build_dataset(
        sheet.rows,
        channel_id=channel_id,
        regions=regions,
        timezone_map=timezone_map,
    )
    out_path = write_dataset(dataset, out)
    _log.info("dataset_written", out=str(out_path), rows=len(dataset.rows))

    return ConversionSummary(
        source=str(excel),
        out=str(out_path),
        channel_id=dataset.channel_id,
        row_count=len(dataset.rows),
        regions=list(dataset.regions),
        timezones_by_region=dataset.to_document()["timezonesByRegion"],
        unknown_regions=find_unknown_regions(dataset.rows, dataset.regions),
    )
