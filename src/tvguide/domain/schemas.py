"""
Pydantic schemas for the persisted guide document.

Field aliases are the exact keys of the JSON document: spreadsheet column
names for rows, camelCase for the dataset envelope.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..shared.types import TimezoneCode


class GuideRow(BaseModel):
    """One broadcast slot as it appears in the schedule sheet."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    region: str = Field(..., min_length=1, alias="Region")
    date: str = Field(..., min_length=1, alias="Date", description='e.g. "Monday, October 6, 2025"')
    start_time: str = Field(..., min_length=1, alias="Start Time")
    end_time: str = Field(..., min_length=1, alias="End Time")
    title: str = Field(..., min_length=1, alias="Title")
    season: int | float | str | None = Field(None, alias="Season")
    episode: int | float | str | None = Field(None, alias="Episode")
    subtitle: str | None = Field(None, alias="Subtitle")
    text_color: str | None = Field(None, alias="Text Color")
    bg_color: str | None = Field(None, alias="BG Color")
    timezone: TimezoneCode = Field(..., alias="Timezone")

    @field_validator(
        "region",
        "date",
        "start_time",
        "end_time",
        "title",
        "subtitle",
        "text_color",
        "bg_color",
        mode="before",
    )
    @classmethod
    def _coerce_text(cls, value: Any) -> Any:
        # Sheets hand back numbers for numeric titles, subtitles and hex colors
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    def to_document(self) -> dict[str, Any]:
        """Serialize with column-name keys, omitting absent optional cells."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class GuideDataset(BaseModel):
    """
    The validated, immutable guide unit.

    Every declared region has a non-empty timezone list. Rows may reference
    regions outside ``regions``; those are tolerated and simply never match a
    selection for a declared region.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    channel_id: str = Field(..., alias="channelId")
    regions: list[str] = Field(default_factory=list)
    timezones_by_region: dict[str, list[TimezoneCode]] = Field(
        default_factory=dict, alias="timezonesByRegion"
    )
    rows: list[GuideRow] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_region_mapping(self) -> GuideDataset:
        if len(set(self.regions)) != len(self.regions):
            raise ValueError(f"regions must be distinct: {self.regions}")
        for region in self.regions:
            if region not in self.timezones_by_region:
                raise ValueError(f"Missing timezone mapping for region: {region}")
            if not self.timezones_by_region[region]:
                raise ValueError(f"Timezone list for region '{region}' is empty")
        return self

    def to_document(self) -> dict[str, Any]:
        """Serialize to the persisted JSON document shape."""
        return {
            "channelId": self.channel_id,
            "regions": list(self.regions),
            "timezonesByRegion": {
                region: [code.value for code in codes]
                for region, codes in self.timezones_by_region.items()
            },
            "rows": [row.to_document() for row in self.rows],
        }
