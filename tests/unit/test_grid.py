from __future__ import annotations

from conftest import MONDAY, TUESDAY, make_raw_row

from tvguide.domain.schemas import GuideDataset
from tvguide.runtime.grid import GuideGrid, build_grid, filter_rows
from tvguide.shared.types import TimezoneCode


def _dataset(rows: list[dict]) -> GuideDataset:
    return GuideDataset.model_validate(
        {
            "channelId": "grid",
            "regions": ["A", "B"],
            "timezonesByRegion": {"A": ["CAT", "WAT"], "B": ["WAT", "EST"]},
            "rows": rows,
        }
    )


def test_end_to_end_selection(dataset):
    grid = build_grid(dataset, "A", "CAT")

    assert grid.days == [MONDAY]
    assert grid.times == ["5:30", "6:00"]
    cell = grid.cell(MONDAY, "5:30")
    assert len(cell) == 1
    assert cell[0].title == "Early News"
    assert all(row.region == "A" for rows in grid.cells[MONDAY].values() for row in rows)
    assert "Other Feed" not in [r.title for rows in grid.cells[MONDAY].values() for r in rows]


def test_accepts_enum_timezone(dataset):
    assert build_grid(dataset, "A", TimezoneCode.CAT) == build_grid(dataset, "A", "CAT")


def test_no_match_is_empty_not_error(dataset):
    for region, tz in [("A", "EST"), ("Nowhere", "CAT"), ("A", None), ("A", "PST")]:
        grid = build_grid(dataset, region, tz)
        assert grid == GuideGrid()
        assert grid.days == []
        assert grid.times == []
        assert grid.cells == {}
        assert grid.is_empty


def test_idempotent(dataset):
    first = build_grid(dataset, "A", "CAT")
    second = build_grid(dataset, "A", "CAT")
    assert first == second
    assert first.to_dict() == second.to_dict()


def test_every_combination_initialized():
    ds = _dataset(
        [
            make_raw_row(date=MONDAY, start="8:00"),
            make_raw_row(date=TUESDAY, start="7:00"),
        ]
    )
    grid = build_grid(ds, "A", "CAT")

    assert grid.days == [MONDAY, TUESDAY]
    assert grid.times == ["7:00", "8:00"]
    assert grid.cells[MONDAY]["7:00"] == []
    assert grid.cells[TUESDAY]["8:00"] == []
    assert [r.start_time for r in grid.cells[MONDAY]["8:00"]] == ["8:00"]


def test_shared_slot_keeps_all_rows_in_source_order():
    ds = _dataset(
        [
            make_raw_row(start="20:00", title="First"),
            make_raw_row(start="9:00", title="Breakfast"),
            make_raw_row(start="20:00", title="Second"),
            make_raw_row(start="20:00", title="Third"),
        ]
    )
    grid = build_grid(ds, "A", "CAT")

    assert grid.times == ["9:00", "20:00"]
    assert [r.title for r in grid.cell(MONDAY, "20:00")] == ["First", "Second", "Third"]


def test_completeness_each_matching_row_in_exactly_one_cell():
    rows = [
        make_raw_row(date=d, start=t, title=f"{d[:3]}-{t}", timezone=tz)
        for d in (MONDAY, TUESDAY)
        for t in ("5:00", "12:00", "5:30")
        for tz in ("CAT", "WAT")
    ]
    ds = _dataset(rows)
    grid = build_grid(ds, "A", "WAT")
    matching = filter_rows(ds, "A", "WAT")

    placed = [
        (day, time, row)
        for day, slots in grid.cells.items()
        for time, cell in slots.items()
        for row in cell
    ]
    assert len(placed) == len(matching) == grid.row_count() == 6
    assert sorted(id(row) for _, _, row in placed) == sorted(id(row) for row in matching)
    for day, time, row in placed:
        assert row.date == day
        assert row.start_time == time
        assert row.timezone == TimezoneCode.WAT


def test_days_use_plain_string_order():
    ds = _dataset(
        [
            make_raw_row(date="Wednesday, October 8, 2025"),
            make_raw_row(date=TUESDAY),
            make_raw_row(date=MONDAY),
        ]
    )
    grid = build_grid(ds, "A", "CAT")
    assert grid.days == sorted([MONDAY, TUESDAY, "Wednesday, October 8, 2025"])


def test_rows_in_undeclared_region_only_match_their_own_selection():
    ds = _dataset([make_raw_row(region="Ghost"), make_raw_row(region="A")])
    assert [r.region for r in filter_rows(ds, "A", "CAT")] == ["A"]
    assert [r.region for r in filter_rows(ds, "Ghost", "CAT")] == ["Ghost"]


def test_indexing_leaves_dataset_untouched(dataset):
    before = dataset.to_document()
    build_grid(dataset, "A", "CAT")
    build_grid(dataset, "B", "WAT")
    assert dataset.to_document() == before


def test_to_dict_shape(dataset):
    payload = build_grid(dataset, "A", "CAT").to_dict()
    assert payload["days"] == [MONDAY]
    assert payload["times"] == ["5:30", "6:00"]
    assert payload["grid"][MONDAY]["5:30"][0]["Title"] == "Early News"
    assert payload["grid"][MONDAY]["5:30"][0]["Season"] == 1
