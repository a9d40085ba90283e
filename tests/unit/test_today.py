from __future__ import annotations

from datetime import date, datetime

from tvguide.runtime import today as today_mod
from tvguide.runtime.today import format_date_label, is_today, today_label


def test_format_has_no_zero_padding():
    assert format_date_label(date(2025, 10, 6)) == "Monday, October 6, 2025"
    assert format_date_label(date(2026, 1, 1)) == "Thursday, January 1, 2026"


def test_today_label_accepts_datetime():
    assert today_label(datetime(2025, 12, 25, 23, 59)) == "Thursday, December 25, 2025"


def test_is_today_uses_override():
    assert is_today("Monday, October 6, 2025", "Monday, October 6, 2025")
    assert not is_today("Tuesday, October 7, 2025", "Monday, October 6, 2025")


def test_is_today_is_exact_string_match():
    assert not is_today("monday, october 6, 2025", "Monday, October 6, 2025")


def test_is_today_falls_back_to_settings(monkeypatch):
    monkeypatch.setattr(today_mod.settings, "today_override", "Friday, October 10, 2025")
    assert is_today("Friday, October 10, 2025")


def test_is_today_defaults_to_machine_date(monkeypatch):
    monkeypatch.setattr(today_mod.settings, "today_override", None)
    assert is_today(today_label())
