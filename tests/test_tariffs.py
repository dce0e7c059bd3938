"""Persisted tariff rows → domain periods → plan validation."""

import logging

import pytest

from batteryiq import exceptions
from batteryiq.config import CoverageConfig
from batteryiq.tariffs import (
    TimeWindowModel,
    parse_time_windows,
    periods_from_records,
    validate_plan,
)
from batteryiq.types import TimeWindow


def test_parse_time_windows_from_json_list():
    raw = [{"days": ["mon", "TUE"], "startTime": "07:00", "endTime": "00:00"}]
    out = parse_time_windows(raw)
    assert out == [TimeWindow(["MON", "TUE"], "07:00", "00:00")]


@pytest.mark.parametrize("raw", [None, {}, "07:00-22:00", 42])
def test_parse_time_windows_non_list_is_empty(raw):
    assert parse_time_windows(raw) == []


@pytest.mark.parametrize("bad", ["7:00", "25:00", "12:60", "24:30", "noon"])
def test_time_window_rejects_malformed_times(bad):
    with pytest.raises(exceptions.TariffError):
        parse_time_windows([{"days": ["MON"], "startTime": bad, "endTime": "12:00"}])


def test_time_window_accepts_24_00_and_rejects_unknown_day():
    w = TimeWindowModel.model_validate(
        {"days": ["SUN"], "startTime": "18:00", "endTime": "24:00"}
    )
    assert w.to_window().end == "24:00"
    with pytest.raises(exceptions.TariffError, match="Invalid time window"):
        parse_time_windows([{"days": ["XYZ"], "startTime": "00:00", "endTime": "01:00"}])


def test_periods_from_records_orders_by_sequence(tou_records):
    periods = periods_from_records(tou_records)
    assert [p.name for p in periods] == ["Peak", "Shoulder", "Off-Peak"]
    # 'price' is accepted as the rate column
    assert periods[1].rate == pytest.approx(0.30)
    assert periods[2].time_windows[0].end == "00:00"


def test_periods_from_records_null_windows():
    periods = periods_from_records([{"name": "Anytime", "rate": 0.3, "timeWindows": None}])
    assert periods[0].time_windows == []


def test_periods_from_records_invalid_row():
    with pytest.raises(exceptions.TariffError, match="#0"):
        periods_from_records([{"name": "No rate"}])


def test_validate_plan_clean(tou_records, caplog):
    with caplog.at_level(logging.WARNING, logger="batteryiq"):
        out = validate_plan(tou_records, strict=True)
    assert out.fully_covered
    assert caplog.records == []


def test_validate_plan_logs_and_strict_raises(tou_records, caplog):
    records = [r for r in tou_records if r["name"] != "Peak"]
    with caplog.at_level(logging.WARNING, logger="batteryiq"):
        out = validate_plan(records)
    assert not out.fully_covered
    assert {(g.start_time, g.end_time) for g in out.gaps} == {("16:00", "21:00")}
    assert "7 gap(s)" in caplog.text

    with pytest.raises(exceptions.CoverageError):
        validate_plan(records, strict=True)
    # config can relax strict mode
    validate_plan(records, strict=True, config=CoverageConfig(require_full_coverage=False))


def test_periods_from_records_keeps_type(tou_records):
    periods = periods_from_records(tou_records)
    assert [p.period_type for p in periods] == ["PEAK", "SHOULDER", "OFF_PEAK"]


def test_validate_plan_overlap_only_is_not_called_incomplete(tou_records, caplog):
    records = tou_records + [
        {
            "name": "Demand",
            "rate": 0.60,
            "timeWindows": [{"days": ["MON"], "startTime": "12:00", "endTime": "13:00"}],
        }
    ]
    with caplog.at_level(logging.WARNING, logger="batteryiq"):
        out = validate_plan(records)
    assert out.fully_covered
    assert "overlapping rates: 1 overlap(s)" in caplog.text
    assert "incomplete" not in caplog.text
