from __future__ import annotations

from datetime import date, datetime

import pytest

from src.volunteer_attendance.volunteer_attendance.attendance.model import AttendanceRecord
from src.volunteer_attendance.volunteer_attendance.core.enums import RecordSource
from src.volunteer_attendance.volunteer_attendance.core.exceptions import InvalidTimeRange
from src.volunteer_attendance.volunteer_attendance.export import assembler
from src.volunteer_attendance.volunteer_attendance.export.assembler import (
    build_report,
    default_activity_name,
    export_filename,
)
from src.volunteer_attendance.volunteer_attendance.export.model import ExportFilters

NOV = ExportFilters(start_date=date(2025, 11, 1), end_date=date(2025, 11, 30))


def _record(lotus_id, name, day, start, end, *, tier=None, code=None):
    return AttendanceRecord(
        volunteer_id=lotus_id,
        name=name,
        work_date=date(2025, 11, day),
        check_in=datetime(2025, 11, day, *start),
        check_out=datetime(2025, 11, day, *end),
        volunteer_code=code,
        tier=tier,
        source=RecordSource.FULL_ATTENDANCE if tier else RecordSource.ACTUAL,
    )


def test_empty_input_gives_empty_report():
    assert build_report([], NOV) == []
    assert build_report([], ExportFilters(date(2025, 1, 1), date(2025, 1, 1), frozenset({"x"}), "act")) == []


def test_rows_ordered_by_date_then_name_and_numbered():
    records = [
        _record("L2", "Zhang", 2, (9, 0), (10, 0)),
        _record("L1", "Wang", 2, (9, 0), (10, 0)),
        _record("L3", "Li", 1, (9, 0), (10, 0)),
    ]

    rows = build_report(records, NOV)

    assert [(r.index, r.service_date.day, r.name) for r in rows] == [(1, 1, "Li"), (2, 2, "Wang"), (3, 2, "Zhang")]


def test_hours_are_clamped_and_rounded():
    rows = build_report(
        [
            _record("L1", "A", 1, (9, 0), (21, 0)),
            _record("L1", "A", 2, (9, 0), (11, 20)),
        ],
        NOV,
        max_hours=8,
    )

    assert [r.service_hours for r in rows] == [8, 2.3]
    assert (rows[0].check_in, rows[0].check_out) == ("09:00", "21:00")


def test_date_range_and_volunteer_filters_apply():
    records = [
        _record("L1", "A", 1, (9, 0), (10, 0)),
        _record("L2", "B", 1, (9, 0), (10, 0)),
        _record("L1", "A", 30, (9, 0), (10, 0)),
    ]
    filters = ExportFilters(start_date=date(2025, 11, 1), end_date=date(2025, 11, 15), volunteer_ids=frozenset({"L1"}))

    rows = build_report(records, filters)

    assert [(r.volunteer_id, r.service_date.day) for r in rows] == [("L1", 1)]


def test_tier_attached_only_for_tiered_records(monkeypatch):
    calls = []
    real = assembler.resolve_tier
    monkeypatch.setattr(assembler, "resolve_tier", lambda n: calls.append(n) or real(n))

    rows = build_report(
        [
            _record("L1", "A", 1, (8, 0), (20, 0), tier=6),
            _record("L1", "A", 2, (8, 0), (20, 0), tier=6),
            _record("L2", "B", 1, (9, 0), (10, 0)),
        ],
        NOV,
    )

    assert [r.tier.tier if r.tier else None for r in rows] == [6, None, 6]
    assert rows[0].service_hours == 8
    assert calls == [6]


def test_invalid_range_is_skipped_by_default():
    rows = build_report(
        [_record("L1", "A", 1, (17, 0), (9, 0)), _record("L2", "B", 1, (9, 0), (10, 0))],
        NOV,
    )
    assert [(r.index, r.volunteer_id) for r in rows] == [(1, "L2")]


def test_invalid_range_can_abort_the_export():
    with pytest.raises(InvalidTimeRange):
        build_report([_record("L1", "A", 1, (17, 0), (9, 0))], NOV, skip_invalid=False)


def test_activity_name_defaults_from_range_and_can_be_overridden():
    [row] = build_report([_record("L1", "A", 1, (9, 0), (10, 0))], NOV)
    assert row.activity_name == "2025.1101.1130生命关怀"

    custom = ExportFilters(NOV.start_date, NOV.end_date, activity_name=" Temple day ")
    [row] = build_report([_record("L1", "A", 1, (9, 0), (10, 0))], custom)
    assert row.activity_name == "Temple day"


def test_volunteer_code_falls_back_to_lotus_id():
    rows = build_report(
        [_record("L1", "A", 1, (9, 0), (10, 0), code="SZ001"), _record("L2", "B", 1, (9, 0), (10, 0))],
        NOV,
    )
    assert [r.display_code for r in rows] == ["SZ001", "L2"]


def test_filename_and_activity_helpers():
    assert export_filename(date(2025, 11, 1), date(2025, 11, 30)) == "志愿者服务时间统计表_20251101_20251130.xlsx"
    assert default_activity_name(date(2025, 1, 5), date(2025, 2, 4), "") == "2025.0105.0204"


def test_quarter_hours_round_half_up():
    rows = build_report(
        [
            _record("L1", "A", 1, (9, 0), (16, 15)),
            _record("L1", "A", 2, (9, 0), (11, 15)),
            _record("L1", "A", 3, (9, 0), (9, 15)),
        ],
        NOV,
    )
    assert [r.service_hours for r in rows] == [7.3, 2.3, 0.3]
