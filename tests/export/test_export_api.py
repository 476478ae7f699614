from __future__ import annotations

from dataclasses import replace
from datetime import date, time
from io import BytesIO

import pytest
from openpyxl import load_workbook

from src.volunteer_attendance.volunteer_attendance.attendance.model import CheckInPunch, VolunteerProfile
from src.volunteer_attendance.volunteer_attendance.container import build_services
from src.volunteer_attendance.volunteer_attendance.export.excel_writer import SHEET_NAME
from src.volunteer_attendance.volunteer_attendance.main import create_app


class InMemoryAttendance:
    def __init__(self, volunteers, punches):
        self._volunteers = {v.lotus_id: v for v in volunteers}
        self._punches = list(punches)

    def get_volunteer(self, lotus_id):
        return self._volunteers.get(lotus_id)

    def list_full_attendance_volunteers(self, *, lotus_ids=None):
        return [v for v in self._volunteers.values() if v.require_full_attendance and (not lotus_ids or v.lotus_id in lotus_ids)]

    def list_punches(self, *, start_date, end_date, lotus_ids=None):
        # volunteer_code comes from the volunteer join, like the SQL query
        return [
            replace(p, volunteer_code=self._volunteers[p.lotus_id].volunteer_code)
            for p in self._punches
            if start_date <= p.work_date <= end_date and (not lotus_ids or p.lotus_id in lotus_ids)
        ]

    def punch_exists(self, *, lotus_id, work_date, punch_time):
        return False

    def create_punch(self, *, volunteer, work_date, punch_time):
        return 42


class BrokenAttendance(InMemoryAttendance):
    def list_punches(self, **kwargs):
        raise RuntimeError("db down")


def _punch(lotus_id, name, day, hh, mm):
    return CheckInPunch(punch_id=0, lotus_id=lotus_id, name=name, work_date=date(2025, 11, day), punch_time=time(hh, mm))


@pytest.fixture
def repo():
    return InMemoryAttendance(
        volunteers=[
            VolunteerProfile(lotus_id="L1", name="Li", volunteer_code="SZ001"),
            VolunteerProfile(lotus_id="L2", name="Wang"),
            VolunteerProfile(lotus_id="L9", name="Full", require_full_attendance=True, attendance_tier=6),
        ],
        punches=[
            _punch("L1", "Li", 3, 9, 0),
            _punch("L1", "Li", 3, 19, 30),
            _punch("L2", "Wang", 3, 10, 0),
        ],
    )


@pytest.fixture
def client(repo):
    app = create_app(container=build_services(repo))
    return app.test_client()


def test_tiers_endpoint(client):
    res = client.get("/api/attendance/tiers")

    assert res.status_code == 200
    assert [t["value"] for t in res.get_json()["data"]] == [1, 2, 3, 4, 5, 6]


def test_preview_returns_ordered_clamped_rows(client):
    res = client.get("/api/checkin/export/preview?start=2025-11-03&end=2025-11-03")

    assert res.status_code == 200
    data = res.get_json()["data"]
    assert data["filename"] == "志愿者服务时间统计表_20251103_20251103.xlsx"
    assert data["record_count"] == 3
    assert [(r["name"], r["service_hours"], r["tier"]) for r in data["rows"]] == [
        ("Full", 8, 6),
        ("Li", 8, None),
        ("Wang", 1, None),
    ]
    assert data["rows"][1]["volunteer_code"] == "SZ001"


def test_preview_filters_by_lotus_ids(client):
    res = client.get("/api/checkin/export/preview?start=2025-11-01&end=2025-11-05&lotus_ids=L2,L1")

    rows = res.get_json()["data"]["rows"]
    assert {r["volunteer_id"] for r in rows} == {"L1", "L2"}


def test_export_downloads_workbook(client):
    res = client.get("/api/checkin/export?start=2025-11-03&end=2025-11-03&activity_name=Care")

    assert res.status_code == 200
    assert res.mimetype == "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    assert "attachment" in res.headers["Content-Disposition"]
    ws = load_workbook(BytesIO(res.data))[SHEET_NAME]
    assert ws.max_row == 5
    assert ws["D3"].value == "Care"


def test_export_with_no_records_is_not_an_error(client):
    res = client.get("/api/checkin/export/preview?start=2024-01-01&end=2024-01-01&lotus_ids=L1")

    assert res.status_code == 200
    assert res.get_json()["data"]["rows"] == []


@pytest.mark.parametrize(
    "query",
    [
        "",
        "?start=2025-11-03",
        "?start=2025-13-01&end=2025-11-03",
        "?start=2025-11-05&end=2025-11-03",
    ],
)
def test_export_rejects_bad_ranges(client, query):
    res = client.get(f"/api/checkin/export{query}")

    assert res.status_code == 400
    assert res.get_json()["success"] is False


def test_unexpected_errors_become_500():
    broken = BrokenAttendance(volunteers=[], punches=[])
    client = create_app(container=build_services(broken)).test_client()

    res = client.get("/api/checkin/export/preview?start=2025-11-03&end=2025-11-03")

    assert res.status_code == 500


def test_punch_endpoint(client):
    res = client.post("/api/checkin/punch", json={"lotus_id": "L1"})

    assert res.status_code == 201
    assert res.get_json()["data"]["punch_id"] == 42


def test_punch_unknown_volunteer_is_404(client):
    res = client.post("/api/checkin/punch", json={"lotus_id": "ghost"})
    assert res.status_code == 404


def test_punch_without_body_is_400(client):
    res = client.post("/api/checkin/punch")
    assert res.status_code == 400
