from __future__ import annotations

from datetime import date, time
from typing import Collection, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, in_placeholders, normalize_mysql_time
from .model import CheckInPunch, VolunteerProfile
from .repository import AttendanceRepository

_VOLUNTEER_COLUMNS = "v.lotus_id, v.volunteer_id, v.name, v.require_full_attendance, v.attendance_tier"


def _to_volunteer(r: dict) -> VolunteerProfile:
    tier = r.get("attendance_tier")
    return VolunteerProfile(
        lotus_id=str(r["lotus_id"]),
        name=r["name"],
        volunteer_code=r.get("volunteer_id"),
        require_full_attendance=bool(r.get("require_full_attendance")),
        attendance_tier=int(tier) if tier is not None else None,
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_volunteer(self, lotus_id: str) -> Optional[VolunteerProfile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_VOLUNTEER_COLUMNS}
                FROM volunteer v
                WHERE v.lotus_id=%s
                """,
                (lotus_id,),
            )
            r = fetchone(cur)
            return _to_volunteer(r) if r else None

    def list_full_attendance_volunteers(self, *, lotus_ids: Optional[Collection[str]] = None) -> Sequence[VolunteerProfile]:
        # Volunteers without a lotus id cannot be matched to punches.
        clauses = ["v.require_full_attendance = 1", "v.lotus_id IS NOT NULL"]
        params: list[object] = []
        if lotus_ids:
            clauses.append(f"v.lotus_id IN ({in_placeholders(lotus_ids)})")
            params.extend(lotus_ids)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_VOLUNTEER_COLUMNS}
                FROM volunteer v
                WHERE {" AND ".join(clauses)}
                ORDER BY v.lotus_id
                """,
                tuple(params),
            )
            return [_to_volunteer(r) for r in fetchall(cur)]

    def list_punches(
        self,
        *,
        start_date: date,
        end_date: date,
        lotus_ids: Optional[Collection[str]] = None,
    ) -> Sequence[CheckInPunch]:
        clauses = ["c.date BETWEEN %s AND %s"]
        params: list[object] = [start_date, end_date]
        if lotus_ids:
            clauses.append(f"c.lotus_id IN ({in_placeholders(lotus_ids)})")
            params.extend(lotus_ids)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT c.id, c.lotus_id, c.name, c.date, c.check_in, v.volunteer_id
                FROM volunteer_checkin c
                JOIN volunteer v ON v.id = c.user_id
                WHERE {" AND ".join(clauses)}
                ORDER BY c.lotus_id, c.date, c.check_in
                """,
                tuple(params),
            )
            return [
                CheckInPunch(
                    punch_id=int(r["id"]),
                    lotus_id=str(r["lotus_id"]),
                    name=r["name"],
                    work_date=r["date"],
                    punch_time=normalize_mysql_time(r["check_in"]),
                    volunteer_code=r.get("volunteer_id"),
                )
                for r in fetchall(cur)
            ]

    def punch_exists(self, *, lotus_id: str, work_date: date, punch_time: time) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT 1 AS hit
                FROM volunteer_checkin
                WHERE lotus_id=%s AND date=%s AND check_in=%s
                LIMIT 1
                """,
                (lotus_id, work_date, punch_time),
            )
            return fetchone(cur) is not None

    def create_punch(self, *, volunteer: VolunteerProfile, work_date: date, punch_time: time) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO volunteer_checkin(user_id, lotus_id, name, date, check_in)
                SELECT v.id, v.lotus_id, v.name, %s, %s
                FROM volunteer v
                WHERE v.lotus_id=%s
                """,
                (work_date, punch_time, volunteer.lotus_id),
            )
            return int(cur.lastrowid)
