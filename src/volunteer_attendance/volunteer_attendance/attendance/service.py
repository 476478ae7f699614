from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Collection, Iterable, Optional, Sequence

from ..common.datetime_utils import iter_dates, now_local
from ..common.logging import get_logger
from ..common.validators import require_date_range, require_non_empty
from ..core.constants import SINGLE_PUNCH_HOURS
from ..core.enums import RecordSource
from ..core.exceptions import ConflictError, NotFoundError
from ..tiers.table import resolve_tier
from .model import AttendanceRecord, CheckInPunch, VolunteerProfile
from .repository import AttendanceRepository

logger = get_logger("attendance")


def collapse_punches(
    punches: Iterable[CheckInPunch],
    *,
    single_punch_hours: float = SINGLE_PUNCH_HOURS,
) -> list[AttendanceRecord]:
    """Turn raw punches into one record per volunteer and day.

    First punch of the day is the check-in, last punch the check-out. A day
    with a single punch is credited single_punch_hours.
    """
    grouped: dict[tuple[str, date], list[CheckInPunch]] = {}
    for p in punches:
        grouped.setdefault((p.lotus_id, p.work_date), []).append(p)

    records: list[AttendanceRecord] = []
    for (lotus_id, work_date), day in grouped.items():
        day.sort(key=lambda p: p.punch_time)
        first, last = day[0], day[-1]

        check_in = datetime.combine(work_date, first.punch_time)
        if len(day) == 1:
            check_out = check_in + timedelta(hours=single_punch_hours)
        else:
            check_out = datetime.combine(work_date, last.punch_time)

        records.append(
            AttendanceRecord(
                volunteer_id=lotus_id,
                name=first.name,
                work_date=work_date,
                check_in=check_in,
                check_out=check_out,
                volunteer_code=first.volunteer_code,
            )
        )
    return records


def full_attendance_records(
    volunteers: Iterable[VolunteerProfile],
    *,
    start: date,
    end: date,
) -> list[AttendanceRecord]:
    """Generate a tier-window record for every flagged volunteer on every day of the range."""
    records: list[AttendanceRecord] = []
    for v in volunteers:
        tier = resolve_tier(v.attendance_tier)
        for day in iter_dates(start, end):
            records.append(
                AttendanceRecord(
                    volunteer_id=v.lotus_id,
                    name=v.name,
                    work_date=day,
                    check_in=datetime.combine(day, tier.expected_check_in),
                    check_out=datetime.combine(day, tier.expected_check_out),
                    volunteer_code=v.volunteer_code,
                    tier=tier.tier,
                    source=RecordSource.FULL_ATTENDANCE,
                )
            )
    return records


def merge_records(
    actual: Iterable[AttendanceRecord],
    generated: Sequence[AttendanceRecord],
) -> list[AttendanceRecord]:
    """Generated full-attendance days replace actual punches for the same volunteer and day."""
    covered = {(r.volunteer_id, r.work_date) for r in generated}
    kept = [r for r in actual if (r.volunteer_id, r.work_date) not in covered]
    return kept + list(generated)


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        single_punch_hours: float = SINGLE_PUNCH_HOURS,
    ):
        self._attendance = attendance
        self._single_punch_hours = float(single_punch_hours)

    def record_punch(self, lotus_id: str, *, now: datetime | None = None) -> int:
        lotus_id = require_non_empty(lotus_id, "lotus_id")
        volunteer = self._attendance.get_volunteer(lotus_id)
        if not volunteer:
            raise NotFoundError(f"volunteer {lotus_id} not found")

        now = now or now_local()
        work_date = now.date()
        punch_time = now.time().replace(microsecond=0)

        if self._attendance.punch_exists(lotus_id=lotus_id, work_date=work_date, punch_time=punch_time):
            raise ConflictError(f"volunteer {lotus_id} already checked in at {work_date:%Y-%m-%d} {punch_time:%H:%M:%S}")

        punch_id = self._attendance.create_punch(volunteer=volunteer, work_date=work_date, punch_time=punch_time)
        logger.info("recorded punch %s for %s at %s %s", punch_id, lotus_id, work_date, punch_time)
        return punch_id

    def records_for_period(
        self,
        *,
        start: date,
        end: date,
        volunteer_ids: Optional[Collection[str]] = None,
    ) -> list[AttendanceRecord]:
        require_date_range(start, end)
        ids = sorted(volunteer_ids) if volunteer_ids else None

        punches = self._attendance.list_punches(start_date=start, end_date=end, lotus_ids=ids)
        actual = collapse_punches(punches, single_punch_hours=self._single_punch_hours)

        volunteers = self._attendance.list_full_attendance_volunteers(lotus_ids=ids)
        generated = full_attendance_records(volunteers, start=start, end=end)

        logger.info(
            "loaded %d punches -> %d daily records, %d full-attendance volunteers -> %d generated records",
            len(punches),
            len(actual),
            len(volunteers),
            len(generated),
        )
        return merge_records(actual, generated)
