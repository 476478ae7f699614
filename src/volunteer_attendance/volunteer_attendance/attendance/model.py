from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Optional

from ..core.enums import RecordSource


@dataclass(frozen=True)
class VolunteerProfile:
    """Domain entity: the volunteer identity used by check-in and export."""

    lotus_id: str
    name: str
    volunteer_code: Optional[str] = None
    require_full_attendance: bool = False
    attendance_tier: Optional[int] = None


@dataclass(frozen=True)
class CheckInPunch:
    """A single face-recognition punch as stored by the device ingest."""

    punch_id: int
    lotus_id: str
    name: str
    work_date: date
    punch_time: time
    volunteer_code: Optional[str] = None


@dataclass(frozen=True)
class AttendanceRecord:
    """One volunteer's attendance for one day (read-only input of the export)."""

    volunteer_id: str
    name: str
    work_date: date
    check_in: datetime
    check_out: datetime
    volunteer_code: Optional[str] = None
    tier: Optional[int] = None
    source: RecordSource = RecordSource.ACTUAL
