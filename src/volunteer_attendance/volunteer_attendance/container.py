from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_ACTIVITY_SUFFIX, MAX_SERVICE_HOURS, SINGLE_PUNCH_HOURS
from .database.connection import DatabaseConnection, DBConfig
from .export.service import ExportService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    attendance_repo: AttendanceRepository

    attendance_service: AttendanceService
    export_service: ExportService


def build_services(
    attendance_repo: AttendanceRepository,
    *,
    conn: Optional[DatabaseConnection] = None,
    max_hours: float = MAX_SERVICE_HOURS,
    single_punch_hours: float = SINGLE_PUNCH_HOURS,
    activity_suffix: str = DEFAULT_ACTIVITY_SUFFIX,
) -> Container:
    attendance_service = AttendanceService(attendance_repo, single_punch_hours=single_punch_hours)
    export_service = ExportService(attendance_service, max_hours=max_hours, activity_suffix=activity_suffix)

    return Container(
        conn=conn,
        attendance_repo=attendance_repo,
        attendance_service=attendance_service,
        export_service=export_service,
    )


def build_container(
    *,
    db_config: dict,
    max_hours: float = MAX_SERVICE_HOURS,
    single_punch_hours: float = SINGLE_PUNCH_HOURS,
    activity_suffix: str = DEFAULT_ACTIVITY_SUFFIX,
) -> Container:
    conn = DatabaseConnection(DBConfig.from_settings(db_config))
    return build_services(
        MySQLAttendanceRepository(conn),
        conn=conn,
        max_hours=max_hours,
        single_punch_hours=single_punch_hours,
        activity_suffix=activity_suffix,
    )
