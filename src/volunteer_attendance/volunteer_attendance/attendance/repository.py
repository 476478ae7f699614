from __future__ import annotations

from datetime import date, time
from typing import Collection, Optional, Protocol, Sequence

from .model import CheckInPunch, VolunteerProfile


class AttendanceRepository(Protocol):
    """Repository interface for volunteers and their check-in punches.

    Services depend on this protocol, never on a concrete database.
    """

    def get_volunteer(self, lotus_id: str) -> Optional[VolunteerProfile]:
        raise NotImplementedError

    def list_full_attendance_volunteers(self, *, lotus_ids: Optional[Collection[str]] = None) -> Sequence[VolunteerProfile]:
        raise NotImplementedError

    def list_punches(
        self,
        *,
        start_date: date,
        end_date: date,
        lotus_ids: Optional[Collection[str]] = None,
    ) -> Sequence[CheckInPunch]:
        raise NotImplementedError

    def punch_exists(self, *, lotus_id: str, work_date: date, punch_time: time) -> bool:
        raise NotImplementedError

    def create_punch(self, *, volunteer: VolunteerProfile, work_date: date, punch_time: time) -> int:
        raise NotImplementedError
