from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import FrozenSet, Optional

from ..tiers.model import AttendanceTier


@dataclass(frozen=True)
class ExportFilters:
    """Selection criteria of one export request.

    An empty volunteer_ids set means "all volunteers". activity_name is not a
    record filter: it is written into every row's activity column.
    """

    start_date: date
    end_date: date
    volunteer_ids: FrozenSet[str] = field(default_factory=frozenset)
    activity_name: Optional[str] = None


@dataclass(frozen=True)
class ExportRow:
    """Flattened read-model of one attendance record, used only for output."""

    index: int
    volunteer_id: str
    volunteer_code: Optional[str]
    name: str
    activity_name: str
    service_date: date
    check_in: str
    check_out: str
    service_hours: float
    tier: Optional[AttendanceTier] = None

    @property
    def display_code(self) -> str:
        return self.volunteer_code or self.volunteer_id

    def to_dict(self) -> dict:
        return {
            "index": self.index,
            "volunteer_id": self.volunteer_id,
            "volunteer_code": self.display_code,
            "name": self.name,
            "activity_name": self.activity_name,
            "service_date": self.service_date.strftime("%Y-%m-%d"),
            "check_in": self.check_in,
            "check_out": self.check_out,
            "service_hours": self.service_hours,
            "tier": self.tier.tier if self.tier else None,
        }


@dataclass(frozen=True)
class ExportReport:
    rows: list[ExportRow]
    filename: str
    activity_name: str
