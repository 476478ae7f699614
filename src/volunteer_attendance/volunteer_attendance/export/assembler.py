from __future__ import annotations

from datetime import date
from typing import Iterable

from ..attendance.model import AttendanceRecord
from ..common.logging import get_logger
from ..core.constants import DEFAULT_ACTIVITY_SUFFIX, MAX_SERVICE_HOURS
from ..core.exceptions import InvalidTimeRange
from ..hours.calculator import compute_hours, round_hours
from ..tiers.model import AttendanceTier
from ..tiers.table import resolve_tier
from .model import ExportFilters, ExportRow

logger = get_logger("export")

EXPORT_FILENAME_PREFIX = "志愿者服务时间统计表"


def default_activity_name(start: date, end: date, suffix: str = DEFAULT_ACTIVITY_SUFFIX) -> str:
    """e.g. 2025.1101.1130生命关怀"""
    return f"{start:%Y.%m%d}.{end:%m%d}{suffix}"


def resolve_activity_name(filters: ExportFilters, suffix: str = DEFAULT_ACTIVITY_SUFFIX) -> str:
    if filters.activity_name and filters.activity_name.strip():
        return filters.activity_name.strip()
    return default_activity_name(filters.start_date, filters.end_date, suffix)


def export_filename(start: date, end: date) -> str:
    return f"{EXPORT_FILENAME_PREFIX}_{start:%Y%m%d}_{end:%Y%m%d}.xlsx"


def _matches(record: AttendanceRecord, filters: ExportFilters) -> bool:
    if not filters.start_date <= record.work_date <= filters.end_date:
        return False
    if filters.volunteer_ids and record.volunteer_id not in filters.volunteer_ids:
        return False
    return True


def build_report(
    records: Iterable[AttendanceRecord],
    filters: ExportFilters,
    *,
    max_hours: float = MAX_SERVICE_HOURS,
    activity_suffix: str = DEFAULT_ACTIVITY_SUFFIX,
    skip_invalid: bool = True,
) -> list[ExportRow]:
    """Select, order and flatten attendance records into export rows.

    Rows are ordered by date, then volunteer name, then volunteer id, and
    numbered from 1. A record whose check-out precedes its check-in is dropped
    (skip_invalid=True) or raises InvalidTimeRange.
    """
    selected = sorted(
        (r for r in records if _matches(r, filters)),
        key=lambda r: (r.work_date, r.name, r.volunteer_id),
    )
    activity = resolve_activity_name(filters, activity_suffix)
    tiers: dict[int, AttendanceTier] = {}

    rows: list[ExportRow] = []
    for r in selected:
        try:
            hours = compute_hours(r.check_in, r.check_out, max_hours)
        except InvalidTimeRange:
            if not skip_invalid:
                raise
            logger.warning("skipping %s on %s: check-out %s before check-in %s", r.volunteer_id, r.work_date, r.check_out, r.check_in)
            continue

        tier = None
        if r.tier is not None:
            if r.tier not in tiers:
                tiers[r.tier] = resolve_tier(r.tier)
            tier = tiers[r.tier]

        rows.append(
            ExportRow(
                index=len(rows) + 1,
                volunteer_id=r.volunteer_id,
                volunteer_code=r.volunteer_code,
                name=r.name,
                activity_name=activity,
                service_date=r.work_date,
                check_in=r.check_in.strftime("%H:%M"),
                check_out=r.check_out.strftime("%H:%M"),
                service_hours=round_hours(hours),
                tier=tier,
            )
        )
    return rows
