from __future__ import annotations

import io

from ..attendance.service import AttendanceService
from ..common.logging import get_logger
from ..common.validators import require_date_range
from ..core.constants import DEFAULT_ACTIVITY_SUFFIX, MAX_SERVICE_HOURS
from .assembler import build_report, export_filename, resolve_activity_name
from .excel_writer import write_workbook
from .model import ExportFilters, ExportReport

logger = get_logger("export")


class ExportService:
    def __init__(
        self,
        attendance: AttendanceService,
        *,
        max_hours: float = MAX_SERVICE_HOURS,
        activity_suffix: str = DEFAULT_ACTIVITY_SUFFIX,
    ):
        self._attendance = attendance
        self._max_hours = float(max_hours)
        self._activity_suffix = activity_suffix

    def preview(self, filters: ExportFilters) -> ExportReport:
        require_date_range(filters.start_date, filters.end_date)
        logger.info("building export %s..%s", filters.start_date, filters.end_date)

        records = self._attendance.records_for_period(
            start=filters.start_date,
            end=filters.end_date,
            volunteer_ids=filters.volunteer_ids,
        )
        rows = build_report(
            records,
            filters,
            max_hours=self._max_hours,
            activity_suffix=self._activity_suffix,
        )
        return ExportReport(
            rows=rows,
            filename=export_filename(filters.start_date, filters.end_date),
            activity_name=resolve_activity_name(filters, self._activity_suffix),
        )

    def export_excel(self, filters: ExportFilters) -> tuple[io.BytesIO, str, int]:
        report = self.preview(filters)
        buf = write_workbook(report.rows)
        logger.info("excel export %s ready: %d rows", report.filename, len(report.rows))
        return buf, report.filename, len(report.rows)
