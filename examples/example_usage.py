"""Example: build an export preview through the service layer (no Flask)."""

from datetime import date

from src.volunteer_attendance.volunteer_attendance.container import build_container
from src.volunteer_attendance.volunteer_attendance.export.model import ExportFilters
from src.volunteer_attendance.volunteer_attendance.main import load_settings


def main():
    settings = load_settings()
    container = build_container(db_config=settings.DB_CONFIG, max_hours=settings.MAX_SERVICE_HOURS)

    today = date.today()
    report = container.export_service.preview(ExportFilters(start_date=today.replace(day=1), end_date=today))
    print(report.filename, report.activity_name)
    for row in report.rows[:10]:
        print(row.to_dict())


if __name__ == "__main__":
    main()
