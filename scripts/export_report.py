"""Export the volunteer service-time workbook for a date range to disk.

Usage:
    python scripts/export_report.py --start 2025-11-01 --end 2025-11-30 [--lotus-id L001 ...]
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from src.volunteer_attendance.volunteer_attendance.common.datetime_utils import parse_iso_date
from src.volunteer_attendance.volunteer_attendance.common.logging import setup_logging
from src.volunteer_attendance.volunteer_attendance.container import build_container
from src.volunteer_attendance.volunteer_attendance.export.model import ExportFilters
from src.volunteer_attendance.volunteer_attendance.main import load_settings


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--start", required=True, type=parse_iso_date, help="YYYY-MM-DD")
    parser.add_argument("--end", required=True, type=parse_iso_date, help="YYYY-MM-DD")
    parser.add_argument("--lotus-id", action="append", default=[], dest="lotus_ids")
    parser.add_argument("--activity-name")
    parser.add_argument("--out", type=Path, default=REPO_ROOT / "exports")
    args = parser.parse_args(argv)

    settings = load_settings()
    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    container = build_container(
        db_config=dict(settings.DB_CONFIG),
        max_hours=settings.MAX_SERVICE_HOURS,
        single_punch_hours=settings.SINGLE_PUNCH_HOURS,
        activity_suffix=settings.EXPORT_ACTIVITY_SUFFIX,
    )

    filters = ExportFilters(
        start_date=args.start,
        end_date=args.end,
        volunteer_ids=frozenset(args.lotus_ids),
        activity_name=args.activity_name,
    )
    buf, filename, count = container.export_service.export_excel(filters)

    args.out.mkdir(parents=True, exist_ok=True)
    out_file = args.out / filename
    out_file.write_bytes(buf.getvalue())
    print(f"OK: {count} rows -> {out_file}")


if __name__ == "__main__":
    main()
