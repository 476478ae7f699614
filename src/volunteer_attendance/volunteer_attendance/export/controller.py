from __future__ import annotations

from flask import Flask, jsonify, request, send_file

from ..common.datetime_utils import parse_iso_date
from ..common.http import error_response
from ..container import Container
from ..core.exceptions import ValidationError
from .model import ExportFilters

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def parse_filters(args) -> ExportFilters:
    """Build ExportFilters from query args (start, end, lotus_ids, activity_name)."""
    start_s = args.get("start")
    end_s = args.get("end")
    if not start_s or not end_s:
        raise ValidationError("start and end are required (YYYY-MM-DD)")
    try:
        start = parse_iso_date(start_s)
        end = parse_iso_date(end_s)
    except ValueError:
        raise ValidationError("start and end must be dates in YYYY-MM-DD format") from None

    # Accept both ?lotus_ids=a,b and ?lotus_ids=a&lotus_ids=b
    ids = {part.strip() for raw in args.getlist("lotus_ids") for part in raw.split(",") if part.strip()}

    return ExportFilters(
        start_date=start,
        end_date=end,
        volunteer_ids=frozenset(ids),
        activity_name=args.get("activity_name") or None,
    )


def register(app: Flask, container: Container) -> None:
    @app.route("/api/checkin/export", methods=["GET"], endpoint="checkin_export")
    def checkin_export():
        try:
            filters = parse_filters(request.args)
            buf, filename, _ = container.export_service.export_excel(filters)
        except Exception as e:
            return error_response(e)
        return send_file(buf, mimetype=XLSX_MIMETYPE, as_attachment=True, download_name=filename)

    @app.route("/api/checkin/export/preview", methods=["GET"], endpoint="checkin_export_preview")
    def checkin_export_preview():
        try:
            report = container.export_service.preview(parse_filters(request.args))
        except Exception as e:
            return error_response(e)
        return jsonify(
            {
                "success": True,
                "data": {
                    "filename": report.filename,
                    "activity_name": report.activity_name,
                    "record_count": len(report.rows),
                    "rows": [r.to_dict() for r in report.rows],
                },
            }
        ), 200
