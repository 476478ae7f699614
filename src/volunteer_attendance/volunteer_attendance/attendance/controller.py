from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import error_response
from ..container import Container
from ..tiers.table import list_tier_options


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/tiers", methods=["GET"], endpoint="attendance_tiers")
    def attendance_tiers():
        return jsonify({"success": True, "data": list_tier_options()}), 200

    @app.route("/api/checkin/punch", methods=["POST"], endpoint="checkin_punch")
    def checkin_punch():
        """Device ingest: one recognised face, stamped with the server time."""
        try:
            data = request.get_json(silent=True) or {}
            punch_id = container.attendance_service.record_punch(str(data.get("lotus_id") or ""))
            return jsonify({"success": True, "data": {"punch_id": punch_id}}), 201
        except Exception as e:
            return error_response(e)
