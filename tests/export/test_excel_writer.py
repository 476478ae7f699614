from __future__ import annotations

from datetime import date

from openpyxl import load_workbook

from src.volunteer_attendance.volunteer_attendance.export.excel_writer import HEADERS, SHEET_NAME, TITLE, write_workbook
from src.volunteer_attendance.volunteer_attendance.export.model import ExportRow


def _row(index, name, hours, code=None):
    return ExportRow(
        index=index,
        volunteer_id=f"L{index}",
        volunteer_code=code,
        name=name,
        activity_name="2025.1101.1130生命关怀",
        service_date=date(2025, 11, index),
        check_in="09:00",
        check_out="17:00",
        service_hours=hours,
    )


def test_workbook_layout_title_headers_and_rows():
    buf = write_workbook([_row(1, "Li", 8.0, code="SZ001"), _row(2, "Wang", 2.5)])
    ws = load_workbook(buf)[SHEET_NAME]

    assert ws["A1"].value == TITLE
    assert "A1:H1" in {str(r) for r in ws.merged_cells.ranges}
    assert [c.value for c in ws[2]] == HEADERS
    assert [c.value for c in ws[3]] == [1, "SZ001", "Li", "2025.1101.1130生命关怀", "2025-11-01", "09:00", "17:00", 8]
    assert [c.value for c in ws[4]][1] == "L2"
    assert ws[4][7].value == 2.5
    assert ws.max_row == 4


def test_required_headers_are_red_and_widths_set():
    ws = load_workbook(write_workbook([_row(1, "Li", 1.0)]))[SHEET_NAME]

    red = [c.value for c in ws[2] if c.font.color is not None and c.font.color.rgb == "FFFF0000"]
    assert red == [HEADERS[1], HEADERS[4], HEADERS[5], HEADERS[6], HEADERS[7]]
    assert all(c.font.bold for c in ws[2])
    assert ws.column_dimensions["D"].width == 30


def test_empty_report_still_has_both_header_rows():
    ws = load_workbook(write_workbook([]))[SHEET_NAME]

    assert ws.max_row == 2
    assert [c.value for c in ws[2]] == HEADERS
