"""Excel writer for the municipal volunteer service-time import format.

Layout: row 1 is a merged title, row 2 the column headers, data from row 3.
"""

from __future__ import annotations

import io
from typing import Sequence

import pandas as pd
from openpyxl.styles import Alignment, Font
from openpyxl.utils import get_column_letter

from .model import ExportRow

SHEET_NAME = "志愿者服务时间统计表"
TITLE = "深圳志愿者（义工）服务时间统计表（用于组织管理员导入系统）"

HEADERS = [
    "序号",
    "义工号",
    "姓名",
    "活动名称",
    "服务开展日期(yyyy/MM/dd)",
    "签到时间(HH:mm)",
    "签退时间(HH:mm)",
    "服务时长（单位：小时）",
]
# Columns the import system requires; highlighted for the organisation admins.
RED_HEADERS = {HEADERS[1], HEADERS[4], HEADERS[5], HEADERS[6], HEADERS[7]}
COLUMN_WIDTHS = [8, 15, 12, 30, 25, 18, 18, 22]

_CENTER = Alignment(vertical="center", horizontal="center")


def rows_to_frame(rows: Sequence[ExportRow]) -> pd.DataFrame:
    data = [
        [
            r.index,
            r.display_code,
            r.name,
            r.activity_name,
            # The import system accepts dashes despite the yyyy/MM/dd header.
            r.service_date.strftime("%Y-%m-%d"),
            r.check_in,
            r.check_out,
            r.service_hours,
        ]
        for r in rows
    ]
    return pd.DataFrame(data, columns=HEADERS)


def write_workbook(rows: Sequence[ExportRow]) -> io.BytesIO:
    df = rows_to_frame(rows)

    out = io.BytesIO()
    with pd.ExcelWriter(out, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=SHEET_NAME, startrow=1)
        ws = writer.sheets[SHEET_NAME]

        ws.merge_cells(start_row=1, start_column=1, end_row=1, end_column=len(HEADERS))
        title = ws.cell(row=1, column=1)
        title.value = TITLE
        title.font = Font(bold=True, size=14)
        title.alignment = _CENTER

        for col, header in enumerate(HEADERS, start=1):
            cell = ws.cell(row=2, column=col)
            cell.font = Font(bold=True, color="FFFF0000") if header in RED_HEADERS else Font(bold=True)
            cell.alignment = _CENTER

        for col, width in enumerate(COLUMN_WIDTHS, start=1):
            ws.column_dimensions[get_column_letter(col)].width = width

        for row in ws.iter_rows(min_row=3, max_row=ws.max_row):
            for cell in row:
                cell.alignment = _CENTER

    out.seek(0)
    return out
