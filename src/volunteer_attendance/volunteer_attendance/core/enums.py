from __future__ import annotations

from enum import Enum


class RecordSource(str, Enum):
    """Where a daily attendance record came from."""

    ACTUAL = "ACTUAL"
    FULL_ATTENDANCE = "FULL_ATTENDANCE"
