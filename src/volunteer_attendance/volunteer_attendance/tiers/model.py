from __future__ import annotations

from dataclasses import dataclass
from datetime import time


@dataclass(frozen=True)
class AttendanceTier:
    """Domain entity: a full-attendance tier (required hours + expected window)."""

    tier: int
    required_hours: float
    expected_check_in: time
    expected_check_out: time
    description: str
