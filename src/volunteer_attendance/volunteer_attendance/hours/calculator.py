from __future__ import annotations

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal

from ..core.constants import HOURS_PRECISION, MAX_SERVICE_HOURS
from ..core.exceptions import InvalidTimeRange, ValidationError


def compute_hours(check_in: datetime, check_out: datetime, max_hours: float = MAX_SERVICE_HOURS) -> float:
    """Elapsed hours between check-in and check-out, capped at max_hours.

    Raises InvalidTimeRange when check_out precedes check_in.
    """
    if max_hours <= 0:
        raise ValidationError(f"max_hours must be positive, got {max_hours}")
    if check_out < check_in:
        raise InvalidTimeRange(check_in, check_out)

    elapsed = (check_out - check_in).total_seconds() / 3600
    return min(float(max_hours), elapsed)


def round_hours(value: float, precision: int = HOURS_PRECISION) -> float:
    """Round half up (7.25 -> 7.3), matching the hours shown by the import system."""
    quantum = Decimal(1).scaleb(-precision)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))
