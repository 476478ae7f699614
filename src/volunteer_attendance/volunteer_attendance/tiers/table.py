"""Static attendance tier table.

Higher tiers require more hours. The table is built once at import time and
exposed read-only; tier numbers are unique and DEFAULT_TIER must be present.
"""

from __future__ import annotations

from datetime import time
from types import MappingProxyType
from typing import Mapping, Optional

from ..core.constants import DEFAULT_TIER
from .model import AttendanceTier

_TIERS = (
    AttendanceTier(1, 2, time(9, 0), time(11, 0), "1档 - 2小时"),
    AttendanceTier(2, 4, time(9, 0), time(13, 0), "2档 - 4小时"),
    AttendanceTier(3, 6, time(9, 0), time(15, 0), "3档 - 6小时"),
    AttendanceTier(4, 8, time(9, 0), time(17, 0), "4档 - 8小时（标准）"),
    AttendanceTier(5, 10, time(8, 0), time(18, 0), "5档 - 10小时"),
    AttendanceTier(6, 12, time(8, 0), time(20, 0), "6档 - 12小时（全天）"),
)

ATTENDANCE_TIERS: Mapping[int, AttendanceTier] = MappingProxyType({t.tier: t for t in _TIERS})


def resolve_tier(tier_number: Optional[int]) -> AttendanceTier:
    """Return the tier config for tier_number, or the default tier when absent."""
    tier = ATTENDANCE_TIERS.get(tier_number) if tier_number is not None else None
    if tier is None:
        return ATTENDANCE_TIERS[DEFAULT_TIER]
    return tier


def list_tier_options() -> list[dict]:
    """Tier choices for front-end drop-downs."""
    return [{"value": t.tier, "label": t.description, "hours": t.required_hours} for t in ATTENDANCE_TIERS.values()]
