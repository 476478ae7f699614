"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_TIER = 6
MAX_SERVICE_HOURS = 8
SINGLE_PUNCH_HOURS = 1
HOURS_PRECISION = 1
DEFAULT_ACTIVITY_SUFFIX = "生命关怀"
