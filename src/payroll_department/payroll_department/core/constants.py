"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MAX_BASE_PAY = 1_000_000.0
MAX_BONUS_PERCENT = 100.0
LONG_NAME_WARNING = 50
DEFAULT_AVERAGE_PRECISION = 2
