"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Below this many worked minutes the duration strategy marks the day as half-day.
FULL_DAY_MINUTES = 270

MIN_CALENDAR_YEAR = 2000
MAX_CALENDAR_YEAR = 2100

DEFAULT_STATUS_COLOR = "#cccccc"
