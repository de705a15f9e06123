"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

FIRST_HALF_END_DAY = 15
SECOND_HALF_START_DAY = 16

DEFAULT_HOURS_PER_DAY = 8
MAX_HOURS_PER_DAY = 24

PERIOD_OPTION_COUNT = 6
