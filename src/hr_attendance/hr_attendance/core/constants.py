"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

STANDARD_WORKDAY_HOURS = 8
PLACEHOLDER_PREFIX = "finger:"

DEFAULT_ATTENDANCE_TABLE = "attendance"
DEFAULT_ATTENDANCE_DEVICE_COLUMN = "user_id"
DEFAULT_ATTENDANCE_TIME_COLUMN = "check_time"

DEFAULT_SETTINGS_CACHE_SECONDS = 300
DEFAULT_WORKING_DAYS_PER_MONTH = 22
DEFAULT_OVERTIME_RATE = 150
