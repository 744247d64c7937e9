"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time

DEFAULT_BUSINESS_TIMEZONE = "America/Sao_Paulo"

DEFAULT_WORK_START = time(8, 0)
DEFAULT_WORK_END = time(17, 0)
DEFAULT_TOLERANCE_MINUTES = 10
DEFAULT_VACATION_DAYS_PER_YEAR = 30
DEFAULT_MAX_OVERTIME_HOURS = 2

# Assumed lunch break when LUNCH_START/LUNCH_END are not both punched.
DEFAULT_LUNCH_HOURS = 1.0

# Accrued vacation never exceeds this many annual entitlements.
MAX_ACCRUED_VACATION_PERIODS = 2
CONCESSIVE_PERIOD_MONTHS = 12
VACATION_NOTICE_DAYS = 30

OVERTIME_COMPENSATION_MONTHS = 6
DEFAULT_WORK_DAYS_PER_MONTH = 22

DEFAULT_EXPIRATION_WINDOW_DAYS = 30

# Company default location (São Paulo) used when an employee has no allowed locations.
DEFAULT_LATITUDE = -23.5505
DEFAULT_LONGITUDE = -46.6333
DEFAULT_MAX_DISTANCE_METERS = 1000

JUSTIFIED_ABSENCE_HOUR = 8
