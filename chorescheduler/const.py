"""Constants for the chore scheduler.

This file centralizes frequency types, interval units, weekday and month
names, wire keys of the recurrence metadata payload, and tuning defaults for
consistency across the engines.
"""

import logging

# ------------------------------------------------------------------------------------------------
# General
# ------------------------------------------------------------------------------------------------

# Logger
LOGGER = logging.getLogger(__package__)

# ------------------------------------------------------------------------------------------------
# Frequency Types
# ------------------------------------------------------------------------------------------------

FREQUENCY_ONCE = "once"
FREQUENCY_DAILY = "daily"
FREQUENCY_WEEKLY = "weekly"
FREQUENCY_MONTHLY = "monthly"
FREQUENCY_YEARLY = "yearly"
FREQUENCY_ADAPTIVE = "adaptive"
FREQUENCY_INTERVAL = "interval"
FREQUENCY_DAYS_OF_THE_WEEK = "days_of_the_week"
FREQUENCY_DAY_OF_THE_MONTH = "day_of_the_month"
FREQUENCY_NO_REPEAT = "no_repeat"
FREQUENCY_TRIGGER = "trigger"

# ------------------------------------------------------------------------------------------------
# Interval Units
# ------------------------------------------------------------------------------------------------

TIME_UNIT_HOURS = "hours"
TIME_UNIT_DAYS = "days"
TIME_UNIT_WEEKS = "weeks"
TIME_UNIT_MONTHS = "months"
TIME_UNIT_YEARS = "years"

# ------------------------------------------------------------------------------------------------
# Calendar Names
# ------------------------------------------------------------------------------------------------

# Index matches datetime.weekday() (0=Mon, 6=Sun)
WEEKDAY_NAMES: tuple[str, ...] = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)

# Index + 1 matches datetime.month (1=Jan, 12=Dec)
MONTH_NAMES: tuple[str, ...] = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
)

MIN_DAY_OF_MONTH = 1
MAX_DAY_OF_MONTH = 31

# ------------------------------------------------------------------------------------------------
# Recurrence Metadata Keys (wire shape)
# ------------------------------------------------------------------------------------------------

METADATA_TIME = "time"
METADATA_UNIT = "unit"
METADATA_DAYS = "days"
METADATA_MONTHS = "months"

# ------------------------------------------------------------------------------------------------
# Chore Data Keys (persisted / API shape)
# ------------------------------------------------------------------------------------------------

DATA_CHORE_ID = "id"
DATA_CHORE_NAME = "name"
DATA_CHORE_FREQUENCY_TYPE = "frequencyType"
DATA_CHORE_FREQUENCY = "frequency"
DATA_CHORE_FREQUENCY_METADATA = "frequencyMetadata"
DATA_CHORE_IS_ROLLING = "isRolling"
DATA_CHORE_NEXT_DUE_DATE = "nextDueDate"
DATA_CHORE_PERIOD_START = "periodStart"
DATA_CHORE_PERIOD_END = "periodEnd"
DATA_CHORE_ASSIGNEES = "assignees"
DATA_CHORE_ASSIGNEE_USER_ID = "userId"
DATA_CHORE_ASSIGNED_TO = "assignedTo"
DATA_CHORE_CREATED_BY = "createdBy"
DATA_CHORE_UPDATED_AT = "updatedAt"

DATA_HISTORY_COMPLETED_AT = "completedAt"

# ------------------------------------------------------------------------------------------------
# Scheduling Defaults
# ------------------------------------------------------------------------------------------------

# Forward scan bounds for weekday / month-name matching
DAYS_OF_WEEK_SCAN_LIMIT = 7
DAY_OF_MONTH_SCAN_LIMIT = 12

# Exponential decay applied to older completion intervals (1.0 = plain mean)
ADAPTIVE_DECAY_FACTOR = 0.5

# Minimum number of completions needed for a weighted estimate
ADAPTIVE_MIN_HISTORY = 2
