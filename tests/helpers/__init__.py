"""Test helpers for chore scheduler tests.

This module re-exports all helpers for convenient imports:

    from tests.helpers import (
        # Builders
        make_utc_dt, make_metadata, make_chore, make_history,

        # Constants
        FREQUENCY_DAILY, TIME_UNIT_HOURS, USER_ALICE,
    )

See individual modules for full documentation:
- builders.py: Chore, metadata and history builders
- constants.py: Scheduler constants and test identities
"""

from tests.helpers.builders import (
    make_chore,
    make_history,
    make_metadata,
    make_utc_dt,
)
from tests.helpers.constants import (
    FREQUENCY_ADAPTIVE,
    FREQUENCY_DAILY,
    FREQUENCY_DAY_OF_THE_MONTH,
    FREQUENCY_DAYS_OF_THE_WEEK,
    FREQUENCY_INTERVAL,
    FREQUENCY_MONTHLY,
    FREQUENCY_NO_REPEAT,
    FREQUENCY_ONCE,
    FREQUENCY_TRIGGER,
    FREQUENCY_WEEKLY,
    FREQUENCY_YEARLY,
    TIME_UNIT_DAYS,
    TIME_UNIT_HOURS,
    TIME_UNIT_MONTHS,
    TIME_UNIT_WEEKS,
    TIME_UNIT_YEARS,
    USER_ALICE,
    USER_BOB,
    USER_CAROL,
    USER_CREATOR,
)

__all__ = [
    "FREQUENCY_ADAPTIVE",
    "FREQUENCY_DAILY",
    "FREQUENCY_DAYS_OF_THE_WEEK",
    "FREQUENCY_DAY_OF_THE_MONTH",
    "FREQUENCY_INTERVAL",
    "FREQUENCY_MONTHLY",
    "FREQUENCY_NO_REPEAT",
    "FREQUENCY_ONCE",
    "FREQUENCY_TRIGGER",
    "FREQUENCY_WEEKLY",
    "FREQUENCY_YEARLY",
    "TIME_UNIT_DAYS",
    "TIME_UNIT_HOURS",
    "TIME_UNIT_MONTHS",
    "TIME_UNIT_WEEKS",
    "TIME_UNIT_YEARS",
    "USER_ALICE",
    "USER_BOB",
    "USER_CAROL",
    "USER_CREATOR",
    "make_chore",
    "make_history",
    "make_metadata",
    "make_utc_dt",
]
