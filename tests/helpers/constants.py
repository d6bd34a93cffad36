"""Test constants for chore scheduler tests.

This module re-exports scheduler constants for use in tests.
Import from here, not directly from chorescheduler.const.
"""

from chorescheduler.const import (  # noqa: F401
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
)

# =============================================================================
# TEST IDENTITIES
# =============================================================================

USER_ALICE = "alice"
USER_BOB = "bob"
USER_CAROL = "carol"
USER_CREATOR = "parent"
