# File: utils/dt_utils.py
"""Date and time utilities for the chore scheduler.

Pure Python date/time functions. All functions here can be unit tested
without any fixtures.

Uses standard library: datetime, zoneinfo, plus dateutil for calendar-aware
month/year arithmetic.

Functions:
    - set_default_timezone / get_default_timezone: Zone used for naive inputs
    - dt_now_utc: Get current datetime in UTC
    - as_utc: Convert to UTC (naive inputs use the default timezone)
    - dt_parse: Normalize string/date/datetime inputs to aware datetimes
    - dt_parse_rfc3339: Strict RFC 3339 timestamp parsing
    - dt_add_interval: Add N hours/days/weeks/months/years to a datetime
    - dt_with_time_of_day: Replace hour/minute with those of another datetime
    - dt_reanchor_year: Move a datetime to another year (Feb 29 clamps)
"""

from __future__ import annotations

from calendar import monthrange
from datetime import UTC, date, datetime, timedelta
import logging
import re
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo

# Third-party date utilities
from dateutil.relativedelta import relativedelta

if TYPE_CHECKING:
    from datetime import tzinfo

# Module-level logger
_LOGGER = logging.getLogger(__name__)

# ==============================================================================
# Constants (local copies to avoid circular imports)
# These mirror const.py values but are defined locally for purity.
# ==============================================================================

# Default timezone - can be overridden by caller
DEFAULT_TIME_ZONE: ZoneInfo = ZoneInfo("UTC")

# Time unit constants
TIME_UNIT_HOURS = "hours"
TIME_UNIT_DAYS = "days"
TIME_UNIT_WEEKS = "weeks"
TIME_UNIT_MONTHS = "months"
TIME_UNIT_YEARS = "years"

# RFC 3339 date-time (section 5.6); "T" and "Z" may be lower case
RFC3339_PATTERN = re.compile(
    r"^\d{4}-\d{2}-\d{2}[Tt]\d{2}:\d{2}:\d{2}(\.\d{1,6})?([Zz]|[+-]\d{2}:\d{2})$"
)


# ==============================================================================
# Timezone Configuration
# ==============================================================================


def set_default_timezone(tz: ZoneInfo) -> None:
    """Set the timezone used to interpret naive datetimes.

    Call this once during application setup if stored timestamps are naive
    local times rather than UTC.

    Args:
        tz: ZoneInfo object representing the default timezone
    """
    global DEFAULT_TIME_ZONE  # noqa: PLW0603
    DEFAULT_TIME_ZONE = tz


def get_default_timezone() -> ZoneInfo:
    """Get the current default timezone.

    Returns:
        The configured default timezone (ZoneInfo object)
    """
    return DEFAULT_TIME_ZONE


# ==============================================================================
# Current Date/Time
# ==============================================================================


def dt_now_utc() -> datetime:
    """Return the current datetime in UTC (timezone-aware)."""
    return datetime.now(UTC)


# ==============================================================================
# Timezone Conversion
# ==============================================================================


def as_utc(dt_obj: datetime) -> datetime:
    """Convert a datetime to UTC timezone.

    Args:
        dt_obj: Datetime object; naive values are assumed to be in the
            default timezone

    Returns:
        Datetime in UTC timezone
    """
    if dt_obj.tzinfo is None:
        dt_obj = dt_obj.replace(tzinfo=DEFAULT_TIME_ZONE)
    return dt_obj.astimezone(UTC)


# ==============================================================================
# Date/Time Parsing
# ==============================================================================


def dt_parse(
    dt_input: str | date | datetime | None,
    default_tzinfo: tzinfo | None = None,
) -> datetime | None:
    """Normalize various datetime input formats to an aware datetime.

    Args:
        dt_input: ISO string, date or datetime to normalize, or None
        default_tzinfo: Timezone to use if the input is naive
                        (defaults to DEFAULT_TIME_ZONE if None)

    Returns:
        Timezone-aware datetime, or None if the input could not be parsed.

    Example:
        >>> dt_parse("2025-04-15")
        datetime.datetime(2025, 4, 15, 0, 0, tzinfo=zoneinfo.ZoneInfo(key='UTC'))
    """
    if not dt_input:
        return None

    tz_info = default_tzinfo or DEFAULT_TIME_ZONE
    result: datetime | None = None

    if isinstance(dt_input, str):
        try:
            result = datetime.fromisoformat(dt_input.strip())
        except ValueError:
            _LOGGER.debug("dt_parse: Unparseable datetime string: %s", dt_input)
            return None
    elif isinstance(dt_input, datetime):
        result = dt_input
    elif isinstance(dt_input, date):
        result = datetime.combine(dt_input, datetime.min.time())
    else:
        return None

    if result.tzinfo is None:
        result = result.replace(tzinfo=tz_info)
    return result


def dt_parse_rfc3339(value: str) -> datetime:
    """Parse an RFC 3339 timestamp string.

    Unlike dt_parse, this is strict: the string must be
    ``YYYY-MM-DDTHH:MM:SS[.ffffff]`` followed by ``Z`` or ``+hh:mm``.
    ISO 8601 variants such as missing seconds, week dates or basic
    (separator-free) format are rejected.

    Args:
        value: Timestamp string such as "2024-03-01T18:30:00Z"

    Returns:
        Timezone-aware datetime.

    Raises:
        ValueError: If the string is not a valid RFC 3339 timestamp.
    """
    if not isinstance(value, str) or not RFC3339_PATTERN.match(value.strip()):
        raise ValueError(f"Not an RFC 3339 timestamp: {value!r}")

    # Field ranges (month 13, hour 25) are checked by fromisoformat
    return datetime.fromisoformat(value.strip().upper())


# ==============================================================================
# Interval Calculations
# ==============================================================================


def dt_add_interval(
    base_dt: datetime,
    interval_unit: str,
    delta: int,
) -> datetime | None:
    """Add a number of time units to a datetime.

    Hours, days and weeks are fixed-length additions. Months and years use
    relativedelta, which clamps to the end of shorter months
    (Jan 31 + 1 month = Feb 28).

    Args:
        base_dt: Base datetime (timezone-aware)
        interval_unit: One of the TIME_UNIT_* constants
        delta: Number of units to add

    Returns:
        New datetime, or None if the unit is unknown or the result overflows.
    """
    try:
        if interval_unit == TIME_UNIT_HOURS:
            return base_dt + timedelta(hours=delta)
        if interval_unit == TIME_UNIT_DAYS:
            return base_dt + timedelta(days=delta)
        if interval_unit == TIME_UNIT_WEEKS:
            return base_dt + timedelta(weeks=delta)
        if interval_unit == TIME_UNIT_MONTHS:
            return base_dt + relativedelta(months=delta)
        if interval_unit == TIME_UNIT_YEARS:
            return base_dt + relativedelta(years=delta)
    except (ValueError, OverflowError) as exc:
        _LOGGER.error("Error adding interval: %s", exc)
        return None

    _LOGGER.warning("Unknown interval_unit: %s", interval_unit)
    return None


def dt_with_time_of_day(dt_obj: datetime, time_source: datetime) -> datetime:
    """Keep the date of dt_obj but take hour, minute and zone from time_source.

    Seconds and microseconds are zeroed.

    Args:
        dt_obj: Datetime supplying year/month/day
        time_source: Datetime supplying hour/minute/tzinfo

    Returns:
        Combined datetime.
    """
    return dt_obj.replace(
        hour=time_source.hour,
        minute=time_source.minute,
        second=0,
        microsecond=0,
        tzinfo=time_source.tzinfo,
    )


def dt_reanchor_year(dt_obj: datetime, year: int) -> datetime:
    """Return a UTC datetime in ``year`` with dt_obj's month/day/hour/minute.

    The wall-clock fields are taken as stored (no zone conversion) and
    reinterpreted as UTC. Feb 29 clamps to Feb 28 when the target year is
    not a leap year.

    Args:
        dt_obj: Datetime whose month/day/hour/minute are kept
        year: Target year

    Returns:
        UTC datetime in the target year with seconds zeroed.
    """
    day = min(dt_obj.day, monthrange(year, dt_obj.month)[1])
    return datetime(
        year,
        dt_obj.month,
        day,
        dt_obj.hour,
        dt_obj.minute,
        tzinfo=UTC,
    )
