"""Schedule Engine for the chore scheduler.

Computes the next due date of a completed chore from its recurrence rule:
- `dateutil.relativedelta` for calendar-aware month/year steps
  (Jan 31 + 1 month = Feb 28)
- bounded forward scans for weekday and month-name rules
- an annual active window applied last (adjust_for_period)

ARCHITECTURE: This is a pure logic engine. All methods are static and
operate on the chore passed in; nothing is persisted here.

IMPORTANT: This module must NOT import from chore_engine.py or
adaptive_engine.py. Only import from const.py, type_defs.py, exceptions.py,
helpers/ and utils/.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import TYPE_CHECKING, ClassVar

from dateutil.relativedelta import relativedelta

from .. import const
from ..exceptions import (
    InvalidFrequencyType,
    InvalidFrequencyValue,
    ScheduleSearchExhausted,
)
from ..helpers.metadata_helpers import (
    build_day_of_month_rule,
    build_days_of_week_rule,
    build_interval_rule,
)
from ..type_defs import (
    TIME_OF_DAY_FREQUENCIES,
    DayOfMonthRule,
    DaysOfWeekRule,
    FrequencyType,
    IntervalRule,
)
from ..utils.dt_utils import (
    as_utc,
    dt_add_interval,
    dt_reanchor_year,
    dt_with_time_of_day,
)

if TYPE_CHECKING:
    from ..type_defs import Chore, RecurrenceRule


class ScheduleEngine:
    """Pure logic engine for next-due-date calculation.

    Handles all frequency types:
    - Terminal: ONCE, NO_REPEAT, TRIGGER (no further occurrence)
    - Fixed steps: DAILY, WEEKLY, MONTHLY, YEARLY
    - Rule-based: INTERVAL, DAYS_OF_THE_WEEK, DAY_OF_THE_MONTH
    - ADAPTIVE: repeats the lateness of the last completion
    """

    # Fixed calendar step per simple frequency
    FIXED_STEPS: ClassVar[dict[FrequencyType, relativedelta]] = {
        FrequencyType.DAILY: relativedelta(days=1),
        FrequencyType.WEEKLY: relativedelta(days=7),
        FrequencyType.MONTHLY: relativedelta(months=1),
        FrequencyType.YEARLY: relativedelta(years=1),
    }

    @staticmethod
    def compute_next_due_date(
        chore: Chore, completed_at: datetime
    ) -> datetime | None:
        """Calculate the next due date of a chore that was just completed.

        The base date is the previously scheduled due date (or the completion
        time when there is none). Rule-based frequencies take their hour and
        minute from the metadata ``time``. Rolling chores always restart from
        the completion time.

        Args:
            chore: The completed chore.
            completed_at: Completion timestamp.

        Returns:
            Next due date (UTC), or None if the chore does not recur.

        Raises:
            MetadataParseError: Required metadata missing or unparseable.
            InvalidFrequencyUnit: Interval chore with an unknown unit.
            InvalidFrequencyType: Frequency type outside FrequencyType.
            InvalidFrequencyValue: Unusable frequency for the chore type.
            ScheduleSearchExhausted: Weekday/month scan found no match.
        """
        if chore.frequency_type == FrequencyType.ONCE:
            return None

        completed_utc = as_utc(completed_at)
        if chore.next_due_date is not None:
            base_date = as_utc(chore.next_due_date)
        else:
            base_date = completed_utc

        rule: RecurrenceRule | None = None
        if chore.frequency_type in TIME_OF_DAY_FREQUENCIES:
            rule = ScheduleEngine.build_rule(chore)
            base_date = dt_with_time_of_day(base_date, rule.time_of_day)

        if chore.is_rolling:
            const.LOGGER.debug(
                "ScheduleEngine: Rolling chore %s, base is completion time",
                chore.id,
            )
            base_date = completed_utc

        next_due = ScheduleEngine._calculate_basic_next_due_date(
            chore, completed_utc, base_date, rule
        )
        if next_due is None:
            return None

        return ScheduleEngine.adjust_for_period(chore, as_utc(next_due))

    @staticmethod
    def build_rule(chore: Chore) -> RecurrenceRule:
        """Build the per-variant rule for a rule-based chore.

        Raises:
            InvalidFrequencyType: If the chore's type carries no rule.
        """
        match chore.frequency_type:
            case FrequencyType.INTERVAL:
                return build_interval_rule(chore)
            case FrequencyType.DAYS_OF_THE_WEEK:
                return build_days_of_week_rule(chore)
            case FrequencyType.DAY_OF_THE_MONTH:
                return build_day_of_month_rule(chore)
            case _:
                raise InvalidFrequencyType(chore.frequency_type, chore.id)

    @staticmethod
    def adjust_for_period(chore: Chore, candidate: datetime) -> datetime:
        """Clamp a candidate due date into the chore's annual active window.

        The stored period_start/period_end contribute month, day, hour and
        minute only; they are re-anchored to the candidate's year. Dates
        before the window move to its start, dates after it move to the
        start of next year's window.

        Args:
            chore: Chore carrying the optional window.
            candidate: Calculated due date.

        Returns:
            The adjusted date in UTC (the candidate itself when no window
            applies).
        """
        candidate_utc = as_utc(candidate)
        if chore.period_start is None or chore.period_end is None:
            return candidate_utc

        year = candidate_utc.year
        period_start = dt_reanchor_year(chore.period_start, year)
        period_end = dt_reanchor_year(chore.period_end, year)

        if candidate_utc < period_start:
            const.LOGGER.debug(
                "ScheduleEngine: %s before active period, moved to %s",
                candidate_utc,
                period_start,
            )
            return period_start

        if candidate_utc > period_end:
            next_start = dt_reanchor_year(chore.period_start, year + 1)
            const.LOGGER.debug(
                "ScheduleEngine: %s after active period, moved to %s",
                candidate_utc,
                next_start,
            )
            return next_start

        return candidate_utc

    # =========================================================================
    # Private: per-frequency dispatch
    # =========================================================================

    @staticmethod
    def _calculate_basic_next_due_date(
        chore: Chore,
        completed_at: datetime,
        base_date: datetime,
        rule: RecurrenceRule | None,
    ) -> datetime | None:
        """Dispatch to the frequency-specific calculation.

        Rule-based frequencies dispatch on the rule payload built by
        compute_next_due_date; everything else on the frequency type.
        """
        match rule:
            case IntervalRule():
                return ScheduleEngine._calculate_interval(chore, rule, base_date)
            case DaysOfWeekRule():
                return ScheduleEngine._calculate_days_of_week(chore, rule, base_date)
            case DayOfMonthRule():
                return ScheduleEngine._calculate_day_of_month(chore, rule, base_date)

        match chore.frequency_type:
            case (
                FrequencyType.DAILY
                | FrequencyType.WEEKLY
                | FrequencyType.MONTHLY
                | FrequencyType.YEARLY
            ):
                return base_date + ScheduleEngine.FIXED_STEPS[
                    FrequencyType(chore.frequency_type)
                ]
            case FrequencyType.ADAPTIVE:
                return ScheduleEngine._calculate_adaptive(chore, completed_at)
            case FrequencyType.ONCE | FrequencyType.NO_REPEAT | FrequencyType.TRIGGER:
                return None
            case _:
                raise InvalidFrequencyType(chore.frequency_type, chore.id)

    @staticmethod
    def _calculate_adaptive(chore: Chore, completed_at: datetime) -> datetime | None:
        """Repeat the last lateness: completed_at + (completed_at - due)."""
        if chore.next_due_date is None:
            const.LOGGER.debug(
                "ScheduleEngine: Adaptive chore %s has no previous due date",
                chore.id,
            )
            return None
        delay = completed_at - as_utc(chore.next_due_date)
        return completed_at + delay

    @staticmethod
    def _calculate_interval(
        chore: Chore, rule: IntervalRule, base_date: datetime
    ) -> datetime:
        """Add ``rule.count`` units to the base date."""
        result = dt_add_interval(as_utc(base_date), rule.unit, rule.count)
        if result is None:
            raise InvalidFrequencyValue(
                f"Cannot add {rule.count} {rule.unit} to {base_date}", chore.id
            )
        return result

    @staticmethod
    def _calculate_days_of_week(
        chore: Chore, rule: DaysOfWeekRule, base_date: datetime
    ) -> datetime:
        """Return the first listed weekday strictly after the base date."""
        for offset in range(1, const.DAYS_OF_WEEK_SCAN_LIMIT + 1):
            candidate = base_date + timedelta(days=offset)
            if candidate.weekday() in rule.days:
                return candidate

        raise ScheduleSearchExhausted(
            f"No matching weekday within {const.DAYS_OF_WEEK_SCAN_LIMIT} days",
            chore.id,
        )

    @staticmethod
    def _calculate_day_of_month(
        chore: Chore, rule: DayOfMonthRule, base_date: datetime
    ) -> datetime:
        """Return ``rule.day`` of the first listed month after the base month.

        Days past the end of a month clamp to its last day (day 31 in
        April is April 30).
        """
        for offset in range(1, const.DAY_OF_MONTH_SCAN_LIMIT + 1):
            candidate = base_date + relativedelta(months=offset, day=rule.day)
            if candidate.month in rule.months:
                return candidate

        raise ScheduleSearchExhausted(
            f"No matching month within {const.DAY_OF_MONTH_SCAN_LIMIT} months",
            chore.id,
        )


def compute_next_due_date(chore: Chore, completed_at: datetime) -> datetime | None:
    """Convenience wrapper for ScheduleEngine.compute_next_due_date."""
    return ScheduleEngine.compute_next_due_date(chore, completed_at)


def adjust_for_period(chore: Chore, candidate: datetime) -> datetime:
    """Convenience wrapper for ScheduleEngine.adjust_for_period."""
    return ScheduleEngine.adjust_for_period(chore, candidate)
