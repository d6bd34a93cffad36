"""Type definitions for chore scheduler data structures.

ARCHITECTURE DECISION: HYBRID APPROACH (dataclass + TypedDict)
==============================================================

1. **TypedDict for the WIRE / PERSISTED shape** (camelCase keys owned by the
   task store and API layer): ChoreData, ChoreHistoryData,
   FrequencyMetadataData. These document what arrives at the boundary.

2. **dataclass for the IN-MEMORY model** the engines read and mutate:
   Chore, ChoreHistory. ``Chore.from_dict`` converts from the wire shape.

3. **Frozen per-variant rule payloads** (IntervalRule, DaysOfWeekRule,
   DayOfMonthRule) built on demand from the raw metadata, so a rule that
   exists is a rule that is complete.

IMPORTANT: This file must NOT import from engines/ or helpers/ to avoid
circular dependencies. Only import from const.py and utils/.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import Any, NotRequired, TypedDict

from . import const
from .utils.dt_utils import dt_parse

# =============================================================================
# Type Aliases
# =============================================================================

UserId = int | str
ChoreId = int | str


# =============================================================================
# Enumerations
# =============================================================================


class FrequencyType(StrEnum):
    """Closed set of recurrence types a chore can carry."""

    ONCE = const.FREQUENCY_ONCE
    DAILY = const.FREQUENCY_DAILY
    WEEKLY = const.FREQUENCY_WEEKLY
    MONTHLY = const.FREQUENCY_MONTHLY
    YEARLY = const.FREQUENCY_YEARLY
    ADAPTIVE = const.FREQUENCY_ADAPTIVE
    INTERVAL = const.FREQUENCY_INTERVAL
    DAYS_OF_THE_WEEK = const.FREQUENCY_DAYS_OF_THE_WEEK
    DAY_OF_THE_MONTH = const.FREQUENCY_DAY_OF_THE_MONTH
    NO_REPEAT = const.FREQUENCY_NO_REPEAT
    TRIGGER = const.FREQUENCY_TRIGGER


class IntervalUnit(StrEnum):
    """Granularity of an ``interval`` chore."""

    HOURS = const.TIME_UNIT_HOURS
    DAYS = const.TIME_UNIT_DAYS
    WEEKS = const.TIME_UNIT_WEEKS
    MONTHS = const.TIME_UNIT_MONTHS
    YEARS = const.TIME_UNIT_YEARS


# Frequency types whose time-of-day comes from the metadata payload
TIME_OF_DAY_FREQUENCIES: frozenset[FrequencyType] = frozenset(
    {
        FrequencyType.DAY_OF_THE_MONTH,
        FrequencyType.DAYS_OF_THE_WEEK,
        FrequencyType.INTERVAL,
    }
)


# =============================================================================
# Wire / Persisted Shapes
# =============================================================================


class FrequencyMetadataData(TypedDict, total=False):
    """Recurrence metadata payload as produced by the upstream collaborator."""

    time: str  # RFC 3339 timestamp, only hour/minute significant
    unit: str  # TIME_UNIT_* (interval only)
    days: list[str]  # Weekday names (days_of_the_week only)
    months: list[str]  # Month names (day_of_the_month only)


class ChoreAssigneeData(TypedDict):
    """Assignee entry as stored by the task store."""

    userId: UserId


class ChoreData(TypedDict):
    """Chore record as persisted by the task store (camelCase keys)."""

    id: NotRequired[ChoreId]
    name: NotRequired[str]
    frequencyType: str
    frequency: NotRequired[int]
    frequencyMetadata: NotRequired[str | FrequencyMetadataData | None]
    isRolling: NotRequired[bool]
    nextDueDate: NotRequired[str | None]
    periodStart: NotRequired[str | None]
    periodEnd: NotRequired[str | None]
    assignees: NotRequired[list[UserId] | list[ChoreAssigneeData]]
    assignedTo: NotRequired[UserId | None]
    createdBy: NotRequired[UserId | None]
    updatedAt: NotRequired[str | None]


class ChoreHistoryData(TypedDict):
    """Completion record as persisted by the task store."""

    completedAt: str | None


# =============================================================================
# Per-Variant Rule Payloads
# =============================================================================


@dataclass(frozen=True)
class IntervalRule:
    """Every ``count`` units of ``unit``, at ``time_of_day``."""

    unit: IntervalUnit
    count: int
    time_of_day: datetime


@dataclass(frozen=True)
class DaysOfWeekRule:
    """On the listed weekdays (0=Mon, 6=Sun), at ``time_of_day``."""

    days: frozenset[int]
    time_of_day: datetime


@dataclass(frozen=True)
class DayOfMonthRule:
    """On ``day`` of the listed months (1=Jan, 12=Dec), at ``time_of_day``."""

    day: int
    months: frozenset[int]
    time_of_day: datetime


RecurrenceRule = IntervalRule | DaysOfWeekRule | DayOfMonthRule


# =============================================================================
# In-Memory Model
# =============================================================================


@dataclass
class Chore:
    """A recurring task with its recurrence rule and current assignment.

    ``frequency_metadata`` stays in its boundary form (JSON text or mapping)
    and is parsed on demand by helpers.metadata_helpers. ``frequency_type``
    values outside FrequencyType are kept as raw strings so the schedule
    engine can report them.
    """

    frequency_type: FrequencyType | str
    frequency: int = 0
    frequency_metadata: str | dict[str, Any] | None = None
    is_rolling: bool = False
    next_due_date: datetime | None = None
    period_start: datetime | None = None
    period_end: datetime | None = None
    assignees: list[UserId] = field(default_factory=list)
    assigned_to: UserId | None = None
    created_by: UserId | None = None
    updated_at: datetime | None = None
    id: ChoreId | None = None
    name: str = ""

    def __post_init__(self) -> None:
        """Coerce known frequency type strings to the enum."""
        if not isinstance(self.frequency_type, FrequencyType):
            try:
                self.frequency_type = FrequencyType(self.frequency_type)
            except ValueError:
                const.LOGGER.debug(
                    "Chore %s has unknown frequency type: %s",
                    self.id,
                    self.frequency_type,
                )

    @classmethod
    def from_dict(cls, data: ChoreData | dict[str, Any]) -> Chore:
        """Build a Chore from its persisted camelCase representation.

        Args:
            data: Chore record as stored by the task store

        Returns:
            In-memory Chore. Unparseable timestamps become None and
            assignee entries without a user id are dropped.
        """
        assignees: list[UserId] = []
        for entry in data.get(const.DATA_CHORE_ASSIGNEES) or []:
            user_id = (
                entry.get(const.DATA_CHORE_ASSIGNEE_USER_ID)
                if isinstance(entry, dict)
                else entry
            )
            if user_id is None:
                const.LOGGER.warning(
                    "Chore %s: Skipping assignee entry without user id: %s",
                    data.get(const.DATA_CHORE_ID),
                    entry,
                )
                continue
            assignees.append(user_id)

        return cls(
            id=data.get(const.DATA_CHORE_ID),
            name=data.get(const.DATA_CHORE_NAME) or "",
            frequency_type=data[const.DATA_CHORE_FREQUENCY_TYPE],
            frequency=int(data.get(const.DATA_CHORE_FREQUENCY) or 0),
            frequency_metadata=data.get(const.DATA_CHORE_FREQUENCY_METADATA),
            is_rolling=bool(data.get(const.DATA_CHORE_IS_ROLLING, False)),
            next_due_date=dt_parse(data.get(const.DATA_CHORE_NEXT_DUE_DATE)),
            period_start=dt_parse(data.get(const.DATA_CHORE_PERIOD_START)),
            period_end=dt_parse(data.get(const.DATA_CHORE_PERIOD_END)),
            assignees=assignees,
            assigned_to=data.get(const.DATA_CHORE_ASSIGNED_TO),
            created_by=data.get(const.DATA_CHORE_CREATED_BY),
            updated_at=dt_parse(data.get(const.DATA_CHORE_UPDATED_AT)),
        )


@dataclass(frozen=True)
class ChoreHistory:
    """A single completion record."""

    completed_at: datetime | None

    @classmethod
    def from_dict(cls, data: ChoreHistoryData | dict[str, Any]) -> ChoreHistory:
        """Build a ChoreHistory from its persisted representation."""
        return cls(completed_at=dt_parse(data.get(const.DATA_HISTORY_COMPLETED_AT)))
