"""Chore scheduler.

Computes the next occurrence of recurring chores and maintains their
assignee pool. Persistence, APIs and notifications live with the caller.
"""

from .engines import (
    AdaptiveEngine,
    ChoreEngine,
    ScheduleEngine,
    adjust_for_period,
    compute_next_due_date,
    estimate_adaptive_next_due_date,
    remove_assignee_and_reassign,
)
from .exceptions import (
    InvalidFrequencyType,
    InvalidFrequencyUnit,
    InvalidFrequencyValue,
    MetadataParseError,
    ScheduleError,
    ScheduleSearchExhausted,
)
from .type_defs import Chore, ChoreHistory, FrequencyType, IntervalUnit

__all__ = [
    "AdaptiveEngine",
    "Chore",
    "ChoreEngine",
    "ChoreHistory",
    "FrequencyType",
    "IntervalUnit",
    "InvalidFrequencyType",
    "InvalidFrequencyUnit",
    "InvalidFrequencyValue",
    "MetadataParseError",
    "ScheduleEngine",
    "ScheduleError",
    "ScheduleSearchExhausted",
    "adjust_for_period",
    "compute_next_due_date",
    "estimate_adaptive_next_due_date",
    "remove_assignee_and_reassign",
]
