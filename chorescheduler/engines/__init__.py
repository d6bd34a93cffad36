"""Engine modules for the chore scheduler.

Contains specialized computation engines:
- schedule_engine: Next due date per recurrence type, active period clamping
- adaptive_engine: History-weighted due date prediction
- chore_engine: Assignee removal and reassignment
"""

# Use relative imports within package to avoid mypy module resolution issues
from .adaptive_engine import AdaptiveEngine, estimate_adaptive_next_due_date
from .chore_engine import ChoreEngine, remove_assignee_and_reassign
from .schedule_engine import ScheduleEngine, adjust_for_period, compute_next_due_date

__all__ = [
    "AdaptiveEngine",
    "ChoreEngine",
    "ScheduleEngine",
    "adjust_for_period",
    "compute_next_due_date",
    "estimate_adaptive_next_due_date",
    "remove_assignee_and_reassign",
]
