"""Adaptive Engine - history-weighted due date prediction.

Alternative to the fixed-rule ``adaptive`` frequency of ScheduleEngine:
instead of repeating the last lateness, it predicts the next gap between
completions from a decay-weighted average of past gaps, so recent habits
dominate while older ones still contribute.

ARCHITECTURE: This is a pure logic engine. Deterministic for a given chore,
completion time, history and decay factor.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from .. import const
from ..utils.dt_utils import as_utc

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ..type_defs import Chore, ChoreHistory


class AdaptiveEngine:
    """Pure logic engine for history-weighted scheduling.

    All methods are static - no instance state.
    """

    @staticmethod
    def estimate_next_due_date(
        chore: Chore,
        completed_at: datetime,
        history: Sequence[ChoreHistory],
        decay_factor: float = const.ADAPTIVE_DECAY_FACTOR,
    ) -> datetime | None:
        """Predict the next due date from the chore's completion history.

        The new completion is prepended to ``history`` (most recent first).
        Gap ``i`` is the time between entry ``i`` and entry ``i + 1`` and is
        weighted by ``decay_factor ** i``.

        Args:
            chore: The completed chore.
            completed_at: Completion timestamp.
            history: Past completions, most recent first.
            decay_factor: Weight ratio between consecutive gaps, in (0, 1].

        Returns:
            Predicted next due date (UTC). With fewer than two completions,
            falls back to repeating the last lateness if the chore has a due
            date, otherwise None (not enough data yet).

        Raises:
            ValueError: If decay_factor is outside (0, 1].

        Example:
            Gaps of 10, 20 and 30 days (newest first) with decay 0.5 give
            (10 + 20*0.5 + 30*0.25) / 1.75 ≈ 15.7 days.
        """
        if not 0 < decay_factor <= 1:
            raise ValueError(f"decay_factor must be in (0, 1], got {decay_factor}")

        completed_utc = as_utc(completed_at)
        completions = [completed_utc]
        for entry in history:
            if entry.completed_at is None:
                const.LOGGER.warning(
                    "AdaptiveEngine: Skipping history entry without completion "
                    "time for chore %s",
                    chore.id,
                )
                continue
            completions.append(as_utc(entry.completed_at))

        if len(completions) < const.ADAPTIVE_MIN_HISTORY:
            if chore.next_due_date is None:
                const.LOGGER.debug(
                    "AdaptiveEngine: Not enough history to predict chore %s",
                    chore.id,
                )
                return None
            delay = completed_utc - as_utc(chore.next_due_date)
            return completed_utc + delay

        total_delay = 0.0
        total_weight = 0.0
        for index in range(len(completions) - 1):
            delay_seconds = (completions[index] - completions[index + 1]).total_seconds()
            weight = decay_factor**index
            total_delay += delay_seconds * weight
            total_weight += weight

        average_delay = int(total_delay / total_weight)
        return completed_utc + timedelta(seconds=average_delay)


def estimate_adaptive_next_due_date(
    chore: Chore,
    completed_at: datetime,
    history: Sequence[ChoreHistory],
    decay_factor: float = const.ADAPTIVE_DECAY_FACTOR,
) -> datetime | None:
    """Convenience wrapper for AdaptiveEngine.estimate_next_due_date."""
    return AdaptiveEngine.estimate_next_due_date(
        chore, completed_at, history, decay_factor
    )
