"""Tests for AdaptiveEngine - pure logic, no fixtures needed.

These tests validate the decay-weighted prediction of the next due date
from a chore's completion history.
"""

from __future__ import annotations

from datetime import timedelta

import pytest

from chorescheduler.engines.adaptive_engine import (
    AdaptiveEngine,
    estimate_adaptive_next_due_date,
)
from chorescheduler.type_defs import ChoreHistory
from tests.helpers import FREQUENCY_ADAPTIVE, make_chore, make_history, make_utc_dt

COMPLETED_AT = make_utc_dt(2024, 3, 1)


# =============================================================================
# TEST: INSUFFICIENT HISTORY
# =============================================================================


class TestInsufficientHistory:
    """Fewer than two completions after prepending the current one."""

    def test_no_history_repeats_lateness(self) -> None:
        """Falls back to completed_at + (completed_at - due)."""
        chore = make_chore(
            FREQUENCY_ADAPTIVE, next_due_date=COMPLETED_AT - timedelta(hours=3)
        )

        result = estimate_adaptive_next_due_date(chore, COMPLETED_AT, [])

        assert result == COMPLETED_AT + timedelta(hours=3)

    def test_no_history_no_due_date_returns_none(self) -> None:
        """Nothing to predict from yet - not an error."""
        chore = make_chore(FREQUENCY_ADAPTIVE)

        assert estimate_adaptive_next_due_date(chore, COMPLETED_AT, []) is None

    def test_entries_without_timestamp_are_skipped(self) -> None:
        """History without completion times counts as no history."""
        chore = make_chore(FREQUENCY_ADAPTIVE)

        result = estimate_adaptive_next_due_date(
            chore, COMPLETED_AT, make_history(None, None)
        )

        assert result is None


# =============================================================================
# TEST: WEIGHTED AVERAGE
# =============================================================================


class TestWeightedAverage:
    """Decay-weighted average of gaps between completions."""

    def test_single_previous_completion_repeats_gap(self) -> None:
        """One gap of seven days predicts seven more days."""
        chore = make_chore(FREQUENCY_ADAPTIVE)
        history = make_history(COMPLETED_AT - timedelta(days=7))

        result = estimate_adaptive_next_due_date(chore, COMPLETED_AT, history)

        assert result == COMPLETED_AT + timedelta(days=7)

    def test_recent_gaps_dominate(self) -> None:
        """Gaps of 10, 20, 30 days (newest first) give about 15.7 days."""
        chore = make_chore(FREQUENCY_ADAPTIVE)
        history = make_history(
            COMPLETED_AT - timedelta(days=10),
            COMPLETED_AT - timedelta(days=30),
            COMPLETED_AT - timedelta(days=60),
        )

        result = estimate_adaptive_next_due_date(chore, COMPLETED_AT, history)

        assert result is not None
        # (10 + 20 * 0.5 + 30 * 0.25) / 1.75 days, truncated to seconds
        assert result == COMPLETED_AT + timedelta(seconds=1357714)
        predicted = result - COMPLETED_AT
        assert abs(predicted - timedelta(days=10)) < abs(
            predicted - timedelta(days=30)
        )

    def test_decay_of_one_is_plain_mean(self) -> None:
        """Without decay all gaps weigh the same."""
        chore = make_chore(FREQUENCY_ADAPTIVE)
        history = make_history(
            COMPLETED_AT - timedelta(days=10),
            COMPLETED_AT - timedelta(days=30),
        )

        result = AdaptiveEngine.estimate_next_due_date(
            chore, COMPLETED_AT, history, decay_factor=1.0
        )

        assert result == COMPLETED_AT + timedelta(days=15)

    def test_history_supersedes_due_date(self) -> None:
        """With enough history the previous due date is not used."""
        chore = make_chore(
            FREQUENCY_ADAPTIVE, next_due_date=COMPLETED_AT - timedelta(days=1)
        )
        history = make_history(COMPLETED_AT - timedelta(days=4))

        result = estimate_adaptive_next_due_date(chore, COMPLETED_AT, history)

        assert result == COMPLETED_AT + timedelta(days=4)

    def test_missing_timestamps_do_not_break_pairs(self) -> None:
        """Entries without completion times are dropped before pairing."""
        chore = make_chore(FREQUENCY_ADAPTIVE)
        history = [
            ChoreHistory(completed_at=None),
            ChoreHistory(completed_at=COMPLETED_AT - timedelta(days=6)),
        ]

        result = estimate_adaptive_next_due_date(chore, COMPLETED_AT, history)

        assert result == COMPLETED_AT + timedelta(days=6)

    def test_is_deterministic(self) -> None:
        """Same inputs, same prediction."""
        chore = make_chore(FREQUENCY_ADAPTIVE)
        history = make_history(
            COMPLETED_AT - timedelta(days=3, hours=5),
            COMPLETED_AT - timedelta(days=9, hours=1),
        )

        first = estimate_adaptive_next_due_date(chore, COMPLETED_AT, history)
        second = estimate_adaptive_next_due_date(chore, COMPLETED_AT, history)

        assert first == second


# =============================================================================
# TEST: CONFIGURATION
# =============================================================================


class TestDecayFactorValidation:
    """decay_factor must be in (0, 1]."""

    @pytest.mark.parametrize("decay_factor", [0.0, -0.5, 1.5])
    def test_out_of_range_raises(self, decay_factor: float) -> None:
        """Zero, negative and growing weights are rejected."""
        chore = make_chore(FREQUENCY_ADAPTIVE)

        with pytest.raises(ValueError, match="decay_factor"):
            AdaptiveEngine.estimate_next_due_date(
                chore, COMPLETED_AT, [], decay_factor=decay_factor
            )

    def test_from_dict_history(self) -> None:
        """History loaded from the store's camelCase records."""
        chore = make_chore(FREQUENCY_ADAPTIVE)
        history = [ChoreHistory.from_dict({"completedAt": "2024-02-27T00:00:00Z"})]

        result = estimate_adaptive_next_due_date(chore, COMPLETED_AT, history)

        assert result == make_utc_dt(2024, 3, 4)
