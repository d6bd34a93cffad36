"""Chore Engine - assignee pool maintenance.

Removes a person from a chore's assignee pool and hands the chore to
someone who is still responsible for it.

ARCHITECTURE: Unlike the schedule and adaptive engines, this engine MUTATES
the chore it is given. Callers must serialise calls on the same chore
instance (for example by holding the task record lock). The random source
is injected so tests can pin the outcome.
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

from .. import const
from ..utils.dt_utils import dt_now_utc

if TYPE_CHECKING:
    from datetime import datetime

    from ..type_defs import Chore, UserId


class ChoreEngine:
    """Logic engine for chore assignment changes.

    All methods are static - no instance state.
    """

    # =========================================================================
    # ASSIGNMENT HELPERS
    # =========================================================================

    @staticmethod
    def remove_assignee_and_reassign(
        chore: Chore,
        user_id: UserId,
        rng: random.Random | None = None,
        now: datetime | None = None,
    ) -> None:
        """Remove a person from the chore and pick a new current assignee.

        Only the first matching entry is removed; removing a non-member
        leaves ``assignees`` unchanged but still reassigns and stamps
        ``updated_at``.

        Args:
            chore: Chore to mutate in place
            user_id: Person leaving the assignee pool
            rng: Random source for picking the new assignee. A fresh
                random.Random() is used when omitted.
            now: Timestamp for ``updated_at`` (defaults to current UTC time)
        """
        try:
            chore.assignees.remove(user_id)
        except ValueError:
            const.LOGGER.debug(
                "ChoreEngine: %s is not an assignee of chore %s", user_id, chore.id
            )

        if not chore.assignees:
            # Empty pool falls back to the creator
            chore.assigned_to = chore.created_by
        else:
            chore.assigned_to = (rng or random.Random()).choice(chore.assignees)

        chore.updated_at = now or dt_now_utc()
        const.LOGGER.debug(
            "ChoreEngine: Chore %s reassigned to %s", chore.id, chore.assigned_to
        )


def remove_assignee_and_reassign(
    chore: Chore,
    user_id: UserId,
    rng: random.Random | None = None,
    now: datetime | None = None,
) -> None:
    """Convenience wrapper for ChoreEngine.remove_assignee_and_reassign."""
    ChoreEngine.remove_assignee_and_reassign(chore, user_id, rng=rng, now=now)
