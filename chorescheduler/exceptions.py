"""Exceptions raised by the chore scheduler engines.

All errors derive from ScheduleError so callers can decide in one place
whether to skip rescheduling, alert, or abort the triggering operation.
A ``None`` result from an engine is never an error: it means "do not
schedule again" or "cannot predict yet".
"""

from __future__ import annotations

from typing import Any


class ScheduleError(Exception):
    """Base exception for all scheduling errors.

    Attributes:
        chore_id: Identifier of the chore being scheduled, if known
    """

    def __init__(self, message: str, chore_id: Any = None) -> None:
        """Initialize ScheduleError.

        Args:
            message: Human-readable error description
            chore_id: Identifier of the chore being scheduled, if known
        """
        self.chore_id = chore_id
        if chore_id is not None:
            message = f"{message} (chore {chore_id})"
        super().__init__(message)


class MetadataParseError(ScheduleError):
    """Raised when frequency metadata is missing or cannot be parsed."""


class InvalidFrequencyUnit(ScheduleError):
    """Raised when an interval chore carries an unrecognised unit.

    Attributes:
        unit: The offending unit value
    """

    def __init__(self, unit: Any, chore_id: Any = None) -> None:
        """Initialize InvalidFrequencyUnit.

        Args:
            unit: The offending unit value
            chore_id: Identifier of the chore being scheduled, if known
        """
        self.unit = unit
        super().__init__(
            f"Invalid frequency unit {unit!r}, cannot calculate next due date",
            chore_id,
        )


class InvalidFrequencyType(ScheduleError):
    """Raised when a frequency type is outside the supported set.

    Attributes:
        frequency_type: The offending frequency type value
    """

    def __init__(self, frequency_type: Any, chore_id: Any = None) -> None:
        """Initialize InvalidFrequencyType.

        Args:
            frequency_type: The offending frequency type value
            chore_id: Identifier of the chore being scheduled, if known
        """
        self.frequency_type = frequency_type
        super().__init__(
            f"Invalid frequency type {frequency_type!r}, "
            "cannot calculate next due date",
            chore_id,
        )


class InvalidFrequencyValue(ScheduleError):
    """Raised when the frequency multiplier is unusable for the chore type."""


class ScheduleSearchExhausted(ScheduleError):
    """Raised when a bounded forward scan finds no matching occurrence."""
