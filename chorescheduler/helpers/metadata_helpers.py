# File: helpers/metadata_helpers.py
"""Recurrence metadata parsing for the chore scheduler.

Frequency metadata reaches the engines in its persistence-boundary form:
JSON text (or an already-decoded mapping) produced by an upstream
collaborator. This module validates it on demand with voluptuous and turns
it into the per-variant rule payloads from type_defs.

## LAYERS ##

1. Structure: `parse_frequency_metadata(raw)` decodes JSON and checks the
   payload shape against FREQUENCY_METADATA_SCHEMA.
2. Fields: `parse_time_of_day()`, `validate_weekday_names()`,
   `validate_month_names()` convert individual fields.
3. Rules: `build_interval_rule()`, `build_days_of_week_rule()`,
   `build_day_of_month_rule()` assemble a complete rule for one chore.

Every failure surfaces as MetadataParseError, except an interval unit that
is present but unrecognised, which is InvalidFrequencyUnit.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import voluptuous as vol

from .. import const
from ..exceptions import (
    InvalidFrequencyUnit,
    InvalidFrequencyValue,
    MetadataParseError,
)
from ..type_defs import (
    DayOfMonthRule,
    DaysOfWeekRule,
    IntervalRule,
    IntervalUnit,
)
from ..utils.dt_utils import dt_parse_rfc3339

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import datetime

    from ..type_defs import Chore


# =============================================================================
# FIELD VALIDATORS
# =============================================================================


def validate_rfc3339(value: Any) -> datetime:
    """Validate and convert an RFC 3339 timestamp string.

    Args:
        value: Timestamp string like "2024-03-01T18:30:00Z"

    Returns:
        Timezone-aware datetime

    Raises:
        vol.Invalid: If the value is not an RFC 3339 timestamp
    """
    try:
        return dt_parse_rfc3339(value)
    except (TypeError, ValueError) as err:
        raise vol.Invalid(f"Invalid time '{value}': {err}") from err


def _name_index_validator(
    names: tuple[str, ...], label: str, offset: int
) -> Callable[[list[str]], frozenset[int]]:
    """Build a validator mapping case-insensitive names to indexes."""

    def _validate(values: list[str]) -> frozenset[int]:
        indexes: set[int] = set()
        for value in values:
            normalized = value.strip().lower()
            if normalized not in names:
                raise vol.Invalid(f"Unknown {label} name: '{value}'")
            indexes.add(names.index(normalized) + offset)
        return frozenset(indexes)

    return _validate


# Weekday names -> datetime.weekday() indexes (0=Mon)
validate_weekday_names = vol.All(
    [str],
    vol.Length(min=1),
    _name_index_validator(const.WEEKDAY_NAMES, "weekday", 0),
)

# Month names -> datetime.month numbers (1=Jan)
validate_month_names = vol.All(
    [str],
    vol.Length(min=1),
    _name_index_validator(const.MONTH_NAMES, "month", 1),
)


# =============================================================================
# PAYLOAD SCHEMA
# =============================================================================

# Shape only: field contents are converted per frequency type, so a daily
# chore never fails on a weekday list it does not use.
FREQUENCY_METADATA_SCHEMA = vol.Schema(
    {
        vol.Optional(const.METADATA_TIME): vol.Any(None, str),
        vol.Optional(const.METADATA_UNIT): vol.Any(None, str),
        vol.Optional(const.METADATA_DAYS): vol.Any(None, [str]),
        vol.Optional(const.METADATA_MONTHS): vol.Any(None, [str]),
    },
    extra=vol.ALLOW_EXTRA,
)


def parse_frequency_metadata(
    raw: str | dict[str, Any] | None,
    chore_id: Any = None,
) -> dict[str, Any]:
    """Decode and structurally validate a frequency metadata payload.

    Args:
        raw: JSON text, decoded mapping, or None
        chore_id: Chore identifier for error context

    Returns:
        Validated metadata mapping

    Raises:
        MetadataParseError: If the payload is missing, not JSON, not an
            object, or has fields of the wrong type
    """
    if raw is None or raw == "":
        raise MetadataParseError("Frequency metadata is missing", chore_id)

    payload: Any = raw
    if isinstance(raw, (str, bytes)):
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as err:
            raise MetadataParseError(
                f"Error unmarshalling frequency metadata: {err}", chore_id
            ) from err

    if not isinstance(payload, dict):
        raise MetadataParseError(
            "Frequency metadata must be a JSON object", chore_id
        )

    try:
        return FREQUENCY_METADATA_SCHEMA(payload)
    except vol.Invalid as err:
        raise MetadataParseError(
            f"Invalid frequency metadata: {err}", chore_id
        ) from err


def _convert_field(
    metadata: dict[str, Any],
    key: str,
    validator: Any,
    chore_id: Any,
) -> Any:
    """Run a field validator, mapping absence and vol.Invalid to MetadataParseError."""
    value = metadata.get(key)
    if value is None:
        raise MetadataParseError(
            f"Frequency metadata is missing '{key}'", chore_id
        )
    try:
        return vol.Schema(validator)(value)
    except vol.Invalid as err:
        raise MetadataParseError(
            f"Error parsing '{key}' in frequency metadata: {err}", chore_id
        ) from err


def parse_time_of_day(metadata: dict[str, Any], chore_id: Any = None) -> datetime:
    """Return the metadata timestamp whose hour/minute fix the due time.

    Raises:
        MetadataParseError: If ``time`` is missing or not RFC 3339
    """
    return _convert_field(metadata, const.METADATA_TIME, validate_rfc3339, chore_id)


# =============================================================================
# RULE BUILDERS
# =============================================================================


def build_interval_rule(chore: Chore) -> IntervalRule:
    """Build the rule for an ``interval`` chore.

    Raises:
        MetadataParseError: Missing/invalid metadata, time or unit
        InvalidFrequencyUnit: Unit present but not hours/days/weeks/months/years
    """
    metadata = parse_frequency_metadata(chore.frequency_metadata, chore.id)
    time_of_day = parse_time_of_day(metadata, chore.id)

    raw_unit = metadata.get(const.METADATA_UNIT)
    if raw_unit is None:
        raise MetadataParseError(
            f"Frequency metadata is missing '{const.METADATA_UNIT}'", chore.id
        )
    try:
        unit = IntervalUnit(raw_unit)
    except ValueError as err:
        raise InvalidFrequencyUnit(raw_unit, chore.id) from err

    return IntervalRule(unit=unit, count=chore.frequency, time_of_day=time_of_day)


def build_days_of_week_rule(chore: Chore) -> DaysOfWeekRule:
    """Build the rule for a ``days_of_the_week`` chore.

    Raises:
        MetadataParseError: Missing/invalid metadata, time or weekday names
    """
    metadata = parse_frequency_metadata(chore.frequency_metadata, chore.id)
    time_of_day = parse_time_of_day(metadata, chore.id)
    days = _convert_field(
        metadata, const.METADATA_DAYS, validate_weekday_names, chore.id
    )
    return DaysOfWeekRule(days=days, time_of_day=time_of_day)


def build_day_of_month_rule(chore: Chore) -> DayOfMonthRule:
    """Build the rule for a ``day_of_the_month`` chore.

    ``chore.frequency`` is the target day of the month.

    Raises:
        MetadataParseError: Missing/invalid metadata, time or month names
        InvalidFrequencyValue: Target day outside 1..31
    """
    metadata = parse_frequency_metadata(chore.frequency_metadata, chore.id)
    time_of_day = parse_time_of_day(metadata, chore.id)
    months = _convert_field(
        metadata, const.METADATA_MONTHS, validate_month_names, chore.id
    )

    if not const.MIN_DAY_OF_MONTH <= chore.frequency <= const.MAX_DAY_OF_MONTH:
        raise InvalidFrequencyValue(
            f"Day of month must be between {const.MIN_DAY_OF_MONTH} and "
            f"{const.MAX_DAY_OF_MONTH}, got {chore.frequency}",
            chore.id,
        )

    return DayOfMonthRule(day=chore.frequency, months=months, time_of_day=time_of_day)
