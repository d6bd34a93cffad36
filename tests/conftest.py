"""Shared fixtures for chore scheduler tests."""

from collections.abc import Iterator
import random
from zoneinfo import ZoneInfo

import pytest

from chorescheduler.utils import dt_utils


@pytest.fixture
def restore_default_timezone() -> Iterator[None]:
    """Restore the dt_utils default timezone after a test changes it."""
    original = dt_utils.get_default_timezone()
    yield
    dt_utils.set_default_timezone(original)


@pytest.fixture
def new_york_tz(restore_default_timezone: None) -> ZoneInfo:
    """Use America/New_York as the default timezone for naive datetimes."""
    # pylint: disable=unused-argument
    tz = ZoneInfo("America/New_York")
    dt_utils.set_default_timezone(tz)
    return tz


@pytest.fixture
def seeded_rng() -> random.Random:
    """Return a deterministic random source."""
    return random.Random(1234)
