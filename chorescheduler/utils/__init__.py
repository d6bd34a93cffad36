"""Pure Python utilities for the chore scheduler.

Submodules:
    - dt_utils: Date/time parsing, normalisation and interval arithmetic

Usage:
    from . import dt_utils
    from .dt_utils import as_utc
"""

from . import dt_utils

__all__ = ["dt_utils"]
