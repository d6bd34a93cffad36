"""Helpers for the chore scheduler.

Submodules:
    - metadata_helpers: Recurrence metadata validation and rule building
"""

from . import metadata_helpers

__all__ = ["metadata_helpers"]
