"""Single-owner parameter store with a change marker.

The store holds the current ParameterSet and a version counter. Every write
that goes through the store bumps the version; readers compare the version
with the one they last consumed to decide whether anything changed.
"""

from __future__ import annotations

import dataclasses

from .drake import ParameterSet


class ParameterStore:
    """Owns the ParameterSet shared between setup and the per-frame refresh."""

    def __init__(self, values: ParameterSet) -> None:
        self.values = values
        # A freshly inserted store counts as changed.
        self.version = 1

    def mark_changed(self) -> None:
        self.version += 1

    def replace(self, values: ParameterSet) -> None:
        """Swap in a whole new record and mark the store changed."""
        self.values = values
        self.mark_changed()

    def set(self, **changes: float) -> None:
        """Update one or more fields at once.

        The record is rebuilt and swapped in a single step, so a reader never
        observes half of an update. Unknown field names raise TypeError.
        """
        self.replace(dataclasses.replace(self.values, **changes))

    def is_changed_since(self, version: int) -> bool:
        return self.version > version
