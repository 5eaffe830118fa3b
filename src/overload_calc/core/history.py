"""
In-memory session history.

A bounded, most-recent-first list of SessionRecord.  Each logical user
owns their own SessionHistory instance; nothing is shared or persisted.
"""

from typing import Iterator

from .config import HISTORY_CAPACITY
from .models import SessionRecord


class SessionHistory:
    """
    The last ``capacity`` computed sessions, newest first.

    Appending beyond capacity drops the oldest records.  Records themselves
    are never modified.
    """

    def __init__(self, capacity: int = HISTORY_CAPACITY):
        """
        Initialize an empty history.

        Args:
            capacity: Maximum number of records kept (default 10)
        """
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            raise ValueError(f"capacity must be a positive integer, got {capacity!r}")
        self.capacity = capacity
        self._records: list[SessionRecord] = []

    def append(self, record: SessionRecord) -> None:
        """Insert a record at the front, evicting the oldest past capacity."""
        self._records.insert(0, record)
        if len(self._records) > self.capacity:
            del self._records[self.capacity:]

    def all(self) -> tuple[SessionRecord, ...]:
        """Return all records, most recent first."""
        return tuple(self._records)

    def is_empty(self) -> bool:
        return not self._records

    def latest(self) -> SessionRecord | None:
        """Return the most recent record, or None if empty."""
        return self._records[0] if self._records else None

    def total_volume(self) -> float:
        """Sum of total volume over the retained records."""
        return sum(r.total_volume for r in self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[SessionRecord]:
        return iter(tuple(self._records))
