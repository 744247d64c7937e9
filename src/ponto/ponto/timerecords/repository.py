from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import NewTimeRecord, TimeRecord, TimeRecordPatch, TimeRecordQuery


class TimeRecordRepository(Protocol):
    def find_time_records(self, query: TimeRecordQuery) -> Sequence[TimeRecord]:
        """Records matching the query, ordered by timestamp ascending."""

        raise NotImplementedError

    def get_by_id(self, record_id: int) -> Optional[TimeRecord]:
        raise NotImplementedError

    def create_time_record(self, new: NewTimeRecord) -> TimeRecord:
        """Insert atomically.

        Raises DuplicatePunch when (employee, type, day) already exists.
        """

        raise NotImplementedError

    def update_time_record(self, record_id: int, patch: TimeRecordPatch) -> Optional[TimeRecord]:
        """Admin-only correction. Returns None when the record does not exist."""

        raise NotImplementedError
