from __future__ import annotations

from typing import Protocol, Sequence

from .model import OvertimeQuery, OvertimeRequest


class OvertimeRepository(Protocol):
    def list_for_employee(self, query: OvertimeQuery) -> Sequence[OvertimeRequest]:
        """Requests matching the query, ordered by work date."""

        raise NotImplementedError
