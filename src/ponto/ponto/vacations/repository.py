from __future__ import annotations

from typing import Protocol, Sequence

from .model import Vacation, VacationQuery


class VacationRepository(Protocol):
    def list_for_employee(self, query: VacationQuery) -> Sequence[Vacation]:
        """Requests matching the query, ordered by start date."""

        raise NotImplementedError
