from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from typing import Optional, Sequence

from ...rules.work_week import WorkWeek
from ...timerecords.model import TimeRecord
from ..model import DailyHours


class DailyHoursCalculator(ABC):
    """Calculator interface (Strategy Pattern for daily hours)."""

    @abstractmethod
    def calculate(
        self,
        records: Sequence[TimeRecord],
        day: date,
        *,
        work_week: Optional[WorkWeek] = None,
    ) -> DailyHours:
        raise NotImplementedError
