from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date


class WorkWeek(ABC):
    """Expected daily hours by calendar date."""

    @abstractmethod
    def expected_hours(self, day: date) -> float:
        raise NotImplementedError

    def is_workday(self, day: date) -> bool:
        return self.expected_hours(day) > 0


class UnevenWorkWeek(WorkWeek):
    """44h week: Monday-Thursday 9h, Friday 8h, weekend off."""

    # Indexed by date.weekday() (Monday=0).
    HOURS_BY_WEEKDAY = (9.0, 9.0, 9.0, 9.0, 8.0, 0.0, 0.0)

    def expected_hours(self, day: date) -> float:
        return self.HOURS_BY_WEEKDAY[day.weekday()]


STANDARD_WORK_WEEK = UnevenWorkWeek()


def expected_hours(day: date) -> float:
    return STANDARD_WORK_WEEK.expected_hours(day)


WORK_WEEKS: dict[str, WorkWeek] = {
    "STANDARD_44H": STANDARD_WORK_WEEK,
}


def work_week_for(schedule: str | None) -> WorkWeek:
    """Resolve an employee's schedule key; unknown or empty keys use the 44h week."""
    return WORK_WEEKS.get((schedule or "").upper(), STANDARD_WORK_WEEK)
