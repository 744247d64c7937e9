from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..timerecords.model import TimeRecord


@dataclass(frozen=True)
class DailyHours:
    """Hours computed for one calendar day.

    `overtime_hours` is premium-weighted; `raw_overtime_hours` is the clock time
    beyond `expected_hours`.
    """

    work_date: date
    expected_hours: float
    worked_hours: float = 0.0
    regular_hours: float = 0.0
    overtime_hours: float = 0.0
    raw_overtime_hours: float = 0.0
    owed_hours: float = 0.0
    total_hours: float = 0.0
    lunch_hours: float = 0.0
    premium: Optional[float] = None
    premium_label: Optional[str] = None
    is_justified: bool = False
    is_complete: bool = False
    issues: tuple[str, ...] = ()


@dataclass(frozen=True)
class HoursTotals:
    worked_hours: float = 0.0
    expected_hours: float = 0.0
    regular_hours: float = 0.0
    overtime_hours: float = 0.0
    owed_hours: float = 0.0

    def plus(self, day: DailyHours) -> "HoursTotals":
        return HoursTotals(
            worked_hours=self.worked_hours + day.worked_hours,
            expected_hours=self.expected_hours + day.expected_hours,
            regular_hours=self.regular_hours + day.regular_hours,
            overtime_hours=self.overtime_hours + day.overtime_hours,
            owed_hours=self.owed_hours + day.owed_hours,
        )


@dataclass(frozen=True)
class BankHoursResult:
    """Compensatory-hours position over the effective (clipped) range.

    `start_date`/`end_date` are None when the clipped range is empty
    (requested window entirely before hire or after today).
    """

    employee_id: int
    start_date: Optional[date]
    end_date: Optional[date]
    total_worked_hours: float = 0.0
    total_expected_hours: float = 0.0
    total_overtime_hours: float = 0.0
    total_owed_hours: float = 0.0
    balance_hours: float = 0.0
    days: tuple[DailyHours, ...] = ()


@dataclass(frozen=True)
class DailySummary:
    employee_id: int
    work_date: date
    records: tuple[TimeRecord, ...]
    hours: DailyHours

    @property
    def is_complete(self) -> bool:
        return self.hours.is_complete


@dataclass(frozen=True)
class PeriodSummary:
    employee_id: int
    start_date: Optional[date]
    end_date: Optional[date]
    total_days: int = 0
    present_days: int = 0
    absent_days: int = 0
    justified_days: int = 0
    total_hours: float = 0.0
    regular_hours: float = 0.0
    overtime_hours: float = 0.0
    average_hours_per_day: float = 0.0
    late_arrivals: int = 0
    early_departures: int = 0
