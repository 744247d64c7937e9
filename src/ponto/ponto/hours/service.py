from __future__ import annotations

import logging
from collections import defaultdict
from datetime import date, datetime, timedelta
from functools import reduce
from typing import Optional, Sequence
from zoneinfo import ZoneInfo

from ..common.datetime_utils import business_today, iter_days
from ..common.validators import require_date_range
from ..core.enums import TimeRecordType
from ..core.exceptions import NotFoundError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..rules.work_week import work_week_for
from ..settings.repository import SettingsRepository, StaticSettingsRepository
from ..timerecords.model import TimeRecord, TimeRecordQuery
from ..timerecords.repository import TimeRecordRepository
from .calculator.base import DailyHoursCalculator
from .calculator.standard_calculator import StandardDailyHoursCalculator
from .model import BankHoursResult, DailyHours, DailySummary, HoursTotals, PeriodSummary

logger = logging.getLogger(__name__)


def _group_by_day(records: Sequence[TimeRecord]) -> dict[date, list[TimeRecord]]:
    grouped: dict[date, list[TimeRecord]] = defaultdict(list)
    for r in records:
        grouped[r.work_date].append(r)
    return grouped


def _first_of(records: Sequence[TimeRecord], record_type: TimeRecordType) -> Optional[TimeRecord]:
    matches = [r for r in records if r.is_valid and r.record_type == record_type]
    return min(matches, key=lambda r: r.timestamp) if matches else None


class BankHoursService:
    def __init__(
        self,
        records: TimeRecordRepository,
        employees: EmployeeRepository,
        settings: Optional[SettingsRepository] = None,
        *,
        tz: ZoneInfo,
        calculator: Optional[DailyHoursCalculator] = None,
    ):
        self._records = records
        self._employees = employees
        self._settings = settings or StaticSettingsRepository()
        self._tz = tz
        self._calculator = calculator or StandardDailyHoursCalculator()

    def _get_employee(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Funcionário não encontrado")
        return employee

    def _clip(self, employee: Employee, start: date, end: date, today: Optional[date]) -> tuple[date, date]:
        require_date_range(start, end)
        today = today or business_today(self._tz)
        effective_start = max(start, employee.hire_date)
        effective_end = min(end, today)
        if (effective_start, effective_end) != (start, end):
            logger.debug(
                "Range for employee %s clipped from %s..%s to %s..%s",
                employee.employee_id,
                start,
                end,
                effective_start,
                effective_end,
            )
        return effective_start, effective_end

    def _compute_days(self, employee: Employee, start: date, end: date) -> tuple[DailyHours, ...]:
        # One batched fetch for the whole range; days are computed in memory.
        records = self._records.find_time_records(TimeRecordQuery.for_employee(employee.employee_id).between(start, end))
        by_day = _group_by_day(records)
        work_week = work_week_for(employee.work_schedule)
        return tuple(self._calculator.calculate(by_day.get(d, ()), d, work_week=work_week) for d in iter_days(start, end))

    def bank_hours(
        self,
        employee_id: int,
        start_date: date,
        end_date: date,
        detailed: bool = False,
        *,
        today: Optional[date] = None,
    ) -> BankHoursResult:
        """Compensatory-hours balance over [max(start, hire), min(end, today)].

        balance = premium-weighted overtime - owed hours.
        """
        employee = self._get_employee(employee_id)
        start, end = self._clip(employee, start_date, end_date, today)

        if start > end:
            return BankHoursResult(employee_id=employee.employee_id, start_date=None, end_date=None)

        days = self._compute_days(employee, start, end)
        totals = reduce(lambda acc, day: acc.plus(day), days, HoursTotals())

        return BankHoursResult(
            employee_id=employee.employee_id,
            start_date=start,
            end_date=end,
            total_worked_hours=totals.worked_hours,
            total_expected_hours=totals.expected_hours,
            total_overtime_hours=totals.overtime_hours,
            total_owed_hours=totals.owed_hours,
            balance_hours=totals.overtime_hours - totals.owed_hours,
            days=days if detailed else (),
        )

    def daily_summary(self, employee_id: int, work_date: date) -> DailySummary:
        employee = self._get_employee(employee_id)
        records = tuple(
            self._records.find_time_records(
                TimeRecordQuery.for_employee(employee.employee_id).for_day(work_date).including_invalid()
            )
        )
        hours = self._calculator.calculate(records, work_date, work_week=work_week_for(employee.work_schedule))
        return DailySummary(employee_id=employee.employee_id, work_date=work_date, records=records, hours=hours)

    def period_summary(
        self,
        employee_id: int,
        start_date: date,
        end_date: date,
        *,
        today: Optional[date] = None,
    ) -> PeriodSummary:
        """Attendance overview: presence, hours and punctuality over the clipped range."""
        employee = self._get_employee(employee_id)
        start, end = self._clip(employee, start_date, end_date, today)
        if start > end:
            return PeriodSummary(employee_id=employee.employee_id, start_date=None, end_date=None)

        settings = self._settings.get_settings()
        tolerance = timedelta(minutes=int(settings.tolerance_minutes))

        records = self._records.find_time_records(TimeRecordQuery.for_employee(employee.employee_id).between(start, end))
        by_day = _group_by_day(records)
        work_week = work_week_for(employee.work_schedule)

        days = [self._calculator.calculate(by_day.get(d, ()), d, work_week=work_week) for d in iter_days(start, end)]
        totals = reduce(lambda acc, day: acc.plus(day), days, HoursTotals())

        present = [d for d in days if d.is_complete and not d.is_justified]
        justified = [d for d in days if d.is_justified]
        absent = [d for d in days if d.expected_hours > 0 and not d.is_complete]

        late = 0
        early = 0
        for day in iter_days(start, end):
            day_records = by_day.get(day, [])
            entry = _first_of(day_records, TimeRecordType.ENTRY)
            exit_ = _first_of(day_records, TimeRecordType.EXIT)
            if entry and entry.timestamp > datetime.combine(day, settings.work_start_time) + tolerance:
                late += 1
            if exit_ and exit_.timestamp < datetime.combine(day, settings.work_end_time) - tolerance:
                early += 1

        present_hours = sum(d.worked_hours for d in present)

        return PeriodSummary(
            employee_id=employee.employee_id,
            start_date=start,
            end_date=end,
            total_days=len(days),
            present_days=len(present),
            absent_days=len(absent),
            justified_days=len(justified),
            total_hours=totals.worked_hours,
            regular_hours=totals.regular_hours,
            overtime_hours=totals.overtime_hours,
            average_hours_per_day=present_hours / len(present) if present else 0.0,
            late_arrivals=late,
            early_departures=early,
        )
