from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from decimal import Decimal
from typing import Optional
from zoneinfo import ZoneInfo

import pytest

from ponto.core.enums import OvertimeStatus, OvertimeType, TimeRecordType, VacationStatus, VacationType
from ponto.core.exceptions import DuplicatePunch
from ponto.employees.model import Employee
from ponto.overtime.model import OvertimeQuery, OvertimeRequest
from ponto.settings.model import CompanySettings
from ponto.settings.repository import StaticSettingsRepository
from ponto.timerecords.model import NewTimeRecord, TimeRecord, TimeRecordPatch, TimeRecordQuery
from ponto.vacations.model import Vacation, VacationQuery


class InMemoryEmployees:
    def __init__(self, *employees: Employee):
        self._by_id = {e.employee_id: e for e in employees}

    def add(self, employee: Employee) -> Employee:
        self._by_id[employee.employee_id] = employee
        return employee

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self._by_id.get(employee_id)

    def list_active(self):
        return [e for e in self._by_id.values() if e.is_active]


class InMemoryTimeRecords:
    """Enforces the (employee, type, day) uniqueness like the MySQL unique key."""

    def __init__(self):
        self._by_id: dict[int, TimeRecord] = {}
        self._id = 0
        self.find_calls = 0

    def _clashes(self, record: TimeRecord) -> bool:
        return any(
            r.record_id != record.record_id
            and r.employee_id == record.employee_id
            and r.record_type == record.record_type
            and r.work_date == record.work_date
            for r in self._by_id.values()
        )

    def add(self, employee_id: int, record_type: TimeRecordType, timestamp: datetime, *, is_valid: bool = True) -> TimeRecord:
        return self.create_time_record(
            NewTimeRecord(employee_id=employee_id, record_type=record_type, timestamp=timestamp, is_valid=is_valid)
        )

    def find_time_records(self, query: TimeRecordQuery):
        self.find_calls += 1
        items = [r for r in self._by_id.values() if query.matches(r)]
        items.sort(key=lambda r: (r.timestamp, r.record_id))
        return items

    def get_by_id(self, record_id: int) -> Optional[TimeRecord]:
        return self._by_id.get(record_id)

    def create_time_record(self, new: NewTimeRecord) -> TimeRecord:
        self._id += 1
        record = TimeRecord(record_id=self._id, **vars(new))
        if self._clashes(record):
            raise DuplicatePunch(new.record_type)
        self._by_id[record.record_id] = record
        return record

    def update_time_record(self, record_id: int, patch: TimeRecordPatch) -> Optional[TimeRecord]:
        current = self._by_id.get(record_id)
        if current is None:
            return None
        updated = patch.apply(current)
        if self._clashes(updated):
            raise DuplicatePunch(updated.record_type)
        self._by_id[record_id] = updated
        return updated


class InMemoryVacations:
    def __init__(self):
        self._items: list[Vacation] = []

    def add(
        self,
        employee_id: int,
        start: date,
        end: date,
        days: int,
        *,
        status: VacationStatus = VacationStatus.APPROVED,
        vacation_type: VacationType = VacationType.ANNUAL,
    ) -> Vacation:
        vacation = Vacation(
            vacation_id=len(self._items) + 1,
            employee_id=employee_id,
            start_date=start,
            end_date=end,
            days=days,
            vacation_type=vacation_type,
            status=status,
        )
        self._items.append(vacation)
        return vacation

    def list_for_employee(self, query: VacationQuery):
        return sorted((v for v in self._items if query.matches(v)), key=lambda v: v.start_date)


class InMemoryOvertime:
    def __init__(self):
        self._items: list[OvertimeRequest] = []

    def add(
        self,
        employee_id: int,
        work_date: date,
        hours: float,
        *,
        status: OvertimeStatus = OvertimeStatus.APPROVED,
        overtime_type: OvertimeType = OvertimeType.REGULAR,
    ) -> OvertimeRequest:
        request = OvertimeRequest(
            overtime_id=len(self._items) + 1,
            employee_id=employee_id,
            work_date=work_date,
            hours=hours,
            overtime_type=overtime_type,
            status=status,
        )
        self._items.append(request)
        return request

    def list_for_employee(self, query: OvertimeQuery):
        return sorted((r for r in self._items if query.matches(r)), key=lambda r: r.work_date)


@pytest.fixture
def tz() -> ZoneInfo:
    return ZoneInfo("America/Sao_Paulo")


@pytest.fixture
def employee() -> Employee:
    return Employee(
        employee_id=1,
        full_name="Ana Souza",
        hire_date=date(2024, 3, 4),
        cost_center="OPS",
        daily_food_voucher=Decimal("35.00"),
        daily_transport_voucher=Decimal("12.50"),
    )


@pytest.fixture
def employees(employee) -> InMemoryEmployees:
    return InMemoryEmployees(employee)


@pytest.fixture
def records() -> InMemoryTimeRecords:
    return InMemoryTimeRecords()


@pytest.fixture
def vacations() -> InMemoryVacations:
    return InMemoryVacations()


@pytest.fixture
def overtime() -> InMemoryOvertime:
    return InMemoryOvertime()


@pytest.fixture
def settings() -> StaticSettingsRepository:
    return StaticSettingsRepository(CompanySettings())


@pytest.fixture
def rehire():
    """Copy of an employee with another hire date."""

    def _rehire(employee: Employee, hire_date: date) -> Employee:
        return replace(employee, hire_date=hire_date)

    return _rehire
