from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from ponto.common.compliance import OVERTIME_EXPIRING
from ponto.core.enums import OvertimeStatus, OvertimeType
from ponto.core.exceptions import NotFoundError, ValidationError
from ponto.overtime.service import OvertimeService, overtime_value


@pytest.fixture
def service(overtime, employees, settings, tz) -> OvertimeService:
    return OvertimeService(overtime, employees, settings, tz=tz)


@pytest.fixture
def ledger(overtime):
    overtime.add(1, date(2024, 12, 2), 1.0)
    overtime.add(1, date(2025, 2, 10), 2.0)
    overtime.add(1, date(2025, 5, 5), 1.5, overtime_type=OvertimeType.WEEKEND)
    overtime.add(1, date(2025, 6, 20), 1.0, status=OvertimeStatus.PENDING)
    overtime.add(1, date(2025, 6, 23), 2.0, status=OvertimeStatus.REJECTED)
    return overtime


def test_balance(service, ledger):
    balance = service.overtime_balance(1, as_of=date(2025, 6, 30))

    assert balance.approved_hours == 4.5
    assert balance.pending_hours == 1.0
    assert balance.available_hours == 3.5
    assert balance.eligible_hours == 3.5
    assert balance.compensation_deadline == date(2025, 8, 10)
    assert balance.can_compensate
    assert balance.warnings == ()


def test_deadline_close_is_warned(service, ledger):
    balance = service.overtime_balance(1, as_of=date(2025, 7, 20))

    assert [w.code for w in balance.warnings] == [OVERTIME_EXPIRING]
    assert balance.warnings[0].due_date == date(2025, 8, 10)


def test_old_requests_cannot_be_compensated(service, overtime):
    overtime.add(1, date(2024, 6, 3), 2.0)

    balance = service.overtime_balance(1, as_of=date(2025, 6, 30))

    assert balance.approved_hours == 2.0
    assert balance.compensation_deadline is None
    assert not balance.can_compensate


def test_pending_beyond_approved_leaves_nothing_available(service, overtime):
    overtime.add(1, date(2025, 6, 2), 1.0)
    overtime.add(1, date(2025, 6, 3), 2.0, status=OvertimeStatus.PENDING)
    overtime.add(1, date(2025, 6, 4), 1.0, status=OvertimeStatus.PENDING)

    balance = service.overtime_balance(1, as_of=date(2025, 6, 30))

    assert balance.approved_hours == 1.0
    assert balance.pending_hours == 3.0
    assert balance.available_hours == 0.0


def test_can_request_overtime(service, ledger):
    duplicate = service.can_request_overtime(1, date(2025, 6, 20), 1.0)
    too_many = service.can_request_overtime(1, date(2025, 7, 1), 3.0)
    ok = service.can_request_overtime(1, date(2025, 6, 23), 1.5)

    assert not duplicate.can_request
    assert duplicate.reason == "Já existe uma solicitação de horas extras para esta data"
    assert not too_many.can_request
    assert too_many.reason == "Máximo de 2 horas extras por dia"
    assert ok.can_request and ok.max_hours_allowed == 2.0


def test_overtime_by_period(service, ledger):
    summary = service.overtime_by_period(1, date(2025, 1, 1), date(2025, 6, 30))

    assert summary.total_hours == 3.5
    assert summary.hours_by_type[OvertimeType.REGULAR] == 2.0
    assert summary.hours_by_type[OvertimeType.WEEKEND] == 1.5
    assert summary.hours_by_type[OvertimeType.NIGHT] == 0.0


def test_overtime_value():
    salary = Decimal("4400.00")

    assert overtime_value(2, OvertimeType.REGULAR, salary) == Decimal("75.00")
    assert overtime_value(2, OvertimeType.WEEKEND, salary) == Decimal("100.00")
    assert overtime_value(2, OvertimeType.HOLIDAY, salary) == Decimal("100.00")
    assert overtime_value(1, OvertimeType.NIGHT, salary, work_days_per_month=20) == Decimal("41.25")

    with pytest.raises(ValidationError):
        overtime_value(-1, OvertimeType.REGULAR, salary)


def test_expiring_overtime(service, ledger):
    expiring = service.expiring_overtime(30, as_of=date(2025, 7, 20))

    assert [(e.work_date, e.expires_at, e.hours) for e in expiring] == [(date(2025, 2, 10), date(2025, 8, 10), 2.0)]


def test_unknown_employee(service):
    with pytest.raises(NotFoundError):
        service.overtime_balance(5, as_of=date(2025, 6, 30))
