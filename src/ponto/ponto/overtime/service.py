from __future__ import annotations

import logging
from collections import defaultdict
from datetime import date, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Sequence
from zoneinfo import ZoneInfo

from ..common.compliance import OVERTIME_EXPIRING, ComplianceWarning
from ..common.datetime_utils import add_months, business_today
from ..common.validators import require_date_range, require_non_negative_hours
from ..core.constants import (
    DEFAULT_EXPIRATION_WINDOW_DAYS,
    DEFAULT_WORK_DAYS_PER_MONTH,
    OVERTIME_COMPENSATION_MONTHS,
)
from ..core.enums import OvertimeStatus, OvertimeType
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from ..settings.repository import SettingsRepository, StaticSettingsRepository
from .model import (
    ExpiringOvertime,
    OvertimeBalance,
    OvertimeEligibility,
    OvertimePeriodSummary,
    OvertimeQuery,
    OvertimeRequest,
)
from .repository import OvertimeRepository

logger = logging.getLogger(__name__)

OVERTIME_MULTIPLIERS = {
    OvertimeType.REGULAR: Decimal("1.5"),
    OvertimeType.WEEKEND: Decimal("2.0"),
    OvertimeType.HOLIDAY: Decimal("2.0"),
    OvertimeType.NIGHT: Decimal("1.5"),
}

HOURS_PER_WORK_DAY = 8


def overtime_value(
    hours: float,
    overtime_type: OvertimeType,
    base_salary: Decimal,
    work_days_per_month: int = DEFAULT_WORK_DAYS_PER_MONTH,
) -> Decimal:
    """Pay for `hours` of overtime: hours x (salary / (work days x 8)) x multiplier, in cents."""
    require_non_negative_hours(hours)
    if work_days_per_month <= 0:
        raise ValidationError("Dias úteis por mês deve ser positivo")

    hourly_rate = Decimal(base_salary) / (work_days_per_month * HOURS_PER_WORK_DAY)
    value = Decimal(str(hours)) * hourly_rate * OVERTIME_MULTIPLIERS[overtime_type]
    return value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def compensation_deadline(request: OvertimeRequest) -> date:
    return add_months(request.work_date, OVERTIME_COMPENSATION_MONTHS)


def eligible_requests(approved: Sequence[OvertimeRequest], as_of: date) -> list[OvertimeRequest]:
    """Approved requests still inside the 6-month compensation window, oldest first."""
    cutoff = add_months(as_of, -OVERTIME_COMPENSATION_MONTHS)
    return sorted((r for r in approved if r.work_date >= cutoff), key=lambda r: r.work_date)


class OvertimeService:
    def __init__(
        self,
        overtime: OvertimeRepository,
        employees: EmployeeRepository,
        settings: Optional[SettingsRepository] = None,
        *,
        tz: ZoneInfo,
    ):
        self._overtime = overtime
        self._employees = employees
        self._settings = settings or StaticSettingsRepository()
        self._tz = tz

    def _require_employee(self, employee_id: int) -> None:
        if not self._employees.get_by_id(employee_id):
            raise NotFoundError("Funcionário não encontrado")

    def _list(self, employee_id: int, *statuses: OvertimeStatus) -> Sequence[OvertimeRequest]:
        return self._overtime.list_for_employee(OvertimeQuery.for_employee(employee_id).with_status(*statuses))

    def overtime_balance(self, employee_id: int, *, as_of: Optional[date] = None) -> OvertimeBalance:
        """available = max(0, approved - pending); deadline from the oldest approved request still eligible."""
        self._require_employee(employee_id)
        as_of = as_of or business_today(self._tz)

        approved = self._list(employee_id, OvertimeStatus.APPROVED)
        pending = self._list(employee_id, OvertimeStatus.PENDING)
        approved_hours = sum(r.hours for r in approved)
        pending_hours = sum(r.hours for r in pending)

        eligible = eligible_requests(approved, as_of)
        deadline = compensation_deadline(eligible[0]) if eligible else None

        warnings = ()
        if deadline is not None and (deadline - as_of).days <= DEFAULT_EXPIRATION_WINDOW_DAYS:
            warnings = (
                ComplianceWarning(
                    code=OVERTIME_EXPIRING,
                    message=f"Horas extras de {eligible[0].work_date.isoformat()} devem ser compensadas até {deadline.isoformat()}",
                    due_date=deadline,
                ),
            )
            logger.warning("Employee %s: %s", employee_id, warnings[0].message)

        return OvertimeBalance(
            approved_hours=approved_hours,
            pending_hours=pending_hours,
            available_hours=max(0.0, approved_hours - pending_hours),
            eligible_hours=sum(r.hours for r in eligible),
            compensation_deadline=deadline,
            warnings=warnings,
        )

    def can_request_overtime(self, employee_id: int, work_date: date, hours: float) -> OvertimeEligibility:
        self._require_employee(employee_id)
        require_non_negative_hours(hours)

        existing = self._overtime.list_for_employee(
            OvertimeQuery.for_employee(employee_id)
            .with_status(OvertimeStatus.PENDING, OvertimeStatus.APPROVED)
            .on(work_date)
        )
        if existing:
            return OvertimeEligibility(
                can_request=False,
                max_hours_allowed=0,
                reason="Já existe uma solicitação de horas extras para esta data",
            )

        max_hours = float(self._settings.get_settings().max_overtime_hours)
        if hours > max_hours:
            return OvertimeEligibility(
                can_request=False,
                max_hours_allowed=max_hours,
                reason=f"Máximo de {max_hours:g} horas extras por dia",
            )

        return OvertimeEligibility(can_request=True, max_hours_allowed=max_hours)

    def overtime_by_period(self, employee_id: int, start: date, end: date) -> OvertimePeriodSummary:
        """Approved hours in [start, end], split by overtime type."""
        require_date_range(start, end)
        self._require_employee(employee_id)

        rows = self._overtime.list_for_employee(
            OvertimeQuery.for_employee(employee_id).with_status(OvertimeStatus.APPROVED).between(start, end)
        )
        by_type: dict[OvertimeType, float] = defaultdict(float)
        for r in rows:
            by_type[r.overtime_type] += r.hours

        return OvertimePeriodSummary(
            start_date=start,
            end_date=end,
            total_hours=sum(by_type.values()),
            hours_by_type={t: by_type.get(t, 0.0) for t in OvertimeType},
        )

    def overtime_value(
        self,
        hours: float,
        overtime_type: OvertimeType,
        base_salary: Decimal,
        work_days_per_month: int = DEFAULT_WORK_DAYS_PER_MONTH,
    ) -> Decimal:
        return overtime_value(hours, overtime_type, base_salary, work_days_per_month)

    def expiring_overtime(
        self,
        within_days: int = DEFAULT_EXPIRATION_WINDOW_DAYS,
        *,
        as_of: Optional[date] = None,
    ) -> list[ExpiringOvertime]:
        """Approved, still-eligible requests whose deadline falls within `within_days`."""
        as_of = as_of or business_today(self._tz)
        limit = as_of + timedelta(days=within_days)

        found = []
        for employee in self._employees.list_active():
            approved = self._list(employee.employee_id, OvertimeStatus.APPROVED)
            for r in eligible_requests(approved, as_of):
                expires_at = compensation_deadline(r)
                if expires_at <= limit:
                    found.append(
                        ExpiringOvertime(
                            employee_id=employee.employee_id,
                            full_name=employee.full_name,
                            cost_center=employee.cost_center,
                            work_date=r.work_date,
                            hours=r.hours,
                            expires_at=expires_at,
                        )
                    )
        return sorted(found, key=lambda x: x.expires_at)
