from __future__ import annotations

import logging
import math
from datetime import date, timedelta
from typing import Optional, Sequence
from zoneinfo import ZoneInfo

from ..common.compliance import VACATION_EXPIRED, VACATION_EXPIRING, ComplianceWarning
from ..common.datetime_utils import add_months, add_years, business_today, full_years_between, iter_days
from ..core.constants import (
    CONCESSIVE_PERIOD_MONTHS,
    DEFAULT_EXPIRATION_WINDOW_DAYS,
    MAX_ACCRUED_VACATION_PERIODS,
    VACATION_NOTICE_DAYS,
)
from ..core.enums import VacationStatus, VacationType
from ..core.exceptions import NotFoundError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..settings.repository import SettingsRepository, StaticSettingsRepository
from .model import (
    ExpiringVacation,
    VacationBalance,
    VacationComplianceReport,
    VacationEligibility,
    VacationPeriod,
    VacationQuery,
    VacationRequest,
    VacationValidation,
)
from .repository import VacationRepository

logger = logging.getLogger(__name__)

FRACTIONED_TYPES = (VacationType.FRACTIONED_1, VacationType.FRACTIONED_2, VacationType.FRACTIONED_3)
FIRST_FRACTION_MIN_DAYS = 14
OTHER_FRACTION_MIN_DAYS = 5
# Monday=0; Friday and Saturday precede the Sunday weekly rest.
DAYS_BEFORE_WEEKLY_REST = (4, 5)


def vacation_days(start: date, end: date) -> int:
    """Monday-Friday dates in [start, end]."""
    return sum(1 for d in iter_days(start, end) if d.weekday() < 5)


def constitutional_third(days: int) -> int:
    return math.ceil(days / 3)


def build_periods(hire_date: date, as_of: date, days_per_year: int, used_days: int) -> tuple[VacationPeriod, ...]:
    """Completed acquisitive periods still counted toward the balance, oldest first.

    Used days are consumed from the first period since hire; only the last
    MAX_ACCRUED_VACATION_PERIODS periods are returned.
    """
    years = full_years_between(hire_date, as_of)

    periods = []
    to_allocate = max(0, used_days)
    for k in range(1, years + 1):
        taken = min(days_per_year, to_allocate)
        to_allocate -= taken
        acquisitive_end = add_years(hire_date, k)
        periods.append(
            VacationPeriod(
                acquisitive_start=add_years(hire_date, k - 1),
                acquisitive_end=acquisitive_end,
                concessive_end=add_months(acquisitive_end, CONCESSIVE_PERIOD_MONTHS),
                entitled_days=days_per_year,
                used_days=taken,
            )
        )
    return tuple(periods[-MAX_ACCRUED_VACATION_PERIODS:])


def period_warnings(periods: Sequence[VacationPeriod], as_of: date, *, within_days: int) -> tuple[ComplianceWarning, ...]:
    warnings = []
    for p in periods:
        if not p.remaining_days:
            continue
        if as_of > p.concessive_end:
            warnings.append(
                ComplianceWarning(
                    code=VACATION_EXPIRED,
                    message=f"{p.remaining_days} dias de férias com período concessivo vencido",
                    due_date=p.concessive_end,
                )
            )
        elif (p.concessive_end - as_of).days <= within_days:
            warnings.append(
                ComplianceWarning(
                    code=VACATION_EXPIRING,
                    message=f"{p.remaining_days} dias de férias vencem em {p.concessive_end.isoformat()}",
                    due_date=p.concessive_end,
                )
            )
    return tuple(warnings)


class VacationService:
    def __init__(
        self,
        vacations: VacationRepository,
        employees: EmployeeRepository,
        settings: Optional[SettingsRepository] = None,
        *,
        tz: ZoneInfo,
    ):
        self._vacations = vacations
        self._employees = employees
        self._settings = settings or StaticSettingsRepository()
        self._tz = tz

    def _get_employee(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Funcionário não encontrado")
        return employee

    def _sum_days(self, employee_id: int, status: VacationStatus) -> int:
        rows = self._vacations.list_for_employee(
            VacationQuery.for_employee(employee_id).with_status(status).of_types(VacationType.ANNUAL)
        )
        return sum(v.days for v in rows)

    def vacation_days(self, start: date, end: date) -> int:
        return vacation_days(start, end)

    def constitutional_third(self, days: int) -> int:
        return constitutional_third(days)

    def vacation_balance(self, employee_id: int, as_of: Optional[date] = None) -> VacationBalance:
        employee = self._get_employee(employee_id)
        as_of = as_of or business_today(self._tz)
        per_year = int(self._settings.get_settings().vacation_days_per_year)

        hire = employee.hire_date
        years = full_years_between(hire, as_of)
        total = min(years * per_year, MAX_ACCRUED_VACATION_PERIODS * per_year)
        approved = self._sum_days(employee.employee_id, VacationStatus.APPROVED)
        pending = self._sum_days(employee.employee_id, VacationStatus.PENDING)

        first_cycle_end = add_months(hire, 12)
        next_vacation = first_cycle_end if as_of < first_cycle_end else add_years(hire, years + 1)

        periods = build_periods(hire, as_of, per_year, approved)
        # Days charged to the tracked periods, plus any taken beyond everything accrued.
        used = sum(p.used_days for p in periods) + max(0, approved - years * per_year)
        open_periods = [p for p in periods if p.remaining_days]
        if open_periods:
            expires_at = open_periods[0].concessive_end
        elif periods:
            expires_at = periods[-1].concessive_end
        else:
            expires_at = None

        warnings = period_warnings(periods, as_of, within_days=DEFAULT_EXPIRATION_WINDOW_DAYS)
        for w in warnings:
            logger.warning("Employee %s: %s", employee.employee_id, w.message)

        return VacationBalance(
            total_days=total,
            used_days=used,
            available_days=max(0, total - used),
            pending_days=pending,
            next_vacation_date=next_vacation,
            expires_at=expires_at,
            periods=periods,
            warnings=warnings,
        )

    def can_take_vacation(
        self,
        employee_id: int,
        start: date,
        end: date,
        *,
        as_of: Optional[date] = None,
    ) -> VacationEligibility:
        as_of = as_of or business_today(self._tz)
        balance = self.vacation_balance(employee_id, as_of)
        requested = vacation_days(start, end)

        if balance.available_days < requested:
            return VacationEligibility(
                can_take=False,
                available_days=balance.available_days,
                requested_days=requested,
                reason=f"Saldo insuficiente. Disponível: {balance.available_days} dias, solicitado: {requested} dias",
            )

        return VacationEligibility(can_take=True, available_days=balance.available_days, requested_days=requested)

    def validate_vacation_request(
        self,
        employee_id: int,
        request: VacationRequest,
        *,
        today: Optional[date] = None,
    ) -> VacationValidation:
        """Labor-law checks for a new request; errors block, warnings do not."""
        employee = self._get_employee(employee_id)
        today = today or business_today(self._tz)
        errors: list[str] = []
        warnings: list[str] = []

        if full_years_between(employee.hire_date, today) < 1:
            errors.append("Funcionário deve trabalhar pelo menos 12 meses para ter direito a férias")

        start, end = request.start_date, request.end_date
        if start < today:
            errors.append("Data de início deve ser futura")
        if end < start:
            errors.append("Data de fim deve ser posterior à data de início")

        if (start - today).days < VACATION_NOTICE_DAYS:
            warnings.append("Aviso de férias deve ser dado com pelo menos 30 dias de antecedência")

        if start.weekday() in DAYS_BEFORE_WEEKLY_REST:
            errors.append("Férias não podem iniciar nos 2 dias que antecedem o repouso semanal")

        fraction = request.vacation_type.fraction
        if fraction is not None:
            errors.extend(self._fraction_errors(employee.employee_id, request.vacation_type, start, end))

        balance = self.vacation_balance(employee.employee_id, today)
        requested = vacation_days(start, end)
        if balance.available_days < requested:
            errors.append(
                f"Saldo insuficiente. Disponível: {balance.available_days} dias, solicitado: {requested} dias"
            )

        return VacationValidation(errors=tuple(errors), warnings=tuple(warnings))

    def _fraction_errors(self, employee_id: int, vacation_type: VacationType, start: date, end: date) -> list[str]:
        errors = []
        existing = self._vacations.list_for_employee(
            VacationQuery.for_employee(employee_id)
            .with_status(VacationStatus.PENDING, VacationStatus.APPROVED)
            .of_types(vacation_type)
        )
        if existing:
            errors.append(f"Já existe uma solicitação para o {vacation_type.fraction}º período fracionado")

        calendar_days = (end - start).days + 1
        if vacation_type is VacationType.FRACTIONED_1:
            if calendar_days < FIRST_FRACTION_MIN_DAYS:
                errors.append("O 1º período fracionado deve ter pelo menos 14 dias corridos")
        elif calendar_days < OTHER_FRACTION_MIN_DAYS:
            errors.append("Os períodos fracionados (2º e 3º) devem ter pelo menos 5 dias corridos cada")
        return errors

    def expiring_vacations(
        self,
        within_days: int = DEFAULT_EXPIRATION_WINDOW_DAYS,
        *,
        as_of: Optional[date] = None,
    ) -> list[ExpiringVacation]:
        """Active employees whose concessive deadline falls before as_of + within_days, soonest first."""
        as_of = as_of or business_today(self._tz)
        limit = as_of + timedelta(days=within_days)

        found = []
        for employee in self._employees.list_active():
            balance = self.vacation_balance(employee.employee_id, as_of)
            if balance.expires_at and balance.expires_at <= limit and balance.available_days > 0:
                found.append(
                    ExpiringVacation(
                        employee_id=employee.employee_id,
                        full_name=employee.full_name,
                        cost_center=employee.cost_center,
                        expires_at=balance.expires_at,
                        available_days=balance.available_days,
                    )
                )
        return sorted(found, key=lambda x: x.expires_at)

    def compliance_report(self, *, as_of: Optional[date] = None) -> VacationComplianceReport:
        as_of = as_of or business_today(self._tz)
        employees = self._employees.list_active()
        flagged = self.expiring_vacations(DEFAULT_EXPIRATION_WINDOW_DAYS, as_of=as_of)
        expired = tuple(x for x in flagged if x.expires_at < as_of)
        return VacationComplianceReport(
            total_employees=len(employees),
            expired=expired,
            upcoming_expirations=len(flagged) - len(expired),
        )
