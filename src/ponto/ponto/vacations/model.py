from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from typing import Optional

from ..common.compliance import ComplianceWarning
from ..core.enums import VacationStatus, VacationType


@dataclass(frozen=True)
class Vacation:
    """A vacation request as filed; `days` is the counted business days."""

    vacation_id: int
    employee_id: int
    start_date: date
    end_date: date
    days: int
    vacation_type: VacationType = VacationType.ANNUAL
    status: VacationStatus = VacationStatus.PENDING
    reason: Optional[str] = None


@dataclass(frozen=True)
class VacationQuery:
    employee_id: int
    statuses: tuple[VacationStatus, ...] = ()
    types: tuple[VacationType, ...] = ()

    @classmethod
    def for_employee(cls, employee_id: int) -> "VacationQuery":
        return cls(employee_id=int(employee_id))

    def with_status(self, *statuses: VacationStatus) -> "VacationQuery":
        return replace(self, statuses=tuple(statuses))

    def of_types(self, *types: VacationType) -> "VacationQuery":
        return replace(self, types=tuple(types))

    def matches(self, vacation: Vacation) -> bool:
        if vacation.employee_id != self.employee_id:
            return False
        if self.statuses and vacation.status not in self.statuses:
            return False
        if self.types and vacation.vacation_type not in self.types:
            return False
        return True


@dataclass(frozen=True)
class VacationPeriod:
    """One completed acquisitive period and its concessive deadline."""

    acquisitive_start: date
    acquisitive_end: date
    concessive_end: date
    entitled_days: int
    used_days: int = 0

    @property
    def remaining_days(self) -> int:
        return max(0, self.entitled_days - self.used_days)


@dataclass(frozen=True)
class VacationBalance:
    total_days: int
    used_days: int
    available_days: int
    pending_days: int
    next_vacation_date: date
    expires_at: Optional[date] = None
    periods: tuple[VacationPeriod, ...] = ()
    warnings: tuple[ComplianceWarning, ...] = ()


@dataclass(frozen=True)
class VacationRequest:
    start_date: date
    end_date: date
    vacation_type: VacationType = VacationType.ANNUAL
    reason: Optional[str] = None


@dataclass(frozen=True)
class VacationValidation:
    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.errors


@dataclass(frozen=True)
class VacationEligibility:
    can_take: bool
    available_days: int
    requested_days: int
    reason: Optional[str] = None


@dataclass(frozen=True)
class ExpiringVacation:
    employee_id: int
    full_name: str
    cost_center: Optional[str]
    expires_at: date
    available_days: int


@dataclass(frozen=True)
class VacationComplianceReport:
    total_employees: int
    expired: tuple[ExpiringVacation, ...]
    upcoming_expirations: int

    @property
    def compliance_rate(self) -> float:
        if not self.total_employees:
            return 100.0
        return (self.total_employees - len(self.expired)) / self.total_employees * 100
