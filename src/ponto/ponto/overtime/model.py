from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from typing import Optional

from ..common.compliance import ComplianceWarning
from ..core.enums import OvertimeStatus, OvertimeType


@dataclass(frozen=True)
class OvertimeRequest:
    """Formally filed overtime; independent of punches."""

    overtime_id: int
    employee_id: int
    work_date: date
    hours: float
    overtime_type: OvertimeType = OvertimeType.REGULAR
    status: OvertimeStatus = OvertimeStatus.PENDING
    reason: Optional[str] = None


@dataclass(frozen=True)
class OvertimeQuery:
    employee_id: int
    statuses: tuple[OvertimeStatus, ...] = ()
    types: tuple[OvertimeType, ...] = ()
    start: Optional[date] = None
    end: Optional[date] = None

    @classmethod
    def for_employee(cls, employee_id: int) -> "OvertimeQuery":
        return cls(employee_id=int(employee_id))

    def with_status(self, *statuses: OvertimeStatus) -> "OvertimeQuery":
        return replace(self, statuses=tuple(statuses))

    def of_types(self, *types: OvertimeType) -> "OvertimeQuery":
        return replace(self, types=tuple(types))

    def between(self, start: date, end: date) -> "OvertimeQuery":
        return replace(self, start=start, end=end)

    def on(self, day: date) -> "OvertimeQuery":
        return self.between(day, day)

    def matches(self, request: OvertimeRequest) -> bool:
        if request.employee_id != self.employee_id:
            return False
        if self.statuses and request.status not in self.statuses:
            return False
        if self.types and request.overtime_type not in self.types:
            return False
        if self.start is not None and request.work_date < self.start:
            return False
        if self.end is not None and request.work_date > self.end:
            return False
        return True


@dataclass(frozen=True)
class OvertimeBalance:
    approved_hours: float
    pending_hours: float
    available_hours: float
    eligible_hours: float = 0.0
    compensation_deadline: Optional[date] = None
    warnings: tuple[ComplianceWarning, ...] = ()

    @property
    def can_compensate(self) -> bool:
        return self.compensation_deadline is not None


@dataclass(frozen=True)
class OvertimeEligibility:
    can_request: bool
    max_hours_allowed: float
    reason: Optional[str] = None


@dataclass(frozen=True)
class OvertimePeriodSummary:
    start_date: date
    end_date: date
    total_hours: float = 0.0
    hours_by_type: dict[OvertimeType, float] = field(default_factory=dict)


@dataclass(frozen=True)
class ExpiringOvertime:
    employee_id: int
    full_name: str
    cost_center: Optional[str]
    work_date: date
    hours: float
    expires_at: date
