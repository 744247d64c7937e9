from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from ..core.enums import TimeRecordType


@dataclass(frozen=True)
class TimeRecord:
    """Domain entity: one clock event (or an injected justified absence).

    `timestamp` is naive business-local wall clock.
    """

    record_id: int
    employee_id: int
    record_type: TimeRecordType
    timestamp: datetime
    is_valid: bool = True
    reason: Optional[str] = None
    observation: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    food_voucher_amount: Decimal = Decimal("0")
    transport_voucher_amount: Decimal = Decimal("0")

    @property
    def work_date(self) -> date:
        return self.timestamp.date()


@dataclass(frozen=True)
class NewTimeRecord:
    employee_id: int
    record_type: TimeRecordType
    timestamp: datetime
    is_valid: bool = True
    reason: Optional[str] = None
    observation: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    food_voucher_amount: Decimal = Decimal("0")
    transport_voucher_amount: Decimal = Decimal("0")


@dataclass(frozen=True)
class TimeRecordPatch:
    """Admin correction; only non-None fields are applied."""

    record_type: Optional[TimeRecordType] = None
    timestamp: Optional[datetime] = None
    reason: Optional[str] = None
    observation: Optional[str] = None
    is_valid: Optional[bool] = None

    def is_empty(self) -> bool:
        return all(
            value is None
            for value in (self.record_type, self.timestamp, self.reason, self.observation, self.is_valid)
        )

    def apply(self, record: TimeRecord) -> TimeRecord:
        changes = {
            "record_type": self.record_type,
            "timestamp": self.timestamp,
            "reason": self.reason,
            "observation": self.observation,
            "is_valid": self.is_valid,
        }
        return replace(record, **{k: v for k, v in changes.items() if v is not None})


@dataclass(frozen=True)
class TimeRecordQuery:
    """Typed filter for time records of one employee.

    Built fluently: TimeRecordQuery.for_employee(7).between(start, end).of_types(ENTRY).
    Date bounds are inclusive calendar days in business time.
    """

    employee_id: int
    start: Optional[date] = None
    end: Optional[date] = None
    types: tuple[TimeRecordType, ...] = ()
    valid_only: bool = True

    @classmethod
    def for_employee(cls, employee_id: int) -> "TimeRecordQuery":
        return cls(employee_id=int(employee_id))

    def between(self, start: date, end: date) -> "TimeRecordQuery":
        return replace(self, start=start, end=end)

    def for_day(self, day: date) -> "TimeRecordQuery":
        return self.between(day, day)

    def of_types(self, *types: TimeRecordType) -> "TimeRecordQuery":
        return replace(self, types=tuple(types))

    def including_invalid(self) -> "TimeRecordQuery":
        return replace(self, valid_only=False)

    def matches(self, record: TimeRecord) -> bool:
        if record.employee_id != self.employee_id:
            return False
        if self.start is not None and record.work_date < self.start:
            return False
        if self.end is not None and record.work_date > self.end:
            return False
        if self.types and record.record_type not in self.types:
            return False
        if self.valid_only and not record.is_valid:
            return False
        return True
