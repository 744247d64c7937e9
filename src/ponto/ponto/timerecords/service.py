from __future__ import annotations

import logging
from datetime import date, datetime
from decimal import Decimal
from typing import Optional, Sequence
from zoneinfo import ZoneInfo

from ..common.datetime_utils import business_now, to_business_local
from ..core.enums import PUNCH_SEQUENCE, TimeRecordType
from ..core.exceptions import (
    DayComplete,
    DuplicatePunch,
    NotFoundError,
    OutOfSequence,
    ValidationError,
)
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .location import LocationValidator
from .model import NewTimeRecord, TimeRecord, TimeRecordPatch, TimeRecordQuery
from .repository import TimeRecordRepository

logger = logging.getLogger(__name__)


def check_sequence(existing: Sequence[TimeRecord], record_type: TimeRecordType) -> None:
    """Raise the SequenceViolation that a new punch of `record_type` would cause.

    `existing` are the employee's records for the same day, valid or not.
    """
    taken = {r.record_type for r in existing}

    if all(t in taken for t in PUNCH_SEQUENCE):
        raise DayComplete()

    if record_type in taken:
        raise DuplicatePunch(record_type)

    position = PUNCH_SEQUENCE.index(record_type)
    if position > 0:
        previous = PUNCH_SEQUENCE[position - 1]
        if previous not in taken:
            raise OutOfSequence(record_type, previous)


class PunchService:
    def __init__(
        self,
        records: TimeRecordRepository,
        employees: EmployeeRepository,
        *,
        tz: ZoneInfo,
        location_validator: Optional[LocationValidator] = None,
    ):
        self._records = records
        self._employees = employees
        self._tz = tz
        self._location = location_validator or LocationValidator()

    def _get_employee(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Funcionário não encontrado")
        return employee

    def register_punch(
        self,
        employee_id: int,
        record_type: TimeRecordType,
        timestamp: datetime,
        today: date,
        *,
        reason: Optional[str] = None,
        observation: Optional[str] = None,
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
    ) -> TimeRecord:
        if not isinstance(record_type, TimeRecordType) or not record_type.is_punch:
            raise ValidationError("Tipo de registro inválido")

        timestamp = to_business_local(timestamp, self._tz)
        if timestamp.date() != today:
            raise ValidationError("O horário do registro deve pertencer ao dia atual")

        employee = self._get_employee(employee_id)
        if not employee.is_active:
            raise ValidationError("Funcionário inativo")

        existing = self._records.find_time_records(
            TimeRecordQuery.for_employee(employee.employee_id).for_day(today).including_invalid()
        )
        check_sequence(existing, record_type)

        is_entry = record_type is TimeRecordType.ENTRY
        record = self._records.create_time_record(
            NewTimeRecord(
                employee_id=employee.employee_id,
                record_type=record_type,
                timestamp=timestamp,
                reason=reason,
                observation=observation,
                latitude=latitude,
                longitude=longitude,
                food_voucher_amount=employee.daily_food_voucher if is_entry else Decimal("0"),
                transport_voucher_amount=employee.daily_transport_voucher if is_entry else Decimal("0"),
            )
        )

        logger.info(
            "Punch %s registered for employee %s at %s",
            record_type.value,
            employee.employee_id,
            timestamp.isoformat(),
        )
        return record

    def punch(
        self,
        employee_id: int,
        record_type: TimeRecordType,
        timestamp: Optional[datetime] = None,
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
        *,
        observation: Optional[str] = None,
    ) -> TimeRecord:
        """Clock-in entry point: stamps business `now` and annotates the location check."""
        now = to_business_local(timestamp, self._tz) if timestamp else business_now(self._tz)
        employee = self._get_employee(employee_id)

        check = self._location.check(latitude, longitude, employee.allowed_locations)
        if not check.within_range:
            logger.warning("Employee %s punched outside allowed area: %s", employee_id, check.reason)

        return self.register_punch(
            employee_id,
            record_type,
            now,
            now.date(),
            reason=check.reason,
            observation=observation,
            latitude=latitude,
            longitude=longitude,
        )

    def today_records(self, employee_id: int, *, today: Optional[date] = None) -> Sequence[TimeRecord]:
        today = today or business_now(self._tz).date()
        return self._records.find_time_records(
            TimeRecordQuery.for_employee(employee_id).for_day(today).including_invalid()
        )

    def next_expected_punch(self, employee_id: int, *, today: Optional[date] = None) -> Optional[TimeRecordType]:
        taken = {r.record_type for r in self.today_records(employee_id, today=today)}
        for record_type in PUNCH_SEQUENCE:
            if record_type not in taken:
                return record_type
        return None

    def correct_record(self, record_id: int, patch: TimeRecordPatch) -> TimeRecord:
        """Admin correction of type, timestamp or notes."""
        if patch.is_empty():
            raise ValidationError("Nenhuma alteração informada")

        current = self._records.get_by_id(record_id)
        if not current:
            raise NotFoundError("Registro de ponto não encontrado")

        if patch.timestamp is not None:
            patch = TimeRecordPatch(
                record_type=patch.record_type,
                timestamp=to_business_local(patch.timestamp, self._tz),
                reason=patch.reason,
                observation=patch.observation,
                is_valid=patch.is_valid,
            )

        target = patch.apply(current)
        if target.record_type != current.record_type or target.work_date != current.work_date:
            same_day = self._records.find_time_records(
                TimeRecordQuery.for_employee(current.employee_id)
                .for_day(target.work_date)
                .of_types(target.record_type)
                .including_invalid()
            )
            if any(r.record_id != current.record_id for r in same_day):
                raise DuplicatePunch(target.record_type)

        updated = self._records.update_time_record(record_id, patch)
        if not updated:
            raise NotFoundError("Registro de ponto não encontrado")

        logger.info("Time record %s corrected", record_id)
        return updated

    def validate_record(self, record_id: int, *, reason: Optional[str] = None) -> TimeRecord:
        return self.correct_record(record_id, TimeRecordPatch(is_valid=True, reason=reason))

    def invalidate_record(self, record_id: int, *, reason: str) -> TimeRecord:
        """Exclude a record from every hours computation (kept for audit)."""
        if not reason or not reason.strip():
            raise ValidationError("Motivo da invalidação é obrigatório")
        return self.correct_record(record_id, TimeRecordPatch(is_valid=False, reason=reason.strip()))
