from __future__ import annotations

from enum import Enum


class TimeRecordType(str, Enum):
    """Tipo de registro de ponto."""

    ENTRY = "ENTRY"
    LUNCH_START = "LUNCH_START"
    LUNCH_END = "LUNCH_END"
    EXIT = "EXIT"
    ABSENCE_JUSTIFIED = "ABSENCE_JUSTIFIED"

    @property
    def is_punch(self) -> bool:
        return self is not TimeRecordType.ABSENCE_JUSTIFIED


# Mandatory daily order of clock punches.
PUNCH_SEQUENCE = (
    TimeRecordType.ENTRY,
    TimeRecordType.LUNCH_START,
    TimeRecordType.LUNCH_END,
    TimeRecordType.EXIT,
)


class VacationStatus(str, Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    CANCELLED = "CANCELLED"


class VacationType(str, Enum):
    """Férias integrais ou fracionadas (até 3 períodos)."""

    ANNUAL = "ANNUAL"
    FRACTIONED_1 = "FRACTIONED_1"
    FRACTIONED_2 = "FRACTIONED_2"
    FRACTIONED_3 = "FRACTIONED_3"

    @property
    def fraction(self) -> int | None:
        return {
            VacationType.FRACTIONED_1: 1,
            VacationType.FRACTIONED_2: 2,
            VacationType.FRACTIONED_3: 3,
        }.get(self)


class OvertimeStatus(str, Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class OvertimeType(str, Enum):
    REGULAR = "REGULAR"
    WEEKEND = "WEEKEND"
    HOLIDAY = "HOLIDAY"
    NIGHT = "NIGHT"
