from __future__ import annotations

from .enums import TimeRecordType


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is malformed, before any state change."""


class NotFoundError(DomainError):
    """Raised when an employee or record does not exist."""


class SequenceViolation(DomainError):
    """A punch was rejected; no record was created."""


class DuplicatePunch(SequenceViolation):
    def __init__(self, record_type: TimeRecordType):
        self.record_type = record_type
        super().__init__(f"Já existe um registro de {record_type.value.lower()} para hoje")


class OutOfSequence(SequenceViolation):
    def __init__(self, record_type: TimeRecordType, missing: TimeRecordType):
        self.record_type = record_type
        self.missing = missing
        super().__init__(
            f"É necessário registrar {missing.value} antes de registrar {record_type.value}"
        )


class DayComplete(SequenceViolation):
    def __init__(self):
        super().__init__("Todos os registros do dia já foram efetuados")
