from __future__ import annotations

import logging
from datetime import datetime, time
from typing import Optional, Sequence

from ..common.compliance import CERTIFICATE_OVERLAP, ComplianceWarning
from ..common.datetime_utils import iter_days
from ..common.validators import require_date_range
from ..core.constants import JUSTIFIED_ABSENCE_HOUR
from ..core.enums import TimeRecordType
from ..core.exceptions import DuplicatePunch, NotFoundError
from ..employees.repository import EmployeeRepository
from ..timerecords.model import NewTimeRecord, TimeRecord, TimeRecordQuery
from ..timerecords.repository import TimeRecordRepository
from .model import MedicalCertificate

logger = logging.getLogger(__name__)


def check_overlap(
    certificate: MedicalCertificate,
    others: Sequence[MedicalCertificate],
) -> Optional[ComplianceWarning]:
    """Warn when another certificate of the same employee covers any of the same days."""
    clashing = [
        c
        for c in others
        if c.certificate_id != certificate.certificate_id
        and c.employee_id == certificate.employee_id
        and c.overlaps(certificate)
    ]
    if not clashing:
        return None
    first = min(clashing, key=lambda c: c.start_date)
    return ComplianceWarning(
        code=CERTIFICATE_OVERLAP,
        message=(
            f"Atestado sobreposto a outro de {first.start_date.isoformat()} a {first.end_date.isoformat()}"
        ),
        due_date=certificate.start_date,
    )


class JustifiedAbsenceService:
    """Turns an approved certificate into ABSENCE_JUSTIFIED records, one per day."""

    def __init__(self, records: TimeRecordRepository, employees: EmployeeRepository):
        self._records = records
        self._employees = employees

    def check_overlap(
        self,
        certificate: MedicalCertificate,
        others: Sequence[MedicalCertificate],
    ) -> Optional[ComplianceWarning]:
        warning = check_overlap(certificate, others)
        if warning:
            logger.warning("Employee %s: %s", certificate.employee_id, warning.message)
        return warning

    def apply_certificate(self, certificate: MedicalCertificate) -> list[TimeRecord]:
        """Create the missing justified-absence records; days already covered are skipped."""
        require_date_range(certificate.start_date, certificate.end_date)
        if not self._employees.get_by_id(certificate.employee_id):
            raise NotFoundError("Funcionário não encontrado")

        existing = self._records.find_time_records(
            TimeRecordQuery.for_employee(certificate.employee_id)
            .between(certificate.start_date, certificate.end_date)
            .of_types(TimeRecordType.ABSENCE_JUSTIFIED)
            .including_invalid()
        )
        covered = {r.work_date for r in existing}
        reason = f"Ausência justificada por atestado médico - {certificate.certificate_type.lower()}"

        created = []
        for day in iter_days(certificate.start_date, certificate.end_date):
            if day in covered:
                continue
            try:
                record = self._records.create_time_record(
                    NewTimeRecord(
                        employee_id=certificate.employee_id,
                        record_type=TimeRecordType.ABSENCE_JUSTIFIED,
                        timestamp=datetime.combine(day, time(JUSTIFIED_ABSENCE_HOUR, 0)),
                        reason=reason,
                    )
                )
            except DuplicatePunch:
                logger.debug("Justified absence for %s on %s already exists", certificate.employee_id, day)
                continue
            created.append(record)

        logger.info(
            "Certificate %s: %d justified absence(s) created for employee %s",
            certificate.certificate_id,
            len(created),
            certificate.employee_id,
        )
        return created
