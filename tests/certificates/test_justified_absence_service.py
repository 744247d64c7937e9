from __future__ import annotations

from datetime import date, datetime

import pytest

from ponto.common.compliance import CERTIFICATE_OVERLAP
from ponto.certificates.model import MedicalCertificate
from ponto.certificates.service import JustifiedAbsenceService
from ponto.core.enums import TimeRecordType
from ponto.core.exceptions import NotFoundError, ValidationError
from ponto.hours.service import BankHoursService
from ponto.timerecords.model import TimeRecordQuery


@pytest.fixture
def service(records, employees) -> JustifiedAbsenceService:
    return JustifiedAbsenceService(records, employees)


def test_one_record_per_day_at_eight(service, records):
    cert = MedicalCertificate(1, 1, date(2025, 6, 4), date(2025, 6, 6), "MEDICAL")

    created = service.apply_certificate(cert)

    assert [r.timestamp for r in created] == [
        datetime(2025, 6, 4, 8, 0),
        datetime(2025, 6, 5, 8, 0),
        datetime(2025, 6, 6, 8, 0),
    ]
    assert all(r.record_type is TimeRecordType.ABSENCE_JUSTIFIED for r in created)
    assert created[0].reason == "Ausência justificada por atestado médico - medical"


def test_days_already_justified_are_skipped(service, records):
    records.add(1, TimeRecordType.ABSENCE_JUSTIFIED, datetime(2025, 6, 5, 8, 0))

    created = service.apply_certificate(MedicalCertificate(2, 1, date(2025, 6, 4), date(2025, 6, 6)))
    again = service.apply_certificate(MedicalCertificate(2, 1, date(2025, 6, 4), date(2025, 6, 6)))

    assert [r.work_date for r in created] == [date(2025, 6, 4), date(2025, 6, 6)]
    assert again == []
    query = TimeRecordQuery.for_employee(1).of_types(TimeRecordType.ABSENCE_JUSTIFIED)
    assert len(records.find_time_records(query)) == 3


def test_certificate_days_count_as_worked(service, records, employees, settings, tz):
    service.apply_certificate(MedicalCertificate(3, 1, date(2025, 6, 2), date(2025, 6, 6)))

    result = BankHoursService(records, employees, settings, tz=tz).bank_hours(
        1, date(2025, 6, 2), date(2025, 6, 8), today=date(2025, 6, 30)
    )

    assert result.total_owed_hours == 0.0
    assert result.total_overtime_hours == 0.0
    assert result.total_worked_hours == 44.0


def test_invalid_certificates(service):
    with pytest.raises(ValidationError):
        service.apply_certificate(MedicalCertificate(4, 1, date(2025, 6, 6), date(2025, 6, 4)))
    with pytest.raises(NotFoundError):
        service.apply_certificate(MedicalCertificate(5, 9, date(2025, 6, 4), date(2025, 6, 4)))


def test_overlap_warning(service):
    cert = MedicalCertificate(10, 1, date(2025, 6, 4), date(2025, 6, 6))
    others = [
        cert,
        MedicalCertificate(11, 1, date(2025, 6, 6), date(2025, 6, 9)),
        MedicalCertificate(12, 2, date(2025, 6, 4), date(2025, 6, 6)),
    ]

    warning = service.check_overlap(cert, others)

    assert warning.code == CERTIFICATE_OVERLAP
    assert "2025-06-06" in warning.message
    assert service.check_overlap(cert, [others[0], others[2]]) is None
