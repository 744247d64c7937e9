from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class MedicalCertificate:
    """Approved certificate as handed over by the certificate workflow."""

    certificate_id: int
    employee_id: int
    start_date: date
    end_date: date
    certificate_type: str = "MEDICAL"

    def overlaps(self, other: "MedicalCertificate") -> bool:
        return self.start_date <= other.end_date and other.start_date <= self.end_date
