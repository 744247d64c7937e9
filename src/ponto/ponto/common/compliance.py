from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class ComplianceWarning:
    """Non-blocking labor-compliance finding carried inside results.

    Never raised: callers surface it (reports, notifications) and move on.
    """

    code: str
    message: str
    due_date: Optional[date] = None


VACATION_EXPIRED = "VACATION_EXPIRED"
VACATION_EXPIRING = "VACATION_EXPIRING"
OVERTIME_EXPIRING = "OVERTIME_EXPIRING"
CERTIFICATE_OVERLAP = "CERTIFICATE_OVERLAP"
