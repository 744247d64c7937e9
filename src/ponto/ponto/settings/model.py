from __future__ import annotations

from dataclasses import dataclass
from datetime import time

from ..core.constants import (
    DEFAULT_MAX_OVERTIME_HOURS,
    DEFAULT_TOLERANCE_MINUTES,
    DEFAULT_VACATION_DAYS_PER_YEAR,
    DEFAULT_WORK_END,
    DEFAULT_WORK_START,
)


@dataclass(frozen=True)
class CompanySettings:
    """Process-wide singleton; read-only to the engine."""

    work_start_time: time = DEFAULT_WORK_START
    work_end_time: time = DEFAULT_WORK_END
    tolerance_minutes: int = DEFAULT_TOLERANCE_MINUTES
    vacation_days_per_year: int = DEFAULT_VACATION_DAYS_PER_YEAR
    max_overtime_hours: float = DEFAULT_MAX_OVERTIME_HOURS
