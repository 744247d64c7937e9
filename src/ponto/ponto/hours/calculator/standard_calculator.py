from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ...common.datetime_utils import hours_between
from ...core.constants import DEFAULT_LUNCH_HOURS
from ...core.enums import TimeRecordType
from ...rules.factory import OvertimePremiumFactory
from ...rules.work_week import STANDARD_WORK_WEEK, WorkWeek
from ...timerecords.model import TimeRecord
from ..model import DailyHours
from .base import DailyHoursCalculator

JUSTIFIED_ABSENCE_NOTE = "Ausência Justificada"
MISSING_ENTRY_NOTE = "Entrada não registrada"
MISSING_EXIT_NOTE = "Saída não registrada"
DEFAULT_LUNCH_NOTE = "Horário de almoço não registrado - assumindo 1 hora"
NEGATIVE_LUNCH_NOTE = "Fim do almoço anterior ao início - almoço desconsiderado"
EXIT_BEFORE_ENTRY_NOTE = "Saída anterior à entrada - jornada desconsiderada"


def _first_by_type(records: Sequence[TimeRecord], day: date) -> dict[TimeRecordType, TimeRecord]:
    found: dict[TimeRecordType, TimeRecord] = {}
    for r in sorted(records, key=lambda x: x.timestamp):
        if r.is_valid and r.work_date == day:
            found.setdefault(r.record_type, r)
    return found


class StandardDailyHoursCalculator(DailyHoursCalculator):
    """Standard rule: (EXIT - ENTRY) - lunch, split into regular and premium-weighted overtime.

    Invalid records and records from other days are ignored.
    """

    def __init__(
        self,
        *,
        work_week: Optional[WorkWeek] = None,
        premium_factory: Optional[OvertimePremiumFactory] = None,
    ):
        self._work_week = work_week or STANDARD_WORK_WEEK
        self._premiums = premium_factory or OvertimePremiumFactory()

    def calculate(
        self,
        records: Sequence[TimeRecord],
        day: date,
        *,
        work_week: Optional[WorkWeek] = None,
    ) -> DailyHours:
        expected = (work_week or self._work_week).expected_hours(day)
        by_type = _first_by_type(records, day)

        if TimeRecordType.ABSENCE_JUSTIFIED in by_type:
            return DailyHours(
                work_date=day,
                expected_hours=expected,
                worked_hours=expected,
                regular_hours=expected,
                is_justified=True,
                is_complete=True,
                issues=(JUSTIFIED_ABSENCE_NOTE,),
            )

        entry = by_type.get(TimeRecordType.ENTRY)
        exit_ = by_type.get(TimeRecordType.EXIT)

        if entry is None or exit_ is None:
            issues: list[str] = []
            # A rest day with no punches at all is not a finding.
            if by_type or expected > 0:
                if entry is None:
                    issues.append(MISSING_ENTRY_NOTE)
                if exit_ is None:
                    issues.append(MISSING_EXIT_NOTE)
            return DailyHours(
                work_date=day,
                expected_hours=expected,
                owed_hours=expected,
                issues=tuple(issues),
            )

        issues = []
        total = hours_between(entry.timestamp, exit_.timestamp)
        if total < 0:
            issues.append(EXIT_BEFORE_ENTRY_NOTE)
            total = 0.0

        lunch_start = by_type.get(TimeRecordType.LUNCH_START)
        lunch_end = by_type.get(TimeRecordType.LUNCH_END)
        if lunch_start is not None and lunch_end is not None:
            lunch = hours_between(lunch_start.timestamp, lunch_end.timestamp)
            if lunch < 0:
                issues.append(NEGATIVE_LUNCH_NOTE)
                lunch = 0.0
        else:
            lunch = DEFAULT_LUNCH_HOURS
            issues.append(DEFAULT_LUNCH_NOTE)

        worked = max(0.0, total - lunch)

        if worked >= expected:
            raw_overtime = worked - expected
            premium = None
            label = None
            overtime = 0.0
            if raw_overtime > 0:
                decision = self._premiums.for_timestamp(
                    timestamp=entry.timestamp, day_of_week=day.weekday()
                ).decide(timestamp=entry.timestamp)
                premium = decision.multiplier
                label = decision.label
                overtime = raw_overtime * premium
            return DailyHours(
                work_date=day,
                expected_hours=expected,
                worked_hours=worked,
                regular_hours=expected,
                overtime_hours=overtime,
                raw_overtime_hours=raw_overtime,
                total_hours=total,
                lunch_hours=lunch,
                premium=premium,
                premium_label=label,
                is_complete=True,
                issues=tuple(issues),
            )

        return DailyHours(
            work_date=day,
            expected_hours=expected,
            worked_hours=worked,
            regular_hours=worked,
            owed_hours=expected - worked,
            total_hours=total,
            lunch_hours=lunch,
            is_complete=True,
            issues=tuple(issues),
        )


_DEFAULT_CALCULATOR = StandardDailyHoursCalculator()


def daily_hours(records: Sequence[TimeRecord], day: date, *, work_week: Optional[WorkWeek] = None) -> DailyHours:
    return _DEFAULT_CALCULATOR.calculate(records, day, work_week=work_week)
