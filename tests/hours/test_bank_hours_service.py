from __future__ import annotations

from datetime import date, datetime

import pytest

from ponto.core.enums import TimeRecordType
from ponto.core.exceptions import NotFoundError, ValidationError
from ponto.hours.service import BankHoursService
from ponto.timerecords.model import TimeRecordPatch, TimeRecordQuery

MONDAY = date(2025, 6, 2)
SUNDAY = date(2025, 6, 8)
TODAY = date(2025, 6, 30)


def punch_day(records, day: date, entry=(8, 0), lunch=((12, 0), (13, 0)), exit_=(17, 0)):
    def at(hm):
        return datetime(day.year, day.month, day.day, *hm)

    if entry:
        records.add(1, TimeRecordType.ENTRY, at(entry))
    if lunch:
        records.add(1, TimeRecordType.LUNCH_START, at(lunch[0]))
        records.add(1, TimeRecordType.LUNCH_END, at(lunch[1]))
    if exit_:
        records.add(1, TimeRecordType.EXIT, at(exit_))


@pytest.fixture
def service(records, employees, settings, tz) -> BankHoursService:
    return BankHoursService(records, employees, settings, tz=tz)


@pytest.fixture
def week(records):
    punch_day(records, date(2025, 6, 2))  # 8h of 9h -> owes 1h
    punch_day(records, date(2025, 6, 3), entry=(7, 0), exit_=(17, 30))  # +0.5h x 1.5
    records.add(1, TimeRecordType.ABSENCE_JUSTIFIED, datetime(2025, 6, 4, 8, 0))
    punch_day(records, date(2025, 6, 5), lunch=None, exit_=None)  # ENTRY only -> owes 9h
    # Friday without records -> owes 8h; Saturday is a rest day.
    punch_day(records, date(2025, 6, 8), entry=(7, 0), exit_=(17, 30))  # 9.5h x 2.0
    return records


def test_week_balance(service, week):
    result = service.bank_hours(1, MONDAY, SUNDAY, today=TODAY)

    assert result.start_date == MONDAY
    assert result.end_date == SUNDAY
    assert result.total_overtime_hours == 19.75
    assert result.total_owed_hours == 18.0
    assert result.balance_hours == 1.75
    assert result.days == ()


def test_detailed_result_lists_every_day(service, week):
    result = service.bank_hours(1, MONDAY, SUNDAY, detailed=True, today=TODAY)

    assert [d.work_date.day for d in result.days] == [2, 3, 4, 5, 6, 7, 8]
    assert result.days[2].is_justified
    assert "Saída não registrada" in result.days[3].issues


def test_range_is_fetched_once(service, week):
    week.find_calls = 0
    service.bank_hours(1, MONDAY, SUNDAY, today=TODAY)
    assert week.find_calls == 1


def test_recomputation_is_identical(service, week):
    first = service.bank_hours(1, MONDAY, SUNDAY, detailed=True, today=TODAY)
    second = service.bank_hours(1, MONDAY, SUNDAY, detailed=True, today=TODAY)
    assert first == second


def test_days_before_hire_are_never_owed(records, employees, employee, settings, tz, rehire):
    hire = date(2025, 6, 4)
    employees.add(rehire(employee, hire))
    punch_day(records, date(2025, 6, 4))
    service = BankHoursService(records, employees, settings, tz=tz)

    from_hire = service.bank_hours(1, hire, date(2025, 6, 8), today=date(2025, 6, 8))
    before_hire = service.bank_hours(1, date(2025, 5, 25), date(2025, 6, 8), today=date(2025, 6, 8))

    assert before_hire == from_hire
    assert from_hire.start_date == hire
    # Wed owes 1h, Thu 9h, Fri 8h.
    assert from_hire.total_owed_hours == 18.0


def test_future_days_are_not_projected(service):
    result = service.bank_hours(1, MONDAY, date(2025, 12, 31), today=date(2025, 6, 3))

    assert result.end_date == date(2025, 6, 3)
    assert result.total_owed_hours == 18.0


def test_range_entirely_in_the_future_is_empty(service):
    result = service.bank_hours(1, date(2030, 1, 1), date(2030, 1, 31), today=TODAY)

    assert result.start_date is None
    assert result.balance_hours == 0.0


def test_invalidated_records_are_excluded(service, records):
    punch_day(records, date(2025, 6, 3))
    query = TimeRecordQuery.for_employee(1).for_day(date(2025, 6, 3)).of_types(TimeRecordType.EXIT)
    exit_ = records.find_time_records(query)[0]
    records.update_time_record(exit_.record_id, TimeRecordPatch(is_valid=False))

    result = service.bank_hours(1, date(2025, 6, 3), date(2025, 6, 3), today=TODAY)
    assert result.total_owed_hours == 9.0


def test_invalid_range_and_unknown_employee(service):
    with pytest.raises(ValidationError):
        service.bank_hours(1, SUNDAY, MONDAY, today=TODAY)
    with pytest.raises(NotFoundError):
        service.bank_hours(2, MONDAY, SUNDAY, today=TODAY)


def test_daily_summary_shows_all_records(service, records):
    punch_day(records, date(2025, 6, 3), entry=(7, 0), exit_=(17, 30))

    summary = service.daily_summary(1, date(2025, 6, 3))

    assert len(summary.records) == 4
    assert summary.is_complete
    assert summary.hours.overtime_hours == 0.75


def test_period_summary(service, records):
    punch_day(records, date(2025, 6, 2), entry=(8, 15), exit_=(16, 30))
    punch_day(records, date(2025, 6, 3), exit_=(18, 0))
    records.add(1, TimeRecordType.ABSENCE_JUSTIFIED, datetime(2025, 6, 4, 8, 0))
    punch_day(records, date(2025, 6, 6), entry=(8, 5), lunch=None, exit_=None)

    summary = service.period_summary(1, MONDAY, date(2025, 6, 6), today=TODAY)

    assert summary.total_days == 5
    assert summary.present_days == 2
    assert summary.justified_days == 1
    assert summary.absent_days == 2
    assert summary.late_arrivals == 1
    assert summary.early_departures == 1
    assert summary.average_hours_per_day == 8.125
