from datetime import date, datetime
from zoneinfo import ZoneInfo

from ponto.common.datetime_utils import add_months, add_years, full_years_between, iter_days, to_business_local
from ponto.core.exceptions import DayComplete, DuplicatePunch, OutOfSequence, SequenceViolation


def test_add_months_clamps_day():
    assert add_months(date(2025, 1, 31), 1) == date(2025, 2, 28)
    assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)
    assert add_months(date(2025, 6, 30), -6) == date(2024, 12, 30)
    assert add_years(date(2024, 2, 29), 1) == date(2025, 2, 28)


def test_full_years_between():
    hire = date(2024, 3, 4)
    assert full_years_between(hire, date(2025, 3, 3)) == 0
    assert full_years_between(hire, date(2025, 3, 4)) == 1
    assert full_years_between(hire, date(2026, 3, 4)) == 2
    assert full_years_between(hire, date(2023, 1, 1)) == 0


def test_iter_days_is_inclusive():
    assert list(iter_days(date(2025, 6, 1), date(2025, 6, 3))) == [
        date(2025, 6, 1),
        date(2025, 6, 2),
        date(2025, 6, 3),
    ]
    assert list(iter_days(date(2025, 6, 3), date(2025, 6, 1))) == []


def test_to_business_local():
    tz = ZoneInfo("America/Sao_Paulo")
    naive = datetime(2025, 6, 3, 8, 0)

    assert to_business_local(naive, tz) is naive
    assert to_business_local(datetime(2025, 6, 4, 1, 30, tzinfo=ZoneInfo("UTC")), tz) == datetime(2025, 6, 3, 22, 30)


def test_punch_rejections_share_a_base():
    for exc in (DuplicatePunch, OutOfSequence, DayComplete):
        assert issubclass(exc, SequenceViolation)
