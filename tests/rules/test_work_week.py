from datetime import date, timedelta

from ponto.rules.work_week import STANDARD_WORK_WEEK, expected_hours, work_week_for


def test_uneven_44h_week():
    monday = date(2025, 6, 2)
    hours = [expected_hours(monday + timedelta(days=i)) for i in range(7)]

    assert hours == [9.0, 9.0, 9.0, 9.0, 8.0, 0.0, 0.0]
    assert sum(hours) == 44.0


def test_expected_hours_depends_only_on_weekday():
    tuesday = date(2025, 6, 3)
    for weeks in range(0, 60):
        day = tuesday + timedelta(weeks=weeks)
        assert expected_hours(day) == 9.0
        assert expected_hours(day) == expected_hours(day)


def test_is_workday():
    assert STANDARD_WORK_WEEK.is_workday(date(2025, 6, 6))
    assert not STANDARD_WORK_WEEK.is_workday(date(2025, 6, 7))


def test_unknown_schedule_falls_back_to_standard_week():
    assert work_week_for("SOMETHING_ELSE") is STANDARD_WORK_WEEK
    assert work_week_for(None) is STANDARD_WORK_WEEK
    assert work_week_for("standard_44h") is STANDARD_WORK_WEEK
