from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta
from typing import Iterator
from zoneinfo import ZoneInfo


def business_now(tz: ZoneInfo) -> datetime:
    """Current wall-clock time in the business timezone (naive).

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(tz).replace(tzinfo=None)


def business_today(tz: ZoneInfo) -> date:
    return business_now(tz).date()


def to_business_local(value: datetime, tz: ZoneInfo) -> datetime:
    """Normalize a timestamp to naive business-local wall clock.

    Aware values are converted; naive values are taken as already local.
    """
    if value.tzinfo is None:
        return value
    return value.astimezone(tz).replace(tzinfo=None)


def iter_days(start: date, end: date) -> Iterator[date]:
    """Every date from start to end, both inclusive."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def hours_between(start: datetime, end: datetime) -> float:
    return (end - start).total_seconds() / 3600


def add_months(value: date, months: int) -> date:
    """Calendar month arithmetic; the day is clamped to the target month length (Jan 31 + 1 = Feb 28/29)."""
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)


def add_years(value: date, years: int) -> date:
    return add_months(value, 12 * years)


def full_years_between(start: date, end: date) -> int:
    """Completed anniversaries of `start` up to and including `end`."""
    if end < start:
        return 0
    years = end.year - start.year
    if add_years(start, years) > end:
        years -= 1
    return years
