from datetime import datetime

from ponto.rules.factory import OvertimePremiumFactory
from ponto.rules.premium import overtime_premium
from ponto.rules.strategies.night_strategy import NightPremiumStrategy
from ponto.rules.strategies.weekday_strategy import WeekdayPremiumStrategy
from ponto.rules.strategies.weekend_strategy import SaturdayPremiumStrategy, SundayPremiumStrategy


def test_weekday_before_22h_is_50_percent():
    assert overtime_premium(datetime(2025, 6, 3, 7, 0)) == 1.5
    assert overtime_premium(datetime(2025, 6, 3, 21, 59)) == 1.5


def test_weekday_from_22h_is_100_percent():
    assert overtime_premium(datetime(2025, 6, 3, 22, 0)) == 2.0
    assert overtime_premium(datetime(2025, 6, 3, 23, 30)) == 2.0


def test_weekend_premiums():
    assert overtime_premium(datetime(2025, 6, 7, 9, 0)) == 1.5
    assert overtime_premium(datetime(2025, 6, 8, 9, 0)) == 2.0
    # Saturday rate wins over the night rate.
    assert overtime_premium(datetime(2025, 6, 7, 23, 0)) == 1.5


def test_explicit_day_of_week_overrides_timestamp():
    tuesday_morning = datetime(2025, 6, 3, 8, 0)
    assert overtime_premium(tuesday_morning, 6) == 2.0
    assert overtime_premium(tuesday_morning, 5) == 1.5


def test_factory_selects_strategy():
    factory = OvertimePremiumFactory()

    assert isinstance(factory.for_timestamp(timestamp=datetime(2025, 6, 3, 9, 0)), WeekdayPremiumStrategy)
    assert isinstance(factory.for_timestamp(timestamp=datetime(2025, 6, 3, 22, 5)), NightPremiumStrategy)
    assert isinstance(factory.for_timestamp(timestamp=datetime(2025, 6, 7, 9, 0)), SaturdayPremiumStrategy)
    assert isinstance(factory.for_timestamp(timestamp=datetime(2025, 6, 8, 9, 0)), SundayPremiumStrategy)
